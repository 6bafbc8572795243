"""
# Signed measures of elapsed time.

# &Duration stores whole seconds and the nanoseconds beyond them as a pair.
# Both fields share the sign of the measure, or one of them is zero; every
# construction path normalizes the pair to maintain this.

# Arithmetic is exact. Checked methods return &None when the seconds would leave
# the signed 64-bit range and the operators raise &OverflowError in the same
# situation. Multiplication and division by &float operands pass through
# &Duration.seconds_float and are only checked once the final result is built.

#!syntax/python
	d = Duration.of(hour=1, minute=30)
	assert d.whole_minutes == 90
	assert (d * -2).is_negative()
	assert Duration(1, -1) == Duration.nanoseconds(999_999_999)
"""
import math
import operator

from . import core
from . import earth
from . import system

#: Largest number of seconds a &Duration can hold.
SECONDS_MAX = (2 ** 63) - 1

#: Smallest number of seconds a &Duration can hold.
SECONDS_MIN = -(2 ** 63)

truncate = earth.truncate
ns_per_second = earth.nanoseconds_in_second

def _from_total(total, Type=None, truncate=truncate):
	# Split a nanosecond count. Truncation leaves both fields with the same sign.
	seconds, nanoseconds = truncate(total, ns_per_second)
	if SECONDS_MIN <= seconds <= SECONDS_MAX:
		return (Type or Duration)._unchecked(seconds, nanoseconds)
	return None

def _overflow(operation):
	return OverflowError("overflow when %s durations" %(operation,))

class Duration(core.Value):
	"""
	# Signed span of time with nanosecond precision.

	# [ Properties ]
	# /zero/
		# The empty measure; neither positive nor negative.
	# /nanosecond/
		# One nanosecond. Likewise for &microsecond, &millisecond, &second,
		# &minute, &hour, &day, and &week.
	"""
	__slots__ = ()

	def __new__(Class, seconds:int=0, nanoseconds:int=0):
		seconds = operator.index(seconds)
		carry, nanoseconds = truncate(operator.index(nanoseconds), ns_per_second)
		seconds += carry

		if seconds > 0 and nanoseconds < 0:
			seconds -= 1
			nanoseconds += ns_per_second
		elif seconds < 0 and nanoseconds > 0:
			seconds += 1
			nanoseconds -= ns_per_second

		if not SECONDS_MIN <= seconds <= SECONDS_MAX:
			raise _overflow("constructing")
		return tuple.__new__(Class, (seconds, nanoseconds))

	@classmethod
	def max_value(Class):
		return Class._unchecked(SECONDS_MAX, ns_per_second - 1)

	@classmethod
	def min_value(Class):
		return Class._unchecked(SECONDS_MIN, -(ns_per_second - 1))

	@classmethod
	def of(Class, **units):
		"""
		# Create an instance from the sum of the keyword &units.

		#!syntax/python
			Duration.of(day=1, hour=2, nanosecond=-3)

		# [ Parameters ]
		# /units/
			# Integer quantities keyed by unit name: `week`, `day`, `hour`,
			# `minute`, `second`, `millisecond`, `microsecond`, and `nanosecond`.
		"""
		total = 0
		for unit, quantity in units.items():
			try:
				ratio = earth.unit_nanoseconds[unit]
			except KeyError:
				raise ValueError("unknown unit of time: " + repr(unit)) from None
			total += operator.index(quantity) * ratio

		r = _from_total(total, Class)
		if r is None:
			raise _overflow("constructing")
		return r

	@classmethod
	def weeks(Class, weeks:int):
		return Class(operator.index(weeks) * earth.seconds_in_week)

	@classmethod
	def days(Class, days:int):
		return Class(operator.index(days) * earth.seconds_in_day)

	@classmethod
	def hours(Class, hours:int):
		return Class(operator.index(hours) * earth.seconds_in_hour)

	@classmethod
	def minutes(Class, minutes:int):
		return Class(operator.index(minutes) * earth.seconds_in_minute)

	@classmethod
	def seconds(Class, seconds:int):
		return Class(seconds)

	@classmethod
	def milliseconds(Class, milliseconds:int):
		return Class(0, operator.index(milliseconds) * earth.nanoseconds_in_millisecond)

	@classmethod
	def microseconds(Class, microseconds:int):
		return Class(0, operator.index(microseconds) * earth.nanoseconds_in_microsecond)

	@classmethod
	def nanoseconds(Class, nanoseconds:int):
		return Class(0, nanoseconds)

	@classmethod
	def seconds_float(Class, seconds:float):
		"""
		# Create an instance from a fractional number of seconds.
		# Digits beyond nanosecond precision are truncated.
		"""
		whole = int(seconds)
		return Class(whole, int(math.fmod(seconds, 1.0) * ns_per_second))

	@classmethod
	def from_elapsed(Class, elapsed):
		"""
		# Convert an unsigned &system.Elapsed into a &Duration.

		# [ Exceptions ]
		# /&core.ConversionRange/
			# The elapsed seconds exceed &SECONDS_MAX.
		"""
		if elapsed[0] > SECONDS_MAX:
			raise core.ConversionRange("elapsed time exceeds the range of a duration")
		return Class._unchecked(elapsed[0], elapsed[1])

	def to_elapsed(self):
		"""
		# Convert the measure into an unsigned &system.Elapsed.

		# [ Exceptions ]
		# /&core.ConversionRange/
			# The measure is negative.
		"""
		if self.is_negative():
			raise core.ConversionRange("negative duration can not be represented as elapsed time")
		return system.Elapsed._unchecked(self[0], self[1])

	@property
	def whole_weeks(self) -> int:
		return truncate(self[0], earth.seconds_in_week)[0]

	@property
	def whole_days(self) -> int:
		return truncate(self[0], earth.seconds_in_day)[0]

	@property
	def whole_hours(self) -> int:
		return truncate(self[0], earth.seconds_in_hour)[0]

	@property
	def whole_minutes(self) -> int:
		return truncate(self[0], earth.seconds_in_minute)[0]

	@property
	def whole_seconds(self) -> int:
		return self[0]

	@property
	def whole_milliseconds(self) -> int:
		return truncate(self.whole_nanoseconds, earth.nanoseconds_in_millisecond)[0]

	@property
	def whole_microseconds(self) -> int:
		return truncate(self.whole_nanoseconds, earth.nanoseconds_in_microsecond)[0]

	@property
	def whole_nanoseconds(self) -> int:
		return (self[0] * ns_per_second) + self[1]

	@property
	def subsec_milliseconds(self) -> int:
		"""
		# The fractional second in milliseconds; carries the sign of the measure.
		"""
		return truncate(self[1], earth.nanoseconds_in_millisecond)[0]

	@property
	def subsec_microseconds(self) -> int:
		"""
		# The fractional second in microseconds; carries the sign of the measure.
		"""
		return truncate(self[1], earth.nanoseconds_in_microsecond)[0]

	@property
	def subsec_nanoseconds(self) -> int:
		"""
		# The fractional second in nanoseconds; carries the sign of the measure.
		"""
		return self[1]

	def as_seconds_float(self) -> float:
		return self[0] + (self[1] / ns_per_second)

	def is_zero(self) -> bool:
		return self[0] == 0 and self[1] == 0

	def is_negative(self) -> bool:
		return self[0] < 0 or self[1] < 0

	def is_positive(self) -> bool:
		return self[0] > 0 or self[1] > 0

	def checked_add(self, operand):
		"""
		# Add the &operand returning &None if the sum does not fit.
		"""
		return _from_total(self.whole_nanoseconds + operand.whole_nanoseconds, self.__class__)

	def checked_sub(self, operand):
		"""
		# Subtract the &operand returning &None if the difference does not fit.
		"""
		return _from_total(self.whole_nanoseconds - operand.whole_nanoseconds, self.__class__)

	def checked_mul(self, factor:int):
		"""
		# Multiply by an integer returning &None if the product does not fit.
		"""
		return _from_total(self.whole_nanoseconds * operator.index(factor), self.__class__)

	def checked_div(self, divisor:int):
		"""
		# Divide by an integer, truncating toward zero, returning &None if the
		# quotient does not fit or the &divisor is zero.
		"""
		divisor = operator.index(divisor)
		if divisor == 0:
			return None
		return _from_total(truncate(self.whole_nanoseconds, divisor)[0], self.__class__)

	def __add__(self, operand):
		if isinstance(operand, system.Elapsed):
			operand = self.from_elapsed(operand)
		elif not isinstance(operand, Duration):
			return NotImplemented

		r = self.checked_add(operand)
		if r is None:
			raise _overflow("adding")
		return r

	def __radd__(self, operand):
		if not isinstance(operand, system.Elapsed):
			return NotImplemented
		return self.from_elapsed(operand) + self

	def __sub__(self, operand):
		if isinstance(operand, system.Elapsed):
			operand = self.from_elapsed(operand)
		elif not isinstance(operand, Duration):
			return NotImplemented

		r = self.checked_sub(operand)
		if r is None:
			raise _overflow("subtracting")
		return r

	def __rsub__(self, operand):
		if not isinstance(operand, system.Elapsed):
			return NotImplemented
		return self.from_elapsed(operand) - self

	def __neg__(self):
		r = self.checked_mul(-1)
		if r is None:
			raise _overflow("negating")
		return r

	def __pos__(self):
		return self

	def __abs__(self):
		return self.__class__(abs(self[0]), abs(self[1]))

	def __mul__(self, factor):
		if isinstance(factor, float):
			return self.seconds_float(self.as_seconds_float() * factor)
		elif not isinstance(factor, int):
			return NotImplemented

		r = self.checked_mul(factor)
		if r is None:
			raise _overflow("multiplying")
		return r
	__rmul__ = __mul__

	def __truediv__(self, divisor):
		if isinstance(divisor, (Duration, system.Elapsed)):
			return self.as_seconds_float() / divisor.as_seconds_float()
		elif isinstance(divisor, float):
			return self.seconds_float(self.as_seconds_float() / divisor)
		elif not isinstance(divisor, int):
			return NotImplemented

		if divisor == 0:
			raise ZeroDivisionError("duration divided by zero")
		r = self.checked_div(divisor)
		if r is None:
			raise _overflow("dividing")
		return r

	def __rtruediv__(self, dividend):
		if not isinstance(dividend, system.Elapsed):
			return NotImplemented
		return dividend.as_seconds_float() / self.as_seconds_float()

	def __bool__(self):
		return not self.is_zero()

	def _comparable(self, operand):
		# Elapsed shares the (seconds, nanoseconds) layout and ordering.
		return isinstance(operand, (Duration, system.Elapsed))

	def __str__(self, units=('d', 'h', 'm', 's', 'ms', 'us', 'ns')):
		if self.is_zero():
			return '0s'

		sign = '-' if self.is_negative() else ''
		seconds = abs(self[0])
		nanoseconds = abs(self[1])
		days, seconds = divmod(seconds, earth.seconds_in_day)
		hours, seconds = divmod(seconds, earth.seconds_in_hour)
		minutes, seconds = divmod(seconds, earth.seconds_in_minute)
		ms, nanoseconds = divmod(nanoseconds, earth.nanoseconds_in_millisecond)
		us, nanoseconds = divmod(nanoseconds, earth.nanoseconds_in_microsecond)

		uv = zip(units, (days, hours, minutes, seconds, ms, us, nanoseconds))
		return sign + '.'.join([str(v)+u for u, v in uv if v != 0])

	def __repr__(self):
		return "(time.duration@'%s')" %(str(self),)

Duration.zero = Duration._unchecked(0, 0)
Duration.nanosecond = Duration._unchecked(0, 1)
Duration.microsecond = Duration._unchecked(0, earth.nanoseconds_in_microsecond)
Duration.millisecond = Duration._unchecked(0, earth.nanoseconds_in_millisecond)
Duration.second = Duration._unchecked(1, 0)
Duration.minute = Duration._unchecked(earth.seconds_in_minute, 0)
Duration.hour = Duration._unchecked(earth.seconds_in_hour, 0)
Duration.day = Duration._unchecked(earth.seconds_in_day, 0)
Duration.week = Duration._unchecked(earth.seconds_in_week, 0)
