"""
# Unsigned elapsed time as reported by the system's monotonic clock.

# &Elapsed is the platform duration type that &.measures.Duration interoperates
# with. It can not represent negative quantities, so conversions from signed
# measures are fallible.
"""
import time
from . import core
from . import earth

#: Largest number of seconds an &Elapsed can hold.
SECONDS_MAX = (2 ** 64) - 1

class Elapsed(core.Value):
	"""
	# Non-negative span of time in whole seconds and nanoseconds.
	"""
	__slots__ = ()

	def __new__(Class, seconds:int=0, nanoseconds:int=0, ns=earth.nanoseconds_in_second):
		carry, nanoseconds = divmod(nanoseconds, ns)
		seconds += carry
		if seconds < 0:
			raise OverflowError("elapsed time can not be negative")
		if seconds > SECONDS_MAX:
			raise OverflowError("elapsed time exceeds %d seconds" %(SECONDS_MAX,))
		return tuple.__new__(Class, (seconds, nanoseconds))

	@classmethod
	def from_nanoseconds(Class, nanoseconds:int):
		return Class(0, nanoseconds)

	@classmethod
	def from_microseconds(Class, microseconds:int):
		return Class(0, microseconds * earth.nanoseconds_in_microsecond)

	@classmethod
	def from_milliseconds(Class, milliseconds:int):
		return Class(0, milliseconds * earth.nanoseconds_in_millisecond)

	@classmethod
	def from_seconds(Class, seconds:int):
		return Class(seconds)

	@property
	def seconds(self) -> int:
		"""
		# The whole seconds of the span.
		"""
		return self[0]

	@property
	def subsec_nanoseconds(self) -> int:
		"""
		# The fractional part of the span in nanoseconds.
		"""
		return self[1]

	def as_nanoseconds(self) -> int:
		return (self[0] * earth.nanoseconds_in_second) + self[1]

	def as_seconds_float(self) -> float:
		return self[0] + (self[1] / earth.nanoseconds_in_second)

	def checked_sub(self, operand):
		"""
		# Subtract the &operand returning &None when the result would be negative.
		"""
		difference = self.as_nanoseconds() - operand.as_nanoseconds()
		if difference < 0:
			return None
		return self.from_nanoseconds(difference)

	def __add__(self, operand):
		if not isinstance(operand, Elapsed):
			return NotImplemented
		return self.from_nanoseconds(self.as_nanoseconds() + operand.as_nanoseconds())

	def __sub__(self, operand):
		if not isinstance(operand, Elapsed):
			return NotImplemented
		r = self.checked_sub(operand)
		if r is None:
			raise OverflowError("overflow when subtracting elapsed times")
		return r

	def __repr__(self):
		return "(time.elapsed@'%d.%09ds')" %(self[0], self[1])

def elapsed(*, clock=time.monotonic_ns, Type=Elapsed) -> Elapsed:
	"""
	# Snapshot of the system's monotonic clock.
	"""
	return Type.from_nanoseconds(clock())
