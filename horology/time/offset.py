"""
# Fixed offsets from UTC.

# &UtcOffset holds signed hours, minutes, and seconds that share a sign. When
# constructed from fields with mixed signs, the sign of the hours decides the
# sign of the minutes and seconds; given zero hours, the sign of the minutes
# decides the sign of the seconds.
"""
import operator

from . import core
from . import earth
from . import measures

def _check(name, value, limit):
	if not -limit <= value <= limit:
		raise core.InvalidComponent(name, -limit, limit, value)

class UtcOffset(core.Value):
	"""
	# An offset from UTC in the form `(hours, minutes, seconds)`.

	# [ Properties ]
	# /UTC/
		# The zero offset.
	"""
	__slots__ = ()

	def __new__(Class, hours:int, minutes:int=0, seconds:int=0):
		hours = operator.index(hours)
		minutes = operator.index(minutes)
		seconds = operator.index(seconds)

		_check('hours', hours, earth.hours_in_day - 1)
		_check('minutes', minutes, earth.minutes_in_hour - 1)
		_check('seconds', seconds, earth.seconds_in_minute - 1)

		if hours > 0:
			minutes = abs(minutes)
			seconds = abs(seconds)
		elif hours < 0:
			minutes = -abs(minutes)
			seconds = -abs(seconds)
		elif minutes > 0:
			seconds = abs(seconds)
		elif minutes < 0:
			seconds = -abs(seconds)

		return tuple.__new__(Class, (hours, minutes, seconds))

	@classmethod
	def from_hms(Class, hours:int, minutes:int=0, seconds:int=0):
		return Class(hours, minutes, seconds)

	@classmethod
	def _from_total(Class, total, truncate=earth.truncate):
		limit = (earth.seconds_in_day - 1)
		if not -limit <= total <= limit:
			raise core.InvalidComponent('seconds', -limit, limit, total)

		hours, total = truncate(total, earth.seconds_in_hour)
		minutes, seconds = truncate(total, earth.seconds_in_minute)
		return Class._unchecked(hours, minutes, seconds)

	@classmethod
	def hours(Class, hours:int):
		return Class(hours)

	@classmethod
	def minutes(Class, minutes:int):
		return Class._from_total(operator.index(minutes) * earth.seconds_in_minute)

	@classmethod
	def seconds(Class, seconds:int):
		return Class._from_total(operator.index(seconds))

	@classmethod
	def east_hours(Class, hours:int):
		"""
		# An offset of &hours ahead of UTC.
		"""
		return Class(abs(hours))

	@classmethod
	def west_hours(Class, hours:int):
		"""
		# An offset of &hours behind UTC.
		"""
		return Class(-abs(hours))

	def as_hms(self):
		return tuple(self)

	@property
	def whole_hours(self) -> int:
		return self[0]

	@property
	def whole_minutes(self) -> int:
		return (self[0] * earth.minutes_in_hour) + self[1]

	@property
	def whole_seconds(self) -> int:
		return (self.whole_minutes * earth.seconds_in_minute) + self[2]

	@property
	def minutes_past_hour(self) -> int:
		return self[1]

	@property
	def seconds_past_minute(self) -> int:
		return self[2]

	def as_duration(self):
		"""
		# The offset as a &measures.Duration.
		"""
		return measures.Duration(self.whole_seconds)

	def is_utc(self) -> bool:
		return self[0] == 0 and self[1] == 0 and self[2] == 0

	def is_positive(self) -> bool:
		return self[0] > 0 or self[1] > 0 or self[2] > 0

	def is_negative(self) -> bool:
		return self[0] < 0 or self[1] < 0 or self[2] < 0

	def __neg__(self):
		return self._unchecked(-self[0], -self[1], -self[2])

	def __pos__(self):
		return self

	def format(self, fmt:str) -> str:
		from . import format
		return format.formatter(fmt)(self)

	@classmethod
	def parse(Class, string:str, fmt:str):
		from . import format
		return format.parser(fmt, Class)(string)

	def __str__(self):
		sign = '-' if self.is_negative() else '+'
		h, m, s = map(abs, self)
		if s:
			return "%s%02d:%02d:%02d" %(sign, h, m, s)
		return "%s%02d:%02d" %(sign, h, m)

	def __repr__(self):
		return "(time.offset@'%s')" %(str(self),)

UtcOffset.UTC = UtcOffset._unchecked(0, 0, 0)
