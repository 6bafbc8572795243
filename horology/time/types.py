"""
# Time domain classes for calendar dates, times of day, and their compositions.

#!syntax/python
	d = types.Date.from_calendar_date(2019, 1, 1)
	dt = d.with_hms(12, 30)
	odt = dt.assume_offset(offset.UtcOffset(-5))

	assert odt.hour == 12
	assert odt.to_offset(offset.UtcOffset.UTC).hour == 17
	assert dt - d.midnight() == measures.Duration.of(hour=12, minute=30)

# [ Elements ]

# /Date/
	# Proleptic Gregorian date stored as (year, ordinal).
# /Time/
	# Nanosecond precision time of day.
# /PrimitiveDateTime/
	# A &Date and a &Time without an offset.
# /OffsetDateTime/
	# An instant stored in UTC with the &offset.UtcOffset used to present it.
"""
import operator

from . import core
from . import earth
from . import gregorian
from . import measures
from . import offset
from . import system
from . import week

ns_per_day = earth.nanoseconds_in_day
ns_per_second = earth.nanoseconds_in_second
UtcOffset = offset.UtcOffset

#: Julian day of the smallest &Date.
min_julian_day = gregorian.days_from_ordinal(gregorian.MIN_YEAR, 1) + gregorian.julian_day_offset

#: Julian day of the largest &Date.
max_julian_day = gregorian.days_from_ordinal(
	gregorian.MAX_YEAR, gregorian.days_in_year(gregorian.MAX_YEAR)
) + gregorian.julian_day_offset

#: Julian day of `1970-01-01`.
unix_epoch_julian_day = gregorian.days_from_date((1970, 1, 1)) + gregorian.julian_day_offset

def _check_year(year):
	if not gregorian.MIN_YEAR <= year <= gregorian.MAX_YEAR:
		raise core.InvalidComponent('year', gregorian.MIN_YEAR, gregorian.MAX_YEAR, year)

def _check_range(name, value, minimum, maximum, conditional=False):
	if not minimum <= value <= maximum:
		raise core.InvalidComponent(name, minimum, maximum, value, conditional)

def _span(operand):
	"""
	# The nanoseconds of a &measures.Duration or &system.Elapsed; &None for other types.
	"""
	if isinstance(operand, measures.Duration):
		return operand.whole_nanoseconds
	elif isinstance(operand, system.Elapsed):
		return operand.as_nanoseconds()
	return None

def _span_required(operand):
	ns = _span(operand)
	if ns is None:
		raise TypeError("expected a Duration or Elapsed, got " + type(operand).__name__)
	return ns

def _out_of_range():
	return OverflowError("resulting value is out of range")

def _forward(component, name):
	getter = operator.attrgetter(name)
	return property(lambda self: getter(component(self)))

class Date(core.Value):
	"""
	# A calendar day in the proleptic Gregorian calendar.

	# Only the year and the day of the year are stored; the month and day of month
	# are derived on access.
	"""
	__slots__ = ()

	def __new__(Class, year:int, ordinal:int):
		year = operator.index(year)
		ordinal = operator.index(ordinal)
		_check_year(year)
		_check_range('ordinal', ordinal, 1, gregorian.days_in_year(year), True)
		return tuple.__new__(Class, (year, ordinal))

	@classmethod
	def from_ordinal_date(Class, year:int, ordinal:int):
		return Class(year, ordinal)

	@classmethod
	def from_calendar_date(Class, year:int, month:int, day:int):
		_check_year(year)
		_check_range('month', month, 1, gregorian.months_in_year)
		_check_range('day', day, 1, gregorian.days_in_year_month(year, month), True)
		return Class._unchecked(year, gregorian.calendar_to_ordinal(year, month, day))

	@classmethod
	def from_iso_week_date(Class, year:int, week:int, weekday):
		"""
		# Create the date identified by an ISO-8601 year, week, and &week.Weekday.
		# The resulting calendar year may differ from &year by one.
		"""
		_check_year(year)
		_check_range('week', week, 1, gregorian.weeks_in_year(year), True)

		jan4 = gregorian.weekday_from_days(gregorian.days_before_year(year) + 3)
		jan4 = (jan4 - 1) % 7 + 1 # Monday relative, one-based.
		ordinal = (week * 7) + weekday.number_from_monday() - (jan4 + 3)

		if ordinal < 1:
			year -= 1
			ordinal += gregorian.days_in_year(year)
		elif ordinal > gregorian.days_in_year(year):
			ordinal -= gregorian.days_in_year(year)
			year += 1

		return Class(year, ordinal)

	@classmethod
	def from_julian_day(Class, julian_day:int):
		_check_range('julian_day', julian_day, min_julian_day, max_julian_day)
		return Class._unchecked(*gregorian.ordinal_from_days(julian_day - gregorian.julian_day_offset))

	@classmethod
	def _from_julian_day_checked(Class, julian_day):
		if not min_julian_day <= julian_day <= max_julian_day:
			return None
		return Class._unchecked(*gregorian.ordinal_from_days(julian_day - gregorian.julian_day_offset))

	year = property(operator.itemgetter(0))
	ordinal = property(operator.itemgetter(1))

	@property
	def month(self) -> int:
		return gregorian.ordinal_to_calendar(self[0], self[1])[0]

	@property
	def day(self) -> int:
		return gregorian.ordinal_to_calendar(self[0], self[1])[1]

	@property
	def weekday(self):
		"""
		# The &week.Weekday of the date.
		"""
		days = gregorian.days_from_ordinal(self[0], self[1])
		return week.Weekday.from_sunday_index(gregorian.weekday_from_days(days))

	@property
	def iso_week(self) -> int:
		"""
		# The ISO-8601 week number; 1 through 53.
		"""
		return self.iso_year_week()[1]

	@property
	def sunday_based_week(self) -> int:
		"""
		# The week number where week 1 starts on the first Sunday of the year.
		"""
		return (self[1] - self.weekday.number_days_from_sunday() + 6) // 7

	@property
	def monday_based_week(self) -> int:
		"""
		# The week number where week 1 starts on the first Monday of the year.
		"""
		return (self[1] - self.weekday.number_days_from_monday() + 6) // 7

	def iso_year_week(self):
		"""
		# The ISO-8601 (year, week) pair. The year differs from the calendar year
		# for days at the edges of the year that belong to a neighboring year's week.
		"""
		year, ordinal = self
		w = (ordinal + 10 - self.weekday.number_from_monday()) // 7

		if w == 0:
			return (year - 1, gregorian.weeks_in_year(year - 1))
		elif w == 53 and gregorian.weeks_in_year(year) == 52:
			return (year + 1, 1)
		return (year, w)

	def to_calendar_date(self):
		return (self[0],) + gregorian.ordinal_to_calendar(self[0], self[1])

	def to_ordinal_date(self):
		return tuple(self)

	def to_iso_week_date(self):
		return self.iso_year_week() + (self.weekday,)

	def to_julian_day(self) -> int:
		return gregorian.days_from_ordinal(self[0], self[1]) + gregorian.julian_day_offset

	def next_day(self):
		year, ordinal = self
		if ordinal < gregorian.days_in_year(year):
			return self._unchecked(year, ordinal + 1)
		elif year == gregorian.MAX_YEAR:
			raise _out_of_range()
		return self._unchecked(year + 1, 1)

	def previous_day(self):
		year, ordinal = self
		if ordinal > 1:
			return self._unchecked(year, ordinal - 1)
		elif year == gregorian.MIN_YEAR:
			raise _out_of_range()
		return self._unchecked(year - 1, gregorian.days_in_year(year - 1))

	def midnight(self):
		return PrimitiveDateTime._unchecked(self, Time.midnight())

	def with_time(self, time):
		return PrimitiveDateTime._unchecked(self, time)

	def with_hms(self, hour:int, minute:int, second:int=0):
		return PrimitiveDateTime._unchecked(self, Time.from_hms(hour, minute, second))

	def with_hms_milli(self, hour:int, minute:int, second:int, millisecond:int):
		return PrimitiveDateTime._unchecked(self, Time.from_hms_milli(hour, minute, second, millisecond))

	def with_hms_micro(self, hour:int, minute:int, second:int, microsecond:int):
		return PrimitiveDateTime._unchecked(self, Time.from_hms_micro(hour, minute, second, microsecond))

	def with_hms_nano(self, hour:int, minute:int, second:int, nanosecond:int):
		return PrimitiveDateTime._unchecked(self, Time.from_hms_nano(hour, minute, second, nanosecond))

	def checked_add(self, span):
		"""
		# Add the whole days of the &span; &None if the result leaves the year range.
		"""
		days = earth.truncate(_span_required(span), ns_per_day)[0]
		return self._from_julian_day_checked(self.to_julian_day() + days)

	def checked_sub(self, span):
		"""
		# Subtract the whole days of the &span; &None if the result leaves the year range.
		"""
		days = earth.truncate(_span_required(span), ns_per_day)[0]
		return self._from_julian_day_checked(self.to_julian_day() - days)

	def __add__(self, span):
		if _span(span) is None:
			return NotImplemented
		r = self.checked_add(span)
		if r is None:
			raise _out_of_range()
		return r

	def __sub__(self, operand):
		if isinstance(operand, Date):
			return measures.Duration.days(self.to_julian_day() - operand.to_julian_day())
		elif _span(operand) is None:
			return NotImplemented

		r = self.checked_sub(operand)
		if r is None:
			raise _out_of_range()
		return r

	def format(self, fmt:str) -> str:
		from . import format
		return format.formatter(fmt)(self)

	@classmethod
	def parse(Class, string:str, fmt:str):
		from . import format
		return format.parser(fmt, Class)(string)

	def __str__(self):
		y, m, d = self.to_calendar_date()
		return f"{y}-{m:02}-{d:02}"

	def __repr__(self):
		return f"(time.date@'{self!s}')"

class Time(core.Value):
	"""
	# A time of day with nanosecond precision.
	"""
	__slots__ = ()

	def __new__(Class, hour:int, minute:int, second:int=0, nanosecond:int=0):
		fields = tuple(map(operator.index, (hour, minute, second, nanosecond)))
		_check_range('hour', fields[0], 0, earth.hours_in_day - 1)
		_check_range('minute', fields[1], 0, earth.minutes_in_hour - 1)
		_check_range('second', fields[2], 0, earth.seconds_in_minute - 1)
		_check_range('nanosecond', fields[3], 0, ns_per_second - 1)
		return tuple.__new__(Class, fields)

	@classmethod
	def midnight(Class):
		return Class._unchecked(0, 0, 0, 0)

	@classmethod
	def from_hms(Class, hour:int, minute:int, second:int=0):
		return Class(hour, minute, second)

	@classmethod
	def from_hms_milli(Class, hour:int, minute:int, second:int, millisecond:int):
		_check_range('millisecond', millisecond, 0, 999)
		return Class(hour, minute, second, millisecond * earth.nanoseconds_in_millisecond)

	@classmethod
	def from_hms_micro(Class, hour:int, minute:int, second:int, microsecond:int):
		_check_range('microsecond', microsecond, 0, 999999)
		return Class(hour, minute, second, microsecond * earth.nanoseconds_in_microsecond)

	@classmethod
	def from_hms_nano(Class, hour:int, minute:int, second:int, nanosecond:int):
		return Class(hour, minute, second, nanosecond)

	@classmethod
	def from_nanoseconds_since_midnight(Class, nanoseconds:int):
		_check_range('nanoseconds', nanoseconds, 0, ns_per_day - 1)
		return Class._from_nanoseconds(nanoseconds)

	@classmethod
	def _from_nanoseconds(Class, nanoseconds):
		seconds, nanosecond = divmod(nanoseconds, ns_per_second)
		minutes, second = divmod(seconds, earth.seconds_in_minute)
		hour, minute = divmod(minutes, earth.minutes_in_hour)
		return Class._unchecked(hour, minute, second, nanosecond)

	hour = property(operator.itemgetter(0))
	minute = property(operator.itemgetter(1))
	second = property(operator.itemgetter(2))
	nanosecond = property(operator.itemgetter(3))

	@property
	def millisecond(self) -> int:
		return self[3] // earth.nanoseconds_in_millisecond

	@property
	def microsecond(self) -> int:
		return self[3] // earth.nanoseconds_in_microsecond

	def as_hms(self):
		return self[:3]

	def as_hms_milli(self):
		return self[:3] + (self.millisecond,)

	def as_hms_micro(self):
		return self[:3] + (self.microsecond,)

	def as_hms_nano(self):
		return tuple(self)

	def nanoseconds_since_midnight(self) -> int:
		h, m, s, ns = self
		return ((((h * earth.minutes_in_hour) + m) * earth.seconds_in_minute + s) * ns_per_second) + ns

	def __add__(self, span):
		ns = _span(span)
		if ns is None:
			return NotImplemented
		# Wraps around midnight.
		return self._from_nanoseconds((self.nanoseconds_since_midnight() + ns) % ns_per_day)

	def __sub__(self, operand):
		if isinstance(operand, Time):
			difference = self.nanoseconds_since_midnight() - operand.nanoseconds_since_midnight()
			return measures.Duration.nanoseconds(difference)

		ns = _span(operand)
		if ns is None:
			return NotImplemented
		return self._from_nanoseconds((self.nanoseconds_since_midnight() - ns) % ns_per_day)

	def format(self, fmt:str) -> str:
		from . import format
		return format.formatter(fmt)(self)

	@classmethod
	def parse(Class, string:str, fmt:str):
		from . import format
		return format.parser(fmt, Class)(string)

	def __str__(self):
		h, m, s, ns = self
		sub = str(ns).rjust(9, '0').rstrip('0')
		return f"{h:02}:{m:02}:{s:02}.{sub or '0'}"

	def __repr__(self):
		return f"(time.time@'{self!s}')"

class PrimitiveDateTime(core.Value):
	"""
	# A &Date and &Time pair that is not associated with an offset.
	"""
	__slots__ = ()

	def __new__(Class, date, time):
		if not isinstance(date, Date) or not isinstance(time, Time):
			raise TypeError("primitive datetimes are constructed from a Date and a Time")
		return tuple.__new__(Class, (date, time))

	date = property(operator.itemgetter(0))
	time = property(operator.itemgetter(1))

	year = _forward(operator.itemgetter(0), 'year')
	month = _forward(operator.itemgetter(0), 'month')
	day = _forward(operator.itemgetter(0), 'day')
	ordinal = _forward(operator.itemgetter(0), 'ordinal')
	weekday = _forward(operator.itemgetter(0), 'weekday')
	iso_week = _forward(operator.itemgetter(0), 'iso_week')

	hour = _forward(operator.itemgetter(1), 'hour')
	minute = _forward(operator.itemgetter(1), 'minute')
	second = _forward(operator.itemgetter(1), 'second')
	millisecond = _forward(operator.itemgetter(1), 'millisecond')
	microsecond = _forward(operator.itemgetter(1), 'microsecond')
	nanosecond = _forward(operator.itemgetter(1), 'nanosecond')

	def _shift(self, nanoseconds):
		# Carries between the time of day and the date.
		days, ns = divmod(self[1].nanoseconds_since_midnight() + nanoseconds, ns_per_day)
		date = Date._from_julian_day_checked(self[0].to_julian_day() + days)
		if date is None:
			return None
		return self._unchecked(date, Time._from_nanoseconds(ns))

	def _nanoseconds(self):
		return (self[0].to_julian_day() * ns_per_day) + self[1].nanoseconds_since_midnight()

	def checked_add(self, span):
		"""
		# Add the &span; &None if the result leaves the year range.
		"""
		return self._shift(_span_required(span))

	def checked_sub(self, span):
		"""
		# Subtract the &span; &None if the result leaves the year range.
		"""
		return self._shift(-_span_required(span))

	def __add__(self, span):
		ns = _span(span)
		if ns is None:
			return NotImplemented
		r = self._shift(ns)
		if r is None:
			raise _out_of_range()
		return r

	def __sub__(self, operand):
		if isinstance(operand, PrimitiveDateTime):
			return measures.Duration.nanoseconds(self._nanoseconds() - operand._nanoseconds())

		ns = _span(operand)
		if ns is None:
			return NotImplemented
		r = self._shift(-ns)
		if r is None:
			raise _out_of_range()
		return r

	def utc_to_offset(self, offset):
		"""
		# Interpret the datetime as UTC and return the local datetime of &offset.
		"""
		return self + offset.as_duration()

	def offset_to_utc(self, offset):
		"""
		# Interpret the datetime as local to &offset and return the UTC datetime.
		"""
		return self - offset.as_duration()

	def assume_offset(self, offset):
		"""
		# Create the &OffsetDateTime identified by the datetime expressed in &offset.
		"""
		return OffsetDateTime._unchecked(self.offset_to_utc(offset), offset)

	def assume_utc(self):
		return OffsetDateTime._unchecked(self, utc)

	def format(self, fmt:str) -> str:
		from . import format
		return format.formatter(fmt)(self)

	@classmethod
	def parse(Class, string:str, fmt:str):
		from . import format
		return format.parser(fmt, Class)(string)

	def __str__(self):
		return f"{self[0]!s}T{self[1]!s}"

	def __repr__(self):
		return f"(time.datetime@'{self!s}')"

class OffsetDateTime(core.Value):
	"""
	# An instant and the &offset.UtcOffset it is presented in.

	# The instant is stored as a UTC &PrimitiveDateTime. Comparisons and hashing
	# only consider the instant; two values presented in different offsets are
	# equal when they identify the same point in time.
	"""
	__slots__ = ()

	def __new__(Class, utc_datetime, offset):
		if not isinstance(utc_datetime, PrimitiveDateTime):
			raise TypeError("utc_datetime must be a PrimitiveDateTime")
		if not isinstance(offset, UtcOffset):
			raise TypeError("offset must be a UtcOffset")
		return tuple.__new__(Class, (utc_datetime, offset))

	utc_datetime = property(operator.itemgetter(0))
	offset = property(operator.itemgetter(1))

	def local(self):
		"""
		# The &PrimitiveDateTime as presented in &offset.
		"""
		return self[0].utc_to_offset(self[1])

	date = _forward(local, 'date')
	time = _forward(local, 'time')
	year = _forward(local, 'year')
	month = _forward(local, 'month')
	day = _forward(local, 'day')
	ordinal = _forward(local, 'ordinal')
	weekday = _forward(local, 'weekday')
	iso_week = _forward(local, 'iso_week')
	hour = _forward(local, 'hour')
	minute = _forward(local, 'minute')
	second = _forward(local, 'second')
	millisecond = _forward(local, 'millisecond')
	microsecond = _forward(local, 'microsecond')
	nanosecond = _forward(local, 'nanosecond')

	def to_offset(self, offset):
		"""
		# Present the same instant in another offset.
		"""
		return self._unchecked(self[0], offset)

	def unix_timestamp(self) -> int:
		"""
		# Whole seconds between the Unix epoch and the instant, truncated toward zero.
		"""
		return earth.truncate(self.unix_timestamp_nanos(), ns_per_second)[0]

	def unix_timestamp_nanos(self) -> int:
		return self[0]._nanoseconds() - (unix_epoch_julian_day * ns_per_day)

	@classmethod
	def from_unix_timestamp(Class, timestamp:int):
		"""
		# Create the UTC instant &timestamp seconds from the Unix epoch.

		# [ Exceptions ]
		# /&core.InvalidComponent/
			# The instant falls outside of the year range.
		"""
		timestamp = operator.index(timestamp)
		_check_range('unix_timestamp', timestamp, min_unix_timestamp, max_unix_timestamp)
		return Class._from_nanoseconds(timestamp * ns_per_second)

	@classmethod
	def from_unix_timestamp_nanos(Class, timestamp:int):
		timestamp = operator.index(timestamp)
		_check_range('unix_timestamp_nanos', timestamp,
			min_unix_timestamp * ns_per_second,
			(max_unix_timestamp * ns_per_second) + ns_per_second - 1)
		return Class._from_nanoseconds(timestamp)

	@classmethod
	def _from_nanoseconds(Class, nanoseconds):
		days, ns = divmod(nanoseconds, ns_per_day)
		date = Date.from_julian_day(unix_epoch_julian_day + days)
		return Class._unchecked(PrimitiveDateTime._unchecked(date, Time._from_nanoseconds(ns)), utc)

	def checked_add(self, span):
		r = self[0].checked_add(span)
		if r is None:
			return None
		return self._unchecked(r, self[1])

	def checked_sub(self, span):
		r = self[0].checked_sub(span)
		if r is None:
			return None
		return self._unchecked(r, self[1])

	def __add__(self, span):
		if _span(span) is None:
			return NotImplemented
		return self._unchecked(self[0] + span, self[1])

	def __sub__(self, operand):
		if isinstance(operand, OffsetDateTime):
			return self[0] - operand[0]
		elif _span(operand) is None:
			return NotImplemented
		return self._unchecked(self[0] - operand, self[1])

	def __eq__(self, operand):
		if not isinstance(operand, OffsetDateTime):
			return NotImplemented
		return self[0] == operand[0]

	def __ne__(self, operand):
		if not isinstance(operand, OffsetDateTime):
			return NotImplemented
		return self[0] != operand[0]

	def __lt__(self, operand):
		if not isinstance(operand, OffsetDateTime):
			return NotImplemented
		return self[0] < operand[0]

	def __le__(self, operand):
		if not isinstance(operand, OffsetDateTime):
			return NotImplemented
		return self[0] <= operand[0]

	def __gt__(self, operand):
		if not isinstance(operand, OffsetDateTime):
			return NotImplemented
		return self[0] > operand[0]

	def __ge__(self, operand):
		if not isinstance(operand, OffsetDateTime):
			return NotImplemented
		return self[0] >= operand[0]

	def __hash__(self):
		return hash(self[0])

	def format(self, fmt:str) -> str:
		from . import format
		return format.formatter(fmt)(self)

	@classmethod
	def parse(Class, string:str, fmt:str):
		from . import format
		return format.parser(fmt, Class)(string)

	def __str__(self):
		return f"{self.local()!s}{self[1]!s}"

	def __repr__(self):
		return f"(time.offset_datetime@'{self!s}')"

utc = offset.UtcOffset.UTC

#: Smallest Unix timestamp representable by &OffsetDateTime.
min_unix_timestamp = (min_julian_day - unix_epoch_julian_day) * earth.seconds_in_day

#: Largest Unix timestamp representable by &OffsetDateTime.
max_unix_timestamp = ((max_julian_day - unix_epoch_julian_day + 1) * earth.seconds_in_day) - 1
