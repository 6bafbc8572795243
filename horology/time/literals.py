"""
# Construct time values from literal strings.

#!syntax/python
	literals.date("2019-W01-2") == types.Date.from_calendar_date(2019, 1, 1)
	literals.time("1:30 pm") == types.Time(13, 30)
	literals.offset("-5") == offset.UtcOffset(-5)
	literals.datetime("2019-001 0:00 UTC").unix_timestamp() == 1546300800

# [ Grammar ]

# /date/
	# `YYYY-MM-DD`, `YYYY-DDD`, or `YYYY-Www-D` where the year may be signed.
# /time/
	# `H:MM`, `H:MM:SS`, or `H:MM:SS.fraction` with up to nine fractional digits,
	# optionally followed by ` am` or ` pm`.
# /offset/
	# `UTC` or `±H[H][:MM[:SS]]`.
# /datetime/
	# A date and a time separated by a space, optionally followed by a space and
	# an offset.

# Malformed literals raise &core.LiteralError identifying the offending character.
# Well formed literals with out of range components raise &core.InvalidComponent
# from the validating constructors.
"""
import logging

from . import core
from . import offset as offsets
from . import types
from . import week

log = logging.getLogger(__name__)

class Cursor(object):
	"""
	# Position within a literal being read.
	"""
	__slots__ = ('source', 'index')

	def __init__(self, source:str):
		self.source = source
		self.index = 0

	def peek(self, count=1):
		return self.source[self.index:self.index+count]

	def fail(self, reason):
		log.debug("rejected literal %r at %d: %s", self.source, self.index, reason)
		raise core.LiteralError(self.source, self.index, reason)

	def accept(self, text, fold=False):
		"""
		# Consume &text if it is next; returns whether it was consumed.
		"""
		s = self.peek(len(text))
		if fold:
			s = s.lower()
		if s == text:
			self.index += len(text)
			return True
		return False

	def expect(self, text):
		if not self.accept(text):
			self.fail("expected %r" %(text,))

	def sign(self):
		if self.accept('-'):
			return -1
		self.accept('+')
		return 1

	def digits(self, minimum, maximum=None):
		"""
		# Consume at least &minimum and at most &maximum ASCII digits.
		"""
		maximum = maximum or minimum
		start = self.index
		source = self.source
		end = min(len(source), start + maximum)

		i = start
		while i < end and source[i] in '0123456789':
			i += 1
		if i - start < minimum:
			self.index = i
			self.fail("expected %d digits" %(minimum,))

		self.index = i
		return source[start:i]

	def end(self):
		if self.index != len(self.source):
			self.fail("unexpected trailing character %r" %(self.peek(),))

def _date(cursor):
	year = cursor.sign() * int(cursor.digits(1, 6))
	cursor.expect('-')

	if cursor.accept('W'):
		number = int(cursor.digits(2))
		cursor.expect('-')
		day = int(cursor.digits(1))
		if not 1 <= day <= 7:
			raise core.InvalidComponent('weekday', 1, 7, day)
		return types.Date.from_iso_week_date(year, number, week.Weekday(day - 1))

	field = cursor.digits(2, 3)
	if len(field) == 3:
		return types.Date.from_ordinal_date(year, int(field))

	cursor.expect('-')
	day = int(cursor.digits(2))
	return types.Date.from_calendar_date(year, int(field), day)

def _time(cursor):
	hour = int(cursor.digits(1, 2))
	cursor.expect(':')
	minute = int(cursor.digits(2))
	second = 0
	nanosecond = 0

	if cursor.accept(':'):
		second = int(cursor.digits(2))
		if cursor.accept('.'):
			nanosecond = int(cursor.digits(1, 9).ljust(9, '0'))

	if cursor.accept(' am', fold=True):
		hour = _hour12(hour) % 12
	elif cursor.accept(' pm', fold=True):
		hour = (_hour12(hour) % 12) + 12

	return types.Time(hour, minute, second, nanosecond)

def _hour12(hour):
	if not 1 <= hour <= 12:
		raise core.InvalidComponent('hour', 1, 12, hour)
	return hour

def _offset(cursor):
	if cursor.accept('utc', fold=True):
		return offsets.UtcOffset.UTC

	sign = cursor.peek()
	if sign not in ('+', '-'):
		cursor.fail("expected offset sign")
	cursor.index += 1

	fields = [int(cursor.digits(1, 2))]
	if cursor.accept(':'):
		fields.append(int(cursor.digits(2)))
		if cursor.accept(':'):
			fields.append(int(cursor.digits(2)))

	if sign == '-':
		fields = [-x for x in fields]
	return offsets.UtcOffset(*fields)

def _read(source, reader):
	cursor = Cursor(source)
	r = reader(cursor)
	cursor.end()
	return r

def date(source:str):
	"""
	# Construct a &types.Date from an ordinal, calendar, or ISO week literal.
	"""
	return _read(source, _date)

def time(source:str):
	"""
	# Construct a &types.Time from a 24 hour or 12 hour literal.
	"""
	return _read(source, _time)

def offset(source:str):
	"""
	# Construct an &offsets.UtcOffset.
	"""
	return _read(source, _offset)

def _datetime(cursor):
	d = _date(cursor)
	cursor.expect(' ')
	pdt = d.with_time(_time(cursor))

	if cursor.accept(' '):
		return pdt.assume_offset(_offset(cursor))
	return pdt

def datetime(source:str):
	"""
	# Construct a &types.PrimitiveDateTime, or a &types.OffsetDateTime when the
	# literal ends with an offset.
	"""
	return _read(source, _datetime)
