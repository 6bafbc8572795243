"""
# Format and parse time values using directive strings.

# Primarily this module exposes two functions: &formatter and &parser. Both accept
# either a directive string such as `"%Y-%m-%d"` or the identifier of a model defined
# by a standard, `'rfc3339'` or `'rfc1123'`, along with their &aliases.

# Directive strings are checked by &validate_format_string before use. The lead
# character `%` must be followed by a directive code or by a second `%`:

# /`%a`, `%A`/
	# Abbreviated and full weekday name.
# /`%b`, `%B`/
	# Abbreviated and full month name.
# /`%c`/
	# Date and time; `%a %b %d %H:%M:%S %Y`.
# /`%C`/
	# Century; the year divided by 100 rounded toward negative infinity.
	# `%y` is the remainder; year -1 is century `-01` and year `99`.
# /`%d`/
	# Day of month; `01` through `31`.
# /`%D`/
	# `%m/%d/%y`.
# /`%F`/
	# `%Y-%m-%d`.
# /`%g`, `%G`/
	# Last two digits of the ISO-8601 year and the full ISO-8601 year.
# /`%H`, `%I`/
	# Hour of a 24 hour and a 12 hour clock.
# /`%j`/
	# Day of the year; `001` through `366`.
# /`%m`, `%M`/
	# Month and minute.
# /`%N`/
	# Subsecond nanoseconds; nine digits.
# /`%p`, `%P`/
	# `AM`/`PM` and `am`/`pm`.
# /`%r`, `%R`, `%T`/
	# `%I:%M:%S %p`, `%H:%M`, and `%H:%M:%S`.
# /`%S`/
	# Second.
# /`%u`, `%w`/
	# Weekday number; one-based from Monday and zero-based from Sunday.
# /`%U`, `%W`, `%V`/
	# Sunday based, Monday based, and ISO-8601 week numbers.
# /`%y`, `%Y`/
	# Last two digits of the year and the full year.
# /`%z`/
	# UTC offset as `+HHMM`.

# Formatting a value that lacks a component required by a directive raises
# &core.InsufficientInformation. Parsing happens in three stages, and each stage
# raises its own subclass of &core.FormatError with the original exception
# as the `__cause__`: &core.ParseError when the string does not match,
# &core.StructureError when the matched fields are not enough to build the
# requested type, and &core.IntegrityError when the fields do not form a valid
# value.
"""
import functools

from . import core
from . import earth
from . import gregorian
from . import offset
from . import types
from . import week

#: Directive codes that may follow the lead character.
directives = frozenset('aAbBcCdDFgGHIjmMNpPrRSTuUVwWyYz')

#: Directives that expand into other directives.
composites = {
	'c': '%a %b %d %H:%M:%S %Y',
	'D': '%m/%d/%y',
	'F': '%Y-%m-%d',
	'r': '%I:%M:%S %p',
	'R': '%H:%M',
	'T': '%H:%M:%S',
}

models = {
	'rfc1123': "%a, %d %b %Y %H:%M:%S GMT",
	'rfc3339': "%Y-%m-%dT%H:%M:%S",
}

aliases = {
	'http': 'rfc1123',
	'rfc': 'rfc1123',
	'iso': 'rfc3339',
	'iso8601': 'rfc3339',
}

def validate_format_string(fmt:str):
	"""
	# Check that every lead character in &fmt introduces a known directive.

	# [ Exceptions ]
	# /&core.InvalidFormatString/
		# The first unknown directive or a trailing lead character.
	"""
	i = 0
	n = len(fmt)

	while True:
		i = fmt.find('%', i)
		if i == -1:
			return

		if i + 1 == n:
			raise core.InvalidFormatString(fmt, i, "incomplete directive")

		code = fmt[i+1]
		if code != '%' and code not in directives:
			raise core.InvalidFormatString(fmt, i, "unknown directive %" + code)
		i += 2

@functools.lru_cache(64)
def tokenize(fmt:str):
	"""
	# Validate &fmt and split it into `('literal', text)` and `('directive', code)`
	# pairs. Composite directives are expanded and escapes are folded into the
	# surrounding literal text.
	"""
	validate_format_string(fmt)
	tokens = []
	literal = []

	def flush():
		if literal:
			tokens.append(('literal', ''.join(literal)))
			del literal[:]

	i = 0
	n = len(fmt)
	while i < n:
		c = fmt[i]
		if c != '%':
			literal.append(c)
			i += 1
			continue

		code = fmt[i+1]
		i += 2
		if code == '%':
			literal.append('%')
		elif code in composites:
			for kind, x in tokenize(composites[code]):
				if kind == 'literal':
					literal.append(x)
				else:
					flush()
					tokens.append((kind, x))
		else:
			flush()
			tokens.append(('directive', code))

	flush()
	return tuple(tokens)

def _signed(value, width):
	if value < 0:
		return '-' + str(-value).rjust(width, '0')
	return str(value).rjust(width, '0')

def _format_offset(o):
	sign = '-' if o.is_negative() else '+'
	return "%s%02d%02d" %(sign, abs(o[0]), abs(o[1]))

def _hour12(t):
	return ((t[0] + 11) % 12) + 1

# Directive code to (view index, renderer); the view is (date, time, offset).
renderers = {
	'a': (0, lambda d: d.weekday.abbreviation.capitalize()),
	'A': (0, lambda d: d.weekday.name.capitalize()),
	'b': (0, lambda d: gregorian.month_abbreviations[d.month-1].capitalize()),
	'B': (0, lambda d: gregorian.month_names[d.month-1].capitalize()),
	'C': (0, lambda d: _signed(d.year // gregorian.years_in_century, 2)),
	'd': (0, lambda d: "%02d" %(d.day,)),
	'g': (0, lambda d: "%02d" %(d.iso_year_week()[0] % 100,)),
	'G': (0, lambda d: _signed(d.iso_year_week()[0], 4)),
	'j': (0, lambda d: "%03d" %(d.ordinal,)),
	'm': (0, lambda d: "%02d" %(d.month,)),
	'u': (0, lambda d: str(d.weekday.number_from_monday())),
	'U': (0, lambda d: "%02d" %(d.sunday_based_week,)),
	'V': (0, lambda d: "%02d" %(d.iso_week,)),
	'w': (0, lambda d: str(d.weekday.number_days_from_sunday())),
	'W': (0, lambda d: "%02d" %(d.monday_based_week,)),
	'y': (0, lambda d: "%02d" %(d.year % gregorian.years_in_century,)),
	'Y': (0, lambda d: _signed(d.year, 4)),

	'H': (1, lambda t: "%02d" %(t[0],)),
	'I': (1, lambda t: "%02d" %(_hour12(t),)),
	'M': (1, lambda t: "%02d" %(t[1],)),
	'N': (1, lambda t: "%09d" %(t[3],)),
	'p': (1, lambda t: 'AM' if t[0] < 12 else 'PM'),
	'P': (1, lambda t: 'am' if t[0] < 12 else 'pm'),
	'S': (1, lambda t: "%02d" %(t[2],)),

	'z': (2, _format_offset),
}

def view(value):
	"""
	# Split a time value into its (date, time, offset) components; absent
	# components are &None. &types.OffsetDateTime instances are presented in
	# their local form.
	"""
	if isinstance(value, types.OffsetDateTime):
		local = value.local()
		return (local[0], local[1], value[1])
	elif isinstance(value, types.PrimitiveDateTime):
		return (value[0], value[1], None)
	elif isinstance(value, types.Date):
		return (value, None, None)
	elif isinstance(value, types.Time):
		return (None, value, None)
	elif isinstance(value, offset.UtcOffset):
		return (None, None, value)

	raise TypeError("cannot format instances of " + type(value).__name__)

def render(value, tokens, fmt):
	"""
	# Produce the string of the &tokens for &value.
	"""
	parts = view(value)
	out = []

	for kind, x in tokens:
		if kind == 'literal':
			out.append(x)
			continue

		index, r = renderers[x]
		component = parts[index]
		if component is None:
			raise core.InsufficientInformation(value, fmt)
		out.append(r(component))

	return ''.join(out)

def format_rfc1123(value, _fmt=models['rfc1123']):
	# Always presented in GMT.
	if isinstance(value, types.OffsetDateTime):
		value = value.to_offset(offset.UtcOffset.UTC)
	return render(value, tokenize(_fmt), 'rfc1123')

def format_rfc3339(value, _fmt=models['rfc3339']):
	date, time, o = view(value)
	if date is None or time is None or o is None:
		raise core.InsufficientInformation(value, 'rfc3339')
	if o[2] != 0 or not 0 <= date.year <= 9999:
		# No representation for offset seconds or years outside of four digits.
		raise core.FormatError(value, 'rfc3339')

	s = render(value, tokenize(_fmt), 'rfc3339')
	if time[3]:
		s += '.' + ("%09d" %(time[3],)).rstrip('0')

	sign = '-' if o.is_negative() else '+'
	return s + "%s%02d:%02d" %(sign, abs(o[0]), abs(o[1]))

formatters = {
	'rfc1123': format_rfc1123,
	'rfc3339': format_rfc3339,
}

def formatter(fmt, _deref=aliases.get):
	"""
	# Given a directive string or a model identifier, return the function that
	# formats time values into strings.

	# [ Exceptions ]
	# /&core.InvalidFormatString/
		# &fmt was not a model identifier and not a valid directive string.
	"""
	fmt = _deref(fmt, fmt)
	if fmt in formatters:
		return formatters[fmt]

	tokens = tokenize(fmt)
	def format_directives(value, tokens=tokens, fmt=fmt):
		return render(value, tokens, fmt)
	return format_directives

def _digits(width, signed=False):
	def read(string, index):
		sign = 1
		if signed and string[index:index+1] in ('+', '-'):
			if string[index] == '-':
				sign = -1
			index += 1

		field = string[index:index+width]
		if len(field) != width or not (field.isascii() and field.isdigit()):
			raise ValueError("expected %d digits at index %d" %(width, index))
		return sign * int(field), index + width
	return read

def _names(pairs):
	# Longest first so that full names are not cut short by abbreviations.
	pairs = sorted(pairs, key=lambda x: len(x[0]), reverse=True)
	def read(string, index):
		for name, value in pairs:
			if string[index:index+len(name)].lower() == name:
				return value, index + len(name)
		raise ValueError("expected a name at index %d" %(index,))
	return read

def _weekday_number(base):
	read_digit = _digits(1)
	def read(string, index):
		n, index = read_digit(string, index)
		if base == 1:
			if not 1 <= n <= 7:
				raise ValueError("weekday number must be 1 through 7")
			return week.Weekday(n - 1), index
		if n > 6:
			raise ValueError("weekday number must be 0 through 6")
		return week.Weekday.from_sunday_index(n), index
	return read

def _offset(separator=''):
	read2 = _digits(2)
	def read(string, index):
		sign = string[index:index+1]
		if sign not in ('+', '-'):
			raise ValueError("expected offset sign at index %d" %(index,))
		hours, index = read2(string, index + 1)
		if separator:
			if string[index:index+1] != separator:
				raise ValueError("expected %r at index %d" %(separator, index))
			index += 1
		minutes, index = read2(string, index)
		if sign == '-':
			return (-hours, -minutes), index
		return (hours, minutes), index
	return read

_weekday_abbreviations = [(n, week.Weekday(i)) for i, n in enumerate(week.weekday_abbreviations)]
_weekday_names = [(n, week.Weekday(i)) for i, n in enumerate(week.weekday_names)]
_month_abbreviations = [(n, i + 1) for i, n in enumerate(gregorian.month_abbreviations)]
_month_names = [(n, i + 1) for i, n in enumerate(gregorian.month_names)]
_meridiem = _names([('am', False), ('pm', True)])

# Directive code to (field, reader).
readers = {
	'a': ('weekday', _names(_weekday_abbreviations)),
	'A': ('weekday', _names(_weekday_names)),
	'b': ('month', _names(_month_abbreviations)),
	'B': ('month', _names(_month_names)),
	'C': ('century', _digits(2, signed=True)),
	'd': ('day', _digits(2)),
	'g': ('iso_year_last', _digits(2)),
	'G': ('iso_year', _digits(4, signed=True)),
	'H': ('hour', _digits(2)),
	'I': ('hour12', _digits(2)),
	'j': ('ordinal', _digits(3)),
	'm': ('month', _digits(2)),
	'M': ('minute', _digits(2)),
	'N': ('nanosecond', _digits(9)),
	'p': ('pm', _meridiem),
	'P': ('pm', _meridiem),
	'S': ('second', _digits(2)),
	'u': ('weekday', _weekday_number(1)),
	'U': ('sunday_week', _digits(2)),
	'V': ('iso_week', _digits(2)),
	'w': ('weekday', _weekday_number(0)),
	'W': ('monday_week', _digits(2)),
	'y': ('year_last', _digits(2)),
	'Y': ('year', _digits(4, signed=True)),
	'z': ('offset', _offset()),
}

def scan(string, tokens, struct, index=0):
	"""
	# Read the fields identified by &tokens from &string into &struct starting
	# at &index. Returns the index following the last consumed character.
	"""
	for kind, x in tokens:
		if kind == 'literal':
			if not string.startswith(x, index):
				raise ValueError("expected %r at index %d" %(x, index))
			index += len(x)
			continue

		field, read = readers[x]
		value, index = read(string, index)
		if struct.setdefault(field, value) != value:
			raise ValueError("conflicting values for " + field)

	return index

def match(string, tokens):
	struct = {}
	index = scan(string, tokens, struct)
	if index != len(string):
		raise ValueError("unexpected trailing characters at index %d" %(index,))
	return struct

def parse_rfc1123(string, _fmt=models['rfc1123']):
	struct = match(string, tokenize(_fmt))
	struct['offset'] = (0, 0)
	return struct

def parse_rfc3339(string, _fmt=models['rfc3339'], _read_offset=_offset(':')):
	struct = {}
	index = scan(string, tokenize(_fmt), struct)

	if string[index:index+1] == '.':
		start = index = index + 1
		while string[index:index+1].isdigit():
			index += 1
		digits = string[start:index]
		if not digits:
			raise ValueError("fraction has no digits")
		# Digits beyond nanoseconds are truncated.
		struct['nanosecond'] = int(digits[:9].ljust(9, '0'))

	if string[index:index+1] in ('Z', 'z'):
		struct['offset'] = (0, 0)
		index += 1
	else:
		struct['offset'], index = _read_offset(string, index)

	if index != len(string):
		raise ValueError("unexpected trailing characters at index %d" %(index,))
	return struct

parsers = {
	'rfc1123': parse_rfc1123,
	'rfc3339': parse_rfc3339,
}

def _year(struct, full, last, century=None):
	if full in struct:
		return struct[full]
	if last in struct:
		if century is not None and century in struct:
			return (struct[century] * gregorian.years_in_century) + struct[last]
		# POSIX: 69 through 99 are in the twentieth century.
		y = struct[last]
		return y + (1900 if y >= 69 else 2000)
	return None

def structure_date(struct):
	"""
	# Select the construction method for a &types.Date from the parsed fields.
	"""
	year = _year(struct, 'year', 'year_last', 'century')
	weekday = struct.get('weekday')

	if year is not None:
		if 'month' in struct and 'day' in struct:
			return ('calendar', year, struct['month'], struct['day'])
		if 'ordinal' in struct:
			return ('ordinal', year, struct['ordinal'])

	iso_year = _year(struct, 'iso_year', 'iso_year_last')
	if iso_year is not None and 'iso_week' in struct and weekday is not None:
		return ('iso', iso_year, struct['iso_week'], weekday)

	if year is not None and weekday is not None:
		if 'sunday_week' in struct:
			return ('sunday', year, struct['sunday_week'], weekday)
		if 'monday_week' in struct:
			return ('monday', year, struct['monday_week'], weekday)

	raise ValueError("fields do not identify a date")

def structure_time(struct):
	"""
	# Select the hour form for a &types.Time from the parsed fields.
	"""
	minute = struct.get('minute', 0)
	second = struct.get('second', 0)
	nanosecond = struct.get('nanosecond', 0)

	if 'hour' in struct:
		return ('24', struct['hour'], minute, second, nanosecond)
	if 'hour12' in struct and 'pm' in struct:
		return ('12', (struct['hour12'], struct['pm']), minute, second, nanosecond)

	raise ValueError("fields do not identify an hour")

def structure_offset(struct):
	if 'offset' not in struct:
		raise ValueError("fields do not identify an offset")
	return struct['offset']

def _date_from_week(year, number, weekday, sunday):
	first = types.Date(year, 1).weekday
	if sunday:
		start = first.number_days_from_sunday()
		day = weekday.number_days_from_sunday()
	else:
		start = first.number_days_from_monday()
		day = weekday.number_days_from_monday()

	# Ordinal of the first day of week one.
	start = ((earth.days_in_week - start) % earth.days_in_week) + 1
	return types.Date(year, start + (earth.days_in_week * (number - 1)) + day)

def construct_date(plan, struct):
	method, year, *fields = plan
	if method == 'calendar':
		d = types.Date.from_calendar_date(year, *fields)
	elif method == 'ordinal':
		d = types.Date(year, *fields)
	elif method == 'iso':
		d = types.Date.from_iso_week_date(year, *fields)
	else:
		d = _date_from_week(year, *fields, method == 'sunday')

	weekday = struct.get('weekday')
	if weekday is not None and d.weekday is not weekday:
		raise ValueError("weekday %s contradicts the date %s" %(weekday.name, d))
	return d

def construct_time(plan):
	form, hour, minute, second, nanosecond = plan
	if form == '12':
		hour, pm = hour
		if not 1 <= hour <= 12:
			raise core.InvalidComponent('hour', 1, 12, hour)
		hour = (hour % 12) + (12 if pm else 0)
	return types.Time(hour, minute, second, nanosecond)

def construct_offset(plan):
	return offset.UtcOffset(*plan)

def _build_pdt(parts):
	return types.PrimitiveDateTime(parts['date'], parts['time'])

def _build_odt(parts):
	return _build_pdt(parts).assume_offset(parts['offset'])

#: Parsed types and the components they require.
targets = {
	types.Date: (('date',), lambda parts: parts['date']),
	types.Time: (('time',), lambda parts: parts['time']),
	types.PrimitiveDateTime: (('date', 'time'), _build_pdt),
	types.OffsetDateTime: (('date', 'time', 'offset'), _build_odt),
	offset.UtcOffset: (('offset',), lambda parts: parts['offset']),
}

def _parse(fun, format):
	def EXCEPTION(src, fun = fun, format = format):
		try:
			return (src, fun(src))
		except core.ParseError:
			raise
		except Exception as e:
			parse_error = core.ParseError(src, format = format)
			parse_error.__cause__ = e
			raise parse_error
	functools.update_wrapper(EXCEPTION, fun)
	return EXCEPTION

def _structure(fun, format):
	def EXCEPTION(state):
		try:
			return state + (fun(state[1]),)
		except core.StructureError:
			raise
		except Exception as e:
			struct_error = core.StructureError(*state, format = format)
			struct_error.__cause__ = e
			raise struct_error
	functools.update_wrapper(EXCEPTION, fun)
	return EXCEPTION

def _integrity(fun, format):
	def EXCEPTION(state):
		try:
			return fun(state[1], state[2])
		except core.IntegrityError:
			raise
		except Exception as e:
			integ_error = core.IntegrityError(*state[:2], format = format)
			integ_error.__cause__ = e
			raise integ_error
	functools.update_wrapper(EXCEPTION, fun)
	return EXCEPTION

def parser(fmt, Type, _deref=aliases.get):
	"""
	# Given a directive string or a model identifier, return the function that
	# parses strings into instances of &Type.

	# [ Parameters ]
	# /fmt/
		# The directive string or model identifier.
	# /Type/
		# One of &types.Date, &types.Time, &types.PrimitiveDateTime,
		# &types.OffsetDateTime, or &offset.UtcOffset.
	"""
	fmt = _deref(fmt, fmt)
	try:
		components, build = targets[Type]
	except KeyError:
		raise TypeError("cannot parse instances of " + Type.__name__) from None

	if fmt in parsers:
		read = parsers[fmt]
	else:
		tokens = tokenize(fmt)
		def read(string, tokens=tokens):
			return match(string, tokens)

	def structure(struct):
		plan = {}
		if 'date' in components:
			plan['date'] = structure_date(struct)
		if 'time' in components:
			plan['time'] = structure_time(struct)
		if 'offset' in components:
			plan['offset'] = structure_offset(struct)
		return plan

	def construct(struct, plan):
		parts = {}
		if 'date' in plan:
			parts['date'] = construct_date(plan['date'], struct)
		if 'time' in plan:
			parts['time'] = construct_time(plan['time'])
		if 'offset' in plan:
			parts['offset'] = construct_offset(plan['offset'])
		return build(parts)

	def parser_composition(
		x,
		integ = _integrity(construct, fmt),
		struct = _structure(structure, fmt),
		parse = _parse(read, fmt),
	):
		return integ(struct(parse(x)))
	return parser_composition
