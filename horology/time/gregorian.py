"""
# Proleptic Gregorian calendar functions and data.

# Dates are addressed by ordinal, (year, day-of-year), and converted to and from
# the common (year, month, day) form using cumulative month tables. Day counts
# are relative to `0000-01-01`, the first day of a Gregorian cycle.
"""
import bisect
import itertools

#: Smallest year representable by &.types.Date.
MIN_YEAR = -9999

#: Largest year representable by &.types.Date.
MAX_YEAR = 9999

#: number of years in a gregorian cycle.
years_in_cycle = 400

#: number of years in a century.
years_in_century = 100

#: english names of the months of the year.
month_names = (
	"january",
	"february",
	"march",
	"april",
	"may",
	"june",
	"july",
	"august",
	"september",
	"october",
	"november",
	"december",
)

#: number of months in a year.
months_in_year = len(month_names)

#: abbreviations for the english names of the months of the year.
month_abbreviations = (
	"jan", "feb", "mar",
	"apr", "may", "jun",
	"jul", "aug", "sep",
	"oct", "nov", "dec",
)

#: Definition of a year in terms of gregorian month-to-days.
calendar_year = (
	31, 28, 31, 30,
	31, 30, 31, 31,
	30, 31, 30, 31
)

#: Definition of a leap year in terms of gregorian month-to-days.
calendar_leap = (calendar_year[0], calendar_year[1] + 1) + calendar_year[2:] # Feb29

#: Days preceding each month; the final entry is the length of the year.
cumulative_year = tuple(itertools.accumulate(itertools.chain((0,), calendar_year)))
cumulative_leap = tuple(itertools.accumulate(itertools.chain((0,), calendar_leap)))

#: Number of days in a gregorian cycle.
days_in_cycle = (365 * years_in_cycle) + (years_in_cycle // 4) - 3

#: Julian day number of `0000-01-01`.
julian_day_offset = 1721060

def is_leap_year(year:int) -> bool:
	"""
	# Given a gregorian calendar year, determine whether it is a leap year.
	"""
	return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)

def days_in_year(year:int) -> int:
	"""
	# The number of days in the given &year; 365 or 366.
	"""
	return 366 if is_leap_year(year) else 365

def days_in_year_month(year:int, month:int) -> int:
	"""
	# The number of days in the one-based &month of &year.
	"""
	return (calendar_leap if is_leap_year(year) else calendar_year)[month-1]

def leap_years_before(year:int) -> int:
	"""
	# The number of leap years from year zero up to, but not including, &year.
	# Negative for years before zero.
	"""
	return ((year + 3) // 4) - ((year + 99) // 100) + ((year + 399) // 400)

def days_before_year(year:int) -> int:
	"""
	# The number of days from `0000-01-01` to the first day of &year.
	"""
	return (365 * year) + leap_years_before(year)

def weekday_from_days(days:int) -> int:
	"""
	# The zero-based, Sunday relative, day of week of the day count.
	"""
	# 0000-01-01 was a Saturday.
	return (days + 6) % 7

def weeks_in_year(year:int) -> int:
	"""
	# The number of ISO-8601 weeks in &year; 52 or 53.

	# A year has 53 weeks when it starts on a Thursday, or when it is a leap
	# year starting on a Wednesday.
	"""
	first = weekday_from_days(days_before_year(year))
	if first == 4 or (first == 3 and is_leap_year(year)):
		return 53
	return 52

def ordinal_to_calendar(year:int, ordinal:int, bisect=bisect.bisect_left):
	"""
	# Convert a day of &year, one-based, into a (month, day) pair.
	"""
	table = cumulative_leap if is_leap_year(year) else cumulative_year
	month = bisect(table, ordinal, 1, 13)
	return (month, ordinal - table[month-1])

def calendar_to_ordinal(year:int, month:int, day:int) -> int:
	"""
	# Convert the (month, day) of &year into the one-based day of the year.
	"""
	table = cumulative_leap if is_leap_year(year) else cumulative_year
	return table[month-1] + day

def ordinal_from_days(days:int):
	"""
	# Convert the given Earth-days into a Gregorian ordinal date of the form
	# (year, ordinal).
	"""
	cycles, day_of_cycle = divmod(days, days_in_cycle)

	# Estimate is within a year of the actual; correct with the year lengths.
	year = (day_of_cycle * years_in_cycle) // days_in_cycle
	start = days_before_year(year)
	while start > day_of_cycle:
		year -= 1
		start = days_before_year(year)
	while day_of_cycle - start >= days_in_year(year):
		start += days_in_year(year)
		year += 1

	return ((cycles * years_in_cycle) + year, day_of_cycle - start + 1)

def days_from_ordinal(year:int, ordinal:int) -> int:
	"""
	# Convert an ordinal date to the number of days leading up to the date.
	"""
	return days_before_year(year) + ordinal - 1

def date_from_days(days:int):
	"""
	# Convert the given Earth-days into a Gregorian date in the common form:
	# (year, month, day).
	"""
	year, ordinal = ordinal_from_days(days)
	return (year,) + ordinal_to_calendar(year, ordinal)

def days_from_date(date) -> int:
	"""
	# Convert a Gregorian date in the common form, (year, month, day), to the number
	# of days leading up to the date.
	"""
	year, month, day = date
	return days_from_ordinal(year, calendar_to_ordinal(year, month, day))
