"""
# Data regarding Earth-based units of time and their metric subdivisions.
"""
#: Number of seconds contained in a `minute`.
seconds_in_minute = 60

#: Number of minutes contained in an `hour`.
minutes_in_hour = 60

#: Number of hours contained in an earth `day`.
hours_in_day = 24

#: Number of days contained in a `week`.
days_in_week = 7

#: Number of seconds contained in an `hour`.
seconds_in_hour = seconds_in_minute * minutes_in_hour

#: Number of seconds contained in an earth `day`.
seconds_in_day = seconds_in_hour * hours_in_day

#: Number of seconds contained in a `week`.
seconds_in_week = seconds_in_day * days_in_week

#: Number of nanoseconds contained in a `microsecond`.
nanoseconds_in_microsecond = 1000

#: Number of nanoseconds contained in a `millisecond`.
nanoseconds_in_millisecond = 1000 * nanoseconds_in_microsecond

#: Number of nanoseconds contained in a `second`.
nanoseconds_in_second = 1000 * nanoseconds_in_millisecond

#: Number of nanoseconds contained in an earth `day`.
nanoseconds_in_day = seconds_in_day * nanoseconds_in_second

#: Nanoseconds per unit name. Used by keyword constructors.
unit_nanoseconds = {
	'week': seconds_in_week * nanoseconds_in_second,
	'day': nanoseconds_in_day,
	'hour': seconds_in_hour * nanoseconds_in_second,
	'minute': seconds_in_minute * nanoseconds_in_second,
	'second': nanoseconds_in_second,
	'millisecond': nanoseconds_in_millisecond,
	'microsecond': nanoseconds_in_microsecond,
	'nanosecond': 1,
}

def truncate(numerator, denominator):
	"""
	# Integer division rounding toward zero; the remainder has the sign of the &numerator.

	# Python's floor division rounds toward negative infinity which is inappropriate
	# for signed measures whose fields must agree in sign.
	"""
	q = abs(numerator) // abs(denominator)
	if (numerator < 0) != (denominator < 0):
		q = -q
	return q, numerator - (q * denominator)
