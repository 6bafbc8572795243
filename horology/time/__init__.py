"""
[ About ]
---------

horology.time is a date and time package built on the Python &int.
Values are immutable tuples validated at construction: a &.types.Date is a
proleptic Gregorian year and day of the year, a &.types.Time is a time of day with
nanosecond precision, and a &.measures.Duration is a signed span of seconds and
nanoseconds whose fields always share a sign.

Calendar Support:

	- Proleptic Gregorian, years -9999 through 9999

horology's APIs are *not* compatible with the standard library's datetime module.

&.library will be referred to as `libtime` throughout the examples in this documentation.

#!/pl/python
	from horology.time import library as libtime

[ Calendar Representation ]
---------------------------

Dates are addressed by ordinal and converted on demand.

#!/pl/python
	date = libtime.Date.from_calendar_date(1982, 5, 18)
	assert date.to_ordinal_date() == (1982, 138)
	assert date.weekday == libtime.Weekday.tuesday

Invalid components are rejected rather than overflowing onto larger units.

#!/pl/python
	libtime.Date(2001, 366) # InvalidComponent

Literal strings are available for concise construction:

#!/pl/python
	libtime.literals.datetime("2019-01-01 0:00 UTC").unix_timestamp() == 1546300800

[ Datetime Math ]
-----------------

Durations add to and subtract from the point types. Dates use the whole days
of the duration and times of day wrap around midnight.

#!/pl/python
	pdt = libtime.Date.from_calendar_date(2019, 12, 31).with_hms(23, 0)
	assert (pdt + libtime.Duration.hours(2)).year == 2020

Operators raise &OverflowError when the result is not representable;
the `checked_` methods return &None instead.

#!/pl/python
	assert libtime.Duration.max_value().checked_add(libtime.Duration.nanosecond) is None

[ Offsets ]
-----------

&.types.OffsetDateTime stores the instant in UTC along with a fixed
&.offset.UtcOffset used to present it. There is no time zone database.

#!/pl/python
	odt = pdt.assume_offset(libtime.UtcOffset(-5))
	assert odt.to_offset(libtime.utc).hour == 4
"""
__pkg_bottom__ = True
