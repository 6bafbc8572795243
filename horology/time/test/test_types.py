"""
"""
import pickle

from .. import core
from .. import gregorian
from .. import measures
from .. import offset
from .. import system
from .. import week
from .. import types as module

Date = module.Date
Time = module.Time
PrimitiveDateTime = module.PrimitiveDateTime
OffsetDateTime = module.OffsetDateTime
Duration = measures.Duration
Elapsed = system.Elapsed
UtcOffset = offset.UtcOffset
W = week.Weekday

def test_date_ordinal_validation(test):
	test/(2000, 366) == Date.from_ordinal_date(2000, 366)

	with test/core.InvalidComponent as exc:
		Date.from_ordinal_date(2001, 366)
	test/'ordinal' == exc().name
	test/365 == exc().maximum
	test/True == exc().conditional

	with test/core.InvalidComponent as exc:
		Date(2001, 0)

	with test/core.InvalidComponent as exc:
		Date(gregorian.MAX_YEAR + 1, 1)
	test/'year' == exc().name
	test/False == exc().conditional

def test_date_calendar_validation(test):
	test/(2020, 60) == Date.from_calendar_date(2020, 2, 29)

	with test/core.InvalidComponent as exc:
		Date.from_calendar_date(2019, 2, 29)
	test/'day' == exc().name
	test/True == exc().conditional

	with test/core.InvalidComponent as exc:
		Date.from_calendar_date(2019, 13, 1)
	test/'month' == exc().name

def test_date_calendar_accessors(test):
	d = Date(2019, 60)
	test/2019 == d.year
	test/60 == d.ordinal
	test/3 == d.month
	test/1 == d.day
	test/(2019, 3, 1) == d.to_calendar_date()
	test/(2019, 60) == d.to_ordinal_date()

	d = Date.from_calendar_date(1982, 5, 18)
	test/(1982, 138) == d.to_ordinal_date()
	test/W.tuesday % d.weekday

def test_date_weekday(test):
	test/W.tuesday % Date.from_calendar_date(2019, 1, 1).weekday
	test/W.thursday % Date.from_calendar_date(1970, 1, 1).weekday
	test/W.saturday % Date.from_calendar_date(2000, 1, 1).weekday
	test/W.saturday % Date(0, 1).weekday

	# Consecutive days advance the weekday.
	d = Date.from_calendar_date(2019, 12, 25)
	for i in range(30):
		test/d.next_day().weekday % d.weekday.next()
		d = d.next_day()

def test_date_iso_week(test):
	test/(2019, 1, W.tuesday) == Date.from_calendar_date(2019, 1, 1).to_iso_week_date()
	test/(2020, 53, W.friday) == Date.from_calendar_date(2021, 1, 1).to_iso_week_date()
	test/(2025, 1, W.monday) == Date.from_calendar_date(2024, 12, 30).to_iso_week_date()
	test/(2019, 1, W.monday) == Date.from_calendar_date(2018, 12, 31).to_iso_week_date()
	test/53 == Date.from_calendar_date(2021, 1, 1).iso_week

def test_date_from_iso_week_date(test):
	test/Date.from_calendar_date(2018, 12, 31) == Date.from_iso_week_date(2019, 1, W.monday)
	test/Date.from_calendar_date(2021, 1, 1) == Date.from_iso_week_date(2020, 53, W.friday)
	test/Date.from_calendar_date(2019, 1, 1) == Date.from_iso_week_date(2019, 1, W.tuesday)

	with test/core.InvalidComponent as exc:
		Date.from_iso_week_date(2019, 53, W.monday)
	test/'week' == exc().name

def test_date_iso_week_round_trip(test):
	start = Date.from_calendar_date(2014, 12, 1).to_julian_day()
	for jd in range(start, start + (366 * 8), 3):
		d = Date.from_julian_day(jd)
		test/d == Date.from_iso_week_date(*d.to_iso_week_date())

def test_date_numbered_weeks(test):
	d = Date.from_calendar_date(2019, 1, 1)
	test/0 == d.sunday_based_week
	test/0 == d.monday_based_week

	d = Date.from_calendar_date(2019, 1, 6) # Sunday
	test/1 == d.sunday_based_week
	test/0 == d.monday_based_week

	d = Date.from_calendar_date(2019, 1, 7) # Monday
	test/1 == d.sunday_based_week
	test/1 == d.monday_based_week

	d = Date.from_calendar_date(2019, 12, 31)
	test/52 == d.sunday_based_week
	test/52 == d.monday_based_week

def test_date_julian_day(test):
	d = Date.from_calendar_date(2000, 1, 1)
	test/2451545 == d.to_julian_day()
	test/d == Date.from_julian_day(2451545)
	test/Date(gregorian.MIN_YEAR, 1) == Date.from_julian_day(module.min_julian_day)

	with test/core.InvalidComponent:
		Date.from_julian_day(module.max_julian_day + 1)
	with test/core.InvalidComponent:
		Date.from_julian_day(module.min_julian_day - 1)

def test_date_next_previous(test):
	test/Date(2020, 1) == Date(2019, 365).next_day()
	test/Date(2020, 366) == Date(2020, 365).next_day()
	test/Date(2019, 365) == Date(2020, 1).previous_day()
	test/Date(2019, 2) == Date(2019, 1).next_day()

	with test/OverflowError:
		Date(gregorian.MAX_YEAR, 365).next_day()
	with test/OverflowError:
		Date(gregorian.MIN_YEAR, 1).previous_day()

def test_date_arithmetic(test):
	test/Date(2020, 1) == Date(2019, 365) + Duration.days(1)
	test/Date(2020, 59) == Date(2020, 60) - Duration.days(1)
	test/Date(2021, 1) == Date(2020, 1) + Duration.days(366)
	test/Date(2019, 1) == Date(2020, 1) - Duration.days(365)
	# Whole days only.
	test/Date(2019, 2) == Date(2019, 1) + Duration.hours(47)
	test/Date(2019, 365) == Date(2020, 1) + Duration.hours(-47)
	test/Date(2019, 3) == Date(2019, 1) + Elapsed(86400 * 2)
	test/Date(2018, 365) == Date(2019, 1) - Elapsed(86400)

	test/Duration.days(365) == Date(2020, 1) - Date(2019, 1)
	test/Duration.days(-366) == Date(2020, 1) - Date(2021, 1)

def test_date_overflow(test):
	last = Date(gregorian.MAX_YEAR, 365)
	test/last.checked_add(Duration.days(1)) == None
	test/last.checked_add(Duration.max_value()) == None
	test/Date(gregorian.MIN_YEAR, 1).checked_sub(Duration.days(1)) == None
	test/last == last.checked_add(Duration.hours(23))

	with test/OverflowError:
		last + Duration.days(1)
	with test/OverflowError:
		Date(gregorian.MIN_YEAR, 1) - Duration.days(1)
	with test/TypeError:
		Date(2019, 1) + 1
	with test/TypeError:
		Date(2019, 1).checked_add(1)
	with test/TypeError:
		Date(2019, 1).checked_sub(Date(2019, 1))

def test_date_composition(test):
	d = Date(2019, 1)
	test/PrimitiveDateTime(d, Time(0, 0)) == d.midnight()
	test/PrimitiveDateTime(d, Time(1, 2, 3)) == d.with_hms(1, 2, 3)
	test/PrimitiveDateTime(d, Time(1, 2, 3, 4000000)) == d.with_hms_milli(1, 2, 3, 4)
	test/PrimitiveDateTime(d, Time(1, 2, 3, 4000)) == d.with_hms_micro(1, 2, 3, 4)
	test/PrimitiveDateTime(d, Time(1, 2, 3, 4)) == d.with_hms_nano(1, 2, 3, 4)
	test/PrimitiveDateTime(d, Time(5, 0)) == d.with_time(Time(5, 0))

	with test/core.InvalidComponent:
		d.with_hms(24, 0)

def test_date_str(test):
	test/'2019-01-01' == str(Date(2019, 1))
	test/'-800-01-01' == str(Date(-800, 1))
	test/"(time.date@'2019-01-01')" == repr(Date(2019, 1))

def test_date_pickle(test):
	d = Date(2019, 1)
	test/d == pickle.loads(pickle.dumps(d))

def test_time_validation(test):
	with test/core.InvalidComponent as exc:
		Time(24, 0)
	test/'hour' == exc().name

	with test/core.InvalidComponent as exc:
		Time(0, 60)
	test/'minute' == exc().name

	with test/core.InvalidComponent as exc:
		Time(0, 0, 60)
	test/'second' == exc().name

	with test/core.InvalidComponent as exc:
		Time(0, 0, 0, 1000000000)
	test/'nanosecond' == exc().name

	with test/core.InvalidComponent as exc:
		Time.from_hms_milli(0, 0, 0, 1000)
	test/'millisecond' == exc().name

	with test/core.InvalidComponent as exc:
		Time.from_hms_micro(0, 0, 0, 1000000)
	test/'microsecond' == exc().name

def test_time_accessors(test):
	t = Time.from_hms_milli(1, 2, 3, 4)
	test/(1, 2, 3, 4000000) == t
	test/1 == t.hour
	test/2 == t.minute
	test/3 == t.second
	test/4 == t.millisecond
	test/4000 == t.microsecond
	test/4000000 == t.nanosecond
	test/(1, 2, 3) == t.as_hms()
	test/(1, 2, 3, 4) == t.as_hms_milli()
	test/(1, 2, 3, 4000) == t.as_hms_micro()
	test/(1, 2, 3, 4000000) == t.as_hms_nano()
	test/Time(0, 0) == Time.midnight()

def test_time_nanoseconds_since_midnight(test):
	test/0 == Time.midnight().nanoseconds_since_midnight()
	test/3723000000004 == Time(1, 2, 3, 4).nanoseconds_since_midnight()
	for ns in range(0, module.ns_per_day, 999999999937):
		test/ns == Time.from_nanoseconds_since_midnight(ns).nanoseconds_since_midnight()

	with test/core.InvalidComponent:
		Time.from_nanoseconds_since_midnight(module.ns_per_day)
	with test/core.InvalidComponent:
		Time.from_nanoseconds_since_midnight(-1)

def test_time_arithmetic(test):
	test/Time(1, 0) == Time(23, 0) + Duration.hours(2)
	test/Time(23, 0) == Time(1, 0) - Duration.hours(2)
	test/Time(23, 59, 59, 999999999) == Time(0, 0) - Duration.nanosecond
	test/Time(12, 0) == Time(12, 0) + Duration.days(3)
	test/Time(0, 30) == Time(0, 0) + Elapsed(1800)
	test/Time(23, 30) == Time(0, 0) - Elapsed(1800)

	test/Duration.hours(-22) == Time(1, 0) - Time(23, 0)
	test/Duration(0, 1) == Time(0, 0, 0, 1) - Time(0, 0)

def test_time_str(test):
	test/'01:02:03.0' == str(Time(1, 2, 3))
	test/'00:00:00.5' == str(Time(0, 0, 0, 500000000))
	test/'00:00:00.000000001' == str(Time(0, 0, 0, 1))
	test/"(time.time@'01:02:03.0')" == repr(Time(1, 2, 3))

def test_pdt_construction(test):
	with test/TypeError:
		PrimitiveDateTime((2019, 1), Time(0, 0))
	with test/TypeError:
		PrimitiveDateTime(Date(2019, 1), (0, 0, 0, 0))

def test_pdt_accessors(test):
	pdt = Date.from_calendar_date(2019, 3, 4).with_hms_nano(5, 6, 7, 8009010)
	test/Date(2019, 63) == pdt.date
	test/Time(5, 6, 7, 8009010) == pdt.time
	test/2019 == pdt.year
	test/3 == pdt.month
	test/4 == pdt.day
	test/63 == pdt.ordinal
	test/W.monday % pdt.weekday
	test/10 == pdt.iso_week
	test/5 == pdt.hour
	test/6 == pdt.minute
	test/7 == pdt.second
	test/8 == pdt.millisecond
	test/8009 == pdt.microsecond
	test/8009010 == pdt.nanosecond

def test_pdt_arithmetic(test):
	pdt = Date(2019, 365).with_hms(23, 0)
	test/Date(2020, 1).with_hms(1, 0) == pdt + Duration.hours(2)
	test/Date(2019, 364).with_hms(23, 0) == pdt - Duration.days(1)
	test/Date(2019, 365).with_hms(22, 0) == pdt - Elapsed(3600)
	test/Date(2020, 1).midnight() == pdt + Elapsed(3600)
	test/Date(2019, 365).midnight() == pdt + Duration.hours(-23)

	test/Duration.hours(2) == (pdt + Duration.hours(2)) - pdt
	test/Duration.hours(-2) == pdt - (pdt + Duration.hours(2))
	test/Duration.days(366) == Date(2021, 1).midnight() - Date(2020, 1).midnight()

def test_pdt_overflow(test):
	last = Date(gregorian.MAX_YEAR, 365).with_hms(23, 59, 59)
	test/last.checked_add(Duration.second) == None
	test/last.checked_sub(Duration.second) == Date(gregorian.MAX_YEAR, 365).with_hms(23, 59, 58)

	with test/OverflowError:
		last + Duration.second

	first = Date(gregorian.MIN_YEAR, 1).midnight()
	test/first.checked_sub(Duration.nanosecond) == None
	with test/OverflowError:
		first - Duration.nanosecond

	with test/TypeError:
		first.checked_add(1)
	with test/TypeError:
		first.checked_sub(None)
	with test/TypeError:
		first.assume_utc().checked_add(1.5)

def test_pdt_offsets(test):
	pdt = Date(2019, 1).midnight()
	test/Date(2018, 365).with_hms(19, 0) == pdt.utc_to_offset(UtcOffset(-5))
	test/Date(2019, 1).with_hms(5, 0) == pdt.offset_to_utc(UtcOffset(-5))

	odt = pdt.assume_offset(UtcOffset(1))
	test/UtcOffset(1) == odt.offset
	test/Date(2018, 365).with_hms(23, 0) == odt.utc_datetime
	test/pdt == odt.local()

	odt = pdt.assume_utc()
	test/pdt == odt.utc_datetime
	test/odt.offset.is_utc() == True

def test_odt_construction(test):
	pdt = Date(2019, 1).midnight()
	test/pdt.assume_utc() == OffsetDateTime(pdt, UtcOffset.UTC)

	with test/TypeError:
		OffsetDateTime(pdt, 0)
	with test/TypeError:
		OffsetDateTime(pdt, (1, 0, 0))
	with test/TypeError:
		OffsetDateTime(Date(2019, 1), UtcOffset.UTC)

def test_odt_unix_timestamp(test):
	odt = Date.from_calendar_date(2019, 1, 1).midnight().assume_utc()
	test/1546300800 == odt.unix_timestamp()
	test/1546300800000000000 == odt.unix_timestamp_nanos()
	test/odt == OffsetDateTime.from_unix_timestamp(1546300800)

	odt = Date.from_calendar_date(2019, 1, 1).midnight().assume_offset(UtcOffset(1))
	test/(1546300800 - 3600) == odt.unix_timestamp()

def test_odt_from_unix_timestamp(test):
	epoch = OffsetDateTime.from_unix_timestamp(0)
	test/Date.from_calendar_date(1970, 1, 1).midnight() == epoch.utc_datetime
	test/epoch.offset.is_utc() == True

	before = OffsetDateTime.from_unix_timestamp(-1)
	test/1969 == before.year
	test/23 == before.hour
	test/59 == before.second

	odt = OffsetDateTime.from_unix_timestamp_nanos(-1500000000)
	test/-1500000000 == odt.unix_timestamp_nanos()
	# Truncated toward zero.
	test/-1 == odt.unix_timestamp()
	test/500000000 == odt.nanosecond

def test_odt_timestamp_range(test):
	last = OffsetDateTime.from_unix_timestamp(module.max_unix_timestamp)
	test/Date(gregorian.MAX_YEAR, 365).with_hms(23, 59, 59) == last.utc_datetime

	first = OffsetDateTime.from_unix_timestamp(module.min_unix_timestamp)
	test/Date(gregorian.MIN_YEAR, 1).midnight() == first.utc_datetime

	with test/core.InvalidComponent as exc:
		OffsetDateTime.from_unix_timestamp(module.max_unix_timestamp + 1)
	test/'unix_timestamp' == exc().name

	with test/core.InvalidComponent:
		OffsetDateTime.from_unix_timestamp(module.min_unix_timestamp - 1)
	with test/core.InvalidComponent:
		OffsetDateTime.from_unix_timestamp_nanos((module.max_unix_timestamp + 1) * 1000000000)

def test_odt_local_accessors(test):
	odt = Date(2019, 1).midnight().assume_utc().to_offset(UtcOffset(-5))
	test/2018 == odt.year
	test/12 == odt.month
	test/31 == odt.day
	test/365 == odt.ordinal
	test/19 == odt.hour
	test/0 == odt.minute
	test/W.monday % odt.weekday
	test/Date(2018, 365) == odt.date
	test/Time(19, 0) == odt.time
	test/1 == odt.iso_week

def test_odt_instant_comparison(test):
	utc = Date(2019, 1).midnight().assume_utc()
	east = utc.to_offset(UtcOffset(5))
	west = utc.to_offset(UtcOffset(-3, -30))

	test/utc == east
	test/east == west
	test/hash(utc) == hash(west)
	test/(east != west) == False
	test/len({utc, east, west}) == 1

	later = (utc + Duration.nanosecond).to_offset(UtcOffset(-12))
	test/later > east
	test/later >= east
	test/east < later
	test/east <= later
	test/east <= utc
	test/(later < east) == False

	test/(utc == utc.utc_datetime) == False

def test_odt_arithmetic(test):
	odt = Date(2019, 1).with_hms(12, 0).assume_offset(UtcOffset(2))
	r = odt + Duration.hours(13)
	test/UtcOffset(2) == r.offset
	test/(Date(2019, 2), Time(1, 0)) == (r.date, r.time)
	test/Duration.hours(13) == r - odt
	test/odt == r - Duration.hours(13)
	test/(odt + Elapsed(60)) == odt + Duration.minutes(1)
	test/odt.checked_sub(Elapsed(60)) == odt - Duration.minutes(1)

	last = Date(gregorian.MAX_YEAR, 365).with_hms(23, 59, 59).assume_utc()
	test/last.checked_add(Duration.second) == None
	with test/OverflowError:
		last + Duration.second

def test_odt_str(test):
	odt = Date(2019, 1).with_hms(12, 0).assume_offset(UtcOffset(2))
	test/'2019-01-01T12:00:00.0+02:00' == str(odt)
	test/"(time.offset_datetime@'2019-01-01T12:00:00.0+02:00')" == repr(odt)

if __name__ == '__main__':
	import sys; from ...test import library as libtest
	libtest.execute(sys.modules[__name__])
