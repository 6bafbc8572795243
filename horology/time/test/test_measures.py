"""
"""
import pickle

from .. import core
from .. import measures
from .. import system

Duration = measures.Duration
Elapsed = system.Elapsed

def test_normalization(test):
	test/(0, 999999999) == Duration(1, -1)
	test/(0, -999999999) == Duration(-1, 1)
	test/(1, 500000000) == Duration(0, 1500000000)
	test/(-1, -500000000) == Duration(0, -1500000000)
	test/(-2, 0) == Duration(-1, -1000000000)
	test/(5, 0) == Duration(5)

def test_sign_consistency(test):
	for s in (-3, -1, 0, 1, 3):
		for ns in (-2000000001, -999999999, -1, 0, 1, 999999999, 2000000001):
			d = Duration(s, ns)
			test/(d.whole_seconds >= 0 and d.subsec_nanoseconds >= 0 or \
				d.whole_seconds <= 0 and d.subsec_nanoseconds <= 0) == True
			test/abs(d.subsec_nanoseconds) < 1000000000
			test/d.whole_nanoseconds == (s * 1000000000) + ns

def test_range(test):
	test/(measures.SECONDS_MAX, 999999999) == Duration.max_value()
	test/(measures.SECONDS_MIN, -999999999) == Duration.min_value()

	with test/OverflowError:
		Duration(measures.SECONDS_MAX + 1)
	with test/OverflowError:
		Duration(measures.SECONDS_MIN - 1)
	with test/OverflowError:
		Duration(measures.SECONDS_MAX, 1000000000)

def test_of(test):
	test/(93599, 999999997) == Duration.of(day=1, hour=2, nanosecond=-3)
	test/Duration.week == Duration.of(week=1)
	test/Duration.zero == Duration.of()
	test/(0, 1001000) == Duration.of(millisecond=1, microsecond=1)

	with test/ValueError:
		Duration.of(fortnight=1)

def test_unit_constructors(test):
	test/Duration.weeks(2) == Duration.days(14)
	test/Duration.days(1) == Duration.hours(24)
	test/Duration.hours(1) == Duration.minutes(60)
	test/Duration.minutes(1) == Duration.seconds(60)
	test/Duration.seconds(1) == Duration.milliseconds(1000)
	test/Duration.milliseconds(1) == Duration.microseconds(1000)
	test/Duration.microseconds(1) == Duration.nanoseconds(1000)
	test/(-1, -500000000) == Duration.milliseconds(-1500)

	test/Duration.nanosecond == Duration.nanoseconds(1)
	test/Duration.microsecond == Duration.microseconds(1)
	test/Duration.millisecond == Duration.milliseconds(1)
	test/Duration.second == Duration.seconds(1)
	test/Duration.minute == Duration.minutes(1)
	test/Duration.hour == Duration.hours(1)
	test/Duration.day == Duration.days(1)
	test/Duration.week == Duration.weeks(1)

def test_seconds_float(test):
	test/(1, 500000000) == Duration.seconds_float(1.5)
	test/(-1, -500000000) == Duration.seconds_float(-1.5)
	test/(0, 250000000) == Duration.seconds_float(0.25)
	test/1.5 == Duration(1, 500000000).as_seconds_float()

def test_whole_accessors(test):
	d = Duration.of(hour=-25)
	test/-1 == d.whole_days
	test/-25 == d.whole_hours
	test/-1500 == d.whole_minutes
	test/0 == d.whole_weeks

	d = Duration(1, 500000000)
	test/1 == d.whole_seconds
	test/1500 == d.whole_milliseconds
	test/1500000 == d.whole_microseconds
	test/1500000000 == d.whole_nanoseconds

def test_subsec_accessors(test):
	d = Duration(-1, -123456789)
	test/-123 == d.subsec_milliseconds
	test/-123456 == d.subsec_microseconds
	test/-123456789 == d.subsec_nanoseconds

def test_predicates(test):
	test/Duration.zero.is_zero() == True
	test/Duration.zero.is_positive() == False
	test/Duration.zero.is_negative() == False
	test/Duration.nanoseconds(-1).is_negative() == True
	test/Duration.nanoseconds(1).is_positive() == True
	test/bool(Duration.zero) == False
	test/bool(Duration.second) == True

def test_checked_add(test):
	test/Duration.max_value().checked_add(Duration.nanosecond) == None
	test/Duration.min_value().checked_add(-Duration.nanosecond) == None
	test/Duration.max_value() == Duration.max_value().checked_add(Duration.zero)
	test/Duration(2, 0) == Duration(1, 500000000).checked_add(Duration(0, 500000000))

def test_checked_sub(test):
	test/Duration.min_value().checked_sub(Duration.nanosecond) == None
	test/Duration(0, -500000000) == Duration(1).checked_sub(Duration(1, 500000000))

def test_checked_mul(test):
	test/Duration.seconds(10) == Duration.seconds(5).checked_mul(2)
	test/Duration(-3, 0) == Duration(1, 500000000).checked_mul(-2)
	test/Duration.max_value().checked_mul(2) == None
	test/Duration.zero == Duration.max_value().checked_mul(0)

def test_checked_div(test):
	test/Duration(3, 500000000) == Duration.seconds(7).checked_div(2)
	test/Duration(-3, -500000000) == Duration.seconds(-7).checked_div(2)
	test/Duration.seconds(7).checked_div(0) == None
	# The only overflowing quotient.
	test/Duration(measures.SECONDS_MIN).checked_div(-1) == None

def test_negation(test):
	for d in (Duration.zero, Duration(5, 1), Duration(-5, -1), Duration.max_value()):
		test/d == -(-d)
		test/Duration.zero == d + (-d)
	test/+Duration.second == Duration.second

	with test/OverflowError:
		-Duration.min_value()

def test_abs(test):
	test/Duration(5, 1) == abs(Duration(-5, -1))
	test/Duration(5, 1) == abs(Duration(5, 1))

def test_operators(test):
	test/Duration.seconds(3) == Duration.seconds(1) + Duration.seconds(2)
	test/Duration.seconds(-1) == Duration.seconds(1) - Duration.seconds(2)
	test/Duration.seconds(6) == 2 * Duration.seconds(3)
	test/Duration.seconds(6) == Duration.seconds(3) * 2

	with test/OverflowError:
		Duration.max_value() + Duration.nanosecond
	with test/OverflowError:
		Duration.min_value() - Duration.nanosecond
	with test/OverflowError:
		Duration.max_value() * 2
	with test/TypeError:
		Duration.second + 1

def test_float_multiplication(test):
	test/Duration(1, 500000000) == Duration.seconds(1) * 1.5
	test/Duration(0, -500000000) == Duration.seconds(2) * -0.25
	test/Duration(0, -500000000) == -0.25 * Duration.seconds(2)
	test/Duration.zero == Duration.seconds(2) * 0.0

def test_division(test):
	test/1.5 == Duration.seconds(3) / Duration.seconds(2)
	test/Duration(1, 500000000) == Duration.seconds(3) / 2
	test/Duration.seconds(2) == Duration.seconds(1) / 0.5
	test/-2.0 == Duration.seconds(-4) / Elapsed(2)

	with test/ZeroDivisionError:
		Duration.seconds(3) / 0

def test_elapsed_conversion(test):
	test/Duration(5, 1) == Duration.from_elapsed(Elapsed(5, 1))
	test/Elapsed(5, 1) == Duration(5, 1).to_elapsed()
	test/Elapsed(0) == Duration.zero.to_elapsed()

	with test/core.ConversionRange:
		Duration.nanoseconds(-1).to_elapsed()
	with test/core.ConversionRange:
		Duration.from_elapsed(Elapsed(measures.SECONDS_MAX + 1))

	for d in (Duration.zero, Duration(1, 1), Duration.max_value()):
		test/d == Duration.from_elapsed(d.to_elapsed())

def test_elapsed_arithmetic(test):
	test/Duration.seconds(6) == Duration.seconds(5) + Elapsed(1)
	test/Duration.seconds(6) == Elapsed(1) + Duration.seconds(5)
	test/Duration.seconds(4) == Duration.seconds(5) - Elapsed(1)
	test/Duration.seconds(-4) == Elapsed(1) - Duration.seconds(5)
	test/Duration.seconds(-4) == Duration.seconds(-5) + Elapsed(1)
	test/Duration == type(Elapsed(1) + Duration.seconds(5))

def test_elapsed_comparison(test):
	test/Duration.seconds(1) == Elapsed(1)
	test/Elapsed(1) == Duration.seconds(1)
	test/Duration.seconds(-1) < Elapsed(0)
	test/Elapsed(0) > Duration.seconds(-1)
	test/Duration(1, 1) > Elapsed(1)
	test/Elapsed(measures.SECONDS_MAX + 1) > Duration.max_value()
	test/Duration.max_value() < Elapsed(measures.SECONDS_MAX + 1)

def test_str(test):
	test/'0s' == str(Duration.zero)
	test/'1d.2h' == str(Duration.of(day=1, hour=2))
	test/'-1s.500ms' == str(Duration(-1, -500000000))
	test/'1m.1ns' == str(Duration(60, 1))
	test/"(time.duration@'1d.2h')" == repr(Duration.of(day=1, hour=2))

def test_pickle(test):
	d = Duration(-5, -1)
	p = pickle.loads(pickle.dumps(d))
	test/d == p
	test/Duration == type(p)

def test_hash(test):
	test/hash(Duration(1, -1)) == hash(Duration(0, 999999999))
	test/len({Duration.second, Duration.milliseconds(1000)}) == 1

if __name__ == '__main__':
	import sys; from ...test import library as libtest
	libtest.execute(sys.modules[__name__])
