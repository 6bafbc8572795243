"""
# Random generation and shrinking of time values for property based tests.

# &arbitrary produces uniformly distributed valid instances of a type and
# &shrink produces the finite sequence of smaller candidates used to reduce a
# failing example. Shrinking converges toward the canonical minimum of each type:
# &measures.Duration.zero, midnight, `0000-001`, UTC, and Monday.

#!syntax/python
	rng = random.Random(0)
	d = arbitrary.arbitrary(types.Date, rng)
	for candidate in arbitrary.shrink(d):
		...
"""
import random

from . import earth
from . import gregorian
from . import measures
from . import offset
from . import system
from . import types
from . import week

def shrink_integer(x:int):
	"""
	# Candidates closer to zero than &x; zero first, then halving distances.
	"""
	if x == 0:
		return ()

	candidates = [0]
	if x < 0:
		candidates.append(-x)

	i = earth.truncate(x, 2)[0]
	while i != 0:
		candidates.append(x - i)
		i = earth.truncate(i, 2)[0]

	seen = set()
	return tuple(c for c in candidates if c != x and not (c in seen or seen.add(c)))

def _arbitrary_date(rng):
	year = rng.randint(gregorian.MIN_YEAR, gregorian.MAX_YEAR)
	return types.Date._unchecked(year, rng.randint(1, gregorian.days_in_year(year)))

def _arbitrary_time(rng):
	return types.Time._from_nanoseconds(rng.randint(0, earth.nanoseconds_in_day - 1))

def _arbitrary_duration(rng):
	seconds = rng.randint(measures.SECONDS_MIN, measures.SECONDS_MAX)
	nanoseconds = rng.randint(0, earth.nanoseconds_in_second - 1)
	if seconds < 0 or (seconds == 0 and rng.randint(0, 1)):
		nanoseconds = -nanoseconds
	return measures.Duration._unchecked(seconds, nanoseconds)

def _arbitrary_offset(rng):
	limit = earth.seconds_in_day - 1
	return offset.UtcOffset.seconds(rng.randint(-limit, limit))

def _arbitrary_pdt(rng):
	return types.PrimitiveDateTime._unchecked(_arbitrary_date(rng), _arbitrary_time(rng))

def _presentable(utc_datetime, o):
	return utc_datetime.checked_add(o.as_duration()) is not None

def _arbitrary_odt(rng):
	# Instants at the edges of the year range may not be presentable in every offset.
	while True:
		utc_datetime = _arbitrary_pdt(rng)
		o = _arbitrary_offset(rng)
		if _presentable(utc_datetime, o):
			return types.OffsetDateTime._unchecked(utc_datetime, o)

def _arbitrary_weekday(rng):
	return week.Weekday(rng.randint(0, earth.days_in_week - 1))

def _arbitrary_elapsed(rng):
	return system.Elapsed._unchecked(
		rng.randint(0, system.SECONDS_MAX),
		rng.randint(0, earth.nanoseconds_in_second - 1),
	)

generators = {
	types.Date: _arbitrary_date,
	types.Time: _arbitrary_time,
	types.PrimitiveDateTime: _arbitrary_pdt,
	types.OffsetDateTime: _arbitrary_odt,
	measures.Duration: _arbitrary_duration,
	offset.UtcOffset: _arbitrary_offset,
	week.Weekday: _arbitrary_weekday,
	system.Elapsed: _arbitrary_elapsed,
}

def arbitrary(Type, rng=random):
	"""
	# Generate a valid instance of &Type.

	# [ Parameters ]
	# /Type/
		# A key of &generators.
	# /rng/
		# Source of randomness providing `randint`. Defaults to the &random module.
	"""
	try:
		generate = generators[Type]
	except KeyError:
		raise TypeError("no generator for " + Type.__name__) from None
	return generate(rng)

def _shrink_date(d):
	year, ordinal = d
	candidates = []

	for y in shrink_integer(year):
		if ordinal <= gregorian.days_in_year(y):
			candidates.append(types.Date._unchecked(y, ordinal))
	for o in shrink_integer(ordinal - 1):
		candidates.append(types.Date._unchecked(year, o + 1))

	return tuple(candidates)

def _shrink_time(t):
	return tuple(
		types.Time._from_nanoseconds(ns)
		for ns in shrink_integer(t.nanoseconds_since_midnight())
	)

def _shrink_duration(d):
	# The negation of the smallest duration has no representation.
	candidates = (measures._from_total(ns) for ns in shrink_integer(d.whole_nanoseconds))
	return tuple(x for x in candidates if x is not None)

def _shrink_offset(o):
	return tuple(offset.UtcOffset.seconds(s) for s in shrink_integer(o.whole_seconds))

def _shrink_pdt(pdt):
	date, time = pdt
	return tuple(
		[types.PrimitiveDateTime._unchecked(d, time) for d in _shrink_date(date)] +
		[types.PrimitiveDateTime._unchecked(date, t) for t in _shrink_time(time)]
	)

def _shrink_odt(odt):
	utc_datetime, o = odt
	candidates = [
		(pdt, o) for pdt in _shrink_pdt(utc_datetime)
	]
	candidates.extend(
		(utc_datetime, x) for x in _shrink_offset(o)
	)

	return tuple(
		types.OffsetDateTime._unchecked(pdt, x)
		for pdt, x in candidates
		if _presentable(pdt, x)
	)

def _shrink_weekday(wd):
	if wd is week.Weekday.monday:
		return ()
	return (wd.previous(),)

def _shrink_elapsed(e):
	return tuple(system.Elapsed.from_nanoseconds(ns) for ns in shrink_integer(e.as_nanoseconds()))

shrinkers = {
	types.Date: _shrink_date,
	types.Time: _shrink_time,
	types.PrimitiveDateTime: _shrink_pdt,
	types.OffsetDateTime: _shrink_odt,
	measures.Duration: _shrink_duration,
	offset.UtcOffset: _shrink_offset,
	week.Weekday: _shrink_weekday,
	system.Elapsed: _shrink_elapsed,
}

def shrink(value):
	"""
	# The smaller candidates of &value as a tuple; empty when &value is minimal.
	"""
	try:
		s = shrinkers[type(value)]
	except KeyError:
		raise TypeError("no shrinker for " + type(value).__name__) from None
	return s(value)
