"""
# Various constants.

# [ Elements ]

# /unix_epoch/
	# &types.OffsetDateTime instance referring to `1970-01-01T00:00:00Z`.
# /midnight/
	# &types.Time of the first instant of a day.
# /utc/
	# The zero &offset.UtcOffset.
# /min_date/
	# The earliest representable &types.Date.
# /max_date/
	# The latest representable &types.Date.
"""
from . import gregorian
from . import offset
from . import types

__all__ = ['utc', 'midnight', 'unix_epoch', 'min_date', 'max_date']

utc = offset.UtcOffset.UTC
midnight = types.Time.midnight()
unix_epoch = types.Date.from_calendar_date(1970, 1, 1).midnight().assume_utc()

min_date = types.Date(gregorian.MIN_YEAR, 1)
max_date = types.Date(gregorian.MAX_YEAR, gregorian.days_in_year(gregorian.MAX_YEAR))
