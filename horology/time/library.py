"""
# Primary public module.

# Provides access to the value types, &Date, &Time, &PrimitiveDateTime,
# &OffsetDateTime, &Duration, &UtcOffset, and &Weekday, along with the
# &format and &parse entry points and the exception classes.
"""
__shortname__ = 'libtime'

from .core import *
from .types import Date, Time, PrimitiveDateTime, OffsetDateTime
from .measures import Duration
from .offset import UtcOffset
from .week import Weekday
from .system import Elapsed, elapsed
from .constants import *
from .format import validate_format_string
from . import literals

def format(value, fmt:str) -> str:
	"""
	# Format the time &value using the directive string or model identifier &fmt.
	"""
	from .format import formatter
	return formatter(fmt)(value)

def parse(Type, string:str, fmt:str):
	"""
	# Parse &string into an instance of &Type using the directive string or
	# model identifier &fmt.
	"""
	from .format import parser
	return parser(fmt, Type)(string)

def from_unix_timestamp(timestamp:int) -> OffsetDateTime:
	"""
	# Construct the UTC &OffsetDateTime &timestamp seconds after the Unix epoch.
	"""
	return OffsetDateTime.from_unix_timestamp(timestamp)
unix = from_unix_timestamp
