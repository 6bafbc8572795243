"""
# Unix timestamp encoding of &types.OffsetDateTime for serialized records.

# Instants are written as whole seconds since `1970-01-01T00:00:00Z`. Decoding
# always produces UTC instances; the offset of the original value is not retained.

#!syntax/python
	odt = types.Date.from_calendar_date(2019, 1, 1).midnight().assume_utc()
	assert serial.serialize(odt) == 1546300800
	assert serial.deserialize(1546300800) == odt
	assert serial.loads(serial.dumps({'at': odt}, ('at',)), ('at',))['at'] == odt
"""
import json
import logging

from . import core
from . import types

log = logging.getLogger(__name__)

def serialize(odt) -> int:
	"""
	# Encode the &types.OffsetDateTime as its Unix timestamp.
	"""
	if not isinstance(odt, types.OffsetDateTime):
		raise TypeError("expected an OffsetDateTime, got " + type(odt).__name__)
	return odt.unix_timestamp()

def deserialize(value):
	"""
	# Decode a Unix timestamp into a UTC &types.OffsetDateTime.

	# [ Exceptions ]
	# /&core.DecodeError/
		# The &value was not an integer or was outside of the range of
		# representable instants.
	"""
	if isinstance(value, bool) or not isinstance(value, int):
		log.debug("rejected timestamp of type %s", type(value).__name__)
		raise core.DecodeError("timestamp must be an integer, got " + type(value).__name__)

	try:
		return types.OffsetDateTime.from_unix_timestamp(value)
	except core.InvalidComponent as err:
		log.debug("rejected timestamp %d: %s", value, err)
		raise core.DecodeError("timestamp %d is out of range" %(value,)) from err

class option(object):
	"""
	# Encoding of optional instants; &None passes through in both directions.
	"""

	@staticmethod
	def serialize(odt):
		if odt is None:
			return None
		return serialize(odt)

	@staticmethod
	def deserialize(value):
		if value is None:
			return None
		return deserialize(value)

def dumps(record, fields, **kw) -> str:
	"""
	# Encode the mapping &record as JSON with the instants named by &fields
	# written as timestamps. Keywords are passed to &json.dumps.
	"""
	data = dict(record)
	for name in fields:
		if name in data:
			data[name] = option.serialize(data[name])
	return json.dumps(data, **kw)

def loads(string, fields) -> dict:
	"""
	# Decode the JSON object in &string with the timestamps named by &fields
	# restored as &types.OffsetDateTime instances.
	"""
	data = json.loads(string)
	if not isinstance(data, dict):
		raise core.DecodeError("serialized record must be an object")

	for name in fields:
		if name in data:
			data[name] = option.deserialize(data[name])
	return data
