"""
# Exceptions and the value base shared by the time domain classes.

# [ Elements ]
# /Value/
	# The &tuple base of every value type; sequence arithmetic is disabled.
# /Error/
	# Base class of the recoverable errors raised by the project.
"""

class Value(tuple):
	"""
	# Immutable field tuple used by &.types, &.measures, &.offset, and &.system.

	# Calling the class validates the fields; &_unchecked is reserved for
	# call sites that have already established validity.
	"""
	__slots__ = ()

	@classmethod
	def _unchecked(Class, *fields, _new=tuple.__new__):
		return _new(Class, fields)

	def __getnewargs__(self):
		return tuple(self)

	def _comparable(self, operand):
		"""
		# Whether &operand may be compared with the value field by field.
		"""
		return type(operand) is type(self)

	__hash__ = tuple.__hash__

	# Tuple concatenation and repetition have no meaning for time values.
	def __add__(self, operand):
		return NotImplemented
	__radd__ = __sub__ = __rsub__ = __mul__ = __rmul__ = __add__

def _compare(name, method):
	def compare(self, operand):
		if not self._comparable(operand):
			return NotImplemented
		return method(self, operand)
	compare.__name__ = name
	return compare

# Values of different types never compare equal or order.
for _name in ('__eq__', '__ne__', '__lt__', '__le__', '__gt__', '__ge__'):
	setattr(Value, _name, _compare(_name, getattr(tuple, _name)))
del _name

class Error(Exception):
	"""
	# Base class for time specific errors.
	"""

class InvalidComponent(Error, ValueError):
	"""
	# A component was out of its legal range during construction.

	# [ Properties ]
	# /name/
		# The name of the component.
	# /minimum/
		# The smallest legal value.
	# /maximum/
		# The largest legal value.
	# /value/
		# The rejected value.
	# /conditional/
		# Whether the range depends on the value of another component.
		# For instance, the maximum ordinal depends on the year.
	"""

	def __init__(self, name, minimum, maximum, value, conditional=False):
		self.name = name
		self.minimum = minimum
		self.maximum = maximum
		self.value = value
		self.conditional = conditional

	def __str__(self):
		s = "%s must be in the range %r through %r" %(self.name, self.minimum, self.maximum)
		if self.conditional:
			s += " given the values of other components"
		return s + "; got %r" %(self.value,)

class ConversionRange(Error, ValueError):
	"""
	# A value could not be represented by the target type.
	"""

class DecodeError(Error, ValueError):
	"""
	# Serialized data could not be decoded into a time value.
	"""

class FormatError(Error):
	"""
	# Base class for format string and parsing errors.
	"""

	def __init__(self, source, format=None):
		self.source = source
		self.format = format

	def __str__(self):
		if self.format is None:
			return repr(self.source)
		return "%r using %r" %(self.source, self.format)

class InvalidFormatString(FormatError, ValueError):
	"""
	# The format string contained an unknown directive or an incomplete escape.

	# [ Properties ]
	# /index/
		# The position of the directive lead character that was rejected.
	# /reason/
		# Description of the problem.
	"""

	def __init__(self, source, index, reason):
		super().__init__(source)
		self.index = index
		self.reason = reason

	def __str__(self):
		return "%s at index %d in %r" %(self.reason, self.index, self.source)

class InsufficientInformation(FormatError):
	"""
	# The value being formatted lacks a component required by a directive.
	"""

class ParseError(FormatError):
	"""
	# The string did not match the format.
	"""

class StructureError(FormatError):
	"""
	# The parsed fields could not be structured into the requested type.
	"""

	def __init__(self, source, struct=None, format=None):
		super().__init__(source, format=format)
		self.struct = struct

class IntegrityError(FormatError):
	"""
	# The structured fields did not form a valid value.
	"""

	def __init__(self, source, struct=None, format=None):
		super().__init__(source, format=format)
		self.struct = struct

class LiteralError(ParseError):
	"""
	# A literal string was malformed or had trailing characters.

	# [ Properties ]
	# /index/
		# The position of the offending character.
	"""

	def __init__(self, source, index, reason):
		super().__init__(source)
		self.index = index
		self.reason = reason

	def __str__(self):
		return "%s at index %d in %r" %(self.reason, self.index, self.source)
