"""
# Week based measures of time: days of seven.

# [ Elements ]
# /Weekday/
	# Cyclic enumeration of the days of the week; Monday is the first member.
"""
import enum

#: English names of the days of the week.
weekday_names = (
	'monday',
	'tuesday',
	'wednesday',
	'thursday',
	'friday',
	'saturday',
	'sunday',
)

#: Total number of a days in a week.
days_in_week = len(weekday_names)

#: Abbreviations for the english names of the days of the week.
weekday_abbreviations = (
	'mon', 'tue', 'wed', 'thu', 'fri', 'sat', 'sun',
)

#: Map of weekday names and abbreviations to a zero-based, Monday relative, index.
weekday_name_to_number = {
	weekday_names[i]: i
	for i in range(len(weekday_names))
}
weekday_name_to_number.update([
	(k[:3], v) for (k,v) in weekday_name_to_number.items()
])

class Weekday(enum.Enum):
	"""
	# Day of the week. Values are the number of days from Monday.
	"""
	monday = 0
	tuesday = 1
	wednesday = 2
	thursday = 3
	friday = 4
	saturday = 5
	sunday = 6

	@classmethod
	def from_sunday_index(Class, index:int):
		"""
		# Select the member from a zero-based, Sunday relative, index.
		"""
		return Class((index - 1) % days_in_week)

	@classmethod
	def from_name(Class, name:str):
		"""
		# Select the member identified by an english name or abbreviation.
		"""
		return Class(weekday_name_to_number[name.lower()])

	@property
	def abbreviation(self) -> str:
		return weekday_abbreviations[self.value]

	def previous(self):
		"""
		# The day before; Sunday precedes Monday.
		"""
		return self.__class__((self.value - 1) % days_in_week)

	def next(self):
		"""
		# The day after; Monday follows Sunday.
		"""
		return self.__class__((self.value + 1) % days_in_week)

	def number_from_monday(self) -> int:
		return self.value + 1

	def number_from_sunday(self) -> int:
		return self.number_days_from_sunday() + 1

	def number_days_from_monday(self) -> int:
		return self.value

	def number_days_from_sunday(self) -> int:
		return (self.value + 1) % days_in_week

	def __repr__(self):
		return "(time.weekday@%r)" %(self.name,)
