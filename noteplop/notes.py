import dataclasses
import typing

import noteplop.durations


@dataclasses.dataclass(frozen=True)
class Point:

	"""
	A position in staff coordinates (x is time, y is pitch).
	"""

	x: float
	y: float


@dataclasses.dataclass(frozen=True)
class Note:

	"""
	A note placed on the staff.

	The id is opaque to the geometry passes: the score store hands it out
	and the passes only carry it through. Ghost notes (pointer previews)
	have no id and are never stored.
	"""

	id: typing.Optional[typing.Hashable]
	x: float
	y: float
	duration: noteplop.durations.Duration
	ghost: bool = False

	@property
	def point (self) -> Point:
		return Point(self.x, self.y)

	def moved_to (self, x: float, y: float) -> "Note":

		"""Return a copy at a new position; the duration never changes after creation."""

		return dataclasses.replace(self, x=x, y=y)


def ghost_note (x: float, y: float, duration: noteplop.durations.Duration) -> Note:

	"""Build the transient preview note that follows the pointer."""

	return Note(id=None, x=x, y=y, duration=duration, ghost=True)


def sort_by_x (notes: typing.Iterable[Note]) -> typing.List[Note]:

	"""
	Order notes left to right.

	The sort is stable, so notes sharing an x (a chord) keep their insertion
	order.
	"""

	return sorted(notes, key=lambda note: note.x)
