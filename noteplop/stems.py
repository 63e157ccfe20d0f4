"""Stem direction.

A single reference line, the middle line of the staff, decides which way a
stem points. Notes strictly above it take a downward stem; notes on or
below it take an upward stem. Beam groups use the mean y of their notes.
"""

import statistics
import typing

import noteplop.constants.staff
import noteplop.notes


UP = "up"
DOWN = "down"

StemDirection = str


def stem_direction_for (
	value: typing.Union[float, typing.Sequence[noteplop.notes.Note]],
	middle_line: float = noteplop.constants.staff.MIDDLE_STAFF_LINE,
) -> StemDirection:

	"""
	Resolve the stem direction for one y coordinate or a group of notes.

	Parameters:
		value: A note's y coordinate, or a sequence of notes (a beam group).
			An empty sequence resolves to ``"up"``.
		middle_line: The y of the middle staff line. Smaller y is higher
			on the staff.

	Returns:
		``"up"`` or ``"down"``. A note exactly on the middle line is ``"up"``.
	"""

	if isinstance(value, (int, float)):
		y = float(value)

	else:
		if not value:
			return UP
		y = statistics.fmean(note.y for note in value)

	return DOWN if y < middle_line else UP


def stem_x (note: noteplop.notes.Note, direction: StemDirection, offset: float = noteplop.constants.staff.STEM_OFFSET) -> float:

	"""
	x coordinate of a note's stem.

	Up stems sit on the right of the head, down stems on the left.
	"""

	return note.x + offset if direction == UP else note.x - offset
