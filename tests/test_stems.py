import noteplop.notes
import noteplop.stems

from noteplop.durations import Duration


def _note (y: float, x: float = 300.0) -> noteplop.notes.Note:
	return noteplop.notes.Note(None, x, y, Duration.EIGHTH)


def test_stem_direction_single_notes () -> None:

	"""Above the middle line stems point down; on or below it, up."""

	assert noteplop.stems.stem_direction_for(250.0) == noteplop.stems.DOWN
	assert noteplop.stems.stem_direction_for(550.0) == noteplop.stems.UP
	assert noteplop.stems.stem_direction_for(400.0) == noteplop.stems.UP
	assert noteplop.stems.stem_direction_for(399.0) == noteplop.stems.DOWN


def test_stem_direction_uses_group_mean () -> None:

	"""A group resolves its direction from the mean y of its notes."""

	assert noteplop.stems.stem_direction_for([_note(250.0), _note(475.0)]) == noteplop.stems.DOWN
	assert noteplop.stems.stem_direction_for([_note(325.0), _note(512.5)]) == noteplop.stems.UP


def test_empty_group_points_up () -> None:

	"""An empty group has no mean and defaults to up."""

	assert noteplop.stems.stem_direction_for([]) == noteplop.stems.UP


def test_custom_middle_line () -> None:

	"""The reference line can be moved."""

	assert noteplop.stems.stem_direction_for(450.0, middle_line=500.0) == noteplop.stems.DOWN


def test_stem_x () -> None:

	"""Up stems attach on the right of the head, down stems on the left."""

	note = _note(400.0, x=300.0)

	assert noteplop.stems.stem_x(note, noteplop.stems.UP) == 324.0
	assert noteplop.stems.stem_x(note, noteplop.stems.DOWN) == 276.0
