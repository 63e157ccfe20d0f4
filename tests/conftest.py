import typing

import pytest

import noteplop.durations
import noteplop.layout
import noteplop.notes


@pytest.fixture
def first_context () -> noteplop.layout.MeasureContext:

	"""Geometry of measure 1: min_x = 240, step (760 - 240) / 15."""

	return noteplop.layout.MeasureContext(is_first=True)


@pytest.fixture
def other_context () -> noteplop.layout.MeasureContext:

	"""Geometry of any later measure: min_x = 40, step 48."""

	return noteplop.layout.MeasureContext(is_first=False)


@pytest.fixture
def unbounded_layout () -> noteplop.layout.StaffLayout:

	"""A layout whose ladder runs to the edges of the canvas."""

	return noteplop.layout.StaffLayout(ledger_cap=None)


@pytest.fixture
def make_note () -> typing.Callable[..., noteplop.notes.Note]:

	"""Factory for notes positioned by grid index within a measure."""

	counter = iter(range(1, 1000))

	def _make (
		context: noteplop.layout.MeasureContext,
		index: int,
		y: float = 400.0,
		duration: noteplop.durations.DurationLike = "quarter",
	) -> noteplop.notes.Note:

		"""Build a stored note at grid position *index*."""

		return noteplop.notes.Note(
			id = f"note-{next(counter)}",
			x = context.grid_x(index),
			y = y,
			duration = noteplop.durations.parse_duration(duration),
		)

	return _make
