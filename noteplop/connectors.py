"""Duration connectors.

A connector is a vertical line linking a note to the note before it when
the horizontal gap between them is exactly the span of the earlier note's
duration: a quarter note covers four grid steps, so a note four steps to its
right "continues" it and the two are linked.

Matching walks the notes left to right and compares each note with its
immediate left neighbour only. The ghost note (the pointer preview) takes
part, so connectors appear live while a note is being placed or dragged.

Gaps are never compared for exact equality. The first measure's grid step,
(760 - 240) / 15, is a repeating decimal, so the actual and the expected gap
only agree within a small tolerance.

The all-pairs variant, which compares every note with every
earlier note after rounding both gaps to one decimal place, is available as
``strategy="all_pairs"``. It can produce several connectors ending on the
same note.
"""

import dataclasses
import logging
import typing

import noteplop.constants.staff as staff
import noteplop.durations
import noteplop.layout
import noteplop.notes


logger = logging.getLogger(__name__)

CHAIN = "chain"
ALL_PAIRS = "all_pairs"


@dataclasses.dataclass(frozen=True)
class Connector:

	"""
	A vertical connector between two notes.

	Attributes:
		x: x of the right-hand note, where the line is drawn.
		y1: End near the left-hand note.
		y2: End near the right-hand note.
		color: Colour of the left-hand note's duration.
	"""

	x: float
	y1: float
	y2: float
	color: str


def infer_context (notes: typing.Sequence[noteplop.notes.Note]) -> noteplop.layout.MeasureContext:

	"""
	Guess the measure geometry from the leftmost note.

	Only the first measure can hold a note at x = 240 as its leftmost
	position; used when the caller does not pass a context.
	"""

	if notes and abs(min(note.x for note in notes) - staff.MIN_X_FIRST_MEASURE) < 1e-6:
		return noteplop.layout.MeasureContext(is_first=True)
	return noteplop.layout.MeasureContext(is_first=False)


def _inset (y_from: float, y_to: float, inset: float) -> float:

	"""Move *y_from* toward *y_to* by *inset*, without passing the midpoint."""

	limit = abs(y_to - y_from) / 2.0
	step = min(inset, limit)
	return y_from + step if y_to > y_from else y_from - step


def _make_connector (left: noteplop.notes.Note, right: noteplop.notes.Note, inset: float) -> Connector:
	return Connector(
		x = right.x,
		y1 = _inset(left.y, right.y, inset),
		y2 = _inset(right.y, left.y, inset),
		color = noteplop.durations.color_for(left.duration),
	)


def _gap_matches (actual: float, expected: float, tolerance: float, strategy: str) -> bool:

	if strategy == ALL_PAIRS:
		return round(actual, 1) == round(expected, 1)

	return abs(actual - expected) <= tolerance


def find_connectors (
	notes: typing.Iterable[noteplop.notes.Note],
	ghost: typing.Optional[noteplop.notes.Note] = None,
	context: typing.Optional[noteplop.layout.MeasureContext] = None,
	layout: noteplop.layout.StaffLayout = noteplop.layout.DEFAULT_LAYOUT,
	strategy: str = CHAIN,
) -> typing.List[Connector]:

	"""
	Find the connectors between the notes of one measure.

	Parameters:
		notes: The measure's persisted notes, in any order.
		ghost: Optional preview note, merged in before matching.
		context: Geometry of the measure. Inferred from the notes if omitted.
		layout: Supplies the tolerance and the end inset.
		strategy: ``"chain"`` (default) compares each note with its left
			neighbour only; ``"all_pairs"`` compares with every earlier note.

	Returns:
		Connectors in left-to-right order of their right-hand note. Pairs
		at the same y never produce a connector.

	Example:
		```python
		# Two quarter notes four grid steps apart in the first measure
		ctx = MeasureContext(is_first=True)
		a = Note("a", 240.0, 400.0, Duration.QUARTER)
		b = Note("b", 240.0 + 4 * ctx.step_size, 325.0, Duration.QUARTER)
		find_connectors([a, b], context=ctx)	# one connector at b.x
		```
	"""

	if strategy not in (CHAIN, ALL_PAIRS):
		raise ValueError(f"Unknown connector strategy {strategy!r}")

	merged = list(notes)
	if ghost is not None:
		merged.append(ghost)

	if len(merged) < 2:
		return []

	ordered = noteplop.notes.sort_by_x(merged)

	if context is None:
		context = infer_context(ordered)

	step_size = context.step_size
	connectors: typing.List[Connector] = []

	logger.debug(f"Matching connectors over {len(ordered)} notes, step size {step_size:.3f} ({strategy})")

	for index in range(1, len(ordered)):

		current = ordered[index]
		candidates = ordered[index - 1:index] if strategy == CHAIN else ordered[:index]

		for previous in candidates:

			if abs(current.y - previous.y) <= layout.connector_tolerance:
				continue

			actual = current.x - previous.x
			expected = noteplop.durations.grid_steps(previous.duration) * step_size
			matched = _gap_matches(actual, expected, layout.connector_tolerance, strategy)

			logger.debug(
				f"{previous.duration} at x={previous.x:.2f} -> x={current.x:.2f}: "
				f"expected {expected:.2f}, actual {actual:.2f}, match={matched}"
			)

			if matched:
				connectors.append(_make_connector(previous, current, layout.connector_inset))

	return connectors
