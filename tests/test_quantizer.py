import pytest

import noteplop.layout
import noteplop.notes
import noteplop.quantizer

from noteplop.durations import Duration
from noteplop.notes import Point


DEFAULT_LADDER = [
	25.0, 62.5, 100.0, 137.5, 175.0, 212.5,
	250.0, 287.5, 325.0, 362.5, 400.0, 437.5, 475.0, 512.5, 550.0,
	587.5, 625.0, 662.5, 700.0, 737.5, 775.0,
]


@pytest.fixture
def quantizer () -> noteplop.quantizer.GridQuantizer:
	return noteplop.quantizer.GridQuantizer()


# ─── Snap ladder ─────────────────────────────────────────────────────────────


def test_default_ladder () -> None:

	"""Three ledger lines per side, no space beyond the outermost ledger line."""

	assert noteplop.quantizer.build_snap_ladder(noteplop.layout.DEFAULT_LAYOUT) == DEFAULT_LADDER


def test_ladder_with_smaller_cap () -> None:

	"""A cap of one keeps a single ledger line on each side."""

	ladder = noteplop.quantizer.build_snap_ladder(noteplop.layout.StaffLayout(ledger_cap=1))

	assert ladder[0] == 175.0
	assert ladder[-1] == 625.0
	assert 137.5 not in ladder
	assert 212.5 in ladder


def test_unbounded_ladder_reaches_canvas_edges (unbounded_layout: noteplop.layout.StaffLayout) -> None:

	"""Without a cap the ladder runs in half-spacing steps to the canvas."""

	ladder = noteplop.quantizer.build_snap_ladder(unbounded_layout)

	assert ladder[0] == 25.0
	assert ladder[-1] == 887.5
	assert 850.0 in ladder
	assert ladder == sorted(set(ladder))


# ─── Horizontal snapping ─────────────────────────────────────────────────────


def test_snap_x_returns_a_grid_position (quantizer: noteplop.quantizer.GridQuantizer, first_context: noteplop.layout.MeasureContext, other_context: noteplop.layout.MeasureContext) -> None:

	"""Any raw x snaps to one of the 16 grid positions of its measure."""

	for context in (first_context, other_context):
		positions = context.grid_positions()
		for x in range(0, 900, 7):
			assert quantizer.snap_x(float(x), context) in positions


def test_snap_x_clamps (quantizer: noteplop.quantizer.GridQuantizer, first_context: noteplop.layout.MeasureContext) -> None:

	"""x outside the measure snaps to the nearest end of the grid."""

	assert quantizer.snap_x(0.0, first_context) == 240.0
	assert quantizer.snap_x(1000.0, first_context) == first_context.grid_x(15)


def test_snap_x_rounds_half_up (quantizer: noteplop.quantizer.GridQuantizer, other_context: noteplop.layout.MeasureContext) -> None:

	"""A point exactly between two grid positions goes to the right-hand one."""

	assert quantizer.snap_index(64.0, other_context) == 1
	assert quantizer.snap_index(63.9, other_context) == 0


# ─── Vertical snapping ───────────────────────────────────────────────────────


def test_snap_y_nearest_rung (quantizer: noteplop.quantizer.GridQuantizer) -> None:

	"""y snaps to the closest line or space."""

	assert quantizer.snap_y(260.0) == 250.0
	assert quantizer.snap_y(280.0) == 287.5
	assert quantizer.snap_y(401.0) == 400.0


def test_snap_y_tie_goes_up (quantizer: noteplop.quantizer.GridQuantizer) -> None:

	"""Halfway between two rungs the upper (smaller y) rung wins."""

	assert quantizer.snap_y(268.75) == 250.0


def test_snap_y_clamps (quantizer: noteplop.quantizer.GridQuantizer) -> None:

	"""Extreme y lands on the outermost ledger lines."""

	assert quantizer.snap_y(-500.0) == 25.0
	assert quantizer.snap_y(0.0) == 25.0
	assert quantizer.snap_y(900.0) == 775.0


def test_snap_y_unbounded (unbounded_layout: noteplop.layout.StaffLayout) -> None:

	"""An unbounded quantizer snaps far below the staff."""

	quantizer = noteplop.quantizer.GridQuantizer(unbounded_layout)

	assert quantizer.snap_y(860.0) == 850.0
	assert quantizer.snap_y(899.0) == 887.5


def test_quantize_lands_on_ladder_and_is_idempotent (quantizer: noteplop.quantizer.GridQuantizer, first_context: noteplop.layout.MeasureContext) -> None:

	"""Quantized points are valid placements and quantizing them again changes nothing."""

	for x in range(100, 900, 37):
		for y in range(-50, 950, 23):
			snapped = quantizer.quantize(Point(float(x), float(y)), first_context)
			assert snapped.y in quantizer.ladder
			assert snapped.x in first_context.grid_positions()
			assert quantizer.quantize(snapped, first_context) == snapped


def test_module_level_quantize (first_context: noteplop.layout.MeasureContext) -> None:

	"""quantize() uses the default layout unless another one is passed."""

	assert noteplop.quantizer.quantize(Point(250.0, 5.0), first_context) == Point(240.0, 25.0)

	capped = noteplop.layout.StaffLayout(ledger_cap=1)
	assert noteplop.quantizer.quantize(Point(250.0, 5.0), first_context, capped) == Point(240.0, 175.0)


# ─── Bounds and occupancy ────────────────────────────────────────────────────


def test_is_within_bounds (quantizer: noteplop.quantizer.GridQuantizer, first_context: noteplop.layout.MeasureContext, other_context: noteplop.layout.MeasureContext) -> None:

	"""The placeable region is the measure span and the clamp range."""

	assert quantizer.is_within_bounds(Point(500.0, 400.0), first_context)
	assert not quantizer.is_within_bounds(Point(200.0, 400.0), first_context)
	assert quantizer.is_within_bounds(Point(200.0, 400.0), other_context)
	assert not quantizer.is_within_bounds(Point(500.0, 5.0), first_context)
	assert not quantizer.is_within_bounds(Point(500.0, 795.0), first_context)
	assert not quantizer.is_within_bounds(Point(770.0, 400.0), other_context)


def test_is_occupied () -> None:

	"""Occupancy is an exact position match, whatever the duration."""

	notes = [noteplop.notes.Note("a", 240.0, 400.0, Duration.QUARTER)]

	assert noteplop.quantizer.is_occupied(notes, Point(240.0, 400.0))
	assert not noteplop.quantizer.is_occupied(notes, Point(240.0, 362.5))
	assert not noteplop.quantizer.is_occupied([], Point(240.0, 400.0))


def test_ladder_without_ledger_lines () -> None:

	"""With a cap of zero the ladder stops at the outer staff lines."""

	layout = noteplop.layout.StaffLayout(ledger_cap=0)
	quantizer = noteplop.quantizer.GridQuantizer(layout)

	assert quantizer.ladder[0] == 250.0
	assert quantizer.ladder[-1] == 550.0
	assert 212.5 not in quantizer.ladder
	assert 587.5 not in quantizer.ladder
	assert quantizer.snap_y(0.0) == 250.0
	assert quantizer.snap_y(900.0) == 550.0
