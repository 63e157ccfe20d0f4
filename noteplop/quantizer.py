"""Snap raw pointer coordinates onto the staff grid.

Horizontally, every measure has 16 snap positions: the placeable span is
divided into 15 equal steps and a raw x snaps to the nearest step, clamped
to the ends of the span.

Vertically, y snaps to a precomputed *ladder* of staff lines, the spaces
between and around them, and the ledger lines and ledger spaces beyond the
staff. With the default layout the ladder holds three ledger lines per side::

	 25   62.5  100  137.5  175  212.5        (ledger lines and spaces above)
	250  287.5  325  362.5  400  437.5  475  512.5  550   (staff)
	587.5  625  662.5  700  737.5  775        (below)

Raw input is clamped to ``[layout.min_y, layout.max_y]`` (12 to 788) before
the nearest rung is chosen. With ``ledger_cap=None`` the ladder continues to
the edges of the canvas instead and no clamp is applied.
"""

import bisect
import math
import typing

import noteplop.layout
import noteplop.notes


def build_snap_ladder (layout: noteplop.layout.StaffLayout) -> typing.List[float]:

	"""
	Return every valid vertical note position, ordered top to bottom.
	"""

	spacing = layout.line_spacing
	half = spacing / 2.0
	rungs: typing.Set[float] = set(layout.line_positions)

	for upper, lower in zip(layout.line_positions, layout.line_positions[1:]):
		rungs.add((upper + lower) / 2.0)

	# The space just outside each outer line, unless no ledger lines are allowed
	if layout.ledger_cap is None or layout.ledger_cap >= 1:
		rungs.add(layout.top_line - half)
		rungs.add(layout.bottom_line + half)

	if layout.ledger_cap is not None:
		for i in range(1, layout.ledger_cap + 1):
			rungs.add(layout.top_line - spacing * i)
			rungs.add(layout.bottom_line + spacing * i)
			# The space beyond the last ledger line is not placeable
			if i < layout.ledger_cap:
				rungs.add(layout.top_line - spacing * i - half)
				rungs.add(layout.bottom_line + spacing * i + half)

	else:
		y = layout.top_line - spacing
		while y >= 0:
			rungs.add(y)
			y -= half

		y = layout.bottom_line + spacing
		while y <= layout.canvas_height:
			rungs.add(y)
			y += half

	return sorted(rungs)


def _round_half_up (value: float) -> int:
	return int(math.floor(value + 0.5))


class GridQuantizer:

	"""
	Snaps points to the grid of a given staff layout.

	The ladder is built once per quantizer; measure geometry is passed per
	call because it differs between the first and the other measures.
	"""

	def __init__ (self, layout: noteplop.layout.StaffLayout = noteplop.layout.DEFAULT_LAYOUT) -> None:

		"""
		Precompute the snap ladder for *layout*.
		"""

		self.layout = layout
		self.ladder: typing.List[float] = build_snap_ladder(layout)


	def snap_index (self, x: float, context: noteplop.layout.MeasureContext) -> int:

		"""Return the grid position (0 to 15) nearest to *x*."""

		index = _round_half_up((x - context.min_x) / context.step_size)
		return max(0, min(index, context.divisions))


	def snap_x (self, x: float, context: noteplop.layout.MeasureContext) -> float:
		return context.grid_x(self.snap_index(x, context))


	def snap_y (self, y: float) -> float:

		"""
		Return the ladder rung nearest to *y*.

		When two rungs are equally close the upper one wins.
		"""

		if self.layout.clamped:
			y = max(self.layout.min_y, min(y, self.layout.max_y))

		i = bisect.bisect_left(self.ladder, y)

		if i == 0:
			return self.ladder[0]
		if i == len(self.ladder):
			return self.ladder[-1]

		above = self.ladder[i - 1]
		below = self.ladder[i]
		return below if abs(below - y) < abs(above - y) else above


	def quantize (self, point: noteplop.notes.Point, context: noteplop.layout.MeasureContext) -> noteplop.notes.Point:

		"""
		Snap a raw pointer position to the nearest valid placement.

		Quantizing an already snapped point returns it unchanged.
		"""

		return noteplop.notes.Point(self.snap_x(point.x, context), self.snap_y(point.y))


	def is_within_bounds (self, point: noteplop.notes.Point, context: noteplop.layout.MeasureContext) -> bool:

		"""
		Whether a raw pointer position lies inside the placeable region.

		A note dragged outside this region is deleted.
		"""

		return (
			self.layout.min_y <= point.y <= self.layout.max_y
			and context.min_x <= point.x <= context.max_x
		)


def is_occupied (notes: typing.Iterable[noteplop.notes.Note], point: noteplop.notes.Point) -> bool:

	"""
	Whether a note already sits exactly on *point*.

	Placement at an occupied spot is skipped, not reported as an error.
	"""

	return any(note.x == point.x and note.y == point.y for note in notes)


_default_quantizer = GridQuantizer()


def quantize (
	point: noteplop.notes.Point,
	context: noteplop.layout.MeasureContext,
	layout: typing.Optional[noteplop.layout.StaffLayout] = None,
) -> noteplop.notes.Point:

	"""
	Snap *point* using the default layout, or *layout* if given.
	"""

	quantizer = _default_quantizer if layout is None or layout == _default_quantizer.layout else GridQuantizer(layout)
	return quantizer.quantize(point, context)
