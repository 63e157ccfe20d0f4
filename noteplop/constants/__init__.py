"""Constants for noteplop.

This package contains the fixed staff geometry shared by every layout pass:

- ``noteplop.constants.staff`` - Staff lines, placeable horizontal span, note
  head size, stems, beams and connector insets, all in SVG user units.

The most frequently used values are re-exported here, so
``noteplop.constants.MIDDLE_STAFF_LINE`` works without the sub-module import.
"""

from noteplop.constants.staff import (
	BOTTOM_STAFF_LINE,
	GRID_DIVISIONS,
	LINE_SPACING,
	MAX_X,
	MIDDLE_STAFF_LINE,
	MIN_X_FIRST_MEASURE,
	MIN_X_OTHER_MEASURES,
	STAFF_LINE_POSITIONS,
	TOP_STAFF_LINE,
)

__all__ = [
	"BOTTOM_STAFF_LINE",
	"GRID_DIVISIONS",
	"LINE_SPACING",
	"MAX_X",
	"MIDDLE_STAFF_LINE",
	"MIN_X_FIRST_MEASURE",
	"MIN_X_OTHER_MEASURES",
	"STAFF_LINE_POSITIONS",
	"TOP_STAFF_LINE",
]
