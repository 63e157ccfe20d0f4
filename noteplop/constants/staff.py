"""Staff geometry constants.

All values are in SVG user units of an 800 x 900 staff canvas. The five staff
lines are 75 units apart with the middle line at 400:

- ``TOP_STAFF_LINE = 250`` - line 1
- ``MIDDLE_STAFF_LINE = 400`` - line 3, the stem direction boundary
- ``BOTTOM_STAFF_LINE = 550`` - line 5

Notes are placed between ``MIN_X_*`` and ``MAX_X`` on a grid of
``GRID_DIVISIONS`` equal steps (16 snap positions including both ends). The
first measure of a track starts further right to leave room for the clef and
time signature.
"""

# Canvas

STAFF_HEIGHT = 900

# Staff lines (top to bottom)

LINE_SPACING = 75.0
STAFF_LINE_POSITIONS = (250.0, 325.0, 400.0, 475.0, 550.0)
TOP_STAFF_LINE = STAFF_LINE_POSITIONS[0]
MIDDLE_STAFF_LINE = STAFF_LINE_POSITIONS[2]
BOTTOM_STAFF_LINE = STAFF_LINE_POSITIONS[-1]

# Ledger lines drawn per side when the snap ladder is capped
DEFAULT_LEDGER_CAP = 3

# Horizontal grid

MIN_X_FIRST_MEASURE = 240.0
MIN_X_OTHER_MEASURES = 40.0
MAX_X = 760.0					# 40 units short of the right bar line at 800
GRID_DIVISIONS = 15

# Note heads and stems

NOTE_HEAD_RADIUS = 24.0
STEM_OFFSET = NOTE_HEAD_RADIUS	# stems attach to the side of the head
DEFAULT_STEM_LENGTH = 120.0

# Beams

MAX_BEAM_DISTANCE = 70.0		# roughly two sixteenth grid steps
BEAM_SPACING = 13.0				# primary to secondary rail
BEAM_EXTENSION = 3.0			# primary beam overhang past the outer stems
BEAM_STUB_LENGTH = 20.0			# partial secondary beam on an isolated sixteenth

# Duration connectors

CONNECTOR_TOLERANCE = 0.05
CONNECTOR_INSET = 6.0
