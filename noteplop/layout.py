"""Static staff and measure configuration.

Two small immutable objects carry everything the geometry passes need to
know about the page:

- :class:`StaffLayout` - the vertical geometry (staff lines, line spacing,
  ledger cap) plus the tunables of the stem, beam and connector passes.
- :class:`MeasureContext` - the horizontal geometry of one measure. The only
  thing that varies between measures is whether the measure is the first in
  its track, which reserves leading space for the clef and time signature.

Layouts can be loaded from YAML::

	staff:
	  ledger_cap: 3        # or null for an unbounded ladder
	  stem_length: 120
	  max_beam_distance: 70

Time signature plays no part here: every measure is divided into the same
15 grid steps whatever its meter.
"""

import dataclasses
import logging
import os
import typing

import yaml

import noteplop.constants.staff as staff


logger = logging.getLogger(__name__)


class LayoutError(ValueError):
	pass


@dataclasses.dataclass(frozen=True)
class StaffLayout:

	"""
	Vertical staff geometry and pass tunables.

	Parameters:
		line_positions: y coordinates of the staff lines, top to bottom.
		line_spacing: Distance between adjacent staff and ledger lines.
		ledger_cap: Ledger lines allowed per side. ``None`` lets the ladder
			run to the edges of the canvas and disables the vertical clamp.
		canvas_height: Height of the staff canvas.
		note_head_radius: Note head radius, used for the vertical clamp.
		stem_length: Default stem length, and the rail offset of beam groups.
		max_beam_distance: Largest horizontal gap bridged by a beam.
		connector_tolerance: Allowed difference between the actual and the
			expected gap of a duration connector.
		connector_inset: How far connector ends stop short of the note centres.
	"""

	line_positions: typing.Tuple[float, ...] = staff.STAFF_LINE_POSITIONS
	line_spacing: float = staff.LINE_SPACING
	ledger_cap: typing.Optional[int] = staff.DEFAULT_LEDGER_CAP
	canvas_height: float = staff.STAFF_HEIGHT
	note_head_radius: float = staff.NOTE_HEAD_RADIUS
	stem_length: float = staff.DEFAULT_STEM_LENGTH
	max_beam_distance: float = staff.MAX_BEAM_DISTANCE
	connector_tolerance: float = staff.CONNECTOR_TOLERANCE
	connector_inset: float = staff.CONNECTOR_INSET

	def __post_init__ (self) -> None:
		if len(self.line_positions) < 2:
			raise ValueError("a staff needs at least two lines")
		if list(self.line_positions) != sorted(self.line_positions):
			raise ValueError("line_positions must be ordered top to bottom")
		if self.line_spacing <= 0:
			raise ValueError("line_spacing must be positive")
		for upper, lower in zip(self.line_positions, self.line_positions[1:]):
			if abs((lower - upper) - self.line_spacing) > 1e-9:
				raise ValueError(f"staff lines must be line_spacing ({self.line_spacing}) apart")
		if self.ledger_cap is not None and self.ledger_cap < 0:
			raise ValueError("ledger_cap must be None or a non-negative integer")
		if self.stem_length <= 0:
			raise ValueError("stem_length must be positive")
		if self.max_beam_distance < 0:
			raise ValueError("max_beam_distance must not be negative")
		if self.connector_tolerance < 0:
			raise ValueError("connector_tolerance must not be negative")

	@property
	def top_line (self) -> float:
		return self.line_positions[0]

	@property
	def bottom_line (self) -> float:
		return self.line_positions[-1]

	@property
	def middle_line (self) -> float:

		"""The stem direction boundary: the centre line of the staff."""

		return (self.top_line + self.bottom_line) / 2.0

	@property
	def clamped (self) -> bool:

		"""Whether raw y input is clamped before snapping."""

		return self.ledger_cap is not None

	@property
	def min_y (self) -> float:

		"""
		Smallest placeable y.

		With a capped ladder this is the outermost ledger line above the
		staff, less half a note head and one unit (12 with the default
		geometry). An unbounded ladder is limited by the canvas only.
		"""

		if self.ledger_cap is None:
			return 0.0

		outermost = self.top_line - self.line_spacing * self.ledger_cap
		return outermost - self.note_head_radius / 2.0 - 1.0

	@property
	def max_y (self) -> float:

		"""Largest placeable y, mirroring :attr:`min_y` below the staff (788 by default)."""

		if self.ledger_cap is None:
			return float(self.canvas_height)

		outermost = self.bottom_line + self.line_spacing * self.ledger_cap
		return outermost + self.note_head_radius / 2.0 + 1.0


@dataclasses.dataclass(frozen=True)
class MeasureContext:

	"""
	Horizontal geometry of a single measure.

	The placeable span runs from :attr:`min_x` to ``max_x`` and is split
	into ``divisions`` equal steps. The first measure of a track starts at
	240, every other measure at 40.
	"""

	is_first: bool = False
	max_x: float = staff.MAX_X
	min_x_first: float = staff.MIN_X_FIRST_MEASURE
	min_x_other: float = staff.MIN_X_OTHER_MEASURES
	divisions: int = staff.GRID_DIVISIONS

	def __post_init__ (self) -> None:
		if self.divisions <= 0:
			raise ValueError("divisions must be positive")
		if self.min_x >= self.max_x:
			raise ValueError("min_x must be smaller than max_x")

	@staticmethod
	def for_measure (number: int) -> "MeasureContext":

		"""Build the context for a 1-based measure number."""

		return MeasureContext(is_first=(number == 1))

	@property
	def min_x (self) -> float:
		return self.min_x_first if self.is_first else self.min_x_other

	@property
	def step_size (self) -> float:

		"""
		Width of one grid step.

		(760 - 240) / 15 for the first measure is a repeating decimal, so
		comparisons against multiples of it need a tolerance.
		"""

		return (self.max_x - self.min_x) / self.divisions

	@property
	def beat_width (self) -> float:

		"""Width of one beat: four grid steps."""

		return self.step_size * 4

	def grid_x (self, index: int) -> float:

		"""Return the x coordinate of grid position *index*, clamped to the grid."""

		index = max(0, min(index, self.divisions))
		return self.min_x + index * self.step_size

	def grid_positions (self) -> typing.List[float]:

		"""All snap positions of the measure, left to right."""

		return [self.grid_x(i) for i in range(self.divisions + 1)]


DEFAULT_LAYOUT = StaffLayout()

_LAYOUT_KEYS = (
	"ledger_cap",
	"line_spacing",
	"stem_length",
	"max_beam_distance",
	"connector_tolerance",
	"connector_inset",
)


def _staff_lines (line_spacing: float) -> typing.Tuple[float, ...]:

	"""Five staff lines from the default top line, *line_spacing* apart."""

	return tuple(staff.TOP_STAFF_LINE + i * line_spacing for i in range(len(staff.STAFF_LINE_POSITIONS)))


def layout_from_dict (config: typing.Optional[typing.Dict[str, typing.Any]]) -> StaffLayout:

	"""
	Build a :class:`StaffLayout` from the ``staff`` section of a config dict.

	Unknown keys are rejected so that typos do not silently fall back to
	defaults. A ``line_spacing`` setting moves the staff lines too: they
	start at the default top line and are spaced by it, so the staff and
	the ledger lines always share one spacing.
	"""

	if not config:
		return DEFAULT_LAYOUT

	section = config.get("staff", {}) or {}

	if not isinstance(section, dict):
		raise LayoutError("'staff' must be a mapping")

	unknown = sorted(set(section) - set(_LAYOUT_KEYS))
	if unknown:
		raise LayoutError(f"Unknown staff settings: {', '.join(unknown)}")

	try:
		settings = dict(section)
		if "line_spacing" in settings:
			settings["line_spacing"] = float(settings["line_spacing"])
			settings["line_positions"] = _staff_lines(settings["line_spacing"])
		return StaffLayout(**settings)
	except (TypeError, ValueError) as e:
		raise LayoutError(f"Invalid staff settings: {e}") from e


def load_config (config_path: str = "config.yaml") -> typing.Dict[str, typing.Any]:

	"""
	Load configuration from a YAML file.

	A missing file is not an error: an empty configuration is returned.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return {}

	with open(config_path, "r") as f:
		config = yaml.safe_load(f)

	if config is None:
		return {}

	if not isinstance(config, dict):
		raise LayoutError(f"{config_path} must contain a mapping")

	return config


def load_layout (config_path: str = "config.yaml") -> StaffLayout:

	"""
	Load a staff layout from the ``staff`` section of a YAML file.
	"""

	layout = layout_from_dict(load_config(config_path))
	logger.info(f"Staff layout from {config_path}: ledger cap {layout.ledger_cap}, line spacing {layout.line_spacing}")
	return layout
