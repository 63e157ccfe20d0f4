"""Note durations and their spatial spans.

Every note value maps to two fixed spans:

- a **grid-step span** - how many of a measure's 15 grid steps the note
  covers. Beam spacing and duration connectors are measured in grid steps.
- a **beat span** - how many quarter-note beats the note lasts. This is only
  used to size the duration indicator drawn after a note head.

	=========  ==========  =====
	duration   grid steps  beats
	=========  ==========  =====
	whole      15          4
	half       8           2
	quarter    4           1
	eighth     2           0.5
	sixteenth  1           0.25
	=========  ==========  =====

The lookups are total. :class:`Duration` is a closed set so the fallback
branches below are unreachable with well-typed input, but a stray string
(for example from an old saved selection) is treated as a quarter note
instead of raising.
"""

import enum
import logging
import typing

if typing.TYPE_CHECKING:
	import noteplop.layout


logger = logging.getLogger(__name__)


class Duration (enum.Enum):

	"""The note values that can be placed on the staff."""

	WHOLE = "whole"
	HALF = "half"
	QUARTER = "quarter"
	EIGHTH = "eighth"
	SIXTEENTH = "sixteenth"


GRID_STEPS: typing.Dict[Duration, int] = {
	Duration.WHOLE: 15,
	Duration.HALF: 8,
	Duration.QUARTER: 4,
	Duration.EIGHTH: 2,
	Duration.SIXTEENTH: 1,
}

BEATS: typing.Dict[Duration, float] = {
	Duration.WHOLE: 4.0,
	Duration.HALF: 2.0,
	Duration.QUARTER: 1.0,
	Duration.EIGHTH: 0.5,
	Duration.SIXTEENTH: 0.25,
}

# One hue per duration, shared by note heads and connectors.
DURATION_COLORS: typing.Dict[Duration, str] = {
	Duration.WHOLE: "#4A90E2",
	Duration.HALF: "#50C878",
	Duration.QUARTER: "#F5A623",
	Duration.EIGHTH: "#FF6B35",
	Duration.SIXTEENTH: "#E83F6F",
}

FLAGS: typing.Dict[Duration, int] = {
	Duration.EIGHTH: 1,
	Duration.SIXTEENTH: 2,
}

BEAMABLE = frozenset({Duration.EIGHTH, Duration.SIXTEENTH})

FALLBACK_GRID_STEPS = GRID_STEPS[Duration.QUARTER]
FALLBACK_BEATS = BEATS[Duration.QUARTER]
FALLBACK_COLOR = "#FFFFFF"

DurationLike = typing.Union[Duration, str]


def parse_duration (value: DurationLike) -> Duration:

	"""
	Convert a duration name to a :class:`Duration`.

	Accepts the enum itself or its name in any case (``"quarter"``,
	``"EIGHTH"``). Raises ``ValueError`` for anything else, so use this at
	input boundaries rather than inside the geometry passes.
	"""

	if isinstance(value, Duration):
		return value

	try:
		return Duration(str(value).strip().lower())
	except ValueError:
		available = ", ".join(d.value for d in Duration)
		raise ValueError(f"Unknown duration {value!r}. Available durations: {available}") from None


def _coerce (value: DurationLike) -> typing.Optional[Duration]:

	"""Return *value* as a Duration, or None if it is not one."""

	if isinstance(value, Duration):
		return value

	try:
		return parse_duration(value)
	except ValueError:
		return None


def grid_steps (duration: DurationLike) -> int:

	"""
	Number of grid steps a note of this duration spans.

	Unknown values count as a quarter note (4 steps).
	"""

	resolved = _coerce(duration)

	if resolved is None:
		logger.debug(f"Unknown duration {duration!r}, spacing as a quarter note")
		return FALLBACK_GRID_STEPS

	return GRID_STEPS[resolved]


def beats (duration: DurationLike) -> float:

	"""Number of quarter-note beats for this duration; unknown values count as one beat."""

	resolved = _coerce(duration)

	if resolved is None:
		logger.debug(f"Unknown duration {duration!r}, treating as one beat")
		return FALLBACK_BEATS

	return BEATS[resolved]


def color_for (duration: DurationLike) -> str:
	resolved = _coerce(duration)
	return DURATION_COLORS[resolved] if resolved is not None else FALLBACK_COLOR


def is_beamable (duration: DurationLike) -> bool:

	"""Eighth and sixteenth notes can be joined by a beam."""

	return _coerce(duration) in BEAMABLE


def flag_count (duration: DurationLike) -> int:

	"""Flags drawn on the stem of an unbeamed note (1 for eighths, 2 for sixteenths)."""

	resolved = _coerce(duration)
	return FLAGS.get(resolved, 0) if resolved is not None else 0


def has_stem (duration: DurationLike) -> bool:

	"""Every duration except the whole note carries a stem."""

	return _coerce(duration) is not Duration.WHOLE


def span_width (duration: DurationLike, context: "noteplop.layout.MeasureContext") -> float:

	"""Horizontal distance covered by a note of this duration in the given measure."""

	return grid_steps(duration) * context.step_size


def indicator_length (duration: DurationLike, context: "noteplop.layout.MeasureContext") -> float:

	"""
	Length of the duration indicator line drawn after a note head.

	Proportional to the beat span: one beat is four grid steps wide.
	"""

	return beats(duration) * context.beat_width
