import pytest

import noteplop.durations
import noteplop.layout

from noteplop.durations import Duration


# ─── Spans ───────────────────────────────────────────────────────────────────


def test_grid_step_spans () -> None:

	"""Each duration covers a fixed number of grid steps."""

	assert noteplop.durations.grid_steps(Duration.WHOLE) == 15
	assert noteplop.durations.grid_steps(Duration.HALF) == 8
	assert noteplop.durations.grid_steps(Duration.QUARTER) == 4
	assert noteplop.durations.grid_steps(Duration.EIGHTH) == 2
	assert noteplop.durations.grid_steps(Duration.SIXTEENTH) == 1


def test_beat_spans () -> None:

	"""Beat spans follow note values in quarter-note beats."""

	assert noteplop.durations.beats(Duration.WHOLE) == 4.0
	assert noteplop.durations.beats(Duration.HALF) == 2.0
	assert noteplop.durations.beats(Duration.QUARTER) == 1.0
	assert noteplop.durations.beats(Duration.EIGHTH) == 0.5
	assert noteplop.durations.beats(Duration.SIXTEENTH) == 0.25


def test_unknown_duration_falls_back_to_quarter () -> None:

	"""Lookups never raise; an unknown value is treated as a quarter note."""

	assert noteplop.durations.grid_steps("dotted-breve") == 4
	assert noteplop.durations.beats("dotted-breve") == 1.0
	assert noteplop.durations.color_for("dotted-breve") == "#FFFFFF"
	assert noteplop.durations.is_beamable("dotted-breve") is False


def test_string_names_are_accepted () -> None:

	"""Duration names work anywhere an enum member does."""

	assert noteplop.durations.grid_steps("eighth") == 2
	assert noteplop.durations.color_for("HALF") == "#50C878"


def test_span_width_and_indicator_length (other_context: noteplop.layout.MeasureContext) -> None:

	"""Widths scale with the measure's step size: 48 outside the first measure."""

	assert noteplop.durations.span_width(Duration.HALF, other_context) == pytest.approx(384.0)
	assert noteplop.durations.indicator_length(Duration.QUARTER, other_context) == pytest.approx(192.0)
	assert noteplop.durations.indicator_length(Duration.SIXTEENTH, other_context) == pytest.approx(48.0)


# ─── Parsing ─────────────────────────────────────────────────────────────────


def test_parse_duration_is_case_insensitive () -> None:

	"""parse_duration accepts names in any case and with surrounding spaces."""

	assert noteplop.durations.parse_duration("EIGHTH") is Duration.EIGHTH
	assert noteplop.durations.parse_duration(" quarter ") is Duration.QUARTER
	assert noteplop.durations.parse_duration(Duration.WHOLE) is Duration.WHOLE


def test_parse_duration_rejects_unknown_names () -> None:

	"""An unknown name raises ValueError listing the available durations."""

	with pytest.raises(ValueError, match="sixteenth"):
		noteplop.durations.parse_duration("minim")


# ─── Drawing attributes ──────────────────────────────────────────────────────


def test_colors () -> None:

	"""Every duration has its own colour."""

	assert noteplop.durations.color_for(Duration.WHOLE) == "#4A90E2"
	assert noteplop.durations.color_for(Duration.QUARTER) == "#F5A623"
	assert noteplop.durations.color_for(Duration.EIGHTH) == "#FF6B35"
	assert noteplop.durations.color_for(Duration.SIXTEENTH) == "#E83F6F"
	assert len(set(noteplop.durations.DURATION_COLORS.values())) == len(Duration)


def test_beamable_flags_and_stems () -> None:

	"""Only eighths and sixteenths beam; only they carry flags; whole notes have no stem."""

	assert noteplop.durations.is_beamable(Duration.EIGHTH)
	assert noteplop.durations.is_beamable(Duration.SIXTEENTH)
	assert not noteplop.durations.is_beamable(Duration.QUARTER)

	assert noteplop.durations.flag_count(Duration.EIGHTH) == 1
	assert noteplop.durations.flag_count(Duration.SIXTEENTH) == 2
	assert noteplop.durations.flag_count(Duration.HALF) == 0

	assert not noteplop.durations.has_stem(Duration.WHOLE)
	assert noteplop.durations.has_stem(Duration.HALF)
