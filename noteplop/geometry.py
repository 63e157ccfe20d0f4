"""Render-ready geometry for one measure.

:func:`build_geometry` runs the independent layout passes over a measure's
notes and gathers their output into a :class:`GeometryBundle`:

- beaming (:mod:`noteplop.beaming`) splits notes into beam groups and
  individually drawn notes,
- stem direction (:mod:`noteplop.stems`) orients each unbeamed stem,
- ledger lines (:mod:`noteplop.ledger`) extend the staff for each note,
- connectors (:mod:`noteplop.connectors`) link notes whose spacing matches
  their duration.

No pass reads another pass's output except through the bundle, and nothing
is cached: call :func:`build_geometry` again after every change to the notes
or to the ghost position. Each pass is linear in the note count after the
x sort, and a measure holds at most a handful of notes per grid position.
"""

import dataclasses
import logging
import typing

import noteplop.beaming
import noteplop.connectors
import noteplop.durations
import noteplop.layout
import noteplop.ledger
import noteplop.notes
import noteplop.stems


logger = logging.getLogger(__name__)


@dataclasses.dataclass
class NoteGeometry:

	"""
	Everything needed to draw one note head with its stem and ledger lines.

	Attributes:
		note: The note itself.
		ledger_lines: y of each ledger line to draw behind the head.
		stem_direction: ``"up"`` or ``"down"``.
		stem_length: Stem length, or ``None`` for stemless whole notes.
		flags: Number of flags on the stem (0 when beamed).
		indicator_length: Length of the duration indicator line, or
			``None`` when indicators are switched off.
		beamed: Whether the stem ends on a beam rail.
	"""

	note: noteplop.notes.Note
	ledger_lines: typing.List[float]
	stem_direction: noteplop.stems.StemDirection
	stem_length: typing.Optional[float]
	flags: int = 0
	indicator_length: typing.Optional[float] = None
	beamed: bool = False


@dataclasses.dataclass
class GeometryBundle:

	"""
	The complete geometry of a measure, ready for a renderer.
	"""

	context: noteplop.layout.MeasureContext
	notes: typing.List[noteplop.notes.Note] = dataclasses.field(default_factory=list)
	unbeamed: typing.List[NoteGeometry] = dataclasses.field(default_factory=list)
	beamed: typing.List[NoteGeometry] = dataclasses.field(default_factory=list)
	beam_groups: typing.List[noteplop.beaming.BeamGroup] = dataclasses.field(default_factory=list)
	connectors: typing.List[noteplop.connectors.Connector] = dataclasses.field(default_factory=list)
	ghost: typing.Optional[NoteGeometry] = None

	def all_note_geometry (self) -> typing.List[NoteGeometry]:

		"""Geometry for every persisted note, ordered by x."""

		return sorted(self.unbeamed + self.beamed, key=lambda g: g.note.x)


def note_geometry (
	note: noteplop.notes.Note,
	context: noteplop.layout.MeasureContext,
	layout: noteplop.layout.StaffLayout = noteplop.layout.DEFAULT_LAYOUT,
	show_duration_indicators: bool = True,
) -> NoteGeometry:

	"""
	Geometry of a note drawn on its own, with a default-length stem and flags.
	"""

	has_stem = noteplop.durations.has_stem(note.duration)

	return NoteGeometry(
		note = note,
		ledger_lines = noteplop.ledger.ledger_lines_for(note.y, layout),
		stem_direction = noteplop.stems.stem_direction_for(note.y, layout.middle_line),
		stem_length = layout.stem_length if has_stem else None,
		flags = noteplop.durations.flag_count(note.duration),
		indicator_length = noteplop.durations.indicator_length(note.duration, context) if show_duration_indicators else None,
	)


def build_geometry (
	notes: typing.Iterable[noteplop.notes.Note],
	context: noteplop.layout.MeasureContext,
	ghost: typing.Optional[noteplop.notes.Note] = None,
	layout: noteplop.layout.StaffLayout = noteplop.layout.DEFAULT_LAYOUT,
	show_duration_indicators: bool = True,
	connector_strategy: str = noteplop.connectors.CHAIN,
) -> GeometryBundle:

	"""
	Compute the geometry of one measure.

	Parameters:
		notes: The measure's persisted notes, in insertion order.
		context: Horizontal geometry of the measure.
		ghost: Optional preview note. It only takes part in connector
			matching; it never joins a beam group.
		layout: Staff layout and pass tunables.
		show_duration_indicators: Whether to size duration indicator lines.
		connector_strategy: Passed to :func:`noteplop.connectors.find_connectors`.

	Returns:
		A :class:`GeometryBundle`. An empty measure yields empty collections.
	"""

	ordered = noteplop.notes.sort_by_x(notes)
	bundle = GeometryBundle(context=context, notes=ordered)

	beaming = noteplop.beaming.group_for_beaming(ordered, layout)
	bundle.beam_groups = beaming.beam_groups

	for note in beaming.unbeamed_notes:
		bundle.unbeamed.append(note_geometry(note, context, layout, show_duration_indicators))

	for group in beaming.beam_groups:
		for note, stem_length in zip(group.notes, group.stem_lengths):
			geometry = note_geometry(note, context, layout, show_duration_indicators)
			geometry.stem_direction = group.stem_direction
			geometry.stem_length = stem_length
			geometry.flags = 0
			geometry.beamed = True
			bundle.beamed.append(geometry)

	bundle.connectors = noteplop.connectors.find_connectors(
		ordered,
		ghost = ghost,
		context = context,
		layout = layout,
		strategy = connector_strategy,
	)

	if ghost is not None:
		bundle.ghost = note_geometry(ghost, context, layout, show_duration_indicators)

	logger.debug(
		f"Geometry pass: {len(ordered)} notes, {len(bundle.beam_groups)} beam groups, "
		f"{len(bundle.connectors)} connectors"
	)

	return bundle
