"""Group eighth and sixteenth notes into beamed runs.

Walking a measure left to right, consecutive eighth and sixteenth notes
accumulate into a run. A run ends at any other duration, or when the gap to
the previous member exceeds ``max_beam_distance`` (70 units, about two
sixteenth grid steps) - short notes far apart are not joined by a beam. Runs
of two or more notes become a :class:`BeamGroup`; a lone short note keeps its
own flag and is returned as unbeamed.

All stems of a group end on one shared rail, ``stem_length`` above the
highest note head, so each member's stem length is its distance to the rail.
"""

import dataclasses
import logging
import typing

import noteplop.constants.staff as staff
import noteplop.durations
import noteplop.layout
import noteplop.notes
import noteplop.stems

from noteplop.durations import Duration


logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class BeamSegment:

	"""
	A horizontal beam stroke from x1 to x2 at height y.
	"""

	x1: float
	x2: float
	y: float


@dataclasses.dataclass
class BeamGroup:

	"""
	A run of two or more eighth/sixteenth notes joined by a beam.

	Attributes:
		notes: Members in left-to-right order.
		rail_y: y of the primary beam, shared by every stem in the group.
		stem_direction: Direction resolved from the mean y of the members;
			decides which side of the heads the beam attaches to.
		stem_lengths: Stem length per member, in member order.
		primary: The main beam joining the first and last stems.
		secondary: Second-level beams for sixteenth notes.
	"""

	notes: typing.List[noteplop.notes.Note]
	rail_y: float
	stem_direction: noteplop.stems.StemDirection
	stem_lengths: typing.List[float]
	primary: BeamSegment
	secondary: typing.List[BeamSegment] = dataclasses.field(default_factory=list)

	def __len__ (self) -> int:
		return len(self.notes)

	@property
	def all_sixteenth (self) -> bool:
		return all(note.duration is Duration.SIXTEENTH for note in self.notes)

	def stem_length_for (self, note: noteplop.notes.Note) -> float:

		"""Stem length of a member note, looked up by identity."""

		for member, length in zip(self.notes, self.stem_lengths):
			if member is note:
				return length
		raise ValueError("note is not a member of this beam group")


@dataclasses.dataclass
class BeamingResult:

	"""
	The outcome of a beaming pass: every input note appears in exactly one
	of the two collections.
	"""

	beam_groups: typing.List[BeamGroup] = dataclasses.field(default_factory=list)
	unbeamed_notes: typing.List[noteplop.notes.Note] = dataclasses.field(default_factory=list)


def split_runs (
	notes: typing.Iterable[noteplop.notes.Note],
	max_distance: float = staff.MAX_BEAM_DISTANCE,
) -> typing.List[typing.List[noteplop.notes.Note]]:

	"""
	Partition notes into maximal beamable runs, in x order.

	Returned runs may be singletons; non-beamable notes are not included.
	"""

	runs: typing.List[typing.List[noteplop.notes.Note]] = []
	current: typing.List[noteplop.notes.Note] = []

	for note in noteplop.notes.sort_by_x(notes):

		if not noteplop.durations.is_beamable(note.duration):
			if current:
				runs.append(current)
			current = []
			continue

		if current and note.x - current[-1].x > max_distance:
			runs.append(current)
			current = []

		current.append(note)

	if current:
		runs.append(current)

	return runs


def _secondary_segments (
	notes: typing.Sequence[noteplop.notes.Note],
	direction: noteplop.stems.StemDirection,
	primary: BeamSegment,
	y: float,
) -> typing.List[BeamSegment]:

	"""
	Second-level beams for the sixteenth notes of a group.

	An all-sixteenth group gets one rail parallel to the primary. In a mixed
	group, each pair of neighbouring sixteenths is joined, and a sixteenth
	with no sixteenth neighbour gets a short stub.
	"""

	if not any(note.duration is Duration.SIXTEENTH for note in notes):
		return []

	if all(note.duration is Duration.SIXTEENTH for note in notes):
		return [BeamSegment(primary.x1, primary.x2, y)]

	segments: typing.List[BeamSegment] = []
	last = len(notes) - 1

	for i, note in enumerate(notes):

		if note.duration is not Duration.SIXTEENTH:
			continue

		x = noteplop.stems.stem_x(note, direction)
		prev_is_sixteenth = i > 0 and notes[i - 1].duration is Duration.SIXTEENTH
		next_is_sixteenth = i < last and notes[i + 1].duration is Duration.SIXTEENTH

		if next_is_sixteenth:
			segments.append(BeamSegment(x, noteplop.stems.stem_x(notes[i + 1], direction), y))

		elif not prev_is_sixteenth:
			# Isolated: stub points into the group
			if i == last:
				segments.append(BeamSegment(x - staff.BEAM_STUB_LENGTH, x, y))
			else:
				segments.append(BeamSegment(x, x + staff.BEAM_STUB_LENGTH, y))

	return segments


def build_beam_group (
	notes: typing.Sequence[noteplop.notes.Note],
	stem_length: float = staff.DEFAULT_STEM_LENGTH,
	middle_line: float = staff.MIDDLE_STAFF_LINE,
) -> BeamGroup:

	"""
	Compute the rail, stems and beam segments for an ordered run of notes.
	"""

	members = list(notes)
	rail_y = min(note.y for note in members) - stem_length
	direction = noteplop.stems.stem_direction_for(members, middle_line)

	first_x = noteplop.stems.stem_x(members[0], direction)
	last_x = noteplop.stems.stem_x(members[-1], direction)
	primary = BeamSegment(first_x - staff.BEAM_EXTENSION, last_x + staff.BEAM_EXTENSION, rail_y)

	return BeamGroup(
		notes = members,
		rail_y = rail_y,
		stem_direction = direction,
		stem_lengths = [note.y - rail_y for note in members],
		primary = primary,
		secondary = _secondary_segments(members, direction, primary, rail_y + staff.BEAM_SPACING),
	)


def group_for_beaming (
	notes: typing.Iterable[noteplop.notes.Note],
	layout: noteplop.layout.StaffLayout = noteplop.layout.DEFAULT_LAYOUT,
) -> BeamingResult:

	"""
	Partition a measure's notes into beam groups and individually drawn notes.

	Parameters:
		notes: The measure's notes in any order.
		layout: Supplies ``max_beam_distance``, ``stem_length`` and the
			middle line.

	Returns:
		A :class:`BeamingResult`. Groups always hold at least two notes;
		unbeamed notes are returned in x order.

	Example:
		```python
		result = group_for_beaming(measure_notes)
		for group in result.beam_groups:
			draw_beam(group.primary, *group.secondary)
		```
	"""

	ordered = noteplop.notes.sort_by_x(notes)
	runs = split_runs(ordered, layout.max_beam_distance)

	result = BeamingResult()
	beamed_ids: typing.Set[int] = set()

	for run in runs:

		if len(run) < 2:
			continue

		group = build_beam_group(run, layout.stem_length, layout.middle_line)
		result.beam_groups.append(group)
		beamed_ids.update(id(note) for note in run)

		logger.debug(f"Beam group of {len(run)} at x={run[0].x:.1f}..{run[-1].x:.1f}, rail y={group.rail_y:.1f}")

	result.unbeamed_notes = [note for note in ordered if id(note) not in beamed_ids]

	return result
