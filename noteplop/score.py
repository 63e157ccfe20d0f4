"""In-memory score store for a single track.

The store owns note and measure identity: ids come from a per-track counter
(``"measure-1"``, ``"note-2"``, ...) and the geometry passes treat them as
opaque values. Measures are numbered 1..n in track order and renumbered
whenever one is inserted or deleted; measure 1 is the first in the track and
gets the wider clef/time-signature margin.

Every change that affects geometry is announced on :attr:`Track.events`:
a specific event (``note_added``, ``note_moved``, ``note_deleted``,
``measure_added``, ``measure_deleted``, ``measure_updated``) followed by a
generic ``changed`` event, both called with the affected :class:`Measure`.

```python
track = Track()
track.events.on("changed", lambda measure: redraw(measure))
note_id = track.add_note(track.measures[0].id, 240.0, 400.0, "quarter")
```
"""

import dataclasses
import itertools
import logging
import typing

import noteplop.durations
import noteplop.event_emitter
import noteplop.layout
import noteplop.notes


logger = logging.getLogger(__name__)

TIME_SIGNATURES = ("4/4", "3/4", "6/8", "2/4")
CLEFS = ("treble", "bass", "alto")


def _check_time_signature (time_signature: str) -> None:
	if time_signature not in TIME_SIGNATURES:
		raise ValueError(f"Unsupported time signature {time_signature!r}. Available: {', '.join(TIME_SIGNATURES)}")


def _check_clef (clef: str) -> None:
	if clef not in CLEFS:
		raise ValueError(f"Unsupported clef {clef!r}. Available: {', '.join(CLEFS)}")


@dataclasses.dataclass
class Measure:

	"""
	One measure of a track.

	``time_signature`` and ``clef`` are for rendering only; quantization uses
	the same 15-step grid for every meter. A measure without its own clef
	uses the track's.
	"""

	id: str
	number: int
	time_signature: str = "4/4"
	clef: typing.Optional[str] = None
	notes: typing.List[noteplop.notes.Note] = dataclasses.field(default_factory=list)

	@property
	def is_first (self) -> bool:
		return self.number == 1

	@property
	def context (self) -> noteplop.layout.MeasureContext:
		return noteplop.layout.MeasureContext.for_measure(self.number)

	def find_note (self, note_id: typing.Hashable) -> typing.Optional[noteplop.notes.Note]:
		for note in self.notes:
			if note.id == note_id:
				return note
		return None


class Track:

	"""
	An ordered list of measures and the notes they hold.
	"""

	def __init__ (self, name: str = "Piano", clef: str = "treble", time_signature: str = "4/4") -> None:

		"""
		Create a track holding a single empty measure.
		"""

		_check_clef(clef)
		_check_time_signature(time_signature)

		self.name = name
		self.clef = clef
		self.events = noteplop.event_emitter.EventEmitter()

		self._ids = itertools.count(1)
		self.measures: typing.List[Measure] = [
			Measure(id=self._next_id("measure"), number=1, time_signature=time_signature)
		]


	def _next_id (self, prefix: str) -> str:
		return f"{prefix}-{next(self._ids)}"


	def _renumber (self) -> None:
		for index, measure in enumerate(self.measures):
			measure.number = index + 1


	def _announce (self, event_name: str, measure: Measure, *args: typing.Any) -> None:
		self.events.emit(event_name, measure, *args)
		self.events.emit("changed", measure)


	def measure (self, measure_id: str) -> Measure:

		"""
		Look up a measure by id. Raises ``KeyError`` if there is none.
		"""

		for measure in self.measures:
			if measure.id == measure_id:
				return measure
		raise KeyError(f"No measure with id {measure_id!r}")


	def index_of (self, measure_id: str) -> int:
		return self.measures.index(self.measure(measure_id))


	def clef_for (self, measure: Measure) -> str:
		return measure.clef or self.clef


	# ── Measures ─────────────────────────────────────────────────────

	def add_measure (self, time_signature: str = "4/4", after: typing.Optional[str] = None) -> str:

		"""
		Insert an empty measure and return its id.

		Parameters:
			time_signature: Time signature of the new measure.
			after: Id of the measure to insert after. Appends to the end of
				the track when omitted.
		"""

		_check_time_signature(time_signature)

		position = len(self.measures) if after is None else self.index_of(after) + 1
		measure = Measure(id=self._next_id("measure"), number=position + 1, time_signature=time_signature)

		self.measures.insert(position, measure)
		self._renumber()

		logger.info(f"Added measure {measure.number} ({measure.id})")
		self._announce("measure_added", measure)
		return measure.id


	def delete_measure (self, measure_id: str) -> None:

		"""
		Remove a measure and renumber the rest.

		A track always keeps at least one measure, and the first measure
		stays first: its notes sit on the wider-margin grid, so no other
		measure's notes may move into its place.
		"""

		measure = self.measure(measure_id)

		if len(self.measures) == 1:
			raise ValueError("Cannot delete the only measure of a track")

		if measure.is_first:
			raise ValueError("Cannot delete the first measure of a track")

		self.measures.remove(measure)
		self._renumber()

		logger.info(f"Deleted measure {measure_id}, {len(self.measures)} remaining")
		self._announce("measure_deleted", measure)


	def set_time_signature (self, measure_id: str, time_signature: str) -> None:
		_check_time_signature(time_signature)
		measure = self.measure(measure_id)
		measure.time_signature = time_signature
		self._announce("measure_updated", measure)


	def set_clef (self, measure_id: str, clef: str) -> None:
		_check_clef(clef)
		measure = self.measure(measure_id)
		measure.clef = clef
		self._announce("measure_updated", measure)


	# ── Notes ────────────────────────────────────────────────────────

	def add_note (
		self,
		measure_id: str,
		x: float,
		y: float,
		duration: noteplop.durations.DurationLike,
	) -> str:

		"""
		Store a new note and return its id.

		Positions are stored as given; callers pass snapped coordinates.
		"""

		measure = self.measure(measure_id)
		note = noteplop.notes.Note(
			id = self._next_id("note"),
			x = x,
			y = y,
			duration = noteplop.durations.parse_duration(duration),
		)
		measure.notes.append(note)

		logger.info(f"Added {note.duration.value} note {note.id} at ({x:.2f}, {y:.2f}) in measure {measure.number}")
		self._announce("note_added", measure, note)
		return typing.cast(str, note.id)


	def move_note (self, measure_id: str, note_id: str, x: float, y: float) -> None:

		"""
		Move a note to a new position. Its duration is kept.
		"""

		measure = self.measure(measure_id)

		for index, note in enumerate(measure.notes):
			if note.id == note_id:
				moved = note.moved_to(x, y)
				measure.notes[index] = moved
				logger.info(f"Moved note {note_id} to ({x:.2f}, {y:.2f})")
				self._announce("note_moved", measure, moved)
				return

		raise KeyError(f"No note with id {note_id!r} in measure {measure_id!r}")


	def delete_note (self, measure_id: str, note_id: str) -> None:
		measure = self.measure(measure_id)
		note = measure.find_note(note_id)

		if note is None:
			raise KeyError(f"No note with id {note_id!r} in measure {measure_id!r}")

		measure.notes.remove(note)
		logger.info(f"Deleted note {note_id} from measure {measure.number}")
		self._announce("note_deleted", measure, note)


	def reset_measure (self, measure_id: str) -> None:

		"""
		Delete every note in a measure.
		"""

		measure = self.measure(measure_id)

		for note in list(measure.notes):
			self.delete_note(measure_id, typing.cast(str, note.id))
