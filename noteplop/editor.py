"""Pointer-driven note placement on the active measure.

:class:`StaffEditor` turns a stream of pointer events into score changes:

- Moving the pointer over empty staff shows a *ghost* note at the snapped
  position, unless a note already occupies that spot.
- Releasing the pointer commits the ghost as a new note.
- Pressing on an existing note starts a drag; the ghost follows the pointer
  and releasing moves the note there.
- Dragging a note outside the placeable region deletes it at once. The last
  ghost position is kept in :attr:`StaffEditor.deleting_note` so the
  presentation layer can play a short removal effect; it is up to that layer
  to call :meth:`StaffEditor.clear_deleting_note` afterwards.

Coordinates are staff coordinates; converting from screen space is the
presentation layer's job. Geometry for the active measure, including the
ghost, comes from :meth:`StaffEditor.geometry`.
"""

import logging
import typing

import noteplop.durations
import noteplop.geometry
import noteplop.layout
import noteplop.notes
import noteplop.quantizer
import noteplop.score


logger = logging.getLogger(__name__)


class StaffEditor:

	"""
	Interaction state for one track: active measure, tool, ghost, drag and hover.
	"""

	def __init__ (
		self,
		track: noteplop.score.Track,
		layout: noteplop.layout.StaffLayout = noteplop.layout.DEFAULT_LAYOUT,
		selected_duration: typing.Optional[noteplop.durations.Duration] = noteplop.durations.Duration.QUARTER,
	) -> None:

		"""
		Start editing the first measure of *track*.
		"""

		self.track = track
		self.layout = layout
		self.quantizer = noteplop.quantizer.GridQuantizer(layout)

		self.active_measure_id: str = track.measures[0].id
		self.selected_duration = selected_duration
		self.show_duration_indicators = True

		self.ghost: typing.Optional[noteplop.notes.Note] = None
		self.deleting_note: typing.Optional[noteplop.notes.Note] = None
		self.dragged_note_id: typing.Optional[str] = None
		self.hovered_note_id: typing.Optional[str] = None

	@property
	def active_measure (self) -> noteplop.score.Measure:
		return self.track.measure(self.active_measure_id)

	@property
	def active_duration (self) -> typing.Optional[noteplop.durations.Duration]:

		"""
		The duration the next placement would use.

		While hovering an existing note this is that note's duration.
		"""

		if self.hovered_note_id is not None:
			hovered = self.active_measure.find_note(self.hovered_note_id)
			if hovered is not None:
				return hovered.duration

		return self.selected_duration

	def select_duration (self, duration: noteplop.durations.DurationLike) -> None:
		self.selected_duration = noteplop.durations.parse_duration(duration)

	def _clear_pointer_state (self) -> None:
		self.ghost = None
		self.dragged_note_id = None
		self.hovered_note_id = None


	# ── Pointer events ───────────────────────────────────────────────

	def pointer_move (self, x: float, y: float) -> None:

		"""
		Update the ghost note for a pointer at (*x*, *y*).
		"""

		measure = self.active_measure
		context = measure.context
		raw = noteplop.notes.Point(x, y)
		snapped = self.quantizer.quantize(raw, context)

		if self.dragged_note_id is not None:

			dragged = measure.find_note(self.dragged_note_id)
			if dragged is None:
				return

			if not self.quantizer.is_within_bounds(raw, context):
				if self.ghost is not None:
					self.deleting_note = noteplop.notes.ghost_note(self.ghost.x, self.ghost.y, dragged.duration)
				logger.info(f"Note {dragged.id} dragged outside the staff, deleting")
				self.track.delete_note(measure.id, self.dragged_note_id)
				self._clear_pointer_state()
				return

			self.ghost = noteplop.notes.ghost_note(snapped.x, snapped.y, dragged.duration)
			return

		if self.hovered_note_id is not None:
			self.ghost = None
			return

		duration = self.active_duration

		if duration is None or noteplop.quantizer.is_occupied(measure.notes, snapped):
			self.ghost = None
			return

		self.ghost = noteplop.notes.ghost_note(snapped.x, snapped.y, duration)


	def pointer_up (self) -> typing.Optional[str]:

		"""
		Commit the current gesture.

		Finishes a drag by moving the note to the ghost position, or places
		a new note at the ghost. Returns the id of the note placed or moved,
		or ``None`` if nothing changed.
		"""

		measure = self.active_measure

		if self.dragged_note_id is not None and self.ghost is not None:
			note_id = self.dragged_note_id
			self.track.move_note(measure.id, note_id, self.ghost.x, self.ghost.y)
			self._clear_pointer_state()
			return note_id

		duration = self.active_duration

		if self.ghost is None or duration is None:
			return None

		if noteplop.quantizer.is_occupied(measure.notes, self.ghost.point):
			return None

		return self.track.add_note(measure.id, self.ghost.x, self.ghost.y, duration)


	def pointer_leave (self) -> None:
		self._clear_pointer_state()


	def note_pointer_down (self, note_id: str) -> None:

		"""
		Start dragging an existing note. The ghost starts on the note itself.
		"""

		note = self.active_measure.find_note(note_id)
		if note is None:
			return

		self.dragged_note_id = note_id
		self.hovered_note_id = note_id
		self.ghost = noteplop.notes.ghost_note(note.x, note.y, note.duration)


	def note_pointer_enter (self, note_id: str) -> None:
		self.hovered_note_id = note_id


	def note_pointer_leave (self) -> None:

		"""Stop hovering, unless a drag is in progress."""

		if self.dragged_note_id is None:
			self.hovered_note_id = None


	def clear_deleting_note (self) -> None:
		self.deleting_note = None


	# ── Measures ─────────────────────────────────────────────────────

	def set_active_measure (self, measure_id: str) -> None:
		self.track.measure(measure_id)
		self._clear_pointer_state()
		self.active_measure_id = measure_id


	def next_measure (self) -> None:
		index = self.track.index_of(self.active_measure_id)
		if index < len(self.track.measures) - 1:
			self.set_active_measure(self.track.measures[index + 1].id)


	def previous_measure (self) -> None:
		index = self.track.index_of(self.active_measure_id)
		if index > 0:
			self.set_active_measure(self.track.measures[index - 1].id)


	def add_measure (self) -> str:

		"""
		Insert a measure after the active one, with the same time signature, and switch to it.
		"""

		measure = self.active_measure
		measure_id = self.track.add_measure(measure.time_signature, after=measure.id)
		self.set_active_measure(measure_id)
		return measure_id


	def delete_measure (self) -> bool:

		"""
		Delete the active measure and switch to the one before it.

		The first measure cannot be deleted; returns whether a measure was removed.
		"""

		measure = self.active_measure
		if measure.is_first:
			return False

		previous_id = self.track.measures[self.track.index_of(measure.id) - 1].id
		self.track.delete_measure(measure.id)
		self.set_active_measure(previous_id)
		return True


	def reset_measure (self) -> None:
		self.track.reset_measure(self.active_measure_id)


	# ── Geometry ─────────────────────────────────────────────────────

	def geometry (self) -> noteplop.geometry.GeometryBundle:

		"""
		Geometry of the active measure, including the ghost note.
		"""

		measure = self.active_measure
		return noteplop.geometry.build_geometry(
			measure.notes,
			measure.context,
			ghost = self.ghost,
			layout = self.layout,
			show_duration_indicators = self.show_duration_indicators,
		)
