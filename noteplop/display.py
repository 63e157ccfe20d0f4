"""ASCII rendering of a measure's geometry.

Draws one text row per rung of the snap ladder (top of the page first) and
one column per grid position, which is handy in logs, the terminal demo and
test failure output::

	  175.0 |   -                           |
	  212.5 |   Q                           |
	  250.0 |---------------------------------|
	  ...

Staff lines are drawn across the full width; ledger lines only in the column
of the note that needs them. Notes show as ``W H Q E S`` by duration and the
ghost note as ``o``. A summary line lists beam groups and connectors.
"""

import typing

import noteplop.geometry
import noteplop.layout
import noteplop.quantizer

from noteplop.durations import Duration


_NOTE_CHARS: typing.Dict[Duration, str] = {
	Duration.WHOLE: "W",
	Duration.HALF: "H",
	Duration.QUARTER: "Q",
	Duration.EIGHTH: "E",
	Duration.SIXTEENTH: "S",
}

_GHOST_CHAR = "o"
_LEDGER_CHAR = "-"
_LABEL_WIDTH = 7


class StaffDisplay:

	"""Text rendering of :class:`~noteplop.geometry.GeometryBundle` objects for one layout."""

	def __init__ (self, layout: noteplop.layout.StaffLayout = noteplop.layout.DEFAULT_LAYOUT) -> None:

		"""Build the row ladder for *layout*.

		Parameters:
			layout: The staff layout whose snap ladder defines the rows.
		"""

		self.layout = layout
		self._quantizer = noteplop.quantizer.GridQuantizer(layout)

	@staticmethod
	def _note_char (geometry: noteplop.geometry.NoteGeometry) -> str:

		"""Single character for a note head; ``?`` for an unknown duration."""

		if geometry.note.ghost:
			return _GHOST_CHAR
		return _NOTE_CHARS.get(geometry.note.duration, "?")

	def render (self, bundle: noteplop.geometry.GeometryBundle) -> typing.List[str]:

		"""Return the rows of the rendered measure, followed by a summary line."""

		context = bundle.context
		columns = context.divisions + 1
		staff_lines = set(self.layout.line_positions)
		rows = self._quantizer.ladder

		cells: typing.Dict[float, typing.List[str]] = {
			y: [_LEDGER_CHAR if y in staff_lines else " "] * columns for y in rows
		}

		placed = bundle.all_note_geometry()
		if bundle.ghost is not None:
			placed.append(bundle.ghost)

		# Ledger lines first so note heads draw over them
		for geometry in placed:
			column = self._quantizer.snap_index(geometry.note.x, context)
			for ledger_y in geometry.ledger_lines:
				if ledger_y in cells:
					cells[ledger_y][column] = _LEDGER_CHAR

		for geometry in placed:
			column = self._quantizer.snap_index(geometry.note.x, context)
			row = self._quantizer.snap_y(geometry.note.y)
			cells[row][column] = self._note_char(geometry)

		lines: typing.List[str] = []
		for y in rows:
			joiner = _LEDGER_CHAR if y in staff_lines else " "
			label = f"{y:.1f}".rjust(_LABEL_WIDTH)
			lines.append(f"{label} |{joiner}{joiner.join(cells[y])}{joiner}|")

		lines.append(self._summary(bundle))
		return lines

	def _summary (self, bundle: noteplop.geometry.GeometryBundle) -> str:

		"""One line describing beam groups and connectors."""

		if bundle.beam_groups:
			sizes = ", ".join(str(len(group)) for group in bundle.beam_groups)
			beams = f"beams: {len(bundle.beam_groups)} ({sizes})"
		else:
			beams = "beams: 0"

		return f"{len(bundle.notes)} notes  {beams}  connectors: {len(bundle.connectors)}"

	def format (self, bundle: noteplop.geometry.GeometryBundle) -> str:
		return "\n".join(self.render(bundle))
