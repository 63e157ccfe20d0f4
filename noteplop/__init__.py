"""
noteplop - staff layout and notation geometry for pointer-driven note entry.

A user drags whole, half, quarter, eighth and sixteenth notes onto a staff;
noteplop decides where they land and how they are drawn. Every function in
the geometry core is a pure function of the current notes and a static
layout, cheap enough to re-run on every pointer move.

What it computes:

- **Quantization.** Raw pointer coordinates snap to one of 16 grid
  positions per measure and to a ladder of staff lines, spaces, ledger
  lines and ledger spaces (``GridQuantizer``).
- **Duration spans.** Each duration covers a fixed number of the measure's
  15 grid steps, and a number of beats for its duration indicator
  (``noteplop.durations``).
- **Beaming.** Adjacent eighth and sixteenth notes are grouped into beams
  with a shared rail and secondary beams for sixteenths
  (``group_for_beaming()``).
- **Stems.** Notes above the middle line get downward stems; on or below,
  upward (``stem_direction_for()``).
- **Ledger lines.** Extra lines for notes above or below the staff
  (``ledger_lines_for()``).
- **Duration connectors.** Vertical links between a note and its left
  neighbour when their spacing matches the neighbour's duration, live while
  the ghost note is dragged (``find_connectors()``).

Around the core sit a single-track score store with change events
(``Track``), a pointer interaction layer (``StaffEditor``) and an ASCII
renderer for terminals and logs (``StaffDisplay``).

Minimal example:

    ```python
    import noteplop

    track = noteplop.Track()
    editor = noteplop.StaffEditor(track)

    editor.select_duration("eighth")
    for raw_x in (250, 285, 320, 355):
        editor.pointer_move(raw_x, 410)
        editor.pointer_up()

    bundle = editor.geometry()
    print(len(bundle.beam_groups))   # 1
    ```

Package-level exports: ``Duration``, ``Note``, ``Point``, ``StaffLayout``,
``MeasureContext``, ``GridQuantizer``, ``build_geometry``, ``Track``,
``StaffEditor``, ``StaffDisplay`` and the pass entry points.
"""

import noteplop.beaming
import noteplop.connectors
import noteplop.display
import noteplop.durations
import noteplop.editor
import noteplop.geometry
import noteplop.layout
import noteplop.ledger
import noteplop.notes
import noteplop.quantizer
import noteplop.score
import noteplop.stems


Duration = noteplop.durations.Duration
Note = noteplop.notes.Note
Point = noteplop.notes.Point
StaffLayout = noteplop.layout.StaffLayout
MeasureContext = noteplop.layout.MeasureContext
GridQuantizer = noteplop.quantizer.GridQuantizer
quantize = noteplop.quantizer.quantize
ledger_lines_for = noteplop.ledger.ledger_lines_for
stem_direction_for = noteplop.stems.stem_direction_for
group_for_beaming = noteplop.beaming.group_for_beaming
find_connectors = noteplop.connectors.find_connectors
build_geometry = noteplop.geometry.build_geometry
Track = noteplop.score.Track
StaffEditor = noteplop.editor.StaffEditor
StaffDisplay = noteplop.display.StaffDisplay
