"""Place a few notes with the editor and print the staff after each step.

Run from the repository root:

	python examples/demo.py
"""

import logging

import noteplop

logging.basicConfig(level=logging.WARNING)

track = noteplop.Track(name="Piano", clef="treble", time_signature="4/4")
editor = noteplop.StaffEditor(track)
display = noteplop.StaffDisplay(editor.layout)
context = editor.active_measure.context


def show (title):
	print(f"\n{title}")
	print(display.format(editor.geometry()))


# A rising run of sixteenths, beamed into one group
editor.select_duration("sixteenth")
for index, y in enumerate([475, 437.5, 400, 362.5]):
	editor.pointer_move(context.grid_x(index), y)
	editor.pointer_up()

show("Four sixteenths")

# Hover four steps after a quarter: the ghost shows a live connector
editor.select_duration("quarter")
editor.pointer_move(context.grid_x(8), 325)
editor.pointer_up()
editor.pointer_move(context.grid_x(12), 250)

show("Quarter with ghost preview")

# Drag the third sixteenth away from the run
third = track.measures[0].notes[2]
editor.pointer_leave()
editor.note_pointer_down(third.id)
editor.pointer_move(context.grid_x(5), 100)
editor.pointer_up()

show("After dragging a sixteenth to the ledger lines")
