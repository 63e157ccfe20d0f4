import typing

import noteplop.layout


def ledger_lines_for (y: float, layout: noteplop.layout.StaffLayout = noteplop.layout.DEFAULT_LAYOUT) -> typing.List[float]:

	"""
	Return the y coordinates of the ledger lines a note at *y* needs.

	Lines step outward from the staff one ``line_spacing`` at a time and
	stop once the next line would be more than half a spacing beyond the
	note, so the line through (or next to) the note head is always drawn.
	Notes inside the staff need none. With a capped layout no more than
	``ledger_cap`` lines are returned per side.

	Example:
		```python
		ledger_lines_for(100)	# [175.0, 100.0]
		ledger_lines_for(625)	# [625.0]
		ledger_lines_for(400)	# []
		```
	"""

	spacing = layout.line_spacing
	half = spacing / 2.0
	cap = layout.ledger_cap
	lines: typing.List[float] = []

	if y < layout.top_line:
		ledger_y = layout.top_line - spacing
		while ledger_y >= y - half and (cap is None or len(lines) < cap):
			lines.append(ledger_y)
			ledger_y -= spacing

	elif y > layout.bottom_line:
		ledger_y = layout.bottom_line + spacing
		while ledger_y <= y + half and (cap is None or len(lines) < cap):
			lines.append(ledger_y)
			ledger_y += spacing

	return lines
