import noteplop.layout
import noteplop.ledger


def test_no_ledger_lines_inside_staff () -> None:

	"""Notes on the staff need no ledger lines."""

	for y in (250.0, 287.5, 400.0, 512.5, 550.0):
		assert noteplop.ledger.ledger_lines_for(y) == []


def test_ledger_lines_above () -> None:

	"""Lines run outward from the staff up to the note."""

	assert noteplop.ledger.ledger_lines_for(175.0) == [175.0]
	assert noteplop.ledger.ledger_lines_for(100.0) == [175.0, 100.0]
	assert noteplop.ledger.ledger_lines_for(25.0) == [175.0, 100.0, 25.0]


def test_ledger_lines_below () -> None:

	"""Below the staff the lines mirror those above."""

	assert noteplop.ledger.ledger_lines_for(625.0) == [625.0]
	assert noteplop.ledger.ledger_lines_for(700.0) == [625.0, 700.0]


def test_ledger_lines_for_spaces () -> None:

	"""A note in a ledger space gets the line on its staff side, and the one beyond it at the boundary."""

	assert noteplop.ledger.ledger_lines_for(137.5) == [175.0, 100.0]
	assert noteplop.ledger.ledger_lines_for(662.5) == [625.0, 700.0]
	assert noteplop.ledger.ledger_lines_for(212.5) == [175.0]
	assert noteplop.ledger.ledger_lines_for(587.5) == [625.0]


def test_ledger_lines_respect_cap (unbounded_layout: noteplop.layout.StaffLayout) -> None:

	"""A capped layout never draws more than ledger_cap lines per side."""

	assert noteplop.ledger.ledger_lines_for(850.0) == [625.0, 700.0, 775.0]
	assert noteplop.ledger.ledger_lines_for(850.0, unbounded_layout) == [625.0, 700.0, 775.0, 850.0]

	single = noteplop.layout.StaffLayout(ledger_cap=1)
	assert noteplop.ledger.ledger_lines_for(100.0, single) == [175.0]
