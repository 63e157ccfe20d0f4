import pathlib

import noteplop.constants
import noteplop.constants.staff
import noteplop.layout


def test_staff_constants_agree_with_default_layout () -> None:

	"""The default layout is built from the staff constants and they are consistent."""

	layout = noteplop.layout.DEFAULT_LAYOUT
	lines = noteplop.constants.STAFF_LINE_POSITIONS

	assert layout.line_positions == lines
	assert layout.middle_line == noteplop.constants.MIDDLE_STAFF_LINE
	assert {b - a for a, b in zip(lines, lines[1:])} == {noteplop.constants.LINE_SPACING}


def test_every_staff_constant_is_referenced () -> None:

	"""Each staff constant is read somewhere else in the package."""

	package = pathlib.Path(noteplop.layout.__file__).parent
	sources = "\n".join(
		path.read_text() for path in package.rglob("*.py") if path.name != "staff.py"
	)

	names = [name for name in vars(noteplop.constants.staff) if name.isupper()]
	unused = [name for name in names if name not in sources]

	assert unused == []
