import logging

import noteplop.display
import noteplop.editor
import noteplop.layout
import noteplop.score


# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main () -> None:

	"""
	Place a short phrase on the first measure and print the resulting staff.
	"""

	logger.info("noteplop starting...")

	config = noteplop.layout.load_config('config.yaml')
	layout = noteplop.layout.layout_from_dict(config)
	demo = config.get('demo', {}) or {}

	track = noteplop.score.Track(
		name = demo.get('track_name', 'Piano'),
		clef = demo.get('clef', 'treble'),
		time_signature = demo.get('time_signature', '4/4'),
	)
	editor = noteplop.editor.StaffEditor(track, layout)
	context = editor.active_measure.context

	# A quarter, a half and a run of sixteenths, written as (grid index, y, duration)
	phrase = demo.get('phrase', [
		(0, 400, 'quarter'),
		(4, 325, 'half'),
		(12, 437.5, 'sixteenth'),
		(13, 475, 'sixteenth'),
		(14, 512.5, 'sixteenth'),
		(15, 625, 'sixteenth'),
	])

	for index, y, duration in phrase:
		editor.select_duration(duration)
		editor.pointer_move(context.grid_x(int(index)), float(y))
		editor.pointer_up()

	editor.pointer_leave()

	display = noteplop.display.StaffDisplay(layout)
	print(display.format(editor.geometry()))


if __name__ == "__main__":
	main()
