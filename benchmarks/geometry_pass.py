"""Geometry pass benchmark.

Fills a measure with random notes and times one full geometry pass per
simulated pointer move, the way an editor rebuilds geometry while the ghost
note follows the pointer.

Usage:
    python benchmarks/geometry_pass.py [--notes N] [--moves N] [--seed SEED]
                                       [--all-pairs] [--compare]

Options:
    --notes N       Notes placed in the measure (default: 32, at most 336)
    --moves N       Pointer moves to time (default: 2000)
    --seed SEED     Random seed (default: 1)
    --all-pairs     Match connectors against every earlier note
    --compare       Run both connector strategies and print both reports
"""

import argparse
import logging
import random
import statistics
import time

# Keep pass logging out of the timings.
logging.basicConfig(level=logging.ERROR)

import noteplop.connectors
import noteplop.durations
import noteplop.geometry
import noteplop.layout
import noteplop.notes
import noteplop.quantizer

# ---------------------------------------------------------------------------


def _capacity (context: noteplop.layout.MeasureContext, quantizer: noteplop.quantizer.GridQuantizer) -> int:

	"""Number of distinct placements in a measure: grid positions times ladder rungs."""

	return (context.divisions + 1) * len(quantizer.ladder)


def _random_measure (
	count: int,
	context: noteplop.layout.MeasureContext,
	quantizer: noteplop.quantizer.GridQuantizer,
	rng: random.Random,
) -> list[noteplop.notes.Note]:

	"""Place *count* notes on distinct random grid positions."""

	capacity = _capacity(context, quantizer)
	if not 0 <= count <= capacity:
		raise ValueError(f"A measure holds between 0 and {capacity} notes, got {count}")

	spots = [(x, y) for x in context.grid_positions() for y in quantizer.ladder]
	durations = list(noteplop.durations.Duration)

	return [
		noteplop.notes.Note(f"note-{i + 1}", x, y, rng.choice(durations))
		for i, (x, y) in enumerate(rng.sample(spots, count))
	]


def _run_benchmark (notes: int, moves: int, seed: int, strategy: str) -> list[float]:

	"""Return the duration of each geometry pass, in seconds."""

	rng = random.Random(seed)
	context = noteplop.layout.MeasureContext(is_first=True)
	quantizer = noteplop.quantizer.GridQuantizer()
	measure = _random_measure(notes, context, quantizer, rng)

	timings: list[float] = []

	for _ in range(moves):

		raw = noteplop.notes.Point(rng.uniform(context.min_x, context.max_x), rng.uniform(0.0, 900.0))
		snapped = quantizer.quantize(raw, context)
		ghost = noteplop.notes.ghost_note(snapped.x, snapped.y, noteplop.durations.Duration.EIGHTH)

		start = time.perf_counter()
		noteplop.geometry.build_geometry(measure, context, ghost=ghost, connector_strategy=strategy)
		timings.append(time.perf_counter() - start)

	return timings


def _print_report (timings: list[float], notes: int, strategy: str) -> None:

	if not timings:
		print("No timings collected.")
		return

	us = sorted(t * 1e6 for t in timings)

	print(f"\nGeometry Pass Benchmark - {notes} notes, {len(us)} moves ({strategy})")
	print(f"{'─' * 62}")
	print(f"  Mean pass       : {statistics.mean(us):>10.1f} us")
	print(f"  Median pass     : {statistics.median(us):>10.1f} us")
	print(f"  P95 pass        : {us[int(len(us) * 0.95)]:>10.1f} us")
	print(f"  Max pass        : {us[-1]:>10.1f} us")
	print(f"{'─' * 62}")

	# One frame at 60 fps leaves about 16.7 ms for everything.
	budget_share = statistics.mean(us) / 16_667 * 100
	print(f"  Frame budget    : {budget_share:>9.2f} %  of a 60 fps frame")
	print()


def main () -> None:

	parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
	parser.add_argument("--notes",     type=int, default=32,   help="Notes in the measure (default: 32)")
	parser.add_argument("--moves",     type=int, default=2000, help="Pointer moves to time (default: 2000)")
	parser.add_argument("--seed",      type=int, default=1,    help="Random seed (default: 1)")
	parser.add_argument("--all-pairs", action="store_true",    help="Use all-pairs connector matching")
	parser.add_argument("--compare",   action="store_true",    help="Run both connector strategies")
	args = parser.parse_args()

	capacity = _capacity(noteplop.layout.MeasureContext(is_first=True), noteplop.quantizer.GridQuantizer())
	if not 0 <= args.notes <= capacity:
		parser.error(f"--notes must be between 0 and {capacity}")

	if args.compare:
		for strategy in (noteplop.connectors.CHAIN, noteplop.connectors.ALL_PAIRS):
			_print_report(_run_benchmark(args.notes, args.moves, args.seed, strategy), args.notes, strategy)

	else:
		strategy = noteplop.connectors.ALL_PAIRS if args.all_pairs else noteplop.connectors.CHAIN
		_print_report(_run_benchmark(args.notes, args.moves, args.seed, strategy), args.notes, strategy)


if __name__ == "__main__":
	main()
