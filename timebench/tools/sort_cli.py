# timebench/tools/sort_cli.py
#
# Implements the command-line interface for `timebench-sort`. It benchmarks
# insertion sort on arrays of one size in several orderings and for several
# run counts, printing the mean time per sort for each combination.

import argparse
import logging
import sys

import numpy as np

from ..benchmark import Benchmark
from ..config import Settings
from ..errors import TimerError
from ..log import configure_logging
from ..workloads import ARRAY_KINDS, ARRAY_LABELS, insertion_sort, is_sorted

logger = logging.getLogger(__name__)


def build_parser(settings):
    parser = argparse.ArgumentParser(
        prog="timebench-sort",
        description="Benchmark insertion sort on ordered, reversed, partially ordered and random arrays.",
    )
    parser.add_argument(
        "--size", type=int, default=settings.array_size,
        help="Number of elements in each array (default: %(default)s)."
    )
    parser.add_argument(
        "--runs", type=int, nargs="+", default=list(settings.runs),
        help="Run counts to benchmark with (default: %(default)s)."
    )
    parser.add_argument(
        "--kind", choices=sorted(ARRAY_KINDS), nargs="+", default=list(ARRAY_KINDS),
        help="Array orderings to benchmark (default: all)."
    )
    parser.add_argument(
        "--seed", type=int, default=settings.seed,
        help="Seed for the random array generators."
    )
    parser.add_argument(
        "--log-level", default=settings.log_level,
        help="Logging level (default: %(default)s)."
    )
    return parser


def _check_sorted(a):
    if not is_sorted(a):
        raise ValueError("insertion sort left the array out of order")


def benchmark_kind(kind, size, m, rng):
    """
    Returns the mean milliseconds to insertion-sort a fresh copy of an array
    of the given kind, measured over m runs.
    """
    base = ARRAY_KINDS[kind](size, rng)
    bm = Benchmark(
        f"insertion sort ({kind}, n={size:,})",
        execute=insertion_sort,
        prepare=lambda _: base.tolist(),
        verify=_check_sorted,
    )
    return bm.run(base, m)


def main(argv=None):
    settings = Settings.from_env()
    args = build_parser(settings).parse_args(argv)
    configure_logging(args.log_level, log_file=settings.log_file)

    rng = np.random.default_rng(args.seed)
    print(f"=== Insertion sort, {args.size:,} elements ===")
    try:
        for kind in args.kind:
            for m in args.runs:
                mean = benchmark_kind(kind, args.size, m, rng)
                print(f"{ARRAY_LABELS[kind]} array with {args.size:,} elements, {m} runs: {mean:.4f} ms")
            print()
    except (TimerError, ValueError):
        logger.exception("Benchmark failed")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
