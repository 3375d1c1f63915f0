# timebench/benchmark.py
#
# The benchmark runner. A Benchmark wraps the function under study together
# with optional untimed preparation and verification steps, and measures it
# in two phases: a short warmup whose result is thrown away, then the
# measured run. Each phase gets its own Timer.

import logging
from typing import Any, Callable, Generic, Optional, TypeVar

from .timer import Timer

T = TypeVar("T")


def warmup_runs(m: int) -> int:
    """
    Calculates the number of warmup runs for a benchmark of m runs.

    Args:
        m: The number of measured runs.

    Returns:
        m // 10, but never fewer than 2 and never more than 10.
    """
    return max(2, min(10, m // 10))


class Benchmark(Generic[T]):
    """
    Measures the mean running time of a function over many repetitions.

    A run has three phases per repetition:
    1. prepare(t) -> t, which readies the input (untimed, optional);
    2. execute(t), the function being measured (timed). Its return value
       is ignored, so it is expected to work by mutating or observing t;
    3. verify(t), which checks the result (untimed, optional). It is not
       called during warmup.

    Example:
        bm = Benchmark("sort", execute=lambda a: a.sort(), prepare=list.copy)
        mean_ms = bm.run(data, 100)
    """

    def __init__(
        self,
        description: str,
        execute: Callable[[T], Any],
        prepare: Optional[Callable[[T], T]] = None,
        verify: Optional[Callable[[T], None]] = None,
        logger=None,
        clock=None,
    ):
        """
        Args:
            description: A label used in log output.
            execute: The function whose running time is measured.
            prepare: Runs before each call of execute with the clock
                stopped; its result is what execute receives.
            verify: Runs after each measured call of execute with the clock
                stopped. Exceptions it raises propagate to the caller.
            logger: Receives run events. Defaults to this module's logger.
            clock: Passed to each Timer; defaults to the system clock.
        """
        if execute is None:
            raise TypeError("Benchmark requires an execute function")
        self.description = description
        self.execute = execute
        self.prepare = prepare
        self.verify = verify
        self._logger = logger or logging.getLogger(__name__)
        self._clock = clock

    def run(self, value: T, m: int) -> float:
        """Runs the benchmark m times on the same value; see run_from_supplier."""
        return self.run_from_supplier(lambda: value, m)

    def run_from_supplier(self, supplier: Callable[[], T], m: int) -> float:
        """
        Runs the benchmark m times, after warmup, and returns the mean time.

        Args:
            supplier: Produces the input for each phase.
            m: The number of measured runs.

        Returns:
            The mean milliseconds per call of execute.

        Raises:
            NoLapsError: If m is less than 1.
        """
        self._logger.info("Begin run: %s with %s runs", self.description, f"{m:,}")

        def function(t):
            self.execute(t)
            return t

        self._new_timer().repeat(warmup_runs(m), supplier, function, self.prepare, None)
        return self._new_timer().repeat(m, supplier, function, self.prepare, self.verify)

    def _new_timer(self):
        return Timer(clock=self._clock, logger=self._logger)

    def __repr__(self):
        return f"Benchmark({self.description!r})"
