# timebench/clock.py
#
# The clock used by every Timer. Reading the clock and converting its ticks
# to milliseconds live side by side because the two must agree on units: the
# tick source is nanoseconds, so the conversion divides by NANOS_PER_MILLISECOND
# and nothing else.

import time

# Nanoseconds in one millisecond. The only scale factor between clock ticks
# and reported times.
NANOS_PER_MILLISECOND = 1_000_000


def get_clock() -> int:
    """Returns the current reading of the monotonic clock, in nanoseconds."""
    return time.perf_counter_ns()


def to_millisecs(ticks: int) -> float:
    """
    Converts a number of clock ticks (nanoseconds) to milliseconds.

    Args:
        ticks: A tick count as returned by differences of get_clock().

    Returns:
        The corresponding number of milliseconds, keeping the fractional part.
    """
    return ticks / NANOS_PER_MILLISECOND


class Clock:
    """
    Bundles the two halves of the clock so a Timer reads ticks and converts
    them through the same object. Tests substitute a subclass with a
    controllable ticks() method.
    """

    def ticks(self) -> int:
        return get_clock()

    def to_millisecs(self, ticks: int) -> float:
        return to_millisecs(ticks)


SYSTEM_CLOCK = Clock()
