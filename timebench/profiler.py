# timebench/profiler.py
#
# A context manager for timing named sections of a larger block of code,
# built on Timer. Each section name owns one Timer, so a section entered
# several times accumulates one lap per entry.

from contextlib import contextmanager

from .timer import Timer


class profile:
    """
    A context manager for profiling named sections of code.

    Example:
        with timebench.profile() as p:
            with p.section("load"):
                ...
            with p.section("sort"):
                ...
        p.print_report()
    """

    def __init__(self, clock=None):
        self._clock = clock
        self._timers = {}
        self.events = []

    def __enter__(self):
        self._timers = {}
        self.events = []
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        # millisecs() raises InvalidStateError for a section timer left running.
        self.events = [
            (name, timer.millisecs(), timer.laps)
            for name, timer in self._timers.items()
        ]

    @contextmanager
    def section(self, name):
        """Times the enclosed block as one lap of the section called name."""
        timer = self._timers.get(name)
        if timer is None:
            timer = self._timers[name] = Timer(clock=self._clock)
        timer.resume()
        try:
            yield timer
        finally:
            timer.pause_and_lap()

    def print_report(self):
        print("--- timebench Profiler Report ---")
        if not self.events:
            print("No events captured.")
            return

        total_time = sum(duration for _, duration, _ in self.events)

        print(f"Total Time: {total_time:.4f} ms")
        print("---------------------------------")

        for name, duration, laps in self.events:
            percentage = (duration / total_time * 100) if total_time > 0 else 0
            mean = duration / laps if laps else 0.0
            print(f"{name:<25} | {duration:>10.4f} ms | {laps:>5} x {mean:>10.4f} ms | ({percentage:5.1f}%)")
        print("---------------------------------")
