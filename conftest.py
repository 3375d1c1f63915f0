# conftest.py
#
# Shared fixtures. FakeClock lets tests decide exactly how much time each
# phase of a benchmark takes, so means can be asserted exactly.

import pytest

from timebench.clock import Clock


class FakeClock(Clock):
    """A Clock that only moves when advance() is called."""

    def __init__(self, start=0):
        self.now = start

    def ticks(self):
        return self.now

    def advance(self, ms):
        self.now += int(ms * 1_000_000)


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def quiet_logger():
    from timebench.log import null_logger
    return null_logger("timebench.quiet")
