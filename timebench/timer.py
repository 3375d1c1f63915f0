# timebench/timer.py
#
# The Timer: a pause/resume/lap state machine over a monotonic nanosecond
# clock. Elapsed time is accumulated by subtracting the clock reading on
# resume() and adding it back on pause, so ticks is only meaningful while
# the timer is paused.

import logging
from typing import Callable, Optional, TypeVar

from .clock import SYSTEM_CLOCK
from .errors import InvalidStateError, NoLapsError
from .log import TRACE

T = TypeVar("T")
U = TypeVar("U")


class Timer:
    """
    Accumulates elapsed time over a sequence of "laps" (repetitions).

    A new Timer is paused with no laps. Operations that advance a lap
    (lap, pause_and_lap, pause, stop) require it to be running; operations
    that read the accumulated time (mean_lap_time, millisecs) and resume()
    require it to be paused. Calling either kind in the wrong state raises
    InvalidStateError and leaves the timer untouched.

    Example:
        timer = Timer()
        mean_ms = timer.repeat(100, make_input, workload)
    """

    def __init__(self, clock=None, logger=None, running=False):
        """
        Args:
            clock: The Clock to read ticks from. Defaults to the system
                monotonic clock.
            logger: Where trace events go. Defaults to this module's logger.
            running: If True, the timer is resumed immediately.
        """
        self._clock = clock or SYSTEM_CLOCK
        self._logger = logger or logging.getLogger(__name__)
        self._ticks = 0
        self._laps = 0
        self._running = False
        if running:
            self.resume()

    @property
    def ticks(self) -> int:
        return self._ticks

    @property
    def laps(self) -> int:
        return self._laps

    @property
    def running(self) -> bool:
        return self._running

    def repeat(
        self,
        n: int,
        supplier: Callable[[], T],
        function: Callable[[T], U],
        pre_function: Optional[Callable[[T], T]] = None,
        post_function: Optional[Callable[[U], None]] = None,
    ) -> float:
        """
        Runs function n times, one lap each, with only function on the clock.

        The supplier is called once, with the clock stopped. Before each lap
        the optional pre_function transforms the current value (untimed) and
        its result is carried forward; after each lap the optional
        post_function receives function's result (untimed). If the timer is
        running on entry it is paused first without counting a lap. It is
        always left running on return.

        Args:
            n: The number of repetitions.
            supplier: Produces the input value.
            function: The work being measured.
            pre_function: Untimed preparation of the value before each lap.
            post_function: Untimed consumer of each lap's result.

        Returns:
            The mean milliseconds per repetition.

        Raises:
            NoLapsError: If n is less than 1.
        """
        self._logger.log(TRACE, "repeat: with %d runs", n)
        if self._running:
            self.pause()
        value = supplier()
        for _ in range(n):
            if pre_function is not None:
                value = pre_function(value)
            self.resume()
            result = function(value)
            self.pause_and_lap()
            if post_function is not None:
                post_function(result)
        mean = self.mean_lap_time()
        self.resume()
        return mean

    def repeat_function(self, n: int, function: Callable[[], object]) -> float:
        """
        Calls function n times with the clock running throughout, counting
        one lap per call, then pauses and returns the mean lap time.

        The timer must be running when this is called.
        """
        for _ in range(n):
            function()
            self.lap()
        self.pause()
        return self.mean_lap_time()

    def stop(self) -> float:
        """Ends the current lap, pauses, and returns the mean lap time in milliseconds."""
        self.pause_and_lap()
        return self.mean_lap_time()

    def mean_lap_time(self) -> float:
        """
        Returns the mean lap time in milliseconds for this paused timer.

        Raises:
            InvalidStateError: If the timer is running.
            NoLapsError: If no laps have been recorded.
        """
        if self._running:
            raise InvalidStateError("mean_lap_time", self._running)
        if self._laps == 0:
            raise NoLapsError()
        return self._clock.to_millisecs(self._ticks) / self._laps

    def pause_and_lap(self):
        """Pauses at the end of a lap, incrementing the lap counter."""
        self.lap()
        self._ticks += self._clock.ticks()
        self._running = False

    def resume(self):
        """Starts a new lap. Raises InvalidStateError if already running."""
        if self._running:
            raise InvalidStateError("resume", self._running)
        self._ticks -= self._clock.ticks()
        self._running = True

    def lap(self):
        """Counts a lap without pausing. Raises InvalidStateError unless running."""
        if not self._running:
            raise InvalidStateError("lap", self._running)
        self._laps += 1

    def pause(self):
        """Pauses in the middle of a lap; the lap counter is unchanged."""
        if not self._running:
            raise InvalidStateError("pause", self._running)
        self.pause_and_lap()
        self._laps -= 1

    def millisecs(self) -> float:
        """Returns the total elapsed milliseconds. The timer must be paused."""
        if self._running:
            raise InvalidStateError("millisecs", self._running)
        return self._clock.to_millisecs(self._ticks)

    def __repr__(self):
        return f"Timer(ticks={self._ticks}, laps={self._laps}, running={self._running})"
