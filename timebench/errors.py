# timebench/errors.py
#
# Exceptions raised by the timing core. Caller workload failures are never
# wrapped in these; they propagate as raised.


class TimerError(RuntimeError):
    """Base class for all Timer failures."""


class InvalidStateError(TimerError):
    """
    Raised when a Timer operation is called in the wrong state: a running-only
    operation (lap, pause) while paused, or a paused-only operation (resume,
    mean_lap_time, millisecs) while running.
    """

    def __init__(self, operation, running):
        state = "running" if running else "paused"
        super().__init__(f"Timer.{operation}() is not allowed while the timer is {state}")
        self.operation = operation
        self.running = running


class NoLapsError(TimerError):
    """Raised when a mean lap time is requested from a Timer with no laps."""

    def __init__(self):
        super().__init__("mean lap time is undefined: the timer has recorded no laps")
