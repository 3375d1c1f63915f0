# timebench/__init__.py

# Expose the core, user-facing components of timebench at the top-level
# package namespace.

from .benchmark import Benchmark, warmup_runs
from .clock import NANOS_PER_MILLISECOND, Clock, get_clock, to_millisecs
from .errors import InvalidStateError, NoLapsError, TimerError
from .log import TRACE, configure_logging, null_logger
from .profiler import profile
from .timer import Timer
