# timebench/log.py
#
# Logging helpers. The timing core never reaches for a global logger on its
# own: Timer and Benchmark accept a logger at construction and fall back to
# their module logger only when none is given.

import logging
import os
from logging.handlers import RotatingFileHandler

# Finer than DEBUG; used for per-repeat events.
TRACE = 5
logging.addLevelName(TRACE, "TRACE")

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level=None, fmt=DEFAULT_FORMAT, log_file=None):
    """
    Configures the root logger for command-line use.

    Args:
        level: Numeric or string log level. When None, TIMEBENCH_LOG_LEVEL is
            consulted and defaults to INFO.
        fmt: Format string passed to logging.Formatter.
        log_file: Optional path to a log file. A RotatingFileHandler is
            attached when given, or when TIMEBENCH_LOG_FILE is set.

    The root logger is only configured on the first call, so repeated
    invocations have no side effects.
    """
    if level is None:
        level = os.getenv("TIMEBENCH_LOG_LEVEL", "INFO")

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    log_file = log_file or os.getenv("TIMEBENCH_LOG_FILE")

    root = logging.getLogger()
    if root.handlers:
        return

    formatter = logging.Formatter(fmt)
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(RotatingFileHandler(log_file, maxBytes=5_000_000, backupCount=3))

    root.setLevel(level)
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)


def null_logger(name="timebench.null"):
    """Returns a logger that discards everything sent to it."""
    logger = logging.getLogger(name)
    if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.addHandler(logging.NullHandler())
    logger.propagate = False
    return logger
