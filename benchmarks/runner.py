# benchmarks/runner.py
#
# A generic utility for running and timing benchmark functions from the
# scripts in this directory. It gives every script the same methodology as
# timebench.Benchmark: a few warm-up iterations whose timings are discarded,
# followed by the timed iterations, reporting the mean time per call.

from timebench import Benchmark


def run_benchmark(func, args, num_iter=20, prepare=None, logger=None, clock=None):
    """
    Runs a given function with arguments and measures its performance.

    Args:
        func: The function to benchmark.
        args: A tuple of arguments to pass to the function.
        num_iter (int): Number of timed iterations. The number of warm-up
            iterations is derived from it by timebench.warmup_runs.
        prepare: Optional function called with args before each call of
            func, with the clock stopped. It returns the args tuple for the
            next call.
        logger: Optional logger for run events.
        clock: Optional Clock for the timers; defaults to the system clock.

    Returns:
        The mean execution time in milliseconds.
    """
    bm = Benchmark(
        getattr(func, "__name__", repr(func)),
        execute=lambda a: func(*a),
        prepare=prepare,
        logger=logger,
        clock=clock,
    )
    return bm.run(args, num_iter)
