import logging

import pytest

from timebench import Benchmark, NoLapsError, warmup_runs


@pytest.mark.parametrize("m, expected", [
    (1, 2), (5, 2), (15, 2), (20, 2), (30, 3), (55, 5), (100, 10), (1000, 10),
])
def test_warmup_runs(m, expected):
    assert warmup_runs(m) == expected


def test_warmup_runs_is_bounded():
    for m in range(1, 2000):
        assert 2 <= warmup_runs(m) <= 10


def test_run_returns_mean_of_execute_only(fake_clock, quiet_logger):
    bm = Benchmark(
        "fake",
        execute=lambda t: fake_clock.advance(2),
        prepare=lambda t: fake_clock.advance(50) or t,
        verify=lambda t: fake_clock.advance(70),
        logger=quiet_logger,
        clock=fake_clock,
    )
    assert bm.run(None, 20) == pytest.approx(2.0)


def test_verify_is_skipped_during_warmup(quiet_logger):
    counts = {"prepare": 0, "execute": 0, "verify": 0}

    def count(name):
        def f(t):
            counts[name] += 1
            return t
        return f

    m = 50
    Benchmark(
        "counting",
        execute=count("execute"),
        prepare=count("prepare"),
        verify=count("verify"),
        logger=quiet_logger,
    ).run(0, m)

    assert counts["verify"] == m
    assert counts["execute"] == m + warmup_runs(m)
    assert counts["prepare"] == m + warmup_runs(m)


def test_verify_receives_the_executed_input(quiet_logger):
    verified = []
    Benchmark(
        "mutating",
        execute=lambda a: a.append("x"),
        prepare=lambda a: [],
        verify=verified.append,
        logger=quiet_logger,
    ).run([], 3)
    assert verified == [["x"], ["x"], ["x"]]


def test_supplier_is_called_once_per_phase(quiet_logger):
    calls = []

    def supplier():
        calls.append(1)
        return 0

    Benchmark("supplied", execute=lambda t: t, logger=quiet_logger).run_from_supplier(supplier, 10)
    assert len(calls) == 2


def test_verify_failure_propagates(quiet_logger):
    def verify(t):
        raise AssertionError("wrong answer")

    bm = Benchmark("failing", execute=lambda t: t, verify=verify, logger=quiet_logger)
    with pytest.raises(AssertionError, match="wrong answer"):
        bm.run(0, 5)


def test_execute_failure_propagates(quiet_logger):
    def execute(t):
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        Benchmark("exploding", execute=execute, logger=quiet_logger).run(0, 5)


def test_zero_runs_fails_fast(quiet_logger):
    with pytest.raises(NoLapsError):
        Benchmark("empty", execute=lambda t: t, logger=quiet_logger).run(0, 0)


def test_execute_is_required():
    with pytest.raises(TypeError):
        Benchmark("nothing", execute=None)


def test_run_logs_begin_event(caplog):
    caplog.set_level(logging.INFO, logger="timebench.benchmark")
    Benchmark("logged", execute=lambda t: t).run(0, 1000)
    messages = [r.getMessage() for r in caplog.records if r.levelno == logging.INFO]
    assert messages == ["Begin run: logged with 1,000 runs"]


class RecordingHandler(logging.Handler):
    def __init__(self):
        super().__init__(level=logging.DEBUG)
        self.records = []

    def emit(self, record):
        self.records.append(record)


def test_null_logger_swallows_events(quiet_logger):
    root = logging.getLogger()
    handler = RecordingHandler()
    root.addHandler(handler)
    level = quiet_logger.level
    quiet_logger.setLevel(logging.DEBUG)
    try:
        Benchmark("silent", execute=lambda t: t, logger=quiet_logger).run(0, 3)
    finally:
        quiet_logger.setLevel(level)
        root.removeHandler(handler)
    assert not [r for r in handler.records if r.name == quiet_logger.name]
    assert not quiet_logger.propagate


def test_sleeping_workload_mean_is_close_to_sleep():
    import time

    mean = Benchmark("sleep", execute=lambda t: time.sleep(0.001)).run(None, 5)
    assert 0.9 <= mean < 50
