import numpy as np
import pytest

from timebench.tools import sort_cli


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("TIMEBENCH_RUNS", "TIMEBENCH_ARRAY_SIZE", "TIMEBENCH_SEED", "TIMEBENCH_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)


def test_main_prints_one_line_per_kind_and_run_count(capsys):
    code = sort_cli.main(["--size", "40", "--runs", "1", "3", "--kind", "reversed", "random", "--seed", "1"])
    assert code == 0
    out = capsys.readouterr().out
    assert "Reversed array with 40 elements, 1 runs:" in out
    assert "Reversed array with 40 elements, 3 runs:" in out
    assert "Random array with 40 elements, 3 runs:" in out
    assert "Ordered array" not in out


def test_defaults_come_from_environment(monkeypatch):
    monkeypatch.setenv("TIMEBENCH_RUNS", "2,5")
    monkeypatch.setenv("TIMEBENCH_ARRAY_SIZE", "64")
    from timebench.config import Settings

    args = sort_cli.build_parser(Settings.from_env()).parse_args([])
    assert args.runs == [2, 5]
    assert args.size == 64
    assert args.kind == ["ordered", "reversed", "partially", "random"]


def test_benchmark_kind_returns_mean():
    mean = sort_cli.benchmark_kind("partially", 30, 4, np.random.default_rng(0))
    assert mean >= 0


def test_failed_verification_exits_with_error(monkeypatch, capsys):
    monkeypatch.setattr(sort_cli, "insertion_sort", lambda a: a)
    code = sort_cli.main(["--size", "10", "--runs", "2", "--kind", "reversed"])
    assert code == 1


def test_partially_ordered_label(capsys):
    code = sort_cli.main(["--size", "20", "--runs", "1", "--kind", "partially", "--seed", "2"])
    assert code == 0
    out = capsys.readouterr().out
    assert "Partially ordered array with 20 elements, 1 runs:" in out
