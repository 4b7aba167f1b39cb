import os
import re
import sys

# Make the 'microbench' package in this directory importable without installing it.
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

from microbench.registry import Benchmark
from microbench.runtime import HostCapabilities
from microbench.tools import bench_cli

LINE = re.compile(r"^python,[A-Za-z_]+,\d+\.\d+$")


def test_list_prints_eligible_names(capsys):
    assert bench_cli.main(["--list"]) == 0
    out = capsys.readouterr().out
    names = [line.split()[0] for line in out.splitlines()]
    assert names[:3] == ["fib", "parse_int", "mandelOld"]
    assert ("printfd" in names) == (os.name == "posix")


def test_only_prints_result_lines(capsys):
    assert bench_cli.main(["--only", "fib", "mandel", "--repetitions", "2"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert [line.split(",")[1] for line in lines] == ["fib", "mandel"]
    assert all(LINE.match(line) for line in lines)


def test_quiet_with_report(capsys):
    assert bench_cli.main(["--only", "fib", "--repetitions", "1", "--quiet", "--report"]) == 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Benchmark Report" in captured.err
    assert "fib" in captured.err


def test_harness_name(capsys):
    assert bench_cli.main(["--only", "fib", "--repetitions", "1", "--harness-name", "cpython"]) == 0
    assert capsys.readouterr().out.startswith("cpython,fib,")


def test_unknown_benchmark_exits_nonzero(capsys):
    assert bench_cli.main(["--only", "nope"]) == 1
    assert capsys.readouterr().out == ""


def test_failed_check_exits_nonzero(monkeypatch, capsys):
    monkeypatch.setattr(bench_cli, "default_benchmarks", lambda: [
        Benchmark("ok", lambda: 1, expect=lambda r: r == 1),
        Benchmark("wrong", lambda: 0, expect=lambda r: r == 1),
    ])

    assert bench_cli.main(["--repetitions", "1"]) == 1
    lines = capsys.readouterr().out.splitlines()
    assert [line.split(",")[1] for line in lines] == ["ok"]


def test_ineligible_benchmark_exits_nonzero(monkeypatch, capsys):
    monkeypatch.setattr(bench_cli, "detect_capabilities",
                        lambda: HostCapabilities(platform="win32", unix_like=False))

    assert bench_cli.main(["--only", "printfd"]) == 1
    assert capsys.readouterr().out == ""


def test_list_hides_ineligible_benchmarks(monkeypatch, capsys):
    monkeypatch.setattr(bench_cli, "detect_capabilities",
                        lambda: HostCapabilities(platform="win32", unix_like=False))

    assert bench_cli.main(["--list"]) == 0
    names = [line.split()[0] for line in capsys.readouterr().out.splitlines()]
    assert "printfd" not in names
    assert names[-1] == "rand_mat_mul"
