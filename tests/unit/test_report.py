"""Unit tests for console and JSON ranking reports."""

import json

import pytest

from domain.models import BenchmarkMetric, SolutionStats
from services.bench import BenchReport
from services.report import build_report_data, print_rankings, write_json_report


@pytest.fixture
def report():
    fast = SolutionStats(
        name="aaaa-alice",
        size=120,
        benchs={"BenchmarkFoo": BenchmarkMetric("BenchmarkFoo", 10.5, mem=16, allocs=1)},
    )
    slow = SolutionStats(
        name="bbbb-bob",
        size=90,
        benchs={"BenchmarkFoo": BenchmarkMetric("BenchmarkFoo", 30.0)},
    )
    return BenchReport(
        bench_names=["BenchmarkFoo", "BenchmarkBar"],
        rankings={"BenchmarkFoo": [fast, slow], "BenchmarkBar": []},
        total_solutions=3,
        benchmarked=2,
    )


class TestBuildReportData:
    def test_summary(self, report):
        info = build_report_data(report)["benchmark_info"]

        assert info["total_solutions"] == 3
        assert info["benchmarked"] == 2
        assert info["failed"] == 1
        assert info["benchmarks"] == ["BenchmarkFoo", "BenchmarkBar"]

    def test_rankings_keep_order_and_mark_absent_fields(self, report):
        rankings = build_report_data(report)["rankings"]

        foo = rankings["BenchmarkFoo"]
        assert [entry["solution"] for entry in foo] == ["aaaa-alice", "bbbb-bob"]
        assert [entry["rank"] for entry in foo] == [1, 2]
        assert foo[0]["mem_bytes"] == 16
        assert foo[1]["mem_bytes"] is None
        assert foo[1]["throughput_mb_s"] is None
        assert rankings["BenchmarkBar"] == []


def test_write_json_report_creates_parent_dirs(tmp_path, report):
    path = write_json_report(report, tmp_path / "out" / "report.json")

    data = json.loads(path.read_text())
    assert data["rankings"]["BenchmarkFoo"][0]["time_ns"] == 10.5


def test_print_rankings(capsys, report):
    print_rankings(report)

    out = capsys.readouterr().out
    assert "BenchmarkFoo" in out
    assert "aaaa-alice" in out
    assert "no results" in out
    assert "2/3 solutions benchmarked" in out
