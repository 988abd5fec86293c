"""Console and JSON reports of benchmark rankings."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any

from domain.models import ABSENT

from .bench import BenchReport


def _optional(value: float, fmt: str) -> str:
    return "-" if value == ABSENT else format(value, fmt)


def print_rankings(report: BenchReport) -> None:
    """
    Print a ranked table per benchmark to console.

    Args:
        report: Benchmark report
    """
    for name in report.bench_names:
        ranking = report.rankings.get(name, [])

        print("\n" + "=" * 110)
        print(name)
        print("=" * 110)
        if not ranking:
            print("no results")
            continue

        print(
            f"{'Rank':<6} {'Solution':<45} {'ns/op':>12} {'MB/s':>10} "
            f"{'B/op':>10} {'allocs/op':>10} {'Size':>8}"
        )
        print("-" * 110)
        for rank, stats in enumerate(ranking, 1):
            metric = stats.benchs[name]
            print(
                f"{rank:<6} {stats.name:<45} {metric.time:>12.1f} "
                f"{_optional(metric.throughput, '.1f'):>10} "
                f"{_optional(metric.mem, 'd'):>10} "
                f"{_optional(metric.allocs, 'd'):>10} {stats.size:>8}"
            )

    print("=" * 110)
    print(f"{report.benchmarked}/{report.total_solutions} solutions benchmarked")
    print()


def build_report_data(report: BenchReport) -> dict[str, Any]:
    """Convert report to a JSON serializable dictionary."""
    return {
        "benchmark_info": {
            "timestamp": datetime.now().strftime("%Y%m%d_%H%M%S"),
            "total_solutions": report.total_solutions,
            "benchmarked": report.benchmarked,
            "failed": report.failed,
            "benchmarks": report.bench_names,
        },
        "rankings": {
            name: [
                {
                    "rank": rank,
                    "solution": stats.name,
                    "size": stats.size,
                    **stats.benchs[name].to_dict(),
                }
                for rank, stats in enumerate(report.rankings.get(name, []), 1)
            ]
            for name in report.bench_names
        },
    }


def write_json_report(report: BenchReport, path: Path) -> Path:
    """
    Save rankings as JSON.

    Args:
        report: Benchmark report
        path: Output file path; parent directories are created

    Returns:
        Path to the written report
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(build_report_data(report), f, indent=2)
    return path
