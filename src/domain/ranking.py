"""Ordering of benchmarked solutions."""

from collections.abc import Sequence

from domain.models import ABSENT, SolutionStats


def _optional(value: float) -> tuple[bool, float]:
    # Absent values go after every present one.
    return (value == ABSENT, value)


def ranking_key(stats: SolutionStats, bench_name: str) -> tuple:
    """Key ordering by time, throughput, memory, allocations and size."""
    metric = stats.benchs[bench_name]
    return (
        metric.time,
        _optional(metric.throughput),
        _optional(metric.mem),
        _optional(metric.allocs),
        stats.size,
    )


def sort_stats_by_bench(stats: Sequence[SolutionStats], bench_name: str) -> list[SolutionStats]:
    """
    Rank solutions for one benchmark.

    Solutions without a result for the benchmark are left out. The sort is
    stable: solutions with equal keys keep their order in ``stats``.
    """
    ranked = [s for s in stats if bench_name in s.benchs]
    return sorted(ranked, key=lambda s: ranking_key(s, bench_name))
