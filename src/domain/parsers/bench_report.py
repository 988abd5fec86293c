"""Parsing of benchmark tool reports and test suite sources."""

import re

from loguru import logger

from domain.exceptions import NoBenchmarksError
from domain.languages import GO, TrackLanguage
from domain.models import ABSENT, BenchmarkMetric

BENCH_LINE_RE = re.compile(
    r"(?P<name>Benchmark\w+)(?:-\d+)?\s+\d+\s+"
    r"(?P<time>\d+(?:\.\d+)?) ns/op"
    r"(?:\s+(?P<throughput>\d+(?:\.\d+)?) MB/s)?"
    r"(?:\s+(?P<mem>\d+) B/op\s+(?P<allocs>\d+) allocs/op)?"
)


def parse_bench_report(output: str) -> dict[str, BenchmarkMetric]:
    """
    Parse benchmark tool output into metrics keyed by benchmark name.

    The parallelism suffix of a name (``-8``) and the iteration count are
    dropped. A repeated name keeps its last line.

    Raises:
        NoBenchmarksError: If no benchmark line is found
    """
    metrics: dict[str, BenchmarkMetric] = {}
    for match in BENCH_LINE_RE.finditer(output):
        throughput = match.group("throughput")
        mem = match.group("mem")
        allocs = match.group("allocs")

        metric = BenchmarkMetric(
            name=match.group("name"),
            time=float(match.group("time")),
            throughput=float(throughput) if throughput is not None else ABSENT,
            mem=int(mem) if mem is not None else ABSENT,
            allocs=int(allocs) if allocs is not None else ABSENT,
        )
        metrics[metric.name] = metric

    if not metrics:
        raise NoBenchmarksError(output)

    logger.debug(f"Parsed {len(metrics)} benchmark(s)")
    return metrics


def find_benchmark_names(source: str, language: TrackLanguage = GO) -> list[str]:
    """Return benchmark function names declared in a test source, in order."""
    return re.findall(language.bench_func_pattern, source)
