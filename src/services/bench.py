"""Service benchmarking downloaded solutions."""

import asyncio
import tempfile
from dataclasses import dataclass, field
from pathlib import Path

from loguru import logger

from application.collectors import StatsCollector
from application.worker_pool import WorkerPool
from domain.code_size import count_code_size
from domain.exceptions import (
    BenchmarkError,
    CodeSizeError,
    NoBenchmarkNamesError,
    NoSolutionsError,
    TestSuiteReadError,
)
from domain.languages import TrackLanguage
from domain.models import SolutionStats
from domain.parsers import find_benchmark_names, parse_bench_report
from domain.ranking import sort_stats_by_bench
from infrastructure.interfaces import ProcessRunnerProtocol
from infrastructure.storage import SolutionStorage, copy_file, copy_files

WORKSPACE_PREFIX = "solutions-bench-"


@dataclass
class BenchReport:
    """Rankings of all benchmarked solutions per benchmark name."""

    bench_names: list[str]
    rankings: dict[str, list[SolutionStats]] = field(default_factory=dict)
    total_solutions: int = 0
    benchmarked: int = 0

    @property
    def failed(self) -> int:
        return self.total_solutions - self.benchmarked


def measure_code_size(path: Path) -> int:
    """Read a source file and count its meaningful symbols."""
    try:
        return count_code_size(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, ValueError) as e:
        raise CodeSizeError(str(path), str(e)) from e


def find_bench_names(storage: SolutionStorage, language: TrackLanguage) -> list[str]:
    """
    Collect benchmark names declared by the stored test suite.

    Raises:
        NoBenchmarkNamesError: If the suite declares no benchmark
        TestSuiteReadError: If a suite file can't be read or decoded
    """
    names: list[str] = []
    for path in storage.list_test_suite():
        try:
            source = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise TestSuiteReadError(str(path), str(e)) from e
        names.extend(find_benchmark_names(source, language))

    # keep first occurrence order
    names = list(dict.fromkeys(names))
    if not names:
        raise NoBenchmarkNamesError(str(storage.test_suite_dir))
    return names


@dataclass(frozen=True)
class BenchTask:
    """Benchmark one stored solution in its own temporary workspace."""

    solution_path: Path
    storage: SolutionStorage
    runner: ProcessRunnerProtocol
    language: TrackLanguage
    collector: StatsCollector
    timeout: float | None = None

    async def __call__(self) -> None:
        try:
            stats = await self._bench()
        except (BenchmarkError, CodeSizeError, OSError) as e:
            logger.warning(f"Benchmark of {self.solution_path} failed: {e}")
            return

        await self.collector.append(stats)
        logger.info(f"Benchmarked {self.solution_path}")
        for name, metric in stats.benchs.items():
            logger.debug(f"{stats.name} {name}: {metric}")

    async def _bench(self) -> SolutionStats:
        size = await asyncio.to_thread(measure_code_size, self.solution_path)

        with tempfile.TemporaryDirectory(prefix=WORKSPACE_PREFIX) as tmp:
            work_dir = Path(tmp)
            await asyncio.to_thread(self._prepare_workspace, work_dir)

            output = await self.runner.run(
                self.language.bench_tool,
                work_dir,
                *self.language.bench_args,
                timeout=self.timeout,
            )

        return SolutionStats(
            name=self.solution_path.stem,
            size=size,
            benchs=parse_bench_report(output),
        )

    def _prepare_workspace(self, work_dir: Path) -> None:
        copy_file(self.solution_path, work_dir / self.solution_path.name)
        copy_files(self.storage.test_suite_dir, work_dir)
        for name, content in self.language.scaffold:
            scaffold_path = work_dir / name
            if not scaffold_path.exists():
                scaffold_path.write_text(content, encoding="utf-8")


class BenchmarkService:
    """Runs the test suite benchmarks against every stored solution."""

    def __init__(
        self,
        *,
        pool: WorkerPool,
        storage: SolutionStorage,
        runner: ProcessRunnerProtocol,
        language: TrackLanguage,
        timeout: float | None = None,
    ):
        self.pool = pool
        self.storage = storage
        self.runner = runner
        self.language = language
        self.timeout = timeout

    async def bench(self) -> BenchReport:
        """
        Benchmark all solutions and rank them per benchmark name.

        Raises:
            NoBenchmarkNamesError: If the test suite declares no benchmark
            NoSolutionsError: If there are no stored solutions
            TestSuiteReadError: If a test suite file can't be read
        """
        bench_names = find_bench_names(self.storage, self.language)
        logger.debug(f"Benchmarks: {', '.join(bench_names)}")

        solutions = self.storage.list_solutions()
        if not solutions:
            raise NoSolutionsError(str(self.storage.exercise_dir))

        collector = StatsCollector()
        for path in solutions:
            await self.pool.submit(
                BenchTask(
                    solution_path=path,
                    storage=self.storage,
                    runner=self.runner,
                    language=self.language,
                    collector=collector,
                    timeout=self.timeout,
                )
            )
        await self.pool.join()

        stats = await collector.items()
        report = BenchReport(
            bench_names=bench_names,
            rankings={name: sort_stats_by_bench(stats, name) for name in bench_names},
            total_solutions=len(solutions),
            benchmarked=len(stats),
        )
        logger.info(f"{report.benchmarked} solution(s) benchmarked, {report.failed} failed")
        return report
