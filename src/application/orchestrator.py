"""Async orchestrator running the commands of the tool."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from loguru import logger

from application.settings import Settings
from application.worker_pool import WorkerPool
from infrastructure.fetcher import ExercismFetcher
from infrastructure.http_client import AsyncHTTPClient
from infrastructure.interfaces import HTTPClientProtocol, ProcessRunnerProtocol
from infrastructure.process_runner import ProcessRunner
from services import (
    BenchReport,
    DownloadSummary,
    SolutionDiscoverer,
    create_benchmark_service,
    create_downloader,
    create_storage,
)
from services.report import write_json_report


class CommandOrchestrator:
    """Runs total, download, bench and clean for one exercise."""

    def __init__(
        self,
        settings: Settings,
        http_client: Optional[HTTPClientProtocol] = None,
        runner: Optional[ProcessRunnerProtocol] = None,
    ):
        """
        Initialize orchestrator with dependency injection.

        Args:
            settings: Settings of this invocation
            http_client: HTTP client (created per command when omitted)
            runner: External process runner
        """
        self.settings = settings
        self.http_client = http_client
        self.runner = runner or ProcessRunner()

    @asynccontextmanager
    async def _fetcher(self) -> AsyncIterator[ExercismFetcher]:
        if self.http_client is not None:
            yield ExercismFetcher(self.http_client, self.settings.exercise_id, self.settings.base_url)
            return

        async with AsyncHTTPClient(timeout=self.settings.fetch_timeout) as client:
            yield ExercismFetcher(client, self.settings.exercise_id, self.settings.base_url)

    def _pool(self) -> WorkerPool:
        logger.debug(f"Using {self.settings.pool_size} worker(s)")
        return WorkerPool(self.settings.pool_size)

    async def total(self) -> int:
        """Count published solutions."""
        async with self._fetcher() as fetcher, self._pool() as pool:
            identifiers = await SolutionDiscoverer(fetcher=fetcher, pool=pool).discover()

        logger.info(f"solutions total: {len(identifiers)}")
        return len(identifiers)

    async def download(self) -> DownloadSummary:
        """Discover and download all solutions with the test suite."""
        async with self._fetcher() as fetcher, self._pool() as pool:
            identifiers = await SolutionDiscoverer(fetcher=fetcher, pool=pool).discover()
            downloader = create_downloader(self.settings, fetcher, pool)
            return await downloader.download(identifiers)

    async def bench(self, json_path: Optional[Path] = None) -> BenchReport:
        """Benchmark downloaded solutions and rank them."""
        async with self._pool() as pool:
            service = create_benchmark_service(self.settings, self.runner, pool)
            report = await service.bench()

        if json_path is not None:
            path = write_json_report(report, json_path)
            logger.info(f"Saved JSON report: {path}")
        return report

    async def clean(self) -> bool:
        """Remove downloaded solutions of the exercise."""
        storage = create_storage(self.settings)
        removed = storage.remove()
        if removed:
            logger.info(f"{storage.exercise_dir} removed")
        return removed
