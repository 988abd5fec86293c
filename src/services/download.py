"""Service downloading solutions and the shared test suite."""

import asyncio
from dataclasses import dataclass

from loguru import logger

from application.collectors import IdentifierCollector, TestSuiteCollector
from application.worker_pool import WorkerPool
from domain.exceptions import (
    AuthorNotFoundError,
    FetchError,
    SolutionCodeNotFoundError,
    TestSuiteNotFoundError,
)
from domain.models import SolutionIdentifier, SolutionRecord
from domain.parsers import SolutionPageExtractor
from infrastructure.interfaces import FetcherProtocol
from infrastructure.storage import SolutionStorage


@dataclass(frozen=True)
class DownloadSummary:
    solutions: int
    test_files: int


@dataclass(frozen=True)
class SolutionDownloadTask:
    """Fetch one solution page, store its code and collect its test suite."""

    identifier: SolutionIdentifier
    fetcher: FetcherProtocol
    extractor: SolutionPageExtractor
    storage: SolutionStorage
    test_suite: TestSuiteCollector
    stored: IdentifierCollector

    async def __call__(self) -> None:
        try:
            page, url = await self.fetcher.fetch(self.identifier.path)
        except FetchError as e:
            logger.warning(f"Solution {self.identifier} skipped: {e}")
            return

        record = self._extract(page, url)
        if record is None:
            return

        try:
            files = self.extractor.extract_test_suite(page)
        except TestSuiteNotFoundError as e:
            logger.debug(f"{e} on {url}")
        else:
            await self.test_suite.add(files)

        try:
            path = await asyncio.to_thread(
                self.storage.write_solution, record.identifier, record.code, record.author
            )
        except OSError as e:
            logger.warning(f"Write of solution {self.identifier} failed: {e}")
            return

        await self.stored.add_all([self.identifier])
        logger.info(f"Downloaded {url} to {path}")

    def _extract(self, page: str, url: str) -> SolutionRecord | None:
        try:
            code = self.extractor.extract_solution_code(page)
        except SolutionCodeNotFoundError as e:
            logger.warning(f"Solution {self.identifier} skipped: {e} on {url}")
            return None

        try:
            author = self.extractor.extract_author(page)
        except AuthorNotFoundError:
            logger.warning(f"No author name on {url}, storing solution without it")
            author = None

        return SolutionRecord(identifier=self.identifier, author=author, code=code)


class SolutionDownloader:
    """Downloads solutions of discovered identifiers."""

    def __init__(
        self,
        *,
        fetcher: FetcherProtocol,
        pool: WorkerPool,
        storage: SolutionStorage,
        extractor: SolutionPageExtractor,
    ):
        self.fetcher = fetcher
        self.pool = pool
        self.storage = storage
        self.extractor = extractor

    async def download(self, identifiers: set[SolutionIdentifier]) -> DownloadSummary:
        """
        Download and store every solution, then store the merged test suite.

        Raises:
            OSError: If the test suite can't be written
        """
        test_suite = TestSuiteCollector()
        stored = IdentifierCollector()

        for identifier in sorted(identifiers, key=str):
            await self.pool.submit(
                SolutionDownloadTask(
                    identifier=identifier,
                    fetcher=self.fetcher,
                    extractor=self.extractor,
                    storage=self.storage,
                    test_suite=test_suite,
                    stored=stored,
                )
            )
        await self.pool.join()

        files = await test_suite.files()
        if files:
            await asyncio.to_thread(self.storage.write_test_suite, files)
            logger.info(f"Stored {len(files)} test file(s) in {self.storage.test_suite_dir}")
        else:
            logger.warning("No test suite found on any solution page")

        solutions = len(await stored.snapshot())
        logger.info(f"{solutions} solutions downloaded")
        return DownloadSummary(solutions=solutions, test_files=len(files))
