"""Service discovering all published solutions of an exercise."""

from dataclasses import dataclass

from loguru import logger

from application.collectors import IdentifierCollector
from application.worker_pool import WorkerPool
from domain.exceptions import FetchError
from domain.models import SolutionIdentifier
from domain.parsers import find_solution_identifiers, parse_page_count
from infrastructure.interfaces import FetcherProtocol

SOLUTIONS_PATH = "solutions"


@dataclass(frozen=True)
class PageScanTask:
    """Fetch one result page and collect the solution identifiers on it."""

    page_number: int
    fetcher: FetcherProtocol
    collector: IdentifierCollector

    async def __call__(self) -> None:
        try:
            page, url = await self.fetcher.fetch(SOLUTIONS_PATH, {"page": str(self.page_number)})
        except FetchError as e:
            logger.warning(f"Page {self.page_number} skipped: {e}")
            return

        identifiers = find_solution_identifiers(page)
        if not identifiers:
            logger.warning(f"No solutions found on {url}")
            return

        added = await self.collector.add_all(identifiers)
        logger.debug(f"Page {self.page_number}: {len(identifiers)} match(es), {added} new")


class SolutionDiscoverer:
    """Crawls the paginated solution list of an exercise."""

    def __init__(self, *, fetcher: FetcherProtocol, pool: WorkerPool):
        self.fetcher = fetcher
        self.pool = pool

    async def count_pages(self) -> int:
        """
        Read total number of result pages from the first page.

        Raises:
            FetchError: If the first page can't be downloaded
            PageCountNotFoundError: If the first page has no pager
        """
        page, url = await self.fetcher.fetch(SOLUTIONS_PATH)
        total = parse_page_count(page, url)
        logger.debug(f"{url} reports {total} page(s)")
        return total

    async def discover(self) -> set[SolutionIdentifier]:
        """
        Collect identifiers from every result page.

        Pages that fail to download contribute nothing; the result is then
        a lower bound of the published solutions.
        """
        total = await self.count_pages()

        collector = IdentifierCollector()
        for page_number in range(1, total + 1):
            await self.pool.submit(PageScanTask(page_number, self.fetcher, collector))
        await self.pool.join()

        identifiers = await collector.snapshot()
        logger.info(f"Discovered {len(identifiers)} solution(s) on {total} page(s)")
        return identifiers
