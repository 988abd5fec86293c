from application.settings import Settings
from application.worker_pool import WorkerPool
from domain.parsers import SolutionPageExtractor
from infrastructure.interfaces import FetcherProtocol, ProcessRunnerProtocol
from infrastructure.storage import SolutionStorage
from services.bench import BenchmarkService, BenchReport
from services.discovery import SolutionDiscoverer
from services.download import DownloadSummary, SolutionDownloader


def create_storage(settings: Settings) -> SolutionStorage:
    """Factory function to create storage of the configured exercise."""
    return SolutionStorage(settings.exercise_dir, settings.language.extension)


def create_downloader(
    settings: Settings, fetcher: FetcherProtocol, pool: WorkerPool
) -> SolutionDownloader:
    """Factory function to create downloader with all dependencies."""
    return SolutionDownloader(
        fetcher=fetcher,
        pool=pool,
        storage=create_storage(settings),
        extractor=SolutionPageExtractor(settings.language),
    )


def create_benchmark_service(
    settings: Settings, runner: ProcessRunnerProtocol, pool: WorkerPool
) -> BenchmarkService:
    """Factory function to create benchmark service with all dependencies."""
    return BenchmarkService(
        pool=pool,
        storage=create_storage(settings),
        runner=runner,
        language=settings.language,
        timeout=settings.bench_timeout,
    )


__all__ = [
    "BenchReport",
    "BenchmarkService",
    "DownloadSummary",
    "SolutionDiscoverer",
    "SolutionDownloader",
    "create_benchmark_service",
    "create_downloader",
    "create_storage",
]
