"""Infrastructure: HTTP fetching, process execution and storage."""

from .fetcher import ExercismFetcher
from .http_client import AsyncHTTPClient
from .interfaces import FetcherProtocol, HTTPClientProtocol, ProcessRunnerProtocol
from .process_runner import ProcessRunner
from .storage import SolutionStorage, copy_file, copy_files

__all__ = [
    "AsyncHTTPClient",
    "ExercismFetcher",
    "FetcherProtocol",
    "HTTPClientProtocol",
    "ProcessRunner",
    "ProcessRunnerProtocol",
    "SolutionStorage",
    "copy_file",
    "copy_files",
]
