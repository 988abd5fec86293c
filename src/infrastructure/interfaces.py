"""Protocol interfaces for external collaborators."""

from collections.abc import Mapping
from pathlib import Path
from typing import Protocol


class FetcherProtocol(Protocol):
    """Protocol for fetching exercise pages."""

    async def fetch(
        self, path: str, params: Mapping[str, str] | None = None
    ) -> tuple[str, str]:
        """Return raw page text and its URL, raising FetchError on failure."""
        ...


class HTTPClientProtocol(Protocol):
    """Protocol for HTTP client."""

    async def get_text(
        self, url: str, params: Mapping[str, str] | None = None
    ) -> tuple[str, str]:
        """Get text content and final URL."""
        ...


class ProcessRunnerProtocol(Protocol):
    """Protocol for running external tools."""

    async def run(
        self, tool: str, work_dir: Path, *args: str, timeout: float | None = None
    ) -> str:
        """Run tool in work_dir and return combined stdout and stderr."""
        ...
