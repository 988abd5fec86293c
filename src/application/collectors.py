"""Containers shared by concurrently running tasks."""

import asyncio
from collections.abc import Iterable

from domain.models import SolutionIdentifier, SolutionStats, TestSuiteFile


class IdentifierCollector:
    """Set of solution identifiers; duplicates are coalesced."""

    def __init__(self) -> None:
        self._lock = asyncio.Lock()
        self._identifiers: set[SolutionIdentifier] = set()

    async def add_all(self, identifiers: Iterable[SolutionIdentifier]) -> int:
        """Add identifiers and return how many of them were new."""
        async with self._lock:
            before = len(self._identifiers)
            self._identifiers.update(identifiers)
            return len(self._identifiers) - before

    async def snapshot(self) -> set[SolutionIdentifier]:
        async with self._lock:
            return set(self._identifiers)


class TestSuiteCollector:
    """Test suite files by name; the first file stored under a name wins."""

    __test__ = False

    def __init__(self) -> None:
        self._lock = asyncio.Lock()
        self._files: dict[str, TestSuiteFile] = {}

    async def add(self, files: Iterable[TestSuiteFile]) -> int:
        """Add files with unseen names and return how many were added."""
        async with self._lock:
            added = 0
            for file in files:
                if file.name not in self._files:
                    self._files[file.name] = file
                    added += 1
            return added

    async def files(self) -> list[TestSuiteFile]:
        async with self._lock:
            return list(self._files.values())


class StatsCollector:
    """Benchmark results in completion order."""

    def __init__(self) -> None:
        self._lock = asyncio.Lock()
        self._stats: list[SolutionStats] = []

    async def append(self, stats: SolutionStats) -> None:
        async with self._lock:
            self._stats.append(stats)

    async def items(self) -> list[SolutionStats]:
        async with self._lock:
            return list(self._stats)
