"""Value objects for downloaded solutions."""

from dataclasses import dataclass

from .identifiers import SolutionIdentifier


@dataclass(frozen=True)
class SolutionRecord:
    """Author and source code extracted from one solution page."""

    identifier: SolutionIdentifier
    author: str | None
    code: str


@dataclass(frozen=True)
class TestSuiteFile:
    """One file of the exercise test suite."""

    __test__ = False

    name: str
    source: str
