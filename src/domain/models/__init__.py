"""Domain models package."""

from .benchmark import ABSENT, BenchmarkMetric, SolutionStats
from .identifiers import ExerciseIdentifier, SolutionIdentifier
from .solution import SolutionRecord, TestSuiteFile

__all__ = [
    "ABSENT",
    "BenchmarkMetric",
    "ExerciseIdentifier",
    "SolutionIdentifier",
    "SolutionRecord",
    "SolutionStats",
    "TestSuiteFile",
]
