"""Parsers for solution pages and benchmark reports."""

from .bench_report import find_benchmark_names, parse_bench_report
from .markers import MarkerMatch, MarkerPair
from .solution_page import SolutionPageExtractor
from .solutions_list import find_solution_identifiers, parse_page_count

__all__ = [
    "MarkerMatch",
    "MarkerPair",
    "SolutionPageExtractor",
    "find_benchmark_names",
    "find_solution_identifiers",
    "parse_bench_report",
    "parse_page_count",
]
