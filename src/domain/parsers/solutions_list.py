"""Parsing of paginated solution list pages."""

import re

from domain.exceptions import PageCountNotFoundError
from domain.models.identifiers import HEX_DIGEST_PATTERN, SolutionIdentifier

PAGE_COUNT_PATTERN = r"solutions\?page=(\d+)\">Last"
SOLUTION_PATH_PATTERN = rf"solutions/({HEX_DIGEST_PATTERN})"


def parse_page_count(page: str, url: str) -> int:
    """
    Read total number of result pages from the pager of the first page.

    Raises:
        PageCountNotFoundError: If the pager marker or its number is missing
    """
    match = re.search(PAGE_COUNT_PATTERN, page)
    if match is None:
        raise PageCountNotFoundError(url)

    total = int(match.group(1))
    if total < 1:
        raise PageCountNotFoundError(url)
    return total


def find_solution_identifiers(page: str) -> list[SolutionIdentifier]:
    """Return identifiers of every solution path on a page, duplicates included."""
    return [SolutionIdentifier(m) for m in re.findall(SOLUTION_PATH_PATTERN, page)]
