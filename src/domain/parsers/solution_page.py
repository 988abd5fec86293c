"""Extraction of author, solution code and test suite from a solution page."""

import html
import re

from loguru import logger

from domain.exceptions import (
    AuthorNotFoundError,
    SolutionCodeNotFoundError,
    TestSuiteNotFoundError,
)
from domain.languages import GO, TrackLanguage
from domain.models import TestSuiteFile

from .markers import MarkerPair

AUTHOR_PATTERN = r"Avatar of ([\w-]+)"

TEST_SUITE_MARKERS = MarkerPair("<div class='pane pane-2 test-suite'>", "</div>")
TEST_FILE_NAME_MARKERS = MarkerPair("<h3>", "</h3>")


class SolutionPageExtractor:
    """Pulls structured fields out of the raw text of one solution page.

    The page is scanned as plain text. Every extracted value is HTML-entity
    decoded before it is returned.
    """

    def __init__(self, language: TrackLanguage = GO):
        self.language = language
        code_start = f"<code class='{language.code_class}'>"
        self.code_markers = MarkerPair(code_start, "</code>")
        self.solution_code_markers = MarkerPair(
            "<pre class='line-numbers solution-code'>" + code_start, "</code></pre>"
        )

    def extract_author(self, page: str) -> str:
        """Extract author name."""
        match = re.search(AUTHOR_PATTERN, page)
        if match is None:
            raise AuthorNotFoundError()
        return html.unescape(match.group(1))

    def extract_solution_code(self, page: str) -> str:
        """Extract source code of the solution itself."""
        match = self.solution_code_markers.find(page)
        if match is None:
            raise SolutionCodeNotFoundError()
        return html.unescape(match.content)

    def extract_test_suite(self, page: str) -> list[TestSuiteFile]:
        """
        Extract test suite files in page order.

        Raises:
            TestSuiteNotFoundError: If the test suite section is missing, holds
                no files, or a file name is not followed by its code
        """
        region = TEST_SUITE_MARKERS.find(page)
        if region is None:
            raise TestSuiteNotFoundError()

        files: list[TestSuiteFile] = []
        rest = region.content
        while (name := TEST_FILE_NAME_MARKERS.find(rest)) is not None:
            code = self.code_markers.find(name.remainder)
            if code is None:
                raise TestSuiteNotFoundError(f"No code found for test file {name.content!r}")
            files.append(
                TestSuiteFile(name=html.unescape(name.content), source=html.unescape(code.content))
            )
            rest = code.remainder

        if not files:
            raise TestSuiteNotFoundError("Test suite contains no files")

        logger.debug(f"Extracted {len(files)} test suite file(s)")
        return files
