"""Unit tests for solution page extraction."""

import pytest

from domain.exceptions import (
    AuthorNotFoundError,
    ExtractionError,
    SolutionCodeNotFoundError,
    TestSuiteNotFoundError,
)
from domain.parsers import SolutionPageExtractor


class TestSolutionPageExtractor:
    """Test extraction of author, code and test suite from one page."""

    @pytest.fixture
    def extractor(self):
        return SolutionPageExtractor()

    def test_extracts_author(self, extractor, solution_page):
        page = solution_page(author="go-pher_42")

        assert extractor.extract_author(page) == "go-pher_42"

    def test_extracts_decoded_solution_code(self, extractor, solution_page):
        code = (
            'package twofer\n\nfunc ShareWith(name string) string {\n'
            '\treturn "One for " + name + ", one for me."\n}\n'
        )
        page = solution_page(code=code + "// a < b && c > d\n")

        assert extractor.extract_solution_code(page) == code + "// a < b && c > d\n"

    def test_solution_code_ignores_test_suite_code(self, extractor, solution_page):
        page = solution_page(
            code="package twofer\n",
            test_files=[("two_fer_test.go", "package twofer\n\nimport \"testing\"\n")],
        )

        assert extractor.extract_solution_code(page) == "package twofer\n"

    def test_extracts_all_test_suite_files_in_order(self, extractor, solution_page):
        files = [
            ("cases_test.go", "package twofer\n\nvar cases = []string{\"Alice\"}\n"),
            ("two_fer_test.go", "package twofer\n\nfunc BenchmarkShareWith(b *testing.B) {}\n"),
        ]
        page = solution_page(test_files=files)

        suite = extractor.extract_test_suite(page)

        assert [(f.name, f.source) for f in suite] == files

    def test_missing_author_is_author_error(self, extractor, solution_page):
        page = solution_page(author=None)

        with pytest.raises(AuthorNotFoundError):
            extractor.extract_author(page)
        # other kinds are still extracted
        assert extractor.extract_solution_code(page) == "package twofer\n"

    def test_missing_code_is_code_error(self, extractor, solution_page):
        page = solution_page(code=None, test_files=[("a_test.go", "package a\n")])

        with pytest.raises(SolutionCodeNotFoundError):
            extractor.extract_solution_code(page)

    def test_unterminated_code_is_code_error(self, extractor):
        page = "<pre class='line-numbers solution-code'><code class='language-go'>package a"

        with pytest.raises(SolutionCodeNotFoundError):
            extractor.extract_solution_code(page)

    def test_missing_test_suite_is_suite_error(self, extractor, solution_page):
        page = solution_page(test_files=None)

        with pytest.raises(TestSuiteNotFoundError):
            extractor.extract_test_suite(page)

    def test_empty_test_suite_is_suite_error(self, extractor, solution_page):
        page = solution_page(test_files=[])

        with pytest.raises(TestSuiteNotFoundError):
            extractor.extract_test_suite(page)

    def test_file_name_without_code_is_suite_error(self, extractor):
        page = "<div class='pane pane-2 test-suite'><h3>a_test.go</h3><p>no code</p></div>"

        with pytest.raises(TestSuiteNotFoundError):
            extractor.extract_test_suite(page)

    def test_errors_name_their_kind(self):
        assert str(AuthorNotFoundError()) == "No author name found"
        assert str(SolutionCodeNotFoundError()) == "No solution code found"
        assert isinstance(TestSuiteNotFoundError(), ExtractionError)

    def test_extraction_is_deterministic(self, extractor, solution_page):
        page = solution_page(test_files=[("a_test.go", "package a\n")])

        assert extractor.extract_test_suite(page) == extractor.extract_test_suite(page)
