"""Exceptions raised while discovering, downloading and benchmarking solutions."""


class SolutionsBenchError(Exception):
    """Base error for the solutions bench."""

    pass


# Fatal errors: abort the whole command


class PageCountNotFoundError(SolutionsBenchError):
    """Total number of result pages could not be read from the first page."""

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"Total page count not found on {url}")


class NoBenchmarkNamesError(SolutionsBenchError):
    """Test suite does not declare any benchmark."""

    def __init__(self, test_suite_dir: str):
        self.test_suite_dir = test_suite_dir
        super().__init__(f"No benchmark names found in test suite {test_suite_dir}")


class NoSolutionsError(SolutionsBenchError):
    """Nothing to benchmark."""

    def __init__(self, solutions_dir: str):
        self.solutions_dir = solutions_dir
        super().__init__(f"No solutions found in {solutions_dir}")


class TestSuiteReadError(SolutionsBenchError):
    """Stored test suite file could not be read."""

    __test__ = False

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"Failed to read test suite file {path}: {reason}")


# Per-item errors: logged and skipped


class FetchError(SolutionsBenchError):
    """Page could not be downloaded."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Download of {url} failed: {reason}")


class ExtractionError(SolutionsBenchError):
    """Expected region not found in a solution page."""

    kind = "content"

    def __init__(self, message: str | None = None):
        super().__init__(message or f"No {self.kind} found")


class AuthorNotFoundError(ExtractionError):
    kind = "author name"


class SolutionCodeNotFoundError(ExtractionError):
    kind = "solution code"


class TestSuiteNotFoundError(ExtractionError):
    kind = "test suite"

    __test__ = False


class BenchmarkError(SolutionsBenchError):
    """Benchmarking a single solution failed."""

    pass


class NoBenchmarksError(BenchmarkError):
    """Benchmark tool report contains no benchmark lines."""

    def __init__(self, output: str = ""):
        self.output = output
        super().__init__("No benchmarks")


class BenchmarkRunError(BenchmarkError):
    """Benchmark tool could not be started or exited with an error."""

    def __init__(self, command: str, reason: str, output: str = ""):
        self.command = command
        self.output = output
        super().__init__(f"Command '{command}' failed: {reason}")


class BenchmarkTimeoutError(BenchmarkError):
    """Benchmark tool did not finish in time and was killed."""

    def __init__(self, command: str, timeout: float):
        self.command = command
        self.timeout = timeout
        super().__init__(f"Command '{command}' timed out after {timeout:.1f}s")


class CodeSizeError(SolutionsBenchError):
    """Source file could not be measured."""

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"Failed to measure code size of {path}: {reason}")
