"""Persisted layout of downloaded solutions."""

import shutil
import stat
from pathlib import Path

from loguru import logger

from domain.models import SolutionIdentifier, TestSuiteFile

TEST_SUITE_DIR_NAME = "test-suite"


def is_regular(path: Path) -> bool:
    """Whether path is a regular file, symlinks not followed."""
    try:
        return stat.S_ISREG(path.lstat().st_mode)
    except FileNotFoundError:
        return False


def copy_file(src: Path, dest: Path) -> None:
    """Copy a regular file keeping its permission bits."""
    if not is_regular(src):
        raise OSError(f"Not a regular file: {src}")
    shutil.copy(src, dest)


def copy_files(src_dir: Path, dest_dir: Path) -> int:
    """
    Copy all regular files of src_dir into dest_dir.

    Nested directories are ignored. Returns number of copied files.
    """
    copied = 0
    for path in sorted(src_dir.iterdir()):
        if not is_regular(path):
            continue
        copy_file(path, dest_dir / path.name)
        copied += 1
    return copied


class SolutionStorage:
    """Layout ``<root>/<track>/<exercise>/<identifier>[-<author>].<ext>``."""

    def __init__(self, exercise_dir: Path, extension: str):
        self.exercise_dir = exercise_dir
        self.test_suite_dir = exercise_dir / TEST_SUITE_DIR_NAME
        self.extension = extension

    def solution_path(self, identifier: SolutionIdentifier, author: str | None = None) -> Path:
        name = identifier.value if not author else f"{identifier.value}-{author}"
        return self.exercise_dir / f"{name}{self.extension}"

    def write_solution(
        self, identifier: SolutionIdentifier, code: str, author: str | None = None
    ) -> Path:
        path = self.solution_path(identifier, author)
        self.exercise_dir.mkdir(parents=True, exist_ok=True)
        path.write_text(code, encoding="utf-8")
        path.chmod(0o600)
        return path

    def write_test_suite(self, files: list[TestSuiteFile]) -> list[Path]:
        self.test_suite_dir.mkdir(parents=True, exist_ok=True)
        paths = []
        for file in files:
            # File names come from scraped pages.
            path = self.test_suite_dir / Path(file.name).name
            path.write_text(file.source, encoding="utf-8")
            path.chmod(0o600)
            paths.append(path)
        return paths

    def list_solutions(self) -> list[Path]:
        """Solution files sorted by name; directories are skipped."""
        if not self.exercise_dir.is_dir():
            return []
        return sorted(p for p in self.exercise_dir.iterdir() if is_regular(p))

    def list_test_suite(self) -> list[Path]:
        if not self.test_suite_dir.is_dir():
            return []
        return sorted(p for p in self.test_suite_dir.iterdir() if is_regular(p))

    def remove(self) -> bool:
        """Remove the exercise tree. Returns False if there was nothing to remove."""
        if not self.exercise_dir.exists():
            logger.debug(f"Nothing to remove at {self.exercise_dir}")
            return False
        shutil.rmtree(self.exercise_dir)
        return True
