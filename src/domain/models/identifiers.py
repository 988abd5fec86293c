"""Value objects for solution identification."""

import re
from dataclasses import dataclass

HEX_DIGEST_PATTERN = r"[0-9a-fA-F]{32}"


@dataclass(frozen=True)
class SolutionIdentifier:
    """Opaque hex digest naming one published solution."""

    value: str

    def __post_init__(self) -> None:
        if not re.fullmatch(HEX_DIGEST_PATTERN, self.value):
            raise ValueError(f"Invalid solution identifier: {self.value!r}")

    @property
    def path(self) -> str:
        """Path of the solution page relative to the exercise root."""
        return f"solutions/{self.value}"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ExerciseIdentifier:
    """Identifies an exercise within a language track."""

    track: str
    exercise: str

    def __str__(self) -> str:
        return f"{self.track}/{self.exercise}"
