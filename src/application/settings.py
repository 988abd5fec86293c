"""Settings shared by all commands."""

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from domain.languages import TrackLanguage, get_language
from domain.models import ExerciseIdentifier
from infrastructure.fetcher import DEFAULT_BASE_URL
from infrastructure.http_client import DEFAULT_TIMEOUT

ENV_PREFIX = "SOLUTIONS_BENCH"


class Settings(BaseModel):
    """Configuration built once per invocation and passed to every service."""

    model_config = ConfigDict(frozen=True)

    exercise: str = Field(min_length=1)
    track: str = "go"
    base_url: str = DEFAULT_BASE_URL
    download_dir: Path = Path("./solutions")
    concurrency: bool = True
    workers: int | None = Field(default=None, ge=1)
    fetch_timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    bench_timeout: float = Field(default=600.0, gt=0)
    log_level: str = "INFO"

    @field_validator("track")
    @classmethod
    def _known_track(cls, value: str) -> str:
        get_language(value)
        return value

    @property
    def language(self) -> TrackLanguage:
        return get_language(self.track)

    @property
    def exercise_id(self) -> ExerciseIdentifier:
        return ExerciseIdentifier(track=self.track, exercise=self.exercise)

    @property
    def pool_size(self) -> int:
        """1 for serial execution, otherwise explicit workers or CPU count."""
        if not self.concurrency:
            return 1
        return self.workers or os.cpu_count() or 1

    @property
    def exercise_dir(self) -> Path:
        return self.download_dir / self.track / self.exercise
