"""Fetcher of exercise pages."""

from collections.abc import Mapping

from domain.models import ExerciseIdentifier

from .interfaces import HTTPClientProtocol

DEFAULT_BASE_URL = "https://exercism.io"


class ExercismFetcher:
    """Fetches pages under the exercise root of a track."""

    def __init__(
        self,
        http_client: HTTPClientProtocol,
        exercise: ExerciseIdentifier,
        base_url: str = DEFAULT_BASE_URL,
    ):
        self.http_client = http_client
        self.exercise = exercise
        self.base_url = base_url.rstrip("/")

    def build_url(self, path: str) -> str:
        """Build absolute URL of a path relative to the exercise root."""
        return "/".join(
            [
                self.base_url,
                "tracks",
                self.exercise.track,
                "exercises",
                self.exercise.exercise,
                path.lstrip("/"),
            ]
        )

    async def fetch(
        self, path: str, params: Mapping[str, str] | None = None
    ) -> tuple[str, str]:
        """
        Fetch a page of the exercise.

        Raises:
            FetchError: If the page could not be downloaded
        """
        return await self.http_client.get_text(self.build_url(path), params=params)
