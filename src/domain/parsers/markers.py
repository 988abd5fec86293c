"""Scanning of regions delimited by fixed start and end markers."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MarkerMatch:
    """Text found between a marker pair and the text after the end marker."""

    content: str
    remainder: str


@dataclass(frozen=True)
class MarkerPair:
    """Fixed start and end strings delimiting a region of a page."""

    start: str
    end: str

    def find(self, text: str) -> MarkerMatch | None:
        """
        Locate the first start marker and the nearest end marker after it.

        Returns None when either marker is missing.
        """
        start = text.find(self.start)
        if start == -1:
            return None
        start += len(self.start)

        end = text.find(self.end, start)
        if end == -1:
            return None

        return MarkerMatch(content=text[start:end], remainder=text[end + len(self.end) :])

    def find_all(self, text: str) -> list[str]:
        """Return contents of all consecutive non-overlapping regions."""
        contents = []
        while (match := self.find(text)) is not None:
            contents.append(match.content)
            text = match.remainder
        return contents
