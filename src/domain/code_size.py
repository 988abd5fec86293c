"""Measuring solution size in meaningful symbols."""

import re

# Comments are excluded, white space is ignored except inside literals.
_TOKEN_RE = re.compile(
    r"(?P<comment>//[^\n]*|/\*.*?\*/)"
    r"|(?P<literal>\"(?:\\.|[^\"\\\n])*\"|'(?:\\.|[^'\\\n])*'|`[^`]*`)"
    r"|(?P<space>\s+)"
    r"|(?P<code>[^\s\"'`/]+|/)",
    re.DOTALL,
)


def count_code_size(source: str) -> int:
    """
    Count symbols of Go source code without comments and white spaces.

    White spaces inside string, raw string and rune literals are counted.

    Raises:
        ValueError: If a string or rune literal is not terminated
    """
    size = 0
    pos = 0
    while pos < len(source):
        match = _TOKEN_RE.match(source, pos)
        if match is None:
            raise ValueError(f"Unterminated literal at offset {pos}")

        kind = match.lastgroup
        if kind in ("literal", "code"):
            size += match.end() - match.start()
        pos = match.end()
    return size
