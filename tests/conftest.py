"""Shared fixtures: synthetic pages as served by the solutions site."""

import html

import pytest

EXERCISE_ROOT = "https://exercism.io/tracks/go/exercises/two-fer"


def build_solution_page(
    author: str | None = "gopher",
    code: str | None = "package twofer\n",
    test_files: list[tuple[str, str]] | None = None,
) -> str:
    parts = ["<html><body><div class='header'>"]
    if author is not None:
        parts.append(f"<img alt='Avatar of {author}' src='/avatar.png'>")
    parts.append("</div>")
    if code is not None:
        parts.append(
            "<pre class='line-numbers solution-code'><code class='language-go'>"
            f"{html.escape(code)}</code></pre>"
        )
    if test_files is not None:
        parts.append("<div class='pane pane-2 test-suite'>")
        for name, source in test_files:
            parts.append(
                f"<h3>{html.escape(name)}</h3>"
                f"<pre><code class='language-go'>{html.escape(source)}</code></pre>"
            )
        parts.append("</div>")
    parts.append("</body></html>")
    return "\n".join(parts)


def build_list_page(identifiers: list[str], last_page: int | None = None) -> str:
    parts = ["<html><body><ul>"]
    for identifier in identifiers:
        parts.append(f"<li><a href='/tracks/go/exercises/two-fer/solutions/{identifier}'>view</a></li>")
    parts.append("</ul>")
    if last_page is not None:
        parts.append(f'<a href="/tracks/go/exercises/two-fer/solutions?page={last_page}">Last</a>')
    parts.append("</body></html>")
    return "\n".join(parts)


@pytest.fixture
def solution_page():
    return build_solution_page


@pytest.fixture
def list_page():
    return build_list_page
