"""Language specific settings of a track."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TrackLanguage:
    """How solutions of a track are rendered, stored and benchmarked."""

    track: str
    code_class: str
    extension: str
    bench_tool: str
    bench_args: tuple[str, ...]
    bench_func_pattern: str
    # Files written into a bench workspace unless the test suite has them
    scaffold: tuple[tuple[str, str], ...] = ()


GO = TrackLanguage(
    track="go",
    code_class="language-go",
    extension=".go",
    bench_tool="go",
    bench_args=("test", "-bench", ".", "-benchmem"),
    bench_func_pattern=r"\bfunc\s+(Benchmark\w+)\s*\(",
    scaffold=(("go.mod", "module solution\n"),),
)

LANGUAGES: dict[str, TrackLanguage] = {GO.track: GO}


def get_language(track: str) -> TrackLanguage:
    """Return language settings of a track."""
    try:
        return LANGUAGES[track]
    except KeyError:
        supported = ", ".join(sorted(LANGUAGES))
        raise ValueError(f"Unsupported track: {track}. Supported tracks: {supported}") from None
