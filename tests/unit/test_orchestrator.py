"""Unit tests for the command orchestrator."""

import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from application.orchestrator import CommandOrchestrator
from application.settings import Settings

ID_A = "a" * 28 + "1111"
ID_B = "b" * 28 + "2222"
ROOT = "https://exercism.io/tracks/go/exercises/two-fer"

SUITE = "package twofer\n\nimport \"testing\"\n\nfunc BenchmarkShareWith(b *testing.B) {}\n"


@pytest.fixture
def settings(tmp_path):
    return Settings(exercise="two-fer", download_dir=tmp_path / "solutions", workers=2)


def make_http_client(pages: dict[str, str]) -> MagicMock:
    async def get_text(url, params=None):
        if params:
            url = f"{url}?page={params['page']}"
        return pages[url], url

    client = MagicMock()
    client.get_text = AsyncMock(side_effect=get_text)
    return client


@pytest.fixture
def site(list_page, solution_page):
    first = list_page([ID_A, ID_B], last_page=2)
    return {
        f"{ROOT}/solutions": first,
        f"{ROOT}/solutions?page=1": first,
        f"{ROOT}/solutions?page=2": list_page([ID_B], last_page=2),
        f"{ROOT}/solutions/{ID_A}": solution_page(
            author="alice", code="package twofer\n", test_files=[("two_fer_test.go", SUITE)]
        ),
        f"{ROOT}/solutions/{ID_B}": solution_page(
            author="bob", code="package twofer\n", test_files=[("two_fer_test.go", SUITE)]
        ),
    }


@pytest.mark.asyncio
async def test_total(settings, site):
    orchestrator = CommandOrchestrator(settings, http_client=make_http_client(site))

    assert await orchestrator.total() == 2


@pytest.mark.asyncio
async def test_download_then_bench_then_clean(settings, site, tmp_path):
    async def run(tool, work_dir, *args, timeout=None):
        time = 12.5 if any(p.name.endswith("-alice.go") for p in work_dir.iterdir()) else 40.0
        return f"BenchmarkShareWith-8\t1000\t{time} ns/op\t0 B/op\t0 allocs/op\n"

    runner = MagicMock()
    runner.run = AsyncMock(side_effect=run)
    orchestrator = CommandOrchestrator(
        settings, http_client=make_http_client(site), runner=runner
    )

    summary = await orchestrator.download()

    assert summary.solutions == 2
    assert summary.test_files == 1
    assert sorted(p.name for p in settings.exercise_dir.iterdir()) == [
        f"{ID_A}-alice.go",
        f"{ID_B}-bob.go",
        "test-suite",
    ]

    json_path = tmp_path / "out" / "report.json"
    report = await orchestrator.bench(json_path)

    assert [s.name for s in report.rankings["BenchmarkShareWith"]] == [
        f"{ID_A}-alice",
        f"{ID_B}-bob",
    ]
    data = json.loads(json_path.read_text())
    assert data["benchmark_info"]["benchmarked"] == 2
    assert data["rankings"]["BenchmarkShareWith"][0]["rank"] == 1
    assert data["rankings"]["BenchmarkShareWith"][0]["time_ns"] == 12.5

    assert await orchestrator.clean() is True
    assert not settings.exercise_dir.exists()
    assert await orchestrator.clean() is False
