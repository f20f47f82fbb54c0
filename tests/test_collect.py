import asyncio

import pytest

from newest_check.core.collect import collect_timestamps, parse_timestamp
from newest_check.core.errors import NavigationFailure, TimestampParseError


def _titles(newest: int, n: int) -> list:
    return [f"2024-05-01T00:00:00 {newest - i}" for i in range(n)]


class _FakeAge:
    def __init__(self, title) -> None:
        self.title = title


class _FakePage:
    """Serves one list of titles per page; clicking 'More' moves to the next one."""

    def __init__(self, pages, fail_on_more: bool = False) -> None:
        self.pages = pages
        self.fail_on_more = fail_on_more
        self.index = 0
        self.reads = 0
        self.clicks = 0

    async def age_elements(self):
        return [_FakeAge(t) for t in self.pages[self.index]]

    async def title_of(self, element):
        self.reads += 1
        return element.title

    async def has_more(self) -> bool:
        return self.index + 1 < len(self.pages)

    async def load_more(self) -> None:
        self.clicks += 1
        if self.fail_on_more:
            raise NavigationFailure("timed out")
        self.index += 1


def test_parse_timestamp_takes_second_token():
    assert parse_timestamp("2024-05-01T12:34:56 1714566896") == 1714566896
    assert parse_timestamp("2024-05-01T12:34:56   1714566896  extra words") == 1714566896


@pytest.mark.parametrize("title", ["2024-05-01T12:34:56", "2024-05-01T12:34:56 soon", ""])
def test_parse_timestamp_rejects_malformed_titles(title):
    with pytest.raises(TimestampParseError) as exc_info:
        parse_timestamp(title)
    assert exc_info.value.title == title


def test_collect_stops_reading_once_target_is_reached():
    page = _FakePage([_titles(1000, 30), _titles(970, 30)])

    timestamps = asyncio.run(collect_timestamps(page, 10))

    assert timestamps == list(range(1000, 990, -1))
    assert page.reads == 10
    assert page.clicks == 0


def test_collect_paginates_until_target():
    page = _FakePage([_titles(1000, 30), _titles(970, 30), _titles(940, 30), _titles(910, 30)])

    timestamps = asyncio.run(collect_timestamps(page, 100))

    assert len(timestamps) == 100
    assert timestamps[0] == 1000
    assert timestamps[-1] == 901
    assert page.clicks == 3
    assert page.reads == 100


def test_collect_skips_elements_without_title(capsys):
    page = _FakePage([["x 50", None, "x 40", "", "x 30"], ["x 20", "x 10"]])

    timestamps = asyncio.run(collect_timestamps(page, 4))

    assert timestamps == [50, 40, 30, 20]
    assert page.clicks == 1
    assert capsys.readouterr().err.count("no title attribute") == 2


def test_collect_returns_partial_result_when_more_link_is_gone(capsys):
    page = _FakePage([_titles(1000, 30), _titles(970, 12)])

    timestamps = asyncio.run(collect_timestamps(page, 100))

    assert len(timestamps) == 42
    assert page.clicks == 1
    err = capsys.readouterr().err
    assert "Could not find the 'More' link" in err
    assert "42" in err


def test_collect_propagates_parse_errors():
    page = _FakePage([["x 3", "x soon", "x 1"]])

    with pytest.raises(TimestampParseError):
        asyncio.run(collect_timestamps(page, 3))


def test_collect_propagates_navigation_failure():
    page = _FakePage([_titles(1000, 30), _titles(970, 30)], fail_on_more=True)

    with pytest.raises(NavigationFailure):
        asyncio.run(collect_timestamps(page, 50))
    assert page.clicks == 1


def test_collect_rejects_non_positive_target():
    with pytest.raises(ValueError):
        asyncio.run(collect_timestamps(_FakePage([[]]), 0))
