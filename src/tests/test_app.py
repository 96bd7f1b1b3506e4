from __future__ import annotations

import asyncio
from contextlib import suppress

import pytest
from textual.worker import WorkerFailed

from lobsters_tui.app import LobstersApp
from lobsters_tui.datamodels import Story
from lobsters_tui.errors import SchemaError, TransportError
from lobsters_tui.parser import parse_page
from lobsters_tui.session import FetchState
from lobsters_tui.widgets import StatusBar


class FakeFetcher:
    """Serves canned pages; an exception in place of a page is raised."""

    def __init__(self, pages):
        self.pages = pages
        self.calls = []

    def fetch(self, page_number):
        self.calls.append(page_number)
        result = self.pages[page_number]
        if isinstance(result, Exception):
            raise result
        return list(result)


def _page(n, size=3):
    return [
        Story(title=f"Page {n} story {i}", score=10 - i, url=f"https://example.com/{n}/{i}")
        for i in range(size)
    ]


async def _settle(app, pilot):
    with suppress(WorkerFailed):
        await app.workers.wait_for_complete()
    await pilot.pause()


def _run(app, scenario):
    async def runner():
        async with app.run_test() as pilot:
            await _settle(app, pilot)
            await scenario(pilot)

    asyncio.run(runner())


@pytest.fixture
def all_pages():
    return {n: _page(n) for n in range(1, 6)}


def test_startup_drops_malformed_items(feed_document):
    app = LobstersApp(fetcher=FakeFetcher({1: parse_page(feed_document)}))

    async def scenario(pilot):
        assert len(app.session.stories) == 3
        assert app.session.selected_index == 0
        assert app.session.page_number == 1

    _run(app, scenario)


def test_left_on_first_page_is_a_no_op(all_pages):
    fetcher = FakeFetcher(all_pages)
    app = LobstersApp(fetcher=fetcher)

    async def scenario(pilot):
        await pilot.press("down")
        await pilot.press("left")
        await _settle(app, pilot)
        assert app.session.page_number == 1
        assert app.session.selected_index == 1
        assert fetcher.calls == [1]

    _run(app, scenario)


def test_right_loads_next_page_and_resets_selection(all_pages):
    app = LobstersApp(fetcher=FakeFetcher(all_pages))

    async def scenario(pilot):
        await pilot.press("down", "down")
        assert app.session.selected_index == 2
        await pilot.press("right")
        await _settle(app, pilot)
        assert app.session.page_number == 2
        assert app.session.selected_index == 0
        assert app.session.stories[0].title == "Page 2 story 0"

    _run(app, scenario)


def test_right_on_last_page_is_a_no_op(all_pages):
    fetcher = FakeFetcher(all_pages)
    app = LobstersApp(fetcher=fetcher)

    async def scenario(pilot):
        for _ in range(4):
            await pilot.press("right")
            await _settle(app, pilot)
        assert app.session.page_number == 5
        await pilot.press("right")
        await _settle(app, pilot)
        assert app.session.page_number == 5
        assert fetcher.calls == [1, 2, 3, 4, 5]

    _run(app, scenario)


@pytest.mark.parametrize("error", [TransportError("timed out"), SchemaError("not a list")])
def test_failed_page_change_keeps_session_running(all_pages, error):
    all_pages[2] = error
    app = LobstersApp(fetcher=FakeFetcher(all_pages))

    async def scenario(pilot):
        await pilot.press("down")
        await pilot.press("right")
        await _settle(app, pilot)
        assert app.session.page_number == 1
        assert app.session.selected_index == 1
        assert app.session.stories[0].title == "Page 1 story 0"
        assert app.session.state is FetchState.ERROR
        assert str(error) in app.session.message
        assert app.is_running

    _run(app, scenario)


def test_refresh_reloads_current_page(all_pages):
    fetcher = FakeFetcher(all_pages)
    app = LobstersApp(fetcher=fetcher)

    async def scenario(pilot):
        await pilot.press("right")
        await _settle(app, pilot)
        await pilot.press("down", "r")
        await _settle(app, pilot)
        assert fetcher.calls == [1, 2, 2]
        assert app.session.page_number == 2
        assert app.session.selected_index == 0

    _run(app, scenario)


def test_enter_opens_resolved_url():
    opened = []
    stories = [
        Story(title="A", score=3, url="https://example.com/a"),
        Story(title="B", score=2, fallback_url="https://lobste.rs/s/b"),
        Story(title="C", score=1),
    ]
    app = LobstersApp(fetcher=FakeFetcher({1: stories}), opener=opened.append)

    async def scenario(pilot):
        await pilot.press("down", "enter")
        assert opened == ["https://lobste.rs/s/b"]
        await pilot.press("down", "enter")
        assert opened == ["https://lobste.rs/s/b"]
        assert app.session.message == "No URL available for this story."

    _run(app, scenario)


def test_up_wraps_to_last_story(all_pages):
    app = LobstersApp(fetcher=FakeFetcher(all_pages))

    async def scenario(pilot):
        await pilot.press("up")
        assert app.session.selected_index == 2

    _run(app, scenario)


def test_quit_exits_cleanly(all_pages):
    app = LobstersApp(fetcher=FakeFetcher(all_pages))

    async def scenario(pilot):
        await pilot.press("q")

    _run(app, scenario)
    assert app.return_code == 0


def test_startup_failure_exits_non_zero():
    app = LobstersApp(fetcher=FakeFetcher({1: TransportError("connection refused")}))

    async def runner():
        async with app.run_test():
            with suppress(WorkerFailed):
                await app.workers.wait_for_complete()
            for _ in range(50):
                if app.return_code is not None:
                    break
                await asyncio.sleep(0.02)

    asyncio.run(runner())
    assert app.return_code == 1


@pytest.mark.parametrize("key", ["right", "r"])
def test_paging_while_loading_redraws_without_fetching(all_pages, key):
    fetcher = FakeFetcher(all_pages)
    app = LobstersApp(fetcher=fetcher)

    async def scenario(pilot):
        app.session.begin_fetch(2)
        assert app.query_one(StatusBar).message == ""
        await pilot.press(key)
        await _settle(app, pilot)
        assert fetcher.calls == [1]
        assert app.session.page_number == 1
        assert app.query_one(StatusBar).message == "Loading page 2..."

    _run(app, scenario)
