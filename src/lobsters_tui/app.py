from __future__ import annotations

import logging
from functools import partial
from typing import Any, Callable, List, Optional, Tuple

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.worker import Worker, WorkerState
from textual.widgets import Static

from .browser import open_url
from .config import FIRST_PAGE
from .datamodels import Story
from .fetcher import Fetcher
from .projector import project
from .session import Direction, Session
from .widgets import StatusBar, StoryList

logger = logging.getLogger("lobsters")


class LobstersApp(App):
    TITLE = "lobste.rs"
    SUB_TITLE = "Newest stories"

    CSS_PATH = "app.tcss"

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("up", "move_up", "Up", show=False),
        Binding("down", "move_down", "Down", show=False),
        Binding("left", "page(-1)", "Previous page"),
        Binding("right", "page(1)", "Next page"),
        Binding("enter", "open_selected", "Open in browser"),
        Binding("r", "refresh", "Refresh"),
    ]

    def __init__(
        self,
        fetcher: Optional[Fetcher] = None,
        opener: Callable[[str], None] = open_url,
        **kwargs: Any,
    ):
        super().__init__(**kwargs)
        self.fetcher = fetcher or Fetcher()
        self.opener = opener
        self.session = Session(self.fetcher)

    def compose(self) -> ComposeResult:
        yield Static(id="banner")
        yield StoryList(id="stories")
        yield StatusBar()

    def on_mount(self) -> None:
        self.session.begin_fetch(FIRST_PAGE)
        self.redraw()
        self.run_worker(
            partial(Session.start, self.fetcher),
            name="startup_loader",
            thread=True,
            exclusive=True,
            exit_on_error=False,
        )

    def redraw(self) -> None:
        plan = project(self.session)
        self.query_one("#banner", Static).update(plan.banner)
        self.query_one(StoryList).show(plan.lines, plan.selected_index)
        self.query_one(StatusBar).show_plan(plan)

    def on_worker_state_changed(self, event: Worker.StateChanged) -> None:
        name = getattr(event.worker, "name", None)
        if name == "startup_loader" and event.state is WorkerState.SUCCESS:
            self.session = event.worker.result
            self.redraw()
        elif name == "startup_loader" and event.state is WorkerState.ERROR:
            self._handle_startup_error(event)
        elif name == "page_loader" and event.state is WorkerState.SUCCESS:
            self._handle_page_loaded(event)
        elif name == "page_loader" and event.state is WorkerState.ERROR:
            self._handle_page_error(event)

    def _handle_startup_error(self, event: Worker.StateChanged) -> None:
        # Nothing to show yet, so this one is fatal.
        error = event.worker.error
        logger.error("Startup fetch failed: %s", error)
        self.exit(return_code=1, message=f"Failed to load stories: {error}")

    def _handle_page_loaded(self, event: Worker.StateChanged) -> None:
        page_number, stories = event.worker.result
        self.session.apply_page(page_number, stories)
        self.redraw()

    def _handle_page_error(self, event: Worker.StateChanged) -> None:
        error = event.worker.error
        logger.error("Page loader failed: %s", error)
        self.session.fail_fetch(error)
        self.redraw()

    def _fetch_page(self, page_number: int) -> Tuple[int, List[Story]]:
        return page_number, self.fetcher.fetch(page_number)

    def _load_page(self, page_number: int) -> None:
        self.session.begin_fetch(page_number)
        self.redraw()
        self.run_worker(
            partial(self._fetch_page, page_number),
            name="page_loader",
            thread=True,
            exclusive=True,
            exit_on_error=False,
        )

    def action_move_up(self) -> None:
        self.session.move_selection(Direction.UP)
        self.redraw()

    def action_move_down(self) -> None:
        self.session.move_selection(Direction.DOWN)
        self.redraw()

    def action_page(self, step: int) -> None:
        if self.session.busy:
            self.redraw()
            return
        target = self.session.target_page(step)
        if target is None:
            logger.debug("No page %+d from page %d", step, self.session.page_number)
            self.redraw()
            return
        self._load_page(target)

    def action_refresh(self) -> None:
        if self.session.busy:
            self.redraw()
            return
        self._load_page(self.session.page_number)

    def action_open_selected(self) -> None:
        self.session.notify(self.session.open_selected(self.opener))
        self.redraw()
