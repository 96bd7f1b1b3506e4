from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Iterable, List, Optional

from .browser import open_url
from .config import FIRST_PAGE, MAX_PAGE
from .datamodels import Story
from .errors import UrlOpenError
from .fetcher import Fetcher

logger = logging.getLogger("lobsters")


class Direction(Enum):
    UP = -1
    DOWN = 1


class FetchState(Enum):
    IDLE = "idle"
    FETCHING = "fetching"
    ERROR = "error"


class Session:
    """The stories on screen, the selection cursor and the current page.

    Page changes are split in three so the network call can run off the UI
    thread: ``target_page`` decides whether a move is allowed, the fetcher
    loads the page, and ``apply_page`` commits it. ``go_to_page`` and
    ``refresh`` run all three in the calling thread.

    A failed fetch never touches ``stories``, ``page_number`` or
    ``selected_index``.
    """

    def __init__(
        self,
        fetcher: Fetcher,
        stories: Optional[Iterable[Story]] = None,
        page_number: int = FIRST_PAGE,
    ):
        self.fetcher = fetcher
        self.stories: List[Story] = list(stories or [])
        self.page_number = page_number
        self.selected_index = 0
        self.state = FetchState.IDLE
        self.message = ""

    @classmethod
    def start(cls, fetcher: Fetcher) -> Session:
        """Create a session holding the first page. Raises FetchError."""
        return cls(fetcher, fetcher.fetch(FIRST_PAGE), FIRST_PAGE)

    @property
    def selected_story(self) -> Optional[Story]:
        if not self.stories:
            return None
        return self.stories[self.selected_index]

    @property
    def busy(self) -> bool:
        return self.state is FetchState.FETCHING

    # --- Navigation ---
    def move_selection(self, direction: Direction) -> None:
        """Move the cursor one row, wrapping at both ends."""
        if not self.stories:
            self.selected_index = 0
            return
        self.selected_index = (self.selected_index + direction.value) % len(
            self.stories
        )

    def open_selected(self, opener: Callable[[str], None] = open_url) -> str:
        """Open the selected story and return a line for the status bar."""
        story = self.selected_story
        if story is None:
            return "No stories on this page."
        url = story.resolved_url
        if url is None:
            logger.info("Story %r has no URL", story.title)
            return "No URL available for this story."
        try:
            opener(url)
        except UrlOpenError as e:
            logger.error("Failed to open %s: %s", url, e)
            return f"Error opening URL: {e}"
        return f"Opened {url}"

    # --- Pagination ---
    def target_page(self, step: int) -> Optional[int]:
        """Return the page ``step`` pages away, or None past either end."""
        target = self.page_number + step
        if not FIRST_PAGE <= target <= MAX_PAGE:
            return None
        return target

    def begin_fetch(self, page_number: int) -> None:
        self.state = FetchState.FETCHING
        self.message = f"Loading page {page_number}..."

    def notify(self, message: str) -> None:
        """Replace the status message, clearing a previous fetch error."""
        if self.state is FetchState.ERROR:
            self.state = FetchState.IDLE
        self.message = message

    def fail_fetch(self, error: Exception) -> None:
        self.state = FetchState.ERROR
        self.message = f"Error loading stories: {error}"

    def apply_page(self, page_number: int, stories: Iterable[Story]) -> None:
        if not FIRST_PAGE <= page_number <= MAX_PAGE:
            raise ValueError(f"page {page_number} is out of range")
        self.stories = list(stories)
        self.page_number = page_number
        self.selected_index = 0
        self.state = FetchState.IDLE
        self.message = ""
        logger.info("Showing page %d with %d stories", page_number, len(self.stories))

    def go_to_page(self, target_page: int) -> bool:
        """Load ``target_page`` and show it.

        This is the blocking form of the path the app runs in a worker
        (``target_page``, ``Fetcher.fetch``, ``apply_page``).

        Returns False without fetching when the page is out of range or
        already shown. Raises FetchError and leaves the session unchanged
        when the fetch fails.
        """
        if not FIRST_PAGE <= target_page <= MAX_PAGE or target_page == self.page_number:
            logger.debug("Refusing move from page %d to %d", self.page_number, target_page)
            return False
        stories = self.fetcher.fetch(target_page)
        self.apply_page(target_page, stories)
        return True

    def refresh(self) -> None:
        """Reload the current page in the calling thread.

        Raises FetchError, leaving the session unchanged.
        """
        stories = self.fetcher.fetch(self.page_number)
        self.apply_page(self.page_number, stories)
