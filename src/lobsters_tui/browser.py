from __future__ import annotations

import logging
import webbrowser

from .errors import UrlOpenError

logger = logging.getLogger("lobsters")


def open_url(url: str) -> None:
    """Hand ``url`` to the system's default handler.

    Raises UrlOpenError when no handler accepts it.
    """
    logger.info("Opening %s", url)
    try:
        opened = webbrowser.open(url)
    except webbrowser.Error as e:
        raise UrlOpenError(f"could not open {url}: {e}") from e
    if not opened:
        raise UrlOpenError(f"no browser available to open {url}")
