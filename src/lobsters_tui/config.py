from __future__ import annotations

import logging
import os
from datetime import datetime
from typing import Optional

# --- Configuration ---
NEWEST_URL = "https://lobste.rs/newest.json"
PAGE_URL_TEMPLATE = "https://lobste.rs/newest/page/{page}.json"
FIRST_PAGE = 1
MAX_PAGE = 5
HTTP_TIMEOUT = 15

REQUEST_HEADERS = {
    "Accept": "application/json",
    "User-Agent": "lobsters-tui (+https://lobste.rs)",
}
RETRY_ATTEMPTS = 3
RETRY_BACKOFF = 0.3
RETRY_STATUSES = (429, 500, 502, 503, 504)

BANNER = r"""
 ████           █████              █████
░░███          ░░███              ░░███
 ░███   ██████  ░███████   █████  ███████    ██████     ████████   █████
 ░███  ███░░███ ░███░░███ ███░░  ░░░███░    ███░░███   ░░███░░███ ███░░
 ░███ ░███ ░███ ░███ ░███░░█████   ░███    ░███████     ░███ ░░░ ░░█████
 ░███ ░███ ░███ ░███ ░███ ░░░░███  ░███ ███░███░░░      ░███      ░░░░███
 █████░░██████  ████████  ██████   ░░█████ ░░██████  ██ █████     ██████
░░░░░  ░░░░░░  ░░░░░░░░  ░░░░░░     ░░░░░   ░░░░░░  ░░ ░░░░░     ░░░░░░
"""

KEYBINDINGS_LEGEND = (
    "↑/↓: Navigate, ←/→: Page, Enter: Open in browser, r: Refresh, q: Quit"
)

# --- Logging ---
logger = logging.getLogger("lobsters")


def setup_logging(debug: bool = False) -> Optional[str]:
    """Configure logging.

    Nothing may write to the terminal while the UI owns it, so without
    ``debug`` every record is discarded.
    """
    if not debug:
        logging.basicConfig(level=logging.CRITICAL, handlers=[logging.NullHandler()])
        return None

    ts = datetime.now().strftime("%Y%m%dT%H%M%S")
    pid = os.getpid()
    debug_path = f"/tmp/lobsters_debug_{ts}_{pid}.log"

    logging.basicConfig(
        level=logging.DEBUG,
        filename=debug_path,
        filemode="a",
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )

    logger.debug("Debug logging enabled to %s", debug_path)
    return debug_path
