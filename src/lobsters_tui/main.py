#!/usr/bin/env python3
# -*- coding: utf-8 -*-
from __future__ import annotations

import argparse
import logging
import sys

from .app import LobstersApp
from .config import setup_logging

logger = logging.getLogger("lobsters")


# --- Entrypoint ---
def main() -> None:
    parser = argparse.ArgumentParser(
        description="Terminal browser for the newest lobste.rs stories"
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    debug_path = setup_logging(args.debug)
    if debug_path:
        print(f"Debug logging enabled: {debug_path}", file=sys.stderr)

    # App.run() owns raw mode and the alternate screen and restores the
    # terminal on every way out, including the exceptions caught here.
    try:
        app = LobstersApp()
        app.run()
    except Exception as e:
        logger.exception("Application crashed: %s", e)
        print(f"Application crashed: {e}", file=sys.stderr)
        sys.exit(1)

    sys.exit(app.return_code or 0)


if __name__ == "__main__":
    main()
