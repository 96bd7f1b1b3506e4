from __future__ import annotations

import logging
from typing import List, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .config import (
    FIRST_PAGE,
    HTTP_TIMEOUT,
    MAX_PAGE,
    NEWEST_URL,
    PAGE_URL_TEMPLATE,
    REQUEST_HEADERS,
    RETRY_ATTEMPTS,
    RETRY_BACKOFF,
    RETRY_STATUSES,
)
from .datamodels import Story
from .errors import SchemaError, TransportError
from .parser import parse_page

logger = logging.getLogger("lobsters")


def page_url(page_number: int) -> str:
    """Return the feed URL for a 1-based page number."""
    if not FIRST_PAGE <= page_number <= MAX_PAGE:
        raise ValueError(
            f"page must be between {FIRST_PAGE} and {MAX_PAGE}, got {page_number}"
        )
    if page_number == FIRST_PAGE:
        return NEWEST_URL
    return PAGE_URL_TEMPLATE.format(page=page_number)


class Fetcher:
    def __init__(
        self, session: Optional[requests.Session] = None, timeout: float = HTTP_TIMEOUT
    ):
        self.session = session or self._create_session()
        self.timeout = timeout

    def _create_session(self) -> requests.Session:
        s = requests.Session()
        s.headers.update(REQUEST_HEADERS)
        retries = Retry(
            total=RETRY_ATTEMPTS,
            backoff_factor=RETRY_BACKOFF,
            status_forcelist=RETRY_STATUSES,
            allowed_methods=["GET"],
        )
        adapter = HTTPAdapter(max_retries=retries)
        s.mount("https://", adapter)
        s.mount("http://", adapter)
        return s

    def fetch(self, page_number: int) -> List[Story]:
        """Fetch one feed page and return its renderable stories.

        Raises TransportError when the request fails and SchemaError when the
        body is not a JSON array. An empty list is a valid page.
        """
        url = page_url(page_number)
        logger.debug("Fetching page %d from %s", page_number, url)
        try:
            resp = self.session.get(url, timeout=self.timeout)
            resp.raise_for_status()
        except requests.RequestException as e:
            logger.warning("Fetching %s failed: %s", url, e)
            raise TransportError(f"could not fetch page {page_number}: {e}") from e

        try:
            document = resp.json()
        except ValueError as e:
            logger.warning("Page %d body is not JSON: %s", page_number, e)
            raise SchemaError(f"page {page_number} is not valid JSON") from e

        stories = parse_page(document)
        logger.debug("Fetched %d stories for page %d", len(stories), page_number)
        return stories
