from __future__ import annotations

import webbrowser
from unittest.mock import patch

import pytest

from lobsters_tui.browser import open_url
from lobsters_tui.errors import UrlOpenError


def test_open_url_hands_off_to_webbrowser():
    with patch("lobsters_tui.browser.webbrowser.open", return_value=True) as mock_open:
        open_url("https://example.com")
    mock_open.assert_called_once_with("https://example.com")


def test_open_url_raises_when_no_browser():
    with patch("lobsters_tui.browser.webbrowser.open", return_value=False):
        with pytest.raises(UrlOpenError):
            open_url("https://example.com")


def test_open_url_wraps_webbrowser_error():
    with patch(
        "lobsters_tui.browser.webbrowser.open", side_effect=webbrowser.Error("boom")
    ):
        with pytest.raises(UrlOpenError):
            open_url("https://example.com")
