from __future__ import annotations

import pytest

from lobsters_tui.datamodels import Story


def make_item(**overrides):
    item = {
        "short_id": "abc123",
        "title": "A story",
        "url": "https://example.com/a",
        "score": 10,
        "comment_count": 3,
        "submitter_user": "alice",
        "tags": ["python"],
    }
    item.update(overrides)
    item.setdefault("short_id_url", f"https://lobste.rs/s/{item['short_id']}")
    return item


@pytest.fixture
def feed_document():
    """A page with three good items and one without a title."""
    return [
        make_item(short_id="one", title="First", score=42),
        make_item(short_id="two", title="Second", score=7, url=""),
        {"short_id": "broken", "score": 99, "url": "https://example.com/broken"},
        make_item(short_id="three", title="Third", score=1),
    ]


@pytest.fixture
def stories():
    return [
        Story(title=f"Story {i}", score=i, url=f"https://example.com/{i}")
        for i in range(1, 5)
    ]
