from __future__ import annotations

import logging
from typing import Any, List, Optional

from .datamodels import Story
from .errors import SchemaError

logger = logging.getLogger("lobsters")


def _get_str(item: dict, key: str) -> Optional[str]:
    value = item.get(key)
    return value if isinstance(value, str) else None


def _get_int(item: dict, key: str) -> Optional[int]:
    value = item.get(key)
    # bool is an int subclass; a flag is never a count.
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def _get_submitter(item: dict) -> Optional[str]:
    """Return the submitter's name.

    The feed has served ``submitter_user`` both as a bare username and as a
    user object; either shape is accepted.
    """
    value = item.get("submitter_user")
    if isinstance(value, str):
        return value or None
    if isinstance(value, dict):
        return _get_str(value, "username") or None
    return None


def _get_tags(item: dict) -> List[str]:
    value = item.get("tags")
    if not isinstance(value, list):
        return []
    return [t for t in value if isinstance(t, str) and t]


def parse_story(item: Any) -> Optional[Story]:
    """Extract a Story from one feed item.

    Every field is looked up on its own and a missing or mistyped field reads
    as absent. Only ``title`` and ``score`` are required; without them the
    item cannot be shown and None is returned. An item with neither ``url``
    nor ``short_id_url`` is still a Story, it just cannot be opened.
    """
    if not isinstance(item, dict):
        logger.debug("Dropping feed item of type %s", type(item).__name__)
        return None

    title = _get_str(item, "title")
    score = _get_int(item, "score")
    if title is None or score is None:
        logger.debug(
            "Dropping feed item %r: title=%r score=%r",
            item.get("short_id"),
            title,
            score,
        )
        return None

    return Story(
        title=title,
        score=score,
        url=_get_str(item, "url") or "",
        fallback_url=_get_str(item, "short_id_url") or "",
        comment_count=_get_int(item, "comment_count"),
        submitter=_get_submitter(item),
        tags=_get_tags(item),
    )


def parse_page(document: Any) -> List[Story]:
    """Map a decoded feed page onto its renderable stories, in server order.

    Raises SchemaError when the document is not a JSON array.
    """
    if not isinstance(document, list):
        raise SchemaError(
            f"expected a JSON array of stories, got {type(document).__name__}"
        )
    stories = [s for s in (parse_story(item) for item in document) if s is not None]
    dropped = len(document) - len(stories)
    if dropped:
        logger.info("Dropped %d of %d feed items", dropped, len(document))
    return stories
