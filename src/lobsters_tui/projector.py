from __future__ import annotations

from typing import List

from .config import BANNER, KEYBINDINGS_LEGEND, MAX_PAGE
from .datamodels import RenderPlan, Segment, StyledLine, Story
from .session import FetchState, Session

SELECTED_MARKER = "► "
UNSELECTED_MARKER = "  "
NO_URL = "(no link)"


def story_line(story: Story, selected: bool) -> StyledLine:
    return StyledLine(
        segments=[
            Segment(SELECTED_MARKER if selected else UNSELECTED_MARKER),
            Segment(f"⧋ {story.score:3}   "),
            Segment(story.title, bold=True, color="green" if selected else "white"),
            Segment(" "),
            Segment(story.resolved_url or NO_URL, color="blue"),
        ],
        selected=selected,
    )


def story_detail(story: Story) -> str:
    parts: List[str] = []
    if story.submitter:
        parts.append(f"by {story.submitter}")
    if story.comment_count is not None:
        noun = "comment" if story.comment_count == 1 else "comments"
        parts.append(f"{story.comment_count} {noun}")
    if story.tags:
        parts.append(", ".join(story.tags))
    return " | ".join(parts)


def project(session: Session) -> RenderPlan:
    """Describe what to draw for ``session``. Reads the session only."""
    lines = [
        story_line(story, i == session.selected_index)
        for i, story in enumerate(session.stories)
    ]
    count = len(session.stories)
    noun = "story" if count == 1 else "stories"
    selected = session.selected_story
    return RenderPlan(
        banner=BANNER,
        lines=lines,
        selected_index=session.selected_index,
        summary=f"{count} {noun} | Page {session.page_number}/{MAX_PAGE}",
        detail=story_detail(selected) if selected else "",
        message=session.message,
        legend=KEYBINDINGS_LEGEND,
        error=session.state is FetchState.ERROR,
    )
