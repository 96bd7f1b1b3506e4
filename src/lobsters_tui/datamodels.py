from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional


# --- Data models ---
@dataclass
class Story:
    title: str
    score: int
    url: str = ""
    fallback_url: str = ""
    comment_count: Optional[int] = None
    submitter: Optional[str] = None
    tags: List[str] = field(default_factory=list)

    @property
    def resolved_url(self) -> Optional[str]:
        """The primary link, or the permalink when the link is empty."""
        return self.url or self.fallback_url or None

    @property
    def openable(self) -> bool:
        return self.resolved_url is not None


# --- Render models ---
@dataclass(frozen=True)
class Segment:
    text: str
    bold: bool = False
    color: Optional[str] = None


@dataclass
class StyledLine:
    segments: List[Segment]
    selected: bool = False

    @property
    def plain(self) -> str:
        return "".join(s.text for s in self.segments)


@dataclass
class RenderPlan:
    banner: str
    lines: List[StyledLine]
    selected_index: int
    summary: str
    detail: str
    message: str
    legend: str
    error: bool = False
