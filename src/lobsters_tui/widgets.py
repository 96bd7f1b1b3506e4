from __future__ import annotations

from typing import List

from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.reactive import reactive
from textual.widgets import Static
from rich.text import Text

from .datamodels import RenderPlan, StyledLine


def to_text(line: StyledLine) -> Text:
    """Turn a projected line into rich Text."""
    parts = []
    for seg in line.segments:
        style = " ".join(s for s in ("bold" if seg.bold else "", seg.color or "") if s)
        parts.append((seg.text, style))
    return Text.assemble(*parts)


# --- UI Widgets ---
class StoryList(VerticalScroll):
    """One row per story. The session owns the cursor, so this never takes focus."""

    can_focus = False

    def compose(self) -> ComposeResult:
        yield Static(id="story-lines")

    def show(self, lines: List[StyledLine], selected_index: int) -> None:
        body = self.query_one("#story-lines", Static)
        if not lines:
            body.update(Text("No stories on this page.", style="italic"))
            return
        text = Text("\n").join(to_text(line) for line in lines)
        text.no_wrap = True
        text.overflow = "ellipsis"
        body.update(text)
        # Rows never wrap, so row n sits at y == n.
        self.call_after_refresh(self._scroll_to_row, selected_index)

    def _scroll_to_row(self, row: int) -> None:
        self.scroll_to(y=max(0, row - self.size.height // 2), animate=False)


class StatusBar(Static):
    summary = reactive("")
    message = reactive("")
    detail = reactive("")
    keybinding_hint = reactive("")
    error = reactive(False)

    def on_mount(self) -> None:
        self.update_display()

    def show_plan(self, plan: RenderPlan) -> None:
        self.summary = plan.summary
        self.message = plan.message
        self.detail = plan.detail
        self.error = plan.error
        self.keybinding_hint = plan.legend

    def update_display(self) -> None:
        """Update the status bar display."""
        first = Text(self.summary)
        if self.message:
            first.append(" | ")
            first.append(self.message, style="bold red" if self.error else "yellow")
        rows = [first, Text(self.detail, style="dim")]
        if self.keybinding_hint:
            rows.append(Text(self.keybinding_hint, style="bold"))
        self.update(Text("\n").join(rows))

    def watch_summary(self, summary: str) -> None:
        self.update_display()

    def watch_message(self, message: str) -> None:
        self.update_display()

    def watch_detail(self, detail: str) -> None:
        self.update_display()

    def watch_keybinding_hint(self, keybinding_hint: str) -> None:
        self.update_display()

    def watch_error(self, error: bool) -> None:
        self.update_display()
