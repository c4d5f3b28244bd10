"""Geometry and text layout of the completion popup.

Nothing in here touches the terminal; :mod:`bgrun.notifier` draws the lines
produced by :func:`build_lines` into the region from :func:`compute_geometry`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .config import MIN_POPUP_HEIGHT, MIN_POPUP_WIDTH, POPUP_HEIGHT, POPUP_WIDTH
from .job import JobOutcome

ELLIPSIS = "..."

# Text starts two columns in from the left border and keeps two free on the right.
TEXT_X = 2
H_PADDING = 4

STYLE_SUCCESS = "success"
STYLE_FAILURE = "failure"
STYLE_PLAIN = "plain"
STYLE_DIM = "dim"


@dataclass(frozen=True)
class PopupGeometry:
    height: int
    width: int
    start_y: int
    start_x: int

    @property
    def inner_width(self) -> int:
        return self.width - H_PADDING

    @property
    def viable(self) -> bool:
        return self.width >= MIN_POPUP_WIDTH and self.height >= MIN_POPUP_HEIGHT


@dataclass(frozen=True)
class PopupLine:
    row: int
    text: str
    style: str
    bold: bool = False


def compute_geometry(
    screen_rows: int,
    screen_cols: int,
    width: int = POPUP_WIDTH,
    height: int = POPUP_HEIGHT,
) -> PopupGeometry:
    """Center a ``width`` x ``height`` region, clamped to leave a 1-cell margin."""
    width = min(width, screen_cols - 2)
    height = min(height, screen_rows - 2)
    start_y = max(1, (screen_rows - height) // 2)
    start_x = max(1, (screen_cols - width) // 2)
    return PopupGeometry(height=height, width=width, start_y=start_y, start_x=start_x)


def truncate(text: str, max_len: int) -> str:
    if max_len <= 0:
        return ""
    if len(text) <= max_len:
        return text
    if max_len <= len(ELLIPSIS):
        return text[:max_len]
    return text[: max_len - len(ELLIPSIS)] + ELLIPSIS


def title_for(outcome: JobOutcome) -> str:
    return "✓ COMMAND COMPLETED" if outcome.success else "✗ COMMAND FAILED"


def build_lines(outcome: JobOutcome, geometry: Optional[PopupGeometry] = None) -> List[PopupLine]:
    """Lay out the popup body for ``outcome``.

    Rows are relative to the popup window; rows that would land on or below
    the bottom border are dropped, and every text is cut to the inner width.
    """
    geometry = geometry or PopupGeometry(POPUP_HEIGHT, POPUP_WIDTH, 0, 0)
    inner = geometry.inner_width
    status_style = STYLE_SUCCESS if outcome.success else STYLE_FAILURE
    lines = [
        PopupLine(1, title_for(outcome), status_style, bold=True),
        PopupLine(3, "Command:", STYLE_PLAIN),
        PopupLine(4, outcome.command, STYLE_PLAIN),
        PopupLine(5, f"Exit Code: {outcome.exit_code}", STYLE_PLAIN),
        PopupLine(7, "Press any key to dismiss...", STYLE_DIM),
    ]
    return [
        PopupLine(line.row, truncate(line.text, inner), line.style, line.bold)
        for line in lines
        if line.row < geometry.height - 1
    ]


def summary_text(outcome: JobOutcome) -> str:
    """One-line summary used when no popup can be drawn."""
    return f"{title_for(outcome)}: {outcome.command} (exit code {outcome.exit_code})"
