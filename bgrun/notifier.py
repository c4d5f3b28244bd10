from __future__ import annotations

import curses
import locale
import time
from typing import Dict, Iterable, Optional

import structlog
from rich.console import Console

from .config import NotifierConfig
from .job import JobOutcome, JobResult
from .popup import (
    STYLE_DIM,
    STYLE_FAILURE,
    STYLE_PLAIN,
    STYLE_SUCCESS,
    TEXT_X,
    PopupLine,
    build_lines,
    compute_geometry,
    summary_text,
)

logger = structlog.get_logger(__name__)

PAIR_SUCCESS = 1
PAIR_FAILURE = 2
PAIR_WARNING = 3  # reserved


def init_styles(use_color: bool) -> Dict[str, int]:
    """Set up color pairs (when possible) and return curses attributes per style."""
    styles = {
        STYLE_SUCCESS: curses.A_NORMAL,
        STYLE_FAILURE: curses.A_NORMAL,
        STYLE_PLAIN: curses.A_NORMAL,
        STYLE_DIM: curses.A_DIM,
    }
    if use_color and curses.has_colors():
        curses.start_color()
        curses.init_pair(PAIR_SUCCESS, curses.COLOR_GREEN, curses.COLOR_BLACK)
        curses.init_pair(PAIR_FAILURE, curses.COLOR_RED, curses.COLOR_BLACK)
        curses.init_pair(PAIR_WARNING, curses.COLOR_YELLOW, curses.COLOR_BLACK)
        styles[STYLE_SUCCESS] = curses.color_pair(PAIR_SUCCESS)
        styles[STYLE_FAILURE] = curses.color_pair(PAIR_FAILURE)
    return styles


def render_popup(win, lines: Iterable[PopupLine], styles: Dict[str, int]) -> None:
    """Draw a bordered popup into ``win``; nothing is written outside the border."""
    win.box()
    for line in lines:
        attr = styles.get(line.style, curses.A_NORMAL)
        if line.bold:
            attr |= curses.A_BOLD
        win.addstr(line.row, TEXT_X, line.text, attr)
    win.refresh()


class Notifier:
    """Wait for a job to finish and show the result as a terminal popup.

    The popup takes over the terminal in full-screen mode, stays until a key
    is pressed and then restores the previous terminal state. When the
    terminal is too small for a readable popup, or cannot be driven by curses
    at all, a one-line summary is printed instead.
    """

    def __init__(self, config: Optional[NotifierConfig] = None, console: Optional[Console] = None):
        self.config = config or NotifierConfig()
        self.console = console or Console(highlight=False)

    def notify(self, job: JobResult) -> JobOutcome:
        outcome = job.wait()
        logger.debug("job completed", command=outcome.command, exit_code=outcome.exit_code)
        time.sleep(self.config.settle_delay)
        self.show(outcome)
        return outcome

    def show(self, outcome: JobOutcome) -> bool:
        """Display ``outcome``; returns True when the popup itself was shown."""
        try:
            locale.setlocale(locale.LC_ALL, "")
        except locale.Error:
            logger.debug("locale not available, popup glyphs may not render")
        try:
            shown = curses.wrapper(self._session, outcome)
        except curses.error as exc:
            logger.debug("terminal unusable for popup", error=str(exc))
            shown = False
        if not shown:
            self.print_summary(outcome)
        return shown

    def print_summary(self, outcome: JobOutcome) -> None:
        style = "bold green" if outcome.success else "bold red"
        if not self.config.use_color:
            style = "bold"
        self.console.print(summary_text(outcome), style=style, markup=False)

    def _session(self, stdscr, outcome: JobOutcome) -> bool:
        rows, cols = stdscr.getmaxyx()
        geometry = compute_geometry(rows, cols, self.config.width, self.config.height)
        if not geometry.viable:
            logger.debug("terminal too small for popup", rows=rows, cols=cols)
            return False

        try:
            curses.curs_set(0)
        except curses.error:
            pass  # terminal cannot hide the cursor
        styles = init_styles(self.config.use_color)

        stdscr.refresh()
        win = curses.newwin(geometry.height, geometry.width, geometry.start_y, geometry.start_x)
        render_popup(win, build_lines(outcome, geometry), styles)
        win.nodelay(False)
        # A terminal resize is reported as a key; only a real key dismisses.
        while win.getch() == curses.KEY_RESIZE:
            pass
        return True
