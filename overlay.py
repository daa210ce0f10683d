import curses
from typing import List

import shortcut_help


class OverlayView:
    """Full-height help layer drawn over the explorer and editor."""

    def __init__(self, layout):
        self.layout = layout
        self.lines: List[str] = shortcut_help.get_lines()
        self.win = None

    def set_layout(self, layout):
        self.layout = layout
        self.win = None

    @property
    def height(self):
        return max(3, self.layout.overlay_h)

    def _ensure_win(self):
        if self.win is None:
            self.win = curses.newwin(self.height, self.layout.W, 0, 0)
            self.win.leaveok(True)
        return self.win

    def draw(self, state):
        if not state.modes.help_visible:
            self.win = None
            return
        self._draw_help(self._ensure_win(), state.help_scroll)

    def _draw_help(self, win, scroll):
        win.erase()
        h, w = win.getmaxyx()

        dim_attr = curses.A_DIM if hasattr(curses, "A_DIM") else 0
        blank = " " * max(1, w - 1)
        for row in range(max(0, h)):
            try:
                win.addnstr(row, 0, blank, w - 1, dim_attr)
            except curses.error:
                pass

        start = min(scroll, shortcut_help.max_scroll(h))
        for idx, line in enumerate(self.lines[start : start + h]):
            try:
                win.addnstr(idx, 1, line.ljust(w - 2), w - 2)
            except curses.error:
                pass

        win.refresh()
