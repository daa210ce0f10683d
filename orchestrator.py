import curses
import logging

import keys
from editor_pane import EditorPane
from explorer_pane import ExplorerPane
from input_router import InputRouter
from modes import CreateNote, SelectFile
from overlay import OverlayView
from prompt_bar import PromptBar
from screen_layout import ScreenLayout
from status_bar import render_status

logger = logging.getLogger(__name__)


class Orchestrator:
    """Owns the single control loop: read one key, route it, redraw."""

    def __init__(self, stdscr, app_state, store, config=None):
        self.stdscr = stdscr
        config = config or {}
        curses.curs_set(1)
        # raw: Ctrl+S / Ctrl+Q reach us instead of doing terminal flow control
        curses.raw()
        self.stdscr.keypad(True)
        self.stdscr.nodelay(False)
        self.stdscr.timeout(100)

        self.state = app_state
        self.store = store
        self.router = InputRouter(app_state, store, tab_width=config.get("TAB_WIDTH", 4))

        self.layout = ScreenLayout(stdscr, explorer_open=self._wants_explorer())
        self.editor = EditorPane(line_numbers=config.get("LINE_NUMBERS", True))
        self.explorer = ExplorerPane()
        self.prompt = PromptBar()
        self.overlay = OverlayView(self.layout)

    # ---------------- helpers ----------------

    def _wants_explorer(self):
        # the open-note list lives in the explorer, so SelectFile forces it
        return self.state.explorer_open or isinstance(self.state.mode, SelectFile)

    def _rebuild_layout(self):
        curses.update_lines_cols()
        self.stdscr.clear()
        self.stdscr.refresh()
        self.layout = ScreenLayout(self.stdscr, explorer_open=self._wants_explorer())
        self.overlay.set_layout(self.layout)

    def _read_key(self):
        try:
            return self.stdscr.get_wch()
        except curses.error:
            # timeout with no input
            return None

    def _set_cursor_visible(self, visible):
        try:
            curses.curs_set(1 if visible else 0)
        except curses.error:
            pass

    # ---------------- UI ----------------

    def redraw(self):
        state = self.state
        # listing is rebuilt every frame; errors here only empty it
        self.router.refresh_listing(quiet=True)
        self.router.page_rows = max(1, self.layout.main_h - 3)
        self.router.help_rows = self.overlay.height

        sw = self.layout.status_win
        sw.erase()
        _, w = sw.getmaxyx()
        try:
            sw.addnstr(0, 0, render_status(state, w), max(0, w - 1), curses.A_REVERSE)
        except curses.error:
            pass
        sw.refresh()

        if state.modes.help_visible:
            self._set_cursor_visible(False)
            self.prompt.draw(self.layout.prompt_win, state)
            self.overlay.draw(state)
            return
        self.overlay.draw(state)

        if self.layout.explorer_win is not None:
            self.explorer.draw(self.layout.explorer_win, state)

        # the last refreshed window keeps the terminal cursor
        prompt_owns_cursor = isinstance(state.mode, CreateNote)
        if prompt_owns_cursor:
            self.editor.draw(self.layout.editor_win, state, active=False)
            self.prompt.draw(self.layout.prompt_win, state)
        else:
            self.prompt.draw(self.layout.prompt_win, state)
            self.editor.draw(self.layout.editor_win, state, active=state.modes.is_normal)
        self._set_cursor_visible(prompt_owns_cursor or state.modes.is_normal)

    # ---------------- main loop ----------------

    def run(self):
        logger.info("editor started in %s", self.state.notes_dir)
        self.stdscr.clear()
        self.stdscr.refresh()
        self.redraw()

        while not self.state.exit_requested:
            event = keys.decode(self._read_key())

            if event is not None and event.code == "resize":
                self._rebuild_layout()
            elif event is not None:
                self.router.handle_key(event)
                if self._wants_explorer() != self.layout.explorer_open:
                    self._rebuild_layout()

            if self.state.exit_requested:
                break
            self.redraw()

        logger.info("editor exited")
