import curses

from modes import CreateNote, SelectFile

NORMAL_HINT = " Quit ^Q  Save ^S  New ^N  Open ^O  Explorer ^E  Help ^H"
SELECT_HINT = " Up/Down choose  Enter open  Esc cancel"
HELP_HINT = " Up/Down scroll  Esc close"


class PromptBar:
    def __init__(self):
        self.hscroll = 0

    def draw(self, win, state) -> bool:
        """Draw the name prompt or a key hint. Returns True if it owns the cursor."""
        win.erase()
        h, w = win.getmaxyx()
        mode = state.mode

        if state.modes.help_visible:
            self._draw_text(win, HELP_HINT, w)
            return False

        if isinstance(mode, CreateNote):
            prompt = "Save as: " if mode.keep_buffer else "New note: "
            name = mode.pending_name
            cursor = len(name)
            text_w = max(1, w - len(prompt) - 1)

            # adjust hscroll
            if cursor < self.hscroll:
                self.hscroll = cursor
            elif cursor > self.hscroll + text_w:
                self.hscroll = cursor - text_w

            visible = name[self.hscroll : self.hscroll + text_w]
            try:
                win.addnstr(0, 0, prompt, len(prompt), curses.A_BOLD)
                win.addnstr(0, len(prompt), visible, text_w)
                win.move(0, min(w - 1, len(prompt) + (cursor - self.hscroll)))
            except curses.error:
                pass
            win.refresh()
            return True

        self.hscroll = 0
        self._draw_text(win, SELECT_HINT if isinstance(mode, SelectFile) else NORMAL_HINT, w)
        return False

    def _draw_text(self, win, text, w):
        try:
            win.addnstr(0, 0, text.ljust(w), max(0, w - 1), curses.A_DIM)
        except curses.error:
            pass
        win.refresh()
