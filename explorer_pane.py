import curses

from modes import SelectFile


class ExplorerPane:
    def __init__(self):
        self.scroll = 0

    def draw(self, win, state):
        win.erase()
        h, w = win.getmaxyx()
        try:
            win.box()
            win.addnstr(0, 2, " Files ", max(0, w - 4), curses.A_BOLD)
        except curses.error:
            pass

        files = state.file_listing
        inner_h = max(1, h - 2)
        inner_w = max(1, w - 2)

        mode = state.mode
        highlighted = mode.highlighted_index if isinstance(mode, SelectFile) else None

        # keep the highlighted entry on screen
        if highlighted is not None:
            if highlighted < self.scroll:
                self.scroll = highlighted
            elif highlighted >= self.scroll + inner_h:
                self.scroll = highlighted - inner_h + 1
        self.scroll = max(0, min(self.scroll, max(0, len(files) - inner_h)))

        if not files:
            try:
                win.addnstr(1, 1, "(no notes)", inner_w, curses.A_DIM)
            except curses.error:
                pass

        for i, name in enumerate(files[self.scroll : self.scroll + inner_h]):
            idx = self.scroll + i
            attr = 0
            if name == state.current_file:
                attr |= curses.A_BOLD
            if idx == highlighted:
                attr |= curses.A_REVERSE
            marker = "*" if name == state.current_file else " "
            try:
                win.addnstr(1 + i, 1, f"{marker}{name}".ljust(inner_w), inner_w, attr)
            except curses.error:
                pass

        win.refresh()
