import curses


class ScreenLayout:
    EXPLORER_RATIO = 0.15
    EXPLORER_MIN_W = 14

    def __init__(self, stdscr, explorer_open=True):
        self.stdscr = stdscr
        self.H, self.W = stdscr.getmaxyx()
        self.explorer_open = explorer_open

        # layout: explorer (left, optional) | editor, then status bar and prompt bar
        self.status_h = 1
        self.prompt_h = 1
        self.main_h = max(1, self.H - self.status_h - self.prompt_h)

        self.explorer_w = self.explorer_width(self.W) if explorer_open else 0
        self.editor_w = max(1, self.W - self.explorer_w)

        self.explorer_win = None
        if self.explorer_w:
            self.explorer_win = curses.newwin(self.main_h, self.explorer_w, 0, 0)
            # explorer never owns the cursor
            self.explorer_win.leaveok(True)

        self.editor_win = curses.newwin(self.main_h, self.editor_w, 0, self.explorer_w)

        self.status_win = curses.newwin(self.status_h, self.W, self.main_h, 0)
        self.status_win.leaveok(True)

        self.prompt_win = curses.newwin(self.prompt_h, self.W, self.main_h + self.status_h, 0)

        # help overlay covers the whole main region
        self.overlay_h = self.main_h

    @classmethod
    def explorer_width(cls, total_w):
        if total_w < cls.EXPLORER_MIN_W * 3:
            return 0
        return max(cls.EXPLORER_MIN_W, int(total_w * cls.EXPLORER_RATIO))
