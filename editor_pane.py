import curses


def _cells(text):
    # one cell per code point so the cursor column lines up with the text
    return "".join(
        " " if ch == "\t" else "?" if ord(ch) < 32 or ord(ch) == 127 else ch
        for ch in text
    )


class EditorPane:
    PAIR_GUTTER = 1

    def __init__(self, line_numbers=True):
        self.line_numbers = line_numbers
        self.gutter_attr = curses.A_DIM
        try:
            curses.start_color()
            curses.use_default_colors()
            curses.init_pair(self.PAIR_GUTTER, curses.COLOR_CYAN, -1)
            self.gutter_attr = curses.color_pair(self.PAIR_GUTTER) | curses.A_DIM
        except curses.error:
            self.gutter_attr = curses.A_DIM

        # viewport (view state only; the model never reads it)
        self.row_offset = 0
        self.col_offset = 0

    def gutter_width(self, line_count):
        if not self.line_numbers:
            return 0
        return max(3, len(str(line_count))) + 1

    def adjust_viewport(self, row, col, text_h, text_w):
        text_h = max(1, text_h)
        text_w = max(1, text_w)
        if row < self.row_offset:
            self.row_offset = row
        elif row >= self.row_offset + text_h:
            self.row_offset = row - text_h + 1

        # keep the end-of-line slot visible too
        if col < self.col_offset:
            self.col_offset = col
        elif col >= self.col_offset + text_w:
            self.col_offset = col - text_w + 1

        self.row_offset = max(0, self.row_offset)
        self.col_offset = max(0, self.col_offset)

    def draw(self, win, state, active=True):
        """Paint buffer and cursor; returns the cursor's (y, x) in win."""
        win.erase()
        h, w = win.getmaxyx()
        try:
            win.box()
        except curses.error:
            pass

        title = f" {state.current_file or '[untitled]'}{' [+]' if state.modified else ''} "
        try:
            win.addnstr(0, 2, title, max(0, w - 4), curses.A_BOLD)
        except curses.error:
            pass

        buf = state.buffer
        inner_h = max(1, h - 2)
        inner_w = max(1, w - 2)
        gutter = self.gutter_width(buf.line_count)
        text_w = max(1, inner_w - gutter)

        row, col = state.cursor.position()
        self.adjust_viewport(row, col, inner_h, text_w)

        for i in range(inner_h):
            r = self.row_offset + i
            if r >= buf.line_count:
                break
            y = 1 + i
            try:
                if gutter:
                    win.addnstr(y, 1, str(r + 1).rjust(gutter - 1) + " ", gutter, self.gutter_attr)
                visible = _cells(buf.lines[r][self.col_offset : self.col_offset + text_w])
                if visible:
                    win.addnstr(y, 1 + gutter, visible, text_w)
            except curses.error:
                pass

        cy = 1 + row - self.row_offset
        cx = 1 + gutter + col - self.col_offset
        if active:
            try:
                win.move(cy, min(cx, max(0, w - 1)))
            except curses.error:
                pass
        win.refresh()
        return cy, cx
