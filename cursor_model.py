class CursorModel:
    """Cursor (row, col) kept inside the bounds of a TextBuffer.

    col may equal the line length: that is the end-of-line insertion slot.
    Moves take the buffer explicitly since it is replaced on file switch.
    """

    def __init__(self, row: int = 0, col: int = 0):
        self.row = row
        self.col = col

    def reset(self):
        self.row = 0
        self.col = 0

    def position(self) -> tuple[int, int]:
        return self.row, self.col

    def move_to(self, row: int, col: int, buffer):
        self.row = row
        self.col = col
        self.clamp(buffer)

    def clamp(self, buffer):
        self.row = max(0, min(self.row, buffer.line_count - 1))
        self.col = max(0, min(self.col, buffer.line_length(self.row)))

    # ---------- movement ----------
    def move_left(self, buffer):
        if self.col > 0:
            self.col -= 1
        elif self.row > 0:
            self.row -= 1
            self.col = buffer.line_length(self.row)

    def move_right(self, buffer):
        if self.col < buffer.line_length(self.row):
            self.col += 1
        elif self.row + 1 < buffer.line_count:
            self.row += 1
            self.col = 0

    def move_up(self, buffer):
        if self.row > 0:
            self.row -= 1
            self.col = min(self.col, buffer.line_length(self.row))

    def move_down(self, buffer):
        if self.row + 1 < buffer.line_count:
            self.row += 1
            self.col = min(self.col, buffer.line_length(self.row))

    def move_home(self, buffer):
        self.col = 0

    def move_end(self, buffer):
        self.col = buffer.line_length(self.row)
