from typing import List, Optional, Tuple


class TextBuffer:
    """Ordered lines of one note. Always holds at least one line."""

    def __init__(self, lines: Optional[List[str]] = None):
        self._lines: List[str] = list(lines) if lines else [""]

    @classmethod
    def from_text(cls, text: str) -> "TextBuffer":
        # split (not splitlines) so a trailing newline survives a save
        return cls(text.split("\n") if text else None)

    def to_text(self) -> str:
        return "\n".join(self._lines)

    # ---------- reads ----------
    @property
    def lines(self) -> List[str]:
        return self._lines

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def line(self, row: int) -> str:
        self._check_row(row)
        return self._lines[row]

    def line_length(self, row: int) -> int:
        return len(self.line(row))

    # ---------- mutations ----------
    def insert_char(self, row: int, col: int, ch: str) -> Tuple[int, int]:
        self._check_pos(row, col)
        line = self._lines[row]
        self._lines[row] = line[:col] + ch + line[col:]
        return row, col + len(ch)

    def delete_before(self, row: int, col: int) -> Tuple[int, int]:
        self._check_pos(row, col)
        if col > 0:
            line = self._lines[row]
            self._lines[row] = line[: col - 1] + line[col:]
            return row, col - 1
        if row == 0:
            return 0, 0

        # join into the previous line
        prev_len = len(self._lines[row - 1])
        self._lines[row - 1] += self._lines.pop(row)
        return row - 1, prev_len

    def delete_at(self, row: int, col: int) -> Tuple[int, int]:
        self._check_pos(row, col)
        line = self._lines[row]
        if col < len(line):
            self._lines[row] = line[:col] + line[col + 1 :]
        elif row + 1 < len(self._lines):
            self._lines[row] = line + self._lines.pop(row + 1)
        return row, col

    def split_at(self, row: int, col: int) -> Tuple[int, int]:
        self._check_pos(row, col)
        line = self._lines[row]
        self._lines[row] = line[:col]
        self._lines.insert(row + 1, line[col:])
        return row + 1, 0

    # ---------- bounds ----------
    def _check_row(self, row: int) -> None:
        if not 0 <= row < len(self._lines):
            raise IndexError(f"row {row} out of range (0..{len(self._lines) - 1})")

    def _check_pos(self, row: int, col: int) -> None:
        self._check_row(row)
        length = len(self._lines[row])
        if not 0 <= col <= length:
            raise IndexError(f"col {col} out of range for row {row} (0..{length})")
