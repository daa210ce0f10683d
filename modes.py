from dataclasses import dataclass, replace
from typing import Union


@dataclass(frozen=True)
class Normal:
    pass


@dataclass(frozen=True)
class CreateNote:
    pending_name: str = ""
    # opened by Ctrl+S on an untitled buffer: keep and write the buffer
    keep_buffer: bool = False


@dataclass(frozen=True)
class SelectFile:
    highlighted_index: int = 0


Mode = Union[Normal, CreateNote, SelectFile]


class ModeController:
    """Holds the single current Mode plus the help overlay flag."""

    def __init__(self):
        self.mode: Mode = Normal()
        self.help_visible = False

    @property
    def is_normal(self) -> bool:
        return isinstance(self.mode, Normal)

    @property
    def label(self) -> str:
        if isinstance(self.mode, CreateNote):
            return "NEW"
        if isinstance(self.mode, SelectFile):
            return "OPEN"
        return "EDIT"

    # ---------- transitions ----------
    def to_normal(self):
        self.mode = Normal()

    def enter_create_note(self, keep_buffer: bool = False):
        self.mode = CreateNote(pending_name="", keep_buffer=keep_buffer)

    def enter_select_file(self):
        self.mode = SelectFile(highlighted_index=0)

    def toggle_help(self) -> bool:
        self.help_visible = not self.help_visible
        return self.help_visible

    # ---------- CreateNote ----------
    def append_to_name(self, ch: str):
        if isinstance(self.mode, CreateNote):
            self.mode = replace(self.mode, pending_name=self.mode.pending_name + ch)

    def pop_name_char(self):
        if isinstance(self.mode, CreateNote) and self.mode.pending_name:
            self.mode = replace(self.mode, pending_name=self.mode.pending_name[:-1])

    # ---------- SelectFile ----------
    def move_highlight(self, delta: int, file_count: int):
        if isinstance(self.mode, SelectFile):
            self.set_highlight(self.mode.highlighted_index + delta, file_count)

    def set_highlight(self, index: int, file_count: int):
        if not isinstance(self.mode, SelectFile):
            return
        last = max(0, file_count - 1)
        self.mode = replace(self.mode, highlighted_index=max(0, min(index, last)))

    def clamp_highlight(self, file_count: int):
        if isinstance(self.mode, SelectFile):
            self.set_highlight(self.mode.highlighted_index, file_count)
