import time

from cursor_model import CursorModel
from modes import ModeController
from text_buffer import TextBuffer


class AppState:
    """Everything the control loop owns: buffer, cursor, modes and UI flags."""

    def __init__(self, notes_dir, buffer=None, current_file=None, explorer_open=True):
        self.notes_dir = notes_dir
        self.buffer: TextBuffer = buffer if buffer is not None else TextBuffer()
        self.cursor = CursorModel()
        self.modes = ModeController()
        self.current_file: str | None = current_file
        self.modified = False

        self.file_listing: list[str] = []
        self.explorer_open = explorer_open
        self.help_scroll = 0

        self.exit_requested = False
        # Ctrl letter awaiting a repeat before unsaved changes are dropped
        self.armed_shortcut: str | None = None

        self.status_msg: str | None = None
        self.status_msg_until = 0.0

    @property
    def mode(self):
        return self.modes.mode

    def load_buffer(self, buffer: TextBuffer, filename: str | None):
        """Replace the buffer wholesale, e.g. after opening or creating a note."""
        self.buffer = buffer
        self.current_file = filename
        self.cursor.reset()
        self.modified = False

    def set_listing(self, names: list[str]):
        self.file_listing = list(names)
        self.modes.clamp_highlight(len(self.file_listing))

    def selected_file(self) -> str | None:
        idx = getattr(self.mode, "highlighted_index", None)
        if idx is None or not 0 <= idx < len(self.file_listing):
            return None
        return self.file_listing[idx]

    # ---------- status ----------
    def set_status(self, msg, seconds=3):
        self.status_msg = msg
        self.status_msg_until = time.time() + seconds

    def live_status(self, now=None) -> str | None:
        now = time.time() if now is None else now
        if self.status_msg and now < self.status_msg_until:
            return self.status_msg
        return None
