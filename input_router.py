import logging

import shortcut_help
from keys import KeyEvent
from modes import CreateNote, SelectFile
from note_store import NoteStoreError
from text_buffer import TextBuffer

logger = logging.getLogger(__name__)

# what a key produced; handle_key returns one of these or None for a no-op
EDIT = "edit"
MOVE = "move"
MODE = "mode"
STORE = "store"
TOGGLE = "toggle"
QUIT = "quit"

_CURSOR_MOVES = {
    "left": "move_left",
    "right": "move_right",
    "up": "move_up",
    "down": "move_down",
    "home": "move_home",
    "end": "move_end",
}


class InputRouter:
    """Maps one KeyEvent onto the app state, the mode machine or the store.

    Priority: help overlay (modal), then the Ctrl shortcut table, then the
    active non-Normal mode, then cursor movement, then text editing.
    """

    def __init__(self, state, store, tab_width: int = 4):
        self.state = state
        self.store = store
        self.tab_width = max(1, tab_width)
        self.page_rows = 10
        # rows the help overlay shows; the orchestrator keeps it in sync
        self.help_rows = 1
        self._shortcuts = {
            "s": self._save,
            "n": self._new_note,
            "o": self._open,
            "e": self._toggle_explorer,
            "h": self._toggle_help,
            "q": self._quit,
        }

    # ---------- public entrypoint ----------
    def handle_key(self, event: KeyEvent | None) -> str | None:
        if event is None or event.code == "resize":
            return None

        if not (event.ctrl and event.char == self.state.armed_shortcut):
            self.state.armed_shortcut = None

        modes = self.state.modes
        if modes.help_visible:
            return self._handle_help(event)

        # Ctrl chords always reach the shortcut table, even inside a prompt
        if event.ctrl:
            action = self._shortcuts.get(event.char)
            return action() if action else None
        if event.code == "f1":
            return self._toggle_help()

        mode = modes.mode
        if isinstance(mode, CreateNote):
            return self._handle_create_note(event, mode)
        if isinstance(mode, SelectFile):
            return self._handle_select_file(event)

        return self._handle_normal(event)

    def refresh_listing(self, quiet: bool = False):
        try:
            names = self.store.list()
        except NoteStoreError as e:
            names = []
            if not quiet:
                self._report(str(e))
        self.state.set_listing(names)

    # ---------- helpers ----------
    def _report(self, msg: str):
        logger.warning(msg)
        self.state.set_status(msg, 4)

    def _unsaved_ok(self, letter: str, action: str) -> bool:
        """True when Ctrl+<letter> may drop the buffer: it is clean or the chord was repeated."""
        if not self.state.modified or self.state.armed_shortcut == letter:
            self.state.armed_shortcut = None
            return True
        self.state.armed_shortcut = letter
        self.state.set_status(f"Unsaved changes: press Ctrl+{letter.upper()} again to {action}", 4)
        return False

    def _after_edit(self, pos):
        self.state.cursor.move_to(pos[0], pos[1], self.state.buffer)
        self.state.modified = True

    # ---------- help overlay ----------
    def _handle_help(self, event: KeyEvent) -> str | None:
        if event.ctrl and event.char == "q":
            return self._quit()
        if (
            event.code in ("esc", "enter", "f1")
            or (event.ctrl and event.char == "h")
            or (event.code == "char" and not event.ctrl and event.char == "q")
        ):
            return self._toggle_help()

        max_scroll = shortcut_help.max_scroll(self.help_rows)
        scroll = self.state.help_scroll
        if event.code == "down" or (event.code == "char" and event.char == "j"):
            scroll += 1
        elif event.code == "up" or (event.code == "char" and event.char == "k"):
            scroll -= 1
        elif event.code == "page_down":
            scroll += self.page_rows
        elif event.code == "page_up":
            scroll -= self.page_rows
        elif event.code == "home":
            scroll = 0
        elif event.code == "end":
            scroll = max_scroll
        else:
            return None
        self.state.help_scroll = max(0, min(scroll, max_scroll))
        return MOVE

    # ---------- CreateNote ----------
    def _handle_create_note(self, event: KeyEvent, mode: CreateNote) -> str | None:
        modes = self.state.modes
        if event.code == "esc":
            modes.to_normal()
            self.state.set_status("New note canceled", 3)
            return MODE
        if event.code == "backspace":
            modes.pop_name_char()
            return MODE
        if event.code == "enter":
            return self._confirm_create(mode)
        if event.is_printable:
            modes.append_to_name(event.char)
            return MODE
        return None

    def _confirm_create(self, mode: CreateNote) -> str | None:
        name = mode.pending_name.strip()
        if not name:
            self.state.set_status("Name required", 3)
            return None

        try:
            created = self.store.create(name)
            if mode.keep_buffer and not created:
                # save-as never overwrites another note
                self._report(f"Note exists: {name}")
                return STORE
            if mode.keep_buffer:
                self._write_new(name)
            # an existing note is opened rather than shadowed by an empty buffer
            content = "" if created else self.store.read(name)
        except NoteStoreError as e:
            self._report(f"Create failed: {e}")
            return STORE

        if mode.keep_buffer:
            self.state.current_file = name
            self.state.modified = False
            self.state.set_status(f"Saved {name}", 3)
        else:
            self.state.load_buffer(TextBuffer.from_text(content), name)
            self.state.set_status(f"Created {name}" if created else f"Opened {name}", 3)
        self.state.modes.to_normal()
        self.refresh_listing(quiet=True)
        return STORE

    def _write_new(self, name: str):
        """Fill a just-created note; on failure the empty file is removed again."""
        try:
            self.store.write(name, self.state.buffer.lines)
        except NoteStoreError:
            try:
                self.store.delete(name)
            except NoteStoreError as e:
                logger.warning("could not remove empty note %s: %s", name, e)
            raise

    # ---------- SelectFile ----------
    def _handle_select_file(self, event: KeyEvent) -> str | None:
        modes = self.state.modes
        count = len(self.state.file_listing)
        if event.code == "esc":
            modes.to_normal()
            return MODE
        if event.code == "enter":
            return self._confirm_select()

        if event.code == "up":
            modes.move_highlight(-1, count)
        elif event.code == "down":
            modes.move_highlight(1, count)
        elif event.code == "page_up":
            modes.move_highlight(-self.page_rows, count)
        elif event.code == "page_down":
            modes.move_highlight(self.page_rows, count)
        elif event.code == "home":
            modes.set_highlight(0, count)
        elif event.code == "end":
            modes.set_highlight(count - 1, count)
        else:
            return None
        return MOVE

    def _confirm_select(self) -> str | None:
        name = self.state.selected_file()
        if name is None:
            self.state.set_status("No notes to open", 3)
            return None

        try:
            content = self.store.read(name)
        except NoteStoreError as e:
            self._report(f"Open failed: {e}")
            return STORE

        self.state.load_buffer(TextBuffer.from_text(content), name)
        self.state.modes.to_normal()
        self.state.set_status(f"Opened {name}", 3)
        return STORE

    # ---------- global shortcuts ----------
    def _save(self) -> str | None:
        name = self.state.current_file
        if name is None:
            self.state.modes.enter_create_note(keep_buffer=True)
            self.state.set_status("Name this note to save it", 3)
            return MODE

        try:
            self.store.write(name, self.state.buffer.lines)
        except NoteStoreError as e:
            self._report(f"Save failed: {e}")
            return STORE
        self.state.modified = False
        self.state.set_status(f"Saved {name}", 3)
        return STORE

    def _new_note(self) -> str | None:
        if not self._unsaved_ok("n", "discard them"):
            return None
        self.state.modes.enter_create_note()
        return MODE

    def _open(self) -> str | None:
        if not self._unsaved_ok("o", "discard them"):
            return None
        self.refresh_listing()
        self.state.modes.enter_select_file()
        return MODE

    def _toggle_explorer(self) -> str:
        self.state.explorer_open = not self.state.explorer_open
        return TOGGLE

    def _toggle_help(self) -> str:
        self.state.modes.toggle_help()
        self.state.help_scroll = 0
        return TOGGLE

    def _quit(self) -> str | None:
        if not self._unsaved_ok("q", "quit"):
            return None
        self.state.exit_requested = True
        return QUIT

    # ---------- Normal: movement and editing ----------
    def _handle_normal(self, event: KeyEvent) -> str | None:
        state = self.state
        buf = state.buffer
        cursor = state.cursor

        if event.code in _CURSOR_MOVES:
            getattr(cursor, _CURSOR_MOVES[event.code])(buf)
            return MOVE
        if event.code in ("page_up", "page_down"):
            step = cursor.move_up if event.code == "page_up" else cursor.move_down
            for _ in range(self.page_rows):
                step(buf)
            return MOVE

        row, col = cursor.position()
        if event.code == "enter":
            self._after_edit(buf.split_at(row, col))
            return EDIT
        if event.code == "backspace":
            if (row, col) == (0, 0):
                return None
            self._after_edit(buf.delete_before(row, col))
            return EDIT
        if event.code == "delete":
            if row == buf.line_count - 1 and col == buf.line_length(row):
                return None
            self._after_edit(buf.delete_at(row, col))
            return EDIT
        if event.code == "tab":
            pos = (row, col)
            for _ in range(self.tab_width - col % self.tab_width):
                pos = buf.insert_char(pos[0], pos[1], " ")
            self._after_edit(pos)
            return EDIT
        if event.is_printable:
            self._after_edit(buf.insert_char(row, col, event.char))
            return EDIT

        if event.code == "esc":
            state.status_msg = None
        return None
