HELP_TEXT = """\
trmnotes - keys

Notes
  Ctrl+S          save note (asks for a name when untitled)
  Ctrl+N          new note (press twice with unsaved changes)
  Ctrl+O          open note (press twice with unsaved changes)
  Ctrl+E          show/hide the file explorer
  Ctrl+H, F1      show/hide this help
  Ctrl+Q          quit (press twice with unsaved changes)

Editing
  Arrows          move cursor (wraps across line ends)
  Home / End      start / end of line
  PgUp / PgDn     move one page
  Enter           split line
  Backspace       delete before cursor, join with previous line
  Delete          delete at cursor, join with next line
  Tab             insert spaces

New note prompt
  type a name, Enter to create, Backspace to erase, Esc to cancel

Open note list
  Up / Down       choose a note
  Home / End      first / last note
  Enter           open, Esc to cancel

This help
  Up / Down, j / k    scroll
  Esc, q, Enter       close
"""


def get_lines() -> list[str]:
    return HELP_TEXT.splitlines()


def max_scroll(visible_rows: int) -> int:
    """Largest scroll offset that still fills ``visible_rows`` rows."""
    return max(0, len(get_lines()) - max(1, visible_rows))
