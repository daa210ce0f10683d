import time


def render_status(state, width, now=None):
    """One status line: a live status message, or mode | file | position."""
    msg = state.live_status(time.time() if now is None else now)
    if msg:
        text = f" {msg}"
    else:
        mode = state.modes.label
        if state.modes.help_visible:
            mode = f"{mode}:HELP"
        fname = state.current_file or "[untitled]"
        dirty = " [+]" if state.modified else ""
        row, col = state.cursor.position()
        lines = state.buffer.line_count
        text = f" {mode} | {fname}{dirty} | Ln {row + 1}, Col {col + 1} | {lines} lines"

    return text.ljust(width)[:width]
