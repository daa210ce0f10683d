import curses
from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class KeyEvent:
    # char | enter | backspace | delete | tab | esc | left | right | up | down
    # home | end | page_up | page_down | f1 | resize | unknown
    code: str
    char: str = ""
    ctrl: bool = False

    @property
    def is_printable(self) -> bool:
        return self.code == "char" and not self.ctrl and self.char.isprintable()


def ctrl(letter: str) -> KeyEvent:
    return KeyEvent("char", letter, ctrl=True)


_CURSES_KEYS = {
    curses.KEY_LEFT: "left",
    curses.KEY_RIGHT: "right",
    curses.KEY_UP: "up",
    curses.KEY_DOWN: "down",
    curses.KEY_HOME: "home",
    curses.KEY_END: "end",
    curses.KEY_PPAGE: "page_up",
    curses.KEY_NPAGE: "page_down",
    curses.KEY_BACKSPACE: "backspace",
    curses.KEY_DC: "delete",
    curses.KEY_ENTER: "enter",
    curses.KEY_F1: "f1",
    curses.KEY_RESIZE: "resize",
}


def _decode_codepoint(cp: int) -> KeyEvent:
    if cp in (10, 13):
        return KeyEvent("enter")
    if cp == 9:
        return KeyEvent("tab")
    if cp == 27:
        return KeyEvent("esc")
    if cp == 127:
        return KeyEvent("backspace")
    # Ctrl+A .. Ctrl+Z; 8 is Ctrl+H, not backspace
    if 1 <= cp <= 26:
        return KeyEvent("char", chr(ord("a") + cp - 1), ctrl=True)
    if cp < 32:
        return KeyEvent("unknown")
    return KeyEvent("char", chr(cp))


def decode(raw: Union[str, int, None]) -> Optional[KeyEvent]:
    """Turn a get_wch() result into a KeyEvent (None for no input)."""
    if raw is None or raw == -1:
        return None
    if isinstance(raw, str):
        if len(raw) != 1:
            return KeyEvent("unknown")
        return _decode_codepoint(ord(raw))
    if raw in _CURSES_KEYS:
        return KeyEvent(_CURSES_KEYS[raw])
    if 0 <= raw < curses.KEY_MIN:
        return _decode_codepoint(raw)
    return KeyEvent("unknown")
