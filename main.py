import curses
import logging
import os
import sys

# Make ESC snappy
os.environ.setdefault("ESCDELAY", "25")

import config_paths
from _version import __version__
from app_state import AppState
from log_setup import configure_logging
from note_store import NoteStore, NoteStoreError
from orchestrator import Orchestrator

logger = logging.getLogger(__name__)

USAGE = "trmnotes - terminal note editor\n\nUsage:\n  trmnotes [notes_dir]\n  trmnotes -v\n  trmnotes -h\n"


def _parse_args(args):
    """Return (action, notes_dir). action is 'version', 'help', 'run' or 'usage_error'."""
    if "-v" in args or "-V" in args:
        return "version", None
    if "-h" in args or "--help" in args:
        return "help", None
    if len(args) > 1 or any(a.startswith("-") for a in args):
        return "usage_error", None
    return "run", (args[0] if args else None)


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)

    action, notes_dir = _parse_args(args)
    if action == "version":
        print(__version__)
        return 0
    if action == "help":
        print(USAGE)
        return 0
    if action == "usage_error":
        print(USAGE, file=sys.stderr)
        return 2

    cfg = config_paths.load_config()
    try:
        config_paths.ensure_config_dirs()
    except OSError as e:
        print(f"Cannot create {config_paths.CONFIG_DIR}: {e}", file=sys.stderr)
    configure_logging(config_paths.LOG_PATH, cfg["LOG_LEVEL"])

    notes_dir = os.path.abspath(os.path.expanduser(notes_dir or cfg["NOTES_DIR"]))
    store = NoteStore(notes_dir, show_hidden=cfg["SHOW_HIDDEN"])
    try:
        store.ensure_dir()
    except NoteStoreError as e:
        logger.error("%s", e)
        print(e, file=sys.stderr)
        return 1

    def curses_main(stdscr):
        state = AppState(notes_dir, explorer_open=cfg["EXPLORER_OPEN"])
        Orchestrator(stdscr, state, store, cfg).run()

    curses.wrapper(curses_main)
    return 0


if __name__ == "__main__":
    sys.exit(main())
