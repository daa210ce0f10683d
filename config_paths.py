import json
import logging
import os

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
XDG_DATA_HOME = os.environ.get("XDG_DATA_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
DATA_HOME = XDG_DATA_HOME if XDG_DATA_HOME else os.path.join(HOME, ".local", "share")
CONFIG_DIR = os.path.join(CONFIG_HOME, "trmnotes")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")
LOG_PATH = os.path.join(CONFIG_DIR, "trmnotes.log")

NOTES_DIR_ENV = "TRMNOTES_DIR"

# default settings
NOTES_DIR_DEFAULT = os.path.join(DATA_HOME, "trmnotes", "notes")
EXPLORER_OPEN_DEFAULT = True
LINE_NUMBERS_DEFAULT = True
SHOW_HIDDEN_DEFAULT = False
TAB_WIDTH_DEFAULT = 4
LOG_LEVEL_DEFAULT = "INFO"

_BOOL_KEYS = {
    "explorer_open": "EXPLORER_OPEN",
    "line_numbers": "LINE_NUMBERS",
    "show_hidden": "SHOW_HIDDEN",
}


def ensure_config_dirs():
    os.makedirs(CONFIG_DIR, exist_ok=True)


def load_config():
    cfg = {
        "NOTES_DIR": NOTES_DIR_DEFAULT,
        "EXPLORER_OPEN": EXPLORER_OPEN_DEFAULT,
        "LINE_NUMBERS": LINE_NUMBERS_DEFAULT,
        "SHOW_HIDDEN": SHOW_HIDDEN_DEFAULT,
        "TAB_WIDTH": TAB_WIDTH_DEFAULT,
        "LOG_LEVEL": LOG_LEVEL_DEFAULT,
    }

    if os.path.exists(CONFIG_JSON):
        try:
            with open(CONFIG_JSON, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError):
            data = None
        if isinstance(data, dict):
            notes_dir = data.get("notes_dir")
            if isinstance(notes_dir, str) and notes_dir.strip():
                cfg["NOTES_DIR"] = os.path.expanduser(notes_dir.strip())

            for key, name in _BOOL_KEYS.items():
                if isinstance(data.get(key), bool):
                    cfg[name] = data[key]

            tab_width = data.get("tab_width")
            if isinstance(tab_width, int) and not isinstance(tab_width, bool) and 1 <= tab_width <= 16:
                cfg["TAB_WIDTH"] = tab_width

            level = data.get("log_level")
            if isinstance(level, str) and isinstance(logging.getLevelName(level.upper()), int):
                cfg["LOG_LEVEL"] = level.upper()

    env_dir = os.environ.get(NOTES_DIR_ENV)
    if env_dir and env_dir.strip():
        cfg["NOTES_DIR"] = os.path.expanduser(env_dir.strip())

    return cfg
