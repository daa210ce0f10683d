import logging
import os
from typing import List

logger = logging.getLogger(__name__)

# notes are raw text; surrogateescape keeps undecodable bytes intact on save
ENCODING = "utf-8"
ERRORS = "surrogateescape"


class NoteStoreError(Exception):
    """Base class for failures reported by NoteStore."""


class NoteNotFound(NoteStoreError):
    pass


class NoteIoError(NoteStoreError):
    pass


class InvalidNoteName(NoteStoreError):
    pass


class NoteStore:
    """One plain text file per note in a flat directory."""

    def __init__(self, notes_dir: str, show_hidden: bool = False):
        self.notes_dir = notes_dir
        self.show_hidden = show_hidden

    def ensure_dir(self) -> None:
        try:
            os.makedirs(self.notes_dir, exist_ok=True)
        except OSError as e:
            raise NoteIoError(f"cannot create {self.notes_dir}: {e.strerror or e}") from e

    def path_for(self, name: str) -> str:
        if not name or name in (".", "..") or "\0" in name:
            raise InvalidNoteName(f"invalid note name: {name!r}")
        if os.sep in name or (os.altsep and os.altsep in name):
            raise InvalidNoteName(f"note name cannot contain a path separator: {name}")
        return os.path.join(self.notes_dir, name)

    def list(self) -> List[str]:
        try:
            entries = list(os.scandir(self.notes_dir))
        except OSError as e:
            raise NoteIoError(f"cannot list {self.notes_dir}: {e.strerror or e}") from e

        names = []
        for entry in entries:
            if not self.show_hidden and entry.name.startswith("."):
                continue
            try:
                if not entry.is_file():
                    continue
            except OSError:
                continue
            names.append(entry.name)
        names.sort()
        return names

    def read(self, name: str) -> str:
        path = self.path_for(name)
        try:
            with open(path, "r", encoding=ENCODING, errors=ERRORS, newline="") as f:
                content = f.read()
        except FileNotFoundError as e:
            raise NoteNotFound(f"note not found: {name}") from e
        except OSError as e:
            raise NoteIoError(f"cannot read {name}: {e.strerror or e}") from e
        logger.debug("read %s (%d chars)", path, len(content))
        return content

    def write(self, name: str, lines: List[str]) -> None:
        path = self.path_for(name)
        try:
            with open(path, "w", encoding=ENCODING, errors=ERRORS, newline="") as f:
                f.write("\n".join(lines))
        except OSError as e:
            raise NoteIoError(f"cannot write {name}: {e.strerror or e}") from e
        logger.info("wrote %s (%d lines)", path, len(lines))

    def create(self, name: str) -> bool:
        """Create an empty note. Returns False when it already exists."""
        path = self.path_for(name)
        try:
            with open(path, "x", encoding=ENCODING):
                pass
        except FileExistsError:
            logger.debug("create %s: already exists", path)
            return False
        except OSError as e:
            raise NoteIoError(f"cannot create {name}: {e.strerror or e}") from e
        logger.info("created %s", path)
        return True

    def delete(self, name: str) -> None:
        path = self.path_for(name)
        try:
            os.remove(path)
        except FileNotFoundError as e:
            raise NoteNotFound(f"note not found: {name}") from e
        except OSError as e:
            raise NoteIoError(f"cannot delete {name}: {e.strerror or e}") from e
        logger.info("deleted %s", path)
