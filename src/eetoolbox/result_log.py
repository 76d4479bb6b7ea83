"""Append-only text log of calculation results.

One line per saved result. The file is opened, written and closed inside
each call; nothing holds it open between calls.
"""

from __future__ import annotations

import logging
from pathlib import Path

from eetoolbox.prompts import prompt_yes_no

logger = logging.getLogger(__name__)

DEFAULT_LOG_FILENAME = "calc_log.txt"


class ResultLogError(Exception):
    """The log file could not be opened, read or written."""


class ResultLog:
    """Append, view and clear the calculation log."""

    def __init__(self, path: Path | str | None = None) -> None:
        self._path = Path(path) if path is not None else Path(DEFAULT_LOG_FILENAME)

    @property
    def path(self) -> Path:
        return self._path

    def append(self, summary: str) -> None:
        """Write *summary* as a single line at the end of the log."""
        line = " ".join(summary.splitlines())
        try:
            with self._path.open("a", encoding="utf-8") as f:
                f.write(line + "\n")
        except OSError as exc:
            logger.debug("Append to %s failed", self._path, exc_info=True)
            raise ResultLogError(f"Could not open log file: {exc}") from exc
        logger.debug("Appended result to %s", self._path)

    def read(self) -> str:
        """Return the log contents verbatim.

        Raises ``ResultLogError`` if the file is missing or unreadable.
        """
        try:
            return self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("Read of %s failed", self._path, exc_info=True)
            raise ResultLogError(f"Cannot open {self._path}: {exc}") from exc

    def clear(self) -> None:
        """Truncate the log to empty, creating it if needed."""
        try:
            with self._path.open("w", encoding="utf-8"):
                pass
        except OSError as exc:
            logger.debug("Truncate of %s failed", self._path, exc_info=True)
            raise ResultLogError(f"Failed to clear {self._path}: {exc}") from exc
        logger.debug("Cleared %s", self._path)


def ask_and_save(summary: str, log: ResultLog) -> bool:
    """Offer to append *summary* to *log*. Returns True if it was saved.

    A failed write is reported and otherwise ignored: the result has
    already been shown to the user.
    """
    if not prompt_yes_no(f'\nSave this result to "{log.path}"? (y/n): '):
        print("Not saved.")
        return False
    try:
        log.append(summary)
    except ResultLogError:
        print("Could not open log file.")
        return False
    print("Saved.")
    return True
