"""
Audit journal of user-visible actions.

Every line has the form "[YYYY-mm-dd HH:MM:SS] ACTION: details" and is
appended to a plain text file through a dedicated logger, so a failed
write is reported by logging instead of breaking the request that caused
it.
"""

import logging
from collections import deque
from functools import lru_cache
from pathlib import Path

from app.core.config import get_settings

JOURNAL_FORMAT = "[%(asctime)s] %(message)s"
JOURNAL_DATEFMT = "%Y-%m-%d %H:%M:%S"


class Journal:
    """Append-only action journal backed by a text file."""

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)

        self._logger = logging.getLogger(f"app.journal.{self.path.resolve()}")
        self._logger.setLevel(logging.INFO)
        self._logger.propagate = False

        if not self._logger.handlers:
            handler = logging.FileHandler(self.path, encoding="utf-8")
            handler.setFormatter(logging.Formatter(JOURNAL_FORMAT, JOURNAL_DATEFMT))
            self._logger.addHandler(handler)

    def record(self, action: str, details: str) -> None:
        """Append one action to the journal."""
        self._logger.info("%s: %s", action, details)

    def recent_lines(self, n: int = 50) -> list[str]:
        """Return the last n journal lines, oldest first."""
        if n <= 0 or not self.path.exists():
            return []

        with self.path.open(encoding="utf-8", errors="replace") as f:
            return [line.rstrip("\n") for line in deque(f, maxlen=n)]

    def count(self) -> int:
        """Number of lines in the journal."""
        if not self.path.exists():
            return 0

        with self.path.open(encoding="utf-8", errors="replace") as f:
            return sum(1 for _ in f)

    def clear(self) -> None:
        """Truncate the journal."""
        self.path.write_text("", encoding="utf-8")


@lru_cache
def get_journal() -> Journal:
    """Get the journal configured in settings."""
    return Journal(get_settings().journal_path)


def truncate(text: str, max_len: int = 30) -> str:
    """Shorten text for a journal or history preview."""
    return text if len(text) <= max_len else text[:max_len] + "..."
