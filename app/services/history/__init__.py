"""Operation history services."""

from app.services.history.store import HistoryStore

__all__ = ["HistoryStore"]
