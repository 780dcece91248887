"""History buffer storage."""

from .history import HistoryBuffer

__all__ = ["HistoryBuffer"]
