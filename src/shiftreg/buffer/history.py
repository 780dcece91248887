"""Most-recent-first numeric history buffer."""

from __future__ import annotations

from typing import List


class HistoryBuffer:
    """Stores an ordered list of numeric values, newest at index 0.

    The buffer never bounds itself; callers cap it with :meth:`trim_to`.
    """

    def __init__(self) -> None:
        self._data: List[float] = []

    def __len__(self) -> int:
        return len(self._data)

    def clear(self) -> None:
        self._data.clear()

    def insert_front(self, value: float) -> None:
        """Insert ``value`` as the newest element, shifting older values toward the tail."""

        self._data.insert(0, value)

    def trim_to(self, max_size: int) -> None:
        """Keep only the ``max_size`` most recent values.

        Raises:
            ValueError: if ``max_size`` is negative.
        """

        if max_size < 0:
            raise ValueError(f"max_size must be non-negative, got {max_size}")
        if len(self._data) <= max_size:
            return
        del self._data[max_size:]

    def snapshot(self) -> List[float]:
        return list(self._data)
