"""Shift register step: a bounded, most-recent-first history of numeric inputs."""

from __future__ import annotations

import enum
import logging
from typing import Dict, List, MutableMapping, Optional

from ..buffer.history import HistoryBuffer
from ..counters import COUNT
from ..inputs import InputSource
from .base import Step

log = logging.getLogger(__name__)

IN_VALUE = "in_value"
MAX_SIZE = "max_size"
INFINITE = "infinite"
CLEAR = "clear"


class Branch(str, enum.Enum):
    """Which branch of the update rule a run took."""

    CLEARED = "cleared"
    RESET_INVALID = "reset_invalid"
    INSERTED = "inserted"


class ShiftRegister(Step):
    """Keeps the most recent ``max_size`` values of ``in_value``, newest first.

    Each run evaluates, in order:

    1. ``clear`` is true: empty the buffer and stop. ``clear`` is a one-shot
       signal; the step only reads it and never resets it.
    2. ``infinite`` is false and ``max_size < 1``: empty the buffer and stop.
    3. Insert ``in_value`` at the front.
    4. ``infinite`` is false: trim to ``max_size``.
    """

    def __init__(self, inputs: InputSource, name: str | None = None) -> None:
        super().__init__(inputs, name=name)
        self._buffer = HistoryBuffer()

    @property
    def in_value(self) -> float:
        return self.input_float(IN_VALUE)

    @property
    def max_size(self) -> int:
        return self.input_int(MAX_SIZE)

    @property
    def infinite(self) -> bool:
        return self.input_bool(INFINITE)

    @property
    def clear(self) -> bool:
        return self.input_bool(CLEAR)

    def run(self) -> Branch:
        if self.clear:
            self._buffer.clear()
            log.debug("%s: clear requested, buffer emptied", self.name)
            return Branch.CLEARED

        infinite = self.infinite
        max_size = 0 if infinite else self.max_size
        if not infinite and max_size < 1:
            self._buffer.clear()
            log.debug("%s: invalid max_size=%d, buffer reset", self.name, max_size)
            return Branch.RESET_INVALID

        value = self.in_value
        self._buffer.insert_front(value)
        if not infinite:
            self._buffer.trim_to(max_size)
        log.debug("%s: inserted %r, count=%d", self.name, value, len(self._buffer))
        return Branch.INSERTED

    @property
    def values(self) -> List[float]:
        """Snapshot of the buffer, newest first. Safe to mutate."""

        return self._buffer.snapshot()

    @property
    def count(self) -> int:
        return len(self._buffer)

    def reset_counter(self) -> None:
        self._buffer.clear()

    def read_counter(
        self, values: Optional[MutableMapping[str, int]] = None
    ) -> MutableMapping[str, int]:
        if values is None:
            values = {}
        values[COUNT] = len(self._buffer)
        return values

    def write_counter(self, values: Dict[str, int]) -> None:
        # Restoring the buffer length from external values is not supported.
        return None
