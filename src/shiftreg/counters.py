"""Internal counter protocol used by supervisory tooling."""

from __future__ import annotations

from typing import Dict, MutableMapping, Optional, Protocol, runtime_checkable

COUNT = "Count"
"""Key under which a step reports its buffer length."""


@runtime_checkable
class InternalCounter(Protocol):
    """Interface for steps that expose resettable internal counters."""

    def reset_counter(self) -> None:  # pragma: no cover - interface
        """Reset the internal state the counters describe."""

    def read_counter(
        self, values: Optional[MutableMapping[str, int]] = None
    ) -> MutableMapping[str, int]:  # pragma: no cover - interface
        """Merge the current counters into ``values`` and return it."""

    def write_counter(self, values: Dict[str, int]) -> None:  # pragma: no cover - interface
        """Restore counters from ``values``."""
