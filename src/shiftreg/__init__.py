"""Bounded most-recent-first history buffers driven by a per-cycle update rule."""

from importlib import metadata

from .buffer import HistoryBuffer
from .counters import COUNT, InternalCounter
from .inputs import InputError, InputSource, LinkedInputs, StaticInputs
from .steps import Branch, ShiftRegister, Step

try:
    __version__ = metadata.version("shiftreg")
except metadata.PackageNotFoundError:  # pragma: no cover - fallback for dev
    __version__ = "0.0.0"

__all__ = [
    "COUNT",
    "Branch",
    "HistoryBuffer",
    "InputError",
    "InputSource",
    "InternalCounter",
    "LinkedInputs",
    "ShiftRegister",
    "StaticInputs",
    "Step",
    "__version__",
]
