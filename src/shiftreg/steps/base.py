"""Base class for steps driven by an input source."""

from __future__ import annotations

import numbers
from typing import Any

from ..inputs import InputError, InputSource


class Step:
    """A unit of per-cycle logic that reads its inputs from an :class:`InputSource`.

    Inputs are resolved on every access and never cached, so the host may
    change them freely between runs.
    """

    name: str

    def __init__(self, inputs: InputSource, name: str | None = None) -> None:
        self.inputs = inputs
        self.name = name or self.__class__.__name__

    def bind(self, inputs: InputSource) -> None:
        self.inputs = inputs

    def input_value(self, name: str) -> Any:
        return self.inputs.resolve(name)

    def input_float(self, name: str) -> float:
        value = self.input_value(name)
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise InputError(f"Input '{name}' must be a number, got {value!r}")
        return float(value)

    def input_int(self, name: str) -> int:
        value = self.input_value(name)
        if isinstance(value, bool):
            raise InputError(f"Input '{name}' must be an integer, got {value!r}")
        if isinstance(value, numbers.Integral):
            return int(value)
        if isinstance(value, numbers.Real) and float(value).is_integer():
            return int(value)
        raise InputError(f"Input '{name}' must be an integer, got {value!r}")

    def input_bool(self, name: str) -> bool:
        value = self.input_value(name)
        if not isinstance(value, bool):
            raise InputError(f"Input '{name}' must be a boolean, got {value!r}")
        return value

    def run(self) -> Any:  # pragma: no cover - abstract
        raise NotImplementedError
