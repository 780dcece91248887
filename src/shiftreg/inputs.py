"""Input sources that feed values to steps on every run."""

from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Optional, Protocol, Union


class InputError(ValueError):
    """Raised when a step input cannot be resolved or has the wrong type."""


class InputSource(Protocol):
    """Interface for anything that can supply named step inputs."""

    def resolve(self, name: str) -> Any:  # pragma: no cover - interface
        """Return the current value of input ``name``."""


class StaticInputs:
    """Constant input values, updated by the host between runs."""

    def __init__(self, values: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> None:
        self._values: Dict[str, Any] = dict(values or {})
        self._values.update(kwargs)

    def set(self, **values: Any) -> None:
        self._values.update(values)

    def resolve(self, name: str) -> Any:
        try:
            return self._values[name]
        except KeyError as exc:
            raise InputError(f"Input '{name}' is not set") from exc

    def as_dict(self) -> Dict[str, Any]:
        return dict(self._values)


Linked = Union[Any, Callable[[], Any]]


class LinkedInputs:
    """Inputs bound to constants or zero-argument callables.

    Callables are evaluated again on every :meth:`resolve`, so a linked input
    reflects its upstream source at the moment a step reads it.
    """

    def __init__(self, links: Optional[Mapping[str, Linked]] = None, **kwargs: Linked) -> None:
        self._links: Dict[str, Linked] = dict(links or {})
        self._links.update(kwargs)

    def link(self, name: str, source: Linked) -> None:
        self._links[name] = source

    def resolve(self, name: str) -> Any:
        if name not in self._links:
            raise InputError(f"Input '{name}' is not linked")
        source = self._links[name]
        return source() if callable(source) else source
