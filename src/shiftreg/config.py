"""Scenario configuration helpers for replaying shift register cycles."""

from __future__ import annotations

import pathlib
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, MutableMapping, Optional

import yaml

INPUT_KEYS = ("in_value", "max_size", "infinite", "clear")


class ConfigError(RuntimeError):
    """Raised when scenario files are invalid."""


@dataclass
class InputDefaults:
    """Input values used when a cycle does not override them."""

    in_value: float = 0.0
    max_size: int = 1
    infinite: bool = False
    clear: bool = False

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "InputDefaults":
        if not data:
            return cls()
        if not isinstance(data, Mapping):
            raise ConfigError("Scenario 'defaults' must be a mapping")
        _reject_unknown(data, "defaults")
        return cls(
            in_value=data.get("in_value", 0.0),
            max_size=data.get("max_size", 1),
            infinite=data.get("infinite", False),
            clear=data.get("clear", False),
        )

    def as_dict(self) -> Dict[str, Any]:
        return {
            "in_value": self.in_value,
            "max_size": self.max_size,
            "infinite": self.infinite,
            "clear": self.clear,
        }


@dataclass
class CycleSpec:
    """Inputs overridden for a single cycle."""

    overrides: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, index: int, data: Any) -> "CycleSpec":
        if not isinstance(data, Mapping):
            raise ConfigError(f"Cycle {index} must be a mapping, got {type(data).__name__}")
        _reject_unknown(data, f"cycle {index}")
        return cls(overrides=dict(data))


@dataclass
class ScenarioConfig:
    """Representation of a scenario YAML file."""

    name: str
    description: Optional[str]
    defaults: InputDefaults
    cycles: List[CycleSpec]

    @classmethod
    def from_mapping(cls, data: Any, *, name: str = "scenario") -> "ScenarioConfig":
        if not isinstance(data, MutableMapping):
            raise ConfigError("Scenario root must be a mapping")
        raw_cycles = data.get("cycles") or []
        if not isinstance(raw_cycles, list):
            raise ConfigError("Scenario 'cycles' must be a list")
        cycles = [CycleSpec.from_mapping(index, item) for index, item in enumerate(raw_cycles, start=1)]
        if not cycles:
            raise ConfigError("At least one cycle must be defined")
        return cls(
            name=str(data.get("name", name)),
            description=data.get("description"),
            defaults=InputDefaults.from_mapping(data.get("defaults")),
            cycles=cycles,
        )

    @classmethod
    def from_yaml(cls, text: str, *, name: str = "scenario") -> "ScenarioConfig":
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Scenario is not valid YAML: {exc}") from exc
        return cls.from_mapping(data, name=name)

    @classmethod
    def from_file(cls, path: str | pathlib.Path) -> "ScenarioConfig":
        path = pathlib.Path(path)
        try:
            text = path.read_text()
        except OSError as exc:
            raise ConfigError(f"Cannot read scenario file '{path}': {exc}") from exc
        return cls.from_yaml(text, name=path.stem)

    def resolved_inputs(self, index: int) -> Dict[str, Any]:
        """Return the full input mapping for the cycle at ``index`` (zero-based)."""

        try:
            cycle = self.cycles[index]
        except IndexError as exc:
            raise ConfigError(f"Scenario '{self.name}' has no cycle {index + 1}") from exc
        inputs = self.defaults.as_dict()
        inputs.update(cycle.overrides)
        return inputs


def _reject_unknown(data: Mapping[str, Any], where: str) -> None:
    unknown = sorted(str(key) for key in data if key not in INPUT_KEYS)
    if unknown:
        raise ConfigError(f"Unknown input keys in {where}: {', '.join(unknown)}")
