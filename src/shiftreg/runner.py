"""Cycle runner utilities."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping

from .config import ScenarioConfig
from .inputs import StaticInputs
from .steps.shift_register import Branch, ShiftRegister

log = logging.getLogger(__name__)


@dataclass
class CycleResult:
    """Outputs observed after a single run."""

    index: int
    inputs: Dict[str, Any]
    branch: Branch
    values: List[float]
    count: int


class CycleRunner:
    """Feeds inputs to a shift register one cycle at a time and records the outputs."""

    def __init__(self, step: ShiftRegister | None = None) -> None:
        self._inputs = StaticInputs()
        self.step = step or ShiftRegister(self._inputs)
        self.step.bind(self._inputs)
        self._results: List[CycleResult] = []

    def run_cycle(self, inputs: Mapping[str, Any]) -> CycleResult:
        self._inputs.set(**inputs)
        branch = self.step.run()
        result = CycleResult(
            index=len(self._results) + 1,
            inputs=self._inputs.as_dict(),
            branch=branch,
            values=self.step.values,
            count=self.step.count,
        )
        self._results.append(result)
        return result

    def run_all(self, cycles: Iterable[Mapping[str, Any]]) -> List[CycleResult]:
        return [self.run_cycle(inputs) for inputs in cycles]

    def run_scenario(self, config: ScenarioConfig) -> List[CycleResult]:
        log.info("Replaying scenario %s (%d cycles)", config.name, len(config.cycles))
        return self.run_all(config.resolved_inputs(index) for index in range(len(config.cycles)))

    def results(self) -> List[CycleResult]:
        return list(self._results)
