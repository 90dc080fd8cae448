"""Step recorder — the single owner of the growing trace."""

from __future__ import annotations

import copy
import logging
from types import MappingProxyType
from typing import Any

from .trace_types import Step, StepType
from . import constants

logger = logging.getLogger(__name__)


class StepRecorder:
    """Append-only step log with ids minted per simulation run."""

    def __init__(self, verbose: bool = False):
        self._steps: list[Step] = []
        self._verbose = verbose

    def record(
        self, step_type: StepType, detail: str, data: dict[str, Any] | None = None
    ) -> Step:
        index = len(self._steps)
        step = Step(
            id=constants.STEP_ID_TEMPLATE.format(index=index),
            index=index,
            type=step_type,
            detail=detail,
            data=MappingProxyType(copy.deepcopy(data) if data else {}),
        )
        self._steps.append(step)
        logger.debug("%s %s", step.id, step)
        if self._verbose:
            print(f"[{step.id}] {step}")
        return step

    @property
    def steps(self) -> tuple[Step, ...]:
        return tuple(self._steps)

    def count(self, step_type: StepType) -> int:
        return sum(1 for step in self._steps if step.type == step_type)

    def __len__(self) -> int:
        return len(self._steps)
