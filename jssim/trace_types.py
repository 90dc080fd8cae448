"""Trace data types for step-by-step execution replay."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping

from .run_types import SimulationStats
from .values import serialize_value


class StepType(str, Enum):
    CREATE_GLOBAL_CONTEXT = "CreateGlobalContext"
    ALLOCATE_HEAP_OBJECT = "AllocateHeapObject"
    REFERENCE_VARIABLE = "ReferenceVariable"
    CREATE_EXECUTION_CONTEXT = "CreateExecutionContext"
    DESTROY_EXECUTION_CONTEXT = "DestroyExecutionContext"
    CREATE_LEXICAL_ENVIRONMENT = "CreateLexicalEnvironment"
    DECLARE_VARIABLE = "DeclareVariable"
    CHECK_VARIABLE_ACCESS = "CheckVariableAccess"
    ASSIGN_VALUE = "AssignValue"
    LOG_OUTPUT = "LogOutput"
    REGISTER_WEB_API = "RegisterWebAPI"
    ADD_MACRO_TASK = "AddMacroTask"
    ADD_MICRO_TASK = "AddMicroTask"
    MOVE_TASK_TO_STACK = "MoveTaskToStack"
    THROW_REFERENCE_ERROR = "ThrowReferenceError"
    EXECUTE_EXPRESSION = "ExecuteExpression"
    HALT_EXECUTION = "HaltExecution"


# Vocabulary kept for the event-loop model; the simulator never records these.
RESERVED_STEP_TYPES: frozenset[StepType] = frozenset(
    {
        StepType.CHECK_VARIABLE_ACCESS,
        StepType.REGISTER_WEB_API,
        StepType.ADD_MACRO_TASK,
        StepType.ADD_MICRO_TASK,
        StepType.MOVE_TASK_TO_STACK,
    }
)


@dataclass(frozen=True)
class Step:
    """A single recorded unit of simulated engine behaviour.

    ``data`` is deep-copied by the recorder and wrapped in a read-only
    mapping, so neither later mutation of live simulator state nor a
    consumer can change a step that was already recorded.
    """

    id: str
    index: int
    type: StepType
    detail: str
    data: Mapping[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "type": self.type.value,
            "detail": self.detail,
            "data": serialize_value(self.data),
        }

    def __str__(self) -> str:
        return f"[{self.type.value}] {self.detail}"


@dataclass(frozen=True)
class SimulationTrace:
    """Complete trace of a simulation run.

    Holds the ordered steps, run statistics, and a snapshot of the
    simulator state once execution finished or halted.
    """

    steps: tuple[Step, ...] = ()
    stats: SimulationStats = field(default_factory=SimulationStats)
    final_state: Any = None  # SimulatorState after the last step

    def __len__(self) -> int:
        return len(self.steps)

    def types(self) -> list[StepType]:
        return [step.type for step in self.steps]

    def to_dict(self) -> dict:
        return {
            "steps": [step.to_dict() for step in self.steps],
            "stats": self.stats.to_dict(),
            "final_state": self.final_state.to_dict() if self.final_state else None,
        }
