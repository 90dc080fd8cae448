"""Pure functions for computing statistics over recorded steps."""

from __future__ import annotations

from collections import Counter
from typing import Iterable

from jssim.trace_types import Step, StepType


def count_step_types(steps: Iterable[Step]) -> dict[str, int]:
    """Return a frequency map of step type names in the given steps.

    Args:
        steps: Recorded steps, usually ``SimulationTrace.steps``.

    Returns:
        A dict mapping step type name strings to their occurrence counts.
        Empty dict for an empty input.
    """
    return dict(Counter(step.type.value for step in steps))


def context_balance(steps: Iterable[Step]) -> int:
    """Number of created execution contexts not yet destroyed."""
    counts = Counter(step.type for step in steps)
    return (
        counts[StepType.CREATE_EXECUTION_CONTEXT]
        - counts[StepType.DESTROY_EXECUTION_CONTEXT]
    )
