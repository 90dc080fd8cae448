"""Playback cursor — an index view over an already-computed trace."""

from __future__ import annotations

from .trace_types import SimulationTrace, Step


class StepPlayback:
    """Reveal a trace one step at a time without re-executing anything.

    ``current`` counts revealed steps: 0 means nothing is shown yet and
    ``len(steps)`` means the whole trace is visible.
    """

    def __init__(self, trace: SimulationTrace | None = None):
        self._steps: tuple[Step, ...] = ()
        self._current = 0
        if trace is not None:
            self.load(trace)

    def load(self, trace: SimulationTrace) -> None:
        self._steps = trace.steps
        self._current = 0

    def advance(self) -> Step | None:
        """Reveal the next step; returns it, or None at the end."""
        if self._current >= len(self._steps):
            return None
        self._current += 1
        return self._steps[self._current - 1]

    def retreat(self) -> None:
        self._current = max(self._current - 1, 0)

    def reset(self) -> None:
        """Drop the loaded trace and rewind to an empty view."""
        self._steps = ()
        self._current = 0

    @property
    def steps(self) -> tuple[Step, ...]:
        return self._steps

    @property
    def current(self) -> int:
        return self._current

    @property
    def executed_steps(self) -> tuple[Step, ...]:
        return self._steps[: self._current]

    @property
    def at_end(self) -> bool:
        return self._current >= len(self._steps)
