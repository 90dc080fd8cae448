"""Run pipeline data types (pure data, no business logic)."""

from __future__ import annotations

from dataclasses import asdict, dataclass

from . import constants


@dataclass(frozen=True)
class SimulatorConfig:
    """Groups simulation configuration."""

    max_call_depth: int = constants.DEFAULT_MAX_CALL_DEPTH
    verbose: bool = False


@dataclass
class SimulationStats:
    """Returned metrics from a simulation run."""

    steps: int = 0
    functions_hoisted: int = 0
    objects_allocated: int = 0
    environments_created: int = 0
    max_call_depth: int = 1
    halted: bool = False
    halt_reason: str = ""

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class PipelineStats:
    """Timing and size statistics for each pipeline stage."""

    source_bytes: int = 0
    source_lines: int = 0

    # Stage timings (seconds)
    parse_time: float = 0.0
    lower_time: float = 0.0
    simulation_time: float = 0.0
    total_time: float = 0.0

    # Output sizes
    statement_count: int = 0
    step_count: int = 0

    # Simulation stats
    functions_hoisted: int = 0
    objects_allocated: int = 0
    max_call_depth: int = 0
    halted: bool = False

    def report(self) -> str:
        lines = [
            "═══ Pipeline Statistics ═══",
            f"  Source: {self.source_lines} lines, {self.source_bytes} bytes",
            "",
            f"  {'Stage':<20} {'Time':>10}  {'Output':>30}",
            f"  {'─' * 20} {'─' * 10}  {'─' * 30}",
        ]

        stages = [
            ("Parse", self.parse_time, ""),
            (
                "Lower (frontend)",
                self.lower_time,
                f"{self.statement_count} top-level statements",
            ),
            ("Simulate", self.simulation_time, f"{self.step_count} steps"),
        ]
        for name, t, output in stages:
            time_str = f"{t * 1000:>8.1f}ms"
            lines.append(f"  {name:<20} {time_str:>10}  {output:>30}")

        lines.append(f"  {'─' * 20} {'─' * 10}  {'─' * 30}")
        lines.append(f"  {'Total':<20} {self.total_time * 1000:>8.1f}ms")
        lines.append("")
        lines.append(
            f"  Final state: {self.functions_hoisted} functions in heap,"
            f" {self.objects_allocated} objects allocated,"
            f" max call depth {self.max_call_depth}"
            + (" (halted)" if self.halted else "")
        )
        return "\n".join(lines)
