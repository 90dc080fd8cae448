"""Orchestrator — simulate() entry point and the top-level driver."""

from __future__ import annotations

import copy
import logging
import time

from .ast_nodes import FunctionDeclaration, Program
from .errors import SimulationFault
from .executor import StatementExecutor
from .frontend import JavaScriptFrontend
from .hoisting import hoist_declarations
from .parser import Parser, ParserFactory, TreeSitterParserFactory
from .recorder import StepRecorder
from .run_types import PipelineStats, SimulationStats, SimulatorConfig
from .state_types import SimulatorState
from .trace_types import SimulationTrace, StepType
from . import constants

logger = logging.getLogger(__name__)


def execute_program(
    program: Program, config: SimulatorConfig = SimulatorConfig()
) -> SimulationTrace:
    """Run a lowered program and record its step trace.

    Creates the global context, hoists the global declarations, then executes
    every non-function statement in source order. A simulation fault from
    anywhere in the call chain records one HaltExecution step and stops the
    run; remaining top-level statements are not executed.

    Args:
        program: Lowered syntax tree.
        config: Simulation configuration (recursion bound, verbosity).

    Returns:
        SimulationTrace with the steps, run stats and final state snapshot.
    """
    state = SimulatorState()
    recorder = StepRecorder(verbose=config.verbose)
    stats = SimulationStats()

    recorder.record(
        StepType.CREATE_GLOBAL_CONTEXT,
        "Create global execution context and push it onto the call stack",
        {"name": constants.GLOBAL_FRAME_NAME},
    )
    state.push_frame(constants.GLOBAL_FRAME_NAME)
    hoist_declarations(program.body, state, recorder)

    executor = StatementExecutor(state, recorder, config)
    try:
        for stmt in program.body:
            if isinstance(stmt, FunctionDeclaration):
                continue
            executor.execute(stmt)
    except SimulationFault as fault:
        logger.info("Simulation halted: %s", fault.describe())
        recorder.record(
            StepType.HALT_EXECUTION,
            f"Execution halted: {fault.describe()}",
            {"error": fault.error_name, "message": fault.message, "name": fault.name},
        )
        stats.halted = True
        stats.halt_reason = fault.describe()

    stats.steps = len(recorder)
    stats.functions_hoisted = len(state.heap)
    stats.objects_allocated = state.object_counter
    stats.environments_created = len(state.environments)
    stats.max_call_depth = executor.max_depth_reached

    return SimulationTrace(
        steps=recorder.steps,
        stats=stats,
        final_state=copy.deepcopy(state),
    )


def simulate(
    source: str,
    max_call_depth: int = constants.DEFAULT_MAX_CALL_DEPTH,
    verbose: bool = False,
    parser_factory: ParserFactory | None = None,
) -> SimulationTrace:
    """End-to-end: parse → lower → hoist/execute → trace.

    Args:
        source: JavaScript source text.
        max_call_depth: Maximum number of nested function frames.
        verbose: Print each step as it is recorded plus a stats report.
        parser_factory: Parser factory for DI/testing (tree-sitter by default).

    Raises:
        ParseFailure: If *source* is malformed; no steps are produced.
    """
    pipeline_start = time.perf_counter()
    stats = PipelineStats(
        source_bytes=len(source.encode("utf-8")),
        source_lines=source.count("\n")
        + (1 if source and not source.endswith("\n") else 0),
    )

    t0 = time.perf_counter()
    tree = Parser(parser_factory or TreeSitterParserFactory()).parse(source)
    t1 = time.perf_counter()
    stats.parse_time = t1 - t0
    program = JavaScriptFrontend().lower(tree, source.encode("utf-8"))
    stats.lower_time = time.perf_counter() - t1
    stats.statement_count = len(program.body)
    logger.info(
        "Frontend produced %d top-level statements in %.1fms",
        stats.statement_count,
        (stats.parse_time + stats.lower_time) * 1000,
    )

    if verbose:
        print("═══ Program ═══")
        print(program)
        print()
        print("═══ Steps ═══")

    config = SimulatorConfig(max_call_depth=max_call_depth, verbose=verbose)
    sim_start = time.perf_counter()
    trace = execute_program(program, config)
    stats.simulation_time = time.perf_counter() - sim_start

    stats.step_count = trace.stats.steps
    stats.functions_hoisted = trace.stats.functions_hoisted
    stats.objects_allocated = trace.stats.objects_allocated
    stats.max_call_depth = trace.stats.max_call_depth
    stats.halted = trace.stats.halted
    stats.total_time = time.perf_counter() - pipeline_start
    logger.info("Simulation recorded %d steps", stats.step_count)

    if verbose:
        print()
        print(stats.report())

    return trace
