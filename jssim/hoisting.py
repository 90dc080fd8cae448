"""Hoisting pass — registers declarations before the code containing them runs.

Statements are visited once, left to right. Function and variable hoisting
are interleaved in that single pass rather than hoisting every function
first, so ``var f; function f() {}`` and ``function f() {}; var f;`` leave
different bindings behind.
"""

from __future__ import annotations

import logging

from .ast_nodes import (
    DeclarationKind,
    FunctionDeclaration,
    Statement,
    VariableDeclaration,
)
from .recorder import StepRecorder
from .state_types import SimulatorState
from .trace_types import StepType
from . import constants

logger = logging.getLogger(__name__)


def _scope_text(scope: str) -> str:
    if scope == constants.GLOBAL_SCOPE_LABEL:
        return "global environment"
    return f"function '{scope}' environment"


def _hoist_function(
    node: FunctionDeclaration, state: SimulatorState, recorder: StepRecorder
) -> None:
    name = node.name
    recorder.record(
        StepType.ALLOCATE_HEAP_OBJECT,
        f"Store function '{name}' in the heap",
        {"name": name},
    )
    state.heap[name] = node
    recorder.record(
        StepType.REFERENCE_VARIABLE,
        f"Register function '{name}' in the variable environment",
        {"name": name},
    )
    state.current_env.bind(name, node)


def _hoist_variables(
    node: VariableDeclaration,
    state: SimulatorState,
    recorder: StepRecorder,
    scope: str,
) -> None:
    kind = node.declaration_kind
    env = state.current_env
    for declarator in node.declarators:
        name = declarator.name
        if kind == DeclarationKind.VAR:
            recorder.record(
                StepType.DECLARE_VARIABLE,
                f"var '{name}' hoisted into the {_scope_text(scope)} (undefined)",
                {"name": name, "kind": kind.value, "initialized": True, "scope": scope},
            )
            env.declare_hoisted(name)
        else:
            recorder.record(
                StepType.DECLARE_VARIABLE,
                f"{kind.value} '{name}' hoisted into the {_scope_text(scope)} (TDZ)",
                {
                    "name": name,
                    "kind": kind.value,
                    "initialized": False,
                    "scope": scope,
                },
            )
            env.declare_uninitialized(name)


def hoist_declarations(
    statements: list[Statement],
    state: SimulatorState,
    recorder: StepRecorder,
    scope: str = constants.GLOBAL_SCOPE_LABEL,
    variables_only: bool = False,
) -> None:
    """Hoist the top-level declarations of *statements* into the current environment.

    Args:
        statements: Statement list of the program or of a function body.
        state: Simulator state whose current environment receives the bindings.
        recorder: Step recorder for the allocation/declaration steps.
        scope: Label used in step details ("global" or the function name).
        variables_only: Skip function declarations (call-time hoisting).
    """
    for stmt in statements:
        if isinstance(stmt, FunctionDeclaration):
            if variables_only:
                logger.debug("Skipping nested function '%s' at call time", stmt.name)
                continue
            _hoist_function(stmt, state, recorder)
        elif isinstance(stmt, VariableDeclaration):
            _hoist_variables(stmt, state, recorder, scope)
