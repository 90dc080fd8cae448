"""Statement executor — dispatch by statement kind, call frames, and unwinding."""

from __future__ import annotations

import logging
from typing import Any, Callable

from .ast_nodes import (
    AssignmentExpression,
    CallExpression,
    ExpressionStatement,
    FunctionDeclaration,
    Identifier,
    MemberExpression,
    NodeKind,
    SyntaxNode,
    VariableDeclaration,
)
from .errors import StackOverflowFault
from .evaluator import ExpressionEvaluator
from .hoisting import hoist_declarations
from .recorder import StepRecorder
from .run_types import SimulatorConfig
from .state_types import SimulatorState
from .trace_types import StepType
from .values import UNDEFINED, JSObject, format_value

logger = logging.getLogger(__name__)


class StatementExecutor:
    """Single entry point for top-level and function-body statements.

    Statement kinds without a dispatch entry are inert: nothing is recorded
    and execution moves on to the next statement.
    """

    def __init__(
        self,
        state: SimulatorState,
        recorder: StepRecorder,
        config: SimulatorConfig = SimulatorConfig(),
    ):
        self.state = state
        self.recorder = recorder
        self.config = config
        self.evaluator = ExpressionEvaluator(state, recorder)
        self.max_depth_reached = state.depth
        self._STMT_DISPATCH: dict[NodeKind, Callable[[Any], None]] = {
            NodeKind.VARIABLE_DECLARATION: self._exec_variable_declaration,
            NodeKind.EXPRESSION_STATEMENT: self._exec_expression_statement,
        }

    def execute(self, node: SyntaxNode) -> None:
        handler = self._STMT_DISPATCH.get(getattr(node, "kind", None))
        if handler is None:
            logger.debug("Inert statement: %s", getattr(node, "kind", node))
            return
        handler(node)

    # ── declarations ─────────────────────────────────────────────

    def _exec_variable_declaration(self, node: VariableDeclaration) -> None:
        kind = node.declaration_kind.value
        for declarator in node.declarators:
            if declarator.init is None:
                continue
            name = declarator.name
            value = self.evaluator.evaluate(declarator.init)
            self.recorder.record(
                StepType.ASSIGN_VALUE,
                f"{kind} '{name}' assigned: {format_value(value)}",
                {"name": name, "value": value},
            )
            self.state.current_env.bind(name, value)

    # ── expression statements ────────────────────────────────────

    def _exec_expression_statement(self, node: ExpressionStatement) -> None:
        expr = node.expression
        if isinstance(expr, AssignmentExpression):
            self._exec_assignment(expr)
        elif isinstance(expr, CallExpression):
            self._exec_call(expr)
        else:
            logger.debug("Inert expression statement: %s", expr)

    def _exec_assignment(self, expr: AssignmentExpression) -> None:
        target = expr.target
        value = self.evaluator.evaluate(expr.value)
        if isinstance(target, Identifier):
            # Rebinds in the current frame; the declaring scope is not searched.
            name = target.name
            self.recorder.record(
                StepType.ASSIGN_VALUE,
                f"Assign value to variable '{name}': {format_value(value)}",
                {"name": name, "value": value},
            )
            self.state.current_env.bind(name, value)
        elif isinstance(target, MemberExpression):
            obj = self.evaluator.evaluate(target.object)
            prop = target.property
            self.recorder.record(
                StepType.ASSIGN_VALUE,
                f"Update object property '{prop}': {format_value(value)}",
                {"property": prop, "value": value},
            )
            if isinstance(obj, JSObject):
                obj.set(prop, value)
            else:
                logger.debug("Dropped write of '%s' on non-object %r", prop, obj)
        else:
            logger.debug("Inert assignment target: %s", target)

    def _exec_call(self, expr: CallExpression) -> None:
        callee = expr.callee
        if isinstance(callee, MemberExpression):
            self._exec_log_call(expr, callee)
        elif isinstance(callee, Identifier):
            self._call_function(callee.name)
        else:
            logger.debug("Inert call with callee %s", callee)

    def _exec_log_call(self, expr: CallExpression, callee: MemberExpression) -> None:
        self.recorder.record(
            StepType.EXECUTE_EXPRESSION,
            f"Execute {callee}()",
            {"callee": str(callee)},
        )
        value = UNDEFINED
        if expr.arguments:
            value = self.evaluator.evaluate(expr.arguments[0])
        self.recorder.record(
            StepType.LOG_OUTPUT,
            f"Log output: {format_value(value)}",
            {"value": value},
        )

    # ── function calls ───────────────────────────────────────────

    def _call_function(self, name: str) -> None:
        """Invoke *name*, mapping host stack exhaustion to a stack overflow fault.

        A ``max_call_depth`` larger than the interpreter's recursion limit can
        exhaust the Python stack first. Frames pushed below this call are
        rolled back before the fault propagates.
        """
        depth = self.state.depth
        try:
            self._invoke(name)
        except RecursionError:
            while self.state.depth > depth:
                self.state.pop_frame()
            raise StackOverflowFault(
                "Maximum call stack size exceeded", name=name
            ) from None

    def _invoke(self, name: str) -> None:
        """Run one invocation of a hoisted function.

        Per invocation: Prepared → ContextCreated → EnvCreated → Hoisting →
        BodyExecuting → ContextDestroyed. A fault raised inside the body pops
        the frame on its way out and records no DestroyExecutionContext.
        """
        self.recorder.record(
            StepType.EXECUTE_EXPRESSION,
            f"Prepare call expression '{name}()'",
            {"name": name},
        )
        func = self.state.heap.get(name)
        if func is None:
            raise self.evaluator.reference_fault(name, f"'{name}' is not defined")
        if self.state.depth > self.config.max_call_depth:
            raise StackOverflowFault("Maximum call stack size exceeded", name=name)

        self.recorder.record(
            StepType.CREATE_EXECUTION_CONTEXT,
            f"Create execution context for function '{name}' and push it",
            {"name": name, "call_stack": self.state.call_stack + [name]},
        )
        env = self.state.push_frame(name)
        self.max_depth_reached = max(self.max_depth_reached, self.state.depth)
        try:
            self.recorder.record(
                StepType.CREATE_LEXICAL_ENVIRONMENT,
                f"Create lexical environment inside function '{name}'",
                {"name": name, "env_id": env.env_id, "parent_id": env.parent_id},
            )
            self._run_body(func)
        finally:
            self.state.pop_frame()
        self.recorder.record(
            StepType.DESTROY_EXECUTION_CONTEXT,
            f"Function '{name}' finished; pop execution context",
            {"name": name, "call_stack": list(self.state.call_stack)},
        )

    def _run_body(self, func: FunctionDeclaration) -> None:
        hoist_declarations(
            func.body,
            self.state,
            self.recorder,
            scope=func.name,
            variables_only=True,
        )
        for stmt in func.body:
            self.execute(stmt)
