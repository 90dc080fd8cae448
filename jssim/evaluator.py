"""Expression evaluator — value-producing traversal over expression nodes."""

from __future__ import annotations

import logging
from typing import Any, Callable

from .ast_nodes import (
    Identifier,
    MemberExpression,
    NodeKind,
    NumericLiteral,
    ObjectExpression,
    StringLiteral,
    SyntaxNode,
)
from .errors import ReferenceFault
from .recorder import StepRecorder
from .state_types import SimulatorState
from .trace_types import StepType
from .values import UNDEFINED, JSObject

logger = logging.getLogger(__name__)


class ExpressionEvaluator:
    """Evaluates expressions against the simulator state.

    Steps are recorded only where engine-visible work happens: object
    allocation, property initialization, member access, and reference faults.
    Node kinds outside the dispatch table evaluate to undefined silently.
    """

    def __init__(self, state: SimulatorState, recorder: StepRecorder):
        self.state = state
        self.recorder = recorder
        self._EXPR_DISPATCH: dict[NodeKind, Callable[[Any], Any]] = {
            NodeKind.STRING_LITERAL: self._eval_literal,
            NodeKind.NUMERIC_LITERAL: self._eval_literal,
            NodeKind.OBJECT_EXPRESSION: self._eval_object,
            NodeKind.IDENTIFIER: self._eval_identifier,
            NodeKind.MEMBER_EXPRESSION: self._eval_member,
            NodeKind.ASSIGNMENT_EXPRESSION: self._eval_unsupported,
            NodeKind.CALL_EXPRESSION: self._eval_unsupported,
            NodeKind.UNSUPPORTED_EXPRESSION: self._eval_unsupported,
        }

    def evaluate(self, node: SyntaxNode) -> Any:
        handler = self._EXPR_DISPATCH.get(getattr(node, "kind", None))
        if handler is None:
            return self._eval_unsupported(node)
        return handler(node)

    # ── handlers ─────────────────────────────────────────────────

    def _eval_literal(self, node: StringLiteral | NumericLiteral) -> Any:
        return node.value

    def _eval_object(self, node: ObjectExpression) -> JSObject:
        obj = JSObject(addr=self.state.fresh_object_addr())
        self.recorder.record(
            StepType.ALLOCATE_HEAP_OBJECT,
            "Create object literal",
            {"object_id": obj.addr},
        )
        for prop in node.properties:
            value = self.evaluate(prop.value)
            obj.set(prop.key, value)
            self.recorder.record(
                StepType.ASSIGN_VALUE,
                f"Initialize object property '{prop.key}'",
                {"object_id": obj.addr, "key": prop.key, "value": value},
            )
        return obj

    def _eval_identifier(self, node: Identifier) -> Any:
        name = node.name
        result = self.state.lookup(name)
        if not result.found:
            raise self.reference_fault(name, f"'{name}' is not defined")
        if not result.binding.initialized:
            raise self.reference_fault(
                name, f"Cannot access '{name}' before initialization"
            )
        return result.binding.value

    def _eval_member(self, node: MemberExpression) -> Any:
        obj = self.evaluate(node.object)
        prop = node.property
        self.recorder.record(
            StepType.EXECUTE_EXPRESSION,
            f"Access member '{prop}'",
            {"object": obj, "property": prop},
        )
        if isinstance(obj, JSObject):
            return obj.get(prop)
        return UNDEFINED

    def _eval_unsupported(self, node: SyntaxNode) -> Any:
        logger.debug("Unsupported expression evaluates to undefined: %s", node)
        return UNDEFINED

    # ── faults ───────────────────────────────────────────────────

    def reference_fault(self, name: str, message: str) -> ReferenceFault:
        """Record the ThrowReferenceError step and build the fault to raise."""
        fault = ReferenceFault(message, name=name)
        self.recorder.record(
            StepType.THROW_REFERENCE_ERROR, fault.describe(), {"name": name}
        )
        return fault
