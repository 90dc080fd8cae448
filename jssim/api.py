"""Composable API functions for the simulation pipeline.

Each function corresponds to a CLI workflow (--ast-only, --json, --stats)
but is callable programmatically without argparse.
"""

from __future__ import annotations

import json
import logging

from .ast_nodes import Program
from .frontend import JavaScriptFrontend
from .parser import Parser, TreeSitterParserFactory
from .step_stats import count_step_types
from .trace_types import SimulationTrace

logger = logging.getLogger(__name__)


def parse_source(source: str) -> Program:
    """Parse and lower JavaScript source to the simulator's syntax tree.

    Args:
        source: The source code text.

    Returns:
        The lowered ``Program``.

    Raises:
        ParseFailure: If the source does not parse cleanly.
    """
    logger.info("Lowering source (%d bytes)", len(source))
    tree = Parser(TreeSitterParserFactory()).parse(source)
    return JavaScriptFrontend().lower(tree, source.encode("utf-8"))


def dump_ast(source: str) -> str:
    """Lower source and return a JavaScript-like rendering of the syntax tree.

    Unsupported constructs render as ``<unsupported:node_type>``.
    """
    return str(parse_source(source))


def trace_to_json(trace: SimulationTrace, indent: int | None = 2) -> str:
    """Serialize a trace (steps, stats, final state) to a JSON string."""
    return json.dumps(trace.to_dict(), indent=indent, ensure_ascii=False)


def step_type_stats(trace: SimulationTrace) -> dict[str, int]:
    """Return step type frequency counts for *trace*."""
    return count_step_types(trace.steps)
