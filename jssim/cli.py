"""Command-line entry point."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from .api import dump_ast, step_type_stats, trace_to_json
from .errors import ParseFailure
from .run import simulate
from . import constants


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jssim", description="JavaScript engine step simulator"
    )
    parser.add_argument("file", nargs="?", help="JavaScript source file to simulate")
    parser.add_argument(
        "--max-depth",
        "-d",
        type=int,
        default=constants.DEFAULT_MAX_CALL_DEPTH,
        help="Maximum nested function calls"
        f" (default: {constants.DEFAULT_MAX_CALL_DEPTH})",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Print the lowered program, each step, and pipeline timings",
    )
    parser.add_argument(
        "--ast-only",
        action="store_true",
        help="Only print the lowered syntax tree (no simulation)",
    )
    parser.add_argument(
        "--json", action="store_true", help="Print the full trace as JSON"
    )
    parser.add_argument(
        "--stats", action="store_true", help="Print step type counts after the trace"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_arg_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

    if not args.file:
        source = constants.DEMO_SOURCE
        print("No file provided. Using built-in demo:\n")
        print(source)
    else:
        with open(args.file, encoding="utf-8") as f:
            source = f.read()

    try:
        if args.ast_only:
            print("═══ Program ═══")
            print(dump_ast(source))
            return 0
        trace = simulate(source, max_call_depth=args.max_depth, verbose=args.verbose)
    except ParseFailure as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.json:
        print(trace_to_json(trace))
    elif not args.verbose:
        print("═══ Steps ═══")
        for step in trace.steps:
            print(f"  {step.id:>8}  {step}")

    if args.stats:
        print("\n═══ Step Types ═══")
        print(json.dumps(step_type_stats(trace), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
