from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from .repl import Mode, run_repl


_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="calcpy", description="Evaluate integer arithmetic, one line at a time")
    ap.add_argument("file", nargs="?", help="Read lines from FILE instead of stdin")
    ap.add_argument(
        "-e",
        "--eval",
        action="append",
        default=[],
        metavar="EXPR",
        help="Evaluate EXPR and exit (repeatable)",
    )
    ap.add_argument("--prompt", default=None, help='Prompt shown before each line (default: "> " on a terminal)')
    mode = ap.add_mutually_exclusive_group()
    mode.add_argument("--tokens", action="store_const", dest="mode", const=Mode.TOKENS, help="Print tokens instead of evaluating")
    mode.add_argument("--ast", action="store_const", dest="mode", const=Mode.AST, help="Print the parsed expression instead of evaluating")
    ap.add_argument("--trace", action="store_true", help="Print the chain of causes for lexer/parser errors")
    ap.add_argument(
        "--log-level",
        choices=_LOG_LEVELS,
        default=os.environ.get("CALCPY_LOG_LEVEL", "WARNING").upper(),
        help="Logging level (default: $CALCPY_LOG_LEVEL or WARNING)",
    )
    ap.set_defaults(mode=Mode.EVAL)
    return ap


def main(argv: list[str] | None = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    if args.log_level not in _LOG_LEVELS:
        # Only reachable through $CALCPY_LOG_LEVEL; argparse checks explicit values.
        ap.error(f"invalid CALCPY_LOG_LEVEL {args.log_level!r} (choose from {', '.join(_LOG_LEVELS)})")
    logging.basicConfig(
        level=args.log_level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )

    try:
        if args.eval:
            failures = run_repl(args.eval, sys.stdout, sys.stderr, prompt="", mode=args.mode, trace=args.trace)
            return 1 if failures else 0

        if args.file is not None:
            with Path(args.file).open(encoding="utf-8") as f:
                prompt = args.prompt or ""
                failures = run_repl(f, sys.stdout, sys.stderr, prompt=prompt, mode=args.mode, trace=args.trace)
            return 1 if failures else 0

        prompt = args.prompt
        if prompt is None:
            prompt = "> " if sys.stdin.isatty() else ""
        run_repl(sys.stdin, sys.stdout, sys.stderr, prompt=prompt, mode=args.mode, trace=args.trace)
        return 0
    except KeyboardInterrupt:
        return 130
