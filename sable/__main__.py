"""
Command line front ends for Sable.

    sable '(+ 1 2)'     evaluate one expression and print the result
    sable               interactive shell; type `quit` to leave

Errors are printed, never fatal: the shell keeps its session and carries on.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TextIO

from sable import __version__
from sable.config import get_log_level
from sable.errors import SableError, ParseError
from sable.interpreter import Interpreter
from sable.printer import to_string
from sable.reader.parser import parse

PROMPT = "Lisp>>> "
QUIT = "quit"


def run_line(interp: Interpreter, line: str) -> str:
    """Parse and evaluate one line, returning the text to show for it."""
    try:
        expr = parse(line)
    except ParseError as e:
        return f"Parse error: {e.detail}"
    try:
        return to_string(interp.evaluate(expr))
    except SableError as e:
        return f"Eval error: {e}"


def run_once(source: str, prelude: bool = False, out: TextIO | None = None) -> None:
    out = out or sys.stdout
    with Interpreter(prelude=prelude) as interp:
        out.write(run_line(interp, source) + "\n")


def run_repl(
    prelude: bool = False, inp: TextIO | None = None, out: TextIO | None = None
) -> None:
    inp = inp or sys.stdin
    out = out or sys.stdout
    with Interpreter(prelude=prelude) as interp:
        out.write(PROMPT)
        out.flush()
        for line in inp:
            text = line.rstrip()
            if text == QUIT:
                return
            if text.strip():
                out.write(run_line(interp, text) + "\n")
            out.write(PROMPT)
            out.flush()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="sable",
        description="Evaluate one expression, or start an interactive shell when none is given.",
    )
    parser.add_argument("expr", nargs="?", help="expression to evaluate")
    parser.add_argument(
        "--prelude", action="store_true", help="load the standard library first"
    )
    parser.add_argument(
        "--log-level",
        default=get_log_level(),
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level, format="%(asctime)s %(name)s %(levelname)s %(message)s"
    )

    if args.expr is None:
        run_repl(args.prelude)
    else:
        run_once(args.expr, args.prelude)
    return 0


if __name__ == "__main__":
    sys.exit(main())
