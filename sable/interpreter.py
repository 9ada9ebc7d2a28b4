from __future__ import annotations

import logging
import sys

from sable import LispValue, SExpression
from sable.config import get_recursion_limit
from sable.errors import RecursionDepth
from sable.reader.parser import parse, parse_all
from sable.types.environment import Environment
from sable.evaluation.evaluator import evaluate
from sable.builtin.primitives import register
from sable.builtin.io_builtin import register as register_io
from sable.modules.loader import load_prelude


class Interpreter:
    """
    One evaluation session: reads and evaluates Sable code against a single
    Environment that persists across calls.

    Sessions are independent of each other; nothing is shared at module level
    except the interpreter's recursion limit, which is only ever raised.
    """

    def __init__(self, prelude: bool = False):
        self._logger = logging.getLogger("Interpreter")
        limit = get_recursion_limit()
        if sys.getrecursionlimit() < limit:
            sys.setrecursionlimit(limit)
            self._logger.debug("recursion limit raised to %d", limit)

        self.env: Environment = Environment()
        register(self.env)
        register_io(self.env)

        if prelude:
            load_prelude(self)
        self._logger.debug("session started with %d bindings", len(self.env.vars))

    def evaluate(self, expr: SExpression) -> LispValue:
        """Evaluate one parsed form; runaway recursion becomes RecursionDepth."""
        try:
            return evaluate(expr, self.env)
        except RecursionError as e:
            raise RecursionDepth(sys.getrecursionlimit()) from e

    def eval(self, code: str) -> LispValue:
        """Parse exactly one form from `code` and evaluate it."""
        return self.evaluate(parse(code))

    def eval_all(self, code: str) -> LispValue:
        """Evaluate every form in `code`; return the last result ([] if there are none)."""
        result: LispValue = []
        for expr in parse_all(code):
            result = self.evaluate(expr)
        return result

    def close(self) -> None:
        """Close every port the session left open."""
        self.env.close_all()

    def __enter__(self) -> Interpreter:
        return self

    def __exit__(self, *exc) -> None:
        self.close()
