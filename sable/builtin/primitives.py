"""Pure primitive operations for the Sable runtime.

This module defines integer arithmetic, numeric/string/boolean comparisons,
pair operations and equivalence predicates, together with the coercions they
share and the registration that binds them into an Environment.

All primitives take the evaluated argument list and return a value. Numbers
are signed 64-bit integers: every arithmetic step wraps around.
"""
from __future__ import annotations

import re
from functools import reduce
from typing import Callable, TypeVar

from sable import LispValue
from sable.errors import NumArgs, TypeMismatch
from sable.types.dotted_list import DottedList
from sable.types.environment import Environment
from sable.types.primitive import NativeOp
from sable.types.symbol import Symbol

T = TypeVar("T")

INT_BITS = 64
_INT_MIN = -(1 << (INT_BITS - 1))
_INT_MAX = (1 << (INT_BITS - 1)) - 1
_INT_RE = re.compile(r"[+-]?[0-9]+")


def wrap(n: int) -> int:
    """Wrap an unbounded Python int into the signed 64-bit range."""
    return (n - _INT_MIN) % (1 << INT_BITS) + _INT_MIN


# -------------------------------
# Coercions
# -------------------------------
def as_number(val: LispValue) -> int:
    """Accept a number, or a string holding a decimal integer."""
    if isinstance(val, int) and not isinstance(val, bool):
        return val
    if isinstance(val, str) and _INT_RE.fullmatch(val):
        n = int(val)
        if _INT_MIN <= n <= _INT_MAX:
            return n
    raise TypeMismatch("number", val)


def as_string(val: LispValue) -> str:
    """Accept a string; numbers and booleans are converted to their text."""
    if isinstance(val, bool):
        return "true" if val else "false"
    if isinstance(val, (int, str)):
        return str(val)
    raise TypeMismatch("string", val)


def as_bool(val: LispValue) -> bool:
    if isinstance(val, bool):
        return val
    raise TypeMismatch("bool", val)


# -------------------------------
# Arithmetic
# -------------------------------
def _nonzero(d: int) -> int:
    if d == 0:
        raise TypeMismatch("nonzero number", d)
    return d


def quotient(n: int, d: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(n) // abs(_nonzero(d))
    return q if (n < 0) == (d < 0) else -q


def remainder(n: int, d: int) -> int:
    """Remainder with the sign of the dividend."""
    return n - d * quotient(n, d)


def modulo(n: int, d: int) -> int:
    """Modulo with the sign of the divisor."""
    return n % _nonzero(d)


def numeric_binop(op: Callable[[int, int], int]) -> Callable[[list[LispValue]], int]:
    """Left fold of `op` over two or more numeric arguments."""

    def fold(args: list[LispValue]) -> int:
        if len(args) < 2:
            raise NumArgs(2, args)
        nums = [as_number(a) for a in args]
        return reduce(lambda acc, x: wrap(op(acc, x)), nums)

    return fold


# -------------------------------
# Comparisons
# -------------------------------
def bool_binop(
    coerce: Callable[[LispValue], T], op: Callable[[T, T], bool]
) -> Callable[[list[LispValue]], bool]:
    """Binary predicate over exactly two arguments of one coercible kind."""

    def compare(args: list[LispValue]) -> bool:
        if len(args) != 2:
            raise NumArgs(2, args)
        lhs, rhs = args
        return op(coerce(lhs), coerce(rhs))

    return compare


def numeric_bool_binop(op: Callable[[int, int], bool]):
    return bool_binop(as_number, op)


def string_bool_binop(op: Callable[[str, str], bool]):
    return bool_binop(as_string, op)


def bool_bool_binop(op: Callable[[bool, bool], bool]):
    return bool_binop(as_bool, op)


# -------------------------------
# Pairs
# -------------------------------
def car(args: list[LispValue]) -> LispValue:
    """First element of a non-empty list or dotted list."""
    match args:
        case [[first, *_]]:
            return first
        case [DottedList(items=[first, *_])]:
            return first
        case [val]:
            raise TypeMismatch("pair", val)
    raise NumArgs(1, args)


def cdr(args: list[LispValue]) -> LispValue:
    """Everything after the first element, keeping list or dotted-list kind."""
    match args:
        case [[_, *rest]]:
            return rest
        case [DottedList(items=[_, *rest], tail=tail)]:
            return DottedList(rest, tail)
        case [val]:
            raise TypeMismatch("pair", val)
    raise NumArgs(1, args)


def cons(args: list[LispValue]) -> LispValue:
    """Prepend head to a list or dotted list; anything else becomes the tail of a pair."""
    match args:
        case [head, list() as tail]:
            return [head, *tail]
        case [head, DottedList(items=items, tail=tail)]:
            return DottedList([head, *items], tail)
        case [head, tail]:
            return DottedList([head], tail)
    raise NumArgs(2, args)


def list_builtin(args: list[LispValue]) -> list[LispValue]:
    """Construct a list from the provided arguments (identity)."""
    return list(args)


def null(args: list[LispValue]) -> bool:
    """Predicate: #t if the single argument is the empty list."""
    match args:
        case [val]:
            return isinstance(val, list) and not val
    raise NumArgs(1, args)


def logical_not(args: list[LispValue]) -> bool:
    """Only #f is false, so (not x) is #t for #f alone."""
    match args:
        case [val]:
            return val is False
    raise NumArgs(1, args)


# -------------------------------
# Equivalence
# -------------------------------
def is_eqv(a: LispValue, b: LispValue) -> bool:
    """Structural equality; values of different kinds are never equal (1 is not #t)."""
    if isinstance(a, DottedList) and isinstance(b, DottedList):
        return is_eqv([*a.items, a.tail], [*b.items, b.tail])
    if isinstance(a, list) and isinstance(b, list):
        return len(a) == len(b) and all(is_eqv(x, y) for x, y in zip(a, b))
    if type(a) is not type(b):
        return False
    if isinstance(a, (bool, int, str, Symbol)):
        return a == b
    return False


def eqv(args: list[LispValue]) -> bool:
    if len(args) != 2:
        raise NumArgs(2, args)
    return is_eqv(*args)


def _coerced(coerce: Callable[[LispValue], T], val: LispValue) -> T | None:
    try:
        return coerce(val)
    except TypeMismatch:
        return None


def equal(args: list[LispValue]) -> bool:
    """Loose equality: compare as numbers, else as strings, else as booleans."""
    if len(args) != 2:
        raise NumArgs(2, args)
    lhs, rhs = args
    for coerce in (as_number, as_string, as_bool):
        l, r = _coerced(coerce, lhs), _coerced(coerce, rhs)
        if l is not None and r is not None:
            return l == r
    return False


PRIMITIVES: dict[str, Callable[[list[LispValue]], LispValue]] = {
    "+": numeric_binop(lambda a, b: a + b),
    "-": numeric_binop(lambda a, b: a - b),
    "*": numeric_binop(lambda a, b: a * b),
    "/": numeric_binop(quotient),
    "mod": numeric_binop(modulo),
    "quotient": numeric_binop(quotient),
    "remainder": numeric_binop(remainder),
    "=": numeric_bool_binop(lambda a, b: a == b),
    "<": numeric_bool_binop(lambda a, b: a < b),
    ">": numeric_bool_binop(lambda a, b: a > b),
    "/=": numeric_bool_binop(lambda a, b: a != b),
    ">=": numeric_bool_binop(lambda a, b: a >= b),
    "<=": numeric_bool_binop(lambda a, b: a <= b),
    "&&": bool_bool_binop(lambda a, b: a and b),
    "||": bool_bool_binop(lambda a, b: a or b),
    "string=?": string_bool_binop(lambda a, b: a == b),
    "string<?": string_bool_binop(lambda a, b: a < b),
    "string>?": string_bool_binop(lambda a, b: a > b),
    "string<=?": string_bool_binop(lambda a, b: a <= b),
    "string>=?": string_bool_binop(lambda a, b: a >= b),
    "car": car,
    "cdr": cdr,
    "cons": cons,
    "eq?": eqv,
    "eqv?": eqv,
    "equal?": equal,
    "list": list_builtin,
    "null?": null,
    "not": logical_not,
}


def register(env: Environment) -> None:
    """Register all pure primitives into the given environment."""
    env.update({name: NativeOp(name, fn) for name, fn in PRIMITIVES.items()})
