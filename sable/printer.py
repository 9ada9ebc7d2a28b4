"""Canonical text form of Sable values.

Every value has exactly one printed form:

    "text"            strings, double quoted
    name              atoms
    42                numbers
    #t / #f           booleans
    (a b c)           lists
    (a b . c)         dotted lists
    (lambda (x) ...)  closures, body omitted
    <primitive>, <IO primitive>, <IO port>
"""

from __future__ import annotations

from sable import LispValue
from sable.types.dotted_list import DottedList

TRUE = "#t"
FALSE = "#f"


def _escape(text: str) -> str:
    return text.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n").replace("\t", "\\t")


def to_string(value: LispValue) -> str:
    match value:
        case bool():
            return TRUE if value else FALSE
        case str():
            return f'"{_escape(value)}"'
        case list():
            return f"({intersperse(value)})"
        case DottedList(items=[], tail=tail):
            # (cdr '(a . b)) has no items left; it reads back as its tail
            return to_string(tail)
        case DottedList(items=items, tail=tail):
            return f"({intersperse(items)} . {to_string(tail)})"
        case _:
            # Symbol, int, Closure, NativeOp, IoOp and Port all know their own text
            return str(value)


def intersperse(values: list[LispValue]) -> str:
    return " ".join(to_string(v) for v in values)
