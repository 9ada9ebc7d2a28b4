# Core type aliases for Sable's data model.
# We use plain Python types (int, str, bool, list) wherever Python already has an
# exact counterpart, plus a few small classes for the rest:
#
#   Atom       -> sable.types.symbol.Symbol
#   Number     -> int (never bool; wraps to signed 64 bits)
#   Str        -> str
#   Bool       -> bool
#   List       -> list
#   DottedList -> sable.types.dotted_list.DottedList
#   NativeOp   -> sable.types.primitive.NativeOp
#   IoOp       -> sable.types.primitive.IoOp
#   Closure    -> sable.types.closure.Closure
#   Port       -> sable.types.port.Port
#
# Code and data share the representation: a parsed form is a LispValue.

from typing import Any, Callable

__version__ = "0.1.0"

# Runtime value alias
LispValue = Any
# Forms alias, used by the reader and special forms
SExpression = LispValue

# Evaluator function type: passed to special forms and the applier
EvaluatorFn = Callable[..., LispValue]
