"""Native operation values.

NativeOp and IoOp are the two callee kinds implemented in Python. Instances
are only created by the builtin registries (sable.builtin), so the set of
operations is closed: user code can pass them around and call them, but
cannot make new ones.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, TYPE_CHECKING

from sable import LispValue

if TYPE_CHECKING:
    from sable.types.environment import Environment


@dataclass(frozen=True)
class NativeOp:
    """A pure primitive: (args) -> value."""
    name: str
    fn: Callable[[list[LispValue]], LispValue] = field(compare=False, repr=False)

    def __call__(self, args: list[LispValue]) -> LispValue:
        return self.fn(args)

    def __str__(self) -> str:
        return "<primitive>"


@dataclass(frozen=True)
class IoOp:
    """An effectful primitive: (env, args) -> value. Gets the env for the port table."""
    name: str
    fn: Callable[["Environment", list[LispValue]], LispValue] = field(compare=False, repr=False)

    def __call__(self, env: "Environment", args: list[LispValue]) -> LispValue:
        return self.fn(env, args)

    def __str__(self) -> str:
        return "<IO primitive>"
