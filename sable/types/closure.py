"""User-defined function values for Sable."""

from __future__ import annotations

from io import StringIO

from sable import SExpression
from sable.types.environment import Snapshot


class Closure:
    """A first-class function: parameters, optional vararg, body forms, captured bindings."""

    __slots__ = ("params", "vararg", "body", "captured")

    def __init__(
        self,
        params: list[str],
        vararg: str | None,
        body: list[SExpression],
        captured: Snapshot,
    ):
        self.params: list[str] = params
        self.vararg: str | None = vararg
        self.body: list[SExpression] = body
        self.captured: Snapshot = captured

    def __eq__(self, other: object) -> bool:
        # captured cells compare by identity
        return (
            isinstance(other, Closure)
            and self.params == other.params
            and self.vararg == other.vararg
            and self.body == other.body
            and dict(self.captured) == dict(other.captured)
        )

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(lambda ")
            if self.params or self.vararg is None:
                buffer.write("(")
                buffer.write(" ".join(self.params))
                if self.vararg is not None:
                    buffer.write(f" . {self.vararg}")
                buffer.write(")")
            else:
                buffer.write(self.vararg)
            buffer.write(" ...)")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Return the Lisp-style representation of the closure."""
        return str(self)
