"""Atoms: case-sensitive identifiers that are both variable references and data.

Evaluating an atom looks its name up in the Environment; quoting it yields
the atom itself. Names are interned, so two atoms with the same text share
one string object.
"""
from __future__ import annotations

import sys


class Symbol:
    __slots__ = ("id",)

    def __init__(self, name: str):
        self.id: str = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Symbol):
            return NotImplemented
        # interned, so identity is equality
        return self.id is other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"Symbol({self.id!r})"

    def __str__(self) -> str:
        return self.id
