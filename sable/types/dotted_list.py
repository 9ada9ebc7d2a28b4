from __future__ import annotations

from sable import LispValue


class DottedList:
    """An improper list: one or more items followed by a non-list tail, (a b . c)."""

    __slots__ = ("items", "tail")

    def __init__(self, items: list[LispValue], tail: LispValue):
        self.items: list[LispValue] = list(items)
        self.tail: LispValue = tail

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, DottedList)
            and self.items == other.items
            and self.tail == other.tail
        )

    def __repr__(self) -> str:
        return f"DottedList({self.items!r}, {self.tail!r})"
