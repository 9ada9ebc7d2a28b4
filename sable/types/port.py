from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    READ = "read"
    WRITE = "write"


@dataclass(frozen=True)
class Port:
    """Opaque handle into an Environment's open-port table."""
    handle: int
    direction: Direction

    def __str__(self) -> str:
        return "<IO port>"
