"""Runtime environment for Sable.

The Environment maps names to Cells. A Cell is one mutable storage slot; it is
what closures share. Every `define` allocates a fresh Cell, `set!` writes into
the existing one, so a closure that captured a name sees later assignments to
it and the code that created the closure sees assignments made inside it.

Closure capture and call-site restoration work on the name -> Cell mapping
only, never on the values:

- snapshot() copies the mapping (cheap: a dict copy, cells are shared);
- enter(snapshot) overlays a closure's captured mapping at call entry;
- restore(snapshot) puts the caller's mapping back after the call.

A Cell lives as long as a live mapping or a snapshot refers to it, so slots
created by finished calls are reclaimed by reference counting instead of
piling up in a store that only grows.

The environment also owns the table of open file ports for the session.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from io import StringIO
from itertools import count
from types import MappingProxyType
from typing import IO, Iterator, Mapping

from sable import LispValue
from sable.errors import UnboundVariable, IoError, PortError
from sable.types.port import Port, Direction


class Cell:
    """A single mutable storage location."""

    __slots__ = ("value",)

    def __init__(self, value: LispValue):
        self.value = value

    def __repr__(self) -> str:
        return f"Cell({self.value!r})"


# Immutable name -> Cell mapping taken when a closure is created
Snapshot = Mapping[str, Cell]


@dataclass
class _OpenPort:
    direction: Direction
    stream: IO[str]


class Environment:
    """Mutable name -> Cell mapping plus the session's open-port table."""

    __slots__ = ("vars", "ports", "_handles")

    _logger = logging.getLogger("Environment")

    def __init__(self):
        self.vars: dict[str, Cell] = {}
        self.ports: dict[int, _OpenPort] = {}
        # Handles are never reused within a session
        self._handles: Iterator[int] = count()

    # --- Bindings ---
    def lookup(self, name: str) -> LispValue:
        """Return the value bound to `name`.

        Raises UnboundVariable if the name has no binding.
        """
        cell = self.vars.get(name)
        if cell is None:
            raise UnboundVariable("Getting an unbound variable", name)
        return cell.value

    def assign(self, name: str, value: LispValue) -> LispValue:
        """Overwrite the value in the existing slot for `name` and return it.

        Assignment never defines: an unbound name raises UnboundVariable.
        """
        cell = self.vars.get(name)
        if cell is None:
            raise UnboundVariable("Setting an unbound variable", name)
        cell.value = value
        return value

    def define(self, name: str, value: LispValue) -> LispValue:
        """Bind `name` to a fresh slot holding `value` and return the value."""
        self.vars[name] = Cell(value)
        return value

    def is_bound(self, name: str) -> bool:
        return name in self.vars

    def update(self, mapping: Mapping[str, LispValue]) -> None:
        """Bulk-define a mapping of name -> value."""
        for k, v in mapping.items():
            self.define(k, v)

    # --- Closure capture ---
    def snapshot(self) -> Snapshot:
        return MappingProxyType(dict(self.vars))

    def enter(self, snapshot: Snapshot) -> None:
        # captured bindings shadow live ones of the same name
        self.vars.update(snapshot)

    def restore(self, snapshot: Snapshot) -> None:
        self.vars = dict(snapshot)

    # --- Ports ---
    def _open(self, path: str, direction: Direction) -> Port:
        mode = "r" if direction is Direction.READ else "w"
        try:
            stream = open(path, mode, encoding="utf-8")
        except OSError as e:
            raise IoError(f"Cannot open file for {direction.value} ({e.strerror})", path) from e
        handle = next(self._handles)
        self.ports[handle] = _OpenPort(direction, stream)
        self._logger.debug("opened %s port %d on %s", direction.value, handle, path)
        return Port(handle, direction)

    def open_read(self, path: str) -> Port:
        return self._open(path, Direction.READ)

    def open_write(self, path: str) -> Port:
        return self._open(path, Direction.WRITE)

    def close(self, port: Port) -> bool:
        """Close `port`. Closing an unknown or already closed handle also succeeds."""
        entry = self.ports.pop(port.handle, None)
        if entry is not None:
            entry.stream.close()
            self._logger.debug("closed port %d", port.handle)
        return True

    def close_all(self) -> None:
        for handle in list(self.ports):
            self.close(Port(handle, self.ports[handle].direction))

    def _borrow(self, port: LispValue, direction: Direction) -> IO[str]:
        if not isinstance(port, Port):
            raise PortError("Not a port", port)
        entry = self.ports.get(port.handle)
        if entry is None:
            raise PortError("Port is closed", port)
        if entry.direction is not direction:
            raise PortError(f"Port is not open for {direction.value}", port)
        return entry.stream

    def borrow_reader(self, port: LispValue) -> IO[str]:
        return self._borrow(port, Direction.READ)

    def borrow_writer(self, port: LispValue) -> IO[str]:
        return self._borrow(port, Direction.WRITE)

    def __str__(self) -> str:
        """Human-readable view of the current bindings."""
        with StringIO() as buffer:
            buffer.write("{")
            buffer.write(", ".join(f"{k}: {c.value!r}" for k, c in self.vars.items()))
            buffer.write("}")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Environment {len(self.vars)} bindings, {len(self.ports)} open ports>"
