"""Effectful primitives for the Sable runtime.

These receive the Environment as well as their arguments: the file-port
operations need the session's port table, and `apply` needs the environment
to run a closure in.
"""
from __future__ import annotations

import sys

from sable import LispValue
from sable.errors import NumArgs, TypeMismatch, IoError
from sable.evaluation.apply import apply as apply_engine
from sable.evaluation.evaluator import evaluate
from sable.modules.loader import load, read_contents, resolve_path
from sable.printer import to_string
from sable.reader.parser import parse
from sable.types.environment import Environment
from sable.types.port import Port
from sable.types.primitive import IoOp


def _path_arg(args: list[LispValue]) -> str:
    match args:
        case [str() as path]:
            return path
        case [val]:
            raise TypeMismatch("string", val)
    raise NumArgs(1, args)


def apply_proc(env: Environment, args: list[LispValue]) -> LispValue:
    """(apply f (a b c)) calls f with a, b and c; (apply f a b) calls f with a and b."""
    if not args:
        raise NumArgs(1, args)
    fn, *rest = args
    if len(rest) == 1 and isinstance(rest[0], list):
        rest = rest[0]
    return apply_engine(fn, list(rest), env, evaluate)


def make_read_port(env: Environment, args: list[LispValue]) -> Port:
    return env.open_read(str(resolve_path(_path_arg(args))))


def make_write_port(env: Environment, args: list[LispValue]) -> Port:
    return env.open_write(_path_arg(args))


def close_port(env: Environment, args: list[LispValue]) -> bool:
    """Close a port; #f if the argument is not a port at all."""
    match args:
        case [Port() as port]:
            return env.close(port)
        case [_]:
            return False
    raise NumArgs(1, args)


def read_proc(env: Environment, args: list[LispValue]) -> LispValue:
    """Read one line from a port (standard input with no argument) and parse it."""
    match args:
        case []:
            stream = sys.stdin
        case [port]:
            stream = env.borrow_reader(port)
        case _:
            raise NumArgs(1, args)
    try:
        line = stream.readline()
    except UnicodeDecodeError as e:
        raise IoError("Cannot decode input") from e
    if not line:
        raise IoError("End of input")
    return parse(line)


def write_proc(env: Environment, args: list[LispValue]) -> bool:
    """Write a value's printed form and a newline to a port (standard output by default)."""
    match args:
        case [obj]:
            stream = sys.stdout
        case [obj, port]:
            stream = env.borrow_writer(port)
        case _:
            raise NumArgs(2, args)
    stream.write(to_string(obj) + "\n")
    return True


def read_contents_proc(env: Environment, args: list[LispValue]) -> str:
    return read_contents(_path_arg(args))


def read_all_proc(env: Environment, args: list[LispValue]) -> list[LispValue]:
    return load(_path_arg(args))


IO_PRIMITIVES = {
    "apply": apply_proc,
    "open-input-file": make_read_port,
    "open-output-file": make_write_port,
    "close-input-port": close_port,
    "close-output-port": close_port,
    "read": read_proc,
    "write": write_proc,
    "read-contents": read_contents_proc,
    "read-all": read_all_proc,
}


def register(env: Environment) -> None:
    """Register all IO primitives into the given environment."""
    env.update({name: IoOp(name, fn) for name, fn in IO_PRIMITIVES.items()})
