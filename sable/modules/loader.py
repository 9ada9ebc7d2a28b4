from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

from sable import SExpression
from sable.config import get_load_roots, get_prelude_path
from sable.errors import IoError
from sable.reader.parser import parse_all

_logger = logging.getLogger("Loader")


class _HasEvalAll(Protocol):
    def eval_all(self, code: str): ...


# Relative paths resolve against the working directory, then SABLE_LOAD_PATH

def resolve_path(path: str) -> Path:
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    for root in get_load_roots():
        candidate = root / p
        if candidate.exists():
            return candidate
    return p


def read_contents(path: str) -> str:
    p = resolve_path(path)
    try:
        return p.read_text(encoding='utf-8')
    except UnicodeDecodeError as e:
        raise IoError("Cannot decode file", path) from e
    except OSError as e:
        raise IoError(f"Cannot read file ({e.strerror})", path) from e


def load(path: str) -> list[SExpression]:
    """Read `path` and return its top-level forms, in order."""
    _logger.debug("loading %s", path)
    return parse_all(read_contents(path))


# Standard library convenience loader

def load_prelude(itp: _HasEvalAll) -> None:
    p = get_prelude_path()
    if not p.is_file():
        raise FileNotFoundError(f"Cannot find prelude '{p}' (check SABLE_PRELUDE_PATH)")
    _logger.debug("loading prelude %s", p)
    itp.eval_all(p.read_text(encoding='utf-8'))
