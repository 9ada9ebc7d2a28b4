from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List


# Resolve installation dir (sable package directory)
_SABLE_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE = _SABLE_DIR / 'prelude' / 'stdlib.scm'
_DEFAULT_LOG_LEVEL = 'WARNING'
_DEFAULT_RECURSION_LIMIT = 10_000


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    return [Path(p.strip()) for p in raw.split(os.pathsep) if p.strip()]


def get_prelude_path() -> Path:
    # a directory is accepted too; the library file inside it keeps its default name
    p = paths_from_env('SABLE_PRELUDE_PATH', [_DEFAULT_PRELUDE])[0]
    return p / _DEFAULT_PRELUDE.name if p.is_dir() else p


def get_load_roots() -> List[Path]:
    return paths_from_env('SABLE_LOAD_PATH', [])


def get_log_level() -> str:
    return os.environ.get('SABLE_LOG_LEVEL', _DEFAULT_LOG_LEVEL).upper()


def get_recursion_limit() -> int:
    # Python frames, not Sable calls; one call nests about eight frames
    raw = os.environ.get('SABLE_RECURSION_LIMIT')
    return int(raw) if raw and raw.strip().isdigit() else _DEFAULT_RECURSION_LIMIT
