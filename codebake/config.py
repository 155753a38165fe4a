from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Iterable, List


def _sep() -> str:
    return ';' if os.name == 'nt' else ':'


# Resolve installation dir (codebake package directory)
_CODEBAKE_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE_DIRS = [_CODEBAKE_DIR / 'prelude']
_DEFAULT_PROMPT = 'codebake> '
_DEFAULT_LOG_LEVEL = 'WARNING'


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    sep = _sep()
    return [Path(p.strip()) for p in raw.split(sep) if p.strip()]


def get_prelude_roots() -> List[Path]:
    return paths_from_env('CODEBAKE_PRELUDE_PATH', _DEFAULT_PRELUDE_DIRS)


def get_prompt() -> str:
    return os.environ.get('CODEBAKE_PROMPT', _DEFAULT_PROMPT)


def get_log_level() -> int:
    name = os.environ.get('CODEBAKE_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    # getLevelName returns a string for unknown names
    return level if isinstance(level, int) else logging.WARNING
