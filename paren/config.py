from __future__ import annotations
import logging
import os
from pathlib import Path


_DEFAULT_HISTORY_FILE = Path('.repl_history')
_DEFAULT_LOG_LEVEL = 'WARNING'


def path_from_env(var: str, default: Path) -> Path:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    return Path(raw.strip()).expanduser()


def get_history_file() -> Path:
    return path_from_env('PAREN_HISTORY_FILE', _DEFAULT_HISTORY_FILE)


def get_log_level() -> int:
    name = os.environ.get('PAREN_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    # unknown names fall back to the default rather than failing at startup
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.getLevelName(_DEFAULT_LOG_LEVEL)
