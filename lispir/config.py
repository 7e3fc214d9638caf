from __future__ import annotations
import logging
import os
from typing import Literal

from lispir.errors import LispirConfigError


Scoping = Literal['dynamic', 'lexical']
SCOPING_MODES: tuple[str, ...] = ('dynamic', 'lexical')

# Defaults
_DEFAULT_MAX_DEPTH = 200
_DEFAULT_SCOPING: Scoping = 'dynamic'
_DEFAULT_PROMPT = 'lispirλ '


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise LispirConfigError(f'{var} must be an integer, got {raw!r}') from None


def check_max_depth(depth: int) -> int:
    if isinstance(depth, bool) or not isinstance(depth, int) or depth < 1:
        raise LispirConfigError(f'max depth must be a positive integer, got {depth!r}')
    return depth


def check_scoping(mode: str) -> Scoping:
    if mode not in SCOPING_MODES:
        raise LispirConfigError(
            f"scoping must be one of {', '.join(SCOPING_MODES)}, got {mode!r}"
        )
    return mode  # type: ignore[return-value]


def get_max_depth() -> int:
    return check_max_depth(int_from_env('LISPIR_MAX_DEPTH', _DEFAULT_MAX_DEPTH))


def get_scoping() -> Scoping:
    raw = os.environ.get('LISPIR_SCOPING')
    if not raw or not raw.strip():
        return _DEFAULT_SCOPING
    return check_scoping(raw.strip().lower())


def get_prompt() -> str:
    return os.environ.get('LISPIR_PROMPT', _DEFAULT_PROMPT)


def get_log_level() -> int:
    """Log level from the LOGLEVEL environment variable, WARNING if unset or unknown."""
    raw = os.environ.get('LOGLEVEL', '').strip().upper()
    if raw:
        level = getattr(logging, raw, None)
        if isinstance(level, int):
            return level
    return logging.WARNING
