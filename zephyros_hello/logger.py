"""
Logging helper for ZephyrOS Hello.

Diagnostics go to stderr only; the sandbox has nowhere useful to keep log
files. Use `get_logger("autostart")` to get `zephyros_hello.autostart`.
"""

from __future__ import annotations

import logging
from typing import Dict

_LOGGERS: Dict[str, logging.Logger] = {}
_LEVEL = logging.INFO


def set_level(level: str) -> None:
    """Apply `level` (e.g. "DEBUG") to every logger handed out so far and later."""
    global _LEVEL
    _LEVEL = logging.getLevelName(level.upper()) if isinstance(level, str) else level
    if not isinstance(_LEVEL, int):
        _LEVEL = logging.INFO
    for logger in _LOGGERS.values():
        logger.setLevel(_LEVEL)


def get_logger(name: str) -> logging.Logger:
    if name in _LOGGERS:
        return _LOGGERS[name]

    logger = logging.getLogger(f"zephyros_hello.{name}")
    logger.setLevel(_LEVEL)

    if not logger.handlers:
        sh = logging.StreamHandler()
        sh.setFormatter(logging.Formatter(
            "[%(asctime)s] [%(name)s] %(levelname)s: %(message)s",
            "%Y-%m-%d %H:%M:%S",
        ))
        logger.addHandler(sh)

    _LOGGERS[name] = logger
    return logger
