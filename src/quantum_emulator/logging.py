"""Logging utilities for quantum-emulator.

Every module asks for its logger through :func:`get_logger` so that all
emulator output lives under the ``quantum_emulator`` namespace and shares
one handler configuration.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from .config import get_settings

_ROOT = "quantum_emulator"
_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

# None until set_log_level() is called; falls back to QEMU_LOG_LEVEL
_DEFAULT_LEVEL: Optional[int] = None

_loggers: dict[str, logging.Logger] = {}


def _coerce_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get or create a namespaced logger.

    Args:
        name: Logger name, typically ``__name__``. Names outside the
            package namespace are prefixed with ``quantum_emulator.``.

    Returns:
        Cached logger writing to stderr.

    Example:
        >>> from quantum_emulator.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("applied H to qubit 0")
    """
    if name is None:
        name = _ROOT
    logger_name = name if name.startswith(_ROOT) else f"{_ROOT}.{name}"

    if logger_name in _loggers:
        return _loggers[logger_name]

    logger = logging.getLogger(logger_name)
    if not logger.handlers:
        level = _DEFAULT_LEVEL
        if level is None:
            level = _coerce_level(get_settings().log_level)
        logger.setLevel(level)
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False

    _loggers[logger_name] = logger
    return logger


def set_log_level(level: int | str) -> None:
    """Set the level of every emulator logger, existing and future.

    Args:
        level: ``logging.DEBUG`` etc., or a level name such as ``"INFO"``.
    """
    global _DEFAULT_LEVEL
    level = _coerce_level(level)
    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)
    _DEFAULT_LEVEL = level
