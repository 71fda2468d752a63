"""
Runtime settings.

Defaults can be overridden through environment variables:

    QEMU_DEFAULT_TRIALS      trials used by QuantumCircuit.run() (1000)
    QEMU_UNITARY_TOLERANCE   atol for unitarity checks (1e-10)
    QEMU_LOG_LEVEL           level for emulator loggers (WARNING)
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Mapping, Optional

from .exceptions import InvalidArgumentError


@dataclass(frozen=True)
class Settings:
    """Process-wide emulator settings."""
    default_trials: int = 1000
    unitary_tolerance: float = 1e-10
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.default_trials < 0:
            raise InvalidArgumentError(
                f"default_trials must be non-negative, got {self.default_trials}"
            )
        if self.unitary_tolerance <= 0:
            raise InvalidArgumentError(
                f"unitary_tolerance must be positive, got {self.unitary_tolerance}"
            )
        object.__setattr__(self, "log_level", self.log_level.upper())
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise InvalidArgumentError(f"Unknown log level: {self.log_level!r}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from ``QEMU_*`` environment variables."""
        env = os.environ if environ is None else environ
        defaults = cls()
        try:
            trials = int(env.get("QEMU_DEFAULT_TRIALS", defaults.default_trials))
            tol = float(env.get("QEMU_UNITARY_TOLERANCE", defaults.unitary_tolerance))
        except ValueError as exc:
            raise InvalidArgumentError(f"Invalid emulator setting: {exc}") from exc
        return cls(
            default_trials=trials,
            unitary_tolerance=tol,
            log_level=env.get("QEMU_LOG_LEVEL", defaults.log_level).upper(),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the cached settings loaded from the environment."""
    return Settings.from_env()
