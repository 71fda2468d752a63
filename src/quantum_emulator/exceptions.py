"""Exceptions raised by quantum-emulator."""

from __future__ import annotations


class QuantumEmulatorError(Exception):
    """Base class for all emulator errors."""


class DimensionMismatchError(QuantumEmulatorError, ValueError):
    """Raised when operand shapes do not line up (e.g. matrix x vector)."""

    def __init__(self, message: str, expected: int | None = None, actual: int | None = None):
        self.expected = expected
        self.actual = actual
        super().__init__(message)


class InvalidArgumentError(QuantumEmulatorError, ValueError):
    """Raised for out-of-range qubit indices, bad sizes or non-unitary gates."""
