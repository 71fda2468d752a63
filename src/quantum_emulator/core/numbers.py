"""
Complex number value type used for amplitudes and matrix entries.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class ComplexNumber:
    """
    Immutable complex number.

    Every operation returns a new instance; nothing mutates in place.

    Example:
        >>> a = ComplexNumber(1, 2)
        >>> a.multiply(a.conjugate())
        ComplexNumber(real=5.0, imag=0.0)
    """
    real: float = 0.0
    imag: float = 0.0

    def __post_init__(self) -> None:
        # Normalize ints and numpy scalars to plain floats
        object.__setattr__(self, "real", float(self.real))
        object.__setattr__(self, "imag", float(self.imag))

    @classmethod
    def from_complex(cls, value: Union[complex, float, int]) -> ComplexNumber:
        value = complex(value)
        return cls(value.real, value.imag)

    def to_complex(self) -> complex:
        return complex(self.real, self.imag)

    def add(self, other: ComplexNumber) -> ComplexNumber:
        return ComplexNumber(self.real + other.real, self.imag + other.imag)

    def multiply(self, other: ComplexNumber) -> ComplexNumber:
        return ComplexNumber(
            self.real * other.real - self.imag * other.imag,
            self.real * other.imag + self.imag * other.real,
        )

    def conjugate(self) -> ComplexNumber:
        return ComplexNumber(self.real, -self.imag)

    def magnitude_squared(self) -> float:
        """|z|^2, the measurement probability of an amplitude."""
        return self.real * self.real + self.imag * self.imag

    def magnitude(self) -> float:
        return math.sqrt(self.magnitude_squared())

    def clone(self) -> ComplexNumber:
        return ComplexNumber(self.real, self.imag)

    def is_close(self, other: ComplexNumber, tol: float = 1e-12) -> bool:
        """Component-wise comparison within an absolute tolerance."""
        return abs(self.real - other.real) <= tol and abs(self.imag - other.imag) <= tol

    # Operator sugar
    def __add__(self, other: ComplexNumber) -> ComplexNumber:
        if not isinstance(other, ComplexNumber):
            return NotImplemented
        return self.add(other)

    def __mul__(self, other: ComplexNumber) -> ComplexNumber:
        if not isinstance(other, ComplexNumber):
            return NotImplemented
        return self.multiply(other)

    def __abs__(self) -> float:
        return self.magnitude()

    def __complex__(self) -> complex:
        return self.to_complex()

    def __str__(self) -> str:
        if self.imag == 0:
            return f"{self.real:g}"
        if self.real == 0:
            return f"{self.imag:g}i"
        if self.imag > 0:
            return f"{self.real:g} + {self.imag:g}i"
        return f"{self.real:g} - {abs(self.imag):g}i"


ZERO = ComplexNumber(0.0, 0.0)
ONE = ComplexNumber(1.0, 0.0)
