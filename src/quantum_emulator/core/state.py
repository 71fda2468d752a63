"""
Quantum state as a dense vector of 2^n complex amplitudes.

Memory grows as 2^n amplitudes, and every gate is a full 2^n x 2^n
operator, so this is meant for a handful of qubits.
"""
from __future__ import annotations

import copy
from typing import List, Optional, Tuple

import numpy as np

from ..exceptions import InvalidArgumentError
from ..logging import get_logger
from .matrix import Matrix
from .numbers import ONE, ZERO, ComplexNumber

logger = get_logger(__name__)


class QuantumState:
    """
    Ordered vector of complex amplitudes, initialised to |00...0⟩.

    Args:
        size: Number of amplitudes; must be a power of two.
        rng: Random generator used by :meth:`measure`. Shared, not copied.
        seed: Seed for a new generator when ``rng`` is not given.

    Example:
        >>> state = QuantumState(4, seed=7)
        >>> state.get_probability(0)
        1.0
    """

    def __init__(self, size: int, rng: Optional[np.random.Generator] = None,
                 seed: Optional[int] = None):
        if size < 1 or size & (size - 1):
            raise InvalidArgumentError(f"State size must be a power of two, got {size}")
        self._rng = rng if rng is not None else np.random.default_rng(seed)
        self._amplitudes: List[ComplexNumber] = [ZERO] * size
        self._amplitudes[0] = ONE

    @property
    def rng(self) -> np.random.Generator:
        return self._rng

    @property
    def size(self) -> int:
        return len(self._amplitudes)

    @property
    def qubit_count(self) -> int:
        """log2 of the vector length."""
        return self.size.bit_length() - 1

    def get_qubit_count(self) -> int:
        return self.qubit_count

    @property
    def amplitudes(self) -> Tuple[ComplexNumber, ...]:
        return tuple(self._amplitudes)

    def __len__(self) -> int:
        return self.size

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= self.size:
            raise InvalidArgumentError(
                f"Basis index {index} is out of range for a state of size {self.size}"
            )

    def get_amplitude(self, index: int) -> ComplexNumber:
        self._check_index(index)
        return self._amplitudes[index]

    def get_probability(self, index: int) -> float:
        """Probability of observing basis state ``index``."""
        self._check_index(index)
        return self._amplitudes[index].magnitude_squared()

    def probabilities(self) -> List[float]:
        return [a.magnitude_squared() for a in self._amplitudes]

    def total_probability(self) -> float:
        """Sum of squared magnitudes; ~1 for any state reached by unitaries."""
        return sum(self.probabilities())

    def apply_gate(self, matrix: Matrix) -> None:
        """
        Replace the amplitudes with ``matrix @ amplitudes``.

        No unitarity check is done here; callers supply valid operators.
        Raises DimensionMismatchError if the operator does not fit.
        """
        self._amplitudes = matrix.multiply_vector(self._amplitudes)

    def measure(self) -> int:
        """
        Sample a basis index and collapse onto it.

        One uniform draw r in [0, 1) is compared against the running
        cumulative probability in index order; the first index whose
        cumulative probability reaches r is the outcome. If rounding leaves
        the total short of r, the outcome is 0. A draw of exactly r == 0.0
        (probability 2**-53) also selects index 0, even when its amplitude
        is zero.

        Returns:
            Joint classical value of all qubits as an integer.
        """
        r = self._rng.random()
        cumulative = 0.0
        outcome = 0
        for i, amplitude in enumerate(self._amplitudes):
            cumulative += amplitude.magnitude_squared()
            if cumulative >= r:
                outcome = i
                break
        else:
            logger.debug("cumulative probability %.17g < r=%.17g, defaulting to 0",
                         cumulative, r)

        self._amplitudes = [ZERO] * self.size
        self._amplitudes[outcome] = ONE
        logger.debug("measured basis state %d of %d", outcome, self.size)
        return outcome

    def clone(self) -> QuantumState:
        """Deep copy of the amplitudes and of the generator state.

        Measuring the copy never advances the original's random stream.
        """
        snapshot = QuantumState(self.size, rng=copy.deepcopy(self._rng))
        snapshot._amplitudes = [a.clone() for a in self._amplitudes]
        return snapshot

    def to_numpy(self) -> np.ndarray:
        """Amplitudes as a complex128 array."""
        return np.array([a.to_complex() for a in self._amplitudes], dtype=np.complex128)

    def __repr__(self) -> str:
        return f"QuantumState(qubits={self.qubit_count}, size={self.size})"
