"""
Quantum register: a fixed number of qubits sharing one state vector.

Bit convention
--------------
Qubit ``q`` is bit ``q`` of the basis index, i.e. qubit 0 is the least
significant bit. The CNOT permutation, single-qubit gate expansion and
:meth:`QuantumRegister.measure_qubit` all follow it, so X on qubit 0 of a
two-qubit register moves |00⟩ to basis index 1 (bitstring "01").
"""
from __future__ import annotations

import numbers
from typing import Optional

import numpy as np

from ..config import get_settings
from ..exceptions import InvalidArgumentError
from ..logging import get_logger
from . import gates
from .matrix import Matrix
from .state import QuantumState

logger = get_logger(__name__)


class QuantumRegister:
    """
    Owns a single :class:`QuantumState` of size ``2 ** qubit_count``.

    Parameters
    ----------
    qubit_count : int
        Number of qubits, at least 1.
    seed : int, optional
        Seed for the measurement generator.
    rng : numpy.random.Generator, optional
        Generator to use instead of seeding a new one. It is kept across
        :meth:`reset`, so a seeded register is reproducible end to end.
    """

    def __init__(self, qubit_count: int, seed: Optional[int] = None,
                 rng: Optional[np.random.Generator] = None) -> None:
        if qubit_count < 1:
            raise InvalidArgumentError(f"Need at least 1 qubit, got {qubit_count}")
        self._qubit_count = qubit_count
        self._rng = rng if rng is not None else np.random.default_rng(seed)
        self._state = QuantumState(1 << qubit_count, rng=self._rng)

    @property
    def qubit_count(self) -> int:
        return self._qubit_count

    @property
    def size(self) -> int:
        return 1 << self._qubit_count

    def _check_qubit(self, qubit: int) -> None:
        if not isinstance(qubit, numbers.Integral) or isinstance(qubit, bool):
            raise InvalidArgumentError(
                f"Qubit index must be an integer, got {qubit!r}"
            )
        if qubit < 0 or qubit >= self._qubit_count:
            raise InvalidArgumentError(
                f"Qubit {qubit} is out of range. "
                f"Register has {self._qubit_count} qubits (0 to {self._qubit_count - 1})."
            )

    # =========================================================================
    # OPERATOR CONSTRUCTION
    # =========================================================================

    def expand_single_qubit_gate(self, gate: Matrix, qubit: int) -> Matrix:
        """
        Lift a 2x2 gate to the full 2^n x 2^n operator.

        Starting from an identity seed, the factors are tensored in from the
        most significant qubit down, giving G_{n-1} (x) ... (x) G_1 (x) G_0
        with ``gate`` at position ``qubit`` and I elsewhere.
        """
        self._check_qubit(qubit)
        if gate.dimensions != (2, 2):
            raise InvalidArgumentError(
                f"Single-qubit gate must be 2x2, got {gate.rows}x{gate.cols}"
            )

        result = Matrix.identity(1)
        for position in reversed(range(self._qubit_count)):
            factor = gate if position == qubit else gates.I()
            result = result.tensor_product(factor)
        return result

    def cnot_operator(self, control: int, target: int) -> Matrix:
        """
        Full 2^n x 2^n CNOT permutation.

        Every basis index with the control bit set is paired with the index
        whose target bit is flipped, and the two rows of the identity are
        swapped once per pair.
        """
        self._check_qubit(control)
        self._check_qubit(target)
        if control == target:
            raise InvalidArgumentError(
                f"Control and target must differ, both are {control}"
            )

        matrix = Matrix.identity(self.size)
        for i in range(self.size):
            if (i >> control) & 1:
                flipped = i ^ (1 << target)
                if flipped > i:
                    matrix.swap_rows(i, flipped)
        return matrix

    # =========================================================================
    # GATE APPLICATION
    # =========================================================================

    def apply_single_qubit_gate(self, gate: Matrix, qubit: int) -> None:
        """Apply a unitary 2x2 gate to one qubit of the live state."""
        tol = get_settings().unitary_tolerance
        if gate.dimensions == (2, 2) and not gate.is_unitary(tol):
            raise InvalidArgumentError(f"Gate is not unitary (tolerance {tol})")
        operator = self.expand_single_qubit_gate(gate, qubit)
        self._state.apply_gate(operator)
        logger.debug("applied single-qubit gate to qubit %d", qubit)

    def apply_cnot(self, control: int, target: int) -> None:
        self._state.apply_gate(self.cnot_operator(control, target))
        logger.debug("applied CNOT control=%d target=%d", control, target)

    # =========================================================================
    # MEASUREMENT
    # =========================================================================

    def measure_all(self) -> int:
        """Measure every qubit; returns the joint outcome as an integer."""
        return self._state.measure()

    def measure_qubit(self, qubit: int) -> int:
        """
        Measure one qubit.

        This collapses the *whole* register: the joint state is sampled and
        the requested bit is read out of the joint outcome. Unmeasured
        qubits do not keep their superposition.
        """
        self._check_qubit(qubit)
        outcome = self._state.measure()
        return (outcome >> qubit) & 1

    # =========================================================================
    # STATE
    # =========================================================================

    def get_state(self) -> QuantumState:
        """Deep copy of the live state."""
        return self._state.clone()

    def reset(self) -> None:
        """Replace the live state with a fresh |00...0⟩."""
        self._state = QuantumState(self.size, rng=self._rng)

    def __repr__(self) -> str:
        return f"QuantumRegister(qubits={self._qubit_count})"
