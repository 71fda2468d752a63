"""
Gate library.

Every factory returns a fresh :class:`Matrix`, so callers may mutate the
result without affecting later calls. Single-qubit gates are 2x2; the
only two-qubit gate, CNOT, is 4x4 in the local |control target⟩ basis.
"""
import math
from typing import Callable, Dict

from ..exceptions import InvalidArgumentError
from .matrix import Matrix
from .numbers import ComplexNumber as C


# =============================================================================
# SINGLE-QUBIT GATES (2x2 matrices)
# =============================================================================

def I() -> Matrix:
    """Identity."""
    return Matrix.identity(2)


def X() -> Matrix:
    """Pauli-X (NOT)."""
    return Matrix([[C(0, 0), C(1, 0)],
                   [C(1, 0), C(0, 0)]])


def Y() -> Matrix:
    """Pauli-Y."""
    return Matrix([[C(0, 0), C(0, -1)],
                   [C(0, 1), C(0, 0)]])


def Z() -> Matrix:
    """Pauli-Z."""
    return Matrix([[C(1, 0), C(0, 0)],
                   [C(0, 0), C(-1, 0)]])


def H() -> Matrix:
    """Hadamard: |0⟩ -> |+⟩, |1⟩ -> |−⟩."""
    s = 1 / math.sqrt(2)
    return Matrix([[C(s, 0), C(s, 0)],
                   [C(s, 0), C(-s, 0)]])


def S() -> Matrix:
    """Phase gate diag(1, i)."""
    return Matrix([[C(1, 0), C(0, 0)],
                   [C(0, 0), C(0, 1)]])


def T() -> Matrix:
    """π/8 gate diag(1, e^{iπ/4})."""
    return Matrix([[C(1, 0), C(0, 0)],
                   [C(0, 0), C(math.cos(math.pi / 4), math.sin(math.pi / 4))]])


# =============================================================================
# TWO-QUBIT GATES (4x4 matrices)
# =============================================================================

def CNOT() -> Matrix:
    """Controlled-NOT in the local basis |00⟩, |01⟩, |10⟩, |11⟩ (control first)."""
    m = Matrix.identity(4)
    m.swap_rows(2, 3)
    return m


# =============================================================================
# LOOKUP
# =============================================================================

SINGLE_QUBIT_GATES: Dict[str, Callable[[], Matrix]] = {
    "I": I, "X": X, "Y": Y, "Z": Z, "H": H, "S": S, "T": T,
}

GATE_NAMES = tuple(SINGLE_QUBIT_GATES) + ("CNOT",)


def get_gate(name: str) -> Matrix:
    """Get a fresh gate matrix by (case-insensitive) name."""
    key = name.upper()
    if key == "CNOT":
        return CNOT()
    try:
        return SINGLE_QUBIT_GATES[key]()
    except KeyError:
        raise InvalidArgumentError(
            f"Unknown gate: '{name}'. Available: {list(GATE_NAMES)}"
        ) from None
