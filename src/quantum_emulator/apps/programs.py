"""
Small textbook programs built on :class:`QuantumCircuit`.

They return plain values; printing belongs to the caller (see examples/).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from ..core import QuantumCircuit


def coin_flip(seed: Optional[int] = None) -> int:
    """Hadamard on one qubit, then measure: a fair 0/1."""
    qc = QuantumCircuit(1, seed=seed)
    qc.add_hadamard(0)
    return qc.measure(0)


def bell_state_counts(trials: int = 1000, seed: Optional[int] = None) -> Dict[str, int]:
    """Histogram of (|00⟩ + |11⟩)/√2 over ``trials`` runs."""
    qc = QuantumCircuit(2, seed=seed)
    qc.add_hadamard(0)
    qc.add_cnot(0, 1)
    return qc.run(trials)


def ghz_state_counts(qubits: int = 3, trials: int = 1000,
                     seed: Optional[int] = None) -> Dict[str, int]:
    """Histogram of (|0...0⟩ + |1...1⟩)/√2."""
    qc = QuantumCircuit(qubits, seed=seed)
    qc.add_hadamard(0)
    for target in range(1, qubits):
        qc.add_cnot(0, target)
    return qc.run(trials)


@dataclass(frozen=True)
class TeleportationResult:
    """Alice's two classical bits and Bob's measured qubit."""
    alice_bits: tuple[int, int]
    bob_bit: int


def teleport_one(seed: Optional[int] = None) -> TeleportationResult:
    """
    Teleport |1⟩ from qubit 0 to qubit 2.

    Qubits 1 and 2 share a Bell pair. Because measurement collapses the
    whole register, Alice's outcomes also fix Bob's qubit; the X/Z
    corrections then leave it in |1⟩.
    """
    qc = QuantumCircuit(3, seed=seed)
    qc.add_hadamard(1)
    qc.add_cnot(1, 2)
    qc.add_x(0)
    qc.add_cnot(0, 1)
    qc.add_hadamard(0)

    m0 = qc.measure(0)
    m1 = qc.measure(1)
    if m1 == 1:
        qc.add_x(2)
    if m0 == 1:
        qc.add_z(2)
    return TeleportationResult(alice_bits=(m0, m1), bob_bit=qc.measure(2))


def grover_search_counts(trials: int = 1000, seed: Optional[int] = None) -> Dict[str, int]:
    """
    Simplified two-qubit Grover search for |11⟩.

    The oracle and diffusion are built from CNOT and X only, with no
    controlled phase, so the oracle reduces to the identity and the final
    state is the uniform superposition: all four bitstrings appear.
    """
    qc = QuantumCircuit(2, seed=seed)
    qc.add_hadamard(0)
    qc.add_hadamard(1)

    # Oracle
    qc.add_cnot(0, 1)
    qc.add_x(1)
    qc.add_cnot(0, 1)
    qc.add_x(1)

    # Diffusion
    qc.add_hadamard(0)
    qc.add_hadamard(1)
    qc.add_x(0)
    qc.add_x(1)
    qc.add_cnot(0, 1)
    qc.add_x(1)
    qc.add_cnot(0, 1)
    qc.add_x(0)
    qc.add_hadamard(0)
    qc.add_hadamard(1)
    return qc.run(trials)


def qft_counts(trials: int = 1000, seed: Optional[int] = None) -> Dict[str, int]:
    """
    Two-qubit Fourier-transform sketch on |10⟩.

    A CNOT stands in for the controlled phase rotation. Qubit 0 ends in
    |+⟩ and qubit 1 in |−⟩, so every bitstring is equally likely.
    """
    qc = QuantumCircuit(2, seed=seed)
    qc.add_x(1)
    qc.add_hadamard(0)
    qc.add_cnot(1, 0)
    qc.add_hadamard(1)
    return qc.run(trials)
