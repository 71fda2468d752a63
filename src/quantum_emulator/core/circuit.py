"""
Quantum Circuit - the main user-facing API.

Gates are applied to the live register as they are added *and* recorded in
a gate log, so the circuit can be replayed from |00...0⟩ to collect
measurement statistics:

    >>> qc = QuantumCircuit(2, seed=1)
    >>> qc.add_hadamard(0)
    >>> qc.add_cnot(0, 1)
    >>> sorted(qc.run(1000))
    ['00', '11']
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import numpy as np

from ..config import get_settings
from ..exceptions import InvalidArgumentError
from ..logging import get_logger
from . import gates
from .matrix import Matrix
from .register import QuantumRegister
from .state import QuantumState

logger = get_logger(__name__)


@dataclass(frozen=True)
class GateRecord:
    """
    One logged gate.

    For CNOT, ``gate`` is the fixed 4x4 local matrix and is kept for
    inspection only; replay rebuilds the full-register operator from
    ``qubits``.
    """
    name: str
    gate: Matrix
    qubits: Tuple[int, ...]

    @property
    def n_qubits(self) -> int:
        return len(self.qubits)


@dataclass
class MeasurementResult:
    """Histogram of bitstrings collected by :meth:`QuantumCircuit.run_result`."""
    counts: Dict[str, int]
    trials: int

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    def most_frequent(self) -> str:
        """Return the most frequently measured bitstring."""
        if not self.counts:
            raise InvalidArgumentError("No measurements were recorded")
        return max(self.counts, key=self.counts.get)

    def probability(self, bitstring: str) -> float:
        """Observed frequency of ``bitstring``."""
        if self.trials == 0:
            return 0.0
        return self.counts.get(bitstring, 0) / self.trials


class QuantumCircuit:
    """
    Circuit over a :class:`QuantumRegister` with a replayable gate log.

    Args:
        qubit_count: Number of qubits (>= 1).
        seed: Seed for the measurement generator.
        rng: Explicit generator; overrides ``seed``.
    """

    def __init__(self, qubit_count: int, seed: Optional[int] = None,
                 rng: Optional[np.random.Generator] = None):
        self._register = QuantumRegister(qubit_count, seed=seed, rng=rng)
        self._gate_log: list[GateRecord] = []

    @property
    def qubit_count(self) -> int:
        return self._register.qubit_count

    @property
    def gate_log(self) -> Tuple[GateRecord, ...]:
        return tuple(self._gate_log)

    # =========================================================================
    # SINGLE-QUBIT GATES
    # =========================================================================

    def add_gate(self, name: str, qubit: int) -> None:
        """Apply a library single-qubit gate by name and log it."""
        gate = gates.get_gate(name)
        if gate.dimensions != (2, 2):
            raise InvalidArgumentError(f"'{name}' is not a single-qubit gate")
        self._register.apply_single_qubit_gate(gate, qubit)
        self._gate_log.append(GateRecord(name.upper(), gate.clone(), (qubit,)))

    def add_hadamard(self, qubit: int) -> None:
        self.add_gate("H", qubit)

    def add_x(self, qubit: int) -> None:
        self.add_gate("X", qubit)

    def add_y(self, qubit: int) -> None:
        self.add_gate("Y", qubit)

    def add_z(self, qubit: int) -> None:
        self.add_gate("Z", qubit)

    def add_s(self, qubit: int) -> None:
        self.add_gate("S", qubit)

    def add_t(self, qubit: int) -> None:
        self.add_gate("T", qubit)

    def add_identity(self, qubit: int) -> None:
        self.add_gate("I", qubit)

    # =========================================================================
    # TWO-QUBIT GATES
    # =========================================================================

    def add_cnot(self, control: int, target: int) -> None:
        """Apply CNOT live and log it with the local 4x4 matrix."""
        self._register.apply_cnot(control, target)
        self._gate_log.append(GateRecord("CNOT", gates.CNOT(), (control, target)))

    # =========================================================================
    # MEASUREMENT
    # =========================================================================

    def measure(self, qubit: int) -> int:
        """Measure one qubit (collapses the whole register)."""
        return self._register.measure_qubit(qubit)

    # =========================================================================
    # EXECUTION
    # =========================================================================

    def _replay(self) -> None:
        for record in self._gate_log:
            if record.n_qubits == 1:
                self._register.apply_single_qubit_gate(record.gate, record.qubits[0])
            elif record.n_qubits == 2:
                self._register.apply_cnot(*record.qubits)
            else:
                raise InvalidArgumentError(
                    f"Cannot replay {record.name} on {record.n_qubits} qubits"
                )

    def run(self, trials: Optional[int] = None) -> Dict[str, int]:
        """
        Collect measurement statistics.

        Each trial resets the register (the gate log is kept), replays the
        log in order and measures qubits n-1 down to 0, so the leftmost
        character of each key is qubit n-1.

        Args:
            trials: Number of repetitions. Defaults to the configured
                ``default_trials``.

        Returns:
            Mapping bitstring -> count; the counts sum to ``trials``.
        """
        if trials is None:
            trials = get_settings().default_trials
        if trials < 0:
            raise InvalidArgumentError(f"trials must be non-negative, got {trials}")

        counts: Dict[str, int] = {}
        for _ in range(trials):
            self._register.reset()
            self._replay()
            bits = "".join(
                str(self._register.measure_qubit(q))
                for q in reversed(range(self.qubit_count))
            )
            counts[bits] = counts.get(bits, 0) + 1

        logger.info("ran %d trials of %d gates: %d distinct outcomes",
                    trials, len(self._gate_log), len(counts))
        return counts

    def run_result(self, trials: Optional[int] = None) -> MeasurementResult:
        """Like :meth:`run`, wrapped in a :class:`MeasurementResult`."""
        if trials is None:
            trials = get_settings().default_trials
        return MeasurementResult(counts=self.run(trials), trials=trials)

    # =========================================================================
    # STATE
    # =========================================================================

    def get_state(self) -> QuantumState:
        return self._register.get_state()

    def reset(self) -> None:
        """Reset the register to |00...0⟩ and clear the gate log."""
        self._register.reset()
        self._gate_log.clear()

    def __len__(self) -> int:
        return len(self._gate_log)

    def __repr__(self) -> str:
        return f"QuantumCircuit(qubits={self.qubit_count}, gates={len(self._gate_log)})"
