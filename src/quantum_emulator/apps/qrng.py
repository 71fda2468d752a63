"""
Quantum Random Number Generator (QRNG)

Each qubit prepared in |+⟩ by a Hadamard gives one fair bit when measured.

Usage:
    from quantum_emulator.apps import QRNG

    qrng = QRNG(seed=3)
    bits = qrng.random_bits(16)
    n = qrng.random_int(0, 100)   # Random int in [0, 100)
    key = qrng.random_bytes(4)
"""
from typing import List, Optional

import numpy as np

from ..core import QuantumCircuit
from ..exceptions import InvalidArgumentError


class QRNG:
    """
    Quantum Random Number Generator.

    Attributes:
        num_qubits: Qubits per batch (default: 8). Every batch builds a
            fresh circuit, so this is bounded by the dense simulator.

    Example:
        >>> qrng = QRNG(seed=0)
        >>> len(qrng.random_bitstring(12))
        12
    """

    def __init__(self, num_qubits: int = 8, seed: Optional[int] = None):
        """
        Args:
            num_qubits: Qubits per batch.
            seed: Random seed (for testing only).
        """
        if num_qubits < 1:
            raise InvalidArgumentError(f"num_qubits must be positive, got {num_qubits}")
        self.num_qubits = num_qubits
        self._rng = np.random.default_rng(seed)
        self._buffer: List[int] = []

    def _generate_batch(self) -> List[int]:
        """Generate a batch of random bits using quantum circuit."""
        qc = QuantumCircuit(self.num_qubits, rng=self._rng)
        for i in range(self.num_qubits):
            qc.add_hadamard(i)

        # First measurement collapses the register; the rest read it out
        return [qc.measure(i) for i in reversed(range(self.num_qubits))]

    def _consume_bits(self, n: int) -> List[int]:
        """Consume n bits from buffer."""
        if n < 0:
            raise InvalidArgumentError(f"Cannot draw {n} bits")
        while len(self._buffer) < n:
            self._buffer.extend(self._generate_batch())
        bits = self._buffer[:n]
        self._buffer = self._buffer[n:]
        return bits

    def random_bit(self) -> int:
        return self._consume_bits(1)[0]

    def random_bits(self, n: int) -> List[int]:
        return self._consume_bits(n)

    def random_bitstring(self, n: int) -> str:
        return ''.join(str(b) for b in self.random_bits(n))

    def random_bytes(self, n: int) -> bytes:
        """Generate n random bytes."""
        bits = self.random_bits(n * 8)
        result = bytearray()
        for i in range(0, len(bits), 8):
            byte = 0
            for b in bits[i:i + 8]:
                byte = (byte << 1) | b
            result.append(byte)
        return bytes(result)

    def random_int(self, low: int, high: int) -> int:
        """
        Random integer in [low, high).

        Uses rejection sampling for uniform distribution.
        """
        if low >= high:
            raise InvalidArgumentError(f"low ({low}) must be less than high ({high})")

        range_size = high - low
        bits_needed = max((range_size - 1).bit_length(), 1)
        while True:
            value = 0
            for b in self.random_bits(bits_needed):
                value = (value << 1) | b
            if value < range_size:
                return low + value

    def random_float(self) -> float:
        """Random float in [0, 1) with 53-bit precision."""
        value = 0
        for b in self.random_bits(53):
            value = (value << 1) | b
        return value / (2**53)


def random_bits(n: int, seed: Optional[int] = None) -> List[int]:
    """Convenience function: generate n random bits."""
    return QRNG(seed=seed).random_bits(n)


def random_int(low: int, high: int, seed: Optional[int] = None) -> int:
    """Convenience function: random integer in [low, high)."""
    return QRNG(seed=seed).random_int(low, high)
