"""
Practical programs built on the emulator.

- QRNG: Quantum Random Number Generator
- coin flip, Bell/GHZ statistics, teleportation
- simplified Grover search and QFT statistics
"""
from .qrng import QRNG, random_bits, random_int
from .programs import (
    coin_flip,
    bell_state_counts,
    ghz_state_counts,
    grover_search_counts,
    qft_counts,
    teleport_one,
    TeleportationResult,
)

__all__ = [
    # QRNG
    'QRNG', 'random_bits', 'random_int',
    # Programs
    'coin_flip', 'bell_state_counts', 'ghz_state_counts',
    'grover_search_counts', 'qft_counts',
    'teleport_one', 'TeleportationResult',
]
