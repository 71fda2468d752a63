"""
quantum-emulator: a small dense state-vector quantum simulator.

Features:
- Complex numbers and dense matrices with Kronecker products
- Fixed gate library: X, Y, Z, H, S, T, I and CNOT
- Registers that collapse on measurement
- Circuits that log gates and replay them for measurement statistics

Quick Start:
    >>> from quantum_emulator import QuantumCircuit
    >>> qc = QuantumCircuit(2, seed=42)
    >>> qc.add_hadamard(0)
    >>> qc.add_cnot(0, 1)
    >>> counts = qc.run(1000)   # {'00': ~500, '11': ~500}
"""
__version__ = "1.0.0"

# Core components
from .core import (
    ComplexNumber,
    Matrix,
    QuantumState,
    QuantumRegister,
    QuantumCircuit,
    GateRecord,
    MeasurementResult,
    gates,
)
from .exceptions import QuantumEmulatorError, DimensionMismatchError, InvalidArgumentError
from .config import Settings, get_settings
from .logging import get_logger, set_log_level

# Make apps accessible
from . import apps

__all__ = [
    # Core
    'ComplexNumber',
    'Matrix',
    'QuantumState',
    'QuantumRegister',
    'QuantumCircuit',
    'GateRecord',
    'MeasurementResult',
    'gates',
    # Errors
    'QuantumEmulatorError',
    'DimensionMismatchError',
    'InvalidArgumentError',
    # Settings and logging
    'Settings',
    'get_settings',
    'get_logger',
    'set_log_level',
    # Submodules
    'apps',
]
