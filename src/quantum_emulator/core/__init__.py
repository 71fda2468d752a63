"""Core quantum computing components."""
from .numbers import ComplexNumber
from .matrix import Matrix
from .state import QuantumState
from .register import QuantumRegister
from .circuit import QuantumCircuit, GateRecord, MeasurementResult
from . import gates

__all__ = [
    'ComplexNumber',
    'Matrix',
    'QuantumState',
    'QuantumRegister',
    'QuantumCircuit',
    'GateRecord',
    'MeasurementResult',
    'gates',
]
