"""Tests for the gate library."""

import cmath

import numpy as np
import pytest

from quantum_emulator import InvalidArgumentError, gates


# ---------------------------------------------------------------------------
# Unitarity tests — every gate must satisfy U†U = I
# ---------------------------------------------------------------------------

FIXED_GATES = [
    ("I", gates.I), ("X", gates.X), ("Y", gates.Y), ("Z", gates.Z),
    ("H", gates.H), ("S", gates.S), ("T", gates.T), ("CNOT", gates.CNOT),
]


@pytest.mark.parametrize("name,factory", FIXED_GATES)
def test_fixed_gate_unitary(name, factory):
    assert factory().is_unitary(), f"{name} is not unitary"


@pytest.mark.parametrize("name,factory", FIXED_GATES)
def test_fixed_gate_shape(name, factory):
    expected = (4, 4) if name == "CNOT" else (2, 2)
    assert factory().dimensions == expected


@pytest.mark.parametrize("name,factory", FIXED_GATES)
def test_factories_return_fresh_instances(name, factory):
    first = factory()
    first[0, 0] = 42
    assert factory()[0, 0] != first[0, 0]


# ---------------------------------------------------------------------------
# Matrix entries
# ---------------------------------------------------------------------------

def test_pauli_entries():
    np.testing.assert_allclose(gates.X().to_numpy(), [[0, 1], [1, 0]])
    np.testing.assert_allclose(gates.Y().to_numpy(), [[0, -1j], [1j, 0]])
    np.testing.assert_allclose(gates.Z().to_numpy(), [[1, 0], [0, -1]])


def test_hadamard_entries():
    np.testing.assert_allclose(gates.H().to_numpy(), np.array([[1, 1], [1, -1]]) / np.sqrt(2))


def test_phase_gates():
    np.testing.assert_allclose(gates.S().to_numpy(), np.diag([1, 1j]))
    np.testing.assert_allclose(gates.T().to_numpy(), np.diag([1, cmath.exp(1j * cmath.pi / 4)]))


def test_t_squared_is_s():
    t = gates.T()
    assert t.multiply(t).allclose(gates.S())


def test_s_squared_is_z():
    s = gates.S()
    assert s.multiply(s).allclose(gates.Z())


def test_cnot_local_matrix():
    np.testing.assert_allclose(
        gates.CNOT().to_numpy(),
        [[1, 0, 0, 0], [0, 1, 0, 0], [0, 0, 0, 1], [0, 0, 1, 0]],
    )


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("name", ["h", "H", "cnot", "t"])
def test_get_gate_case_insensitive(name):
    assert gates.get_gate(name) == gates.get_gate(name.upper())


def test_get_gate_unknown():
    with pytest.raises(InvalidArgumentError):
        gates.get_gate("SWAP")


def test_gate_names():
    assert set(gates.GATE_NAMES) == {"I", "X", "Y", "Z", "H", "S", "T", "CNOT"}
