"""Tests for the demo programs and the QRNG."""

import pytest

from quantum_emulator import InvalidArgumentError
from quantum_emulator.apps import (
    QRNG,
    bell_state_counts,
    coin_flip,
    ghz_state_counts,
    grover_search_counts,
    qft_counts,
    random_bits,
    random_int,
    teleport_one,
)


# ---------------------------------------------------------------------------
# Programs
# ---------------------------------------------------------------------------

def test_coin_flip_returns_bit():
    assert {coin_flip(seed=s) for s in range(40)} == {0, 1}


def test_bell_state_counts():
    counts = bell_state_counts(trials=500, seed=2)
    assert set(counts) == {"00", "11"}
    assert sum(counts.values()) == 500


def test_ghz_counts():
    counts = ghz_state_counts(qubits=4, trials=100, seed=2)
    assert set(counts) <= {"0000", "1111"}
    assert sum(counts.values()) == 100


ALL_TWO_QUBIT = {"00", "01", "10", "11"}


@pytest.mark.parametrize("program", [grover_search_counts, qft_counts])
def test_uniform_two_qubit_programs(program):
    """Both circuits end in the uniform superposition over two qubits."""
    counts = program(trials=1000, seed=12)
    assert set(counts) == ALL_TWO_QUBIT
    assert sum(counts.values()) == 1000
    for count in counts.values():
        assert 150 <= count <= 350


@pytest.mark.parametrize("program", [grover_search_counts, qft_counts])
def test_uniform_programs_reproducible(program):
    assert program(trials=200, seed=4) == program(trials=200, seed=4)


@pytest.mark.parametrize("seed", range(10))
def test_teleportation_delivers_one(seed):
    result = teleport_one(seed=seed)
    assert result.bob_bit == 1
    assert all(bit in (0, 1) for bit in result.alice_bits)


# ---------------------------------------------------------------------------
# QRNG
# ---------------------------------------------------------------------------

def test_random_bits_length_and_values():
    bits = QRNG(num_qubits=4, seed=1).random_bits(37)
    assert len(bits) == 37
    assert set(bits) <= {0, 1}


def test_seeded_qrng_reproducible():
    assert QRNG(seed=5).random_bitstring(64) == QRNG(seed=5).random_bitstring(64)


def test_random_bits_not_constant():
    bits = QRNG(seed=8).random_bits(200)
    assert 50 < sum(bits) < 150


def test_random_bytes():
    data = QRNG(seed=3).random_bytes(6)
    assert isinstance(data, bytes)
    assert len(data) == 6


@pytest.mark.parametrize("low,high", [(0, 1), (0, 10), (5, 6), (-3, 3)])
def test_random_int_in_range(low, high):
    qrng = QRNG(seed=4)
    for _ in range(20):
        assert low <= qrng.random_int(low, high) < high


def test_random_int_bad_range():
    with pytest.raises(InvalidArgumentError):
        QRNG().random_int(5, 5)


def test_random_float_range():
    value = QRNG(seed=6).random_float()
    assert 0.0 <= value < 1.0


def test_convenience_functions():
    assert len(random_bits(5, seed=0)) == 5
    assert 0 <= random_int(0, 4, seed=0) < 4


def test_invalid_batch_size():
    with pytest.raises(InvalidArgumentError):
        QRNG(num_qubits=0)
