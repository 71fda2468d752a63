"""Tests for dense complex matrices."""

import numpy as np
import pytest

from quantum_emulator import ComplexNumber as C
from quantum_emulator import DimensionMismatchError, InvalidArgumentError, Matrix


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

def test_identity():
    m = Matrix.identity(3)
    assert m.dimensions == (3, 3)
    for i in range(3):
        for j in range(3):
            assert m[i, j] == (C(1, 0) if i == j else C(0, 0))


def test_ragged_rows_rejected():
    with pytest.raises(InvalidArgumentError):
        Matrix([[C(1), C(0)], [C(0)]])


def test_empty_rejected():
    with pytest.raises(InvalidArgumentError):
        Matrix([])


def test_mixed_entry_types():
    m = Matrix([[C(1, 0), 2j], [0.5, 3]])
    np.testing.assert_allclose(m.to_numpy(), [[1, 2j], [0.5, 3]])


def test_data_is_nested_complex_numbers():
    data = Matrix([[1, 2], [3, 4]]).data
    assert data[1][0] == C(3, 0)
    assert all(isinstance(v, C) for row in data for v in row)


# ---------------------------------------------------------------------------
# Matrix-vector product
# ---------------------------------------------------------------------------

def test_multiply_vector():
    m = Matrix([[C(0), C(1)], [C(1), C(0)]])
    assert m.multiply_vector([C(0.6), C(0, 0.8)]) == [C(0, 0.8), C(0.6)]


def test_multiply_vector_rectangular():
    m = Matrix([[1, 1, 1]])
    assert m.multiply_vector([C(1), C(2), C(0, 3)]) == [C(3, 3)]


@pytest.mark.parametrize("length", [1, 3, 4])
def test_multiply_vector_dimension_mismatch(length):
    with pytest.raises(DimensionMismatchError) as info:
        Matrix.identity(2).multiply_vector([C(1)] * length)
    assert info.value.expected == 2
    assert info.value.actual == length


def test_dimension_mismatch_is_value_error():
    with pytest.raises(ValueError):
        Matrix.identity(4).multiply_vector([C(1), C(0)])


def test_matrix_product():
    x = Matrix([[0, 1], [1, 0]])
    assert x.multiply(x) == Matrix.identity(2)
    with pytest.raises(DimensionMismatchError):
        x.multiply(Matrix.identity(3))


# ---------------------------------------------------------------------------
# Tensor product
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("a,b", [(1, 1), (1, 2), (2, 2), (2, 4), (3, 2)])
def test_tensor_of_identities_is_identity(a, b):
    assert Matrix.identity(a).tensor_product(Matrix.identity(b)) == Matrix.identity(a * b)


def test_tensor_product_layout():
    a = Matrix([[1, 2], [3, 4]])
    b = Matrix([[0, 5j], [6, 7]])
    t = a.tensor_product(b)
    assert t.dimensions == (4, 4)
    for i in range(2):
        for j in range(2):
            for k in range(2):
                for l in range(2):
                    assert t[i * 2 + k, j * 2 + l] == a[i, j] * b[k, l]


def test_tensor_product_rectangular_shape():
    t = Matrix([[1, 2, 3]]).tensor_product(Matrix([[1], [1]]))
    assert t.dimensions == (2, 3)


# ---------------------------------------------------------------------------
# Misc
# ---------------------------------------------------------------------------

def test_clone_is_deep():
    m = Matrix.identity(2)
    copy = m.clone()
    copy[0, 1] = C(9, 9)
    assert m[0, 1] == C(0, 0)
    assert copy != m


def test_swap_rows():
    m = Matrix.identity(3)
    m.swap_rows(0, 2)
    np.testing.assert_array_equal(m.to_numpy(), np.eye(3)[[2, 1, 0]])


def test_is_unitary():
    assert Matrix.identity(4).is_unitary()
    assert not Matrix([[1, 1], [0, 1]]).is_unitary()
    assert not Matrix([[1, 0, 0]]).is_unitary()


def test_conjugate_transpose():
    m = Matrix([[1, 2j], [3, 4]])
    np.testing.assert_allclose(m.conjugate_transpose().to_numpy(), [[1, 3], [-2j, 4]])
