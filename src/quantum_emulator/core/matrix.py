"""
Dense complex matrices.

Entries are exposed as :class:`ComplexNumber` but stored as a complex128
numpy array, so the Kronecker product and matrix-vector product run through
numpy rather than nested Python loops.
"""
from __future__ import annotations

from typing import Iterator, List, Sequence, Tuple, Union

import numpy as np

from ..exceptions import DimensionMismatchError, InvalidArgumentError
from .numbers import ComplexNumber

Scalar = Union[ComplexNumber, complex, float, int]


def _as_complex(value: Scalar) -> complex:
    if isinstance(value, ComplexNumber):
        return value.to_complex()
    return complex(value)


def as_array(vector: Union[Sequence[Scalar], np.ndarray]) -> np.ndarray:
    """Convert a sequence of amplitudes into a 1-D complex128 array."""
    if isinstance(vector, np.ndarray):
        return vector.astype(np.complex128, copy=False).reshape(-1)
    return np.array([_as_complex(v) for v in vector], dtype=np.complex128)


class Matrix:
    """
    Rectangular matrix of complex numbers.

    Args:
        data: Row-major nested sequence of ComplexNumber/complex values,
            or a 2-D numpy array. Every row must have the same length.

    Example:
        >>> from quantum_emulator.core.numbers import ComplexNumber as C
        >>> m = Matrix([[C(0), C(1)], [C(1), C(0)]])
        >>> m.multiply_vector([C(1), C(0)])
        [ComplexNumber(real=0.0, imag=0.0), ComplexNumber(real=1.0, imag=0.0)]
    """

    __slots__ = ("_data",)

    def __init__(self, data: Union[Sequence[Sequence[Scalar]], np.ndarray]):
        if isinstance(data, np.ndarray):
            if data.ndim != 2:
                raise InvalidArgumentError(f"Matrix needs a 2-D array, got {data.ndim}-D")
            self._data = np.array(data, dtype=np.complex128)
            return

        rows = [list(row) for row in data]
        if not rows or not rows[0]:
            raise InvalidArgumentError("Matrix must have at least one row and one column")
        width = len(rows[0])
        for r, row in enumerate(rows):
            if len(row) != width:
                raise InvalidArgumentError(
                    f"Row {r} has {len(row)} entries, expected {width}"
                )
        self._data = np.array(
            [[_as_complex(v) for v in row] for row in rows], dtype=np.complex128
        )

    # =========================================================================
    # CONSTRUCTORS
    # =========================================================================

    @classmethod
    def identity(cls, size: int) -> Matrix:
        """size x size identity."""
        if size < 1:
            raise InvalidArgumentError(f"Identity size must be positive, got {size}")
        return cls(np.eye(size, dtype=np.complex128))

    @classmethod
    def zeros(cls, rows: int, cols: int) -> Matrix:
        if rows < 1 or cols < 1:
            raise InvalidArgumentError(f"Invalid matrix shape ({rows}, {cols})")
        return cls(np.zeros((rows, cols), dtype=np.complex128))

    @classmethod
    def from_numpy(cls, array: np.ndarray) -> Matrix:
        return cls(array)

    # =========================================================================
    # SHAPE AND ACCESS
    # =========================================================================

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        return self._data.shape[1]

    @property
    def dimensions(self) -> Tuple[int, int]:
        """(rows, cols)."""
        return self.rows, self.cols

    @property
    def data(self) -> List[List[ComplexNumber]]:
        """Entries as a fresh nested list of ComplexNumber."""
        return [[ComplexNumber.from_complex(v) for v in row] for row in self._data]

    def __getitem__(self, index: Tuple[int, int]) -> ComplexNumber:
        i, j = index
        return ComplexNumber.from_complex(self._data[i, j])

    def __setitem__(self, index: Tuple[int, int], value: Scalar) -> None:
        i, j = index
        self._data[i, j] = _as_complex(value)

    def __iter__(self) -> Iterator[List[ComplexNumber]]:
        return iter(self.data)

    def to_numpy(self) -> np.ndarray:
        """Copy of the underlying complex128 array."""
        return self._data.copy()

    # =========================================================================
    # ALGEBRA
    # =========================================================================

    def multiply_vector(self, vector: Sequence[Scalar]) -> List[ComplexNumber]:
        """
        Matrix-vector product.

        Raises:
            DimensionMismatchError: if len(vector) != cols.
        """
        vec = as_array(vector)
        if vec.shape[0] != self.cols:
            raise DimensionMismatchError(
                f"Matrix has {self.cols} columns but vector has length {vec.shape[0]}",
                expected=self.cols,
                actual=vec.shape[0],
            )
        return [ComplexNumber.from_complex(v) for v in self._data @ vec]

    def multiply(self, other: Matrix) -> Matrix:
        """Matrix product self @ other."""
        if self.cols != other.rows:
            raise DimensionMismatchError(
                f"Cannot multiply {self.rows}x{self.cols} by {other.rows}x{other.cols}",
                expected=self.cols,
                actual=other.rows,
            )
        return Matrix(self._data @ other._data)

    def tensor_product(self, other: Matrix) -> Matrix:
        """
        Kronecker product self (x) other.

        Entry (i*other.rows + k, j*other.cols + l) = self[i, j] * other[k, l],
        so ``self`` selects the high-order block and ``other`` the position
        inside it.
        """
        return Matrix(np.kron(self._data, other._data))

    def conjugate_transpose(self) -> Matrix:
        return Matrix(self._data.conj().T)

    def swap_rows(self, i: int, j: int) -> None:
        """Swap rows i and j in place."""
        self._data[[i, j]] = self._data[[j, i]]

    def is_unitary(self, tol: float = 1e-10) -> bool:
        """Check U†U = I within ``tol``."""
        if self.rows != self.cols:
            return False
        product = self._data.conj().T @ self._data
        return bool(np.allclose(product, np.eye(self.rows), atol=tol))

    def allclose(self, other: Matrix, tol: float = 1e-12) -> bool:
        if self.dimensions != other.dimensions:
            return False
        return bool(np.allclose(self._data, other._data, atol=tol))

    def clone(self) -> Matrix:
        """Deep copy."""
        return Matrix(self._data.copy())

    # =========================================================================
    # UTILITY
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.dimensions == other.dimensions and bool(
            np.array_equal(self._data, other._data)
        )

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"Matrix({self.rows}x{self.cols})"

    def __str__(self) -> str:
        return "\n".join(
            "[" + ", ".join(str(ComplexNumber.from_complex(v)) for v in row) + "]"
            for row in self._data
        )
