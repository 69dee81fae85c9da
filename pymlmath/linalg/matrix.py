"""
Matrix: immutable dense 2-D matrix of float64, stored row-major.

Data lives in a single flat array. For a matrix with ``rows`` rows and
``cols`` columns, element (r, c) is at offset ``r * cols + c``.
Construction copies and validates; every operation returns a new Matrix or
Vector and leaves its operands untouched.
"""

from __future__ import annotations

import numbers
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymlmath.core.compute.linalg import (
    matmul_kernel,
    matvec_kernel,
    transpose_kernel,
)
from pymlmath.core.compute.tolerances import CPU_FP64, ToleranceTier
from pymlmath.core.exceptions import ValidationError
from pymlmath.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_index,
    check_inner_dims,
    check_positive_dims,
    check_positive_size,
    check_same_shape,
    check_scalar,
)
from pymlmath.linalg.vector import Vector


def _check_matrix(value: Any, name: str) -> None:
    if not isinstance(value, Matrix):
        raise ValidationError(
            f"{name}: expected a Matrix, got {type(value).__name__}"
        )


class Matrix:
    """
    Immutable dense matrix of doubles in row-major order.

    Construction:
        Matrix(2, 3, [1, 2, 3, 4, 5, 6])
        Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
        Matrix.zeros(r, c), Matrix.ones(r, c), Matrix.identity(n)

    Operators delegate to the named methods: ``+`` add, ``-`` sub / negate,
    ``m * s`` and ``s * m`` scale, ``m @ x`` matvec for a Vector and
    matmul for a Matrix. ``*`` between two matrices is not defined; use
    ``@`` for the matrix product.
    """

    __slots__ = ('_rows', '_cols', '_data')

    __array_ufunc__ = None

    def __init__(self, rows: int, cols: int, data: ArrayLike):
        rows, cols = check_positive_dims(rows, cols)
        array = check_array(data, "data")
        check_1d(array, "data")
        if array.shape[0] != rows * cols:
            raise ValidationError(
                f"data: length must equal rows * cols = {rows * cols}, "
                f"got {array.shape[0]}"
            )
        array.setflags(write=False)
        self._rows = rows
        self._cols = cols
        self._data: NDArray[np.float64] = array

    @classmethod
    def _wrap(cls, rows: int, cols: int, array: NDArray[np.float64]) -> Matrix:
        """Adopt freshly computed flat storage without copying or re-validating."""
        matrix = cls.__new__(cls)
        array.setflags(write=False)
        matrix._rows = rows
        matrix._cols = cols
        matrix._data = array
        return matrix

    @classmethod
    def from_rows(cls, rows: ArrayLike) -> Matrix:
        """
        Build a Matrix from a 2-D array-like.

        Parameters
        ----------
        rows : array-like
            Nested sequences of equal length, or a 2-D numpy array.
        """
        array = check_array(rows, "rows")
        check_2d(array, "rows")
        n_rows, n_cols = check_positive_dims(*array.shape)
        return cls._wrap(n_rows, n_cols, array.reshape(-1))

    @classmethod
    def zeros(cls, rows: int, cols: int) -> Matrix:
        rows, cols = check_positive_dims(rows, cols)
        return cls._wrap(rows, cols, np.zeros(rows * cols, dtype=np.float64))

    @classmethod
    def ones(cls, rows: int, cols: int) -> Matrix:
        rows, cols = check_positive_dims(rows, cols)
        return cls._wrap(rows, cols, np.ones(rows * cols, dtype=np.float64))

    @classmethod
    def identity(cls, n: int) -> Matrix:
        """
        n x n identity matrix: ones on the main diagonal, zeros elsewhere.
        """
        n = check_positive_size(n, "n")
        data = np.zeros(n * n, dtype=np.float64)
        data[::n + 1] = 1.0  # offsets i*n + i
        return cls._wrap(n, n, data)

    # --- Accessors ---

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        return (self._rows, self._cols)

    def get(self, r: int, c: int) -> float:
        """Element at row r, column c. Negative indices count from the end."""
        r = check_index(r, self._rows, "row")
        c = check_index(c, self._cols, "col")
        return float(self._data[r * self._cols + c])

    def row(self, r: int) -> Vector:
        """Row r as a Vector of length cols."""
        r = check_index(r, self._rows, "row")
        start = r * self._cols
        return Vector._wrap(self._data[start:start + self._cols].copy())

    def col(self, c: int) -> Vector:
        """Column c as a Vector of length rows."""
        c = check_index(c, self._cols, "col")
        return Vector._wrap(self._data[c::self._cols].copy())

    def to_numpy(self) -> NDArray[np.float64]:
        """Writable (rows, cols) copy of the elements."""
        return self._data.reshape(self._rows, self._cols).copy()

    def tolist(self) -> list[list[float]]:
        return self._data.reshape(self._rows, self._cols).tolist()

    # --- Operations ---

    def add(self, other: Matrix) -> Matrix:
        """Elementwise sum. Shapes must be equal."""
        _check_matrix(other, "other")
        check_same_shape(self.shape, other.shape, "add")
        return Matrix._wrap(self._rows, self._cols, self._data + other._data)

    def sub(self, other: Matrix) -> Matrix:
        """Elementwise difference. Shapes must be equal."""
        _check_matrix(other, "other")
        check_same_shape(self.shape, other.shape, "sub")
        return Matrix._wrap(self._rows, self._cols, self._data - other._data)

    def negate(self) -> Matrix:
        return Matrix._wrap(self._rows, self._cols, -self._data)

    def scale(self, s: float) -> Matrix:
        """Multiply every element by the scalar s."""
        s = check_scalar(s, "s")
        return Matrix._wrap(self._rows, self._cols, self._data * s)

    def transpose(self) -> Matrix:
        """
        Transpose: the element at (i, j) of Aᵀ is the element at (j, i) of A.

        Returns a cols x rows matrix. transpose() is an involution.
        """
        return Matrix._wrap(
            self._cols, self._rows,
            transpose_kernel(self._data, self._rows, self._cols),
        )

    @property
    def T(self) -> Matrix:
        return self.transpose()

    def matvec(self, x: Vector) -> Vector:
        """
        Matrix-vector product y = A x.

        Requires cols == x.length. y[r] = Σ_c A[r, c] * x[c], summed in
        column order.
        """
        if not isinstance(x, Vector):
            raise ValidationError(
                f"x: expected a Vector, got {type(x).__name__}"
            )
        check_inner_dims(self.shape, x.shape, "matvec")
        return Vector._wrap(
            matvec_kernel(self._data, self._rows, self._cols, x._data)
        )

    def matmul(self, other: Matrix) -> Matrix:
        """
        Matrix product C = A B.

        Requires A.cols == B.rows. C has shape (A.rows, B.cols) and
        C[r, c] = Σ_k A[r, k] * B[k, c], each cell accumulated in k order.
        """
        _check_matrix(other, "other")
        check_inner_dims(self.shape, other.shape, "matmul")
        return Matrix._wrap(
            self._rows, other._cols,
            matmul_kernel(self._data, self._rows, self._cols, other._data, other._cols),
        )

    def allclose(self, other: Matrix, tolerance: ToleranceTier = CPU_FP64) -> bool:
        """Same shape and elementwise equal within the tolerance tier."""
        _check_matrix(other, "other")
        if self.shape != other.shape:
            return False
        return bool(np.allclose(
            self._data, other._data, rtol=tolerance.rtol, atol=tolerance.atol,
        ))

    # --- Operators ---

    def __add__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.sub(other)

    def __neg__(self) -> Matrix:
        return self.negate()

    def __pos__(self) -> Matrix:
        return self

    def __mul__(self, s: Any) -> Matrix:
        if isinstance(s, bool) or not isinstance(s, numbers.Real):
            return NotImplemented
        return self.scale(s)

    __rmul__ = __mul__

    def __truediv__(self, s: Any) -> Matrix:
        if isinstance(s, bool) or not isinstance(s, numbers.Real):
            return NotImplemented
        return self.scale(1.0 / s)

    def __matmul__(self, other: Any) -> Matrix | Vector:
        if isinstance(other, Vector):
            return self.matvec(other)
        if isinstance(other, Matrix):
            return self.matmul(other)
        return NotImplemented

    def __getitem__(self, key: tuple[int, int] | int) -> float | Vector:
        if isinstance(key, tuple):
            if len(key) != 2:
                raise ValidationError(
                    f"Matrix index must be (row, col), got {len(key)} indices"
                )
            return self.get(*key)
        return self.row(key)

    # --- Value semantics ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    def __hash__(self) -> int:
        return hash((self._rows, self._cols, tuple(self._data.tolist())))

    def __repr__(self) -> str:
        return f"Matrix.from_rows({self.tolist()!r})"
