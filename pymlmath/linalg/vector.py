"""
Vector: immutable dense 1-D vector of float64.

Construction copies the input into a private read-only array, so no
caller-held buffer can change a Vector afterwards. Every operation returns
a new Vector (or a float) and leaves its operands untouched.
"""

from __future__ import annotations

import math
import numbers
from typing import Any, Iterator

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymlmath.core.compute.linalg import dot_kernel, sequential_sum
from pymlmath.core.exceptions import ValidationError
from pymlmath.core.compute.precision import DEFAULT_EPS, is_negligible
from pymlmath.core.compute.tolerances import CPU_FP64, ToleranceTier
from pymlmath.core.validation import (
    check_1d,
    check_array,
    check_index,
    check_non_negative_length,
    check_same_shape,
    check_scalar,
)


def _check_vector(value: Any, name: str) -> None:
    if not isinstance(value, Vector):
        raise ValidationError(
            f"{name}: expected a Vector, got {type(value).__name__}"
        )


class Vector:
    """
    Immutable fixed-length vector of doubles.

    Construction:
        Vector([1.0, 2.0, 3.0])
        Vector.zeros(n)
        Vector.ones(n)

    Operators delegate to the named methods: ``a + b`` is ``a.add(b)``,
    ``a - b`` is ``a.sub(b)``, ``-a`` is ``a.negate()``, ``a * s`` and
    ``s * a`` are ``a.scale(s)``, ``a @ b`` is ``a.dot(b)``.
    """

    __slots__ = ('_data',)

    # Keep numpy scalars from broadcasting over a Vector; 2.0 * v and
    # np.float64(2.0) * v both end up in __rmul__.
    __array_ufunc__ = None

    def __init__(self, data: ArrayLike | Vector):
        if isinstance(data, Vector):
            array = data._data.copy()
        else:
            array = check_array(data, "data")
            check_1d(array, "data")
        array.setflags(write=False)
        self._data: NDArray[np.float64] = array

    @classmethod
    def _wrap(cls, array: NDArray[np.float64]) -> Vector:
        """Adopt a freshly computed array without copying or re-validating."""
        vector = cls.__new__(cls)
        array.setflags(write=False)
        vector._data = array
        return vector

    @classmethod
    def zeros(cls, n: int) -> Vector:
        """Vector of length n filled with 0.0. n == 0 gives an empty vector."""
        n = check_non_negative_length(n, "n")
        return cls._wrap(np.zeros(n, dtype=np.float64))

    @classmethod
    def ones(cls, n: int) -> Vector:
        """Vector of length n filled with 1.0. n == 0 gives an empty vector."""
        n = check_non_negative_length(n, "n")
        return cls._wrap(np.ones(n, dtype=np.float64))

    # --- Accessors ---

    @property
    def length(self) -> int:
        """Number of elements."""
        return int(self._data.shape[0])

    @property
    def shape(self) -> tuple[int]:
        return (self.length,)

    def get(self, i: int) -> float:
        """Element at index i. Negative indices count from the end."""
        i = check_index(i, self.length, "i")
        return float(self._data[i])

    def to_numpy(self) -> NDArray[np.float64]:
        """Writable copy of the elements."""
        return self._data.copy()

    def tolist(self) -> list[float]:
        return self._data.tolist()

    # --- Arithmetic ---

    def add(self, other: Vector) -> Vector:
        """Elementwise sum. Lengths must match."""
        _check_vector(other, "other")
        check_same_shape(self.shape, other.shape, "add")
        return Vector._wrap(self._data + other._data)

    def sub(self, other: Vector) -> Vector:
        """Elementwise difference. Lengths must match."""
        _check_vector(other, "other")
        check_same_shape(self.shape, other.shape, "sub")
        return Vector._wrap(self._data - other._data)

    def negate(self) -> Vector:
        return Vector._wrap(-self._data)

    def scale(self, s: float) -> Vector:
        """Multiply every element by the scalar s."""
        s = check_scalar(s, "s")
        return Vector._wrap(self._data * s)

    def dot(self, other: Vector) -> float:
        """
        Dot product: a · b = Σ (a_i * b_i)

        Terms are summed left to right, so a.dot(b) == b.dot(a) exactly.
        """
        _check_vector(other, "other")
        check_same_shape(self.shape, other.shape, "dot")
        return dot_kernel(self._data, other._data)

    def norm_l1(self) -> float:
        """L1 (Manhattan) norm: ||v||₁ = Σ |v_i|"""
        return sequential_sum(np.abs(self._data))

    def norm_l2(self) -> float:
        """L2 (Euclidean) norm: ||v||₂ = sqrt(Σ v_i²)"""
        return math.sqrt(self.dot(self))

    def normalize(self, eps: float = DEFAULT_EPS) -> Vector:
        """
        Unit vector with the same direction.

        Args:
            eps: Magnitudes below eps are treated as zero. A negligible
                vector normalizes to the zero vector of the same length
                instead of dividing by (almost) zero.
        """
        eps = check_scalar(eps, "eps")
        norm = self.norm_l2()
        if is_negligible(norm, eps):
            return Vector.zeros(self.length)
        return self.scale(1.0 / norm)

    def cosine_similarity(self, other: Vector, eps: float = DEFAULT_EPS) -> float:
        """
        Cosine of the angle between two vectors.

        cos(θ) = (a · b) / (||a||₂ * ||b||₂)

        Returns 0.0 when ||a||₂ * ||b||₂ < eps, i.e. when either vector has
        (near) zero magnitude and the angle is undefined.
        """
        _check_vector(other, "other")
        eps = check_scalar(eps, "eps")
        dot_product = self.dot(other)
        denominator = self.norm_l2() * other.norm_l2()
        if is_negligible(denominator, eps):
            return 0.0
        return dot_product / denominator

    def allclose(self, other: Vector, tolerance: ToleranceTier = CPU_FP64) -> bool:
        """Same length and elementwise equal within the tolerance tier."""
        _check_vector(other, "other")
        if self.shape != other.shape:
            return False
        return bool(np.allclose(
            self._data, other._data, rtol=tolerance.rtol, atol=tolerance.atol,
        ))

    # --- Operators ---

    def __add__(self, other: Any) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.sub(other)

    def __neg__(self) -> Vector:
        return self.negate()

    def __pos__(self) -> Vector:
        return self

    def __mul__(self, s: Any) -> Vector:
        if isinstance(s, bool) or not isinstance(s, numbers.Real):
            return NotImplemented
        return self.scale(s)

    __rmul__ = __mul__

    def __truediv__(self, s: Any) -> Vector:
        if isinstance(s, bool) or not isinstance(s, numbers.Real):
            return NotImplemented
        return self.scale(1.0 / s)

    def __matmul__(self, other: Any) -> float:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.dot(other)

    # --- Sequence protocol ---

    def __len__(self) -> int:
        return self.length

    def __getitem__(self, index: int | slice) -> float | Vector:
        if isinstance(index, slice):
            return Vector._wrap(self._data[index].copy())
        return self.get(index)

    def __iter__(self) -> Iterator[float]:
        return iter(self._data.tolist())

    # --- Value semantics ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    def __hash__(self) -> int:
        # float hashing makes 0.0 and -0.0 collide, matching ==
        return hash(tuple(self._data.tolist()))

    def __repr__(self) -> str:
        return f"Vector({self._data.tolist()!r})"
