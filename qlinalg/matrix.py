# qlinalg/matrix.py
import numbers
from dataclasses import dataclass
from typing import Tuple
import numpy as np
from .errors import InvalidArgumentError, InvalidOperationError
from .scalars import (resolve_tol, as_buffer, check_index, check_size,
                      check_storable, is_complex_dtype)
from .vector import Vector
from . import tensor


@dataclass(eq=False, frozen=True)
class Matrix:
    """Dense rows x cols matrix over real or complex scalars (row-major ndarray)."""
    data: np.ndarray  # shape (rows, cols); entries writable, binding is not

    __array_ufunc__ = None

    def __post_init__(self):
        src = self.data.data if isinstance(self.data, Matrix) else self.data
        object.__setattr__(self, "data", as_buffer(src, ndim=2))

    # ---------------------------- builders ----------------------------

    @staticmethod
    def zeros(rows: int, cols: int, dtype=np.float64) -> "Matrix":
        r = check_size("Rows", rows)
        c = check_size("Cols", cols)
        return Matrix(np.zeros((r, c), dtype=dtype))

    @staticmethod
    def identity(size: int, dtype=np.float64) -> "Matrix":
        return Matrix(np.eye(check_size("Size", size), dtype=dtype))

    def copy(self) -> "Matrix":
        return Matrix(self.data)

    def astype(self, dtype) -> "Matrix":
        return Matrix(as_buffer(self.data, ndim=2, dtype=dtype))

    def as_numpy(self) -> np.ndarray:
        return self.data.copy()

    def flatten(self) -> Vector:
        """Row-major entries as a Vector."""
        return Vector(self.data.reshape(-1))

    # --------------------------- attributes ---------------------------

    @property
    def rows(self) -> int:
        return self.data.shape[0]

    @property
    def cols(self) -> int:
        return self.data.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        return self.data.shape

    @property
    def dtype(self):
        return self.data.dtype

    @property
    def is_complex(self) -> bool:
        return is_complex_dtype(self.data.dtype)

    def _index(self, key):
        try:
            row, col = key
        except (TypeError, ValueError):
            raise TypeError(f"Matrix index must be a (row, col) pair, got {key!r}") from None
        return check_index(row, self.rows, "Row"), check_index(col, self.cols, "Column")

    def __getitem__(self, key):
        return self.data[self._index(key)].item()

    def __setitem__(self, key, value):
        idx = self._index(key)
        check_storable(self.data, value)
        self.data[idx] = value

    def is_square(self) -> bool:
        return self.rows == self.cols

    def _require_square(self, what: str):
        if not self.is_square():
            raise InvalidOperationError(f"{what} requires a square matrix, got {self.rows}x{self.cols}")

    # --------------------------- transforms ---------------------------

    def trace(self):
        self._require_square("Trace")
        return np.trace(self.data).item()

    def determinant(self):
        self._require_square("Determinant")
        return np.linalg.det(self.data).item()

    def transpose(self) -> "Matrix":
        return Matrix(self.data.T)

    def conjugate(self) -> "Matrix":
        # identity on real matrices
        return Matrix(np.conj(self.data))

    def conjugate_transpose(self) -> "Matrix":
        """Adjoint (dagger): conjugate, then transpose."""
        return self.conjugate().transpose()

    def tensor_product(self, other: "Matrix", backend: str = "numpy") -> "Matrix":
        return kronecker(self, other, backend=backend)

    # ---------------------------- predicates --------------------------

    def is_hermitian(self, tol=None) -> bool:
        tol = resolve_tol(tol, self.dtype)
        return self.is_square() and self.allclose(self.conjugate_transpose(), tol=tol)

    def is_unitary(self, tol=None) -> bool:
        if not self.is_square():
            return False
        tol = resolve_tol(tol, self.dtype)
        product = self.multiply(self.conjugate_transpose())
        return product.allclose(Matrix.identity(self.rows), tol=tol)

    def is_orthogonal(self, tol=None) -> bool:
        if not self.is_square():
            return False
        tol = resolve_tol(tol, self.dtype)
        return self.transpose().multiply(self).allclose(Matrix.identity(self.rows), tol=tol)

    # ------------------------- binary operations ----------------------

    def _check_same_shape(self, other: "Matrix", op: str):
        if not isinstance(other, Matrix):
            raise InvalidArgumentError(f"Matrix {op} needs a Matrix operand, got {type(other).__name__}")
        if self.shape != other.shape:
            raise InvalidArgumentError(
                f"Matrix {op} requires matrices of the same shape, got "
                f"{self.rows}x{self.cols} and {other.rows}x{other.cols}")

    def add(self, other: "Matrix") -> "Matrix":
        self._check_same_shape(other, "addition")
        return Matrix(self.data + other.data)

    def subtract(self, other: "Matrix") -> "Matrix":
        self._check_same_shape(other, "subtraction")
        return Matrix(self.data - other.data)

    def multiply(self, other: "Matrix") -> "Matrix":
        """Matrix product; only same-shape operands are accepted."""
        self._check_same_shape(other, "multiplication")
        return Matrix(self.data @ other.data)

    def scale(self, k) -> "Matrix":
        return Matrix(self.data * k)

    def multiply_vector(self, v: Vector) -> Vector:
        """result[i] = sum_j M[i, j] * v[j]"""
        if not isinstance(v, Vector):
            raise InvalidArgumentError(f"Expected a Vector, got {type(v).__name__}")
        if self.cols != v.dimension:
            raise InvalidArgumentError(
                f"Matrix columns ({self.cols}) must match vector dimension ({v.dimension})")
        return Vector(self.data @ v.data)

    # ---------------------------- comparison --------------------------

    def allclose(self, other: "Matrix", tol=None) -> bool:
        if not isinstance(other, Matrix) or self.shape != other.shape:
            return False
        tol = resolve_tol(tol, self.dtype, other.dtype)
        return bool(np.allclose(self.data, other.data, atol=tol, rtol=0))

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self.data, other.data))

    __hash__ = None

    # ----------------------------- sugar ------------------------------

    def __add__(self, other): return self.add(other)
    def __sub__(self, other): return self.subtract(other)
    def __neg__(self): return self.scale(-1)
    def __pos__(self): return self.copy()

    def __mul__(self, other):
        if isinstance(other, Matrix):
            return self.multiply(other)
        if isinstance(other, Vector):
            return self.multiply_vector(other)
        if isinstance(other, numbers.Number):
            return self.scale(other)
        return NotImplemented

    def __matmul__(self, other):
        # products only; scalars go through `*`
        if isinstance(other, Matrix):
            return self.multiply(other)
        if isinstance(other, Vector):
            return self.multiply_vector(other)
        return NotImplemented

    def __rmul__(self, k):
        if isinstance(k, numbers.Number):
            return self.scale(k)
        return NotImplemented

    def __truediv__(self, k):
        if isinstance(k, numbers.Number):
            return Matrix(self.data / k)
        return NotImplemented

    def __repr__(self):
        return f"Matrix({self.data.tolist()!r})"


def identity(size: int, dtype=np.float64) -> Matrix:
    return Matrix.identity(size, dtype=dtype)


def kronecker(a: Matrix, b: Matrix, backend: str = "numpy", num_threads=None) -> Matrix:
    """Kronecker (tensor) product of an m x n and a p x q matrix.

    result[am*p + bm, an*q + bn] = a[am, an] * b[bm, bn], so `a` picks the block
    and `b` varies inside it. Same ordering as Vector.tensor_product, which keeps
    composite operators consistent with composite states.
    """
    if not isinstance(a, Matrix) or not isinstance(b, Matrix):
        raise InvalidArgumentError(
            f"Kronecker product needs two matrices, got {type(a).__name__} and {type(b).__name__}")
    return Matrix(tensor.kron(a.data, b.data, backend=backend, num_threads=num_threads))
