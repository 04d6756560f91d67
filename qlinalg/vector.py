# qlinalg/vector.py
import math
import numbers
from dataclasses import dataclass
import numpy as np
from .errors import InvalidArgumentError, InvalidOperationError
from .scalars import (resolve_tol, as_buffer, check_index, check_size,
                      check_storable, is_complex_dtype)
from . import tensor


@dataclass(eq=False, frozen=True)
class Vector:
    """Fixed-length vector over real (float) or complex scalars.

    The scalar kind is the dtype of the owned buffer. Every transform returns a
    new Vector; only the index setter writes in place. `data` cannot be rebound,
    so the dimension is fixed at construction.
    """
    data: np.ndarray  # shape (dimension,), float64/complex128 by default

    # keep numpy scalars from broadcasting over us: `np.float64(2) * v` -> __rmul__
    __array_ufunc__ = None

    def __post_init__(self):
        src = self.data.data if isinstance(self.data, Vector) else self.data
        object.__setattr__(self, "data", as_buffer(src, ndim=1))

    # ---------------------------- builders ----------------------------

    @staticmethod
    def of(*components, dtype=None) -> "Vector":
        return Vector(as_buffer(components, ndim=1, dtype=dtype))

    @staticmethod
    def zeros(dimension: int, dtype=np.float64) -> "Vector":
        n = check_size("Dimension", dimension)
        return Vector(np.zeros(n, dtype=dtype))

    @staticmethod
    def basis(dimension: int, k: int, dtype=np.float64) -> "Vector":
        """Standard basis vector e_k (|k> for complex dtypes)."""
        v = Vector.zeros(dimension, dtype=dtype)
        v[k] = 1
        return v

    def copy(self) -> "Vector":
        return Vector(self.data)

    def astype(self, dtype) -> "Vector":
        return Vector(as_buffer(self.data, ndim=1, dtype=dtype))

    def as_numpy(self) -> np.ndarray:
        return self.data.copy()

    # --------------------------- attributes ---------------------------

    @property
    def dimension(self) -> int:
        return self.data.shape[0]

    @property
    def dtype(self):
        return self.data.dtype

    @property
    def is_complex(self) -> bool:
        return is_complex_dtype(self.data.dtype)

    def __len__(self):
        return self.dimension

    def __getitem__(self, i):
        return self.data[check_index(i, self.dimension, "Vector")].item()

    def __setitem__(self, i, value):
        i = check_index(i, self.dimension, "Vector")
        check_storable(self.data, value)
        self.data[i] = value

    def __iter__(self):
        return iter(self.data.tolist())

    # ----------------------------- norms ------------------------------

    def norm_euclidean_squared(self) -> float:
        return float(np.sum(np.abs(self.data) ** 2))

    def norm_euclidean(self) -> float:
        return math.sqrt(self.norm_euclidean_squared())

    def norm_manhattan(self) -> float:
        return float(np.sum(np.abs(self.data)))

    def norm_max(self) -> float:
        # largest component, not largest magnitude
        if self.is_complex:
            raise InvalidOperationError("norm_max is undefined for complex vectors (no ordering)")
        return float(np.max(self.data))

    @property
    def length(self) -> float:
        return self.norm_euclidean()

    @property
    def length_squared(self) -> float:
        return self.norm_euclidean_squared()

    def is_normalized(self, tol=None) -> bool:
        return abs(1.0 - self.length_squared) <= resolve_tol(tol, self.dtype)

    # --------------------------- transforms ---------------------------

    def normalize(self) -> "Vector":
        """Unit vector in the same direction; a zero-length vector comes back unchanged."""
        n = self.length
        if n <= 0:
            return self.copy()
        return Vector(self.data / n)

    @property
    def unit(self) -> "Vector":
        return self.normalize()

    def conjugate(self) -> "Vector":
        return Vector(np.conj(self.data))

    def reverse(self) -> "Vector":
        return Vector(-self.data)

    def scale(self, k) -> "Vector":
        return Vector(self.data * k)

    # ------------------------- binary operations ----------------------

    def _check_same_dimension(self, other: "Vector", op: str):
        if not isinstance(other, Vector):
            raise InvalidArgumentError(f"Vector {op} needs a Vector operand, got {type(other).__name__}")
        if self.dimension != other.dimension:
            raise InvalidArgumentError(
                f"Vector {op} requires equal dimensions, got {self.dimension} and {other.dimension}")

    def add(self, other: "Vector") -> "Vector":
        self._check_same_dimension(other, "addition")
        return Vector(self.data + other.data)

    def subtract(self, other: "Vector") -> "Vector":
        self._check_same_dimension(other, "subtraction")
        return Vector(self.data - other.data)

    def dot(self, other: "Vector"):
        """Inner product sum_k a_k * conj(b_k); the plain dot product for real vectors."""
        self._check_same_dimension(other, "dot product")
        return np.sum(self.data * np.conj(other.data)).item()

    def angle_between(self, other: "Vector") -> float:
        self._check_same_dimension(other, "angle")
        magnitudes = self.length * other.length
        if magnitudes <= 0:
            raise InvalidOperationError("Cannot calculate the angle with a zero-length vector")
        c = complex(self.dot(other)).real / magnitudes
        return math.acos(min(1.0, max(-1.0, c)))  # clamp rounding past +-1

    def tensor_product(self, other: "Vector", backend: str = "numpy") -> "Vector":
        """Composite-system vector: component i*dim(other) + j is self[i]*other[j]."""
        if not isinstance(other, Vector):
            raise InvalidArgumentError(f"Tensor product needs a Vector operand, got {type(other).__name__}")
        return Vector(tensor.tensor_vectors(self.data, other.data, backend=backend))

    # ---------------------------- comparison --------------------------

    def allclose(self, other: "Vector", tol=None) -> bool:
        if not isinstance(other, Vector) or self.dimension != other.dimension:
            return False
        tol = resolve_tol(tol, self.dtype, other.dtype)
        return bool(np.allclose(self.data, other.data, atol=tol, rtol=0))

    def __eq__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.dimension == other.dimension and bool(np.array_equal(self.data, other.data))

    __hash__ = None

    # ----------------------------- sugar ------------------------------

    def __add__(self, other): return self.add(other)
    def __sub__(self, other): return self.subtract(other)
    def __neg__(self): return self.reverse()
    def __pos__(self): return self.copy()

    def __mul__(self, k):
        if isinstance(k, numbers.Number):
            return self.scale(k)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, k):
        if isinstance(k, numbers.Number):
            return Vector(self.data / k)
        return NotImplemented

    def __repr__(self):
        return f"Vector({self.data.tolist()!r})"


# ------------------------ fixed-size helpers ------------------------

def vec2(x=0.0, y=0.0, dtype=None) -> Vector:
    return Vector.of(x, y, dtype=dtype)

def vec3(x=0.0, y=0.0, z=0.0, dtype=None) -> Vector:
    return Vector.of(x, y, z, dtype=dtype)

def cross(a: Vector, b: Vector) -> Vector:
    """Cross product of two 3-vectors."""
    if a.dimension != 3 or b.dimension != 3:
        raise InvalidArgumentError(
            f"Cross product is defined for 3-vectors, got dimensions {a.dimension} and {b.dimension}")
    ax, ay, az = a.data
    bx, by, bz = b.data
    return Vector([ay*bz - az*by, az*bx - ax*bz, ax*by - ay*bx])
