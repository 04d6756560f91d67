# qlinalg/scalars.py
import operator
import numpy as np
from .errors import InvalidArgumentError, IndexOutOfRangeError

DEFAULT_TOL = 1e-9     # double precision
SINGLE_TOL = 1e-6      # float32 / complex64

REAL_DTYPES = (np.float32, np.float64)
COMPLEX_DTYPES = (np.complex64, np.complex128)
SUPPORTED_DTYPES = REAL_DTYPES + COMPLEX_DTYPES


def resolve_dtype(values, dtype=None) -> np.dtype:
    """Pick the buffer dtype: the requested one, else float64/complex128 by content."""
    if dtype is not None:
        dt = np.dtype(dtype)
        if dt.type not in SUPPORTED_DTYPES:
            raise InvalidArgumentError(f"Unsupported scalar dtype: {dt}")
        if np.iscomplexobj(values) and not is_complex_dtype(dt):
            raise InvalidArgumentError(f"Complex values cannot be stored as {dt}")
        return dt
    dt = np.asarray(values).dtype
    if dt.type in SUPPORTED_DTYPES:
        return dt
    if np.iscomplexobj(values):
        return np.dtype(np.complex128)
    return np.dtype(np.float64)


def as_buffer(values, ndim: int, dtype=None) -> np.ndarray:
    """Deep-copy `values` into a fresh ndarray of rank `ndim`, every axis >= 1."""
    try:
        raw = np.asarray(values)
    except ValueError as e:  # ragged nested lists
        raise InvalidArgumentError(f"Values do not form a {ndim}-D array: {e}") from e
    if raw.dtype.kind not in "biufc":
        raise InvalidArgumentError(f"Non-numeric values (dtype {raw.dtype})")
    if raw.ndim != ndim:
        raise InvalidArgumentError(f"Expected a {ndim}-D array, got shape {raw.shape}")
    if any(s < 1 for s in raw.shape):
        raise InvalidArgumentError(f"Every dimension must be >= 1, got shape {raw.shape}")
    return np.array(raw, dtype=resolve_dtype(raw, dtype), copy=True)


def check_size(name: str, n) -> int:
    n = operator.index(n)
    if n <= 0:
        raise InvalidArgumentError(f"{name} must be greater than zero, got {n}")
    return n


def check_index(i, bound: int, what: str) -> int:
    # no negative wraparound
    i = operator.index(i)
    if i < 0 or i >= bound:
        raise IndexOutOfRangeError(f"{what} index {i} outside [0, {bound})")
    return i


def check_storable(buf: np.ndarray, value):
    if not np.iscomplexobj(buf) and np.iscomplexobj(value):
        raise InvalidArgumentError(f"Cannot store complex value {value!r} in a real ({buf.dtype}) buffer")


def is_complex_dtype(dt) -> bool:
    return np.issubdtype(dt, np.complexfloating)


def resolve_tol(tol, *dtypes) -> float:
    """Explicit `tol` wins; else DEFAULT_TOL, loosened to SINGLE_TOL if any dtype is single precision."""
    if tol is not None:
        return tol
    if any(np.finfo(dt).eps > np.finfo(np.float64).eps for dt in dtypes):
        return SINGLE_TOL
    return DEFAULT_TOL
