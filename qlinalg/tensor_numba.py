# qlinalg/tensor_numba.py
import numpy as np
from numba import njit, prange, set_num_threads, get_num_threads

# ---------- low-level kernels (Numba JIT) ----------

@njit(parallel=True, fastmath=True)
def _kron_kernel(A, B, out):
    m, n = A.shape
    p, q = B.shape
    # each am owns rows [am*p, (am+1)*p) of out -> no write overlap across threads
    for am in prange(m):
        for an in range(n):
            a = A[am, an]
            for bm in range(p):
                for bn in range(q):
                    out[am*p + bm, an*q + bn] = a * B[bm, bn]

# ---------- user-facing helpers ----------

def set_threads(n: int):
    set_num_threads(n)

def get_threads() -> int:
    return get_num_threads()

def kron(A: np.ndarray, B: np.ndarray) -> np.ndarray:
    dt = np.result_type(A, B)
    A = np.ascontiguousarray(A, dtype=dt)
    B = np.ascontiguousarray(B, dtype=dt)
    out = np.empty((A.shape[0] * B.shape[0], A.shape[1] * B.shape[1]), dtype=dt)
    _kron_kernel(A, B, out)
    return out
