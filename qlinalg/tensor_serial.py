# qlinalg/tensor_serial.py
import numpy as np


def kron(A: np.ndarray, B: np.ndarray) -> np.ndarray:
    """Kronecker product of two 2-D arrays with explicit loops.

    out[am*p + bm, an*q + bn] = A[am, an] * B[bm, bn]
    A indexes the coarse blocks, B varies inside each block.
    """
    m, n = A.shape
    p, q = B.shape
    out = np.zeros((m * p, n * q), dtype=np.result_type(A, B))
    for am in range(m):
        for an in range(n):
            a = A[am, an]
            for bm in range(p):
                for bn in range(q):
                    out[am*p + bm, an*q + bn] = a * B[bm, bn]
    return out
