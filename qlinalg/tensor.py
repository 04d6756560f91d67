# qlinalg/tensor.py
import numpy as np

BACKENDS = ("numpy", "serial", "numba")


def kron_numpy(A: np.ndarray, B: np.ndarray) -> np.ndarray:
    """Reshape-based Kronecker product (no Python loops)."""
    m, n = A.shape
    p, q = B.shape
    # out[am, bm, an, bn] = A[am, an] * B[bm, bn]
    return np.einsum('ij,kl->ikjl', A, B).reshape(m * p, n * q)


def kron(A: np.ndarray, B: np.ndarray, backend: str = "numpy", num_threads=None) -> np.ndarray:
    """Dispatch a 2-D Kronecker product to one of the kernels in BACKENDS."""
    if backend == "numpy":
        return kron_numpy(A, B)

    elif backend == "serial":
        from .tensor_serial import kron as _kron
        return _kron(A, B)

    elif backend == "numba":
        try:
            from .tensor_numba import kron as _kron, set_threads
        except Exception as e:
            raise RuntimeError("Numba backend not available. Did you `pip install numba`?") from e
        if num_threads is not None:
            set_threads(int(num_threads))
        return _kron(A, B)

    else:
        raise NotImplementedError(f"Unknown backend: {backend}")


def tensor_vectors(a: np.ndarray, b: np.ndarray, backend: str = "numpy", num_threads=None) -> np.ndarray:
    """Tensor product of 1-D arrays: index i*len(b) + j holds a[i]*b[j]."""
    # column vectors: (n,1) kron (m,1) -> (n*m,1) with the same ordering
    out = kron(a.reshape(-1, 1), b.reshape(-1, 1), backend=backend, num_threads=num_threads)
    return out.reshape(-1)
