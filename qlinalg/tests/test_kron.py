# qlinalg/tests/test_kron.py
import numpy as np
import pytest
from qlinalg.matrix import Matrix, kronecker
from qlinalg.vector import Vector
from qlinalg.tensor import kron, BACKENDS
from qlinalg.errors import InvalidArgumentError

def max_abs_diff(a, b):
    return float(np.max(np.abs(a - b)))

def check_block_structure(A, B, K):
    m, n = A.shape
    p, q = B.shape
    assert K.shape == (m * p, n * q)
    for am in range(m):
        for an in range(n):
            for bm in range(p):
                for bn in range(q):
                    assert K[am*p + bm, an*q + bn] == A[am, an] * B[bm, bn]

@pytest.mark.parametrize("backend", BACKENDS)
def test_kronecker_known_values(backend):
    a = Matrix([[1, 2], [3, 4]])
    b = Matrix([[5, 6], [7, 8]])
    r = kronecker(a, b, backend=backend)
    assert r[0, 1] == 6
    assert r[1, 1] == 8
    assert r[0, 2] == 10
    assert r[0, 3] == 12
    assert r[3, 0] == 21
    assert r[3, 3] == 32

@pytest.mark.parametrize("backend", BACKENDS)
@pytest.mark.parametrize("a_shape,b_shape", [((1, 1), (2, 3)), ((2, 3), (3, 2)), ((3, 1), (1, 4)), ((2, 2), (2, 2))])
def test_kronecker_exhaustive_indices(backend, a_shape, b_shape):
    rng = np.random.default_rng(11)
    A = Matrix(rng.integers(-5, 5, size=a_shape) + 1j * rng.integers(-5, 5, size=a_shape))
    B = Matrix(rng.integers(-5, 5, size=b_shape))
    K = kronecker(A, B, backend=backend)
    check_block_structure(A, B, K)

def test_backends_agree_with_numpy_kron():
    rng = np.random.default_rng(123)
    for _ in range(5):
        A = rng.normal(size=(3, 2)) + 1j * rng.normal(size=(3, 2))
        B = rng.normal(size=(2, 4))
        ref = np.kron(A, B)
        for backend in BACKENDS:
            assert max_abs_diff(kron(A, B, backend=backend), ref) < 1e-12

def test_serial_vs_numba_threads():
    rng = np.random.default_rng(5)
    A = rng.normal(size=(8, 8)) + 1j * rng.normal(size=(8, 8))
    B = rng.normal(size=(4, 4)) + 1j * rng.normal(size=(4, 4))
    s = kron(A, B, backend="serial")
    from numba import config
    t = kron(A, B, backend="numba", num_threads=min(2, config.NUMBA_NUM_THREADS))
    assert np.allclose(s, t, atol=1e-12, rtol=0)

def test_unknown_backend():
    with pytest.raises(NotImplementedError):
        kron(np.eye(2), np.eye(2), backend="cuda")

def test_kronecker_rejects_non_matrix():
    with pytest.raises(InvalidArgumentError):
        kronecker(Matrix([[1]]), Vector.of(1))

def test_method_form_matches_function():
    a = Matrix([[0, 1], [1, 0]])
    b = Matrix([[1, 0], [0, -1]])
    assert a.tensor_product(b) == kronecker(a, b)

def test_operator_and_state_ordering_agree():
    # (A (x) B)(u (x) v) == (A u) (x) (B v)
    rng = np.random.default_rng(9)
    A = Matrix(rng.normal(size=(2, 2)) + 1j * rng.normal(size=(2, 2)))
    B = Matrix(rng.normal(size=(3, 3)))
    u = Vector(rng.normal(size=2) + 1j * rng.normal(size=2))
    v = Vector(rng.normal(size=3))
    lhs = kronecker(A, B) * u.tensor_product(v)
    rhs = (A * u).tensor_product(B * v)
    assert lhs.allclose(rhs, tol=1e-12)

@pytest.mark.parametrize("backend", BACKENDS)
def test_vector_tensor_backends(backend):
    a = Vector([1, 2j])
    b = Vector.of(3, 4, 5)
    assert a.tensor_product(b, backend=backend) == Vector([3, 4, 5, 6j, 8j, 10j])
