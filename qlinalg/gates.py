# qlinalg/gates.py
"""Standard quantum gates as complex Matrix values.

Each builder returns a fresh Matrix; all of them are unitary (U U^dagger = I).
Two-qubit matrices use the basis order |00>, |01>, |10>, |11>.
"""
from functools import reduce
import numpy as np
from .errors import InvalidArgumentError
from .matrix import Matrix, kronecker

DTYPE = np.complex128


def I(dtype=DTYPE) -> Matrix:
    return Matrix.identity(2, dtype=dtype)

def X(dtype=DTYPE) -> Matrix:
    return Matrix(np.array([[0, 1],
                            [1, 0]], dtype=dtype))

def Y(dtype=DTYPE) -> Matrix:
    return Matrix(np.array([[0, -1j],
                            [1j, 0]], dtype=dtype))

def Z(dtype=DTYPE) -> Matrix:
    return Matrix(np.array([[1, 0],
                            [0, -1]], dtype=dtype))

def H(dtype=DTYPE) -> Matrix:
    s = np.sqrt(0.5)
    return Matrix(np.array([[s, s],
                            [s, -s]], dtype=dtype))

def S(dtype=DTYPE) -> Matrix:
    return Matrix(np.array([[1, 0],
                            [0, 1j]], dtype=dtype))

def Sdg(dtype=DTYPE) -> Matrix:
    return S(dtype).conjugate_transpose()

def T(dtype=DTYPE) -> Matrix:
    return Matrix(np.array([[1, 0],
                            [0, np.exp(0.25j*np.pi)]], dtype=dtype))

def Tdg(dtype=DTYPE) -> Matrix:
    return T(dtype).conjugate_transpose()

def CNOT(dtype=DTYPE) -> Matrix:
    # control is the first (most significant) factor: swap |10> <-> |11>
    mat = np.eye(4, dtype=dtype)
    mat[2,2] = 0; mat[3,3] = 0
    mat[2,3] = 1; mat[3,2] = 1
    return Matrix(mat)

# ------------------------ parametrised ------------------------

def RX(theta: float, dtype=DTYPE) -> Matrix:
    c = np.cos(theta/2.0)
    s = -1j*np.sin(theta/2.0)
    return Matrix(np.array([[c, s],
                            [s, c]], dtype=dtype))

def RY(theta: float, dtype=DTYPE) -> Matrix:
    c = np.cos(theta/2.0)
    s = np.sin(theta/2.0)
    return Matrix(np.array([[c, -s],
                            [s, c]], dtype=dtype))

def RZ(theta: float, dtype=DTYPE) -> Matrix:
    return Matrix(np.array([[np.exp(-0.5j*theta), 0],
                            [0, np.exp(+0.5j*theta)]], dtype=dtype))

# Long names for readers who don't think in gate letters.
identity = I
pauli_x, pauli_y, pauli_z = X, Y, Z
hadamard = H
s_dagger, t_dagger = Sdg, Tdg

# ------------------------ multi-qubit ------------------------

def tensor_all(*ops: Matrix, backend: str = "numpy") -> Matrix:
    """ops[0] (x) ops[1] (x) ... ; the first factor is the most significant."""
    if not ops:
        raise InvalidArgumentError("tensor_all needs at least one operator")
    return reduce(lambda a, b: kronecker(a, b, backend=backend), ops[1:], ops[0].copy())


def expand_gate(U: Matrix, target: int, n_qubits: int, backend: str = "numpy") -> Matrix:
    """Lift a single-qubit gate to n qubits: I (x) .. (x) U (x) .. (x) I.

    Little-endian: qubit 0 is the least significant bit, i.e. the last factor.
    """
    if U.shape != (2, 2):
        raise InvalidArgumentError(f"expand_gate expects a 2x2 gate, got {U.rows}x{U.cols}")
    if n_qubits < 1:
        raise InvalidArgumentError(f"n_qubits must be >= 1, got {n_qubits}")
    if not 0 <= target < n_qubits:
        raise InvalidArgumentError(f"target {target} outside [0, {n_qubits})")
    ops = [U if q == target else I(U.dtype) for q in reversed(range(n_qubits))]
    return tensor_all(*ops, backend=backend)
