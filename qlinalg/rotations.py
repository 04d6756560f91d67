# qlinalg/rotations.py
"""Real rotation matrices (right-hand rule, angles in radians)."""
import numpy as np
from .matrix import Matrix
from .scalars import resolve_tol

DTYPE = np.float64


def rotation2(theta: float, dtype=DTYPE) -> Matrix:
    """Counter-clockwise rotation of the xy plane about the origin."""
    c, s = np.cos(theta), np.sin(theta)
    return Matrix(np.array([[c, -s],
                            [s, c]], dtype=dtype))

def rotation_x(theta: float, dtype=DTYPE) -> Matrix:
    # roll
    c, s = np.cos(theta), np.sin(theta)
    return Matrix(np.array([[1, 0, 0],
                            [0, c, -s],
                            [0, s, c]], dtype=dtype))

def rotation_y(theta: float, dtype=DTYPE) -> Matrix:
    # pitch
    c, s = np.cos(theta), np.sin(theta)
    return Matrix(np.array([[c, 0, s],
                            [0, 1, 0],
                            [-s, 0, c]], dtype=dtype))

def rotation_z(theta: float, dtype=DTYPE) -> Matrix:
    # yaw
    c, s = np.cos(theta), np.sin(theta)
    return Matrix(np.array([[c, -s, 0],
                            [s, c, 0],
                            [0, 0, 1]], dtype=dtype))


def intrinsic_rotation(alpha: float, beta: float, gamma: float, dtype=DTYPE) -> Matrix:
    """Yaw/pitch/roll: intrinsic Tait-Bryan angles alpha, beta, gamma about z, y, x.

    R = Rz(alpha) . Ry(beta) . Rx(gamma)
    """
    return rotation_z(alpha, dtype) * rotation_y(beta, dtype) * rotation_x(gamma, dtype)


def extrinsic_rotation(alpha: float, beta: float, gamma: float, dtype=DTYPE) -> Matrix:
    """Extrinsic rotation by alpha, beta, gamma about the fixed x, y, z axes.

    R = Rz(gamma) . Ry(beta) . Rx(alpha)
    """
    return rotation_z(gamma, dtype) * rotation_y(beta, dtype) * rotation_x(alpha, dtype)


def is_rotation(M: Matrix, tol=None) -> bool:
    """Orthogonal with determinant +1 (no reflection)."""
    tol = resolve_tol(tol, M.dtype)
    return M.is_orthogonal(tol) and abs(M.determinant() - 1.0) <= tol
