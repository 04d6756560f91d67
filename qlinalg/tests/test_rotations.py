# qlinalg/tests/test_rotations.py
import numpy as np
import pytest
from qlinalg.rotations import (rotation2, rotation_x, rotation_y, rotation_z,
                               intrinsic_rotation, extrinsic_rotation, is_rotation)
from qlinalg.matrix import Matrix
from qlinalg.vector import vec2, vec3

TOL = 1e-5
ANGLES = [0.0, 0.4, np.pi / 2, np.pi, -1.3, 2 * np.pi]

def test_rotation2_quarter_turn():
    r = rotation2(np.pi / 2) * vec2(1, 0)
    assert r.allclose(vec2(0, 1), tol=TOL)

@pytest.mark.parametrize("theta,a,b", [
    (np.pi / 2, (1, 0, 0), (1, 0, 0)),
    (np.pi / 2, (0, 0, 1), (0, -1, 0)),
    (np.pi / 2, (0, 1, 0), (0, 0, 1)),
    (np.pi,     (0, 1, 0), (0, -1, 0)),
])
def test_rotation_x(theta, a, b):
    assert (rotation_x(theta) * vec3(*a)).allclose(vec3(*b), tol=TOL)

@pytest.mark.parametrize("theta,a,b", [
    (np.pi / 2, (0, 0, 1), (1, 0, 0)),
    (np.pi / 2, (0, 1, 0), (0, 1, 0)),
    (np.pi,     (0, 0, 1), (0, 0, -1)),
])
def test_rotation_y(theta, a, b):
    assert (rotation_y(theta) * vec3(*a)).allclose(vec3(*b), tol=TOL)

@pytest.mark.parametrize("theta,a,b", [
    (np.pi / 2, (0, 1, 0), (-1, 0, 0)),
    (np.pi / 2, (1, 0, 0), (0, 1, 0)),
    (np.pi,     (1, 0, 0), (-1, 0, 0)),
])
def test_rotation_z(theta, a, b):
    assert (rotation_z(theta) * vec3(*a)).allclose(vec3(*b), tol=TOL)

@pytest.mark.parametrize("theta", ANGLES)
def test_axis_rotations_are_proper(theta):
    for R in (rotation2(theta), rotation_x(theta), rotation_y(theta), rotation_z(theta)):
        assert R.is_orthogonal()
        assert abs(R.determinant() - 1.0) < 1e-9
        assert is_rotation(R)

def test_compositions_are_proper():
    rng = np.random.default_rng(2)
    for _ in range(10):
        a, b, c = rng.uniform(-np.pi, np.pi, size=3)
        assert is_rotation(intrinsic_rotation(a, b, c))
        assert is_rotation(extrinsic_rotation(a, b, c))

def test_composition_order():
    a, b, c = 0.3, -0.7, 1.1
    assert intrinsic_rotation(a, b, c).allclose(rotation_z(a) * rotation_y(b) * rotation_x(c))
    assert extrinsic_rotation(a, b, c).allclose(rotation_z(c) * rotation_y(b) * rotation_x(a))

def test_reflection_is_not_rotation():
    assert not is_rotation(Matrix([[1, 0], [0, -1]]))
    assert not is_rotation(Matrix([[2, 0], [0, 0.5]]))

@pytest.mark.parametrize("theta", ANGLES)
def test_single_precision_rotations_are_proper(theta):
    for R in (rotation2(theta, np.float32), rotation_x(theta, np.float32),
              rotation_y(theta, np.float32), rotation_z(theta, np.float32)):
        assert R.dtype == np.float32
        assert R.is_orthogonal()
        assert is_rotation(R)
    assert is_rotation(intrinsic_rotation(theta, 0.4, -1.3, dtype=np.float32))
    assert is_rotation(extrinsic_rotation(theta, 0.4, -1.3, dtype=np.float32))
