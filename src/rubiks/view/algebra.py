"""
Vector and matrix algebra for the viewer transform.

Vectors are 3-tuples of floats, matrices are 3x3 tuples of tuples and a path
is an ordered tuple of vectors. The arithmetic is done with numpy; results
are handed back as plain tuples so they can be compared and hashed.
"""

import math
from typing import Sequence, Tuple

import numpy as np

from rubiks.core.base import Axis, Rotation

Vec3 = Tuple[float, float, float]
Matrix = Tuple[Vec3, Vec3, Vec3]
Path = Tuple[Vec3, ...]


def _vec(a: np.ndarray) -> Vec3:
    return (float(a[0]), float(a[1]), float(a[2]))


def _mat(a: np.ndarray) -> Matrix:
    return (_vec(a[0]), _vec(a[1]), _vec(a[2]))


def add(u: Vec3, v: Vec3) -> Vec3:
    return (u[0] + v[0], u[1] + v[1], u[2] + v[2])


def sub(u: Vec3, v: Vec3) -> Vec3:
    return (u[0] - v[0], u[1] - v[1], u[2] - v[2])


def scale(k: float, v: Vec3) -> Vec3:
    return (k * v[0], k * v[1], k * v[2])


def dot(u: Vec3, v: Vec3) -> float:
    return float(np.dot(u, v))


def cross(u: Vec3, v: Vec3) -> Vec3:
    return _vec(np.cross(u, v))


def apply(matrix: Matrix, v: Vec3) -> Vec3:
    """Matrix-vector product."""
    return _vec(np.asarray(matrix, dtype=float) @ np.asarray(v, dtype=float))


def apply_path(matrix: Matrix, path: Sequence[Vec3]) -> Path:
    """Apply a matrix to every point of a path, keeping the order."""
    if len(path) == 0:
        return ()
    points = np.asarray(path, dtype=float) @ np.asarray(matrix, dtype=float).T
    return tuple(_vec(p) for p in points)


def translate(offset: Vec3, path: Sequence[Vec3]) -> Path:
    return tuple(add(offset, p) for p in path)


def compose(a: Matrix, b: Matrix) -> Matrix:
    """
    Matrix product A·B.

    Applying the result is the same as applying B first and then A.
    """
    return _mat(np.asarray(a, dtype=float) @ np.asarray(b, dtype=float))


def identity() -> Matrix:
    return _mat(np.eye(3))


def rotation_matrix(axis: Axis, angle: float) -> Matrix:
    """Right-hand-rule rotation by `angle` radians about a coordinate axis."""
    c = math.cos(angle)
    s = math.sin(angle)
    if axis is Axis.X:
        m = [[1, 0, 0], [0, c, -s], [0, s, c]]
    elif axis is Axis.Y:
        m = [[c, 0, s], [0, 1, 0], [-s, 0, c]]
    else:
        m = [[c, -s, 0], [s, c, 0], [0, 0, 1]]
    return _mat(np.array(m, dtype=float))


# Exact positive quarter turns; negative ones are the transposes.
_QUARTER_TURNS = {
    Axis.X: np.array([[1, 0, 0], [0, 0, -1], [0, 1, 0]], dtype=int),
    Axis.Y: np.array([[0, 0, 1], [0, 1, 0], [-1, 0, 0]], dtype=int),
    Axis.Z: np.array([[0, -1, 0], [1, 0, 0], [0, 0, 1]], dtype=int),
}


def quarter_turn(axis: Axis, rotation: Rotation) -> Matrix:
    """Integer-exact matrix of a quarter turn about an axis."""
    m = _QUARTER_TURNS[axis]
    if rotation is Rotation.NEG90:
        m = m.T
    return _mat(m)


def is_orthonormal(matrix: Matrix, tol: float = 1e-6) -> bool:
    """True for proper rotations: R·Rᵀ = I and det R = 1."""
    m = np.asarray(matrix, dtype=float)
    return bool(np.allclose(m @ m.T, np.eye(3), atol=tol)
                and np.isclose(np.linalg.det(m), 1.0, atol=tol))
