import math

import pytest

from linsolve.linear_system import LinearSystem
from linsolve.matrix import Matrix, SingularMatrixError
from linsolve.regularized import LinearSystemRegularized
from linsolve.vector import Vector


def assert_close(a, b, tol=1e-8):
    assert len(a) == len(b)
    for x, y in zip(a, b):
        assert abs(x - y) <= tol


def norm(v):
    return math.sqrt(v.dot(v))


def test_square_without_damping_matches_direct_solve():
    a = Matrix.from_rows([[3, 2, -1], [2, -2, 4], [-1, 0.5, -1]])
    b = Vector([1, -2, 0])
    x = LinearSystemRegularized(a, b).solve()
    assert_close(x, LinearSystem(a, b).solve())


def test_overdetermined_consistent_system_is_recovered():
    a = Matrix.from_rows([[1, 0], [0, 1], [1, 1]])
    x = LinearSystemRegularized(a, Vector([1, 2, 3])).solve()
    assert_close(x, Vector([1, 2]))


def test_underdetermined_solution_satisfies_system():
    a = Matrix.from_rows([[1, 2, 3], [0, 1, 1]])
    b = Vector([4, 5])
    x = LinearSystemRegularized(a, b).solve()
    assert_close(a * x, b)


def test_underdetermined_gives_minimum_norm():
    a = Matrix.from_rows([[1, 1]])
    x = LinearSystemRegularized(a, Vector([2])).solve()
    assert_close(x, Vector([1, 1]))


def test_damping_shrinks_solution():
    a = Matrix.from_rows([[1, 0], [0, 1], [1, 1]])
    b = Vector([1, 2, 3])
    plain = LinearSystemRegularized(a, b).solve()
    damped = LinearSystemRegularized(a, b, 5.0).solve()
    assert norm(damped) < norm(plain)


def test_damping_makes_singular_solvable():
    a = Matrix.from_rows([[1, 2], [2, 4]])
    b = Vector([3, 6])
    x = LinearSystemRegularized(a, b, 1e-6).solve()
    assert_close(a * x, b, tol=1e-4)


def test_singular_without_damping_raises():
    a = Matrix.from_rows([[1, 2], [2, 4]])
    with pytest.raises(SingularMatrixError):
        LinearSystemRegularized(a, Vector([3, 6])).solve()


def test_size_mismatch_rejected():
    with pytest.raises(ValueError, match="Matrix row count must match vector size"):
        LinearSystemRegularized(Matrix(3, 2), Vector(2))