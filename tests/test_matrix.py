import pytest

from linsolve.matrix import Matrix, SingularMatrixError
from linsolve.vector import Vector


def _sample():
    a = Matrix(3, 3)
    value = 1.0
    for i in range(1, 4):
        for j in range(1, 4):
            a[i, j] = value
            value += 1.0
    return a


def _flat(m):
    return [x for row in m.rows() for x in row]


def test_creation_and_access():
    a = _sample()
    assert a.rows() == [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    assert a[2, 3] == 6.0


def test_copy_is_independent():
    a = _sample()
    b = a.copy()
    assert b == a
    b[1, 1] = 100.0
    assert b[1, 1] == 100.0
    assert a[1, 1] == 1.0


def test_new_matrix_is_zero():
    m = Matrix(2, 3)
    assert (m.num_rows, m.num_cols) == (2, 3)
    assert m.rows() == [[0.0] * 3, [0.0] * 3]


@pytest.mark.parametrize("key", [(0, 1), (1, 0), (4, 1), (1, 4)])
def test_bounds(key):
    with pytest.raises(IndexError):
        _sample()[key]


def test_arithmetic():
    a = Matrix.from_rows([[1, 2], [3, 4]])
    b = Matrix.from_rows([[5, 6], [7, 8]])
    assert (a + b).rows() == [[6, 8], [10, 12]]
    assert (a - b).rows() == [[-4, -4], [-4, -4]]
    assert (-a).rows() == [[-1, -2], [-3, -4]]
    assert (+a) == a
    assert (a * 2).rows() == [[2, 4], [6, 8]]
    assert (2 * a).rows() == [[2, 4], [6, 8]]
    assert (a * b).rows() == [[19, 22], [43, 50]]


def test_matrix_vector_product():
    a = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
    assert list(a * Vector([1, 0, -1])) == [-2.0, -2.0]


def test_shape_mismatch_raises():
    a = Matrix(2, 3)
    with pytest.raises(ValueError):
        a * Matrix(2, 3)
    with pytest.raises(ValueError):
        a * Vector(2)
    with pytest.raises(ValueError):
        a + Matrix(3, 2)


def test_transpose():
    a = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
    t = a.transpose()
    assert t.rows() == [[1, 4], [2, 5], [3, 6]]
    assert t.transpose() == a


def test_determinant():
    assert Matrix.from_rows([[1, 2], [3, 4]]).determinant() == pytest.approx(-2.0)
    assert abs(_sample().determinant()) < 1e-9
    assert Matrix.identity(4).determinant() == 1.0


def test_inverse_round_trip():
    a = Matrix.from_rows([[3, 2, -1], [2, -2, 4], [-1, 0.5, -1]])
    identity = [1, 0, 0, 0, 1, 0, 0, 0, 1]
    left = a * a.inverse()
    right = a.inverse() * a
    assert (left.num_rows, left.num_cols) == (3, 3)
    assert _flat(left) == pytest.approx(identity, abs=1e-9)
    assert _flat(right) == pytest.approx(identity, abs=1e-9)


def test_inverse_of_singular_raises():
    with pytest.raises(SingularMatrixError):
        Matrix.from_rows([[1, 2], [2, 4]]).inverse()


def test_non_square_determinant_raises():
    with pytest.raises(ValueError):
        Matrix(2, 3).determinant()


def test_pseudo_inverse_tall_and_wide():
    tall = Matrix.from_rows([[1, 0], [0, 1], [1, 1]])
    tall_pinv = tall.pseudo_inverse()
    assert (tall_pinv.num_rows, tall_pinv.num_cols) == (2, 3)
    assert _flat(tall_pinv * tall) == pytest.approx([1, 0, 0, 1], abs=1e-9)
    wide = tall.transpose()
    wide_pinv = wide.pseudo_inverse()
    assert (wide_pinv.num_rows, wide_pinv.num_cols) == (3, 2)
    assert _flat(wide * wide_pinv) == pytest.approx([1, 0, 0, 1], abs=1e-9)


def test_ragged_rows_raise():
    with pytest.raises(ValueError):
        Matrix.from_rows([[1, 2], [3]])


def test_str():
    assert str(Matrix.from_rows([[1, 2], [3, 4.5]])) == "1 2\n3 4.5"