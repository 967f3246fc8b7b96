"""Dense real matrices with one-based element access."""

from __future__ import annotations

from collections.abc import Iterable
from numbers import Real

from linsolve.vector import Vector


class SingularMatrixError(ArithmeticError):
    """Raised when an operation needs a non-singular matrix."""


class Matrix:
    """A fixed-size matrix of floats, indexed as ``m[i, j]`` from one."""

    __slots__ = ("_rows", "_cols", "_data")

    def __init__(self, num_rows: int, num_cols: int) -> None:
        if num_rows < 0 or num_cols < 0:
            raise ValueError(f"matrix dimensions must be non-negative, got {num_rows}x{num_cols}")
        self._rows = num_rows
        self._cols = num_cols
        self._data = [[0.0] * num_cols for _ in range(num_rows)]

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[float]]) -> Matrix:
        """Build a matrix from an iterable of equally long rows."""
        data = [[float(x) for x in row] for row in rows]
        num_cols = len(data[0]) if data else 0
        if any(len(row) != num_cols for row in data):
            raise ValueError("all rows must have the same length")
        result = cls(len(data), num_cols)
        result._data = data
        return result

    @classmethod
    def identity(cls, size: int) -> Matrix:
        result = cls(size, size)
        for i, row in enumerate(result._data):
            row[i] = 1.0
        return result

    @property
    def num_rows(self) -> int:
        return self._rows

    @property
    def num_cols(self) -> int:
        return self._cols

    def rows(self) -> list[list[float]]:
        """Return a copy of the entries as a list of row lists."""
        return [list(row) for row in self._data]

    def _position(self, key: object) -> tuple[int, int]:
        if (
            not isinstance(key, tuple)
            or len(key) != 2
            or not all(isinstance(k, int) for k in key)
        ):
            raise TypeError("matrix index must be a pair of integers (row, col)")
        i, j = key
        if not (1 <= i <= self._rows and 1 <= j <= self._cols):
            raise IndexError(
                f"index ({i}, {j}) out of range for {self._rows}x{self._cols} matrix"
            )
        return i - 1, j - 1

    def __getitem__(self, key: tuple[int, int]) -> float:
        i, j = self._position(key)
        return self._data[i][j]

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        i, j = self._position(key)
        self._data[i][j] = float(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (self._rows, self._cols, self._data) == (other._rows, other._cols, other._data)

    __hash__ = None  # type: ignore[assignment]

    def _require_same_shape(self, other: Matrix) -> None:
        if (self._rows, self._cols) != (other._rows, other._cols):
            raise ValueError(
                f"matrix shapes differ: {self._rows}x{self._cols} and "
                f"{other._rows}x{other._cols}"
            )

    def _require_square(self, operation: str) -> None:
        if self._rows != self._cols:
            raise ValueError(
                f"{operation} needs a square matrix, got {self._rows}x{self._cols}"
            )

    def _with_data(self, data: list[list[float]], num_rows: int, num_cols: int) -> Matrix:
        result = Matrix(num_rows, num_cols)
        result._data = data
        return result

    def __pos__(self) -> Matrix:
        return self.copy()

    def __neg__(self) -> Matrix:
        return self._with_data([[-x for x in row] for row in self._data], self._rows, self._cols)

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._require_same_shape(other)
        data = [[x + y for x, y in zip(r, s)] for r, s in zip(self._data, other._data)]
        return self._with_data(data, self._rows, self._cols)

    def __sub__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._require_same_shape(other)
        data = [[x - y for x, y in zip(r, s)] for r, s in zip(self._data, other._data)]
        return self._with_data(data, self._rows, self._cols)

    def __mul__(self, other: object) -> Matrix | Vector:
        if isinstance(other, Matrix):
            if self._cols != other._rows:
                raise ValueError(
                    f"cannot multiply {self._rows}x{self._cols} by {other._rows}x{other._cols}"
                )
            columns = list(zip(*other._data)) if other._rows else [()] * other._cols
            data = [
                [sum(x * y for x, y in zip(row, col)) for col in columns]
                for row in self._data
            ]
            return self._with_data(data, self._rows, other._cols)
        if isinstance(other, Vector):
            if self._cols != len(other):
                raise ValueError(
                    f"cannot multiply {self._rows}x{self._cols} matrix by vector of size {len(other)}"
                )
            return Vector(sum(x * y for x, y in zip(row, other)) for row in self._data)
        if isinstance(other, Real):
            factor = float(other)
            data = [[x * factor for x in row] for row in self._data]
            return self._with_data(data, self._rows, self._cols)
        return NotImplemented

    def __rmul__(self, scalar: object) -> Matrix:
        if not isinstance(scalar, Real):
            return NotImplemented
        return self.__mul__(scalar)  # type: ignore[return-value]

    def copy(self) -> Matrix:
        return self._with_data(self.rows(), self._rows, self._cols)

    def transpose(self) -> Matrix:
        data = [list(col) for col in zip(*self._data)] if self._rows else [[] for _ in range(self._cols)]
        return self._with_data(data, self._cols, self._rows)

    @staticmethod
    def _pivot_row(a: list[list[float]], k: int) -> int:
        return max(range(k, len(a)), key=lambda i: abs(a[i][k]))

    def determinant(self) -> float:
        """Return the determinant, by elimination with partial pivoting."""
        self._require_square("determinant")
        a = self.rows()
        det = 1.0
        for k in range(self._rows):
            pivot = self._pivot_row(a, k)
            if a[pivot][k] == 0.0:
                return 0.0
            if pivot != k:
                a[k], a[pivot] = a[pivot], a[k]
                det = -det
            det *= a[k][k]
            for i in range(k + 1, self._rows):
                factor = a[i][k] / a[k][k]
                if factor:
                    a[i] = [x - factor * y for x, y in zip(a[i], a[k])]
        return det

    def inverse(self) -> Matrix:
        """Return the inverse, by Gauss-Jordan elimination with partial pivoting."""
        self._require_square("inverse")
        n = self._rows
        aug = [
            row + [1.0 if i == j else 0.0 for j in range(n)]
            for i, row in enumerate(self.rows())
        ]
        for k in range(n):
            pivot = self._pivot_row(aug, k)
            if aug[pivot][k] == 0.0:
                raise SingularMatrixError("matrix is singular and has no inverse")
            aug[k], aug[pivot] = aug[pivot], aug[k]
            p = aug[k][k]
            aug[k] = [x / p for x in aug[k]]
            for i, row in enumerate(aug):
                factor = row[k]
                if i != k and factor:
                    aug[i] = [x - factor * y for x, y in zip(row, aug[k])]
        return self._with_data([row[n:] for row in aug], n, n)

    def pseudo_inverse(self) -> Matrix:
        """Return the Moore-Penrose inverse of a matrix of full rank."""
        t = self.transpose()
        if self._rows >= self._cols:
            return (t * self).inverse() * t  # type: ignore[operator, return-value]
        return t * (self * t).inverse()  # type: ignore[operator, return-value]

    def __repr__(self) -> str:
        return f"Matrix.from_rows({self._data!r})"

    def __str__(self) -> str:
        return "\n".join(" ".join(format(x, "g") for x in row) for row in self._data)