"""Square linear systems solved by elimination or conjugate gradients."""

from __future__ import annotations

import math

from linsolve.matrix import Matrix, SingularMatrixError
from linsolve.vector import Vector

_SYMMETRY_TOLERANCE = 1e-12
_RESIDUAL_TOLERANCE = 1e-10


class LinearSystem:
    """The system ``A x = b`` for a square matrix ``A``.

    The matrix and right-hand side are copied, so later changes to the
    arguments do not affect the system.
    """

    def __init__(self, a: Matrix, b: Vector) -> None:
        if a.num_rows != a.num_cols:
            raise ValueError(
                f"system matrix must be square, got {a.num_rows}x{a.num_cols}"
            )
        if a.num_rows != len(b):
            raise ValueError(
                f"matrix has {a.num_rows} rows but right-hand side has {len(b)} entries"
            )
        self._a = a.copy()
        self._b = b.copy()

    @property
    def size(self) -> int:
        return len(self._b)

    def solve(self) -> Vector:
        """Solve by Gaussian elimination with partial pivoting.

        Raises SingularMatrixError when a pivot column is entirely zero.
        """
        a = self._a.rows()
        b = list(self._b)
        n = self.size

        for k in range(n):
            pivot = max(range(k, n), key=lambda i: abs(a[i][k]))
            if a[pivot][k] == 0.0:
                raise SingularMatrixError("matrix is singular")
            if pivot != k:
                a[k], a[pivot] = a[pivot], a[k]
                b[k], b[pivot] = b[pivot], b[k]
            for i in range(k + 1, n):
                factor = a[i][k] / a[k][k]
                a[i] = [x - factor * y for x, y in zip(a[i], a[k])]
                b[i] -= factor * b[k]

        x = [0.0] * n
        for i in reversed(range(n)):
            tail = sum(coef * xj for coef, xj in zip(a[i][i + 1:], x[i + 1:]))
            x[i] = (b[i] - tail) / a[i][i]
        return Vector(x)


class PosSymLinSystem(LinearSystem):
    """A system whose matrix is symmetric positive definite."""

    def __init__(self, a: Matrix, b: Vector) -> None:
        super().__init__(a, b)
        rows = self._a.rows()
        for i, row in enumerate(rows):
            for j in range(i + 1, len(row)):
                if abs(row[j] - rows[j][i]) >= _SYMMETRY_TOLERANCE:
                    raise ValueError(
                        f"matrix is not symmetric at ({i + 1}, {j + 1})"
                    )

    def solve(self) -> Vector:
        """Solve by the conjugate gradient method, starting from zero."""
        x = Vector(self.size)
        r = self._b.copy()
        p = r.copy()
        rsold = r.dot(r)
        if math.sqrt(rsold) < _RESIDUAL_TOLERANCE:
            return x

        for _ in range(self.size):
            ap = self._a * p
            alpha = rsold / p.dot(ap)
            x = x + p * alpha
            r = r - ap * alpha
            rsnew = r.dot(r)
            if math.sqrt(rsnew) < _RESIDUAL_TOLERANCE:
                break
            p = r + p * (rsnew / rsold)
            rsold = rsnew
        return x