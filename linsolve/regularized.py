"""Least-squares and minimum-norm solutions with Tikhonov regularisation."""

from __future__ import annotations

from linsolve.matrix import Matrix
from linsolve.vector import Vector


class LinearSystemRegularized:
    """The possibly non-square system ``A x = b`` with damping ``lam``.

    With ``lam`` zero this gives the Moore-Penrose solution of a matrix
    of full rank.
    """

    def __init__(self, a: Matrix, b: Vector, lam: float = 0.0) -> None:
        if a.num_rows != len(b):
            raise ValueError("Matrix row count must match vector size")
        self._a = a.copy()
        self._b = b.copy()
        self._lam = float(lam)

    def _damped(self, m: Matrix) -> Matrix:
        return m + Matrix.identity(m.num_rows) * self._lam

    def solve(self) -> Vector:
        """Return ``(AᵀA + λI)⁻¹Aᵀb`` or ``Aᵀ(AAᵀ + λI)⁻¹b``, whichever is smaller."""
        a, b = self._a, self._b
        at = a.transpose()
        if a.num_rows >= a.num_cols:
            return self._damped(at * a).inverse() * (at * b)
        return at * (self._damped(a * at).inverse() * b)