"""Dense real vectors with zero-based and one-based element access."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from numbers import Real


class Vector:
    """A fixed-size vector of floats.

    Square brackets index from zero; calling the vector indexes from one.
    """

    __slots__ = ("_data",)

    def __init__(self, data: int | Iterable[float]) -> None:
        if isinstance(data, int):
            if data < 0:
                raise ValueError(f"vector size must be non-negative, got {data}")
            self._data = [0.0] * data
        else:
            self._data = [float(x) for x in data]

    def _position(self, index: int, base: int) -> int:
        if not isinstance(index, int):
            raise TypeError(f"vector index must be an integer, got {type(index).__name__}")
        pos = index - base
        if not 0 <= pos < len(self._data):
            raise IndexError(f"index {index} out of range for vector of size {len(self._data)}")
        return pos

    def _require_same_size(self, other: Vector) -> None:
        if len(self._data) != len(other._data):
            raise ValueError(
                f"vector sizes differ: {len(self._data)} and {len(other._data)}"
            )

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[float]:
        return iter(self._data)

    def __getitem__(self, index: int) -> float:
        return self._data[self._position(index, 0)]

    def __setitem__(self, index: int, value: float) -> None:
        self._data[self._position(index, 0)] = float(value)

    def __call__(self, index: int) -> float:
        """Return the element at one-based position ``index``."""
        return self._data[self._position(index, 1)]

    def __pos__(self) -> Vector:
        return Vector(self._data)

    def __neg__(self) -> Vector:
        return Vector(-x for x in self._data)

    def __add__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self._require_same_size(other)
        return Vector(x + y for x, y in zip(self._data, other._data))

    def __sub__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self._require_same_size(other)
        return Vector(x - y for x, y in zip(self._data, other._data))

    def __mul__(self, scalar: object) -> Vector:
        if not isinstance(scalar, Real):
            return NotImplemented
        factor = float(scalar)
        return Vector(x * factor for x in self._data)

    def __rmul__(self, scalar: object) -> Vector:
        return self.__mul__(scalar)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def dot(self, other: Vector) -> float:
        """Return the inner product with ``other``."""
        self._require_same_size(other)
        return sum(x * y for x, y in zip(self._data, other._data))

    def copy(self) -> Vector:
        return Vector(self._data)

    def __repr__(self) -> str:
        return f"Vector({self._data!r})"

    def __str__(self) -> str:
        return " ".join(format(x, "g") for x in self._data)