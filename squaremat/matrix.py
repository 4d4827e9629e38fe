"""Dense square matrices of floats with arithmetic operators."""

from __future__ import annotations

import math
from numbers import Integral, Real
from typing import Iterable, Iterator

EPS = 1e-9


def ensure_same(a: "SquareMat", b: "SquareMat") -> None:
    """Raise ValueError unless both matrices have the same order."""
    if a.order != b.order:
        raise ValueError("order mismatch")


def _is_scalar(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, SquareMat)


def _is_int(value: object) -> bool:
    return isinstance(value, Integral)


class _Row:
    """A writable view of one row of a matrix."""

    __slots__ = ("_data", "_start", "_n")

    def __init__(self, data: list[float], start: int, n: int) -> None:
        self._data = data
        self._start = start
        self._n = n

    def _offset(self, col: int) -> int:
        if not _is_int(col):
            raise TypeError("column index must be an integer")
        if not 0 <= col < self._n:
            raise IndexError("column")
        return self._start + col

    def __getitem__(self, col: int) -> float:
        return self._data[self._offset(col)]

    def __setitem__(self, col: int, value: float) -> None:
        self._data[self._offset(col)] = float(value)

    def __len__(self) -> int:
        return self._n

    def __iter__(self) -> Iterator[float]:
        return iter(self._data[self._start:self._start + self._n])

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (_Row, list, tuple)):
            return list(self) == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return repr(list(self))


class SquareMat:
    """An n-by-n matrix of floats stored in row-major order.

    Equality and ordering compare the sums of the elements, within EPS.
    """

    EPS = EPS
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, order: int = 0, fill: float = 0.0) -> None:
        if not _is_int(order) or order < 0:
            raise ValueError("order must be a non-negative integer")
        if order == 0 and fill != 0.0:
            raise ValueError("order 0 with value")
        self._n = int(order)
        self._data = [float(fill)] * (self._n * self._n)

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[float]]) -> "SquareMat":
        """Build a matrix from a sequence of equally long rows."""
        materialised = [list(row) for row in rows]
        n = len(materialised)
        if n == 0:
            raise ValueError("empty init")
        if any(len(row) != n for row in materialised):
            raise ValueError("not square")
        return cls._from_flat(n, (float(v) for row in materialised for v in row))

    @classmethod
    def _from_flat(cls, n: int, values: Iterable[float]) -> "SquareMat":
        matrix = cls.__new__(cls)
        matrix._n = n
        matrix._data = list(values)
        return matrix

    @property
    def order(self) -> int:
        """The number of rows (and columns)."""
        return self._n

    def sum(self) -> float:
        """The sum of all elements."""
        return sum(self._data, 0.0)

    def copy(self) -> "SquareMat":
        """An independent copy of this matrix."""
        return self._from_flat(self._n, self._data)

    def _rows(self) -> list[list[float]]:
        n = self._n
        return [self._data[start:start + n] for start in range(0, n * n, n)] if n else []

    def __getitem__(self, row: int) -> _Row:
        if not _is_int(row):
            raise TypeError("row index must be an integer")
        if not 0 <= row < self._n:
            raise IndexError("row")
        return _Row(self._data, row * self._n, self._n)

    # ----- binary arithmetic -----

    def __add__(self, other: object) -> "SquareMat":
        if not isinstance(other, SquareMat):
            return NotImplemented
        ensure_same(self, other)
        return self._from_flat(self._n, (x + y for x, y in zip(self._data, other._data)))

    def __sub__(self, other: object) -> "SquareMat":
        if not isinstance(other, SquareMat):
            return NotImplemented
        ensure_same(self, other)
        return self._from_flat(self._n, (x - y for x, y in zip(self._data, other._data)))

    def _matmul(self, other: "SquareMat") -> "SquareMat":
        ensure_same(self, other)
        columns = list(zip(*other._rows()))
        return self._from_flat(
            self._n,
            (
                sum((a * b for a, b in zip(row, column)), 0.0)
                for row in self._rows()
                for column in columns
            ),
        )

    def _scaled(self, scalar: float) -> "SquareMat":
        s = float(scalar)
        return self._from_flat(self._n, (s * x for x in self._data))

    def __mul__(self, other: object) -> "SquareMat":
        if isinstance(other, SquareMat):
            return self._matmul(other)
        if _is_scalar(other):
            return self._scaled(other)  # type: ignore[arg-type]
        return NotImplemented

    def __rmul__(self, other: object) -> "SquareMat":
        if _is_scalar(other):
            return self._scaled(other)  # type: ignore[arg-type]
        return NotImplemented

    def __truediv__(self, scalar: object) -> "SquareMat":
        if not _is_scalar(scalar):
            return NotImplemented
        s = float(scalar)  # type: ignore[arg-type]
        if abs(s) < EPS:
            raise ZeroDivisionError("divide by 0")
        return self._from_flat(self._n, (x / s for x in self._data))

    def _mod_int(self, m: int) -> "SquareMat":
        if m == 0:
            raise ZeroDivisionError("mod 0")
        divisor = float(m)

        def wrap(x: float) -> float:
            r = math.fmod(x, divisor)
            return r + m if r < 0 else r

        return self._from_flat(self._n, (wrap(x) for x in self._data))

    def __mod__(self, other: object) -> "SquareMat":
        """Element-wise product with a matrix, or element-wise modulo by an integer."""
        if isinstance(other, SquareMat):
            ensure_same(self, other)
            return self._from_flat(self._n, (x * y for x, y in zip(self._data, other._data)))
        if _is_int(other):
            return self._mod_int(int(other))  # type: ignore[arg-type]
        return NotImplemented

    # ----- unary operators -----

    def __neg__(self) -> "SquareMat":
        return self._from_flat(self._n, (-x for x in self._data))

    def transpose(self) -> "SquareMat":
        """The transposed matrix."""
        return self._from_flat(self._n, (v for column in zip(*self._rows()) for v in column))

    def __invert__(self) -> "SquareMat":
        return self.transpose()

    def _identity(self) -> "SquareMat":
        n = self._n
        return self._from_flat(n, (1.0 if i == j else 0.0 for i in range(n) for j in range(n)))

    def __pow__(self, k: object) -> "SquareMat":
        if not _is_int(k):
            return NotImplemented
        if self._n == 0:
            raise ValueError("power of empty matrix")
        exponent = int(k)  # type: ignore[arg-type]
        if exponent < 0:
            raise ValueError("negative exponent")
        if exponent == 0:
            return self._identity()
        if exponent == 1:
            return self.copy()
        half = self ** (exponent // 2)
        result = half._matmul(half)
        if exponent % 2:
            result = result._matmul(self)
        return result

    def __xor__(self, k: object) -> "SquareMat":
        return self.__pow__(k)

    def determinant(self) -> float:
        """The determinant, by Gaussian elimination with partial pivoting."""
        n = self._n
        if n == 0:
            raise ValueError("det of empty matrix")
        rows = self._rows()
        det = 1.0
        for i in range(n):
            max_row = max(range(i, n), key=lambda j: abs(rows[j][i]))
            if max_row != i:
                rows[i], rows[max_row] = rows[max_row], rows[i]
                det = -det
            pivot_row = rows[i]
            pivot = pivot_row[i]
            if abs(pivot) < EPS:
                return 0.0
            for row in rows[i + 1:]:
                factor = row[i] / pivot
                row[i:] = [x - factor * p for x, p in zip(row[i:], pivot_row[i:])]
            det *= pivot
        if abs(det) < EPS:
            det = 0.0
        return det

    # ----- in-place operations -----

    def increment(self) -> "SquareMat":
        """Add one to every element in place and return self."""
        self._data = [x + 1 for x in self._data]
        return self

    def decrement(self) -> "SquareMat":
        """Subtract one from every element in place and return self."""
        self._data = [x - 1 for x in self._data]
        return self

    def _assign(self, result: "SquareMat") -> "SquareMat":
        if result is NotImplemented:
            return result
        self._n = result._n
        self._data = result._data
        return self

    def __iadd__(self, other: object) -> "SquareMat":
        return self._assign(self.__add__(other))

    def __isub__(self, other: object) -> "SquareMat":
        return self._assign(self.__sub__(other))

    def __imul__(self, other: object) -> "SquareMat":
        if _is_scalar(other):
            s = float(other)  # type: ignore[arg-type]
            self._data = [x * s for x in self._data]
            return self
        return self._assign(self.__mul__(other))

    def __itruediv__(self, scalar: object) -> "SquareMat":
        return self._assign(self.__truediv__(scalar))

    def __imod__(self, other: object) -> "SquareMat":
        return self._assign(self.__mod__(other))

    # ----- comparisons by sum -----

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SquareMat):
            return NotImplemented
        return abs(self.sum() - other.sum()) < EPS

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, SquareMat):
            return NotImplemented
        return not self == other

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self.sum() < other.sum() - EPS

    def __le__(self, other: object) -> bool:
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self < other or self == other

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, SquareMat):
            return NotImplemented
        return other < self

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, SquareMat):
            return NotImplemented
        return other <= self

    # ----- text -----

    def __str__(self) -> str:
        return "".join(
            "[ " + ", ".join(format(v, "g") for v in row) + " ]\n" for row in self._rows()
        )

    def __repr__(self) -> str:
        if self._n == 0:
            return "SquareMat(0)"
        return f"SquareMat.from_rows({self._rows()!r})"