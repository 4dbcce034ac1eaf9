"""A fixed-size two-dimensional matrix with element-wise arithmetic."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence


class MatrixError(ValueError):
    """Raised when matrices cannot be combined or compared."""


_SIZE_MISMATCH = "matrices must have the same size"


def _divide(value, divisor):
    """Divide like the element type would: integers truncate toward zero."""
    if isinstance(value, int) and isinstance(divisor, int):
        quotient = abs(value) // abs(divisor)
        return quotient if (value < 0) == (divisor < 0) else -quotient
    return value / divisor


class Matrix:
    """A ``rows`` x ``cols`` grid of values, zero-filled on creation."""

    __hash__ = None  # mutable, compared by value

    def __init__(self, rows: int, cols: int):
        if rows < 0 or cols < 0:
            raise ValueError(f"matrix dimensions must be non-negative, got {rows}x{cols}")
        self._rows = rows
        self._cols = cols
        self._data = [[0] * cols for _ in range(rows)]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence]) -> Matrix:
        """Build a matrix from a sequence of equally long rows."""
        rows = [list(row) for row in rows]
        width = len(rows[0]) if rows else 0
        if any(len(row) != width for row in rows):
            raise MatrixError("all rows must have the same length")
        matrix = cls(len(rows), width)
        matrix._data = rows
        return matrix

    def copy(self) -> Matrix:
        """Return an independent copy."""
        return Matrix.from_rows(self._data)

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._rows

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self._cols

    def __getitem__(self, index):
        """``m[row]`` gives the live row list; ``m[row, col]`` gives one element."""
        if isinstance(index, tuple):
            row, col = index
            return self._data[row][col]
        return self._data[index]

    def __setitem__(self, index, value) -> None:
        if isinstance(index, tuple):
            row, col = index
            self._data[row][col] = value
            return
        values = list(value)
        if len(values) != self._cols:
            raise MatrixError(f"row must have {self._cols} elements, got {len(values)}")
        self._data[index] = values

    def __iter__(self) -> Iterator[tuple]:
        for row in self._data:
            yield tuple(row)

    def __repr__(self) -> str:
        return f"Matrix.from_rows({self._data!r})"

    def _check_same_size(self, other: Matrix) -> None:
        if self._rows != other._rows or self._cols != other._cols:
            raise MatrixError(_SIZE_MISMATCH)

    def _pairs(self, other: Matrix) -> Iterable[tuple]:
        for mine, theirs in zip(self._data, other._data):
            yield from zip(mine, theirs)

    def __iadd__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_size(other)
        self._data = [[a + b for a, b in zip(mine, theirs)]
                      for mine, theirs in zip(self._data, other._data)]
        return self

    def __isub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_size(other)
        self._data = [[a - b for a, b in zip(mine, theirs)]
                      for mine, theirs in zip(self._data, other._data)]
        return self

    def __imul__(self, value):
        if isinstance(value, Matrix):
            return NotImplemented
        self._data = [[item * value for item in row] for row in self._data]
        return self

    def __itruediv__(self, value):
        if isinstance(value, Matrix):
            return NotImplemented
        self._data = [[_divide(item, value) for item in row] for row in self._data]
        return self

    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        result = self.copy()
        result += other
        return result

    def __sub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        result = self.copy()
        result -= other
        return result

    def __mul__(self, value):
        if isinstance(value, Matrix):
            return NotImplemented
        result = self.copy()
        result *= value
        return result

    def __rmul__(self, value):
        return self.__mul__(value)

    def __truediv__(self, value):
        if isinstance(value, Matrix):
            return NotImplemented
        result = self.copy()
        result /= value
        return result

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_size(other)
        return all(a == b for a, b in self._pairs(other))

    def __ne__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return not self == other

    def __gt__(self, other):
        """True if every element is greater; mixed results raise MatrixError."""
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_size(other)
        results = {a > b for a, b in self._pairs(other)}
        if not results:
            raise MatrixError("cannot compare empty matrices")
        if len(results) > 1:
            raise MatrixError("incorrect comparison")
        return results.pop()

    def __lt__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self != other and not self > other

    def __ge__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self == other or self > other

    def __le__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self == other or self < other

    def resize(self, rows: int, cols: int) -> None:
        """Change the dimensions, keeping overlapping elements and zero-filling the rest."""
        if rows < 0 or cols < 0:
            raise ValueError(f"matrix dimensions must be non-negative, got {rows}x{cols}")
        resized = [[0] * cols for _ in range(rows)]
        for row_index, row in enumerate(self._data[:rows]):
            kept = row[:cols]
            resized[row_index][:len(kept)] = kept
        self._data = resized
        self._rows = rows
        self._cols = cols

    def transpose(self) -> None:
        """Transpose in place."""
        self._data = [list(column) for column in zip(*self._data)] if self._rows else []
        if not self._rows:
            self._data = [[] for _ in range(self._cols)]
        self._rows, self._cols = self._cols, self._rows

    def render(self) -> str:
        """Text form: one ``| a b c |`` line per row."""
        return "".join(
            "| " + "".join(f"{item} " for item in row) + "|\n" for row in self._data
        )