"""Dense row-major matrices of floats with the operations a small network needs."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from numbers import Real
from typing import Any


class Matrix:
    """A fixed-shape matrix stored row-major in a flat list."""

    __slots__ = ("rows", "cols", "data")
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, rows: int, cols: int, data: Iterable[float] | None = None) -> None:
        if rows < 1 or cols < 1:
            raise ValueError(f"matrix dimensions must be positive, got {rows}x{cols}")
        if data is None:
            values = [0.0] * (rows * cols)
        else:
            values = [float(value) for value in data]
            if len(values) != rows * cols:
                raise ValueError(
                    f"expected {rows * cols} values for a {rows}x{cols} matrix, got {len(values)}"
                )
        self.rows = rows
        self.cols = cols
        self.data = values

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> Matrix:
        """Build a matrix from a sequence of equally long rows."""
        rows = [list(row) for row in rows]
        if not rows or not rows[0]:
            raise ValueError("a matrix needs at least one row and one column")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("all rows must have the same length")
        return cls(len(rows), width, (value for row in rows for value in row))

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.cols

    def tolist(self) -> list[list[float]]:
        """Return the contents as a list of row lists."""
        return [self.data[start:start + self.cols] for start in range(0, len(self.data), self.cols)]

    def copy(self) -> Matrix:
        return Matrix(self.rows, self.cols, self.data)

    def _offset(self, row: int, col: int) -> int:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"index ({row}, {col}) out of bounds for {self.rows}x{self.cols} matrix")
        return row * self.cols + col

    def at(self, row: int, col: int) -> float:
        """Return the element at ``(row, col)``."""
        return self.data[self._offset(row, col)]

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, col = index
        return self.at(row, col)

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        row, col = index
        self.data[self._offset(row, col)] = float(value)

    def _require_same_shape(self, other: Matrix) -> None:
        if self.shape != other.shape:
            raise ValueError(f"shape mismatch: {self.shape} vs {other.shape}")

    def __iadd__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._require_same_shape(other)
        self.data = [a + b for a, b in zip(self.data, other.data)]
        return self

    def __add__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        result = self.copy()
        result += other
        return result

    def __isub__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._require_same_shape(other)
        self.data = [a - b for a, b in zip(self.data, other.data)]
        return self

    def __sub__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        result = self.copy()
        result -= other
        return result

    def __imul__(self, other: Any) -> Matrix:
        """Multiply in place by a scalar or, element by element, by a same-shape matrix."""
        if isinstance(other, Matrix):
            self._require_same_shape(other)
            self.data = [a * b for a, b in zip(self.data, other.data)]
        elif isinstance(other, Real):
            self.data = [a * other for a in self.data]
        else:
            return NotImplemented
        return self

    def __mul__(self, other: Any) -> Matrix:
        if not isinstance(other, (Matrix, Real)):
            return NotImplemented
        result = self.copy()
        result *= other
        return result

    def __rmul__(self, other: Any) -> Matrix:
        if not isinstance(other, Real):
            return NotImplemented
        return self * other

    def __itruediv__(self, scalar: Any) -> Matrix:
        if not isinstance(scalar, Real):
            return NotImplemented
        self.data = [a / scalar for a in self.data]
        return self

    def __truediv__(self, scalar: Any) -> Matrix:
        if not isinstance(scalar, Real):
            return NotImplemented
        result = self.copy()
        result /= scalar
        return result

    def __matmul__(self, other: Any) -> Matrix:
        """Matrix product of a ``rows x k`` and a ``k x n`` matrix."""
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.cols != other.rows:
            raise ValueError(f"cannot multiply {self.shape} by {other.shape}")
        other_cols = [other.data[j::other.cols] for j in range(other.cols)]
        product = (
            sum(a * b for a, b in zip(row, column))
            for row in self.tolist()
            for column in other_cols
        )
        return Matrix(self.rows, other.cols, product)

    def __float__(self) -> float:
        if self.shape != (1, 1):
            raise TypeError(f"only a 1x1 matrix converts to float, not {self.rows}x{self.cols}")
        return self.data[0]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self.data == other.data

    def __repr__(self) -> str:
        return f"Matrix({self.rows}, {self.cols}, {self.data!r})"

    def accumulate(self) -> float:
        """Return the sum of all elements."""
        return sum(self.data, 0.0)

    def fill(self, value: float) -> Matrix:
        """Set every element to ``value``; returns the matrix."""
        self.data = [float(value)] * (self.rows * self.cols)
        return self

    def fill_with(self, filler: Callable[..., float], *args: Any) -> Matrix:
        """Set every element to ``filler(*args)``, called once per element."""
        self.data = [float(filler(*args)) for _ in range(self.rows * self.cols)]
        return self

    def apply(self, transform: Callable[[float], float]) -> Matrix:
        """Replace every element by ``transform(element)``; returns the matrix."""
        self.data = [float(transform(value)) for value in self.data]
        return self

    def transposed(self) -> Matrix:
        return Matrix(
            self.cols,
            self.rows,
            (value for col in range(self.cols) for value in self.data[col::self.cols]),
        )

    def row(self, index: int) -> Matrix:
        """Return row ``index`` as a ``1 x cols`` matrix."""
        if not 0 <= index < self.rows:
            raise IndexError(f"row {index} out of bounds for {self.rows} rows")
        start = index * self.cols
        return Matrix(1, self.cols, self.data[start:start + self.cols])

    def col(self, index: int) -> Matrix:
        """Return column ``index`` as a ``rows x 1`` matrix."""
        if not 0 <= index < self.cols:
            raise IndexError(f"column {index} out of bounds for {self.cols} columns")
        return Matrix(self.rows, 1, self.data[index::self.cols])

    def submatrix(self, x1: int, y1: int, x2: int, y2: int) -> Matrix:
        """Return rows ``x1..x2`` and columns ``y1..y2``, both ranges inclusive."""
        if not (0 <= x1 <= x2 < self.rows and 0 <= y1 <= y2 < self.cols):
            raise IndexError(
                f"submatrix ({x1}, {y1})-({x2}, {y2}) out of bounds for {self.rows}x{self.cols} matrix"
            )
        return Matrix(
            x2 - x1 + 1,
            y2 - y1 + 1,
            (value for row in self.tolist()[x1:x2 + 1] for value in row[y1:y2 + 1]),
        )