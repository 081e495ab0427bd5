"""Storage and arithmetic for 4x4 matrices."""

from __future__ import annotations

import random as _random
import sys
from collections.abc import Iterable, Iterator, Sequence
from typing import TextIO

from .vector4 import Vector4

SIZE = 4
MAX_RAND_NUMBER = 19
SINGULAR_TOLERANCE = 0.0001


class SingularMatrixError(ArithmeticError):
    """Raised when a matrix has no inverse."""


def determinant3x3(m: Sequence[Sequence[float]]) -> float:
    """Return the determinant of a 3x3 matrix given as rows."""
    return (
        m[0][0] * (m[1][1] * m[2][2] - m[1][2] * m[2][1])
        - m[0][1] * (m[1][0] * m[2][2] - m[1][2] * m[2][0])
        + m[0][2] * (m[1][0] * m[2][1] - m[1][1] * m[2][0])
    )


def random_int(rng: _random.Random | None = None) -> int:
    """Return a random integer between -9 and 9 inclusive."""
    source = rng if rng is not None else _random
    return source.randrange(MAX_RAND_NUMBER) - 9


def _minor(rows: list[list[float]], skip_row: int, skip_col: int) -> list[list[float]]:
    return [
        [value for c, value in enumerate(row) if c != skip_col]
        for r, row in enumerate(rows)
        if r != skip_row
    ]


def _check_index(index: int) -> int:
    if not isinstance(index, int) or isinstance(index, bool):
        raise TypeError(f"matrix index must be an int, not {type(index).__name__}")
    if not 0 <= index < SIZE:
        raise IndexError(f"matrix index {index} out of range 0..{SIZE - 1}")
    return index


class Matrix4:
    """A 4x4 matrix of floats, indexed as ``matrix[row, col]`` from zero."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, rows: Iterable[Iterable[float]] | None = None) -> None:
        if rows is None:
            self._rows = [[0.0] * SIZE for _ in range(SIZE)]
            return
        parsed = [[float(value) for value in row] for row in rows]
        if len(parsed) != SIZE or any(len(row) != SIZE for row in parsed):
            raise ValueError("a Matrix4 needs exactly 4 rows of 4 values")
        self._rows = parsed

    def __getitem__(self, key: tuple[int, int]) -> float:
        row, col = key
        return self._rows[_check_index(row)][_check_index(col)]

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        row, col = key
        self._rows[_check_index(row)][_check_index(col)] = float(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix4):
            return NotImplemented
        return self._rows == other._rows

    def __iter__(self) -> Iterator[tuple[float, ...]]:
        return (tuple(row) for row in self._rows)

    def __repr__(self) -> str:
        return f"Matrix4({[list(row) for row in self._rows]!r})"

    def __str__(self) -> str:
        lines = [
            "".join(f"{' ' if value < 0 else '  '}{value:g}" for value in row)
            for row in self._rows
        ]
        return "\n".join(lines) + "\n\n"

    def copy(self) -> Matrix4:
        """Return an independent copy."""
        return Matrix4(self._rows)

    @classmethod
    def identity(cls) -> Matrix4:
        """Return the identity matrix."""
        return cls([[1.0 if r == c else 0.0 for c in range(SIZE)] for r in range(SIZE)])

    @classmethod
    def zero(cls) -> Matrix4:
        """Return the matrix of all zeros."""
        return cls()

    @classmethod
    def random(cls, rng: _random.Random | None = None) -> Matrix4:
        """Return a matrix of random integers between -9 and 9."""
        return cls([[random_int(rng) for _ in range(SIZE)] for _ in range(SIZE)])

    def equals(self, other: Matrix4) -> bool:
        """Return whether every element matches ``other`` exactly."""
        return self == other

    def add(self, other: Matrix4) -> Matrix4:
        """Return the element-wise sum."""
        return Matrix4(
            [[a + b for a, b in zip(ra, rb)] for ra, rb in zip(self._rows, other._rows)]
        )

    def subtract(self, other: Matrix4) -> Matrix4:
        """Return the element-wise difference."""
        return Matrix4(
            [[a - b for a, b in zip(ra, rb)] for ra, rb in zip(self._rows, other._rows)]
        )

    def scale(self, scalar: float) -> Matrix4:
        """Return the matrix with every element multiplied by ``scalar``."""
        return Matrix4([[value * scalar for value in row] for row in self._rows])

    def multiply(self, other: Matrix4) -> Matrix4:
        """Return the matrix product ``self * other``."""
        columns = list(zip(*other._rows))
        return Matrix4(
            [[sum(a * b for a, b in zip(row, col)) for col in columns] for row in self._rows]
        )

    def transpose(self) -> Matrix4:
        """Return the transpose."""
        return Matrix4(zip(*self._rows))

    def determinant(self) -> float:
        """Return the determinant by cofactor expansion along the first row."""
        first = self._rows[0]
        return sum(
            (1 if col % 2 == 0 else -1) * first[col] * determinant3x3(_minor(self._rows, 0, col))
            for col in range(SIZE)
        )

    def inverse(self) -> Matrix4:
        """Return the inverse; raise SingularMatrixError if the determinant is near zero."""
        det = self.determinant()
        if abs(det) < SINGULAR_TOLERANCE:
            raise SingularMatrixError(f"matrix is not invertible (determinant {det:g})")
        inv_det = 1.0 / det
        cofactors = [
            [
                (1 if (r + c) % 2 == 0 else -1) * determinant3x3(_minor(self._rows, r, c))
                for c in range(SIZE)
            ]
            for r in range(SIZE)
        ]
        return Matrix4([[cofactors[c][r] * inv_det for c in range(SIZE)] for r in range(SIZE)])

    def print_matrix(self, file: TextIO | None = None) -> None:
        """Write the matrix, one row per line, followed by a blank line."""
        (file if file is not None else sys.stdout).write(str(self))


def scale_uniform(scale: float, vector: Vector4) -> tuple[Matrix4, Vector4]:
    """Return a uniform scaling matrix and the vector, unchanged."""
    return scale_non_uniform(scale, scale, scale, vector)


def scale_non_uniform(
    scale_x: float, scale_y: float, scale_z: float, vector: Vector4
) -> tuple[Matrix4, Vector4]:
    """Return a per-axis scaling matrix and the vector, unchanged."""
    matrix = Matrix4.identity()
    matrix[0, 0] = scale_x
    matrix[1, 1] = scale_y
    matrix[2, 2] = scale_z
    matrix[3, 3] = 1.0
    return matrix, vector


def translation(
    translate_x: float, translate_y: float, translate_z: float, vector: Vector4
) -> tuple[Matrix4, Vector4]:
    """Return a translation matrix and the vector, unchanged."""
    matrix = Matrix4.identity()
    matrix[0, 3] = translate_x
    matrix[1, 3] = translate_y
    matrix[2, 3] = translate_z
    matrix[3, 3] = 1.0
    return matrix, vector