"""The fixed list of operations performed on matrices A and B."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TextIO

from .matrix4 import Matrix4


@dataclass(frozen=True)
class AssignmentOperations:
    """Two matrices and a scalar, with the operations asked of them."""

    matrix_a: Matrix4 = field(default_factory=Matrix4.zero)
    matrix_b: Matrix4 = field(default_factory=Matrix4.zero)
    scalar_value: float = 0.0

    def determinant_a(self) -> float:
        """Return the determinant of A."""
        return self.matrix_a.determinant()

    def transpose_a(self) -> Matrix4:
        """Return the transpose of A."""
        return self.matrix_a.transpose()

    def inverse_a(self) -> Matrix4:
        """Return the inverse of A; raise SingularMatrixError if there is none."""
        return self.matrix_a.inverse()

    def multiply_a_by_scalar(self) -> Matrix4:
        """Return A multiplied by the scalar value."""
        return self.matrix_a.scale(self.scalar_value)

    def a_plus_b(self) -> Matrix4:
        """Return A + B."""
        return self.matrix_a.add(self.matrix_b)

    def a_minus_b(self) -> Matrix4:
        """Return A - B."""
        return self.matrix_a.subtract(self.matrix_b)

    def a_multiply_by_b(self) -> Matrix4:
        """Return the product A * B."""
        return self.matrix_a.multiply(self.matrix_b)

    def b_multiply_by_a(self) -> Matrix4:
        """Return the product B * A."""
        return self.matrix_b.multiply(self.matrix_a)

    def identity_matrix_a(self) -> Matrix4:
        """Return the identity matrix of A's size."""
        return Matrix4.identity()

    def identity_matrix_b(self) -> Matrix4:
        """Return the identity matrix of B's size."""
        return Matrix4.identity()

    def print_matrix_a(self, file: TextIO | None = None) -> None:
        """Write matrix A."""
        self.matrix_a.print_matrix(file if file is not None else sys.stdout)

    def print_matrix_b(self, file: TextIO | None = None) -> None:
        """Write matrix B."""
        self.matrix_b.print_matrix(file if file is not None else sys.stdout)