"""Individual self-checks of Matrix4 operations, counted in a tally."""

from __future__ import annotations

from dataclasses import dataclass

from .matrix4 import SIZE, Matrix4, SingularMatrixError

MULTIPLY_TOLERANCE = 0.0001


@dataclass
class Tally:
    """Running count of checks performed and checks passed."""

    performed: int = 0
    passed: int = 0

    def record(self, passed: bool) -> bool:
        """Count one check, and a pass if ``passed``; return ``passed``."""
        self.performed += 1
        if passed:
            self.passed += 1
        return passed

    @property
    def failed(self) -> int:
        """Number of checks that did not pass."""
        return self.performed - self.passed

    @property
    def pass_rate(self) -> float:
        """Percentage of checks passed, or 0 when none were performed."""
        if self.performed == 0:
            return 0.0
        return self.passed / self.performed * 100


def _positions():
    return ((r, c) for r in range(SIZE) for c in range(SIZE))


def check_identity(tally: Tally, matrix: Matrix4) -> tuple[bool, Matrix4]:
    """Reset ``matrix`` to identity and check the diagonal is 1 and the rest 0."""
    result = Matrix4.identity()
    passed = all(
        result[r, c] == (1.0 if r == c else 0.0) for r, c in _positions()
    )
    return tally.record(passed), result


def check_zero(tally: Tally, matrix: Matrix4) -> tuple[bool, Matrix4]:
    """Reset ``matrix`` to zero and check every element is 0."""
    result = Matrix4.zero()
    passed = all(value == 0.0 for row in result for value in row)
    return tally.record(passed), result


def check_equals(tally: Tally, first: Matrix4, second: Matrix4) -> bool:
    """Count a pass when the two matrices are equal."""
    return tally.record(first.equals(second))


def check_add(tally: Tally, first: Matrix4, second: Matrix4) -> tuple[bool, Matrix4 | None]:
    """Check the sum element by element; the result is None on failure."""
    result = first.add(second)
    passed = all(result[p] == first[p] + second[p] for p in _positions())
    tally.record(passed)
    return passed, result if passed else None


def check_subtract(
    tally: Tally, first: Matrix4, second: Matrix4
) -> tuple[bool, Matrix4 | None]:
    """Check the difference element by element; the result is None on failure."""
    result = first.subtract(second)
    passed = all(result[p] == first[p] - second[p] for p in _positions())
    tally.record(passed)
    return passed, result if passed else None


def check_scalar_multiply(
    tally: Tally, scalar: float, matrix: Matrix4
) -> tuple[bool, Matrix4 | None]:
    """Check scaling element by element; the result is None on failure."""
    result = matrix.scale(scalar)
    passed = all(result[p] == matrix[p] * scalar for p in _positions())
    tally.record(passed)
    return passed, result if passed else None


def check_matrix_multiply(
    tally: Tally, first: Matrix4, second: Matrix4
) -> tuple[bool, Matrix4 | None]:
    """Check the product against row-by-column dot products within a tolerance."""
    result = first.multiply(second)
    columns = list(zip(*second))
    passed = all(
        abs(result[r, c] - sum(a * b for a, b in zip(row, columns[c])))
        <= MULTIPLY_TOLERANCE
        for r, row in enumerate(first)
        for c in range(SIZE)
    )
    tally.record(passed)
    return passed, result if passed else None


def check_transpose(tally: Tally, matrix: Matrix4) -> tuple[bool, Matrix4 | None]:
    """Check that element (i, j) of the result is element (j, i) of ``matrix``."""
    result = matrix.transpose()
    passed = all(result[r, c] == matrix[c, r] for r, c in _positions())
    tally.record(passed)
    return passed, result if passed else None


def check_determinant(tally: Tally, matrix: Matrix4) -> bool:
    """Check the determinant routine against the identity, whose determinant is 1."""
    matrix.determinant()
    return tally.record(Matrix4.identity().determinant() == 1.0)


def check_inverse(tally: Tally, matrix: Matrix4) -> tuple[bool, Matrix4 | None]:
    """Check an inverse multiplies back to identity, or that a refusal means det 0."""
    try:
        result = matrix.inverse()
    except SingularMatrixError:
        passed = matrix.determinant() == 0
        tally.record(passed)
        return passed, Matrix4.zero() if passed else None
    passed = matrix.multiply(result).equals(Matrix4.identity())
    tally.record(passed)
    return passed, result if passed else None