"""Reading the two matrices and the scalar from an input file."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path

from .matrix4 import SIZE, Matrix4

DEFAULT_INPUT_PATH = Path("Input") / "Input.txt"

# Line layout: four rows of A, a separator, four rows of B, a separator, the scalar.
_A_ROWS = slice(0, SIZE)
_B_ROWS = slice(SIZE + 1, 2 * SIZE + 1)
_SCALAR_LINE = 2 * SIZE + 2


class InputFormatError(ValueError):
    """Raised when the input text does not hold two matrices and a scalar."""


@dataclass
class InputData:
    """The two matrices and the scalar read from an input file."""

    matrix_a: Matrix4 = field(default_factory=Matrix4.zero)
    matrix_b: Matrix4 = field(default_factory=Matrix4.zero)
    scalar: float = 0.0


def _to_float(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        raise InputFormatError(f"not a number: {text!r}") from None


def parse_row(line: str) -> tuple[float, float, float, float]:
    """Parse one matrix row: four numbers separated by spaces."""
    fields = line.split()
    if len(fields) != SIZE:
        raise InputFormatError(
            f"a matrix row needs {SIZE} numbers, got {len(fields)}: {line!r}"
        )
    first, second, third, fourth = (_to_float(value) for value in fields)
    return first, second, third, fourth


def parse_input(text: str) -> InputData:
    """Parse the full input text into two matrices and a scalar."""
    lines = text.splitlines()
    if len(lines) <= _SCALAR_LINE:
        raise InputFormatError(
            f"input needs at least {_SCALAR_LINE + 1} lines, got {len(lines)}"
        )
    matrix_a = Matrix4(parse_row(line) for line in lines[_A_ROWS])
    matrix_b = Matrix4(parse_row(line) for line in lines[_B_ROWS])
    scalar = _to_float(lines[_SCALAR_LINE].strip())
    return InputData(matrix_a, matrix_b, scalar)


def read_input(path: str | PathLike[str] = DEFAULT_INPUT_PATH) -> InputData:
    """Read and parse the input file at ``path``."""
    return parse_input(Path(path).read_text())