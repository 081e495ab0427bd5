"""Command that reads the input file and prints every operation's result."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from .input_reader import DEFAULT_INPUT_PATH, InputData, InputFormatError, read_input
from .matrix4 import SingularMatrixError
from .operations import AssignmentOperations


def report(operations: AssignmentOperations, file: TextIO | None = None) -> None:
    """Write the full question-by-question report for ``operations``."""
    out = file if file is not None else sys.stdout

    def say(text: str = "") -> None:
        out.write(text + "\n")

    def show_a() -> None:
        say("Matrix A:")
        operations.print_matrix_a(out)

    def show_b() -> None:
        say("Matrix B:")
        operations.print_matrix_b(out)

    say("Question 1) Determinant of A:")
    show_a()
    say(f"Determinant of A: {operations.determinant_a():g}\n")

    say("Question 2) Transpose of A:")
    show_a()
    say("Transpose of A:")
    operations.transpose_a().print_matrix(out)
    say("\n")

    say("Question 3) Inverse of A:")
    show_a()
    say("Inverse of A:")
    try:
        operations.inverse_a().print_matrix(out)
    except SingularMatrixError:
        say("Matrix A is not invertible.")
    say("\n")

    say("Question 4) Multiply A by scalar Value:")
    show_a()
    say("A * Scalar:")
    operations.multiply_a_by_scalar().print_matrix(out)
    say("\n")

    say("Question 5) Sum of A + B:")
    show_a()
    show_b()
    say("A + B:")
    operations.a_plus_b().print_matrix(out)
    say("\n")

    say("Question 6) Difference of A - B:")
    show_a()
    show_b()
    say("A - B:")
    operations.a_minus_b().print_matrix(out)
    say("\n")

    say("Question 7) Product of A * B:")
    show_a()
    show_b()
    say("A * B:")
    operations.a_multiply_by_b().print_matrix(out)
    say("\n")

    say("Question 8) Product of B * A:")
    show_b()
    show_a()
    say("B * A:")
    operations.b_multiply_by_a().print_matrix(out)
    say("\n")

    say("Question 9a) Identity of A:")
    show_a()
    say("A Identity:")
    operations.identity_matrix_a().print_matrix(out)
    say("\n")

    say("Question 9b) Identity of B:")
    show_b()
    say("B Identity:")
    operations.identity_matrix_b().print_matrix(out)
    say("\n")


def main(argv: list[str] | None = None) -> int:
    """Read the input file and print the report; return the exit status."""
    parser = argparse.ArgumentParser(
        description="Run the matrix operations on two 4x4 matrices and a scalar."
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=str(DEFAULT_INPUT_PATH),
        help="input file (default: %(default)s)",
    )
    args = parser.parse_args(argv)

    try:
        data = read_input(args.input)
    except FileNotFoundError:
        print(f"input file not found: {args.input}; using zero matrices", file=sys.stderr)
        data = InputData()
    except InputFormatError as error:
        print(f"invalid input file {args.input}: {error}", file=sys.stderr)
        return 1
    else:
        print(f"{data.scalar:g}")

    report(AssignmentOperations(data.matrix_a, data.matrix_b, data.scalar))
    return 0


if __name__ == "__main__":
    sys.exit(main())