# matrix4calc

Arithmetic on 4x4 matrices, together with a small calculator that reads two
matrices and a scalar from a text file and prints a fixed series of results.

## Installing

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## The calculator

    matrix4calc [INPUT]

`INPUT` defaults to `Input/Input.txt`. The command prints the scalar it read,
then works through the questions in order: the determinant, transpose and
inverse of A, A times the scalar, A + B, A - B, A * B, B * A, and the identity
matrices of A and B. Each question shows the matrices it uses before its
result.

The input file holds four rows of matrix A, one line that is skipped, four
rows of matrix B, another line that is skipped, and then the scalar:

    1 2 3 4
    5 6 7 8
    9 10 11 12
    13 14 15 16

    2 0 0 0
    0 2 0 0
    0 0 2 0
    0 0 0 2

    3

Each matrix row is four numbers separated by whitespace. Lines after the
scalar are ignored.

- If the file does not exist, a warning goes to standard error and the report
  is printed for two zero matrices and a scalar of 0.
- If the file is malformed (too few lines, a row without exactly four numbers,
  or something that is not a number), an error goes to standard error and the
  command exits with status 1.
- If A has no inverse (determinant within 0.0001 of zero), question 3 prints
  `Matrix A is not invertible.` instead of a matrix.

## Using the library

```python
from matrix4calc.matrix4 import Matrix4, SingularMatrixError

a = Matrix4([[1, 2, 0, 0], [0, 1, 0, 0], [0, 0, 1, 0], [0, 0, 0, 1]])
b = Matrix4.identity()

print(a.determinant())   # 1.0
print(a[0, 1])           # 2.0
print(a.transpose())
print(a.add(b))
print(a.multiply(b))

try:
    Matrix4.zero().inverse()
except SingularMatrixError:
    print("no inverse")
```

`matrix4calc.matrix4.Matrix4`:

- Built from four rows of four numbers, or all zeros when given nothing;
  `Matrix4.identity()`, `Matrix4.zero()` and `Matrix4.random(rng)` (integers
  from -9 to 9) build the common ones.
- Elements are addressed with 0-based `(row, column)` pairs, as in `a[0, 1]`;
  iterating yields the rows as tuples.
- `add`, `subtract`, `scale`, `multiply`, `transpose`, `determinant` and
  `inverse` each return a new result and leave the matrix unchanged.
  `inverse` raises `SingularMatrixError` when the determinant is within 0.0001
  of zero.
- `equals` and `==` compare every element exactly.
- `print_matrix(file)` writes the matrix one row per line, followed by a blank
  line.

The same module has `determinant3x3(m)`, `random_int(rng)`, and the
transformation builders `scale_uniform`, `scale_non_uniform` and
`translation`. Each builder returns a pair: the transformation matrix and the
`matrix4calc.vector4.Vector4` it was given, unchanged.

Other modules:

- `matrix4calc.input_reader`: `parse_row`, `parse_input` and `read_input`
  return an `InputData` (`matrix_a`, `matrix_b`, `scalar`) and raise
  `InputFormatError` on malformed text.
- `matrix4calc.operations`: `AssignmentOperations(matrix_a, matrix_b,
  scalar_value)` with one method per calculator question.
- `matrix4calc.cli`: `report(operations, file)` writes the full report;
  `main(argv)` is the command above.

## Self-checks

`matrix4calc.selftest_checks` holds individual checks of the matrix
operations, each counted in a `Tally` (`performed`, `passed`, `failed`,
`pass_rate`). `matrix4calc.selftest_basic` and `matrix4calc.selftest_arith`
group them into scenarios that write a readable report.
`matrix4calc.selftest_arith.run_all_scenarios(rng, file)` runs every scenario
with the given random generator, writes the report and a summary to `file`
(standard output by default) and returns the final `Tally`.

## What it does not do

- There is no command for the self-checks; call `run_all_scenarios` from
  Python.
- The transformation builders do not apply their matrix to the vector; they
  only return it alongside the matrix.
- Only 4x4 matrices are supported.