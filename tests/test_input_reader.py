import pytest

from matrix4calc.input_reader import (
    InputData,
    InputFormatError,
    parse_input,
    parse_row,
    read_input,
)
from matrix4calc.matrix4 import Matrix4

ROWS_A = [[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12], [13, 14, 15, 16]]
ROWS_B = [[-1, 0, 2.5, 3], [4, -5, 6, 7], [0, 0, 1, 0], [2, 2, 2, -2]]
SCALAR = 3.5


def _format(rows):
    return [" ".join(str(v) for v in row) for row in rows]


def _text(rows_a=ROWS_A, rows_b=ROWS_B, scalar=SCALAR):
    lines = _format(rows_a) + [""] + _format(rows_b) + ["", str(scalar)]
    return "\n".join(lines) + "\n"


def test_parse_row_reads_four_numbers():
    assert parse_row("1 -2.5 3 4") == (1.0, -2.5, 3.0, 4.0)


def test_parse_row_rejects_wrong_count():
    with pytest.raises(InputFormatError):
        parse_row("1 2 3")
    with pytest.raises(InputFormatError):
        parse_row("1 2 3 4 5")


def test_parse_row_rejects_non_number():
    with pytest.raises(InputFormatError):
        parse_row("1 2 x 4")


def test_parse_input_builds_matrices_and_scalar():
    data = parse_input(_text())
    assert data.matrix_a == Matrix4(ROWS_A)
    assert data.matrix_b == Matrix4(ROWS_B)
    assert data.scalar == SCALAR


def test_parse_input_rows_are_rows():
    data = parse_input(_text())
    assert data.matrix_a[0, 1] == ROWS_A[0][1]
    assert data.matrix_a[1, 0] == ROWS_A[1][0]


def test_parse_input_ignores_separator_content():
    lines = _format(ROWS_A) + ["---"] + _format(ROWS_B) + ["***", "2"]
    data = parse_input("\n".join(lines))
    assert data.scalar == 2.0
    assert data.matrix_b == Matrix4(ROWS_B)


def test_parse_input_too_short():
    lines = _format(ROWS_A) + [""] + _format(ROWS_B)
    with pytest.raises(InputFormatError):
        parse_input("\n".join(lines))


def test_parse_input_bad_scalar():
    lines = _format(ROWS_A) + [""] + _format(ROWS_B) + ["", "abc"]
    with pytest.raises(InputFormatError):
        parse_input("\n".join(lines))


def test_input_format_error_is_value_error():
    with pytest.raises(ValueError):
        parse_input("")


def test_read_input_from_file(tmp_path):
    path = tmp_path / "Input.txt"
    path.write_text(_text())
    data = read_input(path)
    assert data.matrix_a == Matrix4(ROWS_A)
    assert data.scalar == SCALAR


def test_read_input_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_input(tmp_path / "missing.txt")


def test_input_data_defaults_are_zero():
    data = InputData()
    assert data.matrix_a == Matrix4.zero()
    assert data.matrix_b == Matrix4.zero()
    assert data.scalar == 0.0