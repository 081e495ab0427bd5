import io

from matrix4calc.cli import main, report
from matrix4calc.matrix4 import Matrix4
from matrix4calc.operations import AssignmentOperations

ROWS_A = [[2, 0, 1, 3], [1, 4, 0, -1], [0, 2, 5, 1], [3, -1, 2, 6]]
ROWS_B = [[1, 2, 0, 0], [0, 1, 3, 0], [4, 0, 1, 2], [0, 5, 0, 1]]

HEADINGS = [
    "Question 1) Determinant of A:",
    "Question 2) Transpose of A:",
    "Question 3) Inverse of A:",
    "Question 4) Multiply A by scalar Value:",
    "Question 5) Sum of A + B:",
    "Question 6) Difference of A - B:",
    "Question 7) Product of A * B:",
    "Question 8) Product of B * A:",
    "Question 9a) Identity of A:",
    "Question 9b) Identity of B:",
]


def _write_input(path, scalar="3"):
    lines = [" ".join(str(v) for v in row) for row in ROWS_A]
    lines += [""] + [" ".join(str(v) for v in row) for row in ROWS_B]
    lines += ["", scalar]
    path.write_text("\n".join(lines) + "\n")


def test_report_lists_questions_in_order():
    ops = AssignmentOperations(Matrix4(ROWS_A), Matrix4(ROWS_B), 2.0)
    out = io.StringIO()
    report(ops, out)
    text = out.getvalue()
    positions = [text.index(heading) for heading in HEADINGS]
    assert positions == sorted(positions)


def test_report_contains_results():
    ops = AssignmentOperations(Matrix4(ROWS_A), Matrix4(ROWS_B), 2.0)
    out = io.StringIO()
    report(ops, out)
    text = out.getvalue()
    assert f"Determinant of A: {ops.determinant_a():g}\n" in text
    assert "A * B:\n" + str(ops.a_multiply_by_b()) in text
    assert "B * A:\n" + str(ops.b_multiply_by_a()) in text
    assert "A Identity:\n" + str(Matrix4.identity()) in text


def test_report_identity_determinant():
    ops = AssignmentOperations(Matrix4.identity(), Matrix4.identity(), 1.0)
    out = io.StringIO()
    report(ops, out)
    assert "Determinant of A: 1\n" in out.getvalue()


def test_report_singular_matrix_does_not_fail():
    out = io.StringIO()
    report(AssignmentOperations(), out)
    text = out.getvalue()
    assert "Inverse of A:\nMatrix A is not invertible." in text
    assert HEADINGS[-1] in text


def test_main_reads_file(tmp_path, capsys):
    path = tmp_path / "Input.txt"
    _write_input(path, "3")
    assert main([str(path)]) == 0
    output = capsys.readouterr().out
    assert output.startswith("3\n")
    assert "Matrix A:\n" + str(Matrix4(ROWS_A)) in output


def test_main_missing_file_uses_zero_matrices(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt")]) == 0
    captured = capsys.readouterr()
    assert "not found" in captured.err
    assert "Matrix A:\n" + str(Matrix4.zero()) in captured.out


def test_main_bad_file_fails(tmp_path, capsys):
    path = tmp_path / "Input.txt"
    path.write_text("1 2 3\n")
    assert main([str(path)]) == 1
    assert "invalid input file" in capsys.readouterr().err