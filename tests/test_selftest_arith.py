import io
import random

from matrix4calc.selftest_arith import (
    determinant_scenarios,
    inverse_scenarios,
    matrix_multiply_scenarios,
    run_all_scenarios,
    scalar_multiply_scenarios,
    transpose_scenarios,
)
from matrix4calc.selftest_checks import Tally


def _run(scenario, seed=1):
    tally = Tally()
    out = io.StringIO()
    scenario(tally, random.Random(seed), out)
    return tally, out.getvalue()


def test_scalar_multiply_scenarios_pass_and_report_scalars():
    tally, text = _run(scalar_multiply_scenarios)
    assert (tally.performed, tally.passed) == (2, 2)
    assert "Scalar: 2\n" in text
    assert "Scalar: 0\n" in text
    assert text.count("PASSED.") == 2
    assert text.endswith("Scalar Multiply Tests Completed.\n\n")


def test_matrix_multiply_scenarios_pass():
    tally, text = _run(matrix_multiply_scenarios)
    assert tally.passed == tally.performed == 2
    assert "FAILED" not in text
    assert text.startswith("Perform Matrix Multiply Function Test Scenarios: \n")


def test_transpose_scenarios_pass():
    tally, text = _run(transpose_scenarios)
    assert tally.passed == tally.performed == 2
    assert "Transpose correctly transposed random matrix. PASSED." in text


def test_determinant_scenarios_report_values():
    tally, text = _run(determinant_scenarios)
    assert tally.passed == tally.performed == 2
    assert "Determinant: 1\n" in text
    assert "Determinant: 0\n" in text


def test_inverse_scenarios_count_passes_but_word_zero_case_as_failure():
    tally, text = _run(inverse_scenarios)
    assert tally.passed == tally.performed == 2
    assert "Inverse correctly calculated for identity matrix. PASSED." in text
    assert "Inverse failed to reject non-invertible zero matrix. FAILED." in text


def test_scenarios_accumulate_in_one_tally():
    tally = Tally()
    out = io.StringIO()
    rng = random.Random(3)
    transpose_scenarios(tally, rng, out)
    determinant_scenarios(tally, rng, out)
    assert tally.performed == 4
    assert tally.failed == 0


def test_scenario_writes_to_stdout_by_default(capsys):
    tally = Tally()
    determinant_scenarios(tally)
    captured = capsys.readouterr().out
    assert "Determinant Tests Completed." in captured
    assert tally.performed == 2


def test_run_all_scenarios_is_deterministic_for_a_seed():
    first = io.StringIO()
    second = io.StringIO()
    run_all_scenarios(random.Random(11), first)
    run_all_scenarios(random.Random(11), second)
    assert first.getvalue() == second.getvalue()