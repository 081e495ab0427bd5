"""Self-check scenarios for identity, zero, equality, addition and subtraction."""

from __future__ import annotations

import random as _random
import sys
from typing import TextIO

from .matrix4 import Matrix4
from .selftest_checks import (
    Tally,
    check_add,
    check_equals,
    check_identity,
    check_subtract,
    check_zero,
)


class _Writer:
    """Small helper that writes lines and matrices to one stream."""

    def __init__(self, file: TextIO | None) -> None:
        self.out = file if file is not None else sys.stdout

    def say(self, text: str = "") -> None:
        self.out.write(text + "\n")

    def show(self, label: str | None, matrix: Matrix4) -> None:
        if label is not None:
            self.out.write(label + "\n")
        matrix.print_matrix(self.out)


def identity_scenarios(
    tally: Tally, rng: _random.Random | None = None, file: TextIO | None = None
) -> None:
    """Check that a zero matrix and a random matrix both reset to identity."""
    w = _Writer(file)
    w.say("Perform Identity Function Test Scenarios: \n")

    w.say("Zero Matrix : \n")
    matrix = Matrix4.zero()
    w.show(None, matrix)
    valid, matrix = check_identity(tally, matrix)
    w.show(None, matrix)
    if valid:
        w.say("Identity function correctly resets any matrix to identity. PASSED.\n")
    else:
        w.say("Identity function failed to reset a non-identity matrix. FAILED.\n")

    w.say("Randomized Matrix : \n")
    matrix = Matrix4.random(rng)
    w.show(None, matrix)
    valid, matrix = check_identity(tally, matrix)
    w.show(None, matrix)
    if valid:
        w.say("Identity function correctly resets any matrix to identity. PASSED.\n")
    else:
        w.say("Identity function failed to reset a non-identity matrix. FAILED.\n")

    w.say("Identity Matrix Tests Completed.\n")


def zero_scenarios(
    tally: Tally, rng: _random.Random | None = None, file: TextIO | None = None
) -> None:
    """Check that a zero matrix and a random matrix both reset to zero."""
    w = _Writer(file)
    w.say("Perform Zero Function Test Scenarios: \n")

    w.say("Zero Matrix : \n")
    matrix = Matrix4.zero()
    w.show(None, matrix)
    valid, matrix = check_zero(tally, matrix)
    w.show(None, matrix)
    if valid:
        w.say("Zero Function correctly resets any matrix to identity. PASSED.\n")
    else:
        w.say("Zero Function failed to reset a non-identity matrix. FAILED.\n")

    w.say("Randomized Matrix : \n")
    matrix = Matrix4.random(rng)
    w.show(None, matrix)
    valid, matrix = check_zero(tally, matrix)
    w.show(None, matrix)
    if valid:
        w.say("Zero Function correctly resets any matrix to identity. PASSED.\n")
    else:
        w.say("Zero Function failed to reset a non-identity matrix. FAILED.\n")

    w.say("Zero Function Matrix Tests Completed.\n")


def equals_scenarios(
    tally: Tally, rng: _random.Random | None = None, file: TextIO | None = None
) -> None:
    """Check equality on identical identities, differing matrices and a copied matrix."""
    w = _Writer(file)
    w.say("Perform Equals Function Test Scenarios: \n")

    w.say("Test Case 1: Two Identity Matrices : \n")
    first = Matrix4.identity()
    second = Matrix4.identity()
    w.show("Matrix 1:", first)
    w.show("Matrix 2:", second)
    if check_equals(tally, first, second):
        w.say("Equals function correctly identified two identical identity matrices. PASSED.\n")
    else:
        w.say("Equals function failed to identify two identical identity matrices. FAILED.\n")

    w.say("Test Case 2: Identity vs Randomized Matrix : \n")
    first = Matrix4.identity()
    second = Matrix4.random(rng)
    w.show("Matrix 1 (Identity):", first)
    w.show("Matrix 2 (Random):", second)
    if not check_equals(tally, first, second):
        w.say("Equals function correctly identified different matrices. PASSED.\n")
        # Unequal matrices are the expected outcome here, so count it as a pass.
        tally.passed += 1
    else:
        w.say("Equals function failed to distinguish different matrices. FAILED.\n")

    w.say("Test Case 3: Two Identical Random Matrices : \n")
    first = Matrix4.random(rng)
    second = first.copy()
    w.show("Matrix 1 (Random):", first)
    w.show("Matrix 2 (Copy of Matrix 1):", second)
    if check_equals(tally, first, second):
        w.say("Equals function correctly identified two identical random matrices. PASSED.\n")
    else:
        w.say("Equals function failed to identify two identical random matrices. FAILED.\n")

    w.say("Equals Matrix Tests Completed.\n")


def add_scenarios(
    tally: Tally, rng: _random.Random | None = None, file: TextIO | None = None
) -> None:
    """Check addition on zero matrices, identity plus random, and a doubled matrix."""
    w = _Writer(file)
    w.say("Perform Add Function Test Scenarios: \n")
    result = Matrix4.zero()

    w.say("Test Case 1: Two Zero Matrices : \n")
    first = Matrix4.zero()
    second = Matrix4.zero()
    w.show("Matrix 1:", first)
    w.show("Matrix 2:", second)
    valid, outcome = check_add(tally, first, second)
    if outcome is not None:
        result = outcome
    w.show("Result:", result)
    if valid:
        w.say("Add function correctly added two zero matrices. PASSED.\n")
    else:
        w.say("Add function failed to correctly add two zero matrices. FAILED.\n")

    w.say("Test Case 2: Identity + Randomized Matrix : \n")
    first = Matrix4.identity()
    second = Matrix4.random(rng)
    w.show("Matrix 1 (Identity):", first)
    w.show("Matrix 2 (Random):", second)
    valid, outcome = check_add(tally, first, second)
    if outcome is not None:
        result = outcome
    w.show("Result:", result)
    if valid:
        w.say("Add function correctly added identity and random matrices. PASSED.\n")
    else:
        w.say("Add function failed to correctly add identity and random matrices. FAILED.\n")

    w.say("Test Case 3: Two Identical Random Matrices : \n")
    first = Matrix4.random(rng)
    second = first.copy()
    w.show("Matrix 1 (Random):", first)
    w.show("Matrix 2 (Copy of Matrix 1):", second)
    valid, outcome = check_add(tally, first, second)
    if outcome is not None:
        result = outcome
    w.show("Result:", result)
    if valid:
        w.say("Add function correctly added two identical random matrices. PASSED.\n")
    else:
        w.say("Add function failed to correctly add two identical random matrices. FAILED.\n")

    w.say("Add Matrix Tests Completed.\n")


def subtract_scenarios(
    tally: Tally, rng: _random.Random | None = None, file: TextIO | None = None
) -> None:
    """Check subtraction on zero matrices and random minus identity."""
    w = _Writer(file)
    w.say("Perform Subtract Function Test Scenarios: \n")
    result = Matrix4.zero()

    w.say("Test Case 1: Two Zero Matrices : \n")
    first = Matrix4.zero()
    second = Matrix4.zero()
    w.show("Matrix 1:", first)
    w.show("Matrix 2:", second)
    valid, outcome = check_subtract(tally, first, second)
    if outcome is not None:
        result = outcome
    w.show("Result:", result)
    if valid:
        w.say("Subtract function correctly subtracted two zero matrices. PASSED.\n")
    else:
        w.say("Subtract function failed to subtract two zero matrices. FAILED.\n")

    w.say("Test Case 2: Random - Identity Matrix : \n")
    first = Matrix4.random(rng)
    second = Matrix4.identity()
    w.show("Matrix 1 (Random):", first)
    w.show("Matrix 2 (Identity):", second)
    valid, outcome = check_subtract(tally, first, second)
    if outcome is not None:
        result = outcome
    w.show("Result:", result)
    if valid:
        w.say("Subtract function correctly subtracted identity from random matrix. PASSED.\n")
    else:
        w.say("Subtract function failed to subtract identity from random matrix. FAILED.\n")

    w.say("Subtract Matrix Tests Completed.\n")