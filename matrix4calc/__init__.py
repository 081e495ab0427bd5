"""4x4 matrix arithmetic, an input-file calculator and scenario self-checks."""

__version__ = "1.0.0"
__all__ = [
    "vector4",
    "matrix4",
    "input_reader",
    "operations",
    "cli",
    "selftest_checks",
    "selftest_basic",
    "selftest_arith",
]