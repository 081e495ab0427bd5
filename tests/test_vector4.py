import io

from matrix4calc.vector4 import Vector4


def test_default_components_are_zero():
    v = Vector4()
    assert (v.x, v.y, v.z, v.w) == (0.0, 0.0, 0.0, 0.0)


def test_str_lists_components():
    assert str(Vector4(1, 2.5, -3, 4)) == "Vector4(1, 2.5, -3, 4)"


def test_display_defaults_to_stdout(capsys):
    Vector4().display()
    assert capsys.readouterr().out == "Vector4(0, 0, 0, 0)\n\n"


def test_equality_by_components():
    assert Vector4(1, 2, 3, 4) == Vector4(1.0, 2.0, 3.0, 4.0)
    assert not Vector4(1, 2, 3, 4) == Vector4(1, 2, 3, 5)