import io

import pytest

from bloa.value import ValueType, format_value, print_value, value_type


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, ValueType.NIL),
        (True, ValueType.BOOL),
        (False, ValueType.BOOL),
        (0, ValueType.INT),
        (1.5, ValueType.FLOAT),
        ("s", ValueType.STRING),
    ],
)
def test_value_type(value, expected):
    assert value_type(value) is expected


@pytest.mark.parametrize("value", [[], {}, object(), b"bytes"])
def test_value_type_rejects_foreign_objects(value):
    with pytest.raises(TypeError):
        value_type(value)


def test_format_booleans_and_nil():
    assert format_value(True) == "true"
    assert format_value(False) == "false"
    assert format_value(None) == "nil"


@pytest.mark.parametrize("value, expected", [(42, "42"), (-7, "-7"), (0, "0")])
def test_format_integers(value, expected):
    assert format_value(value) == expected


def test_format_floats():
    assert format_value(2.5) == "2.5"
    assert format_value(3.0) == "3"
    assert format_value(1e20) == "1e+20"


def test_format_string_is_quoted():
    assert format_value("hi") == '"hi"'
    assert format_value("") == '""'


def test_format_unknown():
    assert format_value(object()) == "unknown"


@pytest.mark.parametrize("value", [None, True, 12, 0.25, "text"])
def test_print_value_writes_format_without_newline(value):
    buf = io.StringIO()
    print_value(value, buf)
    assert buf.getvalue() == format_value(value)
    assert not buf.getvalue().endswith("\n")


def test_print_value_defaults_to_stdout(capsys):
    print_value(True)
    assert capsys.readouterr().out == "true"