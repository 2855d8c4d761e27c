"""Runtime values of the language and their printed form.

Values are plain Python objects: ``None`` is nil, and ``bool``, ``int``,
``float`` and ``str`` carry booleans, integers, floats and strings.
"""

from __future__ import annotations

import sys
from enum import Enum
from typing import TextIO, Union

Value = Union[None, bool, int, float, str]


class ValueType(Enum):
    """The kinds of value the language knows."""

    NIL = "nil"
    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    STRING = "string"


def value_type(value: object) -> ValueType:
    """Return the kind of a language value, or raise TypeError."""
    if value is None:
        return ValueType.NIL
    # bool is a subclass of int, so it has to be checked first.
    if isinstance(value, bool):
        return ValueType.BOOL
    if isinstance(value, int):
        return ValueType.INT
    if isinstance(value, float):
        return ValueType.FLOAT
    if isinstance(value, str):
        return ValueType.STRING
    raise TypeError(f"not a language value: {value!r}")


def format_value(value: object) -> str:
    """Return the text that printing ``value`` produces."""
    try:
        kind = value_type(value)
    except TypeError:
        return "unknown"
    if kind is ValueType.BOOL:
        return "true" if value else "false"
    if kind is ValueType.NIL:
        return "nil"
    if kind is ValueType.INT:
        return "%d" % value
    if kind is ValueType.FLOAT:
        return "%g" % value
    return f'"{value}"'


def print_value(value: object, file: TextIO | None = None) -> None:
    """Write the printed form of ``value`` to ``file`` (stdout by default)."""
    out = sys.stdout if file is None else file
    out.write(format_value(value))