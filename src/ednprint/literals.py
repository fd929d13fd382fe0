"""
``ednprint.literals``: EDN syntax for scalar values
===================================================

>>> render_literal(None)
'nil'
>>> render_literal('say "hi"\\n')
'"say \\\\"hi\\\\"\\\\n"'
>>> render_literal(Char(" "))
'\\\\space'
>>> render_literal(float("-inf"))
'##-Inf'
"""

from __future__ import annotations

import decimal
import fractions
import math
from typing import Any

from .data import Char, Keyword, Symbol

__all__ = ("render_literal",)

_STRING_ESCAPES = str.maketrans(
    {
        '"': '\\"',
        "\\": "\\\\",
        "\n": "\\n",
        "\t": "\\t",
        "\r": "\\r",
        "\f": "\\f",
        "\b": "\\b",
    }
)

_CHAR_NAMES = {
    "\n": "newline",
    " ": "space",
    "\t": "tab",
    "\b": "backspace",
    "\f": "formfeed",
    "\r": "return",
}


def _float(f: float) -> str:
    if math.isnan(f):
        return "##NaN"
    if math.isinf(f):
        return "##Inf" if f > 0 else "##-Inf"
    return repr(f)


def _decimal(d: decimal.Decimal) -> str:
    if d.is_nan():
        return "##NaN"
    if d.is_infinite():
        return "##Inf" if d > 0 else "##-Inf"
    return f"{d}M"


def render_literal(value: Any) -> str:
    """The EDN text for a scalar value

    Raises:
      TypeError: if *value* is not a scalar.
    """
    # Order matters: bool is a subclass of int and Char one of str.
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return int.__repr__(value)
    if isinstance(value, float):
        return _float(value)
    if isinstance(value, fractions.Fraction):
        if value.denominator == 1:
            return str(value.numerator)
        return f"{value.numerator}/{value.denominator}"
    if isinstance(value, decimal.Decimal):
        return _decimal(value)
    if isinstance(value, Char):
        return "\\" + _CHAR_NAMES.get(value, str.__str__(value))
    if isinstance(value, str):
        return '"' + value.translate(_STRING_ESCAPES) + '"'
    if isinstance(value, Keyword | Symbol):
        return str(value)
    raise TypeError(f"Not a scalar: {type(value).__name__}")
