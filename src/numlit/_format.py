"""Rendering of literals in a base or notation.

Public API
----------
format_literal(literal, base, prefixed) → str
format_scientific(literal)             → str

Integers render in any base, digits upper case. Floats render in decimal
only. Asking for a float in another base raises `UnsupportedConversion`;
hosts that convert text treat that as a no-op and keep the original text.
"""

__all__ = ["format_literal", "format_scientific"]

import decimal
import math

from ._error import UnsupportedConversion
from ._literal import Base, LiteralType, decimal_digits


_DIGIT_FORMATS = {
    Base.BINARY: "b",
    Base.OCTAL: "o",
    Base.HEXADECIMAL: "X",
}


def format_literal(literal, base=None, prefixed=False):
    """Render a literal in the requested base.

    Args:
        literal: (Literal) Literal to render
        base: (Base | None) Target base, defaults to the literal's own base
        prefixed: (bool) Prepend the canonical prefix of the base

    Returns:
        (str) Rendered literal. Negative integers put the sign before the
        prefix ("-0xA").

    Raises:
        UnsupportedConversion: A float was requested in a non-decimal base
    """
    base = literal.base if base is None else Base(base)

    if literal.type is LiteralType.FLOAT:
        if base is not Base.DECIMAL:
            raise UnsupportedConversion(
                f"Float literal '{literal.text}' has no {base.name.lower()} form",
                literal.text,
            )
        return repr(literal.value)

    value = literal.value
    if base is Base.DECIMAL:
        digits = decimal_digits(abs(value))
    else:
        digits = format(abs(value), _DIGIT_FORMATS[base])
    sign = "-" if value < 0 else ""
    if prefixed:
        return f"{sign}{base.prefix}{digits}"
    return f"{sign}{digits}"


def format_scientific(literal):
    """Render a literal in exponential notation.

    Integers have no separate scientific form and render as decimal digits.
    Floats render with the shortest mantissa that round trips, an `e`
    marker and a signed exponent: 3.14 → "3.14e+0", 6.022e23 → "6.022e+23".

    Args:
        literal: (Literal) Literal to render

    Returns:
        (str) Rendered literal
    """
    if literal.type is LiteralType.INTEGER:
        return decimal_digits(literal.value)
    return _exponential(literal.value)


def _exponential(value):
    """Shortest exponential text of a float."""
    if not math.isfinite(value):
        return repr(value)
    number = decimal.Decimal(repr(value))
    sign, digits, _ = number.as_tuple()
    significant = "".join(str(digit) for digit in digits).lstrip("0").rstrip("0")
    if not significant:
        return f"{'-' if sign else ''}0e+0"
    exponent = number.adjusted()
    mantissa = significant[0]
    if len(significant) > 1:
        mantissa += "." + significant[1:]
    return f"{'-' if sign else ''}{mantissa}e{exponent:+d}"
