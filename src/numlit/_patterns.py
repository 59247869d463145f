"""Regular expressions of the default literal grammar.

Two families of patterns live here:

- Recognizers: applied with `fullmatch` to text whose grouping separators
  were already removed. Each exposes a `digits` group holding the payload
  without prefix, and a `sign` group that is empty for unsigned grammars.
- Boundary patterns: applied with `finditer`/`search` over surrounding
  text to locate literal shaped spans. They may match text the recognizers
  later reject, the recognizers have the final word.

Digits are spelled `[0-9]` rather than `\\d` so other unicode digits are not
taken for literals.
"""

__all__ = [
    "SEPARATORS",
    "binary_integer",
    "octal_integer",
    "decimal_integer",
    "hexadecimal_integer",
    "decimal_float",
    "boundary",
]

import re


# Grouping characters removed before recognition
SEPARATORS = ",_"

_SIGN = r"(?P<sign>[-+]?)"
_NO_SIGN = r"(?P<sign>)"

_BINARY = r"0[bB](?P<digits>[01]+)"
_OCTAL = r"0[oO](?P<digits>[0-7]+)"
_DECIMAL = r"(?P<digits>[0-9]+)"
_HEXADECIMAL = r"0[xX](?P<digits>[0-9a-fA-F]+)"
_FLOAT = r"(?P<digits>[0-9]+(?:\.[0-9]+)?(?:[eE][-+]?[0-9]+)?)"

# Literal shaped words, separators included
_WORD = (
    r"\b0[bB][01](?:_?[01])*\b"
    r"|\b0[oO][0-7](?:_?[0-7])*\b"
    r"|\b0[xX][0-9a-fA-F](?:_?[0-9a-fA-F])*\b"
    r"|\b[0-9]+(?:[_,]?[0-9]+)*(?:\.[0-9]+(?:[_,]?[0-9]+)*)?(?:[eE][-+]?[0-9]+)?\b"
)

# A sign only belongs to the literal when it does not follow a word,
# so "x-5" yields "5".
_LEADING_SIGN = r"(?:(?<![\w.])[-+])?"


def _recognizer(body, signed):
    return re.compile((_SIGN if signed else _NO_SIGN) + body)


def binary_integer(signed=False):
    return _recognizer(_BINARY, signed)


def octal_integer(signed=False):
    return _recognizer(_OCTAL, signed)


def decimal_integer(signed=False):
    return _recognizer(_DECIMAL, signed)


def hexadecimal_integer(signed=False):
    return _recognizer(_HEXADECIMAL, signed)


def decimal_float(signed=False):
    """Decimal float, with optional fraction and exponent.

    Plain digits also match. Rule order puts decimal integers first so
    those never reach this pattern.
    """
    return _recognizer(_FLOAT, signed)


def boundary(signed=False):
    """Pattern locating literal shaped spans in surrounding text.

    Args:
        signed: (bool) Include a leading sign in the span

    Returns:
        (re.Pattern) Compiled boundary pattern
    """
    if signed:
        return re.compile(f"{_LEADING_SIGN}(?:{_WORD})")
    return re.compile(_WORD)
