"""Classified number literals.

A `Literal` is created by a classifier once per recognized token and never
changes afterwards. Integer values are Python ints, so literals of any length
keep their exact magnitude. Float values are Python floats and carry the
usual binary floating point rounding. The two are never mixed.
"""

__all__ = ["LiteralType", "Base", "Literal", "parse_digits", "decimal_digits"]

import decimal
import enum
from dataclasses import dataclass
from typing import Optional


class LiteralType(enum.Enum):
    """Kind of number a literal denotes."""

    INTEGER = "integer"
    FLOAT = "float"


class Base(enum.IntEnum):
    """Radix of an integer literal.

    The enum value is the radix itself, so a Base can be passed anywhere
    an int base is expected (`int(text, Base.HEXADECIMAL)`).
    """

    BINARY = 2
    OCTAL = 8
    DECIMAL = 10
    HEXADECIMAL = 16

    @property
    def prefix(self):
        """(str) Canonical literal prefix for this base."""
        return _PREFIXES[self]

    @property
    def label(self):
        """(str) Short upper case name used in summary tables."""
        return _LABELS[self]

    @classmethod
    def lookup(cls, name):
        """Find a base from user supplied text.

        Accepts enum names ("hexadecimal"), short labels ("hex"), the bare
        prefix letter ("x") and the radix ("16"). Case is ignored.

        Args:
            name: (str | int) Name of the base

        Returns:
            (Base) Matching base

        Raises:
            ValueError: No base matches the name
        """
        if isinstance(name, int):
            return cls(name)
        key = str(name).strip().lower()
        for base in cls:
            names = {
                base.name.lower(),
                base.label.lower(),
                base.prefix[1:],
                str(base.value),
            }
            if key in names - {""}:
                return base
        raise ValueError(f"Unknown base '{name}'")


_PREFIXES = {
    Base.BINARY: "0b",
    Base.OCTAL: "0o",
    Base.DECIMAL: "",
    Base.HEXADECIMAL: "0x",
}

_LABELS = {
    Base.BINARY: "BIN",
    Base.OCTAL: "OCT",
    Base.DECIMAL: "DEC",
    Base.HEXADECIMAL: "HEX",
}


def parse_digits(digits, base):
    """Parse a signed digit payload into an exact int.

    Decimal payloads go through `decimal.Decimal`, so literals longer than
    the interpreter's int/str conversion limit still parse. Power of two
    bases are not subject to that limit.

    Args:
        digits: (str) Digits without prefix, optionally signed
        base: (Base) Radix of the digits

    Returns:
        (int) Parsed value
    """
    if base == Base.DECIMAL:
        return int(decimal.Decimal(digits))
    return int(digits, base)


def decimal_digits(value):
    """Decimal text of an int of any size."""
    return str(decimal.Decimal(value))


@dataclass(frozen=True)
class Literal:
    """Number literal recognized from source text.

    Attributes:
        type: (LiteralType) Integer or float
        base: (Base) Radix of the digits, always DECIMAL for floats
        text: (str) Matched text with grouping separators removed
        value: (int | float) Parsed magnitude
        scientific: (bool) Float text contained an exponent marker
        raw: (str) Text as written in the source, separators included.
            Defaults to `text`.
    """

    type: LiteralType
    base: Base
    text: str
    value: object
    scientific: bool = False
    raw: Optional[str] = None

    def __post_init__(self):
        if self.raw is None:
            object.__setattr__(self, "raw", self.text)
        if self.type is LiteralType.INTEGER:
            if not isinstance(self.value, int) or isinstance(self.value, bool):
                raise TypeError(f"Integer literal needs an int value, got {type(self.value).__name__}")
            if self.scientific:
                raise ValueError("Integer literals are never scientific")
        else:
            if not isinstance(self.value, float):
                raise TypeError(f"Float literal needs a float value, got {type(self.value).__name__}")
            if self.base is not Base.DECIMAL:
                raise ValueError("Float literals are always decimal")

    @property
    def is_integer(self):
        return self.type is LiteralType.INTEGER

    @property
    def is_float(self):
        return self.type is LiteralType.FLOAT

    def __str__(self):
        return self.text
