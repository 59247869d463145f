"""Error classes for literal recognition and conversion"""

__all__ = [
    "LiteralError",
    "UnrecognizedLiteral",
    "UnsupportedConversion",
    "RegistryError",
]


class LiteralError(Exception):
    """Base class for numlit errors.

    Args:
        message: (str) Error description
        text: (str | None) Literal text the error refers to

    Attributes:
        message: (str) Error description
        text: (str | None) Literal text the error refers to
    """

    def __init__(self, message, text=None):
        self.message = message
        self.text = text
        super().__init__(message)


class UnrecognizedLiteral(LiteralError):
    """Text does not conform to any literal rule of the grammar.

    Only raised by `parse_literal`. Classifiers report the same condition
    by returning None.
    """

    def __init__(self, text, grammar=None):
        where = f" for grammar '{grammar}'" if grammar else ""
        super().__init__(f"'{text}' is not a recognized number literal{where}", text)
        self.grammar = grammar


class UnsupportedConversion(LiteralError):
    """Literal type cannot be rendered in the requested base."""


class RegistryError(LiteralError):
    """Parser registry is misconfigured."""
