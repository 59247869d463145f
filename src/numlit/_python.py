"""Literal grammar of Python source code.

Follows Python's own numeric literal rules rather than the default grammar:
underscores are the only grouping character and must sit between digits,
decimal integers have no leading zeros, and floats may omit the digits on
either side of the point ("5.", ".5"). Commas separate values in Python,
so they never join digits here.

Recognition is done by a Lark grammar (lark/python.lark). The terminal the
lexer produced picks the constructor, in the same spirit as the ordered
rules of the default grammar.
"""

__all__ = ["python_parser", "classify_python"]

import logging
import re

import lark

from ._literal import Base, Literal, LiteralType, parse_digits
from ._parser import Parser

logger = logging.getLogger(__name__)

_parsers = {}

_DIGITS = r"[0-9](?:_?[0-9])*"

# Candidate spans in Python source. Attribute access ("x.5") and words
# that merely start with digits are not candidates.
BOUNDARY = re.compile(
    r"(?<![\w.])(?:"
    r"0[bB](?:_?[01])+"
    r"|0[oO](?:_?[0-7])+"
    r"|0[xX](?:_?[0-9a-fA-F])+"
    rf"|(?:{_DIGITS}(?:\.(?:{_DIGITS})?)?|\.{_DIGITS})(?:[eE][-+]?{_DIGITS})?"
    r")(?![\w.])"
)

_INTEGER_TERMINALS = {
    "BIN_INT": Base.BINARY,
    "OCT_INT": Base.OCTAL,
    "HEX_INT": Base.HEXADECIMAL,
    "DEC_INT": Base.DECIMAL,
}


def classify_python(text):
    """Classify text as a Python numeric literal.

    Args:
        text: (str) Candidate literal text

    Returns:
        (Literal | None) Literal, or None when the text is not a complete
        Python number literal
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected str to classify, got {type(text).__name__}")
    try:
        tree = _lark_parser("python").parse(text)
    except lark.UnexpectedInput as err:
        logger.debug("Not a python literal %r: %s", text, err.__class__.__name__)
        return None

    token = tree.children[0]
    normalized = str(token).replace("_", "")
    base = _INTEGER_TERMINALS.get(token.type)
    if base is not None:
        payload = normalized if base is Base.DECIMAL else normalized[2:]
        value = parse_digits(payload, base)
        return Literal(LiteralType.INTEGER, base, normalized, value, raw=text)
    scientific = "e" in normalized or "E" in normalized
    return Literal(LiteralType.FLOAT, Base.DECIMAL, normalized, float(normalized), scientific, raw=text)


def python_parser(keys=("python", "py")):
    """Parser record for Python source.

    Args:
        keys: (Iterable[str]) Context keys to serve

    Returns:
        (Parser) Parser record
    """
    return Parser(
        name="python",
        keys=tuple(keys),
        pattern=BOUNDARY,
        classify=classify_python,
    )


def _lark_parser(name):
    """Get globally shared lark parser.

    Args:
        name: (str) name of the grammar file (without .lark)

    Returns:
        (lark.Lark) Parser instance
    """
    parser = _parsers.get(name)
    if parser is not None:
        return parser

    path = f"lark/{name}.lark"
    parser = lark.Lark.open(path, rel_to=__file__, parser="lalr")
    _parsers[name] = parser
    logger.debug("Loaded %s grammar", name)
    return parser
