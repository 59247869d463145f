"""Locating and converting literals inside host text.

These helpers are the narrow surface an editor or command line tool needs:
find the literal under a cursor, find every literal in a text, convert
selected texts to another base and build the rows of a summary table.

Conversion treats anything it cannot convert as a no-op. Unrecognized text
and floats come back unchanged, and each item of a batch is handled on
its own.
"""

__all__ = [
    "Span",
    "SummaryRow",
    "literal_at",
    "find_literals",
    "convert",
    "convert_all",
    "replace_literals",
    "summarize",
]

import logging
from typing import NamedTuple, Optional

from ._error import UnsupportedConversion
from ._literal import Base, Literal, LiteralType

logger = logging.getLogger(__name__)


class Span(NamedTuple):
    """Region of host text holding a candidate literal."""

    start: int
    end: int
    text: str
    literal: Optional[Literal]


class SummaryRow(NamedTuple):
    """One line of a literal summary table.

    `current` marks the representation the literal was written in.
    """

    label: str
    text: str
    current: bool


def _span(match, parser):
    text = match.group(0)
    return Span(match.start(), match.end(), text, parser.classify(text))


def literal_at(text, offset, parser):
    """Find the candidate span touching a cursor offset.

    A cursor right after the last character still counts as touching.

    Args:
        text: (str) Host text, typically one line
        offset: (int) Cursor position in the text
        parser: (Parser) Grammar used to locate and classify

    Returns:
        (Span | None) Span under the cursor. Its literal is None when the
        span looked like a literal but the grammar rejected it.
    """
    for match in parser.pattern.finditer(text):
        if match.start() > offset:
            break
        if offset <= match.end():
            return _span(match, parser)
    return None


def find_literals(text, parser):
    """Find every candidate span in a text.

    Args:
        text: (str) Host text
        parser: (Parser) Grammar used to locate and classify

    Returns:
        (list[Span]) Spans in text order
    """
    return [_span(match, parser) for match in parser.pattern.finditer(text)]


def convert(text, base, parser, prefixed=True):
    """Convert one selected literal to another base.

    Only integer literals are converted. Floats come back as written, in
    every base including decimal.

    Args:
        text: (str) Selected text
        base: (Base) Target base
        parser: (Parser) Grammar of the text
        prefixed: (bool) Prepend the base prefix

    Returns:
        (str) Converted text, or the original text when it cannot be
        converted
    """
    literal = parser.classify(text)
    if literal is None:
        logger.debug("Left %r unchanged, not a literal", text)
        return text
    if literal.type is not LiteralType.INTEGER:
        logger.debug("Left float %r unchanged", text)
        return text
    try:
        return parser.format(literal, base, prefixed)
    except UnsupportedConversion as err:
        logger.debug("Left %r unchanged: %s", text, err.message)
        return text


def convert_all(texts, base, parser, prefixed=True):
    """Convert a batch of selections independently.

    Args:
        texts: (Iterable[str]) Selected texts
        base: (Base) Target base
        parser: (Parser) Grammar of the texts
        prefixed: (bool) Prepend the base prefix

    Returns:
        (list[str]) One result per input, in order
    """
    return [convert(text, base, parser, prefixed) for text in texts]


def replace_literals(text, base, parser, prefixed=True):
    """Rewrite every integer literal of a text in another base.

    Floats and rejected candidates are left as written.

    Args:
        text: (str) Host text
        base: (Base) Target base
        parser: (Parser) Grammar of the text
        prefixed: (bool) Prepend the base prefix

    Returns:
        (str) Rewritten text
    """

    def replace(match):
        literal = parser.classify(match.group(0))
        if literal is None or literal.type is not LiteralType.INTEGER:
            return match.group(0)
        return parser.format(literal, base, prefixed)

    return parser.pattern.sub(replace, text)


def summarize(literal, parser):
    """Rows describing a literal in each of its display forms.

    Integers list all four bases, floats list decimal and scientific
    notation.

    Args:
        literal: (Literal) Literal to describe
        parser: (Parser) Grammar whose formatter renders the rows

    Returns:
        (list[SummaryRow]) Rows in display order
    """
    if literal.type is LiteralType.INTEGER:
        return [
            SummaryRow(base.label, parser.format(literal, base), base is literal.base)
            for base in Base
        ]
    return [
        SummaryRow("DEC", parser.format(literal), not literal.scientific),
        SummaryRow("SCI", parser.format_scientific(literal), literal.scientific),
    ]
