"""Parser records bundling one literal grammar.

A parser is plain data: the context keys it serves, the boundary pattern a
host uses to find literal shaped spans, and the callables that classify and
render. New grammars are added by building another record and registering
it, not by subclassing.
"""

__all__ = ["WILDCARD", "Parser", "default_parser"]

import re
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from . import _patterns
from ._classify import default_classifier
from ._format import format_literal, format_scientific
from ._literal import Literal

# Context key served by fallback parsers
WILDCARD = "*"


@dataclass(frozen=True)
class Parser:
    """Capability bundle of one literal grammar.

    Attributes:
        name: (str) Grammar name for diagnostics
        keys: (tuple[str, ...]) Context keys served, may include WILDCARD
        pattern: (re.Pattern) Boundary pattern locating candidate spans
        classify: (callable) str → Literal | None
        format: (callable) (Literal, Base | None, bool) → str
        format_scientific: (callable) Literal → str
    """

    name: str
    keys: Tuple[str, ...]
    pattern: re.Pattern
    classify: Callable[[str], Optional[Literal]]
    format: Callable[..., str] = format_literal
    format_scientific: Callable[[Literal], str] = format_scientific

    def __post_init__(self):
        keys = self.keys
        if isinstance(keys, str):
            keys = (keys,)
        keys = tuple(key.lower() for key in keys)
        if not keys:
            raise ValueError(f"Parser '{self.name}' serves no context keys")
        object.__setattr__(self, "keys", keys)

    @property
    def is_wildcard(self):
        return WILDCARD in self.keys


def default_parser(signed=False, keys=(WILDCARD,)):
    """Parser of the default grammar.

    Binary, octal and hexadecimal integers with 0b/0o/0x prefixes, decimal
    integers and decimal floats with optional exponent. Commas and
    underscores are grouping separators.

    Args:
        signed: (bool) Accept a leading + or - sign
        keys: (Iterable[str]) Context keys to serve

    Returns:
        (Parser) Parser record
    """
    return Parser(
        name="signed" if signed else "default",
        keys=tuple(keys),
        pattern=_patterns.boundary(signed),
        classify=default_classifier(signed).classify,
    )
