"""Registry of literal grammars keyed by context.

The registry maps context keys, usually a source language id, to parser
records. Keys are indexed first registered first served. A parser declaring
the wildcard key is the fallback for every unknown context, and a registry
cannot be built without one, so lookups always produce a parser.

Registries are built explicitly and handed to whatever needs them. There is
no process wide default instance.
"""

__all__ = [
    "Registry",
    "default_registry",
    "classify",
    "parse_literal",
]

import logging

from ._error import RegistryError, UnrecognizedLiteral
from ._parser import WILDCARD, default_parser
from ._python import python_parser

logger = logging.getLogger(__name__)


class Registry:
    """Lookup table from context keys to parsers.

    Args:
        parsers: (Iterable[Parser]) Parsers in registration order

    Raises:
        RegistryError: No parser serves the wildcard key
    """

    def __init__(self, parsers):
        self._parsers = []
        self._index = {}
        self._fallback = None
        for parser in parsers:
            self.register(parser)
        if self._fallback is None:
            raise RegistryError(
                f"Registry needs a parser for the '{WILDCARD}' context key"
            )

    def __repr__(self):
        names = ", ".join(parser.name for parser in self._parsers)
        return f"Registry([{names}])"

    def __len__(self):
        return len(self._parsers)

    def __iter__(self):
        return iter(self._parsers)

    def register(self, parser):
        """Add a parser.

        Keys already served by an earlier parser stay with that parser.

        Args:
            parser: (Parser) Parser record to add
        """
        self._parsers.append(parser)
        for key in parser.keys:
            if key == WILDCARD:
                if self._fallback is None:
                    self._fallback = parser
                    logger.debug("Fallback parser is %s", parser.name)
                continue
            if key in self._index:
                logger.debug(
                    "Key %r stays with %s, ignored for %s",
                    key, self._index[key].name, parser.name,
                )
                continue
            self._index[key] = parser

    def keys(self):
        """Context keys with a dedicated parser, sorted."""
        return sorted(self._index)

    def lookup(self, key=None):
        """Find the parser for a context.

        Args:
            key: (str | None) Context key. None or unknown keys get the
                wildcard parser. Case is ignored.

        Returns:
            (Parser) Parser serving the context
        """
        if key is None or key == WILDCARD:
            return self._fallback
        parser = self._index.get(key.lower())
        if parser is None:
            logger.debug("No parser for %r, using %s", key, self._fallback.name)
            return self._fallback
        return parser

    def locate_pattern(self, key=None):
        """Boundary pattern a host uses to find candidate spans for a context.

        Args:
            key: (str | None) Context key

        Returns:
            (re.Pattern) Boundary pattern of the selected parser
        """
        return self.lookup(key).pattern


def default_registry(signed=False):
    """Registry with the Python grammar and the default fallback grammar.

    Args:
        signed: (bool) Fallback grammar accepts a leading sign

    Returns:
        (Registry) New registry
    """
    return Registry([python_parser(), default_parser(signed)])


def classify(text, registry, key=None):
    """Classify text with the parser serving a context.

    Args:
        text: (str) Candidate literal text
        registry: (Registry) Registry to select the parser from
        key: (str | None) Context key

    Returns:
        (Literal | None) Literal, or None when the text is not recognized
    """
    return registry.lookup(key).classify(text)


def parse_literal(text, registry, key=None):
    """Classify text, raising when it is not a literal.

    Args:
        text: (str) Candidate literal text
        registry: (Registry) Registry to select the parser from
        key: (str | None) Context key

    Returns:
        (Literal) Recognized literal

    Raises:
        UnrecognizedLiteral: No rule of the grammar matches the text
    """
    parser = registry.lookup(key)
    literal = parser.classify(text)
    if literal is None:
        raise UnrecognizedLiteral(text, parser.name)
    return literal
