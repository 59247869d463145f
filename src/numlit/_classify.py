"""Ordered rule classification of number literals.

A classifier owns a fixed sequence of rules. Each rule pairs a recognizer
pattern, which must match the whole candidate, with a constructor that
builds the `Literal`. Rules are tried in order and the first match wins,
which is what separates decimal integers from decimal floats and prefixed
forms from plain digits. Do not reorder the default table.
"""

__all__ = [
    "Rule",
    "Classifier",
    "integer_builder",
    "float_builder",
    "default_rules",
    "default_classifier",
]

import logging
import re
from dataclasses import dataclass, replace
from typing import Callable, Optional

from . import _patterns
from ._literal import Base, Literal, LiteralType, parse_digits

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Rule:
    """One recognizer of a classifier.

    Attributes:
        name: (str) Rule name for diagnostics
        pattern: (re.Pattern) Recognizer applied with fullmatch
        build: (callable) Takes the text and match, returns a Literal
    """

    name: str
    pattern: re.Pattern
    build: Callable[[str, object], Literal]

    def apply(self, text):
        """Build a literal when the whole text matches the rule.

        Args:
            text: (str) Normalized candidate text

        Returns:
            (Literal | None) Literal for a match, otherwise None
        """
        match = self.pattern.fullmatch(text)
        if match is None:
            return None
        return self.build(text, match)


def integer_builder(base):
    """Constructor for integer rules of the given base.

    The recognizer must provide `sign` and `digits` groups. The digit
    payload is parsed without its prefix.
    """

    def build(text, match):
        value = parse_digits(match.group("sign") + match.group("digits"), base)
        return Literal(LiteralType.INTEGER, base, text, value)

    return build


def float_builder(text, match):
    """Constructor for decimal float rules."""
    scientific = "e" in text or "E" in text
    return Literal(LiteralType.FLOAT, Base.DECIMAL, text, float(text), scientific)


def default_rules(signed=False):
    """Build the rule table of the default grammar.

    Order: binary, octal, decimal integer, hexadecimal, decimal float.

    Args:
        signed: (bool) Accept a leading + or - on every rule

    Returns:
        (tuple[Rule, ...]) Ordered rules
    """
    return (
        Rule("binary", _patterns.binary_integer(signed), integer_builder(Base.BINARY)),
        Rule("octal", _patterns.octal_integer(signed), integer_builder(Base.OCTAL)),
        Rule("decimal", _patterns.decimal_integer(signed), integer_builder(Base.DECIMAL)),
        Rule("hexadecimal", _patterns.hexadecimal_integer(signed), integer_builder(Base.HEXADECIMAL)),
        Rule("float", _patterns.decimal_float(signed), float_builder),
    )


class Classifier:
    """Decide whether text is a literal, and of which type and base.

    Args:
        rules: (Sequence[Rule]) Rules in evaluation order
        separators: (str) Grouping characters stripped before matching
        signed: (bool) Whether the rules accept a leading sign, as reported to
            callers. The rules themselves decide what they match.

    Raises:
        ValueError: The rule table is empty
    """

    def __init__(self, rules, separators=_patterns.SEPARATORS, signed=False):
        self.rules = tuple(rules)
        if not self.rules:
            raise ValueError("Classifier needs at least one rule")
        self.separators = separators
        self.signed = signed
        self._strip = str.maketrans("", "", separators)

    def __repr__(self):
        names = ", ".join(rule.name for rule in self.rules)
        return f"Classifier([{names}], signed={self.signed})"

    def normalize(self, text):
        """Remove grouping separators from candidate text."""
        return text.translate(self._strip)

    def classify(self, text) -> Optional[Literal]:
        """Classify candidate text.

        Args:
            text: (str) Candidate literal text

        Returns:
            (Literal | None) Literal from the first matching rule, None when
            no rule matches
        """
        if not isinstance(text, str):
            raise TypeError(f"Expected str to classify, got {type(text).__name__}")
        normalized = self.normalize(text)
        for rule in self.rules:
            literal = rule.apply(normalized)
            if literal is not None:
                logger.debug("Classified %r as %s", text, rule.name)
                return literal if normalized == text else replace(literal, raw=text)
        logger.debug("No rule matched %r", text)
        return None

    __call__ = classify


def default_classifier(signed=False):
    """Classifier of the default grammar."""
    return Classifier(default_rules(signed), signed=signed)
