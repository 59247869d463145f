"""Test rendering of literals in other bases and notations."""

import pytest

import numlit
from numlit import Base


@pytest.fixture(scope="module")
def classify():
    return numlit.default_classifier().classify


def test_binary_literal(classify):
    literal = classify("0b1010")
    assert numlit.format_literal(literal, Base.DECIMAL) == "10"
    assert numlit.format_literal(literal, Base.HEXADECIMAL, True) == "0xA"
    assert numlit.format_literal(literal) == "1010"


def test_decimal_literal(classify):
    literal = classify("255")
    assert numlit.format_literal(literal, Base.BINARY, True) == "0b11111111"
    assert numlit.format_literal(literal, Base.OCTAL, True) == "0o377"
    assert numlit.format_literal(literal, Base.DECIMAL, True) == "255"
    assert numlit.format_literal(literal, 16) == "FF"


@pytest.mark.parametrize("text,payload", [
    ("0b1010", "1010"),
    ("0o755", "755"),
    ("1234567890", "1234567890"),
    ("0xdeadbeef", "DEADBEEF"),
    ("0xFfFf", "FFFF"),
])
def test_payload_round_trip(classify, text, payload):
    """Rendering in the literal's own base gives back its digits."""
    assert numlit.format_literal(classify(text)) == payload


@pytest.mark.parametrize("base", list(Base))
@pytest.mark.parametrize("text", ["0", "7", "0b1", "0xCAFE", "0o7777", "0x" + "F" * 40])
def test_prefixes(classify, text, base):
    """Prefixed output starts with exactly the base prefix, then digits."""
    literal = classify(text)
    rendered = numlit.format_literal(literal, base, prefixed=True)
    assert rendered.startswith(base.prefix)
    digits = rendered[len(base.prefix):]
    assert digits and digits == digits.upper()
    assert int(digits, base) == literal.value


def test_exact_wide_conversion(classify):
    literal = classify("0x" + "F" * 50)
    assert numlit.format_literal(literal, Base.BINARY) == "1" * 200
    assert numlit.format_literal(literal, Base.DECIMAL) == str(2 ** 200 - 1)
    assert numlit.format_literal(literal, Base.OCTAL, True) == "0o3" + "7" * 66


def test_decimal_longer_than_str_limit(classify):
    """Decimal output past the int/str digit limit renders in full."""
    literal = classify("0x" + "F" * 4000)
    rendered = numlit.format_literal(literal, Base.DECIMAL)
    assert len(rendered) == 4817
    assert rendered.isdigit()
    assert classify(rendered).value == 16 ** 4000 - 1
    assert numlit.format_scientific(literal) == rendered

    literal = classify("9" * 5000)
    assert numlit.format_literal(literal) == "9" * 5000
    assert numlit.format_literal(literal, Base.HEXADECIMAL, True).startswith("0x")


def test_negative_integers():
    classify = numlit.default_classifier(signed=True).classify
    literal = classify("-10")
    assert numlit.format_literal(literal, Base.HEXADECIMAL, True) == "-0xA"
    assert numlit.format_literal(literal, Base.BINARY) == "-1010"
    assert numlit.format_scientific(literal) == "-10"
    literal = classify("-" + "1" * 5000)
    assert numlit.format_literal(literal, Base.DECIMAL, True) == "-" + "1" * 5000
    assert numlit.format_scientific(literal) == "-" + "1" * 5000


@pytest.mark.parametrize("text,rendered", [
    ("3.14", "3.14"),
    ("6.022e23", "6.022e+23"),
    ("1,000.5", "1000.5"),
    ("2.50", "2.5"),
])
def test_float_decimal(classify, text, rendered):
    assert numlit.format_literal(classify(text)) == rendered
    assert numlit.format_literal(classify(text), Base.DECIMAL, True) == rendered


@pytest.mark.parametrize("base", [Base.BINARY, Base.OCTAL, Base.HEXADECIMAL])
def test_float_other_base(classify, base):
    """Floats have no binary, octal or hex form."""
    literal = classify("3.5")
    with pytest.raises(numlit.UnsupportedConversion) as info:
        numlit.format_literal(literal, base)
    assert info.value.text == "3.5"


@pytest.mark.parametrize("text,rendered", [
    ("3.14", "3.14e+0"),
    ("6.022e23", "6.022e+23"),
    ("100.0", "1e+2"),
    ("0.00012", "1.2e-4"),
    ("1e-7", "1e-7"),
    ("0.0", "0e+0"),
    ("123456.789", "1.23456789e+5"),
    ("1e999", "inf"),
])
def test_float_scientific(classify, text, rendered):
    assert numlit.format_scientific(classify(text)) == rendered


@pytest.mark.parametrize("text,rendered", [
    ("255", "255"),
    ("0xFF", "255"),
    ("0b1010", "10"),
])
def test_integer_scientific(classify, text, rendered):
    """Integers have no separate scientific form."""
    assert numlit.format_scientific(classify(text)) == rendered


def test_formatting_is_pure(classify):
    literal = classify("0xFF")
    first = numlit.format_literal(literal, Base.BINARY, True)
    second = numlit.format_literal(literal, Base.BINARY, True)
    assert first == second == "0b11111111"
    assert literal.text == "0xFF"
    assert literal.base is Base.HEXADECIMAL
