# number_parser.py

"""
Exact-rational parsers for decimal and hexadecimal literals.

Decimal text is turned into literal-digits over a power of ten using integer arithmetic
only, so "0.1" becomes exactly 1/10. Hexadecimal literals are integral.
"""

import logging
import re
from fractions import Fraction

from precise_calc.errors import ParseError

logger = logging.getLogger(__name__)

_DECIMAL_RE = re.compile(r'(-?)([0-9]*)(?:\.([0-9]*))?')
_HEX_DIGITS_RE = re.compile(r'[0-9A-Fa-f]+')
_HEX_PREFIXES = ('0x', '0X', '-0x', '-0X')


def parse_decimal(text: str) -> Fraction:
    """
    Parses a decimal literal such as "-12.50", ".5" or "5." into an exact Fraction.
    Raises ParseError for empty input, scientific notation or malformed text.
    """
    s = text.strip()
    if not s:
        raise ParseError("Empty decimal number", 0)
    if 'e' in s or 'E' in s:
        raise ParseError("Scientific notation not supported", 0)

    mo = _DECIMAL_RE.fullmatch(s)
    if mo is None:
        raise ParseError("Invalid decimal format", 0)
    sign, whole, frac = mo.group(1), mo.group(2), mo.group(3) or ''
    if not whole and not frac:
        # Covers ".", "-" and "-."
        raise ParseError("Invalid decimal format", 0)

    numerator = int(whole + frac or '0')
    if sign:
        numerator = -numerator
    return Fraction(numerator, 10 ** len(frac))


def parse_hexadecimal(text: str) -> Fraction:
    """
    Parses a hexadecimal literal ("0xFF", "-0X1a") into an integral Fraction.
    """
    s = text.strip()
    if not s:
        raise ParseError("Empty hex number", 0)

    negative = s.startswith('-')
    if negative:
        s = s[1:]

    if not (s.startswith('0x') or s.startswith('0X')):
        raise ParseError("Hex number must start with 0x", 0)

    digits = s[2:]
    if not digits:
        raise ParseError("No hex digits after 0x", 2)
    if _HEX_DIGITS_RE.fullmatch(digits) is None:
        raise ParseError("Invalid hex digits", 2)

    value = int(digits, 16)
    return Fraction(-value if negative else value)


def is_hex_literal(text: str) -> bool:
    """Returns True if the literal text carries a 0x/-0x prefix."""
    return text.startswith(_HEX_PREFIXES)


def parse_number(text: str) -> Fraction:
    """Dispatches to the hex or decimal parser based on the literal's prefix."""
    if is_hex_literal(text):
        return parse_hexadecimal(text)
    return parse_decimal(text)
