# tokenizer.py

"""
Tokenizer: converts an expression string into a list of positioned NUMBER and OPERATOR tokens.

Character validation runs before any token is built, so bad input fails fast with the exact
offending position. A '-' is read as the sign of a number literal only at the start of the
input or directly after an operator token; after a number it is always subtraction.
"""

import logging
from typing import List, Sequence

from precise_calc.errors import EmptyExpressionError, InvalidCharacterError
from precise_calc.models import OPERATORS, Token, TokenType

logger = logging.getLogger(__name__)

DIGITS = frozenset('0123456789')
HEX_DIGITS = frozenset('0123456789abcdefABCDEF')
_HEX_MARKERS = frozenset('xX')
_ALLOWED_SYMBOLS = frozenset('xX+-./')
# ASCII whitespace plus the Unicode White_Space code points; excludes the \x1c-\x1f separators
WHITESPACE = frozenset(
    ' \t\n\r\v\f\x85\xa0\u1680\u2028\u2029\u202f\u205f\u3000'
    + ''.join(chr(c) for c in range(0x2000, 0x200B))
)


def is_blank(text: str) -> bool:
    """True if text is empty or made only of whitespace."""
    return all(ch in WHITESPACE for ch in text)


def is_valid_character(ch: str) -> bool:
    """Checks if the character belongs to the allowed input set."""
    return ch in HEX_DIGITS or ch in _ALLOWED_SYMBOLS or ch in WHITESPACE


def _has_hex_prefix(chars: Sequence[str], i: int) -> bool:
    return i + 1 < len(chars) and chars[i] == '0' and chars[i + 1] in _HEX_MARKERS


def is_start_of_number(chars: Sequence[str], i: int, tokens: Sequence[Token]) -> bool:
    """
    Decides whether the '-' at index i is the sign of a number literal.

    True only when the '-' is followed by a digit, '.', or a 0x/0X prefix, and it either
    opens the input or directly follows an operator token.
    """
    if i >= len(chars) or chars[i] != '-':
        return False
    if i + 1 >= len(chars):
        return False

    nxt = chars[i + 1]
    if not (nxt in DIGITS or nxt == '.' or _has_hex_prefix(chars, i + 1)):
        return False
    return not tokens or tokens[-1].type == TokenType.OPERATOR


class Tokenizer:
    """
    Converts an input string into a list of tokens.
    Positions are code-point offsets into the string given to the constructor.
    """

    def __init__(self, text: str):
        self.text = text
        self.chars = list(text)
        self.pos = 0
        self.tokens: List[Token] = []

    def _peek(self, n: int = 0) -> str:
        i = self.pos + n
        return self.chars[i] if i < len(self.chars) else ''

    def _validate_characters(self) -> None:
        for i, ch in enumerate(self.chars):
            if not is_valid_character(ch):
                logger.debug(f"Rejected character {ch!r} at position {i}")
                raise InvalidCharacterError(ch, i)

    def _starts_number(self) -> bool:
        ch = self._peek()
        if ch in DIGITS or ch == '.':
            return True
        return ch == '-' and is_start_of_number(self.chars, self.pos, self.tokens)

    def _read_number(self) -> Token:
        """Reads a number literal greedily: [-] then 0x<hex digits> or <digits>[.<digits>]."""
        start = self.pos
        if self._peek() == '-':
            self.pos += 1

        if _has_hex_prefix(self.chars, self.pos):
            self.pos += 2
            while self._peek() and self._peek() in HEX_DIGITS:
                self.pos += 1
        else:
            while self._peek() and self._peek() in DIGITS:
                self.pos += 1
            if self._peek() == '.':
                self.pos += 1
                while self._peek() and self._peek() in DIGITS:
                    self.pos += 1

        return Token(TokenType.NUMBER, ''.join(self.chars[start:self.pos]), start)

    def tokenize(self) -> List[Token]:
        """
        Tokenizes the input string into a list of Token objects.
        Raises EmptyExpressionError or InvalidCharacterError.
        """
        if is_blank(self.text):
            raise EmptyExpressionError()

        self._validate_characters()

        while self.pos < len(self.chars):
            ch = self._peek()
            if ch in WHITESPACE:
                self.pos += 1
            elif self._starts_number():
                self.tokens.append(self._read_number())
            elif ch in OPERATORS:
                self.tokens.append(Token(TokenType.OPERATOR, ch, self.pos))
                self.pos += 1
            else:
                # Allowed character that fits nowhere, e.g. a stray hex letter or 'X'
                raise InvalidCharacterError(ch, self.pos)

        logger.debug(f"Tokenized {self.text!r} into {len(self.tokens)} tokens")
        return self.tokens


def tokenize(text: str) -> List[Token]:
    """Converts an expression string into a list of positioned tokens."""
    return Tokenizer(text).tokenize()
