# evaluator.py

import logging
from fractions import Fraction
from typing import List, Sequence

from precise_calc.errors import (
    DivisionByZeroError,
    InsufficientOperandsError,
    ParseError,
)
from precise_calc.models import Token, TokenType
from precise_calc.number_parser import parse_number
from precise_calc.parser import lookup_operator

logger = logging.getLogger(__name__)


class Evaluator:
    """
    Evaluates a postfix token sequence over exact rationals using a value stack.
    """

    def evaluate(self, tokens: Sequence[Token]) -> Fraction:
        stack: List[Fraction] = []

        for token in tokens:
            if token.type == TokenType.NUMBER:
                stack.append(self._number(token))
            elif token.type == TokenType.OPERATOR:
                if len(stack) < 2:
                    raise InsufficientOperandsError(token.position)
                right = stack.pop()
                left = stack.pop()
                stack.append(self._apply(token, left, right))
            else:
                raise ParseError(f"Unexpected token type: {token.type}", token.position)

        if len(stack) != 1:
            logger.debug(f"Evaluation left {len(stack)} values on the stack")
            raise ParseError("Invalid expression structure", 0)
        return stack[0]

    def _number(self, token: Token) -> Fraction:
        try:
            return parse_number(token.value)
        except ParseError:
            raise ParseError(f"Invalid number format: {token.value}", token.position) from None

    def _apply(self, token: Token, left: Fraction, right: Fraction) -> Fraction:
        op = lookup_operator(token)
        if op.symbol == '/' and right == 0:
            raise DivisionByZeroError(token.position)
        return op.apply(left, right)


def evaluate_postfix(tokens: Sequence[Token]) -> Fraction:
    """Evaluates postfix tokens and returns the exact result."""
    return Evaluator().evaluate(tokens)
