# parser.py

"""
Structural parser: validates the Number/Operator alternation of a token list and reorders
it into postfix (Reverse Polish) order with the Shunting-Yard algorithm.
"""

import logging
from typing import List, Optional, Sequence

from precise_calc.errors import EmptyExpressionError, ParseError
from precise_calc.models import OPERATORS, Associativity, Expression, Operator, Token, TokenType
from precise_calc.tokenizer import tokenize

logger = logging.getLogger(__name__)


def lookup_operator(token: Token) -> Operator:
    """Returns the descriptor for an operator token, or raises ParseError."""
    op = OPERATORS.get(token.value)
    if op is None:
        raise ParseError(f"Unknown operator: {token.value}", token.position)
    return op


def _should_pop(top: Operator, incoming: Operator) -> bool:
    if incoming.associativity == Associativity.RIGHT:
        return top.precedence > incoming.precedence
    return top.precedence >= incoming.precedence


def validate_structure(tokens: Sequence[Token]) -> None:
    """
    Checks that tokens strictly alternate NUMBER, OPERATOR, NUMBER, ... NUMBER.
    """
    if not tokens:
        raise EmptyExpressionError()

    first, last = tokens[0], tokens[-1]
    if first.type != TokenType.NUMBER:
        raise ParseError("Expression must start with a number", first.position)
    if last.type != TokenType.NUMBER:
        raise ParseError("Expression must end with a number", last.position)

    for i, token in enumerate(tokens):
        if i % 2 == 0:
            if token.type != TokenType.NUMBER:
                raise ParseError("Expected number", token.position)
        elif token.type != TokenType.OPERATOR:
            raise ParseError("Expected operator", token.position)


def infix_to_postfix(tokens: Sequence[Token]) -> List[Token]:
    """
    Converts infix tokens to postfix order using the Shunting-Yard algorithm.
    Operators on the stack with precedence >= the incoming one are emitted first,
    which makes equal-precedence operators evaluate left to right.
    """
    output: List[Token] = []
    stack: List[Token] = []

    for token in tokens:
        if token.type == TokenType.NUMBER:
            output.append(token)
        elif token.type == TokenType.OPERATOR:
            op = lookup_operator(token)
            while stack and _should_pop(lookup_operator(stack[-1]), op):
                output.append(stack.pop())
            stack.append(token)
        else:
            raise ParseError(f"Unexpected token type: {token.type}", token.position)

    while stack:
        output.append(stack.pop())
    return output


def parse_expression(tokens: Sequence[Token], original: Optional[str] = None) -> Expression:
    """
    Validates the token sequence and returns an Expression carrying its postfix form.
    """
    validate_structure(tokens)
    postfix = infix_to_postfix(tokens)
    logger.debug(f"Postfix order: {' '.join(t.value for t in postfix)}")
    return Expression(
        original=original if original is not None else ' '.join(t.value for t in tokens),
        tokens=list(tokens),
        postfix_tokens=postfix,
    )


def validate_expression(text: str) -> None:
    """Tokenizes and parses text without evaluating it. Raises on invalid input."""
    parse_expression(tokenize(text), original=text)
