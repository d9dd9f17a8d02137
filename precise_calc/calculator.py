# calculator.py

"""
Entry point of the core pipeline: tokenize -> parse (Shunting-Yard) -> evaluate postfix.

Each call is self-contained; nothing is shared between calls, so concurrent callers need
no coordination.
"""

import logging
from fractions import Fraction

from precise_calc.errors import EmptyExpressionError
from precise_calc.evaluator import evaluate_postfix
from precise_calc.models import Expression
from precise_calc.parser import parse_expression
from precise_calc.tokenizer import is_blank, tokenize

logger = logging.getLogger(__name__)


def evaluate_expression(expression: str) -> Expression:
    """
    Runs the full pipeline and returns the populated Expression bundle.
    Token positions refer to the caller's original string.
    """
    if is_blank(expression):
        raise EmptyExpressionError()

    tokens = tokenize(expression)
    expr = parse_expression(tokens, original=expression)
    expr.result = evaluate_postfix(expr.postfix_tokens)
    logger.debug(f"{expression!r} = {expr.result}")
    return expr


def calculate(expression: str) -> Fraction:
    """Evaluates an expression string and returns the exact rational result."""
    return evaluate_expression(expression).result
