"""precise_calc - exact rational evaluation of decimal and hexadecimal arithmetic expressions."""

from precise_calc.calculator import calculate, evaluate_expression
from precise_calc.errors import (
    CalculatorError,
    DivisionByZeroError,
    EmptyExpressionError,
    EvalError,
    InsufficientOperandsError,
    InvalidCharacterError,
    ParseError,
)
from precise_calc.evaluator import Evaluator, evaluate_postfix
from precise_calc.models import OPERATORS, Associativity, Expression, Operator, Token, TokenType
from precise_calc.number_parser import parse_decimal, parse_hexadecimal, parse_number
from precise_calc.parser import infix_to_postfix, parse_expression, validate_expression
from precise_calc.tokenizer import Tokenizer, is_start_of_number, tokenize

__version__ = "1.0.0"

__all__ = [
    "calculate",
    "evaluate_expression",
    "CalculatorError",
    "DivisionByZeroError",
    "EmptyExpressionError",
    "EvalError",
    "InsufficientOperandsError",
    "InvalidCharacterError",
    "ParseError",
    "Evaluator",
    "evaluate_postfix",
    "OPERATORS",
    "Associativity",
    "Expression",
    "Operator",
    "Token",
    "TokenType",
    "parse_decimal",
    "parse_hexadecimal",
    "parse_number",
    "infix_to_postfix",
    "parse_expression",
    "validate_expression",
    "Tokenizer",
    "is_start_of_number",
    "tokenize",
]
