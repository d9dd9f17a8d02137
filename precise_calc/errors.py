# errors.py

"""
Exception hierarchy for the calculator.

Every failure in the pipeline is raised as a subclass of CalculatorError so callers can
catch the whole family at once, or distinguish kinds precisely (e.g. to print the offending
character and its position).
"""

from typing import Optional


class CalculatorError(Exception):
    """Base class for calculator errors."""
    pass


class EmptyExpressionError(CalculatorError):
    """Raised when the input is empty or contains only whitespace."""

    def __init__(self):
        super().__init__("Empty expression provided")


class ParseError(CalculatorError):
    """Raised for structural and lexical errors, with optional position information."""

    def __init__(self, message: str, position: Optional[int] = None):
        self.message = message
        self.position = position
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.position is not None and self.position >= 0:
            return f"Parse error at position {self.position}: {self.message}"
        return f"Parse error: {self.message}"


class InvalidCharacterError(ParseError):
    """Raised when a character outside the allowed set appears in the input."""

    def __init__(self, character: str, position: int):
        self.character = character
        super().__init__(f"Invalid character '{character}'", position)

    def __str__(self) -> str:
        return f"Invalid character '{self.character}' at position {self.position}"


class InsufficientOperandsError(ParseError):
    """Raised when an operator is reached with fewer than two values on the stack."""

    def __init__(self, position: Optional[int] = None, message: str = "Insufficient operands for operator"):
        super().__init__(message, position)


class EvalError(CalculatorError):
    """Raised for errors during evaluation."""

    def __init__(self, message: str, position: Optional[int] = None):
        self.message = message
        self.position = position
        super().__init__(message)


class DivisionByZeroError(EvalError):
    """Raised when the right operand of '/' is exactly zero."""

    def __init__(self, position: Optional[int] = None):
        super().__init__("Division by zero", position)
