# models.py

"""
Data model shared by the pipeline stages: tokens, operator descriptors and the
Expression bundle the orchestrator fills in during a single evaluation.
"""

from dataclasses import dataclass, field
from fractions import Fraction
from typing import Callable, Dict, List, Optional


class TokenType:
    """Enumeration of token types."""
    NUMBER = 'NUMBER'
    OPERATOR = 'OPERATOR'


class Associativity:
    """Enumeration of operator associativity."""
    LEFT = 'LEFT'
    RIGHT = 'RIGHT'


@dataclass(frozen=True)
class Token:
    """Represents a token with type, raw text and starting code-point position."""
    type: str
    value: str
    position: int

    def __repr__(self) -> str:
        return f"Token({self.type}, {self.value!r}, pos={self.position})"


@dataclass(frozen=True)
class Operator:
    """Binary operator: symbol, precedence, associativity and the exact function it applies."""
    symbol: str
    precedence: int
    associativity: str
    apply: Callable[[Fraction, Fraction], Fraction] = field(compare=False, repr=False)


# Division is only reached after the evaluator has rejected a zero divisor.
OPERATORS: Dict[str, Operator] = {
    '+': Operator('+', 1, Associativity.LEFT, lambda a, b: a + b),
    '-': Operator('-', 1, Associativity.LEFT, lambda a, b: a - b),
    'x': Operator('x', 2, Associativity.LEFT, lambda a, b: a * b),
    '/': Operator('/', 2, Associativity.LEFT, lambda a, b: a / b),
}


@dataclass
class Expression:
    """A complete expression as it moves through the pipeline."""
    original: str
    tokens: List[Token]
    postfix_tokens: List[Token]
    result: Optional[Fraction] = None
