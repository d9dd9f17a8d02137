# cli.py

"""
Command-line front end: evaluates one expression and prints the exact result.

    precise-calc "0.1 + 0.2"        -> 0.3
    precise-calc "1 / 3"            -> 1/3
    precise-calc -p 4 "2 / 3"       -> 0.6667

Exit code is 0 on success and 1 on any error; errors are printed to stderr as a
single "Error: ..." line.
"""

import argparse
import logging
import sys
from fractions import Fraction
from typing import List, Optional

from pydantic import BaseModel, ValidationError

from precise_calc.calculator import calculate
from precise_calc.config import OUTPUT_FORMATS, CalculatorSettings, load_settings
from precise_calc.errors import (
    DivisionByZeroError,
    EmptyExpressionError,
    InvalidCharacterError,
    ParseError,
)
from precise_calc.formatting import format_output, format_rational, format_result

logger = logging.getLogger(__name__)

PROG = "precise-calc"
DEFAULT_DECIMAL_PRECISION = 20


class CalculationResult(BaseModel):
    """Machine-readable result for --json output."""
    expression: str
    result: str
    numerator: str
    denominator: str
    is_integer: bool


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Evaluate an arithmetic expression with exact rational arithmetic.",
        epilog="Operators: + - x / (x is multiplication).",
        exit_on_error=False,
    )
    parser.add_argument("expression", nargs="?", help='Expression to evaluate, e.g. "0.1 + 0.2"')
    parser.add_argument("-p", "--precision", type=int, default=None,
                        help="Show the result as a fixed-point decimal with this many digits")
    parser.add_argument("-f", "--format", dest="output_format", choices=OUTPUT_FORMATS, default=None,
                        help="Output style (default: auto)")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.add_argument("--log-level", default=None, help="Logging level (default: WARNING)")
    return parser


def render(value: Fraction, settings: CalculatorSettings) -> str:
    """Renders a result according to the configured output format and precision."""
    if settings.precision > 0:
        return format_result(value, settings.precision)
    if settings.output_format == "fraction":
        return format_rational(value)
    if settings.output_format == "decimal":
        return format_result(value, DEFAULT_DECIMAL_PRECISION)
    return format_output(value)


def error_message(err: Exception) -> str:
    """Translates an error into the one-line message shown to the user."""
    if isinstance(err, DivisionByZeroError):
        return "Error: Division by zero"
    if isinstance(err, InvalidCharacterError):
        return f"Error: Invalid character '{err.character}' at position {err.position}"
    if isinstance(err, ParseError):
        if err.position is not None and err.position >= 0:
            return f"Error: {err.message} at position {err.position}"
        return f"Error: {err.message}"
    if isinstance(err, EmptyExpressionError):
        return "Error: Empty expression provided"
    return f"Error: {err}"


def print_usage() -> None:
    print(f'Usage: {PROG} "<expression>"', file=sys.stderr)
    print(f'Example: {PROG} "0.1 + 0.2"', file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Entry point for the calculator application. Returns the process exit code.
    """
    try:
        args, extras = build_arg_parser().parse_known_args(argv)
    except argparse.ArgumentError as e:
        print(f"Error: Invalid configuration: {e}", file=sys.stderr)
        return 1

    # A leading negative literal such as -5+3 looks like an unknown option to argparse
    if args.expression is None and len(extras) == 1:
        args.expression = extras.pop()
    if extras:
        print(f"Error: Unrecognized arguments: {' '.join(extras)}", file=sys.stderr)
        return 1

    try:
        settings = load_settings(
            precision=args.precision,
            output_format=args.output_format,
            log_level=args.log_level,
        )
    except ValidationError as e:
        print(f"Error: Invalid configuration: {e.errors()[0]['msg']}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=settings.numeric_log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.expression is None:
        print_usage()
        return 1

    try:
        value = calculate(args.expression)
    except Exception as e:
        logger.info(f"Evaluation failed for {args.expression!r}: {e}")
        print(error_message(e), file=sys.stderr)
        return 1

    output = render(value, settings)
    if args.json:
        payload = CalculationResult(
            expression=args.expression,
            result=output,
            numerator=str(value.numerator),
            denominator=str(value.denominator),
            is_integer=value.denominator == 1,
        )
        print(payload.model_dump_json())
    else:
        print(output)
    return 0


if __name__ == '__main__':
    sys.exit(main())
