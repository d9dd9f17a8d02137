# formatting.py

"""
Display helpers for exact results. Nothing here goes through float: decimal expansions
and fixed-point rounding are computed with integer arithmetic.
"""

from fractions import Fraction


def format_rational(value: Fraction) -> str:
    """Returns the integer if the value is whole, otherwise 'numerator/denominator'."""
    if value.denominator == 1:
        return str(value.numerator)
    return f"{value.numerator}/{value.denominator}"


def can_display_as_decimal(value: Fraction) -> bool:
    """True if the reduced denominator has no prime factors other than 2 and 5."""
    d = value.denominator
    for p in (2, 5):
        while d % p == 0:
            d //= p
    return d == 1


def to_decimal_string(value: Fraction) -> str:
    """
    Returns the exact terminating decimal expansion, without trailing zeros.
    Raises ValueError if the value does not terminate in base 10.
    """
    if not can_display_as_decimal(value):
        raise ValueError(f"{format_rational(value)} has no terminating decimal expansion")

    sign = '-' if value < 0 else ''
    num, den = abs(value.numerator), value.denominator
    whole, rem = divmod(num, den)
    if rem == 0:
        return f"{sign}{whole}"

    digits = []
    while rem:
        rem *= 10
        digit, rem = divmod(rem, den)
        digits.append(str(digit))
    return f"{sign}{whole}.{''.join(digits)}"


def format_result(value: Fraction, precision: int = 0) -> str:
    """
    Formats a result for display. precision == 0 gives the simplified rational;
    otherwise a fixed-point string with exactly `precision` digits, rounded half away from zero.
    """
    if precision < 0:
        raise ValueError(f"precision must be non-negative, got {precision}")
    if precision == 0:
        return format_rational(value)

    scale = 10 ** precision
    scaled, rem = divmod(abs(value.numerator) * scale, value.denominator)
    if 2 * rem >= value.denominator:
        scaled += 1
    whole, frac = divmod(scaled, scale)
    sign = '-' if value < 0 and scaled else ''
    return f"{sign}{whole}.{frac:0{precision}d}"


def format_output(value: Fraction) -> str:
    """
    Picks the most readable exact rendering: an integer, a terminating decimal
    (3/10 -> 0.3), or a reduced fraction (1/3).
    """
    if value.denominator == 1:
        return str(value.numerator)
    if can_display_as_decimal(value):
        return to_decimal_string(value)
    return format_rational(value)
