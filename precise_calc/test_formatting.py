# test_formatting.py

from fractions import Fraction

import pytest

from precise_calc.formatting import (
    can_display_as_decimal,
    format_output,
    format_rational,
    format_result,
    to_decimal_string,
)

# ---------------------------
# format_rational Tests
# ---------------------------

@pytest.mark.parametrize("value,expected", [
    (Fraction(5), "5"),
    (Fraction(-255), "-255"),
    (Fraction(0), "0"),
    (Fraction(3, 10), "3/10"),
    (Fraction(-1, 3), "-1/3"),
])
def test_format_rational(value, expected):
    assert format_rational(value) == expected

# ---------------------------
# Decimal Expansion Tests
# ---------------------------

@pytest.mark.parametrize("value,expected", [
    (Fraction(3, 10), True),
    (Fraction(1, 8), True),
    (Fraction(7, 40), True),
    (Fraction(5), True),
    (Fraction(1, 3), False),
    (Fraction(1, 6), False),
    (Fraction(2, 7), False),
])
def test_can_display_as_decimal(value, expected):
    assert can_display_as_decimal(value) is expected

@pytest.mark.parametrize("value,expected", [
    (Fraction(3, 10), "0.3"),
    (Fraction(-3, 10), "-0.3"),
    (Fraction(1, 8), "0.125"),
    (Fraction(25, 2), "12.5"),
    (Fraction(1000000000000001, 10000000000000000), "0.1000000000000001"),
    (Fraction(-7), "-7"),
])
def test_to_decimal_string(value, expected):
    assert to_decimal_string(value) == expected

def test_to_decimal_string_rejects_repeating():
    with pytest.raises(ValueError):
        to_decimal_string(Fraction(1, 3))

# ---------------------------
# format_result Tests
# ---------------------------

@pytest.mark.parametrize("value,precision,expected", [
    (Fraction(2, 3), 0, "2/3"),
    (Fraction(4), 0, "4"),
    (Fraction(2, 3), 4, "0.6667"),
    (Fraction(1, 3), 2, "0.33"),
    (Fraction(-2, 3), 3, "-0.667"),
    (Fraction(1, 8), 2, "0.13"),
    (Fraction(-1, 8), 2, "-0.13"),
    (Fraction(5), 2, "5.00"),
    (Fraction(-1, 1000), 2, "0.00"),
    (Fraction(1, 100), 1, "0.0"),
])
def test_format_result(value, precision, expected):
    assert format_result(value, precision) == expected

def test_format_result_negative_precision():
    with pytest.raises(ValueError):
        format_result(Fraction(1, 2), -1)

# ---------------------------
# format_output Tests
# ---------------------------

@pytest.mark.parametrize("value,expected", [
    (Fraction(14), "14"),
    (Fraction(3, 10), "0.3"),
    (Fraction(-5, 2), "-2.5"),
    (Fraction(1, 3), "1/3"),
    (Fraction(-22, 7), "-22/7"),
])
def test_format_output(value, expected):
    assert format_output(value) == expected
