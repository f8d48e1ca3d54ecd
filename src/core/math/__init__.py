"""
Core math modules для Numverter

Точные целочисленные примитивы для перевода чисел между radix.
"""

# Exact Arithmetic
from src.core.math.exact_arithmetic import (
    # Radix constants
    DIGIT_ALPHABET_LOWER,
    DIGIT_ALPHABET_UPPER,
    MAX_RADIX,
    MIN_RADIX,
    # Validation
    validate_radix,
    # Digits
    digit_char,
    digit_value,
    # Accumulation and powers
    accumulate_digits,
    radix_exponent_for,
    radix_power,
    # Digit extraction
    fraction_to_digits,
    integer_to_digits,
)

__all__ = [
    # Exact Arithmetic — Constants
    "DIGIT_ALPHABET_LOWER",
    "DIGIT_ALPHABET_UPPER",
    "MAX_RADIX",
    "MIN_RADIX",
    # Exact Arithmetic — Validation
    "validate_radix",
    # Exact Arithmetic — Digits
    "digit_char",
    "digit_value",
    # Exact Arithmetic — Accumulation and powers
    "accumulate_digits",
    "radix_exponent_for",
    "radix_power",
    # Exact Arithmetic — Digit extraction
    "fraction_to_digits",
    "integer_to_digits",
]
