"""
ExactNumber Arithmetic — точные операции над числами одного radix

Операции выполняются над fractions.Fraction (as_fraction) и возвращаются в форму
ExactNumber со знаменателем radix ** k:
- add / subtract / multiply: если оба операнда в одном radix, знаменатель
  результата всегда делит степень этого radix (r^a · r^b = r^(a+b))
- floor_divide: целочисленное деление с округлением к -∞ (результат — целое)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат всегда нормализован (минимальный k, нет "-0")
2. Операнды не изменяются (ExactNumber frozen)
3. Деление на ноль → ZeroDivisionError (типизированную ошибку формирует калькулятор)
"""

import math
from fractions import Fraction

from src.core.domain.exact_number import ExactNumber, Sign
from src.core.math.exact_arithmetic import radix_exponent_for, radix_power


class NonTerminatingResult(ValueError):
    """
    Рациональное значение не имеет конечной записи в заданном radix.

    Например, 1/3 в radix 10. Для add/subtract/multiply операндов одного radix
    не возникает.
    """

    pass


def from_fraction(value: Fraction, radix: int) -> ExactNumber:
    """
    Построение ExactNumber из Fraction с дробной частью по основанию radix.

    Raises:
        NonTerminatingResult: если знаменатель value не делит никакую степень radix

    Examples:
        >>> from_fraction(Fraction(-5, 2), 2).as_fraction()
        Fraction(-5, 2)
    """
    if value == 0:
        return ExactNumber.zero(source_radix=radix)

    magnitude = abs(value)
    integer_magnitude = math.floor(magnitude)
    fraction = magnitude - integer_magnitude

    fraction_digits = radix_exponent_for(fraction.denominator, radix)
    if fraction_digits is None:
        raise NonTerminatingResult(
            f"{value} has no terminating representation in base {radix}"
        )

    denominator = radix_power(radix, fraction_digits)
    return ExactNumber(
        sign=Sign.NEGATIVE if value < 0 else Sign.POSITIVE,
        integer_magnitude=integer_magnitude,
        fraction_numerator=fraction.numerator * (denominator // fraction.denominator),
        fraction_denominator=denominator,
        fraction_digits=fraction_digits,
        source_radix=radix,
    )


def add(left: ExactNumber, right: ExactNumber) -> ExactNumber:
    return from_fraction(left.as_fraction() + right.as_fraction(), left.source_radix)


def subtract(left: ExactNumber, right: ExactNumber) -> ExactNumber:
    return from_fraction(left.as_fraction() - right.as_fraction(), left.source_radix)


def multiply(left: ExactNumber, right: ExactNumber) -> ExactNumber:
    return from_fraction(left.as_fraction() * right.as_fraction(), left.source_radix)


def floor_divide(left: ExactNumber, right: ExactNumber) -> ExactNumber:
    """
    Целочисленное деление с округлением вниз (floor), -7 // 2 = -4.

    Raises:
        ZeroDivisionError: если right == 0
    """
    if right.is_zero:
        raise ZeroDivisionError("division by zero")
    quotient = math.floor(left.as_fraction() / right.as_fraction())
    return from_fraction(Fraction(quotient), left.source_radix)
