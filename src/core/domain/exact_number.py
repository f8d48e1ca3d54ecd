"""
ExactNumber — точное рациональное представление числа в произвольном radix

Immutable Pydantic модель, которую строит parse и читает render.

Значение = sign × (integer_magnitude + fraction_numerator / fraction_denominator),
где fraction_denominator = source_radix ** fraction_digits.

Знаменатель — степень ИСХОДНОГО radix, а не целевого, поэтому при форматировании
в другой radix разложение может оказаться бесконечным (например, 0.1₁₀ в radix 2).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. 0 ≤ fraction_numerator < fraction_denominator
2. fraction_denominator == source_radix ** fraction_digits (без сокращения на gcd)
3. sign == ZERO ⟺ integer_magnitude == 0 и fraction_numerator == 0 (нет "-0")
"""

from enum import Enum
from fractions import Fraction

from pydantic import BaseModel, Field, model_validator

from src.core.math.exact_arithmetic import MAX_RADIX, MIN_RADIX, radix_power


# =============================================================================
# ENUMS
# =============================================================================


class Sign(str, Enum):
    """Знак точного числа"""

    POSITIVE = "positive"
    NEGATIVE = "negative"
    ZERO = "zero"


# =============================================================================
# EXACT NUMBER
# =============================================================================


class ExactNumber(BaseModel):
    """
    Точное знаковое рациональное число с дробной частью по основанию source_radix.

    Immutable модель (frozen=True): безопасно разделяется между любым числом
    вызовов render, в том числе конкурентных.
    """

    sign: Sign = Field(..., description="Знак (POSITIVE/NEGATIVE/ZERO)")
    integer_magnitude: int = Field(..., ge=0, description="Модуль целой части")
    fraction_numerator: int = Field(0, ge=0, description="Числитель дробной части")
    fraction_denominator: int = Field(1, gt=0, description="source_radix ** fraction_digits")
    fraction_digits: int = Field(0, ge=0, description="Число цифр дробной части")
    source_radix: int = Field(
        10, ge=MIN_RADIX, le=MAX_RADIX, description="Radix, в котором число было разобрано"
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_invariants(self) -> "ExactNumber":
        """Проверка нормализации дроби и знака"""
        expected = radix_power(self.source_radix, self.fraction_digits)
        if self.fraction_denominator != expected:
            raise ValueError(
                f"fraction_denominator must be {self.source_radix}**{self.fraction_digits}"
            )
        if self.fraction_numerator >= self.fraction_denominator:
            raise ValueError("fraction_numerator must be less than fraction_denominator")

        magnitude_is_zero = self.integer_magnitude == 0 and self.fraction_numerator == 0
        if magnitude_is_zero and self.sign != Sign.ZERO:
            raise ValueError(f"zero magnitude requires sign ZERO, got {self.sign.value}")
        if not magnitude_is_zero and self.sign == Sign.ZERO:
            raise ValueError("non-zero magnitude cannot have sign ZERO")
        return self

    @classmethod
    def zero(cls, source_radix: int = 10) -> "ExactNumber":
        """Каноничный ноль"""
        return cls(sign=Sign.ZERO, integer_magnitude=0, source_radix=source_radix)

    @property
    def is_zero(self) -> bool:
        return self.sign == Sign.ZERO

    @property
    def is_negative(self) -> bool:
        return self.sign == Sign.NEGATIVE

    @property
    def is_integer(self) -> bool:
        """True если дробная часть равна нулю"""
        return self.fraction_numerator == 0

    def as_fraction(self) -> Fraction:
        """
        Знаковое точное значение как fractions.Fraction.

        Fraction сокращает дробь, поэтому используется только для сравнения и
        арифметики, но не как внутреннее представление.
        """
        magnitude = Fraction(
            self.integer_magnitude * self.fraction_denominator + self.fraction_numerator,
            self.fraction_denominator,
        )
        return -magnitude if self.is_negative else magnitude
