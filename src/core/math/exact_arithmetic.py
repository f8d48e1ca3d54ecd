"""
Exact Arithmetic — Arbitrary-Precision Radix Primitives

Модуль содержит целочисленные примитивы, на которых построены parser и renderer:
- Валидация radix (2–36) и отображение символ ↔ значение цифры
- Накопление цифр (multiply-by-radix-and-add)
- Извлечение цифр целой части (repeated divmod)
- Извлечение цифр дробной части (repeated multiply-by-radix)
- Поиск степени radix, кратной знаменателю (для арифметики калькулятора)

Все вычисления ведутся на Python int (arbitrary precision), float не используется
нигде, поэтому точность не теряется при любой длине входной строки.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Никаких fixed-width native типов: нет потери точности за пределами 53 бит
2. Все операции детерминированы и не имеют побочных эффектов
3. Нарушение контракта (radix вне [2, 36], отрицательная величина) → ValueError

СЛОЖНОСТЬ:
    integer_to_digits / fraction_to_digits ~ O(n²) по числу цифр
    (каждый шаг divmod/умножения линеен по длине bignum)
"""

from typing import Final, Iterable

# =============================================================================
# RADIX-ПАРАМЕТРЫ
# =============================================================================

MIN_RADIX: Final[int] = 2
MAX_RADIX: Final[int] = 36

# Алфавит цифр: 0-9, затем A-Z (значения 10..35)
DIGIT_ALPHABET_UPPER: Final[str] = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
DIGIT_ALPHABET_LOWER: Final[str] = "0123456789abcdefghijklmnopqrstuvwxyz"


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_radix(radix: int) -> bool:
    """
    Проверка, что radix поддерживается (MIN_RADIX ≤ radix ≤ MAX_RADIX).

    bool исключён явно: True/False не являются radix.

    Examples:
        >>> validate_radix(16)
        True
        >>> validate_radix(37)
        False
    """
    if isinstance(radix, bool) or not isinstance(radix, int):
        return False
    return MIN_RADIX <= radix <= MAX_RADIX


def _require_radix(radix: int) -> None:
    if not validate_radix(radix):
        raise ValueError(f"radix must be in [{MIN_RADIX}, {MAX_RADIX}], got {radix!r}")


def _require_non_negative(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


# =============================================================================
# ЦИФРЫ
# =============================================================================


def digit_value(char: str) -> int | None:
    """
    Значение символа-цифры (0-9 → 0..9, A-Z/a-z → 10..35).

    Returns:
        Значение цифры или None, если символ вне [0-9A-Za-z]
    """
    if len(char) != 1 or not char.isascii():
        return None
    if "0" <= char <= "9":
        return ord(char) - ord("0")
    lowered = char.lower()
    if "a" <= lowered <= "z":
        return ord(lowered) - ord("a") + 10
    return None


def digit_char(value: int, lowercase: bool = False) -> str:
    """
    Символ для значения цифры 0..35.

    Raises:
        ValueError: Если value вне [0, MAX_RADIX)
    """
    if not 0 <= value < MAX_RADIX:
        raise ValueError(f"digit value must be in [0, {MAX_RADIX}), got {value}")
    if lowercase:
        return DIGIT_ALPHABET_LOWER[value]
    return DIGIT_ALPHABET_UPPER[value]


# =============================================================================
# НАКОПЛЕНИЕ И СТЕПЕНИ
# =============================================================================


def accumulate_digits(values: Iterable[int], radix: int) -> int:
    """
    Интерпретация последовательности цифр (старшая первой) как целого числа.

    Алгоритм (Horner): acc = acc * radix + digit для каждой цифры слева направо.
    Пустая последовательность → 0.

    Raises:
        ValueError: Если radix не поддерживается или цифра >= radix

    Examples:
        >>> accumulate_digits([1, 0, 1, 0], 2)
        10
        >>> accumulate_digits([15, 15], 16)
        255
    """
    _require_radix(radix)
    acc = 0
    for value in values:
        if not 0 <= value < radix:
            raise ValueError(f"digit {value} is not valid for radix {radix}")
        acc = acc * radix + value
    return acc


def radix_power(radix: int, exponent: int) -> int:
    """radix ** exponent для неотрицательного exponent (точный bignum)."""
    _require_radix(radix)
    _require_non_negative(exponent, "exponent")
    return radix**exponent


def radix_exponent_for(denominator: int, radix: int) -> int | None:
    """
    Минимальный k, при котором denominator делит radix ** k.

    Используется для перевода рационального результата арифметики обратно
    в форму numerator / radix**k. Если знаменатель содержит простой множитель,
    которого нет в radix, такого k не существует → None.

    Граница поиска: k ≤ bit_length(denominator), так как показатель любого
    простого множителя denominator не превышает log2(denominator).

    Examples:
        >>> radix_exponent_for(2, 10)
        1
        >>> radix_exponent_for(8, 16)
        1
        >>> radix_exponent_for(3, 10) is None
        True
    """
    _require_radix(radix)
    if denominator <= 0:
        raise ValueError(f"denominator must be positive, got {denominator}")

    power = 1
    for exponent in range(denominator.bit_length() + 1):
        if power % denominator == 0:
            return exponent
        power *= radix
    return None


# =============================================================================
# ИЗВЛЕЧЕНИЕ ЦИФР
# =============================================================================


def integer_to_digits(magnitude: int, radix: int) -> list[int]:
    """
    Цифры целого неотрицательного числа в заданном radix (старшая первой).

    Повторное деление на radix с остатком; остатки собираются и разворачиваются.
    Ноль → [0].

    Examples:
        >>> integer_to_digits(10, 2)
        [1, 0, 1, 0]
        >>> integer_to_digits(0, 16)
        [0]
    """
    _require_radix(radix)
    _require_non_negative(magnitude, "magnitude")

    if magnitude == 0:
        return [0]

    digits: list[int] = []
    while magnitude > 0:
        magnitude, remainder = divmod(magnitude, radix)
        digits.append(remainder)
    digits.reverse()
    return digits


def fraction_to_digits(
    numerator: int,
    denominator: int,
    radix: int,
    limit: int,
) -> tuple[list[int], int]:
    """
    Цифры дробной части numerator / denominator в заданном radix.

    На каждом шаге: numerator *= radix; digit, numerator = divmod(numerator, denominator).
    Остановка при нулевом остатке (конечное разложение) или по достижении limit цифр.
    Последняя цифра НЕ округляется.

    Args:
        numerator: Числитель (0 ≤ numerator < denominator)
        denominator: Знаменатель (> 0)
        radix: Целевой radix
        limit: Максимальное количество цифр (≥ 0)

    Returns:
        (digits, remainder):
            - digits: извлечённые цифры (старшая первой)
            - remainder: оставшийся числитель; != 0 означает, что разложение обрезано

    Examples:
        >>> fraction_to_digits(1, 2, 2, 8)
        ([1], 0)
        >>> fraction_to_digits(1, 10, 2, 5)
        ([0, 0, 0, 1, 1], 2)
    """
    _require_radix(radix)
    _require_non_negative(numerator, "numerator")
    _require_non_negative(limit, "limit")
    if denominator <= 0:
        raise ValueError(f"denominator must be positive, got {denominator}")
    if numerator >= denominator:
        raise ValueError(
            f"numerator must be less than denominator, got {numerator}/{denominator}"
        )

    digits: list[int] = []
    while numerator != 0 and len(digits) < limit:
        digit, numerator = divmod(numerator * radix, denominator)
        digits.append(digit)
    return digits, numerator
