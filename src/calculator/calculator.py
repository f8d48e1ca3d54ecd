"""Radix Calculator — арифметика над двумя числами одного radix

Обобщение binary calculator страницы NUMVERTER:
- операции + - * / над двумя операндами в одном radix (по умолчанию binary)
- '/' — целочисленное деление с округлением вниз
- результат показывается сразу в нескольких radix (binary, decimal, hex)

Порядок проверок:
1. radix ∈ [2, 36]            → иначе UNSUPPORTED_RADIX
2. разбор левого операнда     → INVALID_OPERAND(operand_index=0)
3. разбор правого операнда    → INVALID_OPERAND(operand_index=1)
4. деление на ноль            → DIVISION_BY_ZERO

Префиксы 0b/0o/0x не распознаются: оба операнда обязаны быть записаны в radix
калькулятора, иначе знаменатель результата мог бы не быть степенью radix.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Final, Optional, Tuple

from src.calculator.arithmetic import add, floor_divide, multiply, subtract
from src.converter.parser import parse
from src.converter.renderer import render
from src.core.domain.exact_number import ExactNumber
from src.core.domain.options import (
    DEFAULT_MAX_FRACTIONAL_DIGITS,
    LetterCase,
    ParseOptions,
    RenderOptions,
)
from src.core.domain.outcomes import ParseError, RenderResult
from src.core.math.exact_arithmetic import MAX_RADIX, MIN_RADIX, validate_radix

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

DEFAULT_CALCULATOR_RADIX: Final[int] = 2
DEFAULT_DISPLAY_RADICES: Final[Tuple[int, ...]] = (2, 10, 16)


# =============================================================================
# ENUMS
# =============================================================================


class Operation(str, Enum):
    """Арифметическая операция калькулятора"""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"


class CalculatorErrorKind(str, Enum):
    """Категория ошибки калькулятора"""

    UNSUPPORTED_RADIX = "unsupported_radix"
    INVALID_OPERAND = "invalid_operand"
    DIVISION_BY_ZERO = "division_by_zero"


_OPERATIONS = {
    Operation.ADD: add,
    Operation.SUBTRACT: subtract,
    Operation.MULTIPLY: multiply,
    Operation.DIVIDE: floor_divide,
}


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class CalculatorConfig:
    """Конфигурация RadixCalculator."""

    radix: int = DEFAULT_CALCULATOR_RADIX
    display_radices: Tuple[int, ...] = DEFAULT_DISPLAY_RADICES
    max_fractional_digits: int = DEFAULT_MAX_FRACTIONAL_DIGITS
    letter_case: LetterCase = LetterCase.UPPER

    def __post_init__(self):
        for radix in self.display_radices:
            if not validate_radix(radix):
                raise ValueError(f"display radix {radix!r} is not supported")
        if self.max_fractional_digits < 0:
            raise ValueError(
                f"max_fractional_digits must be non-negative, got {self.max_fractional_digits}"
            )


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class CalculatorError:
    """Ошибка вычисления.

    Для INVALID_OPERAND: operand_index (0 — левый, 1 — правый) и parse_error.
    """

    kind: CalculatorErrorKind
    message: str
    operand_index: Optional[int] = None
    parse_error: Optional[ParseError] = None


@dataclass(frozen=True)
class CalculatorResult:
    """Результат вычисления."""

    ok: bool
    operation: Operation
    value: Optional[ExactNumber] = None
    renderings: Optional[Dict[int, RenderResult]] = None
    error: Optional[CalculatorError] = None

    def text_for(self, radix: int) -> Optional[str]:
        if not self.renderings or radix not in self.renderings:
            return None
        return self.renderings[radix].text


# =============================================================================
# CALCULATOR
# =============================================================================


class RadixCalculator:
    """Калькулятор над двумя операндами одного radix."""

    def __init__(self, config: CalculatorConfig | None = None):
        self.config = config or CalculatorConfig()

    def calculate(
        self,
        left: str,
        right: str,
        operation: Operation | str,
        radix: int | None = None,
    ) -> CalculatorResult:
        """Вычисление left <operation> right.

        Args:
            left: левый операнд
            right: правый операнд
            operation: Operation или её символ ('+', '-', '*', '/')
            radix: radix операндов (default: из конфигурации)

        Returns:
            CalculatorResult с результатом в display_radices или с ошибкой

        Raises:
            ValueError: если operation не является поддерживаемой операцией
        """
        operation = Operation(operation)
        radix = self.config.radix if radix is None else radix

        if not validate_radix(radix):
            return self._failed(
                operation,
                CalculatorError(
                    kind=CalculatorErrorKind.UNSUPPORTED_RADIX,
                    message=f"Radix must be between {MIN_RADIX} and {MAX_RADIX}, got {radix}",
                ),
            )

        options = ParseOptions(radix=radix, detect_prefix=False)
        operands = []
        for index, text in enumerate((left, right)):
            parsed = parse(text, options)
            if isinstance(parsed, ParseError):
                return self._failed(
                    operation,
                    CalculatorError(
                        kind=CalculatorErrorKind.INVALID_OPERAND,
                        message=f"Operand {index + 1} is not a valid base {radix} number: {parsed.message}",
                        operand_index=index,
                        parse_error=parsed,
                    ),
                )
            operands.append(parsed)

        try:
            value = _OPERATIONS[operation](operands[0], operands[1])
        except ZeroDivisionError:
            return self._failed(
                operation,
                CalculatorError(
                    kind=CalculatorErrorKind.DIVISION_BY_ZERO,
                    message="Cannot divide by zero",
                ),
            )

        renderings = {}
        for display_radix in self.config.display_radices:
            renderings[display_radix] = render(
                value,
                RenderOptions(
                    radix=display_radix,
                    max_fractional_digits=self.config.max_fractional_digits,
                    letter_case=self.config.letter_case,
                ),
            )

        logger.debug("Calculated %r %s %r in base %d", left, operation.value, right, radix)
        return CalculatorResult(ok=True, operation=operation, value=value, renderings=renderings)

    def _failed(self, operation: Operation, error: CalculatorError) -> CalculatorResult:
        logger.info("Calculation %s rejected: %s", operation.value, error.message)
        return CalculatorResult(ok=False, operation=operation, error=error)
