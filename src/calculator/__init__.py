"""Calculator — арифметика над числами одного radix (+ - * /)."""

from .arithmetic import (
    NonTerminatingResult,
    add,
    floor_divide,
    from_fraction,
    multiply,
    subtract,
)
from .calculator import (
    CalculatorConfig,
    CalculatorError,
    CalculatorErrorKind,
    CalculatorResult,
    Operation,
    RadixCalculator,
)

__all__ = [
    "NonTerminatingResult",
    "add",
    "subtract",
    "multiply",
    "floor_divide",
    "from_fraction",
    "CalculatorConfig",
    "CalculatorError",
    "CalculatorErrorKind",
    "CalculatorResult",
    "Operation",
    "RadixCalculator",
]
