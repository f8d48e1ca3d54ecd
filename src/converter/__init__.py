"""Converter — разбор и форматирование чисел в произвольном radix.

- parse: текст + ParseOptions → ExactNumber | ParseError
- render: ExactNumber + RenderOptions → RenderResult | RenderError
- NumberConverter: один вход во все целевые radix за один проход
"""

from .parser import parse
from .renderer import group_digits, render
from .pipeline import (
    ConversionEntry,
    ConversionError,
    ConversionErrorKind,
    ConversionReport,
    ConverterConfig,
    NumberConverter,
    radix_label,
)

__all__ = [
    "parse",
    "render",
    "group_digits",
    "ConversionEntry",
    "ConversionError",
    "ConversionErrorKind",
    "ConversionReport",
    "ConverterConfig",
    "NumberConverter",
    "radix_label",
]
