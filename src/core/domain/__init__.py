"""
Domain models and value objects.

Contains fundamental domain entities: ExactNumber, ParseOptions, RenderOptions
and the typed parse/render outcomes.
"""

from src.core.domain.options import (
    DEFAULT_GROUP_SEPARATOR,
    DEFAULT_MAX_FRACTIONAL_DIGITS,
    DEFAULT_RADIX,
    LetterCase,
    ParseOptions,
    RenderOptions,
)
from src.core.domain.exact_number import ExactNumber, Sign
from src.core.domain.outcomes import (
    ParseError,
    ParseErrorKind,
    RenderError,
    RenderErrorKind,
    RenderResult,
)

__all__ = [
    # Options
    "DEFAULT_RADIX",
    "DEFAULT_MAX_FRACTIONAL_DIGITS",
    "DEFAULT_GROUP_SEPARATOR",
    "LetterCase",
    "ParseOptions",
    "RenderOptions",
    # Exact number
    "ExactNumber",
    "Sign",
    # Outcomes
    "ParseError",
    "ParseErrorKind",
    "RenderError",
    "RenderErrorKind",
    "RenderResult",
]
