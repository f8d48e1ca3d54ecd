"""
Contract Validation Module

Модуль для валидации JSON контрактов конвертера.
"""

from .validators import (
    ContractValidator,
    ConversionReportValidator,
    ConversionRequestValidator,
    SchemaLoader,
    validate_conversion_report,
    validate_conversion_request,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ConversionRequestValidator",
    "ConversionReportValidator",
    # Functions
    "validate_conversion_request",
    "validate_conversion_report",
]
