"""
Contract Validation Module

Модуль для валидации JSON контракта сериализованного комплексного числа.
"""

from .validators import (
    COMPLEX_NUMBER_SCHEMA,
    FiniteNumberValidator,
    is_valid_complex_number,
    iter_complex_number_errors,
    load_schema,
    validate_complex_number,
)

__all__ = [
    # Schema
    "COMPLEX_NUMBER_SCHEMA",
    "FiniteNumberValidator",
    "load_schema",
    # Functions
    "validate_complex_number",
    "is_valid_complex_number",
    "iter_complex_number_errors",
]
