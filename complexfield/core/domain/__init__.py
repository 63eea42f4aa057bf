"""
Domain models and value objects.

Contains the immutable ComplexNumber value type and its distinguished constants.
"""

from complexfield.core.domain.complex_number import I, ONE, ZERO, ComplexNumber, embed

__all__ = [
    "ComplexNumber",
    "embed",
    "ZERO",
    "ONE",
    "I",
]
