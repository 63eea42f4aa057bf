"""
complexfield — complex numbers as pairs of reals, with field operations,
conjugation and finite summation.
"""

from complexfield.core.domain import I, ONE, ZERO, ComplexNumber, embed
from complexfield.core.math import (
    DivisionByZero,
    add,
    conjugate,
    divide,
    invert,
    is_close,
    multiply,
    negate,
    norm,
    norm_squared,
    reduce_sum,
    reduce_sum_trajectory,
    subtract,
    sum_values,
)

__version__ = "0.1.0"

__all__ = [
    # Domain
    "ComplexNumber",
    "embed",
    "ZERO",
    "ONE",
    "I",
    # Arithmetic
    "DivisionByZero",
    "add",
    "negate",
    "subtract",
    "multiply",
    "invert",
    "divide",
    "norm_squared",
    "norm",
    "conjugate",
    "is_close",
    # Summation
    "reduce_sum",
    "reduce_sum_trajectory",
    "sum_values",
]
