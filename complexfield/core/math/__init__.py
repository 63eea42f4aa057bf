"""
Core math modules для complexfield

Поле комплексных чисел, конечная редукция и численные примитивы.
"""

# Numerical Safeguards
from complexfield.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # NaN/Inf checks
    is_valid_float,
    # Validation
    validate_count,
    validate_tolerance,
)

# Complex Arithmetic
from complexfield.core.math.complex_arithmetic import (
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
    subtract,
)

# Summation
from complexfield.core.math.summation import (
    IndexedFamily,
    reduce_sum,
    reduce_sum_trajectory,
    sum_values,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards — NaN/Inf checks
    "is_valid_float",
    # Numerical Safeguards — Validation
    "validate_count",
    "validate_tolerance",
    # Complex Arithmetic — Exceptions
    "DivisionByZero",
    # Complex Arithmetic — Functions
    "add",
    "conjugate",
    "divide",
    "invert",
    "is_close",
    "multiply",
    "negate",
    "norm",
    "norm_squared",
    "subtract",
    # Summation — Types
    "IndexedFamily",
    # Summation — Functions
    "reduce_sum",
    "reduce_sum_trajectory",
    "sum_values",
]
