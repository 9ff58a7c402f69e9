"""
Arithmetic component - stateless numeric operations.
"""

from ._impl import (
    DIVISION_BY_ZERO_MESSAGE,
    NEGATIVE_FACTORIAL_MESSAGE,
    NEGATIVE_SQUARE_ROOT_MESSAGE,
    ArgumentErrorKind,
    InvalidArgumentError,
    add,
    divide,
    factorial,
    gcd,
    is_even,
    is_prime,
    lcm,
    multiply,
    percentage,
    power,
    square_root,
    subtract,
)
from .component import OPERATIONS, OperationSpec, run, validate_input
from .models import (
    ArithmeticValidationError,
    ComputeInput,
    ComputeOutput,
    Operation,
)

__all__ = [
    # Entry point
    "run",
    "validate_input",
    "OPERATIONS",
    "OperationSpec",
    # Pure functions
    "add",
    "subtract",
    "multiply",
    "divide",
    "power",
    "square_root",
    "percentage",
    "is_even",
    "is_prime",
    "factorial",
    "gcd",
    "lcm",
    # Errors
    "ArgumentErrorKind",
    "InvalidArgumentError",
    "DIVISION_BY_ZERO_MESSAGE",
    "NEGATIVE_FACTORIAL_MESSAGE",
    "NEGATIVE_SQUARE_ROOT_MESSAGE",
    # Models
    "ArithmeticValidationError",
    "ComputeInput",
    "ComputeOutput",
    "Operation",
]
