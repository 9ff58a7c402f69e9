"""
Arithmetic operations - pure numeric functions.

Every function here is stateless and side-effect free. Failures raise
InvalidArgumentError with a fixed message; callers render it for the user.

Key behaviors:
- divide rejects a zero divisor
- square_root and factorial reject negative input
- power follows IEEE-754 pow (inf/NaN instead of Python exceptions)
- is_prime uses 6k +/- 1 trial division up to sqrt(n)
- gcd/lcm operate on absolute values
"""

from __future__ import annotations

import math
from enum import Enum

# --- Errors ---

DIVISION_BY_ZERO_MESSAGE = "Division by zero is not allowed"
NEGATIVE_SQUARE_ROOT_MESSAGE = "Cannot calculate square root of negative number"
NEGATIVE_FACTORIAL_MESSAGE = "Factorial is not defined for negative numbers"


class ArgumentErrorKind(str, Enum):
    """Kinds of invalid argument."""

    DIVISION_BY_ZERO = "division_by_zero"
    NEGATIVE_INPUT = "negative_input"


class InvalidArgumentError(ValueError):
    """Raised when an operation receives an argument outside its domain."""

    def __init__(self, kind: ArgumentErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message


# --- Real-valued operations ---


def add(a: float, b: float) -> float:
    return a + b


def subtract(a: float, b: float) -> float:
    return a - b


def multiply(a: float, b: float) -> float:
    return a * b


def divide(a: float, b: float) -> float:
    """Divide a by b; b must be non-zero."""
    if b == 0:
        raise InvalidArgumentError(ArgumentErrorKind.DIVISION_BY_ZERO, DIVISION_BY_ZERO_MESSAGE)
    return a / b


def _is_odd_integer(value: float) -> bool:
    return math.isfinite(value) and value == math.floor(value) and value % 2 == 1


def power(base: float, exponent: float) -> float:
    """
    Raise base to exponent with IEEE-754 pow semantics.

    math.pow raises where C pow returns a special value, so those cases
    are mapped back:
    - overflow -> +/-inf (negative only for a negative base and odd exponent)
    - zero base, negative exponent -> +/-inf (negative only for -0.0 and odd exponent)
    - negative finite base, non-integer exponent -> NaN
    """
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        if base == 0:
            if math.copysign(1.0, base) < 0 and _is_odd_integer(exponent):
                return -math.inf
            return math.inf
        return math.nan


def square_root(number: float) -> float:
    """Square root of a non-negative number."""
    if number < 0:
        raise InvalidArgumentError(ArgumentErrorKind.NEGATIVE_INPUT, NEGATIVE_SQUARE_ROOT_MESSAGE)
    return math.sqrt(number)


def percentage(number: float, percent: float) -> float:
    """Return percent% of number."""
    return (number * percent) / 100


# --- Integer operations ---


def is_even(number: int) -> bool:
    # Python's % is floored, so negative even numbers also give 0
    return number % 2 == 0


def is_prime(number: int) -> bool:
    """
    Primality by trial division over 6k +/- 1 candidates.

    Numbers <= 1 are not prime; 2 and 3 are. After rejecting multiples
    of 2 and 3, only i and i + 2 for i = 5, 11, 17, ... with i * i <= n
    need checking.
    """
    if number <= 1:
        return False
    if number <= 3:
        return True
    if number % 2 == 0 or number % 3 == 0:
        return False

    i = 5
    while i * i <= number:
        if number % i == 0 or number % (i + 2) == 0:
            return False
        i += 6
    return True


def factorial(number: int) -> int:
    """
    Product of 1..number.

    Returns an exact int; there is no overflow guard.
    """
    if number < 0:
        raise InvalidArgumentError(ArgumentErrorKind.NEGATIVE_INPUT, NEGATIVE_FACTORIAL_MESSAGE)
    if number in (0, 1):
        return 1

    result = 1
    for i in range(2, number + 1):
        result *= i
    return result


def gcd(a: int, b: int) -> int:
    """Greatest common divisor (iterative Euclid); never negative."""
    a = abs(a)
    b = abs(b)

    while b != 0:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple; 0 when either argument is 0."""
    if a == 0 or b == 0:
        return 0
    return abs(a * b) // gcd(a, b)
