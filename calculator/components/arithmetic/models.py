"""
Arithmetic component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

# --- Types ---

Operation = Literal[
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
]

Number = int | float
Result = int | float | bool


# --- Validation Error ---


@dataclass(frozen=True)
class ArithmeticValidationError:
    """Arithmetic validation error."""

    code: str
    message: str
    field_name: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class ComputeInput:
    """
    Input for a single arithmetic operation.

    Operands are positional, in the order the operation takes them
    (e.g. ``("power", (base, exponent))``).
    """

    operation: Operation
    operands: tuple[Number, ...]


# --- Output Models ---


@dataclass(frozen=True)
class ComputeOutput:
    """Output of an arithmetic operation."""

    operation: str
    operands: tuple[Number, ...]
    result: Result | None = None
    errors: list[ArithmeticValidationError] = field(default_factory=list)
    success: bool = True
