"""
Arithmetic component - dispatches a named operation to its pure function.

Invariants:
- Same input always produces the same output
- Invalid arguments become error values; run() never raises for them
- Integer operations only accept int operands, the rest int or float (bool excluded)
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ._impl import (
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
from .models import ArithmeticValidationError, ComputeInput, ComputeOutput

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OperationSpec:
    """Dispatch entry for one operation."""

    func: Callable[..., Any]
    params: tuple[str, ...]
    integer_only: bool = False

    @property
    def arity(self) -> int:
        return len(self.params)


OPERATIONS: dict[str, OperationSpec] = {
    "add": OperationSpec(add, ("a", "b")),
    "subtract": OperationSpec(subtract, ("a", "b")),
    "multiply": OperationSpec(multiply, ("a", "b")),
    "divide": OperationSpec(divide, ("a", "b")),
    "power": OperationSpec(power, ("base", "exponent")),
    "square_root": OperationSpec(square_root, ("number",)),
    "percentage": OperationSpec(percentage, ("number", "percentage")),
    "is_even": OperationSpec(is_even, ("number",), integer_only=True),
    "is_prime": OperationSpec(is_prime, ("number",), integer_only=True),
    "factorial": OperationSpec(factorial, ("number",), integer_only=True),
    "gcd": OperationSpec(gcd, ("a", "b"), integer_only=True),
    "lcm": OperationSpec(lcm, ("a", "b"), integer_only=True),
}

ERROR_CODES: dict[ArgumentErrorKind, str] = {
    ArgumentErrorKind.DIVISION_BY_ZERO: "DIVISION_BY_ZERO",
    ArgumentErrorKind.NEGATIVE_INPUT: "NEGATIVE_INPUT",
}


# --- Validation ---


def validate_input(inp: ComputeInput) -> list[ArithmeticValidationError]:
    """
    Validate operation name, arity and operand types.

    Args:
        inp: ComputeInput to check

    Returns:
        List of validation errors (empty if valid)
    """
    spec = OPERATIONS.get(inp.operation)
    if spec is None:
        return [
            ArithmeticValidationError(
                code="UNKNOWN_OPERATION",
                message=f"Operation must be one of: {', '.join(sorted(OPERATIONS))}",
                field_name="operation",
            )
        ]

    if len(inp.operands) != spec.arity:
        return [
            ArithmeticValidationError(
                code="ARITY_MISMATCH",
                message=f"{inp.operation} takes {spec.arity} operand(s), got {len(inp.operands)}",
                field_name="operands",
            )
        ]

    accepted: tuple[type, ...]
    if spec.integer_only:
        accepted, code, kind = (int,), "INTEGER_REQUIRED", "an integer"
    else:
        accepted, code, kind = (int, float), "NUMBER_REQUIRED", "a numeric"

    errors: list[ArithmeticValidationError] = []
    for name, value in zip(spec.params, inp.operands, strict=True):
        if isinstance(value, bool) or not isinstance(value, accepted):
            errors.append(
                ArithmeticValidationError(
                    code=code,
                    message=f"{inp.operation} requires {kind} {name}",
                    field_name=name,
                )
            )
    return errors


# --- Entry Point ---


def run(inp: ComputeInput) -> ComputeOutput:
    """
    Main component entry point (Atomic Component Pattern).

    Args:
        inp: ComputeInput naming the operation and its operands

    Returns:
        ComputeOutput with the result, or the errors that prevented it
    """
    errors = validate_input(inp)
    if errors:
        logger.info("Rejected %s%r: %s", inp.operation, inp.operands, errors[0].message)
        return ComputeOutput(
            operation=inp.operation,
            operands=inp.operands,
            errors=errors,
            success=False,
        )

    spec = OPERATIONS[inp.operation]
    try:
        result = spec.func(*inp.operands)
    except InvalidArgumentError as e:
        logger.info("Rejected %s%r: %s", inp.operation, inp.operands, e.message)
        return ComputeOutput(
            operation=inp.operation,
            operands=inp.operands,
            errors=[
                ArithmeticValidationError(
                    code=ERROR_CODES[e.kind],
                    message=e.message,
                    # divisor for divide, the sole operand otherwise
                    field_name=spec.params[-1],
                )
            ],
            success=False,
        )

    logger.debug("Computed %s%r = %r", inp.operation, inp.operands, result)
    return ComputeOutput(operation=inp.operation, operands=inp.operands, result=result)
