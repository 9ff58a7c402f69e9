"""
Calculator endpoints.

Each route parses its query parameters, runs the arithmetic component and
returns the formatted text response.

Key behaviors:
- Responses are text/plain
- Invalid arguments (divide by zero, negative sqrt/factorial) return 200
  with an "Error: <message>" body
- Integer parameters are limited to the signed 32-bit range
- factorial rejects inputs above limits.factorial_max_input with 400
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import PlainTextResponse

from calculator.api.deps import get_formatting_rules, get_limits_rules, get_rules
from calculator.components.arithmetic import ComputeInput
from calculator.components.arithmetic import run as compute
from calculator.components.formatting import render_error
from calculator.components.formatting import run as render
from calculator.rules.models import FormattingRules, LimitsRules, Rules

router = APIRouter()

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

IntParam = Annotated[int, Query(ge=INT32_MIN, le=INT32_MAX)]
Formatting = Annotated[FormattingRules, Depends(get_formatting_rules)]


def _respond(inp: ComputeInput, formatting: FormattingRules) -> str:
    return render(compute(inp), rules=formatting)


@router.get("/", response_class=PlainTextResponse, summary="Service status")
def home(rules: Rules = Depends(get_rules)) -> str:
    """Static status message."""
    return rules.service.home_message


@router.get("/add", response_class=PlainTextResponse, summary="Add two numbers")
def add(a: float, b: float, formatting: Formatting) -> str:
    return _respond(ComputeInput("add", (a, b)), formatting)


@router.get("/subtract", response_class=PlainTextResponse, summary="Subtract b from a")
def subtract(a: float, b: float, formatting: Formatting) -> str:
    return _respond(ComputeInput("subtract", (a, b)), formatting)


@router.get("/multiply", response_class=PlainTextResponse, summary="Multiply two numbers")
def multiply(a: float, b: float, formatting: Formatting) -> str:
    return _respond(ComputeInput("multiply", (a, b)), formatting)


@router.get("/divide", response_class=PlainTextResponse, summary="Divide a by b")
def divide(a: float, b: float, formatting: Formatting) -> str:
    return _respond(ComputeInput("divide", (a, b)), formatting)


@router.get("/power", response_class=PlainTextResponse, summary="Raise base to exponent")
def power(base: float, exponent: float, formatting: Formatting) -> str:
    return _respond(ComputeInput("power", (base, exponent)), formatting)


@router.get("/sqrt", response_class=PlainTextResponse, summary="Square root")
def square_root(number: float, formatting: Formatting) -> str:
    return _respond(ComputeInput("square_root", (number,)), formatting)


@router.get("/percentage", response_class=PlainTextResponse, summary="Percentage of a number")
def percentage(number: float, percentage: float, formatting: Formatting) -> str:
    return _respond(ComputeInput("percentage", (number, percentage)), formatting)


@router.get("/isEven", response_class=PlainTextResponse, summary="Parity check")
def is_even(number: IntParam, formatting: Formatting) -> str:
    return _respond(ComputeInput("is_even", (number,)), formatting)


@router.get("/isPrime", response_class=PlainTextResponse, summary="Primality check")
def is_prime(number: IntParam, formatting: Formatting) -> str:
    return _respond(ComputeInput("is_prime", (number,)), formatting)


@router.get(
    "/factorial",
    response_class=PlainTextResponse,
    responses={400: {"description": "Input above the configured factorial limit"}},
    summary="Factorial",
)
def factorial(
    number: IntParam,
    formatting: Formatting,
    limits: LimitsRules = Depends(get_limits_rules),
) -> PlainTextResponse:
    """
    Factorial of number.

    Negative input is an arithmetic error (200); input above the configured
    limit is rejected before computing (400).
    """
    if number > limits.factorial_max_input:
        return PlainTextResponse(
            render_error(f"Factorial input exceeds the limit of {limits.factorial_max_input}"),
            status_code=status.HTTP_400_BAD_REQUEST,
        )
    return PlainTextResponse(_respond(ComputeInput("factorial", (number,)), formatting))


@router.get("/gcd", response_class=PlainTextResponse, summary="Greatest common divisor")
def gcd(a: IntParam, b: IntParam, formatting: Formatting) -> str:
    return _respond(ComputeInput("gcd", (a, b)), formatting)


@router.get("/lcm", response_class=PlainTextResponse, summary="Least common multiple")
def lcm(a: IntParam, b: IntParam, formatting: Formatting) -> str:
    return _respond(ComputeInput("lcm", (a, b)), formatting)
