"""
Formatting component - renders arithmetic results as text responses.

Invariants:
- Floating values use fixed-point with the configured number of places
- Integers render as plain integers
- Rounding is half-up on the shortest decimal representation,
  so 0.125 renders as "0.13" rather than banker's "0.12"
- NaN and infinities render as "NaN", "Infinity", "-Infinity"
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

from calculator.components.arithmetic import ComputeOutput

from .ports import FormattingRulesPort

DEFAULT_DECIMAL_PLACES = 2

# Enough digits for any finite double (~1.8e308) plus the fractional places
_DECIMAL_PRECISION = 400

ERROR_PREFIX = "Error: "

# {0}, {1} = formatted operands in call order, {result} = formatted result
RESULT_TEMPLATES: dict[str, str] = {
    "add": "{0} + {1} = {result}",
    "subtract": "{0} - {1} = {result}",
    "multiply": "{0} * {1} = {result}",
    "divide": "{0} / {1} = {result}",
    "power": "{0} ^ {1} = {result}",
    "square_root": "sqrt({0}) = {result}",
    "percentage": "{1}% of {0} = {result}",
    "factorial": "{0}! = {result}",
    "gcd": "gcd({0}, {1}) = {result}",
    "lcm": "lcm({0}, {1}) = {result}",
}

# (template when True, template when False)
PREDICATE_TEMPLATES: dict[str, tuple[str, str]] = {
    "is_prime": ("{0} is prime", "{0} is not prime"),
    "is_even": ("{0} is even", "{0} is odd"),
}


# --- Pure Functions (Functional Core) ---


def format_decimal(value: float, places: int = DEFAULT_DECIMAL_PLACES) -> str:
    """
    Render a float with a fixed number of decimal places.

    Args:
        value: Value to render
        places: Digits after the decimal point

    Returns:
        Fixed-point string, e.g. format_decimal(5.0) == "5.00"
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"

    quantum = Decimal(1).scaleb(-places)
    with localcontext() as ctx:
        ctx.prec = _DECIMAL_PRECISION
        rounded = Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP)
    return f"{rounded:f}"


def format_number(value: int | float, places: int = DEFAULT_DECIMAL_PLACES) -> str:
    """Render ints plainly and floats with fixed decimal places."""
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return format_decimal(value, places)


def render_error(message: str) -> str:
    """Render an error message for the user."""
    return f"{ERROR_PREFIX}{message}"


def render_result(output: ComputeOutput, places: int = DEFAULT_DECIMAL_PLACES) -> str:
    """
    Render a compute output as its text response.

    Failed outputs render their first error; successful ones use the
    operation's template.

    Raises:
        ValueError: If the operation has no template, or a successful
            output carries no result
    """
    if not output.success:
        return render_error(output.errors[0].message)

    operands = [format_number(v, places) for v in output.operands]

    if output.operation in PREDICATE_TEMPLATES:
        when_true, when_false = PREDICATE_TEMPLATES[output.operation]
        return (when_true if output.result else when_false).format(*operands)

    template = RESULT_TEMPLATES.get(output.operation)
    if template is None:
        raise ValueError(f"No response template for operation: {output.operation}")

    if output.result is None:
        raise ValueError(f"Successful {output.operation} output has no result")
    return template.format(*operands, result=format_number(output.result, places))


def run(output: ComputeOutput, *, rules: FormattingRulesPort | None = None) -> str:
    """
    Main component entry point (Atomic Component Pattern).

    Args:
        output: Result of the arithmetic component
        rules: Formatting rules port (default 2 decimal places)

    Returns:
        Text response
    """
    places = rules.decimal_places if rules is not None else DEFAULT_DECIMAL_PLACES
    return render_result(output, places)
