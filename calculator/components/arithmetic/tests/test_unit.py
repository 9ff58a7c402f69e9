"""
Unit tests for Arithmetic component.

Tests:
- Pure functions return the documented values
- Invalid arguments raise InvalidArgumentError with fixed messages
- run() turns failures into error values
"""

from __future__ import annotations

import math

import pytest

from .. import (
    DIVISION_BY_ZERO_MESSAGE,
    NEGATIVE_FACTORIAL_MESSAGE,
    NEGATIVE_SQUARE_ROOT_MESSAGE,
    OPERATIONS,
    ArgumentErrorKind,
    ComputeInput,
    ComputeOutput,
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
    run,
    square_root,
    subtract,
    validate_input,
)

# --- Basic Arithmetic ---


class TestBasicArithmetic:
    """Tests for add, subtract, multiply."""

    def test_add(self) -> None:
        assert add(5, 3) == 8
        assert add(-2.5, 2.5) == 0

    def test_subtract(self) -> None:
        assert subtract(5, 3) == 2
        assert subtract(3, 5) == -2

    def test_multiply(self) -> None:
        assert multiply(4, 2.5) == 10.0
        assert multiply(-3, 3) == -9

    def test_percentage(self) -> None:
        """percentage(n, p) is n * p / 100."""
        assert percentage(200, 15) == 30.0
        assert percentage(50, 0) == 0.0
        assert percentage(-80, 25) == -20.0


class TestDivide:
    """Tests for divide."""

    def test_divide(self) -> None:
        assert divide(10, 4) == 2.5
        assert divide(-9, 3) == -3.0

    def test_divide_by_zero_raises(self) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            divide(1, 0)
        assert str(exc_info.value) == DIVISION_BY_ZERO_MESSAGE
        assert exc_info.value.kind is ArgumentErrorKind.DIVISION_BY_ZERO

    def test_divide_by_negative_zero_raises(self) -> None:
        with pytest.raises(InvalidArgumentError):
            divide(1.0, -0.0)

    def test_divide_zero_by_zero_raises(self) -> None:
        with pytest.raises(InvalidArgumentError):
            divide(0, 0)

    def test_invalid_argument_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            divide(3, 0)


class TestPower:
    """Tests for power (IEEE-754 pow semantics)."""

    def test_integer_exponent(self) -> None:
        assert power(2, 10) == 1024.0

    def test_fractional_exponent(self) -> None:
        assert power(9, 0.5) == 3.0

    def test_negative_exponent(self) -> None:
        assert power(2, -2) == 0.25

    def test_zero_to_zero_is_one(self) -> None:
        assert power(0, 0) == 1.0

    def test_nan_to_zero_is_one(self) -> None:
        assert power(math.nan, 0) == 1.0

    def test_negative_base_fractional_exponent_is_nan(self) -> None:
        assert math.isnan(power(-8, 1 / 3))

    def test_overflow_is_infinity(self) -> None:
        assert power(10, 400) == math.inf

    def test_negative_overflow_with_odd_exponent(self) -> None:
        assert power(-10, 401) == -math.inf

    def test_negative_overflow_with_even_exponent(self) -> None:
        assert power(-10, 400) == math.inf

    def test_zero_base_negative_exponent(self) -> None:
        assert power(0.0, -1) == math.inf

    def test_negative_zero_base_odd_negative_exponent(self) -> None:
        assert power(-0.0, -1) == -math.inf

    def test_negative_zero_base_even_negative_exponent(self) -> None:
        assert power(-0.0, -2) == math.inf


class TestSquareRoot:
    """Tests for square_root."""

    def test_perfect_square(self) -> None:
        assert square_root(16) == 4.0

    def test_zero(self) -> None:
        assert square_root(0) == 0.0

    def test_negative_raises(self) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            square_root(-1)
        assert str(exc_info.value) == NEGATIVE_SQUARE_ROOT_MESSAGE
        assert exc_info.value.kind is ArgumentErrorKind.NEGATIVE_INPUT

    def test_tiny_negative_raises(self) -> None:
        with pytest.raises(InvalidArgumentError):
            square_root(-1e-300)


# --- Integer Operations ---


class TestIsEven:
    """Tests for is_even."""

    def test_even_and_odd(self) -> None:
        assert is_even(4) is True
        assert is_even(7) is False
        assert is_even(0) is True

    def test_negative_numbers(self) -> None:
        """Negative even numbers are still even."""
        assert is_even(-4) is True
        assert is_even(-7) is False


class TestIsPrime:
    """Tests for is_prime."""

    def test_small_numbers(self) -> None:
        assert is_prime(2) is True
        assert is_prime(3) is True
        assert is_prime(4) is False
        assert is_prime(5) is True

    def test_not_prime_at_or_below_one(self) -> None:
        for n in (1, 0, -1, -7):
            assert is_prime(n) is False

    def test_known_values(self) -> None:
        assert is_prime(97) is True
        assert is_prime(100) is False

    def test_squares_of_primes(self) -> None:
        """Candidates equal to sqrt(n) are included in the check."""
        assert is_prime(25) is False
        assert is_prime(49) is False
        assert is_prime(121) is False
        assert is_prime(169) is False

    def test_large_prime(self) -> None:
        assert is_prime(2_147_483_647) is True

    def test_large_composite(self) -> None:
        assert is_prime(2_147_395_591) is False  # 46337 * 46343


class TestFactorial:
    """Tests for factorial."""

    def test_base_cases(self) -> None:
        assert factorial(0) == 1
        assert factorial(1) == 1

    def test_five(self) -> None:
        assert factorial(5) == 120

    def test_twenty(self) -> None:
        assert factorial(20) == 2_432_902_008_176_640_000

    def test_exact_beyond_64_bits(self) -> None:
        assert factorial(25) == 15_511_210_043_330_985_984_000_000

    def test_negative_raises(self) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            factorial(-1)
        assert str(exc_info.value) == NEGATIVE_FACTORIAL_MESSAGE
        assert exc_info.value.kind is ArgumentErrorKind.NEGATIVE_INPUT


class TestGcdLcm:
    """Tests for gcd and lcm."""

    def test_gcd(self) -> None:
        assert gcd(12, 8) == 4
        assert gcd(17, 5) == 1

    def test_gcd_with_zero(self) -> None:
        assert gcd(0, 5) == 5
        assert gcd(5, 0) == 5
        assert gcd(0, -5) == 5
        assert gcd(0, 0) == 0

    def test_gcd_sign_independent(self) -> None:
        assert gcd(-12, -8) == 4
        assert gcd(-12, 8) == 4

    def test_lcm(self) -> None:
        assert lcm(4, 6) == 12
        assert lcm(-4, 6) == 12

    def test_lcm_with_zero(self) -> None:
        assert lcm(0, 5) == 0
        assert lcm(5, 0) == 0


# --- Component Entry Point ---


class TestValidateInput:
    """Tests for input validation."""

    def test_valid_input(self) -> None:
        assert validate_input(ComputeInput("add", (1.0, 2.0))) == []

    def test_unknown_operation(self) -> None:
        errors = validate_input(ComputeInput("modulo", (1, 2)))  # type: ignore[arg-type]
        assert len(errors) == 1
        assert errors[0].code == "UNKNOWN_OPERATION"

    def test_arity_mismatch(self) -> None:
        errors = validate_input(ComputeInput("add", (1.0,)))
        assert errors[0].code == "ARITY_MISMATCH"
        assert errors[0].field_name == "operands"

    def test_integer_required(self) -> None:
        errors = validate_input(ComputeInput("gcd", (12, 8.0)))
        assert len(errors) == 1
        assert errors[0].code == "INTEGER_REQUIRED"
        assert errors[0].field_name == "b"

    def test_bool_rejected_for_integer_operations(self) -> None:
        errors = validate_input(ComputeInput("is_prime", (True,)))
        assert errors[0].code == "INTEGER_REQUIRED"

    def test_ints_accepted_for_float_operations(self) -> None:
        assert validate_input(ComputeInput("divide", (7, 2))) == []

    def test_number_required(self) -> None:
        errors = validate_input(ComputeInput("add", ("1", "2")))  # type: ignore[arg-type]
        assert [e.code for e in errors] == ["NUMBER_REQUIRED", "NUMBER_REQUIRED"]
        assert [e.field_name for e in errors] == ["a", "b"]
        assert errors[0].message == "add requires a numeric a"

    def test_bool_rejected_for_float_operations(self) -> None:
        errors = validate_input(ComputeInput("square_root", (True,)))
        assert errors[0].code == "NUMBER_REQUIRED"
        assert errors[0].field_name == "number"

    def test_every_operation_registered(self) -> None:
        assert set(OPERATIONS) == {
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
        }


class TestRun:
    """Tests for run() dispatch."""

    def test_success(self) -> None:
        result = run(ComputeInput("add", (5.0, 3.0)))
        assert isinstance(result, ComputeOutput)
        assert result.success is True
        assert result.result == 8.0
        assert result.errors == []

    def test_preserves_operation_and_operands(self) -> None:
        result = run(ComputeInput("power", (2.0, 3.0)))
        assert result.operation == "power"
        assert result.operands == (2.0, 3.0)

    def test_predicate_result(self) -> None:
        assert run(ComputeInput("is_prime", (97,))).result is True
        assert run(ComputeInput("is_prime", (100,))).result is False

    def test_division_by_zero_error(self) -> None:
        result = run(ComputeInput("divide", (1.0, 0.0)))
        assert result.success is False
        assert result.result is None
        assert result.errors[0].code == "DIVISION_BY_ZERO"
        assert result.errors[0].message == DIVISION_BY_ZERO_MESSAGE
        assert result.errors[0].field_name == "b"

    def test_negative_square_root_error(self) -> None:
        result = run(ComputeInput("square_root", (-4.0,)))
        assert result.success is False
        assert result.errors[0].code == "NEGATIVE_INPUT"
        assert result.errors[0].message == NEGATIVE_SQUARE_ROOT_MESSAGE
        assert result.errors[0].field_name == "number"

    def test_negative_factorial_error(self) -> None:
        result = run(ComputeInput("factorial", (-1,)))
        assert result.success is False
        assert result.errors[0].message == NEGATIVE_FACTORIAL_MESSAGE

    def test_validation_error_does_not_raise(self) -> None:
        result = run(ComputeInput("factorial", (2.5,)))
        assert result.success is False
        assert result.errors[0].code == "INTEGER_REQUIRED"

    def test_string_operands_rejected(self) -> None:
        result = run(ComputeInput("add", ("1", "2")))  # type: ignore[arg-type]
        assert result.success is False
        assert result.result is None
        assert result.errors[0].code == "NUMBER_REQUIRED"

    def test_rejection_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level("INFO", logger="calculator.components.arithmetic.component"):
            run(ComputeInput("divide", (1.0, 0.0)))
        assert "Division by zero is not allowed" in caplog.text

    def test_repeated_calls_identical(self) -> None:
        inp = ComputeInput("lcm", (21, 6))
        assert run(inp) == run(inp)
