"""Unit tests for the math engine."""
from __future__ import annotations

import pytest

from core.calculator import calculate
from core.errors import DivisionByZero, MathDomainError, NegativeInput, UnsupportedOperation


# ── Binary operations ───────────────────────────────────────────────────


class TestBinaryOperations:
    @pytest.mark.parametrize(
        "operation, a, b, expected",
        [
            ("add", 2, 3, 5),
            ("subtract", 10, 4, 6),
            ("multiply", 6, 7, 42),
            ("divide", 7, 2, 3.5),
            ("power", 2, 10, 1024),
            ("percentage", 50, 200, 100),
        ],
    )
    def test_results(self, operation, a, b, expected):
        result = calculate(operation, a, b)
        assert result.result == pytest.approx(expected)
        assert result.input == {"a": a, "b": b}

    def test_binary_reports_b_even_when_defaulted(self):
        result = calculate("add", 5)
        assert result.result == 5
        assert result.input == {"a": 5, "b": 0}

    def test_operation_is_case_insensitive_and_echoed(self):
        result = calculate("ADD", 1, 2)
        assert result.operation == "ADD"
        assert result.result == 3

    @pytest.mark.parametrize("a", [0, 1, -3.5, 1e9])
    def test_divide_by_zero(self, a):
        with pytest.raises(DivisionByZero):
            calculate("divide", a, 0)

    def test_power_without_real_result(self):
        with pytest.raises(MathDomainError):
            calculate("power", -8, 0.5)

    def test_power_overflow(self):
        with pytest.raises(MathDomainError):
            calculate("power", 10, 1000)

    @pytest.mark.parametrize(
        "operation, a, b",
        [
            ("multiply", 1e308, 10),
            ("add", 1.7e308, 1.7e308),
            ("subtract", -1.7e308, 1.7e308),
            ("divide", 1e308, 1e-10),
            ("percentage", 1e308, 1e300),
        ],
    )
    def test_non_finite_result(self, operation, a, b):
        with pytest.raises(MathDomainError) as exc_info:
            calculate(operation, a, b)
        assert exc_info.value.value == a
        assert operation in str(exc_info.value)

    def test_large_finite_result(self):
        assert calculate("multiply", 1e300, 10).result == pytest.approx(1e301)


# ── Unary operations ────────────────────────────────────────────────────


class TestUnaryOperations:
    def test_sqrt(self):
        result = calculate("sqrt", 9)
        assert result.result == 3
        assert result.input == {"a": 9}

    def test_sqrt_negative(self):
        with pytest.raises(NegativeInput) as exc_info:
            calculate("sqrt", -1)
        assert exc_info.value.value == -1
        assert "-1" in str(exc_info.value)

    def test_unary_reports_nonzero_b(self):
        result = calculate("sqrt", 16, 4)
        assert result.result == 4
        assert result.input == {"a": 16, "b": 4}

    def test_abs(self):
        assert calculate("abs", -5).result == 5

    @pytest.mark.parametrize(
        "a, expected",
        [
            (2.5, 3),
            (2.4, 2),
            (-2.5, -2),
            (-2.6, -3),
            (0.49999999999999994, 0),
            (4503599627370497.0, 4503599627370497),
            (7, 7),
        ],
    )
    def test_round_halves_go_up(self, a, expected):
        assert calculate("round", a).result == expected

    def test_floor_and_ceil(self):
        assert calculate("floor", 2.7).result == 2
        assert calculate("ceil", 2.1).result == 3
        assert calculate("floor", -2.1).result == -3


# ── Errors and purity ───────────────────────────────────────────────────


class TestCalculatorContract:
    def test_unknown_operation(self):
        with pytest.raises(UnsupportedOperation) as exc_info:
            calculate("modulo", 5, 2)
        assert "modulo" in str(exc_info.value)

    def test_deterministic(self):
        assert calculate("multiply", 1.5, 3) == calculate("multiply", 1.5, 3)
