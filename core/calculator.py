# =============================================================================
# core/calculator.py  -  Math Engine
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Performs one arithmetic operation on `a` (and `b`, for binary ops) and
#   reports the inputs alongside the result.
#
# OPERATIONS:
#   binary: add, subtract, multiply, divide, power, percentage
#   unary:  sqrt, abs, round, floor, ceil  (these ignore `b`)
#
#   Operation names are matched case-insensitively; the result echoes the
#   name exactly as the caller sent it.
#
# THE `input` FIELD:
#   Binary ops always report {"a", "b"}.  Unary ops report only {"a"} unless
#   the caller passed a non-zero `b`, in which case `b` is reported too even
#   though it was not used.  Clients compare against this shape, so it must
#   not be "tidied up".
# =============================================================================

import math
from typing import Callable

from core.errors import DivisionByZero, MathDomainError, NegativeInput, UnsupportedOperation
from core.models import MathResult

BINARY_OPERATIONS = ("add", "subtract", "multiply", "divide", "power", "percentage")
UNARY_OPERATIONS = ("sqrt", "abs", "round", "floor", "ceil")


def _divide(a: float, b: float) -> float:
    if b == 0:
        raise DivisionByZero(f"Cannot divide {a} by zero", value=b)
    return a / b


def _power(a: float, b: float) -> float:
    try:
        return math.pow(a, b)
    except (ValueError, OverflowError) as exc:
        raise MathDomainError(f"{a} to the power of {b} has no finite real result", value=a) from exc


def _sqrt(a: float, _b: float) -> float:
    if a < 0:
        raise NegativeInput(f"Cannot calculate square root of negative number {a}", value=a)
    return math.sqrt(a)


def _round(a: float, _b: float) -> int:
    # Halves go toward +infinity: 2.5 -> 3, -2.5 -> -2.  a + 0.5 would round
    # before the floor for large floats, so compare the fraction instead.
    whole = math.floor(a)
    return whole + 1 if a - whole >= 0.5 else whole


_OPERATIONS: dict[str, Callable[[float, float], float]] = {
    "add": lambda a, b: a + b,
    "subtract": lambda a, b: a - b,
    "multiply": lambda a, b: a * b,
    "divide": _divide,
    "power": _power,
    "percentage": lambda a, b: (a / 100) * b,
    "sqrt": _sqrt,
    "abs": lambda a, _b: abs(a),
    "round": _round,
    "floor": lambda a, _b: math.floor(a),
    "ceil": lambda a, _b: math.ceil(a),
}


def calculate(operation: str, a: float, b: float = 0) -> MathResult:
    """Apply a math operation to one or two operands.

    Args:
        operation: One of the supported operation names (case-insensitive).
        a: First operand; the only operand for unary operations.
        b: Second operand for binary operations (default 0).

    Returns:
        A MathResult echoing the operation, the relevant inputs and the result.

    Raises:
        UnsupportedOperation: The operation name is not recognized.
        DivisionByZero: ``divide`` with ``b == 0``.
        NegativeInput: ``sqrt`` with ``a < 0``.
        MathDomainError: The result is not a finite real number (overflow,
            or ``power`` of a negative base with a fractional exponent).
    """
    key = operation.lower()
    func = _OPERATIONS.get(key)
    if func is None:
        raise UnsupportedOperation(
            f"Unsupported operation: {operation}. "
            f"Use one of: {', '.join(_OPERATIONS)}",
            value=operation,
        )

    try:
        result = func(a, b)
        if isinstance(result, float) and not math.isfinite(result):
            raise OverflowError(result)
    except OverflowError as exc:
        raise MathDomainError(
            f"{operation} of {a} and {b} has no finite real result", value=a
        ) from exc

    if b != 0 or key in BINARY_OPERATIONS:
        inputs = {"a": a, "b": b}
    else:
        inputs = {"a": a}

    return MathResult(operation=operation, input=inputs, result=result)
