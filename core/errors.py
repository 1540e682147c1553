# =============================================================================
# core/errors.py  -  Operation Error Taxonomy
# =============================================================================
#
# Every failure an operation can report is a subclass of OperationError.
# Handlers raise these synchronously; the registry lets them propagate
# unchanged and the tool layer converts them into MCP tool errors.
#
# Each error carries a message naming the offending value, and keeps that
# value on the instance (``.value``) for callers that want it.
# =============================================================================

from typing import Any


class OperationError(Exception):
    """Base class for all typed operation failures."""

    def __init__(self, message: str, value: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.value = value

    @property
    def kind(self) -> str:
        """The error's type name, e.g. ``"DivisionByZero"``."""
        return type(self).__name__


class UnsupportedOperation(OperationError):
    """An operation name (tool, math op or string op) is not recognized."""


class MissingParameter(OperationError):
    """A required parameter is absent from the parameter bag."""


class DivisionByZero(OperationError):
    """``divide`` was called with ``b == 0``."""


class NegativeInput(OperationError):
    """``sqrt`` was called with a negative operand."""


class MathDomainError(OperationError):
    """An arithmetic result is not a finite real number."""


class UnsupportedType(OperationError):
    """The random generator does not know the requested type."""


class UnsupportedUnit(OperationError):
    """A unit name is absent from the category's conversion table."""


class UnsupportedCategory(OperationError):
    """The conversion category is not temperature, distance or weight."""


class UnsupportedConversion(OperationError):
    """No temperature formula exists for the (from, to) pair."""


class InvalidRange(OperationError):
    """A numeric bound or length is out of range or not a whole number."""
