"""
Errors raised by the strict vector types and the memory adapter.

Each error also derives from the matching builtin so callers can catch
``TypeError`` / ``ValueError`` without importing this module.
"""


class VectorError(Exception):
    """Base class for every named pyvector error."""


class InvalidArgumentType(VectorError, TypeError):
    """A constructor or method argument is not a number where one is required."""

    def __init__(self, where: str, parameter: str, received: type):
        self.where = where
        self.parameter = parameter
        self.received = received
        super().__init__(
            f"{where}: expected '{parameter}' to be a number, got {received.__name__}"
        )


class InvalidOperand(VectorError, TypeError):
    """An operator or method received an operand of the wrong kind."""

    def __init__(self, where: str, operator: str, expected: str):
        self.where = where
        self.operator = operator
        self.expected = expected
        super().__init__(f"{where}: operator '{operator}' expects {expected}")


class DegenerateProjectionTarget(VectorError, ValueError):
    """Projection onto a zero-magnitude vector or plane normal."""


class DegenerateAngleOperands(VectorError, ValueError):
    """Angle requested between vectors where at least one has zero magnitude."""


class MemoryReaderNotConfigured(VectorError, RuntimeError):
    """A memory factory was called with no reader passed and no default installed."""
