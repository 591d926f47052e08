from __future__ import annotations


class RationalError(Exception):
    """Base class for errors raised by rational number operations."""


class InvalidArgument(RationalError, ValueError):
    """Raised when an operand or parameter is missing or outside the domain."""


class DivisionByZero(RationalError, ZeroDivisionError):
    """Raised when dividing by a rational whose numerator is zero."""
