"""
Conversion errors.

Every error is fatal to a conversion run; nothing is skipped or recovered
line-by-line.
"""

from typing import Optional


class ConversionError(ValueError):
    """Base class for input that cannot be converted."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class MalformedRecord(ConversionError):
    """A data line does not fit the fixed log schema."""


class OrientationParseError(MalformedRecord):
    """An orientation literal is not a valid `(a, b, c, d)` quaternion."""


class TimestampParseError(ConversionError):
    """A timestamp does not match `dd-MM-yyyy HH-mm-ss-fff`."""
