"""
Filesize exceptions.
"""

# Messages -------------------------------------------------------------------------------------------------------------

INVALID_NUMBER = "Invalid number"
INVALID_ROUND = "Invalid rounding method"


# Classes --------------------------------------------------------------------------------------------------------------

class FileSizeError(Exception):
    """Base class for errors raised by filesize."""


class InvalidNumberError(FileSizeError, TypeError):
    """The magnitude could not be coerced to a number, or coerced to NaN."""

    def __init__(self, message: str = INVALID_NUMBER):
        super().__init__(message)


class InvalidRoundingMethodError(FileSizeError, TypeError):
    """The rounding method is not one of round, floor or ceil."""

    def __init__(self, message: str = INVALID_ROUND):
        super().__init__(message)
