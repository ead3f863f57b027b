from enum import StrEnum


class ValidationFailure(StrEnum):
    """The reason why a section could not be built."""

    MISSING_DATA = "missing data"
    LENGTH_MISMATCH = "length mismatch"
    OVERSIZED_DIMENSIONS = "oversized dimensions"


class SdfValidationError(Exception):
    """Raised when input can not be rendered into a surface data file."""

    kind: ValidationFailure

    def __init__(self, message: str):
        super().__init__(message)


class MissingDataError(SdfValidationError):
    """Raised when no topography data is supplied."""

    kind = ValidationFailure.MISSING_DATA


class LengthMismatchError(SdfValidationError):
    """Raised when the number of samples does not match the scan dimensions."""

    kind = ValidationFailure.LENGTH_MISMATCH

    def __init__(self, expected: int, actual: int):
        super().__init__(f"Expected {expected} samples, got {actual}")
        self.expected = expected
        self.actual = actual


class DimensionLimitError(SdfValidationError):
    """Raised when the scan dimensions exceed the 16-bit header fields."""

    kind = ValidationFailure.OVERSIZED_DIMENSIONS
