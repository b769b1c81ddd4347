"""
Custom exceptions for Egyptian national ID validation.

This module defines the error taxonomy raised when a string cannot be
decoded into a national ID. Each failed rule has its own exception class
so callers can catch the specific failure or the common base.
"""
from enum import Enum
from typing import Optional


class ValidationErrorKind(str, Enum):
    """
    Validation rules, in the order they are checked.
    """
    INVALID_FORMAT = "InvalidFormat"
    INVALID_CENTURY = "InvalidCentury"
    INVALID_DATE = "InvalidDate"
    INVALID_GOVERNORATE = "InvalidGovernorate"
    INVALID_CHECKSUM = "InvalidChecksum"


class NationalIdError(Exception):
    """
    Base exception for national ID errors.

    This is the base class for all exceptions raised by this package.
    """


class NationalIdValidationError(NationalIdError, ValueError):
    """
    Exception for input that is not a valid national ID.

    Carries the failed rule as ``kind`` and the rejected input as ``value``.
    """

    kind: Optional[ValidationErrorKind] = None

    def __init__(self, message: str, kind: Optional[ValidationErrorKind] = None, value: Optional[str] = None):
        super().__init__(message)
        self.message = message
        if kind is not None:
            self.kind = kind
        self.value = value

    def __str__(self):
        if self.kind is not None:
            return f"{self.kind.value}: {self.message}"
        return self.message


class InvalidFormatError(NationalIdValidationError):
    """
    Raised when the input is not exactly 14 ASCII digits.
    """
    kind = ValidationErrorKind.INVALID_FORMAT


class InvalidCenturyError(NationalIdValidationError):
    """
    Raised when the leading digit is neither 2 (1900s) nor 3 (2000s).
    """
    kind = ValidationErrorKind.INVALID_CENTURY


class InvalidDateError(NationalIdValidationError):
    """
    Raised when the encoded birth date does not exist in the calendar.
    """
    kind = ValidationErrorKind.INVALID_DATE


class InvalidGovernorateError(NationalIdValidationError):
    """
    Raised when the governorate code is not in the governorate table.
    """
    kind = ValidationErrorKind.INVALID_GOVERNORATE


class InvalidChecksumError(NationalIdValidationError):
    """
    Raised when the check digit does not match the computed one.
    """
    kind = ValidationErrorKind.INVALID_CHECKSUM


_ERRORS_BY_KIND = {
    ValidationErrorKind.INVALID_FORMAT: InvalidFormatError,
    ValidationErrorKind.INVALID_CENTURY: InvalidCenturyError,
    ValidationErrorKind.INVALID_DATE: InvalidDateError,
    ValidationErrorKind.INVALID_GOVERNORATE: InvalidGovernorateError,
    ValidationErrorKind.INVALID_CHECKSUM: InvalidChecksumError,
}


def create_validation_error(kind: ValidationErrorKind, message: str, value: Optional[str] = None) -> NationalIdValidationError:
    """
    Create the appropriate exception for a failed validation rule.

    Args:
        kind: The rule that failed
        message: Error message
        value: The rejected input

    Returns:
        NationalIdValidationError: Exception instance of the matching subclass
    """
    error_class = _ERRORS_BY_KIND.get(kind, NationalIdValidationError)
    return error_class(message, kind, value)
