"""
Egyptian National ID Validators

This module decodes a 14-digit national ID into its fields and checks
each validation rule in a fixed order:

    1. format       - exactly 14 ASCII digits
    2. century      - leading digit 2 (1900s) or 3 (2000s)
    3. date         - YYMMDD is a real Gregorian date in that century
    4. governorate  - the 2-digit code is a known governorate
    5. serial       - 4 digits, parity of the last one gives the gender
    6. checksum     - the 14th digit matches the computed check digit

The first failing rule stops decoding and is reported.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from .checksum import ID_LENGTH, compute_check_digit, is_ascii_digits
from .dates import is_legal_date
from .demographics import Century
from .exceptions import (
    NationalIdValidationError,
    ValidationErrorKind,
    create_validation_error,
)
from .governorates import GovernorateInfo, lookup

logger = logging.getLogger(__name__)

# Character slices of the 14-digit string
CENTURY_SLICE = slice(0, 1)
YEAR_SLICE = slice(1, 3)
MONTH_SLICE = slice(3, 5)
DAY_SLICE = slice(5, 7)
GOVERNORATE_SLICE = slice(7, 9)
SERIAL_SLICE = slice(9, 13)
CHECK_DIGIT_INDEX = 13


@dataclass(frozen=True)
class DecodedFields:
    """Typed fields of a national ID that passed validation."""
    raw: str
    century: Century
    birth_year: int
    birth_month: int
    birth_day: int
    governorate: GovernorateInfo
    serial: int
    check_digit: int


def _reject(kind: ValidationErrorKind, message: str, raw) -> NationalIdValidationError:
    logger.debug(f"Invalid national ID: {raw!r} ({kind.value}: {message})")
    return create_validation_error(kind, message, raw if isinstance(raw, str) else None)


def decode_national_id(raw: str, validate_checksum: bool = True) -> DecodedFields:
    """
    Validate a national ID string and decode its fields.

    Args:
        raw: The national ID string, exactly as supplied
        validate_checksum: Check the 14th digit against the computed
            check digit. Passing False stores the digit without checking it.

    Returns:
        DecodedFields: The decoded fields

    Raises:
        NationalIdValidationError: The subclass matching the first failed rule

    Examples:
        >>> decode_national_id("30101010123458").birth_year
        2001
    """
    if not is_ascii_digits(raw, ID_LENGTH):
        length = len(raw) if isinstance(raw, str) else None
        raise _reject(
            ValidationErrorKind.INVALID_FORMAT,
            f"national ID must be exactly {ID_LENGTH} digits (got length {length})",
            raw,
        )

    century = Century.from_marker(raw[CENTURY_SLICE])
    if century is None:
        raise _reject(
            ValidationErrorKind.INVALID_CENTURY,
            f"century digit must be 2 or 3, got {raw[CENTURY_SLICE]}",
            raw,
        )

    year = century.base_year + int(raw[YEAR_SLICE])
    month = int(raw[MONTH_SLICE])
    day = int(raw[DAY_SLICE])
    if not is_legal_date(year, month, day):
        raise _reject(
            ValidationErrorKind.INVALID_DATE,
            f"birth date {year:04d}-{month:02d}-{day:02d} does not exist",
            raw,
        )

    governorate_code = raw[GOVERNORATE_SLICE]
    governorate = lookup(governorate_code)
    if governorate is None:
        raise _reject(
            ValidationErrorKind.INVALID_GOVERNORATE,
            f"unknown governorate code {governorate_code}",
            raw,
        )

    serial = int(raw[SERIAL_SLICE])
    check_digit = int(raw[CHECK_DIGIT_INDEX])

    if validate_checksum:
        expected = compute_check_digit(raw[:CHECK_DIGIT_INDEX])
        if expected != check_digit:
            raise _reject(
                ValidationErrorKind.INVALID_CHECKSUM,
                f"check digit {check_digit} does not match computed {expected}",
                raw,
            )

    return DecodedFields(
        raw=raw,
        century=century,
        birth_year=year,
        birth_month=month,
        birth_day=day,
        governorate=governorate,
        serial=serial,
        check_digit=check_digit,
    )


def validation_error_kind(raw: str, validate_checksum: bool = True) -> Optional[ValidationErrorKind]:
    """
    Return the first rule ``raw`` fails, or None if it is valid.

    Examples:
        >>> validation_error_kind("abc123")
        <ValidationErrorKind.INVALID_FORMAT: 'InvalidFormat'>
        >>> validation_error_kind("30101010123458") is None
        True
    """
    try:
        decode_national_id(raw, validate_checksum=validate_checksum)
    except NationalIdValidationError as error:
        return error.kind
    return None


def has_valid_format(raw: str) -> bool:
    """
    Check structure only: format, century, date, governorate and serial.

    The check digit is not verified, so an ID with a wrong last digit
    still passes.
    """
    return validation_error_kind(raw, validate_checksum=False) is None


def is_valid(raw: str) -> bool:
    """
    Full validation, including the check digit.

    Args:
        raw: The national ID string to validate

    Returns:
        bool: True if valid, False otherwise

    Examples:
        >>> is_valid("30101010123458")
        True
        >>> is_valid("abc123")
        False
        >>> is_valid("30113010123450")
        False
    """
    return validation_error_kind(raw, validate_checksum=True) is None
