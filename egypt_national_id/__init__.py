"""
Egyptian national ID decoding, validation and formatting.

Example:
    >>> from egypt_national_id import parse
    >>> nid = parse("30101010123458")
    >>> nid.birth_date, nid.gender, nid.governorate_name_en
    (datetime.date(2001, 1, 1), <Gender.MALE: 'Male'>, 'Cairo')
    >>> nid.format_with_dashes()
    '3-010101-01-2345-8'
"""
from .checksum import compute_check_digit, validate_checksum
from .dates import is_leap_year, is_legal_date
from .demographics import Century, Gender, Generation, classify_generation
from .exceptions import (
    InvalidCenturyError,
    InvalidChecksumError,
    InvalidDateError,
    InvalidFormatError,
    InvalidGovernorateError,
    NationalIdError,
    NationalIdValidationError,
    ValidationErrorKind,
)
from .governorates import GOVERNORATES, Governorate, GovernorateInfo, Region
from .national_id import NationalId, parse, try_parse
from .schemas import EgyptianNationalIdStr, NationalIdDetails
from .settings import Settings, configure_logging, get_settings
from .shortcuts import (
    has_valid_national_id_format,
    is_valid_egyptian_national_id,
    to_egyptian_national_id,
)
from .validators import has_valid_format, is_valid, validation_error_kind

__version__ = "1.0.0"

__all__ = [
    "Century",
    "EgyptianNationalIdStr",
    "GOVERNORATES",
    "Gender",
    "Generation",
    "Governorate",
    "GovernorateInfo",
    "InvalidCenturyError",
    "InvalidChecksumError",
    "InvalidDateError",
    "InvalidFormatError",
    "InvalidGovernorateError",
    "NationalId",
    "NationalIdDetails",
    "NationalIdError",
    "NationalIdValidationError",
    "Region",
    "Settings",
    "ValidationErrorKind",
    "classify_generation",
    "compute_check_digit",
    "configure_logging",
    "get_settings",
    "has_valid_format",
    "has_valid_national_id_format",
    "is_leap_year",
    "is_legal_date",
    "is_valid",
    "is_valid_egyptian_national_id",
    "parse",
    "to_egyptian_national_id",
    "try_parse",
    "validate_checksum",
    "validation_error_kind",
]
