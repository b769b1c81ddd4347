"""
Convenience functions taking a plain string.
"""
from typing import Optional

from .national_id import NationalId, try_parse
from .validators import has_valid_format, is_valid


def to_egyptian_national_id(raw: str) -> Optional[NationalId]:
    """Parse ``raw`` with full validation, or return None if it is invalid."""
    return try_parse(raw)


def is_valid_egyptian_national_id(raw: str) -> bool:
    return is_valid(raw)


def has_valid_national_id_format(raw: str) -> bool:
    """Structural validity only; the check digit is not verified."""
    return has_valid_format(raw)
