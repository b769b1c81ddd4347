"""
String renderings of a validated national ID.

Every function builds its output from the decoded fields of an
already-constructed NationalId and never parses or validates again, so
none of them can fail for a valid instance.

Segments, in order: century marker, birth date (YYMMDD), governorate
code, serial, check digit.
"""
from typing import Optional, Tuple

from .settings import get_settings

SERIAL_WIDTH = 4

_DETAIL_LABELS = {
    "en": ("National ID", "Birth date", "Gender", "Governorate", "Region", "Generation"),
    "ar": ("الرقم القومي", "تاريخ الميلاد", "النوع", "المحافظة", "المنطقة", "الجيل"),
}


def _segments(national_id) -> Tuple[str, str, str, str, str]:
    return (
        national_id.century.marker,
        f"{national_id.birth_year % 100:02d}{national_id.birth_month:02d}{national_id.birth_day:02d}",
        national_id.governorate_code,
        f"{national_id.serial:0{SERIAL_WIDTH}d}",
        str(national_id.check_digit),
    )


def format_canonical(national_id) -> str:
    """The 14 digits without separators, e.g. ``30101010123458``."""
    return "".join(_segments(national_id))


def format_with_dashes(national_id) -> str:
    """e.g. ``3-010101-01-2345-8``"""
    return "-".join(_segments(national_id))


def format_with_spaces(national_id) -> str:
    """e.g. ``3 010101 01 2345 8``"""
    return " ".join(_segments(national_id))


def format_with_brackets(national_id) -> str:
    """e.g. ``[3] [010101] [01] [2345] [8]``"""
    return " ".join(f"[{segment}]" for segment in _segments(national_id))


def format_masked(national_id, mask_char: Optional[str] = None) -> str:
    """
    Hide the serial, keeping birth date and governorate readable.

    Args:
        national_id: The ID to render
        mask_char: Single replacement character; defaults to the
            ``mask_char`` setting (``*``)

    Returns:
        str: e.g. ``301010101****8``

    Raises:
        ValueError: If mask_char is not exactly one character
    """
    if mask_char is None:
        mask_char = get_settings().mask_char
    if len(mask_char) != 1:
        raise ValueError(f"mask_char must be a single character, got {mask_char!r}")

    century, birth_date, governorate, _serial, check_digit = _segments(national_id)
    return f"{century}{birth_date}{governorate}{mask_char * SERIAL_WIDTH}{check_digit}"


def format_detailed(national_id, language: Optional[str] = None) -> str:
    """
    Multi-line, human-readable summary.

    Args:
        national_id: The ID to render
        language: ``"en"`` or ``"ar"``; defaults to the ``language`` setting

    Raises:
        ValueError: For an unsupported language
    """
    language = (language or get_settings().language).lower()
    if language not in _DETAIL_LABELS:
        raise ValueError(f"language must be one of {sorted(_DETAIL_LABELS)}, got {language!r}")

    if language == "ar":
        values = (
            national_id.gender_name_ar,
            national_id.governorate_name_ar,
            national_id.region_name_ar,
            national_id.generation_name_ar,
        )
    else:
        values = (
            national_id.gender_name_en,
            national_id.governorate_name_en,
            national_id.region_name_en,
            national_id.generation_name_en,
        )
    gender, governorate, region, generation = values

    labels = _DETAIL_LABELS[language]
    lines = [
        f"{labels[0]}: {format_with_dashes(national_id)}",
        f"{labels[1]}: {national_id.birth_date.isoformat()}",
        f"{labels[2]}: {gender}",
        f"{labels[3]}: {governorate} ({national_id.governorate_code})",
        f"{labels[4]}: {region}",
        f"{labels[5]}: {generation}",
    ]
    return "\n".join(lines)
