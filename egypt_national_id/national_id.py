"""
Immutable Egyptian national ID value.

A NationalId is only ever built from a string that passed full
validation; every construction path runs the decoder before the instance
exists. Derived attributes (birth date, age, gender, governorate, region,
generation) are computed on access from the frozen fields.
"""
from dataclasses import InitVar, dataclass, field
from datetime import date
from typing import Optional

from . import formatting
from .demographics import Century, Gender, Generation, classify_generation
from .exceptions import NationalIdValidationError
from .governorates import Governorate, GovernorateInfo, Region
from .schemas import NationalIdDetails
from .settings import get_settings
from .validators import decode_national_id


@dataclass(frozen=True, eq=False)
class NationalId:
    """
    A validated 14-digit Egyptian national ID.

    Equality and hashing use the raw digit string. Ordering uses birth
    date, then serial, so two different IDs of people born the same day
    with the same serial in different governorates compare as neither
    less nor greater while still being unequal.

    Examples:
        >>> nid = NationalId("30101010123458")
        >>> nid.birth_date
        datetime.date(2001, 1, 1)
        >>> nid.governorate
        <Governorate.CAIRO: '01'>
    """

    raw: str
    validate_checksum: InitVar[bool] = True

    century: Century = field(init=False, repr=False)
    birth_year: int = field(init=False, repr=False)
    birth_month: int = field(init=False, repr=False)
    birth_day: int = field(init=False, repr=False)
    governorate_code: str = field(init=False, repr=False)
    serial: int = field(init=False, repr=False)
    check_digit: int = field(init=False, repr=False)
    checksum_verified: bool = field(init=False, repr=False)

    def __post_init__(self, validate_checksum: bool):
        decoded = decode_national_id(self.raw, validate_checksum=validate_checksum)
        object.__setattr__(self, "century", decoded.century)
        object.__setattr__(self, "birth_year", decoded.birth_year)
        object.__setattr__(self, "birth_month", decoded.birth_month)
        object.__setattr__(self, "birth_day", decoded.birth_day)
        object.__setattr__(self, "governorate_code", decoded.governorate.code)
        object.__setattr__(self, "serial", decoded.serial)
        object.__setattr__(self, "check_digit", decoded.check_digit)
        object.__setattr__(self, "checksum_verified", validate_checksum)

    # Equality, hashing, ordering

    def __eq__(self, other):
        if not isinstance(other, NationalId):
            return NotImplemented
        return self.raw == other.raw

    def __hash__(self):
        return hash(self.raw)

    @property
    def sort_key(self) -> tuple:
        """(birth_date, serial), the key used by the comparison operators."""
        return (self.birth_date, self.serial)

    def __lt__(self, other):
        if not isinstance(other, NationalId):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __le__(self, other):
        if not isinstance(other, NationalId):
            return NotImplemented
        return self.sort_key <= other.sort_key

    def __gt__(self, other):
        if not isinstance(other, NationalId):
            return NotImplemented
        return self.sort_key > other.sort_key

    def __ge__(self, other):
        if not isinstance(other, NationalId):
            return NotImplemented
        return self.sort_key >= other.sort_key

    def __str__(self):
        return self.raw

    def __repr__(self):
        return f"NationalId({self.raw!r})"

    # Birth date and age

    @property
    def birth_date(self) -> date:
        return date(self.birth_year, self.birth_month, self.birth_day)

    def age_on(self, as_of: Optional[date] = None) -> int:
        """
        Completed years of age on ``as_of`` (today if omitted).

        A birthday later in the year than ``as_of`` is not yet counted.
        Dates before the birth date give 0.
        """
        as_of = as_of or date.today()
        years = as_of.year - self.birth_year
        if (as_of.month, as_of.day) < (self.birth_month, self.birth_day):
            years -= 1
        return max(years, 0)

    @property
    def age(self) -> int:
        """Age today. Reads the wall clock, so the value changes over time."""
        return self.age_on()

    def is_adult_on(self, as_of: Optional[date] = None) -> bool:
        return self.age_on(as_of) >= get_settings().adult_age

    @property
    def is_adult(self) -> bool:
        """Age today is at least the configured age of majority (18 by default)."""
        return self.is_adult_on()

    # Gender

    @property
    def gender(self) -> Gender:
        return Gender.from_serial(self.serial)

    @property
    def gender_name_en(self) -> str:
        return self.gender.name_en

    @property
    def gender_name_ar(self) -> str:
        return self.gender.name_ar

    @property
    def gender_name(self) -> str:
        return self._localized(self.gender_name_en, self.gender_name_ar)

    # Governorate and region

    @property
    def governorate_info(self) -> GovernorateInfo:
        return self.governorate.info

    @property
    def governorate(self) -> Governorate:
        return Governorate(self.governorate_code)

    @property
    def governorate_name_en(self) -> str:
        return self.governorate_info.name_en

    @property
    def governorate_name_ar(self) -> str:
        return self.governorate_info.name_ar

    @property
    def governorate_name(self) -> str:
        return self._localized(self.governorate_name_en, self.governorate_name_ar)

    @property
    def region(self) -> Region:
        return self.governorate_info.region

    @property
    def birth_region(self) -> Region:
        return self.region

    @property
    def region_name_en(self) -> str:
        return self.region.name_en

    @property
    def region_name_ar(self) -> str:
        return self.region.name_ar

    @property
    def region_name(self) -> str:
        return self._localized(self.region_name_en, self.region_name_ar)

    @property
    def is_from_upper_egypt(self) -> bool:
        return self.region is Region.UPPER_EGYPT

    @property
    def is_born_abroad(self) -> bool:
        return self.governorate is Governorate.FOREIGN

    # Generation

    @property
    def generation(self) -> Generation:
        return classify_generation(self.birth_year)

    @property
    def generation_name_en(self) -> str:
        return self.generation.name_en

    @property
    def generation_name_ar(self) -> str:
        return self.generation.name_ar

    @property
    def generation_name(self) -> str:
        return self._localized(self.generation_name_en, self.generation_name_ar)

    def _localized(self, english: str, arabic: str) -> str:
        return arabic if get_settings().language == "ar" else english

    # Rendering

    def format_canonical(self) -> str:
        return formatting.format_canonical(self)

    def format_with_dashes(self) -> str:
        return formatting.format_with_dashes(self)

    def format_with_spaces(self) -> str:
        return formatting.format_with_spaces(self)

    def format_with_brackets(self) -> str:
        return formatting.format_with_brackets(self)

    def format_masked(self, mask_char: Optional[str] = None) -> str:
        return formatting.format_masked(self, mask_char)

    def format_detailed(self, language: Optional[str] = None) -> str:
        return formatting.format_detailed(self, language)

    def to_details(self) -> NationalIdDetails:
        """Serializable summary of the ID and its derived attributes."""
        return NationalIdDetails(
            national_id=self.raw,
            formatted=self.format_with_dashes(),
            birth_date=self.birth_date,
            gender=self.gender,
            gender_name_ar=self.gender_name_ar,
            governorate=self.governorate,
            governorate_name=self.governorate_name_en,
            governorate_name_ar=self.governorate_name_ar,
            region=self.region,
            generation=self.generation,
            is_from_upper_egypt=self.is_from_upper_egypt,
        )


def parse(raw: str, validate_checksum: bool = True) -> NationalId:
    """
    Parse and validate a national ID.

    Args:
        raw: 14-digit national ID string; no whitespace or separators allowed
        validate_checksum: Verify the check digit (default). Pass False only
            to accept IDs whose last digit is known to be unreliable.

    Returns:
        NationalId: The validated value

    Raises:
        NationalIdValidationError: Subclass naming the first failed rule
    """
    return NationalId(raw, validate_checksum)


def try_parse(raw: str, validate_checksum: bool = True) -> Optional[NationalId]:
    """
    Parse a national ID, returning None instead of raising.

    The reason for a rejection is not reported; use parse() to get it.
    """
    try:
        return NationalId(raw, validate_checksum)
    except NationalIdValidationError:
        return None
