"""
Century, gender and generation classifications.

Generation bands use fixed birth-year boundaries:

    Silent Generation   ... - 1945
    Baby Boomers        1946 - 1964
    Generation X        1965 - 1980
    Millennials         1981 - 1996
    Generation Z        1997 - 2012
    Generation Alpha    2013 - ...

The open ends make the classification total: every year maps to exactly
one band.
"""
from enum import Enum
from typing import Optional


class Century(str, Enum):
    """
    Birth century, encoded by the first digit of the ID.
    """
    NINETEEN_HUNDREDS = "2"
    TWO_THOUSANDS = "3"

    @property
    def marker(self) -> str:
        return self.value

    @property
    def base_year(self) -> int:
        return 1900 if self is Century.NINETEEN_HUNDREDS else 2000

    @classmethod
    def from_marker(cls, marker: str) -> Optional["Century"]:
        """Century for a leading digit, or None if the digit is not a century marker."""
        for century in cls:
            if century.value == marker:
                return century
        return None


class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"

    @classmethod
    def from_serial(cls, serial: int) -> "Gender":
        """Odd last digit is male, even is female."""
        return cls.MALE if serial % 2 == 1 else cls.FEMALE

    @property
    def name_en(self) -> str:
        return self.value

    @property
    def name_ar(self) -> str:
        return "ذكر" if self is Gender.MALE else "أنثى"


class Generation(str, Enum):
    """
    Named birth-year bands, oldest first.
    """
    SILENT_GENERATION = "SilentGeneration"
    BABY_BOOMERS = "BabyBoomers"
    GENERATION_X = "GenerationX"
    MILLENNIALS = "Millennials"
    GENERATION_Z = "GenerationZ"
    GENERATION_ALPHA = "GenerationAlpha"

    @property
    def first_year(self) -> Optional[int]:
        """First birth year of the band; None for the open-ended oldest band."""
        return _GENERATION_BANDS[self][0]

    @property
    def last_year(self) -> Optional[int]:
        """Last birth year of the band; None for the open-ended youngest band."""
        return _GENERATION_BANDS[self][1]

    @property
    def name_en(self) -> str:
        return _GENERATION_BANDS[self][2]

    @property
    def name_ar(self) -> str:
        return _GENERATION_BANDS[self][3]


_GENERATION_BANDS = {
    Generation.SILENT_GENERATION: (None, 1945, "Silent Generation", "الجيل الصامت"),
    Generation.BABY_BOOMERS: (1946, 1964, "Baby Boomers", "جيل طفرة المواليد"),
    Generation.GENERATION_X: (1965, 1980, "Generation X", "الجيل إكس"),
    Generation.MILLENNIALS: (1981, 1996, "Millennials", "جيل الألفية"),
    Generation.GENERATION_Z: (1997, 2012, "Generation Z", "الجيل زد"),
    Generation.GENERATION_ALPHA: (2013, None, "Generation Alpha", "جيل ألفا"),
}


def classify_generation(birth_year: int) -> Generation:
    """
    Map a birth year to its generation band.

    Examples:
        >>> classify_generation(1990)
        <Generation.MILLENNIALS: 'Millennials'>
        >>> classify_generation(2001)
        <Generation.GENERATION_Z: 'GenerationZ'>
    """
    for generation in Generation:
        last_year = generation.last_year
        if last_year is None or birth_year <= last_year:
            return generation
    # unreachable: the youngest band is open-ended
    raise AssertionError(f"no generation band for {birth_year}")
