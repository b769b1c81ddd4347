"""
Governorate codes used in Egyptian national IDs.

Characters 8-9 of an ID hold the code of the governorate where the birth
was registered. This module maps each code to the governorate, its English
and Arabic names, and the broader region it belongs to. The table is built
once at import time and exposed read-only.
"""
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional


class Region(str, Enum):
    """
    Coarse geographic classification of governorates.
    """
    GREATER_CAIRO = "GreaterCairo"
    ALEXANDRIA = "Alexandria"
    DELTA = "Delta"
    CANAL = "Canal"
    UPPER_EGYPT = "UpperEgypt"
    FRONTIER = "Frontier"
    FOREIGN = "Foreign"

    @property
    def name_en(self) -> str:
        return _REGION_NAMES[self][0]

    @property
    def name_ar(self) -> str:
        return _REGION_NAMES[self][1]


_REGION_NAMES = {
    Region.GREATER_CAIRO: ("Greater Cairo", "القاهرة الكبرى"),
    Region.ALEXANDRIA: ("Alexandria", "الإسكندرية"),
    Region.DELTA: ("Nile Delta", "الدلتا"),
    Region.CANAL: ("Suez Canal", "مدن القناة"),
    Region.UPPER_EGYPT: ("Upper Egypt", "الصعيد"),
    Region.FRONTIER: ("Frontier governorates", "المحافظات الحدودية"),
    Region.FOREIGN: ("Outside Egypt", "خارج الجمهورية"),
}


class Governorate(str, Enum):
    """
    Governorates, valued by their two-digit ID code.
    """
    CAIRO = "01"
    ALEXANDRIA = "02"
    PORT_SAID = "03"
    SUEZ = "04"
    DAMIETTA = "11"
    DAKAHLIA = "12"
    SHARQIA = "13"
    QALYUBIA = "14"
    KAFR_EL_SHEIKH = "15"
    GHARBIA = "16"
    MONUFIA = "17"
    BEHEIRA = "18"
    ISMAILIA = "19"
    GIZA = "21"
    BENI_SUEF = "22"
    FAIYUM = "23"
    MINYA = "24"
    ASYUT = "25"
    SOHAG = "26"
    QENA = "27"
    ASWAN = "28"
    LUXOR = "29"
    RED_SEA = "31"
    NEW_VALLEY = "32"
    MATROUH = "33"
    NORTH_SINAI = "34"
    SOUTH_SINAI = "35"
    FOREIGN = "88"

    @property
    def code(self) -> str:
        return self.value

    @property
    def info(self) -> "GovernorateInfo":
        return GOVERNORATES[self.value]


@dataclass(frozen=True)
class GovernorateInfo:
    """A row of the governorate table."""
    governorate: Governorate
    name_en: str
    name_ar: str
    region: Region

    @property
    def code(self) -> str:
        return self.governorate.value


def _build_table(rows) -> Mapping[str, GovernorateInfo]:
    table = {}
    for governorate, name_en, name_ar, region in rows:
        table[governorate.value] = GovernorateInfo(governorate, name_en, name_ar, region)
    return MappingProxyType(table)


GOVERNORATES: Mapping[str, GovernorateInfo] = _build_table([
    (Governorate.CAIRO, "Cairo", "القاهرة", Region.GREATER_CAIRO),
    (Governorate.ALEXANDRIA, "Alexandria", "الإسكندرية", Region.ALEXANDRIA),
    (Governorate.PORT_SAID, "Port Said", "بورسعيد", Region.CANAL),
    (Governorate.SUEZ, "Suez", "السويس", Region.CANAL),
    (Governorate.DAMIETTA, "Damietta", "دمياط", Region.DELTA),
    (Governorate.DAKAHLIA, "Dakahlia", "الدقهلية", Region.DELTA),
    (Governorate.SHARQIA, "Sharqia", "الشرقية", Region.DELTA),
    (Governorate.QALYUBIA, "Qalyubia", "القليوبية", Region.GREATER_CAIRO),
    (Governorate.KAFR_EL_SHEIKH, "Kafr El Sheikh", "كفر الشيخ", Region.DELTA),
    (Governorate.GHARBIA, "Gharbia", "الغربية", Region.DELTA),
    (Governorate.MONUFIA, "Monufia", "المنوفية", Region.DELTA),
    (Governorate.BEHEIRA, "Beheira", "البحيرة", Region.DELTA),
    (Governorate.ISMAILIA, "Ismailia", "الإسماعيلية", Region.CANAL),
    (Governorate.GIZA, "Giza", "الجيزة", Region.GREATER_CAIRO),
    (Governorate.BENI_SUEF, "Beni Suef", "بني سويف", Region.UPPER_EGYPT),
    (Governorate.FAIYUM, "Faiyum", "الفيوم", Region.UPPER_EGYPT),
    (Governorate.MINYA, "Minya", "المنيا", Region.UPPER_EGYPT),
    (Governorate.ASYUT, "Asyut", "أسيوط", Region.UPPER_EGYPT),
    (Governorate.SOHAG, "Sohag", "سوهاج", Region.UPPER_EGYPT),
    (Governorate.QENA, "Qena", "قنا", Region.UPPER_EGYPT),
    (Governorate.ASWAN, "Aswan", "أسوان", Region.UPPER_EGYPT),
    (Governorate.LUXOR, "Luxor", "الأقصر", Region.UPPER_EGYPT),
    (Governorate.RED_SEA, "Red Sea", "البحر الأحمر", Region.FRONTIER),
    (Governorate.NEW_VALLEY, "New Valley", "الوادي الجديد", Region.FRONTIER),
    (Governorate.MATROUH, "Matrouh", "مطروح", Region.FRONTIER),
    (Governorate.NORTH_SINAI, "North Sinai", "شمال سيناء", Region.FRONTIER),
    (Governorate.SOUTH_SINAI, "South Sinai", "جنوب سيناء", Region.FRONTIER),
    (Governorate.FOREIGN, "Born abroad", "خارج الجمهورية", Region.FOREIGN),
])


def lookup(code: str) -> Optional[GovernorateInfo]:
    """
    Find the governorate for a two-digit code.

    Returns:
        GovernorateInfo or None if the code is unknown

    Examples:
        >>> lookup("01").name_en
        'Cairo'
        >>> lookup("05") is None
        True
    """
    return GOVERNORATES.get(code)


def region_of(governorate: Governorate) -> Region:
    return GOVERNORATES[governorate.value].region
