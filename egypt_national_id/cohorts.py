"""
Helpers for working with collections of national IDs.

Filters return lists in input order; counters return plain dicts keyed
by enum member, containing only the keys that occur.
"""
from collections import Counter
from datetime import date
from typing import Dict, Iterable, List, Optional

from .demographics import Gender, Generation
from .governorates import Governorate, Region
from .national_id import NationalId


def adults(ids: Iterable[NationalId], as_of: Optional[date] = None) -> List[NationalId]:
    """IDs whose holder is an adult on ``as_of`` (today if omitted)."""
    as_of = as_of or date.today()
    return [nid for nid in ids if nid.is_adult_on(as_of)]


def from_governorate(ids: Iterable[NationalId], governorate: Governorate) -> List[NationalId]:
    return [nid for nid in ids if nid.governorate is governorate]


def from_upper_egypt(ids: Iterable[NationalId]) -> List[NationalId]:
    return [nid for nid in ids if nid.is_from_upper_egypt]


def of_generation(ids: Iterable[NationalId], generation: Generation) -> List[NationalId]:
    return [nid for nid in ids if nid.generation is generation]


def count_by_region(ids: Iterable[NationalId]) -> Dict[Region, int]:
    return dict(Counter(nid.region for nid in ids))


def count_by_generation(ids: Iterable[NationalId]) -> Dict[Generation, int]:
    return dict(Counter(nid.generation for nid in ids))


def count_by_gender(ids: Iterable[NationalId]) -> Dict[Gender, int]:
    return dict(Counter(nid.gender for nid in ids))


def sort_by_birth_date(ids: Iterable[NationalId], reverse: bool = False) -> List[NationalId]:
    """
    Oldest first (youngest first with ``reverse=True``).

    Ties on birth date are broken by serial; the sort is stable, so
    order-equal IDs keep their input order.
    """
    return sorted(ids, reverse=reverse)


def unique(ids: Iterable[NationalId]) -> List[NationalId]:
    """Drop repeated IDs, keeping the first occurrence of each."""
    seen = set()
    result = []
    for nid in ids:
        if nid not in seen:
            seen.add(nid)
            result.append(nid)
    return result
