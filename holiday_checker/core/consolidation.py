# holiday_checker/core/consolidation.py
import re
from dataclasses import replace
from typing import Dict, List, Optional, Sequence

from .records import NATIONWIDE, HolidayRecord

_SUFFIX_RE = re.compile(r'\s+(Holiday|Day)$', re.IGNORECASE)
_PREFIX_RE = re.compile(r'^Second Day of ', re.IGNORECASE)


def base_name(name: str) -> str:
    """
    Name used to group records of the same observance.

    "Chinese New Year Holiday" and "Second Day of Chinese New Year"
    both reduce to "Chinese New Year".
    """
    stripped = _SUFFIX_RE.sub('', name)
    stripped = _PREFIX_RE.sub('', stripped)
    return stripped.strip()


def is_all_except(locations: Optional[str]) -> bool:
    return bool(locations) and 'all except' in locations.lower()


def is_specific(locations: Optional[str]) -> bool:
    return bool(locations) and not is_all_except(locations)


def _merge(group: List[HolidayRecord]) -> List[HolidayRecord]:
    if len(group) == 1:
        return group
    if (any(is_all_except(h.locations) for h in group)
            and any(is_specific(h.locations) for h in group)):
        # any qualifying pair collapses the whole group
        return [replace(group[0],
                        locations=NATIONWIDE,
                        type=['National'],
                        consolidated=True)]
    return group


def consolidate(records: Sequence[HolidayRecord]) -> List[HolidayRecord]:
    """
    Merge records that report one observance split across complementary
    location scopes: an "All except {S}" entry plus entries for the
    regions in {S}.

    Records are partitioned by date, then grouped by `base_name`. Dates
    and groups come out in order of first appearance; the input list is
    not modified.
    """
    by_date: Dict = {}
    for record in records:
        by_date.setdefault(record.date, []).append(record)

    result: List[HolidayRecord] = []
    for day_records in by_date.values():
        groups: Dict[str, List[HolidayRecord]] = {}
        for record in day_records:
            groups.setdefault(base_name(record.name), []).append(record)
        for group in groups.values():
            result.extend(_merge(group))
    return result
