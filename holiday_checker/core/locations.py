# holiday_checker/core/locations.py
import re
from typing import List, Mapping, NamedTuple, Optional

from .consolidation import is_all_except
from .records import HolidayRecord


class LocationScope(NamedTuple):
    kind:    str            # 'nationwide' | 'all_except' | 'regions'
    label:   str
    regions: List[str]


def expand_locations(text: Optional[str],
                     code_to_name: Mapping[str, str]) -> Optional[str]:
    """
    Replace region codes in a location descriptor with full names.

    "All except SBH, SWK" -> "All except Sabah, Sarawak"
    "KUL,SGR"             -> "Kuala Lumpur, Selangor"

    Unknown codes are left as they are.
    """
    if not text:
        return text

    if is_all_except(text):
        if not code_to_name:
            return text
        by_code = {code.lower(): name for code, name in code_to_name.items()}
        # one pass, so inserted names are never matched again
        codes = sorted(map(re.escape, code_to_name), key=len, reverse=True)
        pattern = re.compile(r'\b(%s)\b' % '|'.join(codes), re.IGNORECASE)
        return pattern.sub(lambda m: by_code[m.group(0).lower()], text)

    parts = [part.strip() for part in text.split(',')]
    return ', '.join(code_to_name.get(part, part) for part in parts)


def describe_locations(holiday: HolidayRecord,
                       code_to_name: Mapping[str, str]) -> Optional[LocationScope]:
    """Classify where a holiday applies, for location hints and details."""
    if not holiday.locations:
        return None

    lowered = holiday.locations.lower().strip()
    if holiday.consolidated or lowered in ('all states', 'all'):
        return LocationScope('nationwide', 'Nationwide', [])

    expanded = expand_locations(holiday.locations, code_to_name)
    if is_all_except(holiday.locations):
        return LocationScope('all_except', expanded, [])

    regions = [r.strip() for r in expanded.split(',')]
    count = len(holiday.locations.split(','))
    label = '%d %s' % (count, 'state' if count == 1 else 'states')
    return LocationScope('regions', label, regions)
