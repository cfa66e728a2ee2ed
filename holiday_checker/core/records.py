# holiday_checker/core/records.py
import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, Iterable, List, Optional

logger = logging.getLogger(__name__)

NATIONWIDE = 'All states'


@dataclass(frozen=True)
class HolidayRecord:
    """
    One observance on one date for one country.

    `consolidated` is only set on the synthetic records produced by
    `consolidate()` when split regional records were merged.
    """
    name:         str
    date:         date
    locations:    Optional[str] = None
    type:         List[str] = field(default_factory=list)
    description:  Optional[str] = None
    consolidated: bool = False


def parse_iso_date(value: Any) -> Optional[date]:
    """Calendar date from an ISO string, ignoring any time-of-day part."""
    if not isinstance(value, str):
        return None
    try:
        return date.fromisoformat(value.split('T', 1)[0].strip())
    except ValueError:
        return None


def record_from_api(item: Dict[str, Any]) -> Optional[HolidayRecord]:
    """
    Build a HolidayRecord from one upstream holiday object.

    Returns None when the item has no name or no usable date.
    """
    if not isinstance(item, dict):
        return None
    name = (item.get('name') or '').strip()
    raw_date = item.get('date')
    iso = raw_date.get('iso') if isinstance(raw_date, dict) else raw_date
    day = parse_iso_date(iso)
    if not name or day is None:
        return None

    locations = item.get('locations')
    if not isinstance(locations, str) or not locations.strip():
        locations = None

    tags = item.get('type') or []
    if isinstance(tags, str):
        tags = [tags]

    return HolidayRecord(
        name=name,
        date=day,
        locations=locations,
        type=[str(t) for t in tags],
        description=item.get('description') or None,
    )


def has_holidays_list(payload: Dict[str, Any]) -> bool:
    """True if the payload carries a `response.holidays` list, even an empty one."""
    response = payload.get('response') if isinstance(payload, dict) else None
    return isinstance(response, dict) and isinstance(response.get('holidays'), list)


def records_from_payload(payload: Dict[str, Any]) -> List[HolidayRecord]:
    """Holiday records from a `{response: {holidays: [...]}}` payload."""
    response = payload.get('response') if isinstance(payload, dict) else None
    items: Iterable = []
    if isinstance(response, dict):
        items = response.get('holidays') or []

    records = []
    for item in items:
        record = record_from_api(item)
        if record is None:
            logger.warning("Skipping holiday without name or date: %r", item)
            continue
        records.append(record)
    return records
