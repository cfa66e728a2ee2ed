# holiday_checker/core/grouping.py
from collections import OrderedDict
from typing import List, Sequence, Tuple

from .calendar_grid import MONTH_NAMES
from .records import HolidayRecord


def month_group_label(holiday: HolidayRecord) -> str:
    return f"{MONTH_NAMES[holiday.date.month - 1]} {holiday.date.year}"


def group_by_month(holidays: Sequence[HolidayRecord]
                   ) -> List[Tuple[str, List[HolidayRecord]]]:
    """
    Sections for the table view: [("January 2024", [...]), ...].

    Holidays are sorted by date first; ties keep their input order.
    """
    groups: "OrderedDict[str, List[HolidayRecord]]" = OrderedDict()
    for holiday in sorted(holidays, key=lambda h: h.date):
        groups.setdefault(month_group_label(holiday), []).append(holiday)
    return list(groups.items())
