"""Month grid for the calendar view. Pure functions, no Flask imports."""

import calendar
from datetime import date
from typing import List, NamedTuple, Optional, Sequence

from .records import HolidayRecord

MONDAY = 0
SUNDAY = 6

MONTH_NAMES = [
    'January', 'February', 'March', 'April', 'May', 'June',
    'July', 'August', 'September', 'October', 'November', 'December',
]
DAY_ABBR = ['Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat', 'Sun']


class CalendarCell(NamedTuple):
    day:      Optional[int]
    date:     Optional[date]
    holidays: List[HolidayRecord]

    @property
    def is_empty(self) -> bool:
        return self.day is None


def weekday_headers(first_weekday: int = SUNDAY) -> List[str]:
    """Column headers starting at `first_weekday` (0=Monday .. 6=Sunday)."""
    return [DAY_ABBR[(first_weekday + i) % 7] for i in range(7)]


def holidays_on(holidays: Sequence[HolidayRecord], day: date) -> List[HolidayRecord]:
    """Holidays falling exactly on `day`, in the given order."""
    return [h for h in holidays if h.date == day]


def build_month_grid(holidays: Sequence[HolidayRecord],
                     year: int,
                     month: int,
                     first_weekday: int = SUNDAY) -> List[CalendarCell]:
    """
    Cells for one month of the calendar view.

    Leading empty cells align day 1 under its weekday column; there is
    no trailing padding, so the last week may be short. `month` is 1-12.
    """
    first = date(year, month, 1)
    offset = (first.weekday() - first_weekday) % 7
    days_in_month = calendar.monthrange(year, month)[1]

    cells = [CalendarCell(None, None, []) for _ in range(offset)]
    for day in range(1, days_in_month + 1):
        current = date(year, month, day)
        cells.append(CalendarCell(day, current, holidays_on(holidays, current)))
    return cells


def grid_weeks(cells: Sequence[CalendarCell]) -> List[List[CalendarCell]]:
    """Split cells into rows of seven."""
    return [list(cells[i:i + 7]) for i in range(0, len(cells), 7)]


def prev_month(month: int) -> int:
    """Previous month within the same year, wrapping January to December."""
    return 12 if month == 1 else month - 1


def next_month(month: int) -> int:
    """Next month within the same year, wrapping December to January."""
    return 1 if month == 12 else month + 1

