"""Tests for the month grid of the calendar view."""
from datetime import date

import pytest
from conftest import make_holiday

from holiday_checker.core.calendar_grid import (
    MONDAY, SUNDAY, build_month_grid, grid_weeks, holidays_on,
    next_month, prev_month, weekday_headers,
)


def leading_empty(cells):
    count = 0
    for cell in cells:
        if not cell.is_empty:
            break
        count += 1
    return count


class TestBuildMonthGrid:
    """Test cases for build_month_grid()."""

    def test_leap_february(self):
        cells = build_month_grid([], 2024, 2)
        first = date(2024, 2, 1)

        numbered = [c for c in cells if not c.is_empty]
        assert len(numbered) == 29
        assert [c.day for c in numbered] == list(range(1, 30))
        # Thursday, four columns after Sunday
        assert leading_empty(cells) == (first.weekday() - SUNDAY) % 7 == 4
        assert len(cells) == 4 + 29

    def test_common_year_february(self):
        cells = build_month_grid([], 2023, 2)

        assert len([c for c in cells if not c.is_empty]) == 28

    def test_monday_first(self):
        cells = build_month_grid([], 2024, 2, first_weekday=MONDAY)

        assert leading_empty(cells) == 3

    def test_month_starting_on_first_weekday_has_no_padding(self):
        # 1 September 2024 is a Sunday
        cells = build_month_grid([], 2024, 9)

        assert leading_empty(cells) == 0
        assert cells[0].date == date(2024, 9, 1)

    def test_holidays_land_on_their_day(self):
        holidays = [
            make_holiday('Chinese New Year', '2024-02-10'),
            make_holiday('Second Day of Chinese New Year', '2024-02-11'),
            make_holiday('Other', '2024-02-10'),
            make_holiday('Next Year', '2025-02-10'),
        ]

        cells = build_month_grid(holidays, 2024, 2)
        by_day = {c.day: c for c in cells if not c.is_empty}

        assert [h.name for h in by_day[10].holidays] == ['Chinese New Year', 'Other']
        assert [h.name for h in by_day[11].holidays] == ['Second Day of Chinese New Year']
        assert by_day[12].holidays == []

    def test_empty_cells_have_no_date(self):
        cells = build_month_grid([], 2024, 2)

        assert all(c.date is None and c.holidays == [] for c in cells[:4])

    @pytest.mark.parametrize('month,days', [(1, 31), (4, 30), (12, 31)])
    def test_days_in_month(self, month, days):
        cells = build_month_grid([], 2024, month)

        assert cells[-1].day == days


class TestGridHelpers:
    """Test cases for the grid helper functions."""

    def test_weekday_headers_sunday_first(self):
        assert weekday_headers() == ['Sun', 'Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat']

    def test_weekday_headers_monday_first(self):
        assert weekday_headers(MONDAY)[0] == 'Mon'
        assert weekday_headers(MONDAY)[-1] == 'Sun'

    def test_grid_weeks_row_count(self):
        cells = build_month_grid([], 2024, 2)

        weeks = grid_weeks(cells)

        assert len(weeks) == 5  # ceil((4 + 29) / 7)
        assert all(len(w) == 7 for w in weeks[:-1])
        assert len(weeks[-1]) == 5

    def test_month_navigation_wraps_within_year(self):
        assert prev_month(1) == 12
        assert next_month(12) == 1
        assert prev_month(6) == 5
        assert next_month(6) == 7

    def test_holidays_on(self):
        holidays = [make_holiday('A', '2024-05-01'), make_holiday('B', '2024-05-02')]

        assert [h.name for h in holidays_on(holidays, date(2024, 5, 1))] == ['A']
        assert holidays_on(holidays, date(2024, 5, 3)) == []
