from datetime import date

from flask import Blueprint, render_template, request, current_app, url_for

from ..core.calendar_grid import (
    MONTH_NAMES, build_month_grid, grid_weeks, holidays_on,
    next_month, prev_month, weekday_headers,
)
from ..core.categories import css_class, normalize_type
from ..core.consolidation import consolidate
from ..core.countries import country_name, region_names, year_options
from ..core.grouping import group_by_month
from ..core.locations import describe_locations, expand_locations
from ..core.records import has_holidays_list, parse_iso_date, records_from_payload
from ..exceptions import HolidayCheckerError
from ..validation import query_from_args


main_bp = Blueprint('main', __name__)

VIEWS = ('calendar', 'table')


def _month_arg(value, default):
    try:
        month = int(value)
    except (TypeError, ValueError):
        return default
    return month if 1 <= month <= 12 else default


def load_holidays(country, year):
    """
    (consolidated holidays, raw count, error message) for the page.

    Errors are reported as text, never raised: the page shows them in
    place of the holidays.
    """
    client = current_app.extensions['calendarific']
    try:
        country, year = query_from_args({'country': country, 'year': year},
                                        current_app.config)
        payload = client.fetch_holidays(country, year)
    except HolidayCheckerError as e:
        return [], 0, e.message
    if not has_holidays_list(payload):
        return [], 0, 'No holidays found'
    records = records_from_payload(payload)
    return consolidate(records), len(records), None


@main_bp.route('/')
def home():
    today   = date.today()
    country = (request.args.get('country') or current_app.config['DEFAULT_COUNTRY']).upper()
    year    = request.args.get('year') or str(today.year)
    view    = request.args.get('view', 'calendar')
    if view not in VIEWS:
        view = 'calendar'
    month   = _month_arg(request.args.get('month'), today.month)
    first_weekday = current_app.config.get('FIRST_WEEKDAY', 6)

    holidays, raw_count, error = load_holidays(country, year)
    regions = region_names(country)

    def page_url(**changes):
        args = {'country': country, 'year': year, 'view': view, 'month': month}
        args.update(changes)
        return url_for('main.home', **args)

    context = dict(
        country=country,
        country_label=country_name(country),
        year=year,
        years=year_options(today),
        view=view,
        month=month,
        month_names=MONTH_NAMES,
        today=today,
        error=error,
        raw_count=raw_count,
        holidays=holidays,
        page_url=page_url,
        normalize_type=normalize_type,
        css_class=css_class,
        describe=lambda h: describe_locations(h, regions),
        expand=lambda text: expand_locations(text, regions),
    )

    if error or not raw_count:
        return render_template('index.html', **context)

    if view == 'calendar':
        selected = parse_iso_date(request.args.get('day'))
        context.update(
            weekdays=weekday_headers(first_weekday),
            weeks=grid_weeks(build_month_grid(holidays, int(year), month, first_weekday)),
            prev_month=prev_month(month),
            next_month=next_month(month),
            selected_day=selected,
            selected_holidays=holidays_on(holidays, selected) if selected else [],
        )
    else:
        context.update(sections=group_by_month(holidays))

    return render_template('index.html', **context)
