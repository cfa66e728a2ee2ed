# holiday_checker/core/countries.py

import holidays
import pycountry
from datetime import date
from functools import lru_cache
from typing import Dict, List, Optional

# Selector list of the UI, in display order
DEFAULT_COUNTRIES = ['MY', 'SG', 'ID', 'TH', 'US', 'GB']

# Calendarific reports Malaysian states with its own abbreviations
# instead of ISO 3166-2 codes
CALENDARIFIC_REGIONS: Dict[str, Dict[str, str]] = {
    'MY': {
        'JHR': 'Johor',
        'KDH': 'Kedah',
        'KTN': 'Kelantan',
        'KUL': 'Kuala Lumpur',
        'LBN': 'Labuan',
        'MLK': 'Melaka',
        'NSN': 'Negeri Sembilan',
        'PHG': 'Pahang',
        'PNG': 'Penang',
        'PRK': 'Perak',
        'PLS': 'Perlis',
        'PJY': 'Putrajaya',
        'SBH': 'Sabah',
        'SGR': 'Selangor',
        'SWK': 'Sarawak',
        'TRG': 'Terengganu',
    },
}


def country_name(code: str) -> str:
    """English short name of a country, or the code itself if unknown."""
    try:
        country = pycountry.countries.get(alpha_2=code.upper())
    except LookupError:
        country = None
    return country.name if country else code


@lru_cache(maxsize=1)
def _supported_codes() -> frozenset:
    return frozenset(holidays.list_supported_countries())


def is_supported_country(code: str) -> bool:
    """True if `code` is a country the `holidays` package knows about."""
    return code.upper() in _supported_codes()


@lru_cache(maxsize=None)
def _iso_subdivisions(code: str) -> Dict[str, str]:
    try:
        subdivisions = pycountry.subdivisions.get(country_code=code) or []
    except LookupError:
        subdivisions = []
    names = {}
    for sub in subdivisions:
        names[sub.code] = sub.name
        names[sub.code.split('-', 1)[1]] = sub.name
    return names


def region_names(code: Optional[str]) -> Dict[str, str]:
    """
    Region code -> display name for one country.

    ISO 3166-2 names from `pycountry`, overridden by the abbreviations
    Calendarific uses where they differ.
    """
    if not code:
        return {}
    code = code.upper()
    names = dict(_iso_subdivisions(code))
    names.update(CALENDARIFIC_REGIONS.get(code, {}))
    return names


def country_choices(codes: Optional[List[str]] = None) -> List[Dict[str, str]]:
    """[{"code": "MY", "name": "Malaysia"}, ...] for the country selector."""
    return [{'code': c, 'name': country_name(c)} for c in (codes or DEFAULT_COUNTRIES)]


def year_options(today: Optional[date] = None, count: int = 5) -> List[int]:
    """Years offered by the selector: last year and the following ones."""
    current = (today or date.today()).year
    return [current - 1 + i for i in range(count)]
