# holiday_checker/validation.py
from datetime import MINYEAR
from typing import Mapping, Tuple

from .core.countries import is_supported_country
from .exceptions import ValidationError


def validate_holiday_query(country, year, check_country: bool = True) -> Tuple[str, str]:
    """
    Normalized (country, year) or ValidationError.

    `year` stays a string; it is forwarded to the provider as given.
    """
    country = (country or '').strip()
    year = (str(year) if year is not None else '').strip()
    if not country or not year:
        raise ValidationError('Country and year required')
    if not (len(year) == 4 and year.isdigit()):
        raise ValidationError(f"Year must be a four-digit number, got '{year}'")
    if int(year) < MINYEAR:
        raise ValidationError(f"Year must be {MINYEAR} or later, got '{year}'")
    country = country.upper()
    if check_country and not is_supported_country(country):
        raise ValidationError(f"Unsupported country code '{country}'")
    return country, year


def query_from_args(args: Mapping, config: Mapping) -> Tuple[str, str]:
    return validate_holiday_query(
        args.get('country'),
        args.get('year'),
        check_country=config.get('VALIDATE_COUNTRY', True),
    )
