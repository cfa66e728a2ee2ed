# holiday_checker/config.py
import os

from dotenv import load_dotenv

load_dotenv()


def _env_list(name, default):
    raw = os.environ.get(name)
    if not raw:
        return list(default)
    return [c.strip().upper() for c in raw.split(',') if c.strip()]


def _env_bool(name, default):
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    SECRET_KEY            = os.environ.get('SECRET_KEY', 'change-me-per-instance')
    CALENDARIFIC_API_KEY  = os.environ.get('CALENDARIFIC_API_KEY')
    CALENDARIFIC_BASE_URL = os.environ.get('CALENDARIFIC_BASE_URL',
                                           'https://calendarific.com/api/v2')
    UPSTREAM_TIMEOUT      = float(os.environ.get('UPSTREAM_TIMEOUT', '10'))
    DEFAULT_COUNTRY       = os.environ.get('DEFAULT_COUNTRY', 'MY').upper()
    COUNTRIES             = _env_list('COUNTRIES', ['MY', 'SG', 'ID', 'TH', 'US', 'GB'])
    FIRST_WEEKDAY         = int(os.environ.get('FIRST_WEEKDAY', '6'))  # 6 = Sunday
    VALIDATE_COUNTRY      = _env_bool('VALIDATE_COUNTRY', True)
    LOG_LEVEL             = os.environ.get('LOG_LEVEL', 'INFO').upper()
    PORT                  = int(os.environ.get('PORT', '5174'))
    DEBUG                 = _env_bool('FLASK_DEBUG', False)
