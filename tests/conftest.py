"""Shared fixtures: app, test client and a Calendarific-shaped payload."""
from datetime import date
from unittest.mock import Mock

import pytest

from holiday_checker import create_app
from holiday_checker.core.records import HolidayRecord


def make_holiday(name, iso, locations=None, type=None, description=None):
    return HolidayRecord(
        name=name,
        date=date.fromisoformat(iso),
        locations=locations,
        type=list(type or []),
        description=description,
    )


def api_holiday(name, iso, locations='All', type=('National holiday',), description=''):
    return {
        'name': name,
        'description': description,
        'country': {'id': 'my', 'name': 'Malaysia'},
        'date': {'iso': iso},
        'type': list(type),
        'primary_type': type[0] if type else '',
        'canonical_url': '',
        'urlid': '',
        'locations': locations,
        'states': locations,
    }


@pytest.fixture
def sample_payload():
    """Five raw records; the two "Second Day of Chinese New Year" ones merge."""
    return {
        'meta': {'code': 200},
        'response': {'holidays': [
            api_holiday('Thaipusam', '2024-01-25',
                        locations='JHR, KDH, KUL, NSN, PNG, PRK, PJY, SGR',
                        type=('Local holiday',)),
            api_holiday('Federal Territory Day', '2024-02-01',
                        locations='KUL, LBN, PJY', type=('Local holiday',),
                        description='Federal Territory Day is a local holiday.'),
            api_holiday('Chinese New Year', '2024-02-10'),
            api_holiday('Second Day of Chinese New Year', '2024-02-11',
                        locations='All except KTN'),
            api_holiday('Chinese New Year Holiday', '2024-02-11',
                        locations='KTN', type=('Local holiday',)),
        ]},
    }


@pytest.fixture
def app():
    app = create_app({
        'TESTING': True,
        'CALENDARIFIC_API_KEY': 'test-key',
        'DEFAULT_COUNTRY': 'MY',
    })
    return app


@pytest.fixture
def client(app):
    with app.test_client() as client:
        yield client


@pytest.fixture
def upstream(app):
    """Replaces the Calendarific session's `get` with a Mock."""
    session = app.extensions['calendarific'].session
    session.get = Mock()
    return session.get


def ok_response(payload):
    response = Mock()
    response.json.return_value = payload
    response.raise_for_status.return_value = None
    return response
