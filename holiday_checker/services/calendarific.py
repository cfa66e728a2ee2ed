# holiday_checker/services/calendarific.py
import logging
from typing import Any, Dict, Optional

import requests

from ..exceptions import ConfigurationError, UpstreamError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = 'https://calendarific.com/api/v2'


class CalendarificClient:
    """
    Thin pass-through to the Calendarific holidays endpoint.

    No caching and no retries: every call is one upstream request.
    """

    def __init__(self,
                 api_key: Optional[str],
                 base_url: str = DEFAULT_BASE_URL,
                 timeout: float = 10,
                 session: Optional[requests.Session] = None):
        self.api_key  = api_key
        self.base_url = base_url.rstrip('/')
        self.timeout  = timeout
        self.session  = session or requests.Session()

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> 'CalendarificClient':
        return cls(
            api_key=config.get('CALENDARIFIC_API_KEY'),
            base_url=config.get('CALENDARIFIC_BASE_URL', DEFAULT_BASE_URL),
            timeout=config.get('UPSTREAM_TIMEOUT', 10),
        )

    def fetch_holidays(self, country: str, year: str) -> Dict[str, Any]:
        """
        Raw JSON for `GET /holidays?country=..&year=..`.

        Shaped `{"meta": {...}, "response": {"holidays": [...]}}` on success.
        """
        if not self.api_key:
            raise ConfigurationError('API key not configured')

        url = f"{self.base_url}/holidays"
        params = {'api_key': self.api_key, 'country': country, 'year': year}
        logger.info("Fetching holidays country=%s year=%s", country, year)
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except requests.RequestException as e:
            logger.warning("Upstream request failed for %s/%s: %s", country, year, e)
            raise UpstreamError(str(e)) from e
        except ValueError as e:
            logger.warning("Upstream returned invalid JSON for %s/%s", country, year)
            raise UpstreamError(f"Invalid response from holidays provider: {e}") from e
