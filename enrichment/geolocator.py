"""
geolocator.py

Country-level geolocation of public source addresses via an HTTP lookup service.
"""

from typing import Optional

import requests

from utils import app_logger, config


UNKNOWN_LOCATION = "Unknown"
DEFAULT_ENDPOINT = "http://ip-api.com/json/"


class GeoLocator:
    """
    Resolves an address to a country name. Lookup failures never reach the
    caller: they are logged and reported as "Unknown".
    """

    def __init__(
        self,
        endpoint: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.endpoint = config.get("geolocation.endpoint", DEFAULT_ENDPOINT) if endpoint is None else endpoint
        self.timeout = config.get("geolocation.timeout", 5) if timeout is None else timeout
        self.session = session or requests.Session()
        self.logger = app_logger

    def build_url(self, address) -> str:
        return f"{self.endpoint.rstrip('/')}/{address}"

    def locate(self, address) -> str:
        """
        Look up the country for an address.

        Args:
            address: IP address (object or text) placed in the URL path

        Returns:
            Country name, or "Unknown" on any failure
        """
        url = self.build_url(address)

        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
            body = response.json()
        except requests.exceptions.RequestException as e:
            self.logger.warning(f"Geolocation lookup failed for {address}: {e}")
            return UNKNOWN_LOCATION
        except ValueError as e:
            self.logger.warning(f"Geolocation response for {address} is not valid JSON: {e}")
            return UNKNOWN_LOCATION

        country = body.get("country") if isinstance(body, dict) else None
        if not isinstance(country, str):
            self.logger.warning(f"Geolocation response for {address} has no country field")
            return UNKNOWN_LOCATION

        self.logger.debug(f"Located {address}: {country}")
        return country

    def close(self) -> None:
        self.session.close()
