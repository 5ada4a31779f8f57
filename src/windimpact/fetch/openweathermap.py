"""OpenWeatherMap current-weather client."""

from __future__ import annotations

import logging

import requests

from windimpact.errors import UpstreamFetchError
from windimpact.models import Coordinate, WindObservation

logger = logging.getLogger(__name__)

OPENWEATHERMAP_URL = "https://api.openweathermap.org/data/2.5/weather"


class OpenWeatherMapClient:
    """Client for fetching the current wind at a coordinate.

    Values are returned in whatever units the provider uses for ``units``;
    nothing is converted here.
    """

    def __init__(self, api_key: str, units: str = "metric", timeout: int = 30):
        self.api_key = api_key
        self.units = units
        self.timeout = timeout
        self.session = requests.Session()

    def fetch_observation(self, coordinate: Coordinate) -> WindObservation:
        """Fetch the current wind and temperature at ``coordinate``.

        Raises:
            UpstreamFetchError: on network/HTTP failure or an unusable payload.
        """
        params = {
            "lat": coordinate.lat,
            "lon": coordinate.lon,
            "appid": self.api_key,
            "units": self.units,
        }

        logger.info("Fetching current weather for %.4f,%.4f", coordinate.lat, coordinate.lon)

        try:
            resp = self.session.get(OPENWEATHERMAP_URL, params=params, timeout=self.timeout)
            resp.raise_for_status()
            data = resp.json()
        except requests.RequestException as exc:
            raise UpstreamFetchError(f"OpenWeatherMap request failed: {exc}") from exc
        except ValueError as exc:
            raise UpstreamFetchError("OpenWeatherMap returned invalid JSON") from exc

        return self._parse_observation(data)

    def _parse_observation(self, data: object) -> WindObservation:
        """Map the provider payload onto a WindObservation."""
        if not isinstance(data, dict):
            raise UpstreamFetchError("OpenWeatherMap response is not a JSON object")

        wind = data.get("wind") or {}
        main = data.get("main") or {}
        if not isinstance(wind, dict) or not isinstance(main, dict):
            raise UpstreamFetchError("OpenWeatherMap response has malformed wind or main block")

        speed = wind.get("speed")
        temp = main.get("temp")
        if speed is None or temp is None:
            raise UpstreamFetchError("OpenWeatherMap response missing wind speed or temperature")

        # Calm readings may omit the direction or send null
        deg = wind.get("deg")
        try:
            direction = round(deg) % 360 if deg is not None else 0
            return WindObservation(direction_deg=direction, speed=speed, temperature=temp)
        except (TypeError, ValueError) as exc:
            raise UpstreamFetchError(f"OpenWeatherMap response has invalid values: {exc}") from exc
