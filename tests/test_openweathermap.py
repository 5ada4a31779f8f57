"""Tests for the OpenWeatherMap client with mocked HTTP."""

from __future__ import annotations

import pytest
import requests
import responses

from windimpact.errors import UpstreamFetchError
from windimpact.fetch.openweathermap import OPENWEATHERMAP_URL, OpenWeatherMapClient
from windimpact.models import Coordinate

DUBLIN = Coordinate(lat=53.35, lon=-6.26)


@responses.activate
def test_fetch_observation_parses_response():
    """Client maps wind and temperature from a minimal response."""
    responses.add(
        responses.GET,
        OPENWEATHERMAP_URL,
        json={
            "main": {"temp": 11.3, "humidity": 81},
            "wind": {"speed": 6.2, "deg": 250, "gust": 9.1},
        },
        status=200,
    )

    client = OpenWeatherMapClient("test-key")
    obs = client.fetch_observation(DUBLIN)

    assert obs.direction_deg == 250
    assert obs.speed == 6.2
    assert obs.temperature == 11.3

    request = responses.calls[0].request
    assert "appid=test-key" in request.url
    assert "units=metric" in request.url
    assert "lat=53.35" in request.url


@responses.activate
def test_units_passed_through():
    responses.add(
        responses.GET,
        OPENWEATHERMAP_URL,
        json={"main": {"temp": 52.0}, "wind": {"speed": 13.0, "deg": 90}},
        status=200,
    )

    obs = OpenWeatherMapClient("k", units="imperial").fetch_observation(DUBLIN)

    assert "units=imperial" in responses.calls[0].request.url
    assert obs.temperature == 52.0
    assert obs.speed == 13.0


@responses.activate
def test_missing_direction_defaults_to_zero():
    responses.add(
        responses.GET,
        OPENWEATHERMAP_URL,
        json={"main": {"temp": 3.0}, "wind": {"speed": 0.0}},
        status=200,
    )

    obs = OpenWeatherMapClient("k").fetch_observation(DUBLIN)
    assert obs.direction_deg == 0


@responses.activate
def test_direction_360_normalised():
    responses.add(
        responses.GET,
        OPENWEATHERMAP_URL,
        json={"main": {"temp": 3.0}, "wind": {"speed": 4.0, "deg": 360}},
        status=200,
    )

    obs = OpenWeatherMapClient("k").fetch_observation(DUBLIN)
    assert obs.direction_deg == 0


@responses.activate
def test_http_error_raises_upstream_error():
    responses.add(
        responses.GET,
        OPENWEATHERMAP_URL,
        json={"cod": 401, "message": "Invalid API key"},
        status=401,
    )

    with pytest.raises(UpstreamFetchError) as exc_info:
        OpenWeatherMapClient("bad").fetch_observation(DUBLIN)
    assert isinstance(exc_info.value.__cause__, requests.HTTPError)


@responses.activate
def test_connection_error_raises_upstream_error():
    responses.add(
        responses.GET,
        OPENWEATHERMAP_URL,
        body=requests.ConnectionError("unreachable"),
    )

    with pytest.raises(UpstreamFetchError):
        OpenWeatherMapClient("k").fetch_observation(DUBLIN)


@responses.activate
def test_invalid_json_raises_upstream_error():
    responses.add(responses.GET, OPENWEATHERMAP_URL, body="<html>oops</html>", status=200)

    with pytest.raises(UpstreamFetchError):
        OpenWeatherMapClient("k").fetch_observation(DUBLIN)


@responses.activate
def test_missing_fields_raise_upstream_error():
    responses.add(responses.GET, OPENWEATHERMAP_URL, json={"wind": {"deg": 10}}, status=200)

    with pytest.raises(UpstreamFetchError):
        OpenWeatherMapClient("k").fetch_observation(DUBLIN)


@responses.activate
def test_null_direction_treated_as_calm():
    responses.add(
        responses.GET,
        OPENWEATHERMAP_URL,
        json={"main": {"temp": 3.0}, "wind": {"speed": 0.0, "deg": None}},
        status=200,
    )

    obs = OpenWeatherMapClient("k").fetch_observation(DUBLIN)
    assert obs.direction_deg == 0


@pytest.mark.parametrize(
    "payload",
    [
        {"main": {"temp": 3.0}, "wind": {"speed": -2.0, "deg": 10}},
        {"main": {"temp": 3.0}, "wind": {"speed": "fast", "deg": 10}},
        {"main": {"temp": 3.0}, "wind": {"speed": 2.0, "deg": "north"}},
        {"main": [3.0], "wind": {"speed": 2.0, "deg": 10}},
        [{"main": {"temp": 3.0}, "wind": {"speed": 2.0, "deg": 10}}],
    ],
)
@responses.activate
def test_malformed_payload_raises_upstream_error(payload):
    responses.add(responses.GET, OPENWEATHERMAP_URL, json=payload, status=200)

    with pytest.raises(UpstreamFetchError):
        OpenWeatherMapClient("k").fetch_observation(DUBLIN)
