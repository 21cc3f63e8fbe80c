"""Air quality (v1): current AQI, hourly and daily forecasts, station data.

The v1 responses carry a ``metadata`` block instead of a status code; the
client treats a missing code as success.
"""

from __future__ import annotations

from ..models import (
    AirCurrentResponse,
    AirDailyForecastResponse,
    AirHourlyForecastResponse,
    AirStationResponse,
)
from . import Client


def _coords(client: Client, kind: str, latitude: float, longitude: float):
    lat, lon = f"{latitude:.2f}", f"{longitude:.2f}"
    url = f"{client.api_host}/airquality/v1/{kind}/{lat}/{lon}"
    return url, {"latitude": lat, "longitude": lon}


def _check_coords(client: Client, latitude: float, longitude: float):
    if not -90 <= latitude <= 90 or not -180 <= longitude <= 180:
        return client.reject("coordinates out of range", latitude=latitude, longitude=longitude)
    return None


def air_current(client: Client, latitude: float, longitude: float):
    rejected = _check_coords(client, latitude, longitude)
    if rejected is not None:
        return rejected
    url, params = _coords(client, "current", latitude, longitude)
    return client.request_api(url, params, AirCurrentResponse)


def air_hourly_forecast(client: Client, latitude: float, longitude: float):
    rejected = _check_coords(client, latitude, longitude)
    if rejected is not None:
        return rejected
    url, params = _coords(client, "hourly", latitude, longitude)
    return client.request_api(url, params, AirHourlyForecastResponse)


def air_daily_forecast(client: Client, latitude: float, longitude: float):
    rejected = _check_coords(client, latitude, longitude)
    if rejected is not None:
        return rejected
    url, params = _coords(client, "daily", latitude, longitude)
    return client.request_api(url, params, AirDailyForecastResponse)


def air_station(client: Client, location_id: str):
    url = f"{client.api_host}/airquality/v1/station/{location_id}"
    return client.request_api(url, {"location": location_id}, AirStationResponse)
