"""Severe weather warnings."""

from __future__ import annotations

from ..models import WeatherWarningCityListResponse, WeatherWarningResponse
from . import Client


def weather_warning(client: Client, location: str):
    url = f"{client.api_host}/v7/warning/now"
    return client.request_api(url, {"location": location}, WeatherWarningResponse)


def weather_warning_city_list(client: Client, range_: str = "cn"):
    """LocationIDs of every city currently under a warning in ``range_``."""
    url = f"{client.api_host}/v7/warning/list"
    return client.request_api(url, {"range": range_}, WeatherWarningCityListResponse)
