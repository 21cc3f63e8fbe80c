"""City weather: real-time conditions, daily and hourly forecasts."""

from __future__ import annotations

from ..models import DynamicDataResponse, WeatherDailyForecastResponse, WeatherNowResponse
from . import Client

DAILY_DAYS = (3, 7, 10, 15, 30)
HOURLY_HOURS = (24, 72, 168)


def weather_now(client: Client, location: str):
    """Real-time weather for a LocationID or a ``lon,lat`` pair."""
    url = f"{client.api_host}/v7/weather/now"
    return client.request_api(url, {"location": location}, WeatherNowResponse)


def weather_daily_forecast(client: Client, location: str, days: int):
    """Daily forecast for the next ``days`` days (3, 7, 10, 15 or 30)."""
    if days not in DAILY_DAYS:
        return client.reject(f"days must be one of {DAILY_DAYS}", days=days)
    url = f"{client.api_host}/v7/weather/{days}d"
    return client.request_api(url, {"location": location}, WeatherDailyForecastResponse)


def weather_hourly_forecast(client: Client, location: str, hours: int):
    """Hourly forecast for the next ``hours`` hours (24, 72 or 168).

    Resolves to a ``DynamicDataResponse`` whose ``data`` is an ``HourlyList``.
    """
    if hours not in HOURLY_HOURS:
        return client.reject(f"hours must be one of {HOURLY_HOURS}", hours=hours)
    url = f"{client.api_host}/v7/weather/{hours}h"
    return client.request_api(url, {"location": location}, DynamicDataResponse)
