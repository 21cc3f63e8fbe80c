"""Grid weather: forecasts for arbitrary coordinates at 3-5 km resolution."""

from __future__ import annotations

from ..models import (
    GridWeatherDailyForecastResponse,
    GridWeatherHourlyForecastResponse,
    GridWeatherNowResponse,
)
from . import Client

GRID_DAILY_DAYS = (3, 7)
GRID_HOURLY_HOURS = (24, 72)


def grid_weather_now(client: Client, location: str):
    url = f"{client.api_host}/v7/grid-weather/now"
    return client.request_api(url, {"location": location}, GridWeatherNowResponse)


def grid_weather_daily_forecast(client: Client, location: str, days: int):
    if days not in GRID_DAILY_DAYS:
        return client.reject(f"days must be one of {GRID_DAILY_DAYS}", days=days)
    url = f"{client.api_host}/v7/grid-weather/{days}d"
    return client.request_api(url, {"location": location}, GridWeatherDailyForecastResponse)


def grid_weather_hourly_forecast(client: Client, location: str, hours: int):
    if hours not in GRID_HOURLY_HOURS:
        return client.reject(f"hours must be one of {GRID_HOURLY_HOURS}", hours=hours)
    url = f"{client.api_host}/v7/grid-weather/{hours}h"
    return client.request_api(url, {"location": location}, GridWeatherHourlyForecastResponse)
