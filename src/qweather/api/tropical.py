"""Tropical cyclone forecasts. Subscription only."""

from __future__ import annotations

from ..client import WEATHER_API_URL
from ..models import StormForecastResponse
from . import Client


def storm_forecast(client: Client, storm_id: str):
    # Storm data is served from the subscription host whatever the client's plan.
    host = client.config.api_host or WEATHER_API_URL
    url = f"{host.rstrip('/')}/v7/tropical/storm-forecast"
    return client.request_api(url, {"stormid": storm_id}, StormForecastResponse)
