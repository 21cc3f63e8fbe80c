"""Life index forecasts (sport, car wash, dressing, UV, ...)."""

from __future__ import annotations

from ..models import IndicesForecastResponse
from . import Client

INDICES_DAYS = (1, 3)


def indices_forecast(client: Client, location: str, type_: str, days: int = 1):
    """``type_`` is a comma separated list of index ids, ``0`` for all."""
    if days not in INDICES_DAYS:
        return client.reject(f"days must be one of {INDICES_DAYS}", days=days)
    if not type_:
        return client.reject("type_ must not be empty")
    url = f"{client.api_host}/v7/indices/{days}d"
    return client.request_api(url, {"location": location, "type": type_}, IndicesForecastResponse)
