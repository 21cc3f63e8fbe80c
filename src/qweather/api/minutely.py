"""Minute-level precipitation for the next two hours (China only)."""

from __future__ import annotations

from ..models import MinutelyPrecipitationResponse
from . import Client


def minutely_precipitation(client: Client, location: str):
    url = f"{client.api_host}/v7/minutely/5m"
    return client.request_api(url, {"location": location}, MinutelyPrecipitationResponse)
