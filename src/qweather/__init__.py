"""Client library for the QWeather weather data service."""

from __future__ import annotations

from .client import AsyncQWeatherClient, ClientConfig, QWeatherClient
from .errors import DecodeError, ParameterError, ProviderError, QWeatherError, TransportError
from .schemas import APIError, APIResponse
from .signing import canonicalize, sign, sign_params

__version__ = "0.4.0"
