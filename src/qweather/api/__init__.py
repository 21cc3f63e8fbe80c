"""Endpoint wrappers.

Every wrapper takes a client first and returns whatever that client's
``request_api`` returns: an ``APIResponse`` for ``QWeatherClient``, a
coroutine resolving to one for ``AsyncQWeatherClient``.
"""

from __future__ import annotations

from typing import Union

from ..client import AsyncQWeatherClient, QWeatherClient

Client = Union[QWeatherClient, AsyncQWeatherClient]

from .air_quality import air_current, air_daily_forecast, air_hourly_forecast, air_station  # noqa: E402
from .geo import geo_city_lookup, geo_city_top, geo_poi_lookup, geo_poi_range  # noqa: E402
from .grid_weather import (  # noqa: E402
    grid_weather_daily_forecast,
    grid_weather_hourly_forecast,
    grid_weather_now,
)
from .indices import indices_forecast  # noqa: E402
from .minutely import minutely_precipitation  # noqa: E402
from .tropical import storm_forecast  # noqa: E402
from .warning import weather_warning, weather_warning_city_list  # noqa: E402
from .weather import weather_daily_forecast, weather_hourly_forecast, weather_now  # noqa: E402
