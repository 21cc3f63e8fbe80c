"""Payload models for the QWeather endpoints.

Numeric fields use the tolerant aliases from ``coercion``; the provider is
free to send ``"24"``, ``24`` or ``""`` for the same field.
"""

from __future__ import annotations

import datetime as dt
from typing import Any

from pydantic import Field, model_validator

from .coercion import Float, Int, OptFlag, OptFloat, OptInt, OptTimestamp, Timestamp
from .schemas import DynamicEnvelope, MetaData, RGBA, StaticEnvelope, WireModel
from .shapes import ShapeSet


# --- weather ---------------------------------------------------------------


class WeatherNow(WireModel):
    obs_time: Timestamp
    temp: Float
    feels_like: Float
    icon: str
    text: str
    wind360: Float
    wind_dir: str
    wind_scale: Float
    wind_speed: Float
    humidity: Float
    precip: Float
    pressure: Float
    vis: Float
    cloud: OptFloat = None
    dew: OptFloat = None


class DailyForecast(WireModel):
    fx_date: dt.date
    # Sun and moon times can be empty at high latitudes.
    sunrise: str | None = None
    sunset: str | None = None
    moonrise: str | None = None
    moonset: str | None = None
    moon_phase: str
    moon_phase_icon: str
    temp_max: Float
    temp_min: Float
    icon_day: str
    text_day: str
    icon_night: str
    text_night: str
    wind360_day: Float
    wind_dir_day: str
    wind_scale_day: str
    wind_speed_day: Float
    wind360_night: Float
    wind_dir_night: str
    wind_scale_night: str
    wind_speed_night: Float
    precip: Float
    uv_index: Float
    humidity: Float
    pressure: Float
    vis: Float
    cloud: OptFloat = None


class HourlyForecast(WireModel):
    fx_time: Timestamp
    temp: Float
    icon: str
    text: str
    wind360: Float
    wind_dir: str
    wind_scale: str
    wind_speed: Float
    humidity: Float
    pop: OptFloat = None
    precip: Float
    pressure: Float
    cloud: OptFloat = None
    dew: OptFloat = None


class WeatherNowResponse(DynamicEnvelope):
    now: WeatherNow


class WeatherDailyForecastResponse(DynamicEnvelope):
    daily: list[DailyForecast]


# --- minutely precipitation ----------------------------------------------


class Minutely(WireModel):
    fx_time: Timestamp
    precip: Float
    type_: str = Field(alias="type")


class MinutelyPrecipitationResponse(DynamicEnvelope):
    summary: str
    minutely: list[Minutely]


# --- grid weather ----------------------------------------------------------


class GridWeatherNow(WireModel):
    obs_time: Timestamp
    temp: Float
    icon: str
    text: str
    wind360: Float
    wind_dir: str
    wind_scale: Float
    wind_speed: Float
    humidity: Float
    precip: Float
    pressure: Float
    cloud: OptFloat = None
    dew: OptFloat = None


class GridDailyForecast(WireModel):
    fx_date: dt.date
    temp_max: Float
    temp_min: Float
    icon_day: str
    text_day: str
    icon_night: str
    text_night: str
    wind360_day: Float
    wind_dir_day: str
    wind_scale_day: str
    wind_speed_day: Float
    wind360_night: Float
    wind_dir_night: str
    wind_scale_night: str
    wind_speed_night: Float
    precip: Float
    humidity: Float
    pressure: Float


class GridHourlyForecast(WireModel):
    fx_time: Timestamp
    temp: Float
    icon: str
    text: str
    wind360: Float
    wind_dir: str
    wind_scale: str
    wind_speed: Float
    humidity: Float
    precip: Float
    pressure: Float
    cloud: OptFloat = None
    dew: OptFloat = None


class GridWeatherNowResponse(DynamicEnvelope):
    now: GridWeatherNow


class GridWeatherDailyForecastResponse(DynamicEnvelope):
    daily: list[GridDailyForecast]


class GridWeatherHourlyForecastResponse(DynamicEnvelope):
    hourly: list[GridHourlyForecast]


# --- geo -------------------------------------------------------------------


class Location(WireModel):
    """A city or POI returned by the GeoAPI."""

    name: str
    id: str
    lat: Float
    lon: Float
    adm2: str = ""
    adm1: str = ""
    country: str = ""
    tz: str | None = None
    utc_offset: str | None = None
    # "1" while daylight saving time is in effect.
    is_dst: OptFlag = None
    type_: str = Field(default="", alias="type")
    rank: OptInt = None
    fx_link: str | None = None


class CityLookupResponse(StaticEnvelope):
    location: list[Location]


# --- warnings --------------------------------------------------------------


class WeatherWarning(WireModel):
    id: str
    sender: str = ""
    pub_time: Timestamp
    title: str
    start_time: OptTimestamp = None
    end_time: OptTimestamp = None
    status: str
    level: str = ""
    severity: str = ""
    severity_color: str = ""
    type_: str = Field(alias="type")
    type_name: str
    urgency: str = ""
    certainty: str = ""
    text: str
    related: str = ""


class WeatherWarningResponse(DynamicEnvelope):
    warning: list[WeatherWarning]


class LocationId(WireModel):
    location_id: str


class WeatherWarningCityListResponse(DynamicEnvelope):
    warning_loc_list: list[LocationId]


# --- indices ---------------------------------------------------------------


class DailyIndices(WireModel):
    date: dt.date
    type_: Int = Field(alias="type")
    name: str
    level: Int
    category: str
    text: str = ""


class IndicesForecastResponse(DynamicEnvelope):
    daily: list[DailyIndices]


# --- tropical cyclones -----------------------------------------------------


class StormForecast(WireModel):
    fx_time: Timestamp
    lat: Float
    lon: Float
    type_: str = Field(alias="type")
    pressure: Float
    wind_speed: Float
    move_speed: OptFloat = None
    move_dir: str = ""
    move360: OptFloat = None


class StormForecastResponse(DynamicEnvelope):
    forecast: list[StormForecast]


# --- air quality (v1) ------------------------------------------------------


class PrimaryPollutant(WireModel):
    code: str
    name: str
    full_name: str


class HealthAdvice(WireModel):
    general_population: str
    sensitive_population: str


class Health(WireModel):
    effect: str | None = None
    advice: HealthAdvice


class AirQualityIndex(WireModel):
    code: str
    name: str
    aqi: Float
    aqi_display: str
    level: OptInt = None
    category: str
    color: RGBA
    primary_pollutant: PrimaryPollutant | None = None
    health: Health | None = None


class Concentration(WireModel):
    value: Float
    unit: str


class SubIndex(WireModel):
    code: str
    aqi: Float
    aqi_display: str


class Pollutant(WireModel):
    code: str
    name: str
    full_name: str
    concentration: Concentration
    sub_indexes: list[SubIndex] | None = None


class Station(WireModel):
    id: str
    name: str


class AirCurrentResponse(WireModel):
    metadata: MetaData
    indexes: list[AirQualityIndex]
    pollutants: list[Pollutant] | None = None
    stations: list[Station] | None = None


class AirHourlyForecast(WireModel):
    forecast_time: Timestamp
    indexes: list[AirQualityIndex]
    pollutants: list[Pollutant] | None = None


class AirHourlyForecastResponse(WireModel):
    metadata: MetaData
    hours: list[AirHourlyForecast]


class AirDailyForecast(WireModel):
    forecast_start_time: Timestamp
    forecast_end_time: Timestamp
    indexes: list[AirQualityIndex]
    pollutants: list[Pollutant] | None = None


class AirDailyForecastResponse(WireModel):
    metadata: MetaData
    days: list[AirDailyForecast]


class AirStationResponse(WireModel):
    metadata: MetaData
    pollutants: list[Pollutant]


# --- untagged payload shapes -----------------------------------------------
#
# Declared order is part of the contract: ShapeSet tries variants in this
# order and returns the first structural match.


class NowData(WireModel):
    now: WeatherNow


class DailyList(WireModel):
    daily: list[DailyForecast]


class HourlyList(WireModel):
    hourly: list[HourlyForecast]


class MinutelyList(WireModel):
    summary: str
    minutely: list[Minutely]


class LocationList(WireModel):
    location: list[Location]


class PoiList(WireModel):
    poi: list[Location]


class TopCityList(WireModel):
    top_city_list: list[Location]


DYNAMIC_SHAPES = ShapeSet(NowData, DailyList, HourlyList, MinutelyList)
STATIC_SHAPES = ShapeSet(LocationList, PoiList, TopCityList)


def _with_resolved_data(values: Any, shapes: ShapeSet) -> Any:
    if isinstance(values, dict) and "data" not in values:
        return {**values, "data": shapes.resolve(values)}
    return values


class DynamicDataResponse(DynamicEnvelope):
    """Dynamic envelope whose payload is one of ``DYNAMIC_SHAPES``."""

    data: NowData | DailyList | HourlyList | MinutelyList

    @model_validator(mode="before")
    @classmethod
    def _resolve_shape(cls, values: Any) -> Any:
        return _with_resolved_data(values, DYNAMIC_SHAPES)


class StaticDataResponse(StaticEnvelope):
    """Static envelope whose payload is one of ``STATIC_SHAPES``."""

    data: LocationList | PoiList | TopCityList

    @model_validator(mode="before")
    @classmethod
    def _resolve_shape(cls, values: Any) -> Any:
        return _with_resolved_data(values, STATIC_SHAPES)
