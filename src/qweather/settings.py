"""Client configuration loaded from the environment."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from dotenv import load_dotenv
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = Path(__file__).resolve().parents[2] / ".env"
load_dotenv(ENV_FILE, override=False)


class QWeatherSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="QWEATHER_", env_file=str(ENV_FILE), extra="ignore")

    public_id: str | None = Field(
        default=None,
        validation_alias=AliasChoices("QWEATHER_ID", "QWEATHER_PUBLIC_ID"),
    )
    private_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("QWEATHER_KEY", "QWEATHER_PRIVATE_KEY"),
    )
    subscription: bool = False
    lang: str | None = None
    unit: Literal["m", "i"] | None = None

    api_host: str | None = None
    geo_host: str = "https://geoapi.qweather.com"
    request_timeout_s: float = 10.0
    digest: str = "md5"


@lru_cache(maxsize=1)
def get_settings() -> QWeatherSettings:
    return QWeatherSettings()
