import dataclasses
import json

import httpx
import pytest

from qweather.client import AsyncQWeatherClient, ClientConfig, QWeatherClient

FIXED_TS = 1700000000

WEATHER_NOW_BODY = {
    "code": "200",
    "updateTime": "2020-06-30T22:00+08:00",
    "fxLink": "http://hfx.link/2ax1",
    "now": {
        "obsTime": "2020-06-30T21:40+08:00",
        "temp": "24",
        "feelsLike": "26",
        "icon": "101",
        "text": "多云",
        "wind360": "123",
        "windDir": "东南风",
        "windScale": "1",
        "windSpeed": "3",
        "humidity": "72",
        "precip": "0.0",
        "pressure": "1003",
        "vis": "16",
        "cloud": "10",
        "dew": "21",
    },
    "refer": {"sources": ["QWeather", "NMC", "ECMWF"], "license": ["QWeather Developers License"]},
}


@pytest.fixture
def config():
    return ClientConfig(public_id="id1", private_key="key1")


@pytest.fixture
def recorder():
    """Collects requests seen by the mock transport."""
    return []


def json_handler(body, recorder, status_code=200):
    def handler(request: httpx.Request) -> httpx.Response:
        recorder.append(request)
        return httpx.Response(status_code, content=json.dumps(body).encode("utf-8"))

    return handler


@pytest.fixture
def make_client(config, recorder):
    def _make(handler=None, body=None, status_code=200, **overrides):
        cfg = dataclasses.replace(config, **overrides)
        handler = handler or json_handler(body, recorder, status_code)
        http = httpx.Client(transport=httpx.MockTransport(handler))
        return QWeatherClient(cfg, http_client=http, clock=lambda: FIXED_TS)

    return _make


@pytest.fixture
def make_async_client(config, recorder):
    def _make(handler=None, body=None, status_code=200):
        handler = handler or json_handler(body, recorder, status_code)
        http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return AsyncQWeatherClient(config, http_client=http, clock=lambda: FIXED_TS)

    return _make
