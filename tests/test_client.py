import dataclasses

import httpx
import pytest

from conftest import FIXED_TS, WEATHER_NOW_BODY
from qweather.client import ClientConfig
from qweather.errors import DecodeError, ProviderError, QWeatherError, TransportError
from qweather.models import AirStationResponse, WeatherNowResponse
from qweather.schemas import APIResponse

URL = "https://devapi.qweather.com/v7/weather/now"


def test_signed_params_end_to_end(make_client):
    client = make_client(body={})
    query = client.signed_params({"location": "101010100"})
    assert query == {
        "location": "101010100",
        "publicid": "id1",
        "t": str(FIXED_TS),
        "sign": "8ccfc223643869a2e9364f9a4c4cd295",
    }


def test_request_carries_signed_query(make_client, recorder):
    client = make_client(body=WEATHER_NOW_BODY)
    client.request_api(URL, {"location": "101010100"}, WeatherNowResponse)

    request = recorder[0]
    assert request.method == "GET"
    assert request.url.path == "/v7/weather/now"
    assert request.url.params["sign"] == "8ccfc223643869a2e9364f9a4c4cd295"
    assert request.url.params["t"] == "1700000000"
    assert request.url.params["publicid"] == "id1"


def test_persistent_lang_and_unit_are_signed(make_client, recorder):
    client = make_client(body=WEATHER_NOW_BODY, lang="en", unit="i")
    client.request_api(URL, {"location": "101010100"}, WeatherNowResponse)

    params = recorder[0].url.params
    assert params["lang"] == "en"
    assert params["unit"] == "i"
    assert params["sign"] == "8aa6d1bca130ca0fa24607b2d0712b9f"


def test_success_decodes_payload(make_client):
    result = make_client(body=WEATHER_NOW_BODY).request_api(URL, {"location": "101010100"}, WeatherNowResponse)
    assert result.ok
    assert result.error is None
    assert result.data.code == "200"
    assert result.data.now.temp == 24.0
    assert result.data.now.cloud == 10.0
    assert result.data.refer.license == ["QWeather Developers License"]
    assert result.unwrap() is result.data


def test_provider_error_code_is_passed_through(make_client):
    result = make_client(body={"code": "400"}).request_api(URL, {"location": "x"}, WeatherNowResponse)
    assert not result.ok
    assert result.error.kind == "provider"
    assert result.error.code == "400"
    with pytest.raises(ProviderError) as excinfo:
        result.unwrap()
    assert excinfo.value.code == "400"


def test_numeric_status_is_read_as_string(make_client):
    result = make_client(body={"code": 402}).request_api(URL, {}, WeatherNowResponse)
    assert result.error.code == "402"


def test_decode_failure_is_an_error_value(make_client):
    body = {**WEATHER_NOW_BODY, "now": {**WEATHER_NOW_BODY["now"], "temp": ""}}
    result = make_client(body=body).request_api(URL, {"location": "x"}, WeatherNowResponse)
    assert not result.ok
    assert result.error.kind == "decode"
    assert result.error.code == "DECODE_ERROR"
    assert result.error.details["model"] == "WeatherNowResponse"
    assert ["now", "temp"] in [err["loc"] for err in result.error.details["errors"]]
    with pytest.raises(DecodeError):
        result.unwrap()


def test_missing_code_is_treated_as_success(make_client):
    body = {
        "metadata": {"tag": "f5306fd3"},
        "pollutants": [
            {
                "code": "pm2p5",
                "name": "PM 2.5",
                "fullName": "颗粒物（粒径小于等于2.5µm）",
                "concentration": {"unit": "μg/m3", "value": 12.0},
            }
        ],
    }
    result = make_client(body=body).request_api(URL, {}, AirStationResponse)
    assert result.ok
    assert result.data.pollutants[0].concentration.value == 12.0


def test_non_json_body_is_transport_error(make_client, recorder):
    def handler(request):
        recorder.append(request)
        return httpx.Response(502, content=b"<html>Bad Gateway</html>")

    result = make_client(handler=handler).request_api(URL, {}, WeatherNowResponse)
    assert result.error.kind == "transport"
    assert result.error.details["status_code"] == 502
    with pytest.raises(TransportError):
        result.unwrap()


def test_timeout_is_transport_error(make_client):
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    result = make_client(handler=handler).request_api(URL, {}, WeatherNowResponse)
    assert result.error.kind == "transport"
    assert result.error.code == "TRANSPORT_ERROR"
    assert result.error.details["error_type"] == "ReadTimeout"


def test_connect_error_is_transport_error(make_client):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    result = make_client(handler=handler).request_api(URL, {}, WeatherNowResponse)
    assert result.error.kind == "transport"
    assert "connection refused" in result.error.message


def test_reject_never_touches_network(make_client, recorder):
    result = make_client(body={}).reject("days must be one of (3, 7)", days=5)
    assert result.error.kind == "invalid_argument"
    assert result.error.details == {"days": 5}
    assert recorder == []


def test_hosts():
    assert ClientConfig("id", "key").host == "https://devapi.qweather.com"
    assert ClientConfig("id", "key", subscription=True).host == "https://api.qweather.com"
    assert ClientConfig("id", "key", api_host="https://example.test/").host == "https://example.test"


@pytest.mark.parametrize(
    "kwargs",
    [
        {"public_id": "", "private_key": "key"},
        {"public_id": "id", "private_key": ""},
        {"public_id": "id", "private_key": "key", "unit": "x"},
        {"public_id": "id", "private_key": "key", "digest": "nope"},
    ],
)
def test_invalid_config(kwargs):
    with pytest.raises(QWeatherError):
        ClientConfig(**kwargs)


def test_config_is_frozen(config):
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.public_id = "other"


def test_out_of_range_number_is_decode_error(make_client):
    body = {**WEATHER_NOW_BODY, "now": {**WEATHER_NOW_BODY["now"], "temp": 10**400}}
    result = make_client(body=body).request_api(URL, {"location": "x"}, WeatherNowResponse)
    assert not result.ok
    assert result.error.kind == "decode"
    assert ["now", "temp"] in [err["loc"] for err in result.error.details["errors"]]


def test_null_code_is_provider_error(make_client):
    body = {**WEATHER_NOW_BODY, "code": None}
    result = make_client(body=body).request_api(URL, {}, WeatherNowResponse)
    assert result.error.kind == "provider"
    assert result.error.code == "null"


def test_unwrap_failure_without_error_raises():
    with pytest.raises(QWeatherError) as excinfo:
        APIResponse[WeatherNowResponse](ok=False).unwrap()
    assert excinfo.value.code == "INVALID_RESULT"
