from datetime import datetime, timedelta, timezone

import pytest
from pydantic import BaseModel, ValidationError

from qweather.coercion import (
    Flag,
    Float,
    Int,
    OptFloat,
    OptTimestamp,
    Timestamp,
    to_bool,
    to_float,
    to_int,
    to_optional_float,
    to_optional_int,
)


class Sample(BaseModel):
    temp: Float
    rank: Int = 0
    cloud: OptFloat = None
    is_dst: Flag = False


@pytest.mark.parametrize("raw", ["37", 37, 37.0, " 37 "])
def test_number_forms_normalize(raw):
    assert to_float(raw) == 37.0
    assert to_int(raw) == 37


def test_int_accepts_integral_float_string():
    assert to_int("37.0") == 37


@pytest.mark.parametrize("raw", ["", "abc", None, True, 37.5, "37.5", "1_000", "３７", "inf"])
def test_int_rejects(raw):
    with pytest.raises(ValueError):
        to_int(raw)


@pytest.mark.parametrize("raw", ["", "  ", "n/a", None, False, [1], "1_000", "３７", "nan", "infinity", "0x10"])
def test_float_rejects(raw):
    with pytest.raises(ValueError):
        to_float(raw)


def test_optional_maps_blank_to_none():
    assert to_optional_float("") is None
    assert to_optional_float(None) is None
    assert to_optional_int("") is None
    assert to_optional_float("0.5") == 0.5


def test_optional_still_rejects_garbage():
    with pytest.raises(ValueError):
        to_optional_float("cloudy")


@pytest.mark.parametrize(
    "raw, expected",
    [("0", False), ("1", True), ("true", True), ("FALSE", False), (True, True), (0, False), (1, True)],
)
def test_bool_forms(raw, expected):
    assert to_bool(raw) is expected


@pytest.mark.parametrize("raw", ["2", "yes", "", None, 2])
def test_bool_rejects(raw):
    with pytest.raises(ValueError):
        to_bool(raw)


def test_model_fields_use_coercion():
    sample = Sample.model_validate({"temp": "24", "rank": "10", "cloud": "", "is_dst": "1"})
    assert sample.temp == 24.0
    assert sample.rank == 10
    assert sample.cloud is None
    assert sample.is_dst is True


def test_required_empty_string_is_validation_error():
    with pytest.raises(ValidationError):
        Sample.model_validate({"temp": ""})


def test_required_null_is_validation_error():
    with pytest.raises(ValidationError):
        Sample.model_validate({"temp": None})


class Times(BaseModel):
    at: Timestamp
    until: OptTimestamp = None


def test_provider_timestamp_with_offset():
    times = Times.model_validate({"at": "2020-06-30T22:00+08:00", "until": ""})
    assert times.at == datetime(2020, 6, 30, 22, 0, tzinfo=timezone(timedelta(hours=8)))
    assert times.until is None


def test_iso_timestamp_with_z():
    times = Times.model_validate({"at": "2023-04-03T10:30:00Z"})
    assert times.at == datetime(2023, 4, 3, 10, 30, tzinfo=timezone.utc)


def test_bad_timestamp_is_validation_error():
    with pytest.raises(ValidationError):
        Times.model_validate({"at": "yesterday"})


@pytest.mark.parametrize("raw, expected", [("-1", -1.0), ("+2.5", 2.5), ("1e3", 1000.0), (".5", 0.5)])
def test_float_accepts_decimal_spellings(raw, expected):
    assert to_float(raw) == expected


def test_huge_integer_is_value_error():
    with pytest.raises(ValueError):
        to_float(10**400)
    assert to_int(10**400) == 10**400


def test_huge_integer_is_validation_error():
    with pytest.raises(ValidationError):
        Sample.model_validate({"temp": 10**400})
