"""GeoAPI: city search, top cities and POI lookups.

These endpoints live on the GeoAPI host and return static data, so their
envelopes carry no update time.
"""

from __future__ import annotations

from ..models import CityLookupResponse, StaticDataResponse
from . import Client

POI_TYPES = ("scenic", "CSTA", "TSTA")
MAX_NUMBER = 20
MAX_RADIUS_KM = 50


def _check_number(client: Client, number: int | None):
    if number is not None and not 1 <= number <= MAX_NUMBER:
        return client.reject(f"number must be between 1 and {MAX_NUMBER}", number=number)
    return None


def _check_poi_type(client: Client, type_: str):
    if type_ not in POI_TYPES:
        return client.reject(f"type_ must be one of {POI_TYPES}", type=type_)
    return None


def _put(params: dict[str, str], key: str, value: object) -> None:
    if value is not None:
        params[key] = f"{value:g}" if isinstance(value, float) else str(value)


def geo_city_lookup(
    client: Client,
    location: str,
    *,
    adm: str | None = None,
    range_: str | None = None,
    number: int | None = None,
):
    """Search cities by name, coordinates, LocationID or Adcode."""
    rejected = _check_number(client, number)
    if rejected is not None:
        return rejected
    params = {"location": location}
    _put(params, "adm", adm)
    _put(params, "range", range_)
    _put(params, "number", number)
    return client.request_api(f"{client.geo_host}/v2/city/lookup", params, CityLookupResponse)


def geo_city_top(client: Client, *, range_: str | None = None, number: int | None = None):
    rejected = _check_number(client, number)
    if rejected is not None:
        return rejected
    params: dict[str, str] = {}
    _put(params, "range", range_)
    _put(params, "number", number)
    return client.request_api(f"{client.geo_host}/v2/city/top", params, StaticDataResponse)


def geo_poi_lookup(
    client: Client,
    location: str,
    type_: str,
    *,
    city: str | None = None,
    number: int | None = None,
):
    """Search POIs (scenic spots, tide and current stations) by keyword."""
    rejected = _check_poi_type(client, type_) or _check_number(client, number)
    if rejected is not None:
        return rejected
    params = {"location": location, "type": type_}
    _put(params, "city", city)
    _put(params, "number", number)
    return client.request_api(f"{client.geo_host}/v2/poi/lookup", params, StaticDataResponse)


def geo_poi_range(
    client: Client,
    location: str,
    type_: str,
    *,
    radius: float | None = None,
    number: int | None = None,
):
    """List POIs within ``radius`` km (1-50, provider default 5) of ``location``."""
    rejected = _check_poi_type(client, type_) or _check_number(client, number)
    if rejected is None and radius is not None and not 1 <= radius <= MAX_RADIUS_KM:
        rejected = client.reject(f"radius must be between 1 and {MAX_RADIUS_KM} km", radius=radius)
    if rejected is not None:
        return rejected
    params = {"location": location, "type": type_}
    _put(params, "radius", radius)
    _put(params, "number", number)
    return client.request_api(f"{client.geo_host}/v2/poi/range", params, StaticDataResponse)
