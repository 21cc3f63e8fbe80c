"""Command-line access to the QWeather endpoints."""

from __future__ import annotations

import argparse
import json
import sys

from . import api
from .client import ClientConfig, QWeatherClient
from .errors import QWeatherError
from .settings import get_settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="qweather", description="Query the QWeather API")
    parser.add_argument("--lang", help="Response language, e.g. zh or en")
    parser.add_argument("--unit", choices=["m", "i"], help="Metric (m) or imperial (i) units")
    sub = parser.add_subparsers(dest="command", required=True)

    now = sub.add_parser("now", help="Real-time weather")
    now.add_argument("location")

    daily = sub.add_parser("daily", help="Daily forecast")
    daily.add_argument("location")
    daily.add_argument("--days", type=int, default=3)

    hourly = sub.add_parser("hourly", help="Hourly forecast")
    hourly.add_argument("location")
    hourly.add_argument("--hours", type=int, default=24)

    minutely = sub.add_parser("minutely", help="Minute-level precipitation")
    minutely.add_argument("location")

    city = sub.add_parser("city", help="City lookup")
    city.add_argument("location")
    city.add_argument("--range", dest="range_")
    city.add_argument("--number", type=int)

    poi = sub.add_parser("poi", help="POI range search")
    poi.add_argument("location")
    poi.add_argument("--type", dest="type_", default="scenic")
    poi.add_argument("--radius", type=float)

    warning = sub.add_parser("warning", help="Weather warnings")
    warning.add_argument("location")

    air = sub.add_parser("air", help="Current air quality")
    air.add_argument("latitude", type=float)
    air.add_argument("longitude", type=float)

    storm = sub.add_parser("storm", help="Tropical storm forecast")
    storm.add_argument("storm_id")
    return parser


def dispatch(client: QWeatherClient, args: argparse.Namespace):
    if args.command == "now":
        return api.weather_now(client, args.location)
    if args.command == "daily":
        return api.weather_daily_forecast(client, args.location, args.days)
    if args.command == "hourly":
        return api.weather_hourly_forecast(client, args.location, args.hours)
    if args.command == "minutely":
        return api.minutely_precipitation(client, args.location)
    if args.command == "city":
        return api.geo_city_lookup(client, args.location, range_=args.range_, number=args.number)
    if args.command == "poi":
        return api.geo_poi_range(client, args.location, args.type_, radius=args.radius)
    if args.command == "warning":
        return api.weather_warning(client, args.location)
    if args.command == "air":
        return api.air_current(client, args.latitude, args.longitude)
    if args.command == "storm":
        return api.storm_forecast(client, args.storm_id)
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: list[str] | None = None, client: QWeatherClient | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if client is None:
        settings = get_settings().model_copy(
            update={k: v for k, v in {"lang": args.lang, "unit": args.unit}.items() if v}
        )
        try:
            client = QWeatherClient(ClientConfig.from_settings(settings))
        except QWeatherError as exc:
            print(f"Configuration error: {exc.message}", file=sys.stderr)
            return 2

    with client:
        result = dispatch(client, args)

    if not result.ok:
        print(json.dumps(result.error.model_dump(), ensure_ascii=False, indent=2, default=str), file=sys.stderr)
        return 1
    print(json.dumps(result.data.model_dump(mode="json", by_alias=True), ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
