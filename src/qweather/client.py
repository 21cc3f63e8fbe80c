"""QWeather API clients.

Both clients sign each request the same way and resolve the response into an
``APIResponse``:

- transport failures and non-JSON bodies become ``transport`` errors;
- a ``code`` other than ``"200"`` becomes a ``provider`` error carrying the
  provider's code verbatim;
- a success body that fails validation becomes a ``decode`` error.

Nothing is retried. The configuration is frozen and no client state changes
during a request, so one client may serve concurrent calls.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from .errors import QWeatherError
from .logging import get_logger
from .schemas import (
    SUCCESS_CODE,
    APIResponse,
    decode_error,
    invalid_argument,
    provider_error,
    transport_error,
)
from .settings import QWeatherSettings, get_settings
from .signing import DEFAULT_DIGEST, TIMESTAMP_KEY, check_algorithm, sign_params

GEO_API_URL = "https://geoapi.qweather.com"
WEATHER_API_URL = "https://api.qweather.com"
WEATHER_DEV_API_URL = "https://devapi.qweather.com"

M = TypeVar("M", bound=BaseModel)

logger = get_logger("client")


@dataclass(frozen=True)
class ClientConfig:
    """Read-only client configuration shared by every request."""

    public_id: str
    private_key: str
    subscription: bool = False
    lang: str | None = None
    unit: str | None = None
    api_host: str | None = None
    geo_host: str = GEO_API_URL
    timeout_s: float = 10.0
    digest: str = DEFAULT_DIGEST

    def __post_init__(self) -> None:
        if not self.public_id:
            raise QWeatherError("MISSING_API_KEY", "QWEATHER_ID is not set")
        if not self.private_key:
            raise QWeatherError("MISSING_API_KEY", "QWEATHER_KEY is not set")
        if self.unit not in (None, "m", "i"):
            raise QWeatherError("INVALID_CONFIG", f"unit must be 'm' or 'i', got {self.unit!r}")
        try:
            check_algorithm(self.digest)
        except ValueError as exc:
            raise QWeatherError("INVALID_CONFIG", str(exc)) from exc

    @classmethod
    def from_settings(cls, settings: QWeatherSettings) -> "ClientConfig":
        return cls(
            public_id=settings.public_id or "",
            private_key=settings.private_key or "",
            subscription=settings.subscription,
            lang=settings.lang,
            unit=settings.unit,
            api_host=settings.api_host,
            geo_host=settings.geo_host,
            timeout_s=settings.request_timeout_s,
            digest=settings.digest,
        )

    @property
    def host(self) -> str:
        if self.api_host:
            return self.api_host.rstrip("/")
        return WEATHER_API_URL if self.subscription else WEATHER_DEV_API_URL

    def base_params(self) -> dict[str, str]:
        params = {"publicid": self.public_id}
        if self.lang:
            params["lang"] = self.lang
        if self.unit:
            params["unit"] = self.unit
        return params


class _ClientBase:
    def __init__(self, config: ClientConfig, *, clock: Callable[[], float] = time.time) -> None:
        self.config = config
        self._clock = clock

    @property
    def api_host(self) -> str:
        return self.config.host

    @property
    def geo_host(self) -> str:
        return self.config.geo_host.rstrip("/")

    def signed_params(self, params: Mapping[str, str]) -> dict[str, str]:
        """Return the exact query sent for ``params``."""
        merged = dict(params)
        merged.update(self.config.base_params())
        merged[TIMESTAMP_KEY] = str(int(self._clock()))
        return sign_params(merged, self.config.private_key, self.config.digest)

    def _log_request(self, url: str, query: Mapping[str, str]) -> None:
        logger.debug(
            "qweather_request",
            extra={"extra": {"url": url, "params": sorted(k for k in query if k != "sign")}},
        )

    def _transport_failure(
        self, url: str, exc: Exception, started: float, model: type[M]
    ) -> APIResponse[M]:
        latency_ms = int((time.time() - started) * 1000)
        logger.warning(
            "qweather_transport_error",
            extra={
                "extra": {
                    "url": url,
                    "latency_ms": latency_ms,
                    "error_type": type(exc).__name__,
                    "error": str(exc),
                }
            },
        )
        return APIResponse[model].failure(
            transport_error(str(exc) or type(exc).__name__, {"url": url, "error_type": type(exc).__name__})
        )

    def _resolve(self, url: str, resp: httpx.Response, model: type[M], started: float) -> APIResponse[M]:
        latency_ms = int((time.time() - started) * 1000)
        try:
            body: Any = resp.json()
        except ValueError as exc:
            logger.warning(
                "qweather_transport_error",
                extra={
                    "extra": {
                        "url": url,
                        "status_code": resp.status_code,
                        "latency_ms": latency_ms,
                        "error": "non-JSON body",
                    }
                },
            )
            return APIResponse[model].failure(
                transport_error(
                    f"Response body is not JSON: {exc}",
                    {"url": url, "status_code": resp.status_code},
                )
            )

        has_code = isinstance(body, dict) and "code" in body
        code = body["code"] if has_code else None
        # Only an absent status means success; an explicit null does not.
        ok = not has_code or str(code) == SUCCESS_CODE
        logger.info(
            "qweather_response",
            extra={
                "extra": {
                    "url": url,
                    "status_code": resp.status_code,
                    "code": code,
                    "latency_ms": latency_ms,
                    "ok": ok,
                }
            },
        )
        if not ok:
            raw_code = "null" if code is None else str(code)
            return APIResponse[model].failure(provider_error(raw_code, {"url": url}))

        try:
            data = model.model_validate(body)
        except ValidationError as exc:
            errors = [{"loc": list(err["loc"]), "msg": err["msg"]} for err in exc.errors()]
            logger.error(
                "qweather_decode_error",
                extra={"extra": {"url": url, "model": model.__name__, "errors": errors}},
            )
            return APIResponse[model].failure(
                decode_error("Failed to parse response", {"url": url, "model": model.__name__, "errors": errors})
            )
        return APIResponse[model].success(data)


class QWeatherClient(_ClientBase):
    """Blocking client backed by ``httpx.Client``."""

    def __init__(
        self,
        config: ClientConfig,
        *,
        http_client: httpx.Client | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        super().__init__(config, clock=clock)
        self._owns_http = http_client is None
        self._http = http_client or httpx.Client(timeout=config.timeout_s)

    @classmethod
    def from_settings(cls, settings: QWeatherSettings | None = None, **kwargs: Any) -> "QWeatherClient":
        return cls(ClientConfig.from_settings(settings or get_settings()), **kwargs)

    def request_api(self, url: str, params: Mapping[str, str], model: type[M]) -> APIResponse[M]:
        query = self.signed_params(params)
        self._log_request(url, query)
        started = time.time()
        try:
            resp = self._http.get(url, params=query)
        except httpx.RequestError as exc:
            return self._transport_failure(url, exc, started, model)
        return self._resolve(url, resp, model, started)

    def reject(self, message: str, **details: Any) -> APIResponse[Any]:
        return APIResponse.failure(invalid_argument(message, details or None))

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "QWeatherClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class AsyncQWeatherClient(_ClientBase):
    """Asyncio client backed by ``httpx.AsyncClient``.

    Endpoint wrappers in ``qweather.api`` return coroutines when given this
    client; cancelling the awaiting task cancels the single HTTP call.
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        http_client: httpx.AsyncClient | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        super().__init__(config, clock=clock)
        self._owns_http = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=config.timeout_s)

    @classmethod
    def from_settings(cls, settings: QWeatherSettings | None = None, **kwargs: Any) -> "AsyncQWeatherClient":
        return cls(ClientConfig.from_settings(settings or get_settings()), **kwargs)

    async def request_api(self, url: str, params: Mapping[str, str], model: type[M]) -> APIResponse[M]:
        query = self.signed_params(params)
        self._log_request(url, query)
        started = time.time()
        try:
            resp = await self._http.get(url, params=query)
        except httpx.RequestError as exc:
            return self._transport_failure(url, exc, started, model)
        return self._resolve(url, resp, model, started)

    async def reject(self, message: str, **details: Any) -> APIResponse[Any]:
        return APIResponse.failure(invalid_argument(message, details or None))

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> "AsyncQWeatherClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
