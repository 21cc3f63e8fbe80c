"""Response envelopes and the result wrapper returned by the client.

Payload fields are merged into the envelope at the top level, so each
endpoint response model subclasses one of the envelopes below and declares
its payload fields alongside ``code`` / ``refer``.
"""

from __future__ import annotations

from typing import Annotated, Any, Generic, Literal, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .coercion import Int, Timestamp
from .errors import DECODE, ERRORS_BY_KIND, INVALID_ARGUMENT, PROVIDER, TRANSPORT, QWeatherError

SUCCESS_CODE = "200"

T = TypeVar("T")


class WireModel(BaseModel):
    """Base for everything decoded from the provider (camelCase on the wire)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class Refer(WireModel):
    """Data sources and license notes attached to most responses."""
    sources: list[str] = Field(default_factory=list)
    license: list[str] = Field(default_factory=list)


class StaticEnvelope(WireModel):
    """Envelope of static data (GeoAPI): status code and attribution only."""
    code: Annotated[str, BeforeValidator(str)] = SUCCESS_CODE
    refer: Refer | None = None


class DynamicEnvelope(StaticEnvelope):
    """Envelope of time-varying data (v7 weather APIs)."""
    update_time: Timestamp
    fx_link: str | None = None


class MetaData(WireModel):
    """Metadata block of the air quality v1 APIs, which carry no status code."""
    tag: str
    sources: list[str] | None = None


class RGBA(WireModel):
    red: Int
    green: Int
    blue: Int
    alpha: float


class APIError(BaseModel):
    """Failure half of an ``APIResponse``."""
    kind: Literal["transport", "provider", "decode", "invalid_argument"]
    code: str
    message: str
    details: dict[str, Any] | None = None

    def to_exception(self):
        return ERRORS_BY_KIND[self.kind](self.code, self.message, self.details)


class APIResponse(BaseModel, Generic[T]):
    """Either decoded data (``ok``) or an ``APIError``; never both."""
    ok: bool
    data: T | None = None
    error: APIError | None = None

    @classmethod
    def success(cls, data: T) -> "APIResponse[T]":
        return cls(ok=True, data=data)

    @classmethod
    def failure(cls, error: APIError) -> "APIResponse[T]":
        return cls(ok=False, error=error)

    def unwrap(self) -> T:
        if self.ok:
            return self.data  # type: ignore[return-value]
        if self.error is None:
            raise QWeatherError("INVALID_RESULT", "failed response carries no error")
        raise self.error.to_exception()


def transport_error(message: str, details: dict[str, Any] | None = None) -> APIError:
    return APIError(kind=TRANSPORT, code="TRANSPORT_ERROR", message=message, details=details)


def provider_error(code: str, details: dict[str, Any] | None = None) -> APIError:
    return APIError(kind=PROVIDER, code=code, message=f"Provider returned status {code}", details=details)


def decode_error(message: str, details: dict[str, Any] | None = None) -> APIError:
    return APIError(kind=DECODE, code="DECODE_ERROR", message=message, details=details)


def invalid_argument(message: str, details: dict[str, Any] | None = None) -> APIError:
    return APIError(kind=INVALID_ARGUMENT, code="INVALID_ARGUMENT", message=message, details=details)
