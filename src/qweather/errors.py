"""Error taxonomy for the QWeather client."""

from __future__ import annotations

TRANSPORT = "transport"
PROVIDER = "provider"
DECODE = "decode"
INVALID_ARGUMENT = "invalid_argument"


class QWeatherError(RuntimeError):
    kind = ""

    def __init__(self, code: str, message: str, details: dict | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}


class TransportError(QWeatherError):
    """Network failure, timeout, or a response body that is not JSON."""

    kind = TRANSPORT


class ProviderError(QWeatherError):
    """Non-success status returned by the provider; ``code`` is the raw status."""

    kind = PROVIDER


class DecodeError(QWeatherError):
    """The body parsed as JSON but did not match the expected payload."""

    kind = DECODE


class ParameterError(QWeatherError):
    """A caller argument is outside the values the endpoint accepts."""

    kind = INVALID_ARGUMENT


ERRORS_BY_KIND: dict[str, type[QWeatherError]] = {
    cls.kind: cls for cls in (TransportError, ProviderError, DecodeError, ParameterError)
}
