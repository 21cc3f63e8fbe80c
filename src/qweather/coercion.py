"""Tolerant scalar decoding.

The provider sends numbers as JSON numbers, as numeric strings, as empty
strings or as null, depending on the endpoint. Every DTO field goes through
one of the annotated aliases at the bottom of this module so the rule lives
in one place.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Annotated, Any

from pydantic import BeforeValidator

PROVIDER_TIME_FORMAT = "%Y-%m-%dT%H:%M%z"

_TRUE = {"1", "true"}
_FALSE = {"0", "false"}

# Plain decimal numbers only: no underscores, no non-ASCII digits, no inf/nan.
_NUMBER = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?", re.ASCII)


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _number_text(value: str) -> str:
    text = value.strip()
    if not text:
        raise ValueError("expected a number, got an empty string")
    if not _NUMBER.fullmatch(text):
        raise ValueError(f"expected a number, got {value!r}")
    return text


def to_float(value: Any) -> float:
    if isinstance(value, bool):
        raise ValueError(f"expected a number, got boolean {value!r}")
    if isinstance(value, (int, float)):
        try:
            return float(value)
        except OverflowError:
            raise ValueError("number out of range for a float") from None
    if isinstance(value, str):
        return float(_number_text(value))
    raise ValueError(f"expected a number, got {type(value).__name__}")


def to_int(value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError(f"expected an integer, got boolean {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = _number_text(value)
        try:
            return int(text)
        except ValueError:
            pass
    number = to_float(value)
    if not number.is_integer():
        raise ValueError(f"expected an integer, got {value!r}")
    return int(number)


def to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        if value in (0, 1):
            return bool(value)
        raise ValueError(f"expected 0 or 1, got {value!r}")
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE:
            return True
        if text in _FALSE:
            return False
        raise ValueError(f"expected a boolean, got {value!r}")
    raise ValueError(f"expected a boolean, got {type(value).__name__}")


def to_datetime(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"expected a timestamp, got {value!r}")
    text = value.strip()
    try:
        return datetime.strptime(text, PROVIDER_TIME_FORMAT)
    except ValueError:
        pass
    # Air quality v1 uses full ISO 8601 with a trailing Z.
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        raise ValueError(f"expected a timestamp, got {value!r}") from None


def _optional(convert):
    def wrapper(value: Any):
        if _is_blank(value):
            return None
        return convert(value)

    wrapper.__name__ = f"to_optional_{convert.__name__[3:]}"
    return wrapper


to_optional_float = _optional(to_float)
to_optional_int = _optional(to_int)
to_optional_bool = _optional(to_bool)
to_optional_datetime = _optional(to_datetime)

Float = Annotated[float, BeforeValidator(to_float)]
OptFloat = Annotated[float | None, BeforeValidator(to_optional_float)]
Int = Annotated[int, BeforeValidator(to_int)]
OptInt = Annotated[int | None, BeforeValidator(to_optional_int)]
Flag = Annotated[bool, BeforeValidator(to_bool)]
OptFlag = Annotated[bool | None, BeforeValidator(to_optional_bool)]
Timestamp = Annotated[datetime, BeforeValidator(to_datetime)]
OptTimestamp = Annotated[datetime | None, BeforeValidator(to_optional_datetime)]
