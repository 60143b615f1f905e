"""Exceptions raised by the REST client."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

_I16_MIN, _I16_MAX = -(2**15), 2**15 - 1


class BinanceLibError(Exception):
    """Base class for every error this package raises."""


@dataclass(frozen=True)
class BinanceContentError:
    """Error body returned by the exchange: a numeric code and a message."""

    code: int
    msg: str

    @classmethod
    def from_json(cls, data: Any) -> "BinanceContentError":
        """Build from a decoded JSON object or from raw JSON text."""
        if isinstance(data, (str, bytes, bytearray)):
            try:
                data = json.loads(data)
            except ValueError as exc:
                raise BinanceLibError(f"invalid error body: {exc}") from exc
        if not isinstance(data, dict):
            raise BinanceLibError("error body is not a JSON object")
        code = data.get("code")
        msg = data.get("msg")
        if isinstance(code, bool) or not isinstance(code, int):
            raise BinanceLibError("error body has no integer 'code'")
        if not _I16_MIN <= code <= _I16_MAX:
            raise BinanceLibError(f"error code {code} out of range")
        if not isinstance(msg, str):
            raise BinanceLibError("error body has no string 'msg'")
        return cls(code=code, msg=msg)


class BinanceApiError(BinanceLibError):
    """The exchange rejected a request and explained why."""

    def __init__(self, content: BinanceContentError) -> None:
        super().__init__(f"Binance error {content.code}: {content.msg}")
        self.content = content

    @property
    def code(self) -> int:
        return self.content.code

    @property
    def msg(self) -> str:
        return self.content.msg


class KlineValueMissingError(BinanceLibError):
    """A kline row lacked the value expected at a given position."""

    def __init__(self, index: int, name: str) -> None:
        super().__init__(f"{name} at {index} is missing")
        self.index = index
        self.name = name