"""HTTP client that signs requests and maps exchange errors to exceptions."""

from __future__ import annotations

import hashlib
import hmac
from datetime import datetime, timedelta, timezone
from typing import Any, Mapping

import requests

from .api import Route, endpoint_path
from .errors import BinanceApiError, BinanceContentError, BinanceLibError

USER_AGENT = "spotdesk"
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_MILLISECOND = timedelta(milliseconds=1)


def build_request(parameters: Mapping[str, Any]) -> str:
    """Join parameters as ``key=value`` pairs sorted by key."""
    return "&".join(f"{key}={value}" for key, value in sorted(parameters.items()))


def _timestamp_ms(now: datetime | None) -> int:
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return (now - _EPOCH) // _MILLISECOND


def build_signed_request(
    parameters: Mapping[str, Any], recv_window: int, now: datetime | None = None
) -> str:
    """Add ``recvWindow`` (when positive) and a millisecond ``timestamp``.

    ``now`` defaults to the current time; a naive datetime is read as UTC.
    """
    params = dict(parameters)
    if recv_window > 0:
        params["recvWindow"] = str(recv_window)
    params["timestamp"] = str(_timestamp_ms(now))
    return build_request(params)


def _check_header_value(value: str) -> None:
    for char in value:
        code = ord(char)
        if char != "\t" and (code < 0x20 or code == 0x7F or code > 0xFF):
            raise BinanceLibError(f"invalid header value: {value!r}")


class Client:
    """Talks to one REST host with an optional API key and secret."""

    def __init__(self, api_key: str | None, secret_key: str | None, host: str) -> None:
        self.api_key = api_key or ""
        self.secret_key = secret_key or ""
        self.host = host
        self._session = requests.Session()

    def get_signed(self, endpoint: Route, request: str | None) -> Any:
        return self._send("GET", self._sign_request(endpoint, request), self._headers(True))

    def post_signed(self, endpoint: Route, request: str) -> Any:
        return self._send("POST", self._sign_request(endpoint, request), self._headers(True))

    def delete_signed(self, endpoint: Route, request: str | None) -> Any:
        return self._send("DELETE", self._sign_request(endpoint, request), self._headers(True))

    def get(self, endpoint: Route, request: str | None) -> Any:
        url = self._url(endpoint)
        if request:
            url = f"{url}?{request}"
        return self._send("GET", url)

    def post(self, endpoint: Route) -> Any:
        return self._send("POST", self._url(endpoint), self._headers(False))

    def put(self, endpoint: Route, listen_key: str) -> Any:
        return self._send(
            "PUT", self._url(endpoint), self._headers(False), data=f"listenKey={listen_key}"
        )

    def delete(self, endpoint: Route, listen_key: str) -> Any:
        return self._send(
            "DELETE", self._url(endpoint), self._headers(False), data=f"listenKey={listen_key}"
        )

    def _url(self, endpoint: Route) -> str:
        return f"{self.host}{endpoint_path(endpoint)}"

    def _sign_request(self, endpoint: Route, request: str | None) -> str:
        message = request or ""
        signature = hmac.new(
            self.secret_key.encode(), message.encode(), hashlib.sha256
        ).hexdigest()
        body = f"{message}&signature={signature}"
        return f"{self._url(endpoint)}?{body}"

    def _headers(self, content_type: bool) -> dict[str, str]:
        _check_header_value(self.api_key)
        headers = {"User-Agent": USER_AGENT}
        if content_type:
            headers["Content-Type"] = "application/x-www-form-urlencoded"
        headers["x-mbx-apikey"] = self.api_key
        return headers

    def _send(
        self,
        method: str,
        url: str,
        headers: dict[str, str] | None = None,
        data: str | None = None,
    ) -> Any:
        try:
            response = self._session.request(method, url, headers=headers, data=data)
        except requests.RequestException as exc:
            raise BinanceLibError(str(exc)) from exc
        return self._handle(response)

    @staticmethod
    def _json(response: requests.Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise BinanceLibError(f"invalid JSON response: {exc}") from exc

    def _handle(self, response: requests.Response) -> Any:
        status = response.status_code
        if status == 200:
            return self._json(response)
        if status == 500:
            raise BinanceLibError("Internal Server Error")
        if status == 503:
            raise BinanceLibError("Service Unavailable")
        if status == 401:
            raise BinanceLibError("Unauthorized")
        if status == 400:
            raise BinanceApiError(BinanceContentError.from_json(self._json(response)))
        raise BinanceLibError(f"Received response: {status}")