"""Endpoint and request-window settings shared by every API section."""

from __future__ import annotations

from dataclasses import dataclass, replace

DEFAULT_REST_API_ENDPOINT = "https://api.binance.com"
DEFAULT_WS_ENDPOINT = "wss://stream.binance.com:9443/ws"
DEFAULT_FUTURES_REST_API_ENDPOINT = "https://fapi.binance.com"
DEFAULT_FUTURES_WS_ENDPOINT = "wss://fstream.binance.com/ws"
DEFAULT_RECV_WINDOW = 5000


@dataclass(frozen=True)
class Config:
    """Immutable connection settings; derive variants with ``dataclasses.replace``."""

    rest_api_endpoint: str = DEFAULT_REST_API_ENDPOINT
    ws_endpoint: str = DEFAULT_WS_ENDPOINT
    futures_rest_api_endpoint: str = DEFAULT_FUTURES_REST_API_ENDPOINT
    futures_ws_endpoint: str = DEFAULT_FUTURES_WS_ENDPOINT
    recv_window: int = DEFAULT_RECV_WINDOW

    @classmethod
    def testnet(cls) -> "Config":
        """Settings pointing at the public test network."""
        return replace(
            cls(),
            rest_api_endpoint="https://testnet.binance.vision",
            ws_endpoint="wss://testnet.binance.vision/ws",
            futures_rest_api_endpoint="https://testnet.binancefuture.com",
            futures_ws_endpoint="https://testnet.binancefuture.com/ws",
        )