"""Order descriptions and their conversion to request parameters."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class OrderType(str, Enum):
    """Kind of spot order."""

    LIMIT = "LIMIT"
    MARKET = "MARKET"
    STOP_LOSS_LIMIT = "STOP_LOSS_LIMIT"


class OrderSide(str, Enum):
    """Direction of an order."""

    BUY = "BUY"
    SELL = "SELL"


class TimeInForce(str, Enum):
    """How long an order stays active."""

    GTC = "GTC"
    IOC = "IOC"
    FOK = "FOK"


def _format_number(value: float) -> str:
    """Render a number in plain decimal notation, shortest form, no exponent."""
    number = float(value)
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "inf" if number > 0 else "-inf"
    text = format(Decimal(repr(number)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _sorted(parameters: dict[str, str]) -> dict[str, str]:
    return dict(sorted(parameters.items()))


@dataclass(frozen=True)
class OrderRequest:
    """An order given by base-asset quantity."""

    symbol: str
    qty: float
    price: float
    order_side: OrderSide
    order_type: OrderType
    time_in_force: TimeInForce = TimeInForce.GTC
    stop_price: float | None = None
    new_client_order_id: str | None = None

    def to_parameters(self) -> dict[str, str]:
        """Request parameters, keyed by wire name and ordered by key.

        A zero price means no price: neither ``price`` nor ``timeInForce`` is sent.
        """
        parameters = {
            "symbol": self.symbol,
            "side": OrderSide(self.order_side).value,
            "type": OrderType(self.order_type).value,
            "quantity": _format_number(self.qty),
        }
        if self.stop_price is not None:
            parameters["stopPrice"] = _format_number(self.stop_price)
        if float(self.price) != 0.0:
            parameters["price"] = _format_number(self.price)
            parameters["timeInForce"] = TimeInForce(self.time_in_force).value
        if self.new_client_order_id is not None:
            parameters["newClientOrderId"] = self.new_client_order_id
        return _sorted(parameters)


@dataclass(frozen=True)
class OrderQuoteQuantityRequest:
    """An order given by quote-asset amount."""

    symbol: str
    quote_order_qty: float
    price: float
    order_side: OrderSide
    order_type: OrderType
    time_in_force: TimeInForce = TimeInForce.GTC
    new_client_order_id: str | None = None

    def to_parameters(self) -> dict[str, str]:
        """Request parameters, keyed by wire name and ordered by key.

        A zero price means no price: neither ``price`` nor ``timeInForce`` is sent.
        """
        parameters = {
            "symbol": self.symbol,
            "side": OrderSide(self.order_side).value,
            "type": OrderType(self.order_type).value,
            "quoteOrderQty": _format_number(self.quote_order_qty),
        }
        if float(self.price) != 0.0:
            parameters["price"] = _format_number(self.price)
            parameters["timeInForce"] = TimeInForce(self.time_in_force).value
        if self.new_client_order_id is not None:
            parameters["newClientOrderId"] = self.new_client_order_id
        return _sorted(parameters)