"""Signed spot account endpoints: balances, orders and trade history."""

from __future__ import annotations

from typing import Any

from .api import Spot
from .client import Client, build_signed_request
from .config import Config
from .errors import BinanceLibError
from .orders import (
    OrderQuoteQuantityRequest,
    OrderRequest,
    OrderSide,
    OrderType,
    TimeInForce,
)

Order = OrderRequest | OrderQuoteQuantityRequest


class Account:
    """Spot account section of the REST API; every call is signed."""

    def __init__(
        self,
        api_key: str | None = None,
        secret_key: str | None = None,
        config: Config | None = None,
    ) -> None:
        config = config or Config()
        self.client = Client(api_key, secret_key, config.rest_api_endpoint)
        self.recv_window = config.recv_window

    def _signed(self, parameters: dict[str, str] | None = None) -> str:
        return build_signed_request(parameters or {}, self.recv_window)

    def _submit(self, order: Order) -> Any:
        return self.client.post_signed(Spot.ORDER, self._signed(order.to_parameters()))

    def _submit_test(self, order: Order) -> None:
        self.client.post_signed(Spot.ORDER_TEST, self._signed(order.to_parameters()))

    @staticmethod
    def _by_qty(
        symbol: str,
        qty: float,
        price: float,
        side: OrderSide,
        order_type: OrderType,
        time_in_force: TimeInForce = TimeInForce.GTC,
        stop_price: float | None = None,
        new_client_order_id: str | None = None,
    ) -> OrderRequest:
        return OrderRequest(
            symbol=str(symbol),
            qty=float(qty),
            price=float(price),
            order_side=side,
            order_type=order_type,
            time_in_force=time_in_force,
            stop_price=None if stop_price is None else float(stop_price),
            new_client_order_id=new_client_order_id,
        )

    @staticmethod
    def _by_quote(symbol: str, quote_order_qty: float, side: OrderSide) -> OrderQuoteQuantityRequest:
        return OrderQuoteQuantityRequest(
            symbol=str(symbol),
            quote_order_qty=float(quote_order_qty),
            price=0.0,
            order_side=side,
            order_type=OrderType.MARKET,
        )

    def get_account(self) -> Any:
        """Account information, including every balance."""
        return self.client.get_signed(Spot.ACCOUNT, self._signed())

    def get_balance(self, asset: str) -> Any:
        """Balance of one asset; raises if the account does not hold it."""
        account = self.get_account()
        for balance in account.get("balances", []):
            if balance.get("asset") == asset:
                return balance
        raise BinanceLibError("Asset not found")

    def get_open_orders(self, symbol: str) -> Any:
        """Open orders for one symbol."""
        return self.client.get_signed(Spot.OPEN_ORDERS, self._signed({"symbol": symbol}))

    def get_all_open_orders(self) -> Any:
        """Open orders for every symbol."""
        return self.client.get_signed(Spot.OPEN_ORDERS, self._signed())

    def cancel_all_open_orders(self, symbol: str) -> Any:
        """Cancel every open order for one symbol."""
        return self.client.delete_signed(Spot.OPEN_ORDERS, self._signed({"symbol": symbol}))

    def order_status(self, symbol: str, order_id: int) -> Any:
        """Status of one order."""
        parameters = {"symbol": symbol, "orderId": str(order_id)}
        return self.client.get_signed(Spot.ORDER, self._signed(parameters))

    def test_order_status(self, symbol: str, order_id: int) -> None:
        """Validate an order status query without touching the matching engine."""
        parameters = {"symbol": symbol, "orderId": str(order_id)}
        self.client.get_signed(Spot.ORDER_TEST, self._signed(parameters))

    def limit_buy(self, symbol: str, qty: float, price: float) -> Any:
        return self._submit(self._by_qty(symbol, qty, price, OrderSide.BUY, OrderType.LIMIT))

    def test_limit_buy(self, symbol: str, qty: float, price: float) -> None:
        self._submit_test(self._by_qty(symbol, qty, price, OrderSide.BUY, OrderType.LIMIT))

    def limit_sell(self, symbol: str, qty: float, price: float) -> Any:
        return self._submit(self._by_qty(symbol, qty, price, OrderSide.SELL, OrderType.LIMIT))

    def test_limit_sell(self, symbol: str, qty: float, price: float) -> None:
        self._submit_test(self._by_qty(symbol, qty, price, OrderSide.SELL, OrderType.LIMIT))

    def market_buy(self, symbol: str, qty: float) -> Any:
        return self._submit(self._by_qty(symbol, qty, 0.0, OrderSide.BUY, OrderType.MARKET))

    def test_market_buy(self, symbol: str, qty: float) -> None:
        self._submit_test(self._by_qty(symbol, qty, 0.0, OrderSide.BUY, OrderType.MARKET))

    def market_buy_using_quote_quantity(self, symbol: str, quote_order_qty: float) -> Any:
        return self._submit(self._by_quote(symbol, quote_order_qty, OrderSide.BUY))

    def test_market_buy_using_quote_quantity(self, symbol: str, quote_order_qty: float) -> None:
        self._submit_test(self._by_quote(symbol, quote_order_qty, OrderSide.BUY))

    def market_sell(self, symbol: str, qty: float) -> Any:
        return self._submit(self._by_qty(symbol, qty, 0.0, OrderSide.SELL, OrderType.MARKET))

    def test_market_sell(self, symbol: str, qty: float) -> None:
        self._submit_test(self._by_qty(symbol, qty, 0.0, OrderSide.SELL, OrderType.MARKET))

    def market_sell_using_quote_quantity(self, symbol: str, quote_order_qty: float) -> Any:
        return self._submit(self._by_quote(symbol, quote_order_qty, OrderSide.SELL))

    def test_market_sell_using_quote_quantity(self, symbol: str, quote_order_qty: float) -> None:
        self._submit_test(self._by_quote(symbol, quote_order_qty, OrderSide.SELL))

    def stop_limit_buy_order(
        self, symbol: str, qty: float, price: float, stop_price: float, time_in_force: TimeInForce
    ) -> Any:
        """Stop-loss limit buy order."""
        return self._submit(
            self._by_qty(
                symbol, qty, price, OrderSide.BUY, OrderType.STOP_LOSS_LIMIT,
                time_in_force, stop_price,
            )
        )

    def test_stop_limit_buy_order(
        self, symbol: str, qty: float, price: float, stop_price: float, time_in_force: TimeInForce
    ) -> None:
        self._submit_test(
            self._by_qty(
                symbol, qty, price, OrderSide.BUY, OrderType.STOP_LOSS_LIMIT,
                time_in_force, stop_price,
            )
        )

    def stop_limit_sell_order(
        self, symbol: str, qty: float, price: float, stop_price: float, time_in_force: TimeInForce
    ) -> Any:
        """Stop-loss limit sell order."""
        return self._submit(
            self._by_qty(
                symbol, qty, price, OrderSide.SELL, OrderType.STOP_LOSS_LIMIT,
                time_in_force, stop_price,
            )
        )

    def test_stop_limit_sell_order(
        self, symbol: str, qty: float, price: float, stop_price: float, time_in_force: TimeInForce
    ) -> None:
        self._submit_test(
            self._by_qty(
                symbol, qty, price, OrderSide.SELL, OrderType.STOP_LOSS_LIMIT,
                time_in_force, stop_price,
            )
        )

    def custom_order(
        self,
        symbol: str,
        qty: float,
        price: float,
        stop_price: float | None,
        order_side: OrderSide,
        order_type: OrderType,
        time_in_force: TimeInForce,
        new_client_order_id: str | None = None,
    ) -> Any:
        """Order with every field chosen by the caller."""
        return self._submit(
            self._by_qty(
                symbol, qty, price, order_side, order_type,
                time_in_force, stop_price, new_client_order_id,
            )
        )

    def test_custom_order(
        self,
        symbol: str,
        qty: float,
        price: float,
        stop_price: float | None,
        order_side: OrderSide,
        order_type: OrderType,
        time_in_force: TimeInForce,
        new_client_order_id: str | None = None,
    ) -> None:
        self._submit_test(
            self._by_qty(
                symbol, qty, price, order_side, order_type,
                time_in_force, stop_price, new_client_order_id,
            )
        )

    def cancel_order(self, symbol: str, order_id: int) -> Any:
        """Cancel one order by its exchange id."""
        parameters = {"symbol": symbol, "orderId": str(order_id)}
        return self.client.delete_signed(Spot.ORDER, self._signed(parameters))

    def cancel_order_with_client_id(self, symbol: str, orig_client_order_id: str) -> Any:
        """Cancel one order by the id the client gave it."""
        parameters = {"symbol": symbol, "origClientOrderId": orig_client_order_id}
        return self.client.delete_signed(Spot.ORDER, self._signed(parameters))

    def test_cancel_order(self, symbol: str, order_id: int) -> None:
        """Validate a cancellation without touching the matching engine."""
        parameters = {"symbol": symbol, "orderId": str(order_id)}
        self.client.delete_signed(Spot.ORDER_TEST, self._signed(parameters))

    def trade_history(self, symbol: str) -> Any:
        """Trades of this account for one symbol."""
        return self.client.get_signed(Spot.MY_TRADES, self._signed({"symbol": symbol}))