# spotdesk

A small, blocking Python client for the Binance spot REST API. It builds
query strings, signs them with HMAC-SHA256, reads account information and
places, tests and cancels spot orders. Answers come back as the decoded
JSON (dicts and lists) that the exchange sent.

## Installation

```
pip install spotdesk
```

To run the test suite as well:

```
pip install "spotdesk[test]"
pytest
```

## Configuration

`spotdesk.config.Config` is a frozen dataclass holding the REST and
websocket endpoints and the receive window (5000 ms by default).
`Config.testnet()` returns settings that point at the public test network.
Other variants are made with `dataclasses.replace` or keyword arguments.

```python
from dataclasses import replace

from spotdesk.config import Config

config = Config()                      # production endpoints, recv_window=5000
test_config = Config.testnet()
short_window = replace(config, recv_window=1234)
```

## Account and orders

`spotdesk.account.Account` takes an API key, a secret key and a `Config`;
every call it makes is signed and carries `recvWindow` and a millisecond
`timestamp`.

```python
from spotdesk.account import Account
from spotdesk.config import Config
from spotdesk.orders import TimeInForce

account = Account(api_key="placeholder", secret_key="secret", config=Config.testnet())

info = account.get_account()
btc = account.get_balance("BTC")

open_orders = account.get_open_orders("LTCBTC")

# Orders sent to the test endpoint are validated but never executed.
account.test_limit_buy("LTCBTC", 1, 0.1)
account.test_stop_limit_sell_order("LTCBTC", 1, 0.1, 0.09, TimeInForce.GTC)

transaction = account.market_buy("LTCBTC", 1)
account.cancel_order("LTCBTC", transaction["orderId"])

history = account.trade_history("LTCBTC")
```

Available calls:

- queries: `get_account`, `get_balance`, `get_open_orders`,
  `get_all_open_orders`, `order_status`, `trade_history`
- orders: `limit_buy`, `limit_sell`, `market_buy`, `market_sell`,
  `market_buy_using_quote_quantity`, `market_sell_using_quote_quantity`,
  `stop_limit_buy_order`, `stop_limit_sell_order`, `custom_order`
- cancellation: `cancel_order`, `cancel_order_with_client_id`,
  `cancel_all_open_orders`
- sandboxed checks, which return `None`: `test_order_status`,
  `test_cancel_order` and a `test_` form of every order call

`custom_order` takes a stop price (or `None`), an `OrderSide`, an
`OrderType`, a `TimeInForce` and an optional client order id.

## Order parameters

`spotdesk.orders` holds the `OrderSide`, `OrderType` and `TimeInForce`
enums and two frozen dataclasses, `OrderRequest` (by base quantity) and
`OrderQuoteQuantityRequest` (by quote amount). Their `to_parameters()`
gives the request parameters, sorted by key, with numbers written in plain
decimal form. A price of zero means no price: neither `price` nor
`timeInForce` is sent.

```python
from spotdesk.orders import OrderRequest, OrderSide, OrderType

OrderRequest("LTCBTC", 1, 0.1, OrderSide.BUY, OrderType.LIMIT).to_parameters()
# {'price': '0.1', 'quantity': '1', 'side': 'BUY',
#  'symbol': 'LTCBTC', 'timeInForce': 'GTC', 'type': 'LIMIT'}
```

## Lower-level access

`spotdesk.client.Client(api_key, secret_key, host)` performs the HTTP
calls: `get_signed`, `post_signed` and `delete_signed` append a signature
to the query string and send the `x-mbx-apikey` header; `get` sends an
unsigned query; `post`, `put` and `delete` are the listen-key calls.

`build_request(parameters)` joins a mapping as `key=value` pairs sorted by
key. `build_signed_request(parameters, recv_window, now=None)` adds
`recvWindow` (when positive) and a millisecond `timestamp` taken from
`now` or the current time; a naive `now` is read as UTC.

Endpoint paths come from the `Spot`, `Sapi` and `Futures` enums in
`spotdesk.api` and are resolved by `endpoint_path`.

## Errors

All errors derive from `spotdesk.errors.BinanceLibError`.

- A `400 Bad Request` answer raises `BinanceApiError`; its `code` and
  `msg` come from the exchange's error body (a `BinanceContentError`).
- `401`, `500`, `503` and any other unexpected status, network failures,
  malformed JSON, an API key that cannot go in a header, and an asset
  missing from `get_balance` raise `BinanceLibError`.

```python
from spotdesk.errors import BinanceApiError, BinanceLibError

try:
    account.limit_buy("LTCBTC", 1, 0.1)
except BinanceApiError as err:
    print(err.code, err.msg)
except BinanceLibError as err:
    print(err)
```

## What it does not do

Only the spot account section has its own class. There are no helpers for
market data, exchange information, savings, futures or user data streams,
and no websocket client; those endpoints are listed in `spotdesk.api` and
can be reached only through `Client` directly. Responses are not turned
into typed models.