import re
import time
from datetime import datetime, timezone
from urllib.parse import parse_qs, urlsplit

import pytest
import responses

from spotdesk.api import Spot
from spotdesk.client import Client, build_request, build_signed_request
from spotdesk.errors import BinanceApiError, BinanceLibError

HOST = "http://localhost:8080"
MOMENT = datetime(2017, 7, 12, 2, 41, 59, 559000, tzinfo=timezone.utc)


def make_client(secret_key="secret"):
    return Client("placeholder", secret_key, HOST)


def body_text(request):
    body = request.body
    return body.decode() if isinstance(body, bytes) else body


def test_build_request_empty():
    assert build_request({}) == ""


def test_build_request_not_empty():
    assert build_request({"recvWindow": "1234"}) == "recvWindow=1234"


def test_build_request_sorts_keys():
    assert build_request({"symbol": "LTCBTC", "orderId": "1"}) == "orderId=1&symbol=LTCBTC"


def test_build_signed_request():
    result = build_signed_request({}, 1234, MOMENT)
    assert result == "recvWindow=1234&timestamp=1499827319559"


def test_build_signed_request_orders_parameters():
    result = build_signed_request({"symbol": "LTCBTC"}, 1234, MOMENT)
    assert result == "recvWindow=1234&symbol=LTCBTC&timestamp=1499827319559"


def test_build_signed_request_naive_time_is_utc():
    naive = MOMENT.replace(tzinfo=None)
    assert build_signed_request({}, 1234, naive) == build_signed_request({}, 1234, MOMENT)


def test_build_signed_request_defaults_to_now():
    before = int(time.time() * 1000)
    result = build_signed_request({}, 1234)
    after = int(time.time() * 1000)
    head, _, stamp = result.partition("&timestamp=")
    assert head == "recvWindow=1234"
    assert before - 1 <= int(stamp) <= after + 1


def test_get_appends_query():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, f"{HOST}/api/v3/depth", json={"lastUpdateId": 1})
        result = make_client().get(Spot.DEPTH, "symbol=LTCBTC")
        assert result == {"lastUpdateId": 1}
        assert rsps.calls[0].request.url == f"{HOST}/api/v3/depth?symbol=LTCBTC"


def test_get_without_query():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, f"{HOST}/api/v3/ping", json={})
        assert make_client().get(Spot.PING, "") == {}
        assert rsps.calls[0].request.url == f"{HOST}/api/v3/ping"


def test_get_signed_adds_signature_and_headers():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, f"{HOST}/api/v3/account", json={"balances": []})
        result = make_client().get_signed(Spot.ACCOUNT, "recvWindow=1234&timestamp=1")
        assert result == {"balances": []}
        request = rsps.calls[0].request
        query = parse_qs(urlsplit(request.url).query)
        assert query["recvWindow"] == ["1234"]
        assert query["timestamp"] == ["1"]
        assert len(query["signature"][0]) == 64
        assert set(query["signature"][0]) <= set("0123456789abcdef")
        assert request.headers["x-mbx-apikey"] == "placeholder"
        assert request.headers["Content-Type"] == "application/x-www-form-urlencoded"


def test_signature_depends_on_secret():
    urls = []
    for index, secret_key in enumerate(("secret", "placeholder")):
        with responses.RequestsMock() as rsps:
            rsps.add(responses.GET, f"{HOST}/api/v3/account", json={"n": index})
            result = make_client(secret_key).get_signed(Spot.ACCOUNT, "timestamp=1")
            assert result == {"n": index}
            urls.append(rsps.calls[0].request.url)
    assert urls[0].split("signature=")[0] == urls[1].split("signature=")[0]
    assert urls[0].split("signature=")[1] != urls[1].split("signature=")[1]


def test_signature_is_deterministic():
    urls = []
    for index in range(2):
        with responses.RequestsMock() as rsps:
            rsps.add(responses.POST, f"{HOST}/api/v3/order", json={"orderId": index})
            result = make_client().post_signed(Spot.ORDER, "symbol=LTCBTC&timestamp=1")
            assert result == {"orderId": index}
            urls.append(rsps.calls[0].request.url)
    assert urls[0] == urls[1]
    assert urls[0].startswith(f"{HOST}/api/v3/order?symbol=LTCBTC&timestamp=1&signature=")


def test_signed_without_request_keeps_signature_only():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.DELETE, f"{HOST}/api/v3/openOrders", json=[])
        assert make_client().delete_signed(Spot.OPEN_ORDERS, None) == []
        url = rsps.calls[0].request.url
        assert re.fullmatch(re.escape(f"{HOST}/api/v3/openOrders?&signature=") + r"[0-9a-f]{64}", url)


def test_post_has_no_content_type():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.POST, f"{HOST}/api/v3/userDataStream", json={"listenKey": "abc"})
        assert make_client().post(Spot.USER_DATA_STREAM) == {"listenKey": "abc"}
        headers = rsps.calls[0].request.headers
        assert "Content-Type" not in headers
        assert headers["x-mbx-apikey"] == "placeholder"


@pytest.mark.parametrize("method", ["put", "delete"])
def test_listen_key_body(method):
    verb = getattr(responses, method.upper())
    with responses.RequestsMock() as rsps:
        rsps.add(verb, f"{HOST}/api/v3/userDataStream", json={})
        assert getattr(make_client(), method)(Spot.USER_DATA_STREAM, "abc") == {}
        assert body_text(rsps.calls[0].request) == "listenKey=abc"


def test_bad_request_raises_api_error():
    with responses.RequestsMock() as rsps:
        rsps.add(
            responses.GET,
            f"{HOST}/api/v3/ping",
            json={"code": -1000, "msg": "unknown"},
            status=400,
        )
        with pytest.raises(BinanceApiError) as info:
            make_client().get(Spot.PING, None)
        assert info.value.code == -1000
        assert info.value.msg == "unknown"


@pytest.mark.parametrize(
    "status, message",
    [
        (500, "Internal Server Error"),
        (503, "Service Unavailable"),
        (401, "Unauthorized"),
        (404, "Received response: 404"),
    ],
)
def test_error_statuses(status, message):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, f"{HOST}/api/v3/ping", body="", status=status)
        with pytest.raises(BinanceLibError) as info:
            make_client().get(Spot.PING, None)
        assert str(info.value) == message
        assert not isinstance(info.value, BinanceApiError)


def test_invalid_json_raises():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, f"{HOST}/api/v3/ping", body="not json", status=200)
        with pytest.raises(BinanceLibError):
            make_client().get(Spot.PING, None)


def test_connection_error_is_wrapped():
    with responses.RequestsMock(assert_all_requests_are_fired=False):
        with pytest.raises(BinanceLibError):
            make_client().get(Spot.PING, None)


def test_invalid_api_key_header():
    client = Client("bad\nvalue", "secret", HOST)
    with pytest.raises(BinanceLibError):
        client.post(Spot.USER_DATA_STREAM)


def test_missing_keys_become_empty():
    client = Client(None, None, HOST)
    assert client.api_key == ""
    assert client.secret_key == ""
    with responses.RequestsMock() as rsps:
        rsps.add(responses.POST, f"{HOST}/api/v3/userDataStream", json={})
        client.post(Spot.USER_DATA_STREAM)
        assert rsps.calls[0].request.headers["x-mbx-apikey"] == ""