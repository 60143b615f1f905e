import pytest

from spotdesk.errors import (
    BinanceApiError,
    BinanceContentError,
    BinanceLibError,
    KlineValueMissingError,
)


def test_from_json_mapping():
    content = BinanceContentError.from_json({"code": -1000, "msg": "unknown"})
    assert content.code == -1000
    assert content.msg == "unknown"


def test_from_json_text_matches_mapping():
    text = '{"code": -1000, "msg": "unknown"}'
    assert BinanceContentError.from_json(text) == BinanceContentError.from_json(
        {"code": -1000, "msg": "unknown"}
    )


@pytest.mark.parametrize(
    "data",
    [
        "not json",
        [1, 2],
        {"msg": "no code"},
        {"code": "x", "msg": "bad"},
        {"code": -1000},
        {"code": 70000, "msg": "too big"},
        {"code": True, "msg": "bool"},
    ],
)
def test_from_json_rejects_bad_bodies(data):
    with pytest.raises(BinanceLibError):
        BinanceContentError.from_json(data)


def test_api_error_carries_content():
    content = BinanceContentError(code=-1000, msg="unknown")
    error = BinanceApiError(content)
    assert isinstance(error, BinanceLibError)
    assert error.content is content
    assert error.code == -1000
    assert error.msg == "unknown"
    assert "unknown" in str(error)


def test_kline_value_missing_message():
    error = KlineValueMissingError(3, "open")
    assert str(error) == "open at 3 is missing"
    assert error.index == 3
    assert error.name == "open"
    assert isinstance(error, BinanceLibError)