import json
from datetime import date, datetime, timezone
from decimal import Decimal

import pytest

from clientstack.utils.json import CustomEncoder, timestamp_seconds


def _dumps(value) -> str:
    return json.dumps(value, cls=CustomEncoder)


@pytest.mark.parametrize(
    "value,expected",
    [
        (Decimal("1.5"), "1.5"),
        (Decimal("-1.5"), "-1.5"),
        (Decimal("-0.25"), "-0.25"),
        (Decimal("3"), "3"),
        (Decimal("-3"), "-3"),
        (Decimal("2.000"), "2"),
    ],
)
def test_decimal(value, expected):
    assert _dumps(value) == expected


def test_timestamps():
    assert _dumps(datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)) == "1704164645"
    assert _dumps(datetime(2024, 1, 2, 3, 4, 5, 500000)) == "1704164645.5"
    assert _dumps(date(2024, 1, 2)) == "1704153600"


def test_bytes():
    assert _dumps({"data": b"{}"}) == '{"data": "e30="}'
    assert _dumps(bytearray(b"{}")) == '"e30="'


def test_unsupported_type():
    with pytest.raises(TypeError):
        _dumps(object())


def test_timestamp_seconds_of_naive_datetime():
    assert timestamp_seconds(datetime(1970, 1, 1, 0, 1)) == 60.0
