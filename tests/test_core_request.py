import pytest

from app.core.request import build_upstream_url, parse_timestamp, resolve_timestamp
from app.utils.error import FutureTimestampError

NOW = 1_700_000_000


def test_timestamp_equal_to_now_is_accepted():
    assert resolve_timestamp(str(NOW), NOW) == NOW


def test_past_timestamp_is_forwarded():
    assert resolve_timestamp("1600000000", NOW) == 1_600_000_000


def test_future_timestamp_is_rejected():
    with pytest.raises(FutureTimestampError) as exc_info:
        resolve_timestamp(str(NOW + 10), NOW)

    assert exc_info.value.timestamp == NOW + 10
    assert exc_info.value.now == NOW


@pytest.mark.parametrize("raw_timestamp", [None, ""])
def test_missing_timestamp_defaults_to_now(raw_timestamp):
    assert resolve_timestamp(raw_timestamp, NOW) == NOW


@pytest.mark.parametrize(
    "raw_timestamp",
    ["abc", "12.5", " 1600000000", "1_600_000_000", "9223372036854775808"],
)
def test_unparseable_timestamp_defaults_to_now(raw_timestamp):
    assert resolve_timestamp(raw_timestamp, NOW) == NOW


def test_parse_timestamp_accepts_signs_and_int64_bounds():
    assert parse_timestamp("+42") == 42
    assert parse_timestamp("-42") == -42
    assert parse_timestamp("9223372036854775807") == 2**63 - 1
    assert parse_timestamp("-9223372036854775808") == -(2**63)
    assert parse_timestamp("-9223372036854775809") is None


def test_build_upstream_url():
    assert (
        build_upstream_url("https://radar.example", 1_700_000_000)
        == "https://radar.example/stats?timestamp=1700000000"
    )


def test_build_upstream_url_strips_trailing_slash():
    assert build_upstream_url("http://upstream.test/", 5) == "http://upstream.test/stats?timestamp=5"
