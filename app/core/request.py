import logging
import re

from app.utils.error import FutureTimestampError

_LOGGER = logging.getLogger(__name__)

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_timestamp(raw_timestamp: str) -> int | None:
    """@brief Parse a base-10 signed 64-bit Unix timestamp.

    @param raw_timestamp Timestamp text received from the query string.
    @return Parsed timestamp, or None when the text is not a valid int64.
    """
    if not _INTEGER_PATTERN.fullmatch(raw_timestamp):
        return None

    timestamp = int(raw_timestamp)
    if not _INT64_MIN <= timestamp <= _INT64_MAX:
        return None
    return timestamp


def resolve_timestamp(raw_timestamp: str | None, now: int) -> int:
    """@brief Resolve the timestamp used to query upstream.

    @description Absent, empty or unparseable input resolves to `now`.
    Unparseable input is not an error.

    @param raw_timestamp Optional caller-supplied timestamp text.
    @param now Current Unix timestamp in seconds.
    @return Timestamp to forward upstream.
    @throws FutureTimestampError If the parsed timestamp is later than `now`.
    """
    if not raw_timestamp:
        return now

    timestamp = parse_timestamp(raw_timestamp)
    if timestamp is None:
        _LOGGER.debug("Ignoring unparseable timestamp %r, using %d", raw_timestamp, now)
        return now

    if timestamp > now:
        raise FutureTimestampError(timestamp, now)
    return timestamp


def build_upstream_url(endpoint: str, timestamp: int) -> str:
    """@brief Build the upstream stats query URL.

    @param endpoint Upstream base URL.
    @param timestamp Resolved Unix timestamp.
    @return URL in the form `{endpoint}/stats?timestamp={timestamp}`.
    """
    return f"{endpoint.rstrip('/')}/stats?timestamp={timestamp}"
