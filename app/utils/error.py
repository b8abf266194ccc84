class StatsRelayError(Exception):
    """@brief Base class for failures raised while serving `/stats`."""


class FutureTimestampError(StatsRelayError):
    """@brief Raised when a caller timestamp is later than the current time."""

    def __init__(self, timestamp: int, now: int) -> None:
        """@brief Keep the rejected timestamp and the reference time.

        @param timestamp Caller-supplied Unix timestamp.
        @param now Current Unix timestamp at validation time.
        """
        super().__init__(f"timestamp {timestamp} is in the future (now is {now}).")
        self.timestamp = timestamp
        self.now = now


class InvalidNumericValueError(StatsRelayError):
    """@brief Raised when a series value cannot be parsed as a number."""

    def __init__(self, index: int, value: object) -> None:
        """@brief Keep the position and raw text of the offending value.

        @param index Zero-based position of the value in the series.
        @param value Raw value received from upstream.
        """
        super().__init__(f"value at index {index} is not numeric: {value!r}.")
        self.index = index
        self.value = value


class UpstreamUnavailableError(StatsRelayError):
    """@brief Raised when the upstream API cannot be reached or answers non-2xx."""


class MalformedUpstreamPayloadError(StatsRelayError):
    """@brief Raised when the upstream body is not a decodable series payload."""
