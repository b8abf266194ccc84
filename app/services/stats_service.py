import logging
import time
from typing import Callable

from app.core.request import build_upstream_url, resolve_timestamp
from app.core.stats import compute_stats
from app.repositories.upstream import UpstreamClient
from app.schemas.stats import Stats

_LOGGER = logging.getLogger(__name__)


def _now() -> int:
    return int(time.time())


class StatsService:
    def __init__(
        self,
        client: UpstreamClient,
        endpoint: str,
        strict_decoding: bool = True,
        clock: Callable[[], int] = _now,
    ) -> None:
        """@brief Initialize stats service dependencies.

        @param client Upstream client used to fetch the series.
        @param endpoint Upstream base URL.
        @param strict_decoding Whether malformed upstream JSON is an error.
        @param clock Callable returning the current Unix time in seconds.
        """
        self._client = client
        self._endpoint = endpoint
        self._strict_decoding = strict_decoding
        self._clock = clock

    def get_stats(self, raw_timestamp: str | None) -> Stats:
        """@brief Fetch the upstream series for a timestamp and summarize it.

        @param raw_timestamp Optional caller-supplied Unix timestamp text.
        @return Stats computed over the upstream values.
        @throws FutureTimestampError If the timestamp is later than now.
        @throws UpstreamUnavailableError If the upstream fetch fails.
        @throws MalformedUpstreamPayloadError If the body cannot be decoded.
        @throws InvalidNumericValueError If a value is not numeric.
        """
        timestamp = resolve_timestamp(raw_timestamp, self._clock())
        url = build_upstream_url(self._endpoint, timestamp)

        series = self._client.get_series(url, strict=self._strict_decoding)
        _LOGGER.debug("Fetched %d values from %s", len(series.values), url)

        return compute_stats(series)
