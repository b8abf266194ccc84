from __future__ import annotations

import logging

import requests
from pydantic import ValidationError

from app.schemas.raw_series import RawSeries
from app.utils.env import get_upstream_timeout
from app.utils.error import MalformedUpstreamPayloadError, UpstreamUnavailableError

_LOGGER = logging.getLogger(__name__)


class UpstreamClient:
    def __init__(
        self,
        session: requests.Session | None = None,
        timeout: float | None = None,
    ) -> None:
        """@brief Initialize the HTTP session used to reach the upstream API.

        @param session Optional pre-configured `requests` session.
        @param timeout Optional GET timeout in seconds.
        Falls back to `get_upstream_timeout()`.
        """
        self._session = session or requests.Session()
        self._timeout = get_upstream_timeout() if timeout is None else timeout

    def fetch(self, url: str) -> bytes:
        """@brief Perform a GET request and return the raw response body.

        @param url Fully formed upstream URL.
        @return Response body bytes.
        @throws UpstreamUnavailableError On connection errors, timeouts or
        non-2xx responses.
        """
        try:
            response = self._session.get(url, timeout=self._timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            _LOGGER.warning("Upstream request to %s failed: %s", url, exc)
            raise UpstreamUnavailableError(
                f"Upstream request to '{url}' failed."
            ) from exc

        return response.content

    @staticmethod
    def decode(body: bytes, strict: bool = True) -> RawSeries:
        """@brief Decode an upstream JSON body into a raw series.

        @param body Raw response body.
        @param strict When False, decode failures yield an empty series.
        @return Decoded RawSeries.
        @throws MalformedUpstreamPayloadError If decoding fails in strict mode.
        """
        try:
            return RawSeries.model_validate_json(body)
        except ValidationError as exc:
            if not strict:
                _LOGGER.warning(
                    "Ignoring malformed upstream payload (%d errors), using empty series",
                    exc.error_count(),
                )
                return RawSeries()
            raise MalformedUpstreamPayloadError(
                "Upstream payload is not a valid series."
            ) from exc

    def get_series(self, url: str, strict: bool = True) -> RawSeries:
        """@brief Fetch and decode the series published at `url`.

        @param url Fully formed upstream URL.
        @param strict Forwarded to `decode`.
        @return Decoded RawSeries.
        """
        return self.decode(self.fetch(url), strict=strict)

    def close(self) -> None:
        """@brief Release the pooled connections of the HTTP session.

        @return None.
        """
        self._session.close()
