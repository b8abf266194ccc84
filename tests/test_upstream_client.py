from unittest.mock import MagicMock

import pytest
import requests

from app.repositories.upstream import UpstreamClient
from app.schemas.raw_series import RawSeries
from app.utils.error import MalformedUpstreamPayloadError, UpstreamUnavailableError

URL = "http://upstream.test/stats?timestamp=1700000000"


def _session_returning(body: bytes) -> MagicMock:
    session = MagicMock()
    session.get.return_value.content = body
    return session


def test_fetch_returns_body_and_uses_configured_timeout():
    session = _session_returning(b'{"Timestamps": [], "Values": []}')

    client = UpstreamClient(session=session)
    body = client.fetch(URL)

    assert body == b'{"Timestamps": [], "Values": []}'
    session.get.assert_called_once_with(URL, timeout=5.0)
    session.get.return_value.raise_for_status.assert_called_once_with()


def test_fetch_wraps_connection_errors():
    session = MagicMock()
    session.get.side_effect = requests.ConnectionError("connection refused")

    client = UpstreamClient(session=session, timeout=1.0)

    with pytest.raises(UpstreamUnavailableError):
        client.fetch(URL)


def test_fetch_wraps_non_2xx_responses():
    session = MagicMock()
    session.get.return_value.raise_for_status.side_effect = requests.HTTPError(
        "503 Server Error"
    )

    client = UpstreamClient(session=session, timeout=1.0)

    with pytest.raises(UpstreamUnavailableError):
        client.fetch(URL)


def test_decode_reads_parallel_arrays():
    series = UpstreamClient.decode(
        b'{"Timestamps": ["1700000000", "1700000001"], "Values": ["1.5", "2.5"]}'
    )

    assert series == RawSeries(
        timestamps=["1700000000", "1700000001"], values=["1.5", "2.5"]
    )


def test_decode_accepts_lowercase_keys_and_missing_fields():
    series = UpstreamClient.decode(b'{"values": ["3.0"]}')

    assert series.values == ("3.0",)
    assert series.timestamps == ()


def test_decode_treats_null_arrays_as_empty():
    series = UpstreamClient.decode(b'{"Timestamps": null, "Values": null}')

    assert series == RawSeries()


@pytest.mark.parametrize(
    "body",
    [b"not json", b'{"Values": [1.5, 2.5]}', b"[]", b""],
)
def test_decode_rejects_malformed_payload_in_strict_mode(body):
    with pytest.raises(MalformedUpstreamPayloadError):
        UpstreamClient.decode(body, strict=True)


def test_decode_falls_back_to_empty_series_in_lenient_mode():
    series = UpstreamClient.decode(b"not json", strict=False)

    assert series == RawSeries()


def test_get_series_fetches_then_decodes():
    session = _session_returning(b'{"Timestamps": ["1"], "Values": ["9.0"]}')

    client = UpstreamClient(session=session, timeout=2.0)
    series = client.get_series(URL)

    assert series.values == ("9.0",)
    session.get.assert_called_once_with(URL, timeout=2.0)


def test_decode_matches_keys_ignoring_case():
    series = UpstreamClient.decode(b'{"TIMESTAMPS": ["1"], "VALUES": ["2.0"]}')

    assert series == RawSeries(timestamps=["1"], values=["2.0"])


def test_decode_keeps_last_key_differing_only_in_case():
    series = UpstreamClient.decode(b'{"Values": ["1.0"], "vAlUeS": ["2.0"]}')

    assert series.values == ("2.0",)


def test_close_releases_session():
    session = MagicMock()

    client = UpstreamClient(session=session, timeout=1.0)
    client.close()

    session.close.assert_called_once_with()
