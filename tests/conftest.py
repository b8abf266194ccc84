import pytest


@pytest.fixture(autouse=True)
def _default_test_env(monkeypatch: pytest.MonkeyPatch):
    """@brief Provide stable default env values for the test suite.

    @details
    Ensures local shell variables do not make tests flaky. Individual tests may
    still override these values with `monkeypatch.setenv(...)` when needed.
    """
    monkeypatch.setenv("UPSTREAM_ENDPOINT", "http://upstream.test")
    monkeypatch.setenv("UPSTREAM_TIMEOUT_SECONDS", "5")
    monkeypatch.setenv("UPSTREAM_STRICT_DECODING", "true")
    monkeypatch.delenv("RADAR_ENDPOINT", raising=False)
