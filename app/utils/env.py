import os

DEFAULT_UPSTREAM_ENDPOINT = "https://cfisysapi.developers.workers.dev"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _get_first_env(keys: tuple[str, ...], default: str) -> str:
    """@brief Return the first non-empty environment variable from a key list.

    @param keys Candidate environment variable names in lookup order.
    @param default Fallback value when all keys are unset/empty.
    @return Resolved environment value.
    """
    for key in keys:
        value = os.getenv(key)
        if value:
            return value
    return default


def get_upstream_endpoint() -> str:
    """@brief Return the base URL of the upstream statistics API.

    @return First value from `UPSTREAM_ENDPOINT`/`RADAR_ENDPOINT`, without
    trailing slash, otherwise the public Radar worker URL.
    """
    endpoint = _get_first_env(
        ("UPSTREAM_ENDPOINT", "RADAR_ENDPOINT"), DEFAULT_UPSTREAM_ENDPOINT
    )
    return endpoint.strip().rstrip("/")


def get_upstream_timeout() -> float:
    """@brief Return the timeout applied to upstream GET requests.

    @return Seconds from `UPSTREAM_TIMEOUT_SECONDS` (default `10`).
    @throws ValueError If the value is not a positive number.
    """
    raw = os.getenv("UPSTREAM_TIMEOUT_SECONDS", "10").strip()
    try:
        timeout = float(raw)
    except ValueError as exc:
        raise ValueError("UPSTREAM_TIMEOUT_SECONDS must be a number.") from exc

    if not timeout > 0:
        raise ValueError("UPSTREAM_TIMEOUT_SECONDS must be greater than 0.")
    return timeout


def get_upstream_strict_decoding() -> bool:
    """@brief Return whether malformed upstream JSON fails the request.

    @description When disabled, decode failures fall back to an empty series.

    @return Boolean from `UPSTREAM_STRICT_DECODING` (default `true`).
    @throws ValueError If the value is not a recognised boolean.
    """
    value = os.getenv("UPSTREAM_STRICT_DECODING", "true").strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError("UPSTREAM_STRICT_DECODING must be either 'true' or 'false'.")


def get_readme_path() -> str:
    """@brief Return the path of the file served at `/README.txt`.

    @return Path from `README_PATH` (default `README.txt`).
    """
    return os.getenv("README_PATH", "README.txt")


def get_log_level() -> str:
    """@brief Return the root logging level name.

    @return Upper-cased level from `LOG_LEVEL` (default `INFO`).
    """
    return os.getenv("LOG_LEVEL", "INFO").strip().upper()
