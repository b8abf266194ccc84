import logging
import time

from fastapi import Request

_LOGGER = logging.getLogger(__name__)


def _elapsed_ms(start_time: float) -> float:
    """@brief Return milliseconds elapsed since a `perf_counter` reading."""
    return (time.perf_counter() - start_time) * 1000.0


async def track_request_latency(request: Request, call_next):
    """@brief FastAPI middleware that logs every request with its latency.

    @param request Incoming FastAPI request object.
    @param call_next FastAPI middleware callback used to continue request handling.
    @return Response produced by downstream handlers.

    @details
    Requests that raise past the exception handlers are logged before the
    exception propagates.
    """
    start_time = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        _LOGGER.error(
            "%s %s failed after %.1f ms",
            request.method,
            request.url.path,
            _elapsed_ms(start_time),
        )
        raise

    _LOGGER.info(
        "%s %s -> %d (%.1f ms)",
        request.method,
        request.url.path,
        response.status_code,
        _elapsed_ms(start_time),
    )
    return response
