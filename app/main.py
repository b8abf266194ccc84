import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.api.readme import router as readme_router
from app.api.stats import router as stats_router
from app.middleware.latency import track_request_latency
from app.utils.error import (
    FutureTimestampError,
    InvalidNumericValueError,
    MalformedUpstreamPayloadError,
    UpstreamUnavailableError,
)

_LOGGER = logging.getLogger(__name__)

app = FastAPI(title="Network Statistics Relay API")
app.middleware("http")(track_request_latency)
app.include_router(stats_router)
app.include_router(readme_router)


@app.exception_handler(FutureTimestampError)
async def handle_future_timestamp(
    _request: Request, exc: FutureTimestampError
) -> JSONResponse:
    """@brief Reject timestamps later than the current time with HTTP 400.

    @param _request Incoming request associated with the failure.
    @param exc Error carrying the rejected timestamp.
    @return JSONResponse with HTTP 400 and error detail.
    """
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": str(exc)},
    )


@app.exception_handler(UpstreamUnavailableError)
@app.exception_handler(MalformedUpstreamPayloadError)
@app.exception_handler(InvalidNumericValueError)
async def handle_upstream_failure(_request: Request, exc: Exception) -> JSONResponse:
    """@brief Return HTTP 502 when upstream cannot deliver a usable series.

    @param _request Incoming request associated with the failure.
    @param exc Upstream transport, decoding or value error.
    @return JSONResponse with HTTP 502 and error detail.
    """
    _LOGGER.warning("Upstream failure: %s", exc)
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={"detail": str(exc)},
    )


@app.exception_handler(Exception)
async def handle_unexpected_error(_request: Request, exc: Exception) -> JSONResponse:
    """@brief Collapse unexpected failures into a stable 500 response.

    @param _request Incoming request associated with the failure.
    @param exc Unhandled exception.
    @return JSONResponse with HTTP 500 and a generic detail.
    """
    _LOGGER.exception("Unexpected error while serving request", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error."},
    )
