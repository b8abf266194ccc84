from typing import Annotated, Iterator

from fastapi import APIRouter, Depends, Query

from app.repositories.upstream import UpstreamClient
from app.schemas.stats import Stats
from app.services.stats_service import StatsService
from app.utils.env import get_upstream_endpoint, get_upstream_strict_decoding

router = APIRouter(tags=["Stats"])


def get_stats_service() -> Iterator[StatsService]:
    """@brief Yield a stats service and close its upstream client afterwards.

    @description Builds the service from the environment configuration for
    the request lifecycle and guarantees the HTTP session is released.

    @return Generator that yields a StatsService wired to the configured endpoint.
    """
    endpoint = get_upstream_endpoint()
    strict_decoding = get_upstream_strict_decoding()

    client = UpstreamClient()
    try:
        yield StatsService(
            client=client,
            endpoint=endpoint,
            strict_decoding=strict_decoding,
        )
    finally:
        client.close()


@router.get("/stats", response_model=Stats)
def stats(
    timestamp: Annotated[str | None, Query()] = None,
    service: StatsService = Depends(get_stats_service),
) -> Stats:
    """@brief Return statistics of the upstream series at a point in time.

    @param timestamp Optional Unix timestamp; unparseable values mean "now".
    @param service Stats service resolved from configuration.
    @return Stats with mean, median, min and max.
    """
    return service.get_stats(timestamp)
