import logging
from pathlib import Path

from fastapi import APIRouter, HTTPException, Response, status
from fastapi.responses import PlainTextResponse

from app.utils.env import get_readme_path

_LOGGER = logging.getLogger(__name__)

router = APIRouter(tags=["Docs"])


@router.get("/", include_in_schema=False)
def root() -> Response:
    """@brief Answer the bare root path with an empty 404."""
    return Response(status_code=status.HTTP_404_NOT_FOUND)


@router.get("/README.txt", response_class=PlainTextResponse)
def readme() -> PlainTextResponse:
    """@brief Serve the README file configured by `README_PATH`.

    @return PlainTextResponse with the file contents.
    @throws HTTPException HTTP 500 when the file cannot be read.
    """
    path = Path(get_readme_path())
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        _LOGGER.error("Failed to read README at %s: %s", path, exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="README is unavailable.",
        ) from exc

    return PlainTextResponse(content=content)
