"""Custom exceptions and FastAPI exception handlers."""

from fastapi import Request
from fastapi.responses import JSONResponse


class PinnedReposError(Exception):
    """Base class for errors raised while scraping pinned repositories."""


class FetchError(PinnedReposError):
    """Raised when an upstream page cannot be retrieved."""

    def __init__(self, url: str, status_code: int, message: str):
        self.url = url
        self.status_code = status_code
        self.message = message
        super().__init__(f"Failed to load URL: {url} ({status_code}): {message}")


async def fetch_error_handler(
    request: Request,
    exc: FetchError,
) -> JSONResponse:
    """Handle FetchError."""
    return JSONResponse(
        status_code=500,
        content={
            "error": "Failed to fetch pinned repositories",
            "details": str(exc),
        },
    )


def unexpected_error_response(exc: Exception) -> JSONResponse:
    """Error envelope for failures no handler claimed."""
    return JSONResponse(
        status_code=500,
        content={
            "error": "Failed to fetch pinned repositories",
            "details": str(exc) or exc.__class__.__name__,
        },
    )
