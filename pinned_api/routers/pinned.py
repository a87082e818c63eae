"""Pinned repository endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response
from fastapi.responses import HTMLResponse

from pinned_api.models.schemas import ErrorResponse, PinnedRepo
from pinned_api.services.coordinator import RefreshCoordinator

router = APIRouter(tags=["Pinned repositories"])

USAGE_PAGE = """<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="utf-8">
    <title>GitHub Pinned Repos API</title>
    <style>
      body { font-family: system-ui; max-width: 800px; margin: 2rem auto; padding: 0 1rem; }
      input, button { padding: 0.5rem; font-size: 1rem; }
    </style>
  </head>
  <body>
    <h1>GitHub Pinned Repos API</h1>
    <form action="/">
      <input type="text" name="username" placeholder="GitHub username" required>
      <button type="submit">Get Repos</button>
    </form>
    <p>GET /?username=GITHUB_USERNAME&amp;refresh=true|false</p>
  </body>
</html>
"""


async def get_coordinator() -> RefreshCoordinator:
    """Placeholder - overridden in main.py."""
    raise NotImplementedError


@router.get(
    "/",
    response_model=list[PinnedRepo],
    response_model_exclude_none=True,
    summary="Get a user's pinned repositories",
    description="Scrapes the pinned repositories of a GitHub profile, served stale-while-revalidate.",
    responses={
        200: {"description": "Pinned repositories, or a usage page when no username is given"},
        500: {"model": ErrorResponse, "description": "The GitHub profile could not be loaded"},
    },
)
async def get_pinned_repos(
    username: Annotated[str | None, Query(description="GitHub username")] = None,
    refresh: Annotated[
        str | None, Query(description="'true' bypasses the cache")
    ] = None,
    coordinator: RefreshCoordinator = Depends(get_coordinator),
):
    """
    Get pinned repositories for a GitHub user.

    - **username**: GitHub username; omit it to get a usage page
    - **refresh**: `true` to skip the cached copy and scrape synchronously

    Cached results are returned immediately and refreshed in the background.
    """
    if not username:
        return HTMLResponse(USAGE_PAGE)

    return await coordinator.resolve(username, force_refresh=refresh == "true")


@router.options("/", summary="CORS preflight")
async def preflight() -> Response:
    return Response(status_code=200)
