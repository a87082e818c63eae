"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request

from pinned_api.config import get_settings
from pinned_api.exceptions import (
    FetchError,
    fetch_error_handler,
    unexpected_error_response,
)
from pinned_api.routers import health, pinned
from pinned_api.services.cache import LRUCache
from pinned_api.services.coordinator import RefreshCoordinator
from pinned_api.services.scraper import GitHubScraper

logging.basicConfig(
    level=get_settings().log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

BIND_HOST = "0.0.0.0"

scraper: GitHubScraper | None = None
cache: LRUCache | None = None
coordinator: RefreshCoordinator | None = None


def response_headers(max_age: int) -> dict[str, str]:
    """Headers attached to every response."""
    return {
        "Access-Control-Allow-Origin": "*",
        "Access-Control-Request-Method": "*",
        "Access-Control-Allow-Methods": "OPTIONS, GET",
        "Access-Control-Allow-Headers": "*",
        "Cache-Control": f"public, max-age={max_age}",
    }


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Handles startup and shutdown of resources.
    """
    global scraper, cache, coordinator

    settings = get_settings()
    logger.info(f"Starting {settings.app_name}")

    scraper = GitHubScraper(settings)
    await scraper.start()

    cache = LRUCache(max_size=settings.cache_max_size)
    coordinator = RefreshCoordinator(scraper, cache)

    logger.info("Services initialized successfully")

    yield

    logger.info("Shutting down services")
    await coordinator.close()
    await scraper.close()


def create_app() -> FastAPI:
    """Application factory."""
    settings = get_settings()
    headers = response_headers(settings.response_max_age)

    app = FastAPI(
        title=settings.app_name,
        description="Scrapes the pinned repositories of GitHub profiles",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_exception_handler(FetchError, fetch_error_handler)

    @app.middleware("http")
    async def add_response_headers(request: Request, call_next):
        try:
            response = await call_next(request)
        except Exception as e:
            logger.exception(f"Unhandled error processing {request.url}")
            response = unexpected_error_response(e)
        response.headers.update(headers)
        return response

    async def get_scraper_dep():
        return scraper

    async def get_cache_dep():
        return cache

    async def get_coordinator_dep():
        return coordinator

    app.dependency_overrides[pinned.get_coordinator] = get_coordinator_dep
    app.dependency_overrides[health.get_scraper] = get_scraper_dep
    app.dependency_overrides[health.get_cache] = get_cache_dep
    app.dependency_overrides[health.get_coordinator] = get_coordinator_dep

    app.include_router(health.router)
    app.include_router(pinned.router)

    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn on all interfaces."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "pinned_api.main:app",
        host=BIND_HOST,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
