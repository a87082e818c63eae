"""Health check endpoints."""

from fastapi import APIRouter, Depends

from pinned_api.models.schemas import HealthResponse
from pinned_api.services.cache import LRUCache
from pinned_api.services.coordinator import RefreshCoordinator
from pinned_api.services.scraper import GitHubScraper

router = APIRouter(tags=["Health"])


async def get_scraper() -> GitHubScraper:
    """Placeholder - overridden in main.py."""
    raise NotImplementedError


async def get_cache() -> LRUCache:
    """Placeholder - overridden in main.py."""
    raise NotImplementedError


async def get_coordinator() -> RefreshCoordinator:
    """Placeholder - overridden in main.py."""
    raise NotImplementedError


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check endpoint",
)
async def health_check(
    scraper: GitHubScraper = Depends(get_scraper),
    cache: LRUCache = Depends(get_cache),
    coordinator: RefreshCoordinator = Depends(get_coordinator),
) -> HealthResponse:
    """
    Check the health of the service.

    Verifies:
    - Service is running
    - github.com is reachable
    """
    github_healthy = await scraper.check_health()
    stats = cache.stats()

    return HealthResponse(
        status="healthy" if github_healthy else "degraded",
        version="1.0.0",
        github_reachable=github_healthy,
        cache_size=stats["size"],
        cache_max_size=stats["max_size"],
        pending_refreshes=coordinator.pending_refreshes,
    )


@router.get(
    "/health/live",
    summary="Liveness probe",
    description="Simple liveness check for container orchestration",
)
async def liveness():
    """Simple liveness check - returns 200 if service is running."""
    return {"status": "alive"}
