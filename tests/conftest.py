"""Shared test fixtures and sample markup."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from unittest.mock import AsyncMock

from pinned_api.config import Settings
from pinned_api.main import app
from pinned_api.models.schemas import PinnedRepo
from pinned_api.routers import health, pinned
from pinned_api.services.cache import LRUCache
from pinned_api.services.coordinator import RefreshCoordinator
from pinned_api.services.scraper import GitHubScraper

# Trimmed-down copy of the pinned items block on https://github.com/octocat
SAMPLE_PROFILE_HTML = """
<html><body>
<ol class="d-flex flex-wrap list-style-none gutter-condensed mb-2 js-pinned-items-reorder-list">
  <li class="mb-3 d-flex flex-content-stretch col-12 col-md-6 col-lg-6">
    <div class="Box d-flex pinned-item-list-item p-3 width-full public source">
      <div class="pinned-item-list-item-content">
        <div class="d-flex width-full position-relative">
          <a href="/octocat/Hello-World" class="Link mr-1 text-bold wb-break-word">
            <span class="repo" title="Hello-World">Hello-World</span>
          </a>
        </div>
        <p class="pinned-item-desc color-fg-muted text-small mt-2 mb-0">
          My first repository on GitHub!
        </p>
        <p class="mb-0 f6 color-fg-muted">
          <span class="d-inline-block mr-3">
            <span class="repo-language-color" style="background-color: #f1e05a"></span>
            <span itemprop="programmingLanguage">JavaScript</span>
          </span>
          <a href="/octocat/Hello-World/stargazers" class="pinned-item-meta Link--muted">
            <svg class="octicon octicon-star"></svg>
            2.6k
          </a>
          <a href="/octocat/Hello-World/forks" class="pinned-item-meta Link--muted">
            <svg class="octicon octicon-repo-forked"></svg>
            1,903
          </a>
        </p>
      </div>
    </div>
  </li>
  <li class="mb-3 d-flex flex-content-stretch col-12 col-md-6 col-lg-6">
    <div class="Box d-flex pinned-item-list-item p-3 width-full public source">
      <div class="pinned-item-list-item-content">
        <div class="d-flex width-full position-relative">
          <a href="/octocat/Spoon-Knife" class="Link mr-1 text-bold wb-break-word">
            <span class="repo" title="Spoon-Knife">Spoon-Knife</span>
          </a>
        </div>
        <p class="pinned-item-desc color-fg-muted text-small mt-2 mb-0">   </p>
        <p class="mb-0 f6 color-fg-muted">
          <a href="/octocat/Spoon-Knife/stargazers" class="pinned-item-meta Link--muted">
            12
          </a>
        </p>
      </div>
    </div>
  </li>
</ol>
</body></html>
"""

SAMPLE_EMPTY_PROFILE_HTML = """
<html><body>
<div class="js-profile-editable-area">No pinned items here.</div>
</body></html>
"""

SAMPLE_REPO_HTML = """
<html><body>
<div class="BorderGrid BorderGrid--spacious">
  <div class="BorderGrid-row">
    <div class="BorderGrid-cell">
      <h2 class="mb-3 h4">About</h2>
      <a href="http://insecure.example.com">insecure</a>
      <a href="https://octocat.github.io " class="text-bold">octocat.github.io</a>
      <a href="https://example.com/second">second</a>
    </div>
  </div>
</div>
</body></html>
"""

SAMPLE_REPO_WITHOUT_WEBSITE_HTML = """
<html><body>
<div class="BorderGrid"><div class="BorderGrid-cell"><h2>About</h2></div></div>
<a href="https://outside.example.com">not in the sidebar</a>
</body></html>
"""


@pytest.fixture
def settings():
    """Test settings."""
    return Settings(
        cache_max_size=3,
        request_timeout=5.0,
    )


@pytest.fixture
def sample_repo() -> PinnedRepo:
    """Sample PinnedRepo model for testing."""
    return PinnedRepo(
        owner="octocat",
        repo="Hello-World",
        link="https://github.com/octocat/Hello-World",
        description="My first repository on GitHub!",
        image="https://opengraph.githubassets.com/1/octocat/Hello-World",
        website="https://octocat.github.io",
        language="JavaScript",
        language_color="#f1e05a",
        stars=2600,
        forks=0,
    )


@pytest.fixture
def cache(settings) -> LRUCache:
    """Fresh cache instance for each test."""
    return LRUCache(max_size=settings.cache_max_size)


@pytest.fixture
def mock_scraper(sample_repo):
    """Mocked GitHub scraper."""
    mock = AsyncMock(spec=GitHubScraper)
    mock.fetch_pinned_repos.return_value = [sample_repo]
    mock.check_health.return_value = True
    return mock


@pytest_asyncio.fixture
async def coordinator(mock_scraper, cache):
    """Coordinator wired to the mocked scraper and a fresh cache."""
    coordinator = RefreshCoordinator(mock_scraper, cache)
    yield coordinator
    await coordinator.close()


@pytest_asyncio.fixture
async def test_client(mock_scraper, cache, coordinator):
    """AsyncClient for testing with mocked dependencies."""
    app.dependency_overrides[pinned.get_coordinator] = lambda: coordinator
    app.dependency_overrides[health.get_scraper] = lambda: mock_scraper
    app.dependency_overrides[health.get_cache] = lambda: cache
    app.dependency_overrides[health.get_coordinator] = lambda: coordinator

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def profile_html():
    return SAMPLE_PROFILE_HTML


@pytest.fixture
def empty_profile_html():
    return SAMPLE_EMPTY_PROFILE_HTML


@pytest.fixture
def repo_html():
    return SAMPLE_REPO_HTML


@pytest.fixture
def repo_without_website_html():
    return SAMPLE_REPO_WITHOUT_WEBSITE_HTML
