"""Async GitHub profile scraper using httpx."""

import asyncio
import logging

import httpx
from bs4 import Tag

from pinned_api.config import Settings
from pinned_api.exceptions import FetchError
from pinned_api.models.schemas import PinnedRepo
from pinned_api.services.extractor import (
    find_pinned_items,
    find_website,
    parse_numeric_value,
    parse_pinned_item,
    repo_image,
    repo_link,
)

logger = logging.getLogger(__name__)


class GitHubScraper:
    """Scrapes pinned repositories from public GitHub profile pages."""

    def __init__(self, settings: Settings):
        self._base_url = settings.github_base_url.rstrip("/")
        self._opengraph_base_url = settings.opengraph_base_url
        self._timeout = settings.request_timeout
        self._user_agent = settings.user_agent
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "GitHubScraper":
        await self.start()
        return self

    async def __aexit__(self, *args) -> None:
        await self.close()

    async def start(self) -> None:
        """Initialize the HTTP client."""
        self._client = httpx.AsyncClient(
            headers={"User-Agent": self._user_agent},
            timeout=self._timeout,
            follow_redirects=True,
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def fetch_html(self, url: str) -> str:
        """
        Fetch a page and return its body.

        Raises:
            FetchError: When the whole request exceeds the timeout, the URL
                is invalid, the connection fails or the status is not 2xx
        """
        if not self._client:
            raise RuntimeError("Client not initialized. Call start() first.")

        try:
            response = await asyncio.wait_for(self._client.get(url), self._timeout)
        except (asyncio.TimeoutError, httpx.TimeoutException):
            raise FetchError(url, status_code=504, message="Request timed out")
        except httpx.InvalidURL as e:
            raise FetchError(url, status_code=400, message=f"Invalid URL: {str(e)}")
        except httpx.HTTPError as e:
            raise FetchError(url, status_code=502, message=f"Connection failed: {str(e)}")

        if not 200 <= response.status_code < 300:
            raise FetchError(
                url,
                status_code=response.status_code,
                message=f"HTTP error! status: {response.status_code}",
            )
        return response.text

    async def fetch_pinned_repos(self, username: str) -> list[PinnedRepo]:
        """
        Scrape the pinned repositories of a GitHub user.

        Args:
            username: GitHub username, used verbatim as the record owner

        Returns:
            Pinned repositories in profile order; empty when none are pinned

        Raises:
            FetchError: If the profile page cannot be retrieved
        """
        html = await self.fetch_html(f"{self._base_url}/{username}")
        items = find_pinned_items(html)
        if not items:
            logger.debug(f"No pinned items found for '{username}'")
            return []

        return list(
            await asyncio.gather(*(self._build_repo(username, item) for item in items))
        )

    async def discover_website(self, repo_url: str) -> str | None:
        """Return the external website of a repository, or None on any failure."""
        try:
            html = await self.fetch_html(repo_url)
            return find_website(html)
        except Exception as e:
            logger.warning(f"Failed to get website for repo: {repo_url}: {e}")
            return None

    async def check_health(self) -> bool:
        """Check if GitHub is reachable."""
        if not self._client:
            return False
        try:
            response = await self._client.get(self._base_url)
            return response.status_code == 200
        except Exception:
            return False

    async def _build_repo(self, username: str, item: Tag) -> PinnedRepo:
        fields = parse_pinned_item(item)
        repo = fields["repo"] or ""
        link = repo_link(self._base_url, username, repo)

        return PinnedRepo(
            owner=username,
            repo=repo,
            link=link,
            description=fields["description"],
            image=repo_image(self._opengraph_base_url, username, repo),
            website=await self.discover_website(link),
            language=fields["language"],
            language_color=fields["language_color"],
            stars=parse_numeric_value(fields["stars"]),
            forks=parse_numeric_value(fields["forks"]),
        )
