"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

BROWSER_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/121.0.0.0 Safari/537.36"
)


class Settings(BaseSettings):
    """Application configuration."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="PINNED_REPOS_")

    app_name: str = "GitHub Pinned Repos API"
    debug: bool = False
    log_level: str = "INFO"
    port: int = Field(
        default=80,
        validation_alias=AliasChoices("PORT", "PINNED_REPOS_PORT", "port"),
    )

    # Upstream settings
    github_base_url: str = "https://github.com"
    opengraph_base_url: str = "https://opengraph.githubassets.com/1"
    request_timeout: float = 5.0
    user_agent: str = BROWSER_USER_AGENT

    # Cache settings
    cache_max_size: int = 500

    # Downstream Cache-Control max-age
    response_max_age: int = 600


@lru_cache
def get_settings() -> Settings:
    """Cached settings singleton."""
    return Settings()
