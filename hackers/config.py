"""Application configuration."""

from typing import Literal

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


class HackerNewsSettings(BaseModel):
    """Hacker News site configuration."""

    base_url: str = "https://news.ycombinator.com"

    # Request timeout in seconds; retries are left to the caller
    timeout: float = 10.0

    user_agent: str = (
        "Mozilla/5.0 (iPhone; CPU iPhone OS 17_0 like Mac OS X) "
        "AppleWebKit/605.1.15 (KHTML, like Gecko) Mobile/15E148"
    )


class ObservabilitySettings(BaseModel):
    """Logfire telemetry configuration."""

    logfire_token: str | None = None

    # None sends only when a token is set
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override, e.g.:

        ENVIRONMENT=production
        HACKERNEWS__TIMEOUT=5
        OBSERVABILITY__LOGFIRE_TOKEN=...
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows HACKERNEWS__BASE_URL syntax
    )

    environment: Literal["test", "development", "production"] = "development"
    debug: bool = False

    # Nested settings
    hackernews: HackerNewsSettings = HackerNewsSettings()
    observability: ObservabilitySettings = ObservabilitySettings()
