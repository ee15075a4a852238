"""Configuration management for Git Wrapped."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv


@dataclass
class Config:
    """Application configuration."""

    github_token: str | None = None
    gitlab_token: str | None = None
    github_api_url: str = "https://api.github.com"
    github_graphql_url: str = "https://api.github.com/graphql"
    gitlab_api_url: str = "https://gitlab.com/api/v4"
    # Public contribution calendar, used when no GitHub token is configured
    contributions_api_url: str = "https://github-contributions-api.jogruber.de/v4"

    # IANA timezone used to bucket event timestamps into hours of the day
    timezone: str = "UTC"

    # Rate limits
    rest_rate_limit: int = 5000  # requests per hour (authenticated)
    rest_rate_limit_unauth: int = 60  # requests per hour (unauthenticated)
    search_rate_limit: int = 30  # requests per minute

    # Pagination
    default_per_page: int = 100
    max_repo_pages: int = 5
    max_events_pages: int = 3  # Events API stops at 300 events
    max_projects_for_languages: int = 30

    # Timeouts
    request_timeout: float = 30.0

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        # override=False ensures environment variables take precedence over .env
        load_dotenv(override=False)

        github_token = os.getenv("GIT_WRAPPED_GITHUB_TOKEN") or os.getenv("GITHUB_TOKEN")
        gitlab_token = os.getenv("GIT_WRAPPED_GITLAB_TOKEN") or os.getenv("GITLAB_TOKEN")

        return cls(
            github_token=github_token,
            gitlab_token=gitlab_token,
            github_api_url=os.getenv("GITHUB_API_URL", "https://api.github.com"),
            github_graphql_url=os.getenv(
                "GITHUB_GRAPHQL_URL", "https://api.github.com/graphql"
            ),
            gitlab_api_url=os.getenv("GITLAB_API_URL", "https://gitlab.com/api/v4"),
            timezone=os.getenv("GIT_WRAPPED_TIMEZONE", "UTC"),
        )

    @property
    def is_authenticated(self) -> bool:
        """Check if a GitHub token is configured."""
        return bool(self.github_token)

    @property
    def has_gitlab_token(self) -> bool:
        return bool(self.gitlab_token)

    @property
    def effective_rate_limit(self) -> int:
        """Get the effective GitHub rate limit based on authentication status."""
        return self.rest_rate_limit if self.is_authenticated else self.rest_rate_limit_unauth


# Global config instance
_config: Config | None = None


def get_config() -> Config:
    """Get or create the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.from_env()
    return _config


def set_config(config: Config | None) -> None:
    """Set the global configuration instance (useful for testing)."""
    global _config
    _config = config
