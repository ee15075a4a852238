"""Git Wrapped SDK - High-level API for building year-in-review reports."""

import logging
from dataclasses import replace
from datetime import datetime, timezone

from git_wrapped.config import Config, get_config
from git_wrapped.exceptions import AuthenticationError, GitWrappedError
from git_wrapped.models.wrapped import WrappedReport
from git_wrapped.scoring.weights import DEFAULT_SCORING_CONFIG, ScoringConfig
from git_wrapped.services.demo import DEMO_USERNAME, build_demo_report
from git_wrapped.services.github_collector import GitHubWrappedCollector
from git_wrapped.services.github_graphql_client import GitHubGraphQLClient
from git_wrapped.services.github_rest_client import GitHubRestClient
from git_wrapped.services.gitlab_client import GitLabClient
from git_wrapped.services.gitlab_collector import GitLabWrappedCollector
from git_wrapped.utils.rate_limiter import RateLimiter, get_rate_limiter

logger = logging.getLogger(__name__)

PLATFORMS = ("github", "gitlab")


class GitWrapped:
    """High-level SDK for building a user's year in review.

    Example usage:
        ```python
        from git_wrapped import GitWrapped

        async with GitWrapped(github_token="ghp_xxx") as client:
            report = await client.wrap("torvalds", year=2025)
            print(report.archetype.title, report.total_commits)

        async with GitWrapped(gitlab_token="glpat-xxx") as client:
            report = await client.wrap("my-user", platform="gitlab")
        ```

    Args:
        github_token: GitHub token (optional). Enables the GraphQL contribution
            calendar, private contributions and 5,000 requests/hour.
        gitlab_token: GitLab token, required for ``platform="gitlab"``.
        config: Full configuration; tokens passed explicitly override it.
        scoring: Scoring weights and thresholds.
    """

    def __init__(
        self,
        github_token: str | None = None,
        gitlab_token: str | None = None,
        config: Config | None = None,
        scoring: ScoringConfig = DEFAULT_SCORING_CONFIG,
    ):
        base = config or get_config()
        self._config = replace(
            base,
            github_token=github_token or base.github_token,
            gitlab_token=gitlab_token or base.gitlab_token,
        )
        self._scoring = scoring
        self._rate_limiter: RateLimiter | None = None
        self._rest_client: GitHubRestClient | None = None
        self._graphql_client: GitHubGraphQLClient | None = None
        self._gitlab_client: GitLabClient | None = None
        self._initialized = False

    @property
    def config(self) -> Config:
        return self._config

    @property
    def is_authenticated(self) -> bool:
        """Check if a GitHub token is configured."""
        return self._config.is_authenticated

    async def __aenter__(self) -> "GitWrapped":
        await self._initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def _initialize(self) -> None:
        if self._initialized:
            return

        self._rate_limiter = get_rate_limiter()
        self._rest_client = GitHubRestClient(
            config=self._config,
            rate_limiter=self._rate_limiter,
        )
        if self._config.is_authenticated:
            self._graphql_client = GitHubGraphQLClient(
                config=self._config,
                rate_limiter=self._rate_limiter,
            )
        if self._config.has_gitlab_token:
            self._gitlab_client = GitLabClient(
                config=self._config,
                rate_limiter=self._rate_limiter,
            )

        self._initialized = True
        logger.debug(
            "GitWrapped initialized (github_token=%s, gitlab_token=%s)",
            self._config.is_authenticated,
            self._config.has_gitlab_token,
        )

    async def close(self) -> None:
        """Close all HTTP connections."""
        if self._rest_client:
            await self._rest_client.close()
        if self._graphql_client:
            await self._graphql_client.close()
        if self._gitlab_client:
            await self._gitlab_client.close()
        self._initialized = False
        logger.debug("GitWrapped closed")

    def _ensure_initialized(self) -> None:
        if not self._initialized:
            raise GitWrappedError(
                "Client not initialized. Use 'async with GitWrapped(...) as client:'"
            )

    async def wrap(
        self,
        username: str,
        platform: str = "github",
        year: int | None = None,
        now: datetime | None = None,
    ) -> WrappedReport:
        """Build the year-in-review report for a user.

        Args:
            username: Account name on the platform. ``demo`` returns a
                synthetic report without any network access.
            platform: "github" or "gitlab"
            year: Target year (defaults to the current UTC year)
            now: Reference time for recency scoring (defaults to now)

        Returns:
            WrappedReport

        Raises:
            ValueError: For an unknown platform
            UserNotFoundError: If the user doesn't exist
            AuthenticationError: If a required token is missing or rejected
        """
        self._ensure_initialized()

        if platform not in PLATFORMS:
            raise ValueError(f"Unknown platform {platform!r}; expected one of {PLATFORMS}")

        now = now or datetime.now(timezone.utc)
        year = year or now.year

        if username.lower() == DEMO_USERNAME:
            logger.info("Building demo report for %d", year)
            return build_demo_report(year)

        logger.info("Building %s wrapped for %s (%d)", platform, username, year)

        if platform == "gitlab":
            if self._gitlab_client is None:
                raise AuthenticationError(
                    "A GitLab token is required. Set the GITLAB_TOKEN environment variable."
                )
            collector = GitLabWrappedCollector(
                self._gitlab_client,
                config=self._config,
                scoring=self._scoring,
            )
            return await collector.collect(username, year, now)

        collector = GitHubWrappedCollector(
            self._rest_client,
            self._graphql_client,
            config=self._config,
            scoring=self._scoring,
        )
        return await collector.collect(username, year, now)
