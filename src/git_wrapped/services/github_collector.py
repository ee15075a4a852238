"""GitHub year-in-review collector."""

import asyncio
import logging
from datetime import date, datetime, timezone
from typing import Optional

import httpx

from git_wrapped.config import Config
from git_wrapped.exceptions import GitWrappedError, NotFoundError, UserNotFoundError
from git_wrapped.models.activity import ActivityEvent, hour_histogram
from git_wrapped.models.contribution import DailyContribution, calendar_from_graphql
from git_wrapped.models.repository import RepositoryRecord
from git_wrapped.models.user import UserProfile
from git_wrapped.models.wrapped import WrappedReport
from git_wrapped.scoring.weights import DEFAULT_SCORING_CONFIG, ScoringConfig
from git_wrapped.services.contributions_api_client import ContributionsAPIClient
from git_wrapped.services.github_graphql_client import GitHubGraphQLClient
from git_wrapped.services.github_rest_client import GitHubRestClient
from git_wrapped.services.report_builder import build_wrapped_report

logger = logging.getLogger(__name__)

# Optional fetches degrade to empty data on any of these
RECOVERABLE_ERRORS = (GitWrappedError, httpx.HTTPError)


class GitHubWrappedCollector:
    """Fetches a GitHub user's year and runs it through the scoring pipeline.

    Only the profile lookup is mandatory. Repositories, the contribution
    calendar, events and search counts are fetched concurrently, and any of
    them that fails is replaced by an empty result.
    """

    def __init__(
        self,
        rest_client: GitHubRestClient,
        graphql_client: GitHubGraphQLClient | None = None,
        contributions_client: ContributionsAPIClient | None = None,
        config: Optional[Config] = None,
        scoring: ScoringConfig = DEFAULT_SCORING_CONFIG,
    ):
        self.rest_client = rest_client
        self.graphql_client = graphql_client
        self.config = config or rest_client.config
        self.contributions_client = contributions_client or ContributionsAPIClient(
            config=self.config
        )
        self.scoring = scoring

    async def collect_profile(self, username: str) -> UserProfile:
        logger.debug("Fetching profile for %s", username)
        try:
            data = await self.rest_client.get_user(username)
        except NotFoundError as e:
            raise UserNotFoundError(username, platform="github") from e
        return UserProfile.from_github(data)

    async def collect_repos(self, username: str) -> list[RepositoryRecord]:
        try:
            data = await self.rest_client.get_user_repos(username)
        except RECOVERABLE_ERRORS as e:
            logger.warning("Failed to fetch repositories for %s: %s", username, e)
            return []
        repos = [RepositoryRecord.from_github(r) for r in data]
        logger.debug("Found %d repositories", len(repos))
        return repos

    async def collect_calendar(self, username: str, year: int) -> list[DailyContribution]:
        """Daily contribution counts: GraphQL with a token, public API without."""
        try:
            if self.graphql_client:
                calendar = await self.graphql_client.get_contribution_calendar(username, year)
                days = calendar_from_graphql(calendar)
            else:
                data = await self.contributions_client.get_year(username, year)
                days = [DailyContribution.from_contributions_api(d) for d in data if d.get("date")]
        except RECOVERABLE_ERRORS as e:
            logger.warning("Failed to fetch contribution calendar for %s: %s", username, e)
            return []

        start, end = date(year, 1, 1), date(year, 12, 31)
        return [d for d in days if start <= d.date <= end]

    async def collect_events(self, username: str, year: int) -> list[ActivityEvent]:
        try:
            data = await self.rest_client.get_user_events(username)
        except RECOVERABLE_ERRORS as e:
            logger.warning("Failed to fetch events for %s: %s", username, e)
            return []
        events = [ActivityEvent.from_github(e) for e in data]
        return [e for e in events if e.created_at.year == year]

    async def count_search(self, query: str) -> int:
        try:
            return await self.rest_client.search_issue_count(query)
        except RECOVERABLE_ERRORS as e:
            logger.warning("Search failed for %r: %s", query, e)
            return 0

    async def collect(
        self,
        username: str,
        year: int,
        now: datetime | None = None,
    ) -> WrappedReport:
        """Collect everything for ``username`` in ``year`` and build the report.

        Raises:
            UserNotFoundError: If the user does not exist
            AuthenticationError: If the configured token is rejected
        """
        now = now or datetime.now(timezone.utc)
        profile = await self.collect_profile(username)

        created = f"created:{year}-01-01..{year}-12-31"
        repos, daily, events, prs, issues, reviews = await asyncio.gather(
            self.collect_repos(username),
            self.collect_calendar(username, year),
            self.collect_events(username, year),
            self.count_search(f"author:{username} type:pr {created}"),
            self.count_search(f"author:{username} type:issue {created}"),
            self.count_search(f"reviewed-by:{username} -author:{username} type:pr {created}"),
        )

        return build_wrapped_report(
            platform="github",
            profile=profile,
            repos=repos,
            daily=daily,
            hour_counts=hour_histogram(events, self.config.timezone),
            prs=prs,
            issues=issues,
            reviews=reviews,
            year=year,
            now=now,
            config=self.scoring,
        )
