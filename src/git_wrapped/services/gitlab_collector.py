"""GitLab year-in-review collector."""

import asyncio
import logging
from datetime import date, datetime, timedelta, timezone
from typing import Any, Optional

import httpx

from git_wrapped.config import Config
from git_wrapped.exceptions import GitWrappedError, NotFoundError, UserNotFoundError
from git_wrapped.models.activity import ActivityEvent, ActivityKind, hour_histogram
from git_wrapped.models.contribution import fill_calendar
from git_wrapped.models.repository import RepositoryRecord
from git_wrapped.models.user import UserProfile
from git_wrapped.models.wrapped import WrappedReport
from git_wrapped.scoring.weights import DEFAULT_SCORING_CONFIG, ScoringConfig
from git_wrapped.services.gitlab_client import GitLabClient
from git_wrapped.services.report_builder import build_wrapped_report

logger = logging.getLogger(__name__)

RECOVERABLE_ERRORS = (GitWrappedError, httpx.HTTPError)
LANGUAGE_BATCH_SIZE = 10


def dominant_language(breakdown: dict[str, float]) -> str | None:
    """Language with the largest share, or None for an empty breakdown."""
    if not breakdown:
        return None
    return max(breakdown.items(), key=lambda item: item[1])[0]


class GitLabWrappedCollector:
    """Fetches a GitLab user's year and runs it through the scoring pipeline.

    GitLab has no contribution calendar endpoint, so the daily series is
    rebuilt from push events, and pull request, issue and review counts come
    from the same event feed.
    """

    def __init__(
        self,
        client: GitLabClient,
        config: Optional[Config] = None,
        scoring: ScoringConfig = DEFAULT_SCORING_CONFIG,
    ):
        self.client = client
        self.config = config or client.config
        self.scoring = scoring

    async def collect_profile(self, username: str | None) -> UserProfile:
        """Profile of ``username``, or of the token owner when no name is given."""
        try:
            if username:
                data = await self.client.find_user(username)
            else:
                data = await self.client.get_current_user()
        except NotFoundError as e:
            raise UserNotFoundError(username or "", platform="gitlab") from e
        return UserProfile.from_gitlab(data)

    async def collect_projects(self, user_id: int) -> list[dict[str, Any]]:
        try:
            return await self.client.get_user_projects(user_id)
        except RECOVERABLE_ERRORS as e:
            logger.warning("Failed to fetch projects for user %s: %s", user_id, e)
            return []

    async def collect_events(self, user_id: int, year: int) -> list[ActivityEvent]:
        # ``after`` is exclusive, so ask for everything after Dec 31 of the previous year
        after = (date(year, 1, 1) - timedelta(days=1)).isoformat()
        try:
            data = await self.client.get_user_events(user_id, after)
        except RECOVERABLE_ERRORS as e:
            logger.warning("Failed to fetch events for user %s: %s", user_id, e)
            return []
        events = [ActivityEvent.from_gitlab(e) for e in data]
        return [e for e in events if e.created_at.year == year]

    async def _fetch_language(self, project_id: int) -> str | None:
        try:
            return dominant_language(await self.client.get_project_languages(project_id))
        except RECOVERABLE_ERRORS as e:
            logger.debug("No language breakdown for project %s: %s", project_id, e)
            return None

    async def collect_languages(self, projects: list[dict[str, Any]]) -> dict[int, str]:
        """Dominant language for the most recently active projects."""
        candidates = [p for p in projects if p.get("id") is not None]
        candidates = candidates[: self.config.max_projects_for_languages]

        languages: dict[int, str] = {}
        for i in range(0, len(candidates), LANGUAGE_BATCH_SIZE):
            batch = candidates[i : i + LANGUAGE_BATCH_SIZE]
            results = await asyncio.gather(*(self._fetch_language(p["id"]) for p in batch))
            for project, language in zip(batch, results):
                if language:
                    languages[project["id"]] = language
        return languages

    async def collect(
        self,
        username: str | None,
        year: int,
        now: datetime | None = None,
    ) -> WrappedReport:
        now = now or datetime.now(timezone.utc)
        profile = await self.collect_profile(username)
        if profile.platform_id is None:
            raise UserNotFoundError(username or "", platform="gitlab")

        projects, events = await asyncio.gather(
            self.collect_projects(profile.platform_id),
            self.collect_events(profile.platform_id, year),
        )
        languages = await self.collect_languages(projects)
        repos = [RepositoryRecord.from_gitlab(p, languages.get(p.get("id"))) for p in projects]

        commits_by_date: dict[date, int] = {}
        counts = {kind: 0 for kind in ActivityKind}
        for event in events:
            kind = event.gitlab_kind
            counts[kind] += 1
            if kind is ActivityKind.COMMIT:
                day = event.created_at.date()
                commits_by_date[day] = commits_by_date.get(day, 0) + event.commit_count

        end = min(date(year, 12, 31), now.date())
        daily = fill_calendar(commits_by_date, date(year, 1, 1), end)

        return build_wrapped_report(
            platform="gitlab",
            profile=profile,
            repos=repos,
            daily=daily,
            hour_counts=hour_histogram(events, self.config.timezone),
            prs=counts[ActivityKind.PULL_REQUEST],
            issues=counts[ActivityKind.ISSUE],
            reviews=counts[ActivityKind.REVIEW],
            year=year,
            now=now,
            public_repos=len(projects),
            config=self.scoring,
        )
