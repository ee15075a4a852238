"""GitHub GraphQL API client for contribution calendars."""

import logging
from typing import Any, Optional

import httpx
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from git_wrapped.config import Config, get_config
from git_wrapped.exceptions import AuthenticationError, GraphQLError
from git_wrapped.utils.rate_limiter import RateLimiter, get_rate_limiter

logger = logging.getLogger(__name__)

# Includes private contributions when the token owner is the queried user
CONTRIBUTION_CALENDAR_QUERY = """
query($username: String!, $from: DateTime!, $to: DateTime!) {
  user(login: $username) {
    contributionsCollection(from: $from, to: $to) {
      contributionCalendar {
        totalContributions
        weeks {
          contributionDays {
            date
            contributionCount
          }
        }
      }
    }
  }
}
"""


class GitHubGraphQLClient:
    """Async client for the GitHub GraphQL API."""

    def __init__(
        self,
        config: Optional[Config] = None,
        rate_limiter: Optional[RateLimiter] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config or get_config()
        self.rate_limiter = rate_limiter or get_rate_limiter()
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    def _get_headers(self) -> dict[str, str]:
        if not self.config.github_token:
            raise AuthenticationError(
                "A GitHub token is required for the GraphQL API. "
                "Set the GITHUB_TOKEN environment variable."
            )
        return {
            "Authorization": f"Bearer {self.config.github_token}",
            "Content-Type": "application/json",
            "User-Agent": "git-wrapped/0.1.0",
        }

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                headers=self._get_headers(),
                timeout=self.config.request_timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    async def __aenter__(self) -> "GitHubGraphQLClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    @retry(
        retry=retry_if_exception_type((httpx.TimeoutException, httpx.ConnectError)),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=10),
        reraise=True,
    )
    async def execute(
        self,
        query: str,
        variables: Optional[dict[str, Any]] = None,
    ) -> dict[str, Any]:
        """Execute a GraphQL query and return its ``data`` member.

        Raises:
            GraphQLError: On a non-200 response or a response with ``errors``
        """
        await self.rate_limiter.acquire("graphql")

        client = await self._get_client()
        payload: dict[str, Any] = {"query": query}
        if variables:
            payload["variables"] = variables

        response = await client.post(self.config.github_graphql_url, json=payload)
        self.rate_limiter.update_from_headers("graphql", response.headers)

        if response.status_code == 401:
            raise AuthenticationError("Invalid GitHub token for GraphQL API")
        if response.status_code != 200:
            raise GraphQLError(
                f"GraphQL request failed with status {response.status_code}: {response.text}"
            )

        result = response.json()
        if result.get("errors"):
            messages = [e.get("message", "Unknown error") for e in result["errors"]]
            raise GraphQLError(f"GraphQL errors: {'; '.join(messages)}", errors=result["errors"])

        return result.get("data") or {}

    async def get_contribution_calendar(self, username: str, year: int) -> dict[str, Any]:
        """Get the contribution calendar for Jan 1 - Dec 31 of ``year``."""
        variables = {
            "username": username,
            "from": f"{year}-01-01T00:00:00Z",
            "to": f"{year}-12-31T23:59:59Z",
        }
        data = await self.execute(CONTRIBUTION_CALENDAR_QUERY, variables)

        if not data.get("user"):
            raise GraphQLError(f"User not found: {username}")

        return data["user"]["contributionsCollection"]["contributionCalendar"]
