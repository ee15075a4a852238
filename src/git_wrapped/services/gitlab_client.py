"""GitLab REST API client."""

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
from git_wrapped.exceptions import (
    AuthenticationError,
    NotFoundError,
    PlatformAPIError,
    RateLimitError,
)
from git_wrapped.utils.pagination import get_next_page_number
from git_wrapped.utils.rate_limiter import RateLimiter, get_rate_limiter

logger = logging.getLogger(__name__)


class GitLabClient:
    """Async client for the GitLab v4 REST API (token required)."""

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
        if not self.config.gitlab_token:
            raise AuthenticationError(
                "A GitLab token is required. Set the GITLAB_TOKEN environment variable."
            )
        return {
            "Authorization": f"Bearer {self.config.gitlab_token}",
            "Content-Type": "application/json",
            "User-Agent": "git-wrapped/0.1.0",
        }

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.config.gitlab_api_url,
                headers=self._get_headers(),
                timeout=self.config.request_timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    async def __aenter__(self) -> "GitLabClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    @retry(
        retry=retry_if_exception_type((httpx.TimeoutException, httpx.ConnectError)),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=10),
        reraise=True,
    )
    async def _request(self, endpoint: str, params: Optional[dict] = None) -> httpx.Response:
        await self.rate_limiter.acquire("gitlab")

        client = await self._get_client()
        response = await client.get(endpoint, params=params)
        self.rate_limiter.update_from_headers("gitlab", response.headers)

        status = response.status_code
        if status == 401:
            raise AuthenticationError("Invalid GitLab token")
        if status == 404:
            raise NotFoundError(f"Resource not found: {endpoint}")
        if status == 429:
            raise RateLimitError("GitLab rate limit exceeded", status_code=429)
        if status >= 400:
            raise PlatformAPIError(f"GitLab API error: {status}", status_code=status)

        return response

    async def get_paginated(
        self,
        endpoint: str,
        params: Optional[dict] = None,
        max_pages: Optional[int] = None,
    ) -> list[dict[str, Any]]:
        """Follow ``x-next-page`` headers and collect every item."""
        params = {**(params or {}), "per_page": self.config.default_per_page}
        page: Optional[int] = 1
        fetched = 0
        items: list[dict[str, Any]] = []

        while page and (max_pages is None or fetched < max_pages):
            response = await self._request(endpoint, {**params, "page": page})
            data = response.json()
            if not isinstance(data, list):
                break
            items.extend(data)
            fetched += 1
            page = get_next_page_number(response.headers)

        return items

    async def get_current_user(self) -> dict[str, Any]:
        """Get the user that owns the token."""
        response = await self._request("/user")
        return response.json()

    async def find_user(self, username: str) -> dict[str, Any]:
        """Look up a user by username, then load their full profile."""
        response = await self._request("/users", params={"username": username})
        matches = response.json()
        if not matches:
            raise NotFoundError(f"GitLab user not found: {username}")
        profile = await self._request(f"/users/{matches[0]['id']}")
        return profile.json()

    async def get_user_projects(self, user_id: int) -> list[dict[str, Any]]:
        return await self.get_paginated(
            f"/users/{user_id}/projects",
            params={"order_by": "last_activity_at"},
            max_pages=self.config.max_repo_pages,
        )

    async def get_user_events(
        self,
        user_id: int,
        after: str,
        max_pages: int = 20,
    ) -> list[dict[str, Any]]:
        """Get events created strictly after the ``after`` date (YYYY-MM-DD)."""
        return await self.get_paginated(
            f"/users/{user_id}/events",
            params={"after": after},
            max_pages=max_pages,
        )

    async def get_project_languages(self, project_id: int) -> dict[str, float]:
        """Language -> percentage breakdown for a project."""
        response = await self._request(f"/projects/{project_id}/languages")
        return response.json() or {}
