"""GitHub REST API client."""

import asyncio
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
from git_wrapped.utils.pagination import get_next_page_url
from git_wrapped.utils.rate_limiter import RateLimiter, get_rate_limiter

logger = logging.getLogger(__name__)

USER_AGENT = "git-wrapped/0.1.0"


def _json_body(response: httpx.Response) -> dict:
    try:
        body = response.json() if response.content else {}
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


def raise_for_status(response: httpx.Response, endpoint: str) -> None:
    """Translate an error response into the package exception hierarchy."""
    status = response.status_code
    if status < 400:
        return

    body = _json_body(response)
    message = body.get("message", "Unknown error")

    if status == 401:
        raise AuthenticationError(f"Invalid or expired token ({message})")
    if status == 404:
        raise NotFoundError(f"Resource not found: {endpoint}", response_body=body)
    if status in (403, 429) and (
        "rate limit" in message.lower() or response.headers.get("x-ratelimit-remaining") == "0"
    ):
        reset = response.headers.get("x-ratelimit-reset")
        raise RateLimitError(
            "Rate limit exceeded",
            status_code=status,
            response_body=body,
            reset_time=float(reset) if reset else None,
        )
    if status >= 500:
        raise PlatformAPIError(f"Server error: {status}", status_code=status)
    raise PlatformAPIError(f"API error: {message}", status_code=status, response_body=body)


class GitHubRestClient:
    """Async client for the GitHub REST API."""

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
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
            "User-Agent": USER_AGENT,
        }
        if self.config.github_token:
            headers["Authorization"] = f"Bearer {self.config.github_token}"
        return headers

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.config.github_api_url,
                headers=self._get_headers(),
                timeout=self.config.request_timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    async def __aenter__(self) -> "GitHubRestClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    @retry(
        retry=retry_if_exception_type((httpx.TimeoutException, httpx.ConnectError)),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=10),
        reraise=True,
    )
    async def _request(
        self,
        method: str,
        endpoint: str,
        is_search: bool = False,
        **kwargs,
    ) -> httpx.Response:
        """Make an API request with rate limiting and retries."""
        bucket = "search" if is_search else "rest"
        await self.rate_limiter.acquire(bucket)

        client = await self._get_client()
        response = await client.request(method, endpoint, **kwargs)
        self.rate_limiter.update_from_headers(bucket, response.headers)

        raise_for_status(response, endpoint)
        return response

    async def get(self, endpoint: str, **kwargs) -> Any:
        """Make a GET request and return the JSON response."""
        response = await self._request("GET", endpoint, **kwargs)
        return response.json()

    async def get_paginated(
        self,
        endpoint: str,
        max_pages: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> list[dict[str, Any]]:
        """Follow Link headers and collect every item, up to ``max_pages``."""
        per_page = per_page or self.config.default_per_page
        separator = "&" if "?" in endpoint else "?"
        url: Optional[str] = f"{endpoint}{separator}per_page={per_page}&page=1"

        items: list[dict[str, Any]] = []
        page = 1
        while url and (max_pages is None or page <= max_pages):
            response = await self._request("GET", url)
            data = response.json()
            if not isinstance(data, list):
                break
            items.extend(data)

            url = get_next_page_url(response.headers.get("Link"))
            page += 1
            if url:
                await asyncio.sleep(0.1)

        return items

    async def get_user(self, username: str) -> dict[str, Any]:
        """Get user profile data."""
        return await self.get(f"/users/{username}")

    async def get_user_repos(self, username: str) -> list[dict[str, Any]]:
        """Get the repositories the user owns or works on.

        With a token this includes collaborator and organization repositories
        of the authenticated user; without one, only public repositories.
        """
        if self.config.github_token:
            endpoint = (
                "/user/repos?sort=pushed"
                "&affiliation=owner,collaborator,organization_member&visibility=all"
            )
        else:
            endpoint = f"/users/{username}/repos?sort=pushed&type=all"
        return await self.get_paginated(endpoint, max_pages=self.config.max_repo_pages)

    async def get_user_events(self, username: str) -> list[dict[str, Any]]:
        """Get the user's recent events (the API keeps at most 300)."""
        return await self.get_paginated(
            f"/users/{username}/events",
            max_pages=self.config.max_events_pages,
        )

    async def search_issue_count(self, query: str) -> int:
        """Return ``total_count`` for an issue/PR search without fetching items."""
        data = await self.get(
            "/search/issues",
            is_search=True,
            params={"q": query, "per_page": 1},
        )
        return int(data.get("total_count") or 0)
