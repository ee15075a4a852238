"""Client-side rate limit tracking for the GitHub and GitLab APIs."""

import asyncio
import logging
import time
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

import httpx
from rich.console import Console

from git_wrapped.exceptions import RateLimitExceededError

logger = logging.getLogger(__name__)
console = Console(stderr=True)

# Warn before a run when fewer core requests than this remain
LOW_REMAINING_THRESHOLD = 10


def format_time_remaining(seconds: float) -> str:
    """Format seconds into a human-friendly string."""
    if seconds <= 0:
        return "now"

    seconds = int(seconds)
    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)

    if hours:
        if minutes:
            return f"{hours} hr {minutes} min"
        return f"{hours} hour{'s' if hours != 1 else ''}"
    if minutes:
        if secs:
            return f"{minutes} min {secs} sec"
        return f"{minutes} minute{'s' if minutes != 1 else ''}"
    return f"{secs} second{'s' if secs != 1 else ''}"


def format_reset_time(reset_timestamp: float) -> str:
    """Format a reset timestamp as local HH:MM:SS."""
    return datetime.fromtimestamp(reset_timestamp).strftime("%H:%M:%S")


@dataclass
class RateLimitState:
    """Remaining budget for one API bucket."""

    limit: int
    remaining: int
    reset_time: float  # Unix timestamp
    window_seconds: int = 3600

    @property
    def is_exhausted(self) -> bool:
        return self.remaining <= 0

    @property
    def seconds_until_reset(self) -> float:
        return max(0, self.reset_time - time.time())

    def update_from_headers(self, headers: dict, prefix: str = "x-ratelimit-") -> None:
        """Update state from response headers.

        GitHub uses ``x-ratelimit-*``; GitLab uses ``ratelimit-*``.
        """
        headers = {k.lower(): v for k, v in headers.items()}
        try:
            if f"{prefix}limit" in headers:
                self.limit = int(headers[f"{prefix}limit"])
            if f"{prefix}remaining" in headers:
                self.remaining = int(headers[f"{prefix}remaining"])
            if f"{prefix}reset" in headers:
                self.reset_time = float(headers[f"{prefix}reset"])
        except ValueError:
            logger.debug("Ignoring malformed rate limit headers: %s", headers)


def _hourly(limit: int) -> RateLimitState:
    return RateLimitState(limit=limit, remaining=limit, reset_time=time.time() + 3600)


@dataclass
class RateLimiter:
    """Rate limiter for GitHub REST, GitHub Search, GitHub GraphQL and GitLab."""

    rest: RateLimitState = field(default_factory=lambda: _hourly(5000))
    # Search API: 30/minute, tracked separately from REST
    search: RateLimitState = field(
        default_factory=lambda: RateLimitState(
            limit=30, remaining=30, reset_time=time.time() + 60, window_seconds=60
        )
    )
    graphql: RateLimitState = field(default_factory=lambda: _hourly(5000))
    gitlab: RateLimitState = field(default_factory=lambda: _hourly(2000))

    _lock: asyncio.Lock = field(default_factory=asyncio.Lock)

    async def acquire(self, bucket: str, cost: int = 1) -> None:
        """Reserve ``cost`` requests from ``bucket``; raise if it is exhausted."""
        state: RateLimitState = getattr(self, bucket)
        async with self._lock:
            if state.remaining < cost and state.seconds_until_reset > 0:
                human_time = format_time_remaining(state.seconds_until_reset)
                reset_at = format_reset_time(state.reset_time)
                console.print(
                    f"[red]Rate limit exceeded[/red] for {bucket} API, "
                    f"resets in {human_time} (at {reset_at})"
                )
                raise RateLimitExceededError(
                    f"{bucket} rate limit exceeded. Resets in {human_time} (at {reset_at})"
                )
            state.remaining -= cost

    def update_from_headers(self, bucket: str, headers: httpx.Headers | dict) -> None:
        prefix = "ratelimit-" if bucket == "gitlab" else "x-ratelimit-"
        getattr(self, bucket).update_from_headers(dict(headers), prefix=prefix)

    def get_status(self) -> dict:
        """Current budget for every bucket."""
        return {
            name: {
                "remaining": state.remaining,
                "limit": state.limit,
                "reset_in": state.seconds_until_reset,
            }
            for name, state in (
                ("rest", self.rest),
                ("search", self.search),
                ("graphql", self.graphql),
                ("gitlab", self.gitlab),
            )
        }


# Global rate limiter instance
_rate_limiter: Optional[RateLimiter] = None


def get_rate_limiter() -> RateLimiter:
    """Get or create the global rate limiter instance."""
    global _rate_limiter
    if _rate_limiter is None:
        _rate_limiter = RateLimiter()
    return _rate_limiter


def reset_rate_limiter() -> None:
    """Reset the global rate limiter (useful for testing)."""
    global _rate_limiter
    _rate_limiter = None


async def check_rate_limit_from_api(
    api_url: str = "https://api.github.com",
    token: Optional[str] = None,
    timeout: float = 10.0,
) -> dict:
    """Ask GitHub for the current core and search budgets.

    Falls back to unauthenticated defaults when the endpoint cannot be read.
    """
    headers = {
        "Accept": "application/vnd.github+json",
        "User-Agent": "git-wrapped/0.1.0",
    }
    if token:
        headers["Authorization"] = f"Bearer {token}"

    try:
        async with httpx.AsyncClient(timeout=timeout) as client:
            response = await client.get(f"{api_url}/rate_limit", headers=headers)
        if response.status_code == 200:
            resources = response.json().get("resources", {})
            core = resources.get("core", {})
            search = resources.get("search", {})
            return {
                "core": {
                    "limit": core.get("limit", 60),
                    "remaining": core.get("remaining", 0),
                    "reset": core.get("reset", time.time() + 3600),
                },
                "search": {
                    "limit": search.get("limit", 10),
                    "remaining": search.get("remaining", 0),
                    "reset": search.get("reset", time.time() + 60),
                },
            }
        logger.warning("Rate limit check returned HTTP %d", response.status_code)
    except httpx.HTTPError as e:
        logger.warning("Could not check rate limit: %s", e)

    return {
        "core": {"limit": 60, "remaining": 60, "reset": time.time() + 3600},
        "search": {"limit": 10, "remaining": 10, "reset": time.time() + 60},
    }


def check_and_report_rate_limit(rate_info: dict, is_authenticated: bool) -> bool:
    """Report the core budget; return False when it is exhausted."""
    core = rate_info["core"]
    remaining = core["remaining"]
    limit = core["limit"]

    if remaining == 0:
        human_time = format_time_remaining(core["reset"] - time.time())
        reset_at = format_reset_time(core["reset"])
        console.print(f"[red]Rate limit exhausted[/red] (0/{limit} requests remaining)")
        console.print(f"[yellow]  Resets in: {human_time} (at {reset_at})[/yellow]")
        if not is_authenticated:
            console.print(
                "[dim]  Tip: set GITHUB_TOKEN for 5,000 requests/hour instead of 60[/dim]"
            )
        return False

    if remaining < LOW_REMAINING_THRESHOLD:
        console.print(
            f"[yellow]Warning: only {remaining}/{limit} API requests remaining[/yellow]"
        )

    return True
