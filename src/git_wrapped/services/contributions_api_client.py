"""Client for the public GitHub contribution calendar service.

Used when no GitHub token is available, since the GraphQL calendar requires
authentication.
"""

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
from git_wrapped.exceptions import NotFoundError, PlatformAPIError

logger = logging.getLogger(__name__)


class ContributionsAPIClient:
    """Fetches ``{"contributions": [{"date", "count", ...}], "total": {...}}``."""

    def __init__(
        self,
        config: Optional[Config] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config or get_config()
        self._transport = transport

    @retry(
        retry=retry_if_exception_type((httpx.TimeoutException, httpx.ConnectError)),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=10),
        reraise=True,
    )
    async def get_year(self, username: str, year: int) -> list[dict[str, Any]]:
        url = f"{self.config.contributions_api_url}/{username}"
        async with httpx.AsyncClient(
            timeout=self.config.request_timeout,
            transport=self._transport,
        ) as client:
            response = await client.get(url, params={"y": year})

        if response.status_code == 404:
            raise NotFoundError(f"No contribution calendar for {username}")
        if response.status_code != 200:
            raise PlatformAPIError(
                f"Contributions API error: {response.status_code}",
                status_code=response.status_code,
            )

        return response.json().get("contributions") or []
