"""Exceptions for Git Wrapped.

Exception Hierarchy:
    GitWrappedError (base)
    ├── PlatformAPIError (HTTP API errors with status codes)
    │   ├── RateLimitError (403/429 rate limit from API response)
    │   └── NotFoundError (404 not found)
    ├── GraphQLError (GitHub GraphQL API errors)
    ├── RateLimitExceededError (local rate limit tracking, before making request)
    ├── UserNotFoundError (high-level user not found)
    └── AuthenticationError (token invalid or required)

The scoring engine itself never raises: these are only produced by the
HTTP clients and the platform collectors that feed it.
"""

__all__ = [
    "GitWrappedError",
    "PlatformAPIError",
    "RateLimitError",
    "NotFoundError",
    "GraphQLError",
    "RateLimitExceededError",
    "UserNotFoundError",
    "AuthenticationError",
]


class GitWrappedError(Exception):
    """Base exception for all Git Wrapped errors."""

    pass


class PlatformAPIError(GitWrappedError):
    """Base exception for GitHub/GitLab HTTP API errors."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_body: dict | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body


class RateLimitError(PlatformAPIError):
    """Raised when the platform API rejects a request because of rate limiting.

    For preemptive rate limiting (before making requests), see RateLimitExceededError.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = 403,
        response_body: dict | None = None,
        reset_time: float | None = None,
    ):
        super().__init__(message, status_code=status_code, response_body=response_body)
        self.reset_time = reset_time


class NotFoundError(PlatformAPIError):
    """Raised when a platform resource is not found (HTTP 404)."""

    def __init__(
        self,
        message: str,
        status_code: int | None = 404,
        response_body: dict | None = None,
    ):
        super().__init__(message, status_code=status_code, response_body=response_body)


class GraphQLError(GitWrappedError):
    """Exception for GitHub GraphQL API errors."""

    def __init__(self, message: str, errors: list | None = None):
        super().__init__(message)
        self.errors = errors or []


class RateLimitExceededError(GitWrappedError):
    """Raised by the local rate limiter when limits are exhausted.

    Unlike RateLimitError, this does not involve an actual API call.
    """

    pass


class UserNotFoundError(GitWrappedError):
    """Raised when a user does not exist on the platform."""

    def __init__(self, username: str, platform: str = "github"):
        super().__init__(f"User not found on {platform}: {username}")
        self.username = username
        self.platform = platform


class AuthenticationError(GitWrappedError):
    """Raised when authentication fails or a token is required."""

    pass
