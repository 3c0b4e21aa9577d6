"""Typed exception hierarchy for RevueCrafters-related errors.

All exceptions inherit from RevueCraftersError so callers can catch any
application-level failure in one place. API errors carry enough context
(endpoint, status) to explain what went wrong without leaking credentials.
"""

from typing import Optional


class RevueCraftersError(Exception):
    """Base exception for all revue-check errors."""
    pass


class ConfigurationError(RevueCraftersError):
    """Raised when an environment setting has an invalid value."""

    def __init__(self, setting: str, value: str, reason: str):
        super().__init__(f"Invalid {setting}={value!r}: {reason}")
        self.setting = setting
        self.value = value
        self.reason = reason


class RevueAPIError(RevueCraftersError):
    """Base exception for errors talking to the RevueCrafters API."""
    pass


class AuthenticationError(RevueAPIError):
    """Raised when the access token cannot be obtained."""

    def __init__(self, email: str, endpoint: str, reason: str):
        super().__init__(
            f"Authentication failed for {email} at {endpoint}: {reason}"
        )
        self.email = email
        self.endpoint = endpoint
        self.reason = reason


class APIUnreachableError(RevueAPIError):
    """Raised when the RevueCrafters API is not available or times out."""

    def __init__(self, endpoint: str):
        super().__init__(f"API is not available at {endpoint}")
        self.endpoint = endpoint


class APIAccessError(RevueAPIError):
    """Raised when API access fails after retries."""

    def __init__(self, message: str = "RevueCrafters API failure (after 3 retries)"):
        super().__init__(message)


class RateLimitedError(RevueAPIError):
    """Raised for a 429 response so the retry logic can back off."""

    def __init__(self, endpoint: str, retry_after: Optional[str] = None):
        message = f"Rate limited (429) at {endpoint}"
        if retry_after:
            message += f" (Retry-After: {retry_after})"
        super().__init__(message)
        self.endpoint = endpoint
        self.retry_after = retry_after
        self.status_code = 429


class UnexpectedResponseError(RevueAPIError):
    """Raised when a response body is not the JSON shape we expect."""

    def __init__(self, endpoint: str, status_code: int, reason: str):
        super().__init__(
            f"Unexpected response from {endpoint} (HTTP {status_code}): {reason}"
        )
        self.endpoint = endpoint
        self.status_code = status_code
        self.reason = reason


class TransportError(RevueAPIError):
    """Raised when a request fails below HTTP for reasons other than reachability.

    Covers broken chunked bodies, redirect loops and undecodable content.
    """

    def __init__(self, endpoint: str, reason: str):
        super().__init__(f"Request to {endpoint} failed: {reason}")
        self.endpoint = endpoint
        self.reason = reason
