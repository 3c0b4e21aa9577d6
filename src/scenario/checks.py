"""Check helpers used by the scenario steps.

A failed check raises CheckFailedError, which is also an AssertionError so
pytest reports it as an ordinary test failure.
"""

from typing import Any, Sized

import requests

from src.models.revue import ApiResponseDTO
from src.revue_client.errors import RevueCraftersError
from src.revue_client.redaction import sanitize_credentials

BODY_EXCERPT = 300


class CheckFailedError(RevueCraftersError, AssertionError):
    """Raised when a response does not match what a step expects."""
    pass


def _excerpt(response: requests.Response) -> str:
    return sanitize_credentials(response.text or "")[:BODY_EXCERPT]


def expect_status(response: requests.Response, expected: int, description: str) -> None:
    """Assert the HTTP status code.

    Args:
        response: The response to check
        expected: Expected status code (e.g. 200)
        description: Human readable expectation, used in the failure message

    Raises:
        CheckFailedError: If the status differs
    """
    if response.status_code != expected:
        raise CheckFailedError(
            f"{description}: expected HTTP {expected}, got {response.status_code}. "
            f"Body: {_excerpt(response)}"
        )


def expect_message(api_response: ApiResponseDTO, expected: str) -> None:
    """Assert the "msg" field of a decoded response."""
    if api_response.msg != expected:
        raise CheckFailedError(
            f"Expected message {expected!r}, got {api_response.msg!r}"
        )


def expect_body_contains(response: requests.Response, fragment: str) -> None:
    """Assert the raw response body contains a fragment."""
    if fragment not in (response.text or ""):
        raise CheckFailedError(
            f"Expected response body to contain {fragment!r}. Body: {_excerpt(response)}"
        )


def expect_not_empty(items: Sized, description: str) -> None:
    """Assert a collection is non-empty."""
    if len(items) == 0:
        raise CheckFailedError(f"{description}: expected a non-empty result")


def expect_present(value: Any, description: str) -> None:
    """Assert a value captured by an earlier step is available."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise CheckFailedError(f"{description} is not available")
