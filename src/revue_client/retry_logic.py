"""Retry logic with exponential backoff for RevueCrafters API rate limits.

Only 429 responses are retried (1s, 2s, 4s). Everything else, including the
4xx responses the checks assert on, fails fast.
"""

import time
import logging
from typing import Callable, TypeVar
from functools import wraps

from .errors import APIAccessError, RateLimitedError

logger = logging.getLogger(__name__)

T = TypeVar('T')

MAX_RETRIES = 3


def retry_on_rate_limit(func: Callable[..., T], *args, **kwargs) -> T:
    """Retry function on 429 rate limit with exponential backoff.

    Args:
        func: The function to execute with retry logic
        *args: Positional arguments to pass to the function
        **kwargs: Keyword arguments to pass to the function

    Returns:
        The return value of the function

    Raises:
        APIAccessError: If rate limit persists after 3 retries
        Other exceptions: Passed through immediately without retry

    Example:
        >>> response = retry_on_rate_limit(session.get, url)
    """
    for retry_num in range(MAX_RETRIES + 1):
        try:
            return func(*args, **kwargs)
        except Exception as e:
            if not _is_rate_limit_error(e):
                raise

            if retry_num >= MAX_RETRIES:
                logger.error(
                    f"Rate limit persisted after {MAX_RETRIES} retries, giving up"
                )
                raise APIAccessError() from e

            wait_time = 2 ** retry_num
            logger.info(
                f"Rate limit hit, retrying in {wait_time}s "
                f"(retry {retry_num + 1}/{MAX_RETRIES})"
            )
            time.sleep(wait_time)

    # Unreachable: the loop either returns or raises
    raise APIAccessError()


def as_decorator(func: Callable[..., T]) -> Callable[..., T]:
    """Decorator version of retry_on_rate_limit.

    Example:
        >>> @as_decorator
        ... def list_revues():
        ...     return api.get_all_revues()
    """
    @wraps(func)
    def wrapper(*args, **kwargs) -> T:
        return retry_on_rate_limit(func, *args, **kwargs)

    return wrapper


def _is_rate_limit_error(exception: Exception) -> bool:
    """Check if an exception represents a rate limit (429) error."""
    if isinstance(exception, RateLimitedError):
        return True

    if getattr(exception, 'status_code', None) == 429:
        return True

    # requests.HTTPError pattern
    response = getattr(exception, 'response', None)
    if response is not None and getattr(response, 'status_code', None) == 429:
        return True

    return False
