"""Test fixtures for RevueCrafters tests.

This module provides:
- Test credentials (from the environment or .env.test)
- Canned API responses built as real requests.Response objects
"""

from .revue_credentials import get_test_credentials
from .sample_responses import (
    make_response,
    SAMPLE_CREATED,
    SAMPLE_EDITED,
    SAMPLE_DELETED,
    SAMPLE_NO_SUCH_REVUE,
    SAMPLE_REVUE_LIST,
)

__all__ = [
    "get_test_credentials",
    "make_response",
    "SAMPLE_CREATED",
    "SAMPLE_EDITED",
    "SAMPLE_DELETED",
    "SAMPLE_NO_SUCH_REVUE",
    "SAMPLE_REVUE_LIST",
]
