"""RevueCrafters client library.

This package provides Python abstractions over the RevueCrafters REST API:
credential loading, token authentication, and one method per Revue endpoint.
"""

from .errors import (
    RevueCraftersError,
    ConfigurationError,
    RevueAPIError,
    AuthenticationError,
    APIUnreachableError,
    APIAccessError,
    RateLimitedError,
    UnexpectedResponseError,
    TransportError,
)

__all__ = [
    "RevueCraftersError",
    "ConfigurationError",
    "RevueAPIError",
    "AuthenticationError",
    "APIUnreachableError",
    "APIAccessError",
    "RateLimitedError",
    "UnexpectedResponseError",
    "TransportError",
]
