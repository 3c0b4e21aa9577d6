"""Client configuration loaded from environment variables.

Settings are read after python-dotenv has loaded a local .env file, so a
developer can point the suite at another deployment without exporting
variables in the shell.

Environment variables:
    REVUE_BASE_URL: Service root (default: the public RevueCrafters deployment)
    REVUE_TIMEOUT: Per-request timeout in seconds (default: 30)
"""

import os
from typing import NamedTuple, Optional
from urllib.parse import urlparse

from dotenv import load_dotenv

from .errors import ConfigurationError

DEFAULT_BASE_URL = "https://d2925tksfvgq8c.cloudfront.net"
DEFAULT_TIMEOUT = 30.0


class ClientConfig(NamedTuple):
    """Connection settings for the RevueCrafters API."""
    base_url: str
    timeout: float = DEFAULT_TIMEOUT

    def url_for(self, path: str) -> str:
        """Join an API path (e.g. "/api/Revue/All") onto the base URL."""
        return f"{self.base_url}/{path.lstrip('/')}"


def _validate_base_url(base_url: str) -> str:
    base_url = base_url.strip().rstrip('/')
    parsed = urlparse(base_url)
    if parsed.scheme not in ('http', 'https') or not parsed.netloc:
        raise ConfigurationError(
            'REVUE_BASE_URL', base_url, "must be an absolute http(s) URL"
        )
    return base_url


def _parse_timeout(raw: str) -> float:
    try:
        timeout = float(raw)
    except ValueError:
        raise ConfigurationError('REVUE_TIMEOUT', raw, "must be a number of seconds")
    if timeout <= 0:
        raise ConfigurationError('REVUE_TIMEOUT', raw, "must be greater than zero")
    return timeout


def load_config(base_url: Optional[str] = None) -> ClientConfig:
    """Build the client configuration from the environment.

    Args:
        base_url: Optional explicit base URL; takes precedence over REVUE_BASE_URL

    Returns:
        ClientConfig: Validated configuration

    Raises:
        ConfigurationError: If REVUE_BASE_URL or REVUE_TIMEOUT is malformed
    """
    load_dotenv()

    raw_url = base_url or os.getenv('REVUE_BASE_URL') or DEFAULT_BASE_URL
    raw_timeout = os.getenv('REVUE_TIMEOUT') or str(DEFAULT_TIMEOUT)

    return ClientConfig(
        base_url=_validate_base_url(raw_url),
        timeout=_parse_timeout(raw_timeout),
    )
