"""Authentication module for RevueCrafters credentials and access tokens.

Credentials come from environment variables (optionally via a .env file loaded
with python-dotenv) and fall back to the shared demo account. The access token
is obtained once, through a short-lived session, and then handed to RevueAPI.
"""

import logging
import os
from typing import NamedTuple, Optional

import requests
from dotenv import load_dotenv
from requests.exceptions import ConnectionError, Timeout

from .config import ClientConfig
from .errors import APIUnreachableError, AuthenticationError
from .redaction import sanitize_credentials

logger = logging.getLogger(__name__)

AUTH_PATH = "/api/User/Authentication"
DEFAULT_EMAIL = "pesho@example.com"
DEFAULT_PASSWORD = "123456"


class Credentials(NamedTuple):
    """RevueCrafters login credentials."""
    email: str
    password: str

    def __repr__(self) -> str:
        return f"Credentials(email={self.email!r}, password='***')"


class Authenticator:
    """Loads credentials and exchanges them for a JWT access token.

    Environment variables:
        REVUE_EMAIL: Account email (default: pesho@example.com)
        REVUE_PASSWORD: Account password (default: 123456)

    Example:
        >>> auth = Authenticator()
        >>> token = auth.fetch_access_token(load_config())
    """

    def __init__(self, credentials: Optional[Credentials] = None):
        """Initialize the authenticator by loading environment variables from .env file.

        Args:
            credentials: Explicit credentials; skips the environment lookup
        """
        load_dotenv()
        self._credentials = credentials

    def get_credentials(self) -> Credentials:
        """Get credentials from the environment, falling back to the demo account.

        Returns:
            Credentials: A named tuple containing email and password
        """
        if self._credentials is not None:
            return self._credentials

        # Empty strings count as unset
        email = os.getenv('REVUE_EMAIL') or DEFAULT_EMAIL
        password = os.getenv('REVUE_PASSWORD') or DEFAULT_PASSWORD
        return Credentials(email=email, password=password)

    def fetch_access_token(
        self,
        config: ClientConfig,
        session: Optional[requests.Session] = None,
    ) -> str:
        """Authenticate against the API and return the bearer token.

        A temporary session is used unless one is passed in; the authenticated
        client is built separately from the returned token.

        Args:
            config: Client configuration (base URL and timeout)
            session: Optional session to send the request with

        Returns:
            str: The JWT access token

        Raises:
            AuthenticationError: If the status is not 200 or the token is missing
            APIUnreachableError: If the API cannot be reached
        """
        creds = self.get_credentials()
        endpoint = config.url_for(AUTH_PATH)
        owns_session = session is None
        http = session or requests.Session()

        try:
            logger.info(f"Authenticating as {sanitize_credentials(creds.email)}")
            response = http.post(
                endpoint,
                json={'email': creds.email, 'password': creds.password},
                timeout=config.timeout,
            )
        except (Timeout, ConnectionError) as e:
            raise APIUnreachableError(endpoint=config.base_url) from e
        finally:
            if owns_session:
                http.close()

        if response.status_code != 200:
            body = sanitize_credentials(response.text or "")[:200]
            raise AuthenticationError(
                email=creds.email,
                endpoint=endpoint,
                reason=f"HTTP {response.status_code} {body}".rstrip(),
            )

        try:
            data = response.json()
        except ValueError:
            raise AuthenticationError(
                email=creds.email,
                endpoint=endpoint,
                reason="response body is not valid JSON",
            )

        token = data.get('accessToken') if isinstance(data, dict) else None
        if not isinstance(token, str) or not token.strip():
            raise AuthenticationError(
                email=creds.email,
                endpoint=endpoint,
                reason="JWT access token missing in response",
            )

        logger.debug("Access token obtained")
        return token
