"""API wrapper for the RevueCrafters REST API.

This module wraps a requests Session configured with the bearer token and
exposes one method per Revue endpoint. Responses are returned as-is, 4xx
included, because the checks assert on status codes and bodies. Transport
failures are translated to our typed exceptions and 429 responses go through
the retry logic.
"""

import logging
import time
from typing import List, Optional

import requests
from requests.exceptions import ConnectionError, RequestException, Timeout

from src.models.revue import ApiResponseDTO, RevueDTO

from .config import ClientConfig
from .errors import (
    APIUnreachableError,
    RateLimitedError,
    TransportError,
    UnexpectedResponseError,
)
from .redaction import sanitize_credentials
from .retry_logic import retry_on_rate_limit

logger = logging.getLogger(__name__)

CREATE_PATH = "/api/Revue/Create"
ALL_PATH = "/api/Revue/All"
EDIT_PATH = "/api/Revue/Edit"
DELETE_PATH = "/api/Revue/Delete"


class RevueAPI:
    """Authenticated client for the Revue endpoints.

    The underlying session is a scoped resource: use the client as a context
    manager (or call close()) so the connection pool is released at the end
    of the run.

    Example:
        >>> token = Authenticator().fetch_access_token(config)
        >>> with RevueAPI(config, token) as api:
        ...     response = api.get_all_revues()
    """

    def __init__(
        self,
        config: ClientConfig,
        access_token: str,
        session: Optional[requests.Session] = None,
    ):
        """Initialize the client.

        Args:
            config: Client configuration (base URL and timeout)
            access_token: JWT returned by Authenticator.fetch_access_token()
            session: Optional pre-built session (mainly for tests)
        """
        self._config = config
        self._session = session or requests.Session()
        self._session.headers.update({
            'Authorization': f"Bearer {access_token}",
            'Accept': 'application/json',
        })

    @property
    def config(self) -> ClientConfig:
        return self._config

    def __enter__(self) -> "RevueAPI":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        """Release the HTTP session."""
        self._session.close()

    def _validate_revue_id(self, revue_id: str) -> str:
        """Reject missing or blank revue ids before they hit the wire.

        Raises:
            ValueError: If revue_id is None or blank
        """
        if revue_id is None or not str(revue_id).strip():
            raise ValueError("revue_id cannot be empty")
        return str(revue_id).strip()

    def _send(self, method: str, path: str, **kwargs) -> requests.Response:
        """Send one request, retrying on 429.

        Raises:
            APIUnreachableError: On connection errors and timeouts
            TransportError: On any other requests failure
            APIAccessError: If the rate limit persists after retries
        """
        url = self._config.url_for(path)

        def _request() -> requests.Response:
            started = time.monotonic()
            try:
                response = self._session.request(
                    method, url, timeout=self._config.timeout, **kwargs
                )
            except (Timeout, ConnectionError) as e:
                logger.error(f"{method} {path} failed: {sanitize_credentials(str(e))}")
                raise APIUnreachableError(endpoint=self._config.base_url) from e
            except RequestException as e:
                reason = sanitize_credentials(str(e))
                logger.error(f"{method} {path} failed: {reason}")
                raise TransportError(url, reason) from e

            elapsed = time.monotonic() - started
            logger.debug(f"{method} {path} -> {response.status_code} ({elapsed:.2f}s)")
            if response.status_code == 429:
                raise RateLimitedError(url, response.headers.get('Retry-After'))
            return response

        return retry_on_rate_limit(_request)

    def create_revue(self, revue: RevueDTO) -> requests.Response:
        """POST /api/Revue/Create with the given payload."""
        return self._send('POST', CREATE_PATH, json=revue.to_payload())

    def get_all_revues(self) -> requests.Response:
        """GET /api/Revue/All."""
        return self._send('GET', ALL_PATH)

    def edit_revue(self, revue_id: str, revue: RevueDTO) -> requests.Response:
        """PUT /api/Revue/Edit?revueId=<id> with the given payload.

        Raises:
            ValueError: If revue_id is empty
        """
        revue_id = self._validate_revue_id(revue_id)
        return self._send(
            'PUT', EDIT_PATH, params={'revueId': revue_id}, json=revue.to_payload()
        )

    def delete_revue(self, revue_id: str) -> requests.Response:
        """DELETE /api/Revue/Delete?revueId=<id>.

        Raises:
            ValueError: If revue_id is empty
        """
        revue_id = self._validate_revue_id(revue_id)
        return self._send('DELETE', DELETE_PATH, params={'revueId': revue_id})


def _decode_json(response: requests.Response):
    try:
        return response.json()
    except ValueError:
        excerpt = sanitize_credentials(response.text or "")[:200]
        raise UnexpectedResponseError(
            endpoint=response.url,
            status_code=response.status_code,
            reason=f"body is not valid JSON: {excerpt!r}",
        )


def parse_response(response: requests.Response) -> ApiResponseDTO:
    """Decode a single-object response body.

    Raises:
        UnexpectedResponseError: If the body is not a JSON object
    """
    data = _decode_json(response)
    if not isinstance(data, dict):
        raise UnexpectedResponseError(
            endpoint=response.url,
            status_code=response.status_code,
            reason="expected a JSON object",
        )
    return ApiResponseDTO.from_dict(data)


def parse_response_list(response: requests.Response) -> List[ApiResponseDTO]:
    """Decode a JSON array response body.

    Raises:
        UnexpectedResponseError: If the body is not a JSON array of objects
    """
    data = _decode_json(response)
    return ApiResponseDTO.list_from_json(
        data, endpoint=response.url, status_code=response.status_code
    )
