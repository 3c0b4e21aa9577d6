"""Scenario context threaded between the ordered steps."""

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional

from src.revue_client.api_wrapper import RevueAPI
from src.revue_client.auth import Authenticator
from src.revue_client.config import ClientConfig

logger = logging.getLogger(__name__)


@dataclass
class ScenarioContext:
    """State shared by the scenario steps.

    Attributes:
        api: Authenticated client used by every step
        last_revue_id: Id of the last revue returned by the listing step
        created_title: Title used by the create step, looked up by the listing step
    """
    api: RevueAPI
    last_revue_id: Optional[str] = None
    created_title: Optional[str] = None


@contextmanager
def open_context(
    config: ClientConfig,
    authenticator: Optional[Authenticator] = None,
) -> Iterator[ScenarioContext]:
    """Authenticate once and yield a context with an authenticated client.

    Authentication failures propagate: they abort the whole run. The client
    session is closed when the block exits, even if a step raised.

    Raises:
        AuthenticationError: If the token cannot be obtained
        APIUnreachableError: If the API cannot be reached
    """
    authenticator = authenticator or Authenticator()
    token = authenticator.fetch_access_token(config)
    logger.info(f"Authenticated against {config.base_url}")

    api = RevueAPI(config, token)
    try:
        yield ScenarioContext(api=api)
    finally:
        api.close()
