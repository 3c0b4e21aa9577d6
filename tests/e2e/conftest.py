"""Pytest configuration and fixtures for E2E tests.

Authentication happens once per session. If it fails the whole run is
stopped: none of the checks can pass without a token.
"""

import logging
from typing import Generator

import pytest

from src.revue_client.auth import Authenticator
from src.revue_client.config import ClientConfig, load_config
from src.revue_client.errors import APIUnreachableError, AuthenticationError
from src.scenario.context import ScenarioContext, open_context
from tests.fixtures.revue_credentials import get_test_credentials

logger = logging.getLogger(__name__)


@pytest.fixture(scope="session")
def client_config() -> ClientConfig:
    """Client configuration for the deployment under test."""
    return load_config()


@pytest.fixture(scope="session")
def test_authenticator() -> Authenticator:
    """Authenticator bound to the test account credentials."""
    return Authenticator(get_test_credentials())


@pytest.fixture(scope="session")
def scenario_context(
    client_config: ClientConfig,
    test_authenticator: Authenticator,
) -> Generator[ScenarioContext, None, None]:
    """Authenticated context shared by the ordered CRUD checks.

    The client session is released when the test session ends.

    Yields:
        ScenarioContext whose last_revue_id is filled in by the listing check
    """
    try:
        with open_context(client_config, test_authenticator) as context:
            logger.info(f"E2E session authenticated against {client_config.base_url}")
            yield context
    except (AuthenticationError, APIUnreachableError) as e:
        pytest.exit(f"Aborting E2E run, setup failed: {e}", returncode=3)
