"""Unit tests for scripts/cleanup_test_revues.py."""

import importlib.util
import logging
import sys
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from src.revue_client.config import ClientConfig
from src.revue_client.errors import AuthenticationError, UnexpectedResponseError

SCRIPT_PATH = Path(__file__).parents[2] / "scripts" / "cleanup_test_revues.py"

CONFIG = ClientConfig(base_url="https://revue.test")


@pytest.fixture(scope="module")
def script():
    spec = importlib.util.spec_from_file_location("cleanup_test_revues", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def script_mocks(script):
    with patch.object(script, 'load_config', return_value=CONFIG), \
            patch.object(script, 'Authenticator') as mock_authenticator, \
            patch.object(script, 'RevueAPI') as mock_api_cls, \
            patch.object(script, 'find_test_revues') as mock_find, \
            patch.object(script, 'delete_revues') as mock_delete, \
            patch.object(sys, 'argv', ["cleanup_test_revues.py", "--force"]):
        mock_authenticator.return_value.fetch_access_token.return_value = "tok"
        yield {
            'authenticator': mock_authenticator,
            'api_cls': mock_api_cls,
            'find': mock_find,
            'delete': mock_delete,
        }


class TestCleanupScript:

    def test_authentication_failure_returns_one(self, script, script_mocks):
        script_mocks['authenticator'].return_value.fetch_access_token.side_effect = (
            AuthenticationError("pesho@example.com", "https://revue.test", "HTTP 401")
        )

        assert script.main() == 1
        script_mocks['find'].assert_not_called()

    def test_listing_failure_is_logged_and_returns_one(self, script, script_mocks, caplog):
        script_mocks['find'].side_effect = UnexpectedResponseError(
            "https://revue.test/api/Revue/All", 500, "listing failed"
        )

        with caplog.at_level(logging.ERROR):
            assert script.main() == 1

        assert "Failed to list revues" in caplog.text
        script_mocks['delete'].assert_not_called()

    def test_nothing_to_delete(self, script, script_mocks):
        script_mocks['find'].return_value = []

        assert script.main() == 0
        script_mocks['delete'].assert_not_called()

    def test_forced_deletion(self, script, script_mocks):
        revues = [MagicMock(revue_id="abc", title="Test Revue 0f3c2a")]
        script_mocks['find'].return_value = revues
        script_mocks['delete'].return_value = (1, 0)

        assert script.main() == 0
        api = script_mocks['api_cls'].return_value.__enter__.return_value
        script_mocks['delete'].assert_called_once_with(api, revues)
