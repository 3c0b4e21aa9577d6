"""Unit tests for leftover test revue cleanup."""

import pytest
from unittest.mock import Mock

from src.revue_client.api_wrapper import RevueAPI
from src.revue_client.errors import APIUnreachableError, RevueAPIError
from src.scenario.cleanup import delete_revues, find_test_revues
from src.models.revue import ApiResponseDTO
from tests.fixtures.sample_responses import SAMPLE_DELETED, SAMPLE_REVUE_LIST, make_response


@pytest.fixture
def api():
    return Mock(spec=RevueAPI)


class TestFindTestRevues:

    def test_selects_revues_with_prefix(self, api):
        api.get_all_revues.return_value = make_response(200, SAMPLE_REVUE_LIST)

        found = find_test_revues(api)

        assert [r.title for r in found] == ["Test Revue 0f3c2a"]

    def test_custom_prefix(self, api):
        api.get_all_revues.return_value = make_response(200, SAMPLE_REVUE_LIST)
        assert [r.title for r in find_test_revues(api, "Morning")] == ["Morning Show"]

    def test_listing_failure_raises(self, api):
        api.get_all_revues.return_value = make_response(401, text="")
        with pytest.raises(RevueAPIError):
            find_test_revues(api)


class TestDeleteRevues:

    def revues(self):
        return [
            ApiResponseDTO(revue_id="a", title="Test Revue 1"),
            ApiResponseDTO(revue_id="b", title="Test Revue 2"),
        ]

    def test_dry_run_deletes_nothing(self, api):
        assert delete_revues(api, self.revues(), dry_run=True) == (2, 0)
        api.delete_revue.assert_not_called()

    def test_counts_successes_and_failures(self, api):
        api.delete_revue.side_effect = [
            make_response(200, SAMPLE_DELETED),
            make_response(400, text="There is no such revue!"),
        ]

        assert delete_revues(api, self.revues()) == (1, 1)

    def test_api_error_counts_as_failure(self, api):
        api.delete_revue.side_effect = [
            APIUnreachableError("https://revue.test"),
            make_response(200, SAMPLE_DELETED),
        ]

        assert delete_revues(api, self.revues()) == (1, 1)
