"""Removal of revues left behind by interrupted scenario runs.

The create step titles every revue "Test Revue <hex>"; when a run stops
before the delete step those revues stay on the server.
"""

import logging
from typing import List, Tuple

from src.models.revue import ApiResponseDTO
from src.revue_client.api_wrapper import RevueAPI, parse_response_list
from src.revue_client.errors import RevueAPIError

from .steps import TITLE_PREFIX

logger = logging.getLogger(__name__)


def find_test_revues(api: RevueAPI, prefix: str = TITLE_PREFIX) -> List[ApiResponseDTO]:
    """Return listed revues whose title starts with the given prefix.

    Raises:
        UnexpectedResponseError: If the listing is not a JSON array
        RevueAPIError: If the listing request fails
    """
    response = api.get_all_revues()
    if response.status_code != 200:
        raise RevueAPIError(f"Listing revues failed with HTTP {response.status_code}")

    matches = [
        item for item in parse_response_list(response)
        if item.revue_id and (item.title or "").startswith(f"{prefix} ")
    ]
    logger.info(f"Found {len(matches)} revue(s) titled '{prefix} ...'")
    return matches


def delete_revues(
    api: RevueAPI,
    revues: List[ApiResponseDTO],
    dry_run: bool = False,
) -> Tuple[int, int]:
    """Delete the given revues one by one.

    Returns:
        Tuple of (deleted_count, failed_count)
    """
    deleted_count = 0
    failed_count = 0

    for revue in revues:
        if dry_run:
            logger.info(f"[DRY RUN] Would delete {revue.revue_id}: {revue.title}")
            deleted_count += 1
            continue

        try:
            response = api.delete_revue(revue.revue_id)
        except RevueAPIError as e:
            logger.error(f"Failed to delete {revue.revue_id}: {e}")
            failed_count += 1
            continue

        if response.status_code == 200:
            logger.info(f"Deleted {revue.revue_id}: {revue.title}")
            deleted_count += 1
        else:
            logger.error(f"Failed to delete {revue.revue_id}: HTTP {response.status_code}")
            failed_count += 1

    return deleted_count, failed_count
