"""The ordered Revue CRUD checks.

Each step takes the ScenarioContext, performs one HTTP interaction and raises
CheckFailedError when the response is not what the service should return.
The order of SCENARIO_STEPS matters: the edit and delete steps act on the id
captured by the listing step.
"""

import logging
from typing import Callable, Tuple

from src.models.revue import RevueDTO
from src.revue_client.api_wrapper import parse_response, parse_response_list

from .checks import (
    expect_body_contains,
    expect_message,
    expect_not_empty,
    expect_present,
    expect_status,
)
from .context import ScenarioContext

logger = logging.getLogger(__name__)

TITLE_PREFIX = "Test Revue"
FAKE_REVUE_ID = "123"

MSG_CREATED = "Successfully created!"
MSG_EDITED = "Edited successfully"
MSG_DELETED = "The revue is deleted!"
MSG_NO_SUCH_REVUE = "There is no such revue!"

Step = Callable[[ScenarioContext], None]


def _edit_payload() -> RevueDTO:
    return RevueDTO(title="Edited Revue", description="Edited description")


def create_with_required_fields(ctx: ScenarioContext) -> None:
    """Create a revue with title and description; expect 200 and the created message."""
    revue = RevueDTO.unique(TITLE_PREFIX, "Some description here")
    ctx.created_title = revue.title

    response = ctx.api.create_revue(revue)
    expect_status(response, 200, "Create with required fields")
    expect_message(parse_response(response), MSG_CREATED)
    logger.info(f"Created revue '{revue.title}'")


def list_all(ctx: ScenarioContext) -> None:
    """List all revues; expect a non-empty array and capture the last id."""
    response = ctx.api.get_all_revues()
    expect_status(response, 200, "List all revues")

    items = parse_response_list(response)
    expect_not_empty(items, "List all revues")

    ctx.last_revue_id = items[-1].revue_id
    logger.info(f"Listed {len(items)} revue(s), last id {ctx.last_revue_id}")
    if ctx.created_title and not any(item.title == ctx.created_title for item in items):
        logger.warning(f"Created revue '{ctx.created_title}' is not in the listing")


def edit_existing(ctx: ScenarioContext) -> None:
    """Edit the revue captured by list_all; expect 200 and the edited message."""
    expect_present(ctx.last_revue_id, "Revue id captured by the listing step")

    response = ctx.api.edit_revue(ctx.last_revue_id, _edit_payload())
    expect_status(response, 200, "Edit existing revue")
    expect_message(parse_response(response), MSG_EDITED)


def delete_existing(ctx: ScenarioContext) -> None:
    """Delete the revue captured by list_all; expect 200 and the deleted message."""
    expect_present(ctx.last_revue_id, "Revue id captured by the listing step")

    response = ctx.api.delete_revue(ctx.last_revue_id)
    expect_status(response, 200, "Delete existing revue")
    expect_message(parse_response(response), MSG_DELETED)


def create_missing_required_fields(ctx: ScenarioContext) -> None:
    """Create with every field blank; expect 400."""
    response = ctx.api.create_revue(RevueDTO.empty())
    expect_status(response, 400, "Create without required fields")


def edit_non_existing(ctx: ScenarioContext) -> None:
    """Edit a revue id that does not exist; expect 400 and the not-found message."""
    response = ctx.api.edit_revue(FAKE_REVUE_ID, _edit_payload())
    expect_status(response, 400, "Edit non-existing revue")
    expect_body_contains(response, MSG_NO_SUCH_REVUE)


def delete_non_existing(ctx: ScenarioContext) -> None:
    """Delete a revue id that does not exist; expect 400 and the not-found message."""
    response = ctx.api.delete_revue(FAKE_REVUE_ID)
    logger.debug(f"Delete non-existing: {response.status_code} {response.text}")
    expect_status(response, 400, "Delete non-existing revue")
    expect_body_contains(response, MSG_NO_SUCH_REVUE)


SCENARIO_STEPS: Tuple[Tuple[str, Step], ...] = (
    ("create_with_required_fields", create_with_required_fields),
    ("list_all", list_all),
    ("edit_existing", edit_existing),
    ("delete_existing", delete_existing),
    ("create_missing_required_fields", create_missing_required_fields),
    ("edit_non_existing", edit_non_existing),
    ("delete_non_existing", delete_non_existing),
)
