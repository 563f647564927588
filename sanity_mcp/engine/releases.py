"""Release lifecycle operations.

A release is the container its versions live in. Each operation validates
the release id and sends exactly one release action; the store decides
which transitions are legal for the release's current state.
"""

import logging
from datetime import datetime

from ..client import ContentStore
from ..errors import NoChangesRequested
from ..models import (
    ArchiveReleaseAction,
    CreateReleaseAction,
    DeleteReleaseAction,
    EditReleaseAction,
    OperationOutcome,
    PublishReleaseAction,
    ReleaseActionType,
    ReleaseMetadata,
    ReleaseType,
    ScheduleReleaseAction,
    UnarchiveReleaseAction,
    UnscheduleReleaseAction,
    format_timestamp,
)
from .core import check_release_id, dispatch, generate_release_id
from .operations import store_errors

logger = logging.getLogger(__name__)

# Lifecycle actions that carry nothing but the release id
SIMPLE_RELEASE_ACTIONS = {
    ReleaseActionType.PUBLISH: (PublishReleaseAction, "Published all documents in release '{}'"),
    ReleaseActionType.ARCHIVE: (ArchiveReleaseAction, "Archived release '{}'"),
    ReleaseActionType.UNARCHIVE: (UnarchiveReleaseAction, "Unarchived release '{}'"),
    ReleaseActionType.UNSCHEDULE: (UnscheduleReleaseAction, "Unscheduled release '{}'"),
    ReleaseActionType.DELETE: (DeleteReleaseAction, "Permanently deleted release '{}'"),
}


async def create_release(
    client: ContentStore,
    title: str,
    description: str | None = None,
    release_type: ReleaseType = ReleaseType.UNDECIDED,
    intended_publish_at: datetime | None = None,
    release_id: str | None = None,
) -> OperationOutcome:
    """Create a new, empty release."""
    release_id = check_release_id(release_id) if release_id else generate_release_id()
    metadata = ReleaseMetadata(
        title=title,
        description=description,
        release_type=release_type,
        intended_publish_at=intended_publish_at,
    )

    with store_errors():
        result = await dispatch(
            client, CreateReleaseAction(release_id=release_id, metadata=metadata)
        )

    return OperationOutcome(
        message=f"Created new release with ID '{release_id}'",
        data={
            "release": {"releaseId": release_id, **metadata.to_wire()},
            "transactionId": result.transaction_id,
        },
    )


async def edit_release(
    client: ContentStore, release_id: str, metadata: ReleaseMetadata
) -> OperationOutcome:
    """Update the given metadata fields of a release.

    Raises:
        NoChangesRequested: If ``metadata`` sets no field.
    """
    check_release_id(release_id)
    changes = metadata.to_wire()
    if not changes:
        raise NoChangesRequested(f"No changes requested for release '{release_id}'")

    with store_errors():
        result = await dispatch(client, EditReleaseAction(release_id=release_id, metadata=metadata))

    return OperationOutcome(
        message=f"Updated metadata for release '{release_id}'",
        data={
            "releaseId": release_id,
            "changes": changes,
            "transactionId": result.transaction_id,
        },
    )


async def schedule_release(
    client: ContentStore, release_id: str, publish_at: datetime
) -> OperationOutcome:
    """Schedule a release to be published at ``publish_at``."""
    check_release_id(release_id)

    with store_errors():
        result = await dispatch(
            client, ScheduleReleaseAction(release_id=release_id, publish_at=publish_at)
        )

    publish_at_wire = format_timestamp(publish_at)
    return OperationOutcome(
        message=f"Scheduled release '{release_id}' for publishing at {publish_at_wire}",
        data={
            "releaseId": release_id,
            "publishAt": publish_at_wire,
            "transactionId": result.transaction_id,
        },
    )


async def run_release_action(
    client: ContentStore, release_id: str, action_type: ReleaseActionType
) -> OperationOutcome:
    """Publish, archive, unarchive, unschedule or delete a release."""
    check_release_id(release_id)
    action_class, message = SIMPLE_RELEASE_ACTIONS[action_type]

    with store_errors():
        result = await dispatch(client, action_class(release_id=release_id))

    logger.info(f"Release {release_id}: {action_type}")
    return OperationOutcome(
        message=message.format(release_id),
        data={"releaseId": release_id, "transactionId": result.transaction_id},
    )
