"""Release lifecycle tool handlers.

Handles:
- create_release: Create an empty release
- edit_release: Change release metadata
- schedule_release: Publish the release at a given time
- release_action: Publish, archive, unarchive, unschedule or delete a release
"""

from typing import Any

from ...models import (
    CreateReleaseParams,
    EditReleaseParams,
    ReleaseActionParams,
    ReleaseMetadata,
    ScheduleReleaseParams,
    ToolResult,
)
from .. import releases
from .base import HandlerContext


async def handle_create_release(
    params: dict[str, Any],
    ctx: HandlerContext,
) -> ToolResult:
    """Create a release.

    Args:
        params: Dict containing:
            - title: Release title
            - description: Optional description
            - release_type: asap, undecided or scheduled
            - intended_publish_at: Optional informational publish time
            - release_id: Optional id; generated when omitted

    Returns:
        ToolResult with the release id and metadata
    """
    parsed = CreateReleaseParams.model_validate(params)
    outcome = await releases.create_release(
        ctx.client_for(parsed),
        parsed.title,
        description=parsed.description,
        release_type=parsed.release_type,
        intended_publish_at=parsed.intended_publish_at,
        release_id=parsed.release_id,
    )
    return ToolResult.from_outcome(outcome)


async def handle_edit_release(
    params: dict[str, Any],
    ctx: HandlerContext,
) -> ToolResult:
    """Update the metadata fields given in params; others keep their values."""
    parsed = EditReleaseParams.model_validate(params)
    metadata = ReleaseMetadata(
        title=parsed.title,
        description=parsed.description,
        release_type=parsed.release_type,
        intended_publish_at=parsed.intended_publish_at,
    )
    outcome = await releases.edit_release(ctx.client_for(parsed), parsed.release_id, metadata)
    return ToolResult.from_outcome(outcome)


async def handle_schedule_release(
    params: dict[str, Any],
    ctx: HandlerContext,
) -> ToolResult:
    """Schedule a release for publishing."""
    parsed = ScheduleReleaseParams.model_validate(params)
    outcome = await releases.schedule_release(
        ctx.client_for(parsed), parsed.release_id, parsed.publish_at
    )
    return ToolResult.from_outcome(outcome)


async def handle_release_action(
    params: dict[str, Any],
    ctx: HandlerContext,
) -> ToolResult:
    """Run a lifecycle action that needs only the release id."""
    parsed = ReleaseActionParams.model_validate(params)
    outcome = await releases.run_release_action(
        ctx.client_for(parsed), parsed.release_id, parsed.action
    )
    return ToolResult.from_outcome(outcome)
