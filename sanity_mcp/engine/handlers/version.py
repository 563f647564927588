"""Release version tool handlers.

Handles:
- create_version: Add a document to a release
- version_replace_document: Overwrite a version from another document
- version_discard_document: Remove a version from its release
- version_unpublish_document: Unpublish the document when the release runs
"""

from typing import Any

from ...models import ToolResult, VersionParams, VersionReplaceParams
from .. import operations
from .base import HandlerContext


async def handle_create_version(
    params: dict[str, Any],
    ctx: HandlerContext,
) -> ToolResult:
    """Copy a document's current content into a release.

    Args:
        params: Dict containing:
            - id: Document ID (draft content is preferred for draft ids)
            - release_id: Target release

    Returns:
        ToolResult with the version id and its creation checkpoint
    """
    parsed = VersionParams.model_validate(params)
    outcome = await operations.create_version(
        ctx.client_for(parsed), parsed.id, parsed.release_id
    )
    return ToolResult.from_outcome(outcome)


async def handle_version_replace_document(
    params: dict[str, Any],
    ctx: HandlerContext,
) -> ToolResult:
    """Replace a version's content with another document's content.

    Args:
        params: Dict containing:
            - id: Document ID
            - release_id: Release holding the version
            - source_document_id: Document to copy contents from

    Returns:
        ToolResult with the replaced version id and its mutation checkpoint
    """
    parsed = VersionReplaceParams.model_validate(params)
    outcome = await operations.replace_version(
        ctx.client_for(parsed),
        parsed.id,
        parsed.release_id,
        parsed.source_document_id,
    )
    return ToolResult.from_outcome(outcome)


async def handle_version_discard_document(
    params: dict[str, Any],
    ctx: HandlerContext,
) -> ToolResult:
    """Discard a document's version from a release."""
    parsed = VersionParams.model_validate(params)
    outcome = await operations.discard_version(
        ctx.client_for(parsed), parsed.id, parsed.release_id
    )
    return ToolResult.from_outcome(outcome)


async def handle_version_unpublish_document(
    params: dict[str, Any],
    ctx: HandlerContext,
) -> ToolResult:
    """Mark a version for unpublishing when its release is published.

    The version document is left unchanged; the unpublish happens only when
    the release as a whole is published.
    """
    parsed = VersionParams.model_validate(params)
    outcome = await operations.unpublish_version(
        ctx.client_for(parsed), parsed.id, parsed.release_id
    )
    return ToolResult.from_outcome(outcome)
