"""Document tool handlers.

Handles:
- get_document: Read a document in any namespace
- create_document: Create a new draft or release version
- patch_document: Apply field-level edits guarded by the current revision
- publish_document: Promote a draft to published
- unpublish_document: Move a published document back to drafts
- delete_document: Delete a document and its draft
"""

from typing import Any

from ...models import (
    CreateDocumentParams,
    DocumentIdParams,
    GetDocumentParams,
    PatchDocumentParams,
    ToolResult,
)
from .. import operations
from .base import HandlerContext


async def handle_get_document(
    params: dict[str, Any],
    ctx: HandlerContext,
) -> ToolResult:
    """Read a document.

    Args:
        params: Dict containing:
            - id: Document ID in any namespace
            - release_id: Optional release whose version to read
            - draft_handling: 'preserve' (default) or 'published'

    Returns:
        ToolResult with the document
    """
    parsed = GetDocumentParams.model_validate(params)
    outcome = await operations.get_document(
        ctx.client_for(parsed),
        parsed.id,
        release_id=parsed.release_id,
        draft_handling=parsed.draft_handling,
    )
    return ToolResult.from_outcome(outcome)


async def handle_create_document(
    params: dict[str, Any],
    ctx: HandlerContext,
) -> ToolResult:
    """Create a document as a draft, or as a version when release_id is set.

    Args:
        params: Dict containing:
            - type: Document type
            - content: Initial fields
            - release_id: Optional release for the new version

    Returns:
        ToolResult with the created document and its creation checkpoint
    """
    parsed = CreateDocumentParams.model_validate(params)
    outcome = await operations.create_document(
        ctx.client_for(parsed),
        parsed.type,
        content=parsed.content,
        release_id=parsed.release_id,
    )
    return ToolResult.from_outcome(outcome)


async def handle_patch_document(
    params: dict[str, Any],
    ctx: HandlerContext,
) -> ToolResult:
    """Patch a document.

    Args:
        params: Dict containing:
            - id: Document ID
            - operations: List of set/unset/append/inc operations
            - release_id: Optional release whose version to patch

    Returns:
        ToolResult with the patched document and its mutation checkpoint
    """
    parsed = PatchDocumentParams.model_validate(params)
    outcome = await operations.patch_document(
        ctx.client_for(parsed),
        parsed.id,
        parsed.operations,
        release_id=parsed.release_id,
    )
    return ToolResult.from_outcome(outcome)


async def handle_publish_document(
    params: dict[str, Any],
    ctx: HandlerContext,
) -> ToolResult:
    """Publish the draft of a document."""
    parsed = DocumentIdParams.model_validate(params)
    outcome = await operations.publish_document(ctx.client_for(parsed), parsed.id)
    return ToolResult.from_outcome(outcome)


async def handle_unpublish_document(
    params: dict[str, Any],
    ctx: HandlerContext,
) -> ToolResult:
    """Unpublish a document, keeping its content as a draft."""
    parsed = DocumentIdParams.model_validate(params)
    outcome = await operations.unpublish_document(ctx.client_for(parsed), parsed.id)
    return ToolResult.from_outcome(outcome)


async def handle_delete_document(
    params: dict[str, Any],
    ctx: HandlerContext,
) -> ToolResult:
    """Delete a document together with its draft."""
    parsed = DocumentIdParams.model_validate(params)
    outcome = await operations.delete_document(ctx.client_for(parsed), parsed.id)
    return ToolResult.from_outcome(outcome)
