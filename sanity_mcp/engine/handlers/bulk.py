"""Bulk tool handlers.

Handles:
- publish_documents, unpublish_documents, delete_documents
- create_versions, discard_versions, unpublish_versions

Each tool runs the matching single-document operation for every id through
the bulk coordinator. Failing ids are reported per item; the call itself only
fails when the batch is rejected up front.
"""

from collections.abc import Awaitable, Callable
from functools import partial
from typing import Any

from ...client import ContentStore
from ...models import (
    BulkDocumentParams,
    BulkResult,
    BulkVersionParams,
    ItemOutcome,
    OperationOutcome,
    ToolResult,
)
from .. import operations
from ..core import bulk_operation_message, check_batch_size, process_batch
from .base import HandlerContext

ItemOperation = Callable[[ContentStore, str], Awaitable[OperationOutcome]]


def _outcome_data(outcome: ItemOutcome) -> dict[str, Any]:
    if not outcome.success:
        return {"success": False, "item": outcome.item, "error": outcome.error}
    payload: OperationOutcome = outcome.payload
    return {
        "success": True,
        "item": outcome.item,
        "payload": {"message": payload.message, "data": payload.data},
    }


def _bulk_tool_result(operation_name: str, batch: BulkResult) -> ToolResult:
    checkpoints = [
        checkpoint
        for payload in batch.successful_payloads
        for checkpoint in payload.checkpoints
    ]
    data = {
        "results": [_outcome_data(outcome) for outcome in batch.results],
        "summary": batch.summary.model_dump(),
    }
    return ToolResult.success(
        bulk_operation_message(operation_name, batch.summary),
        data=data,
        checkpoints=checkpoints,
    )


async def _run_bulk(
    parsed: BulkDocumentParams,
    ctx: HandlerContext,
    operation: ItemOperation,
    operation_name: str,
) -> ToolResult:
    check_batch_size(parsed.ids, ctx.settings.max_bulk_items)
    client = ctx.client_for(parsed)
    batch = await process_batch(parsed.ids, partial(operation, client))
    return _bulk_tool_result(operation_name, batch)


# ============ DOCUMENT BULK TOOLS ============


async def handle_publish_documents(
    params: dict[str, Any],
    ctx: HandlerContext,
) -> ToolResult:
    """Publish the drafts of several documents.

    Args:
        params: Dict containing:
            - ids: Document IDs (at most settings.max_bulk_items)

    Returns:
        ToolResult with per-document outcomes and summary counts
    """
    parsed = BulkDocumentParams.model_validate(params)
    return await _run_bulk(parsed, ctx, operations.publish_document, "documents")


async def handle_unpublish_documents(
    params: dict[str, Any],
    ctx: HandlerContext,
) -> ToolResult:
    """Unpublish several documents."""
    parsed = BulkDocumentParams.model_validate(params)
    return await _run_bulk(parsed, ctx, operations.unpublish_document, "documents")


async def handle_delete_documents(
    params: dict[str, Any],
    ctx: HandlerContext,
) -> ToolResult:
    """Delete several documents with their drafts."""
    parsed = BulkDocumentParams.model_validate(params)
    return await _run_bulk(parsed, ctx, operations.delete_document, "documents")


# ============ VERSION BULK TOOLS ============


async def handle_create_versions(
    params: dict[str, Any],
    ctx: HandlerContext,
) -> ToolResult:
    """Add several documents to one release.

    Args:
        params: Dict containing:
            - ids: Document IDs
            - release_id: Target release

    Returns:
        ToolResult with per-document outcomes and summary counts
    """
    parsed = BulkVersionParams.model_validate(params)
    operation = partial(_with_release, operations.create_version, parsed.release_id)
    return await _run_bulk(parsed, ctx, operation, "versions")


async def handle_discard_versions(
    params: dict[str, Any],
    ctx: HandlerContext,
) -> ToolResult:
    """Discard several documents' versions from one release."""
    parsed = BulkVersionParams.model_validate(params)
    operation = partial(_with_release, operations.discard_version, parsed.release_id)
    return await _run_bulk(parsed, ctx, operation, "versions")


async def handle_unpublish_versions(
    params: dict[str, Any],
    ctx: HandlerContext,
) -> ToolResult:
    """Mark several documents for unpublishing when one release is published."""
    parsed = BulkVersionParams.model_validate(params)
    operation = partial(_with_release, operations.unpublish_version, parsed.release_id)
    return await _run_bulk(parsed, ctx, operation, "versions")


async def _with_release(
    operation: Callable[[ContentStore, str, str], Awaitable[OperationOutcome]],
    release_id: str,
    client: ContentStore,
    document_id: str,
) -> OperationOutcome:
    return await operation(client, document_id, release_id)
