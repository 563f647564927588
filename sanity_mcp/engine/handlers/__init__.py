"""Tool handlers for the Sanity MCP engine.

This package contains tool handlers organized by domain:
- document: Single-document reads, edits and state transitions
- version: Release version transitions for one document
- bulk: The same transitions applied to a bounded list of documents
- release: Release lifecycle (create, edit, schedule and the simple transitions)

Each handler is a standalone async function that takes:
- params: dict[str, Any] - Tool parameters from the MCP call
- ctx: HandlerContext - Content store client and settings

And returns:
- ToolResult with message, data and checkpoints
"""

from .base import HandlerContext, HandlerFunc
from .bulk import (
    handle_create_versions,
    handle_delete_documents,
    handle_discard_versions,
    handle_publish_documents,
    handle_unpublish_documents,
    handle_unpublish_versions,
)
from .document import (
    handle_create_document,
    handle_delete_document,
    handle_get_document,
    handle_patch_document,
    handle_publish_document,
    handle_unpublish_document,
)
from .release import (
    handle_create_release,
    handle_edit_release,
    handle_release_action,
    handle_schedule_release,
)
from .version import (
    handle_create_version,
    handle_version_discard_document,
    handle_version_replace_document,
    handle_version_unpublish_document,
)

__all__ = [
    # Base
    "HandlerContext",
    "HandlerFunc",
    # Document handlers
    "handle_get_document",
    "handle_create_document",
    "handle_patch_document",
    "handle_publish_document",
    "handle_unpublish_document",
    "handle_delete_document",
    # Version handlers
    "handle_create_version",
    "handle_version_replace_document",
    "handle_version_discard_document",
    "handle_version_unpublish_document",
    # Bulk handlers
    "handle_publish_documents",
    "handle_unpublish_documents",
    "handle_delete_documents",
    "handle_create_versions",
    "handle_discard_versions",
    "handle_unpublish_versions",
    # Release handlers
    "handle_create_release",
    "handle_edit_release",
    "handle_schedule_release",
    "handle_release_action",
]
