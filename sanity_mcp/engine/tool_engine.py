"""Tool engine: routes tool calls to handlers and shapes failures.

This is the outermost wrapper around the document operations. Anything a
handler raises is converted here into a failure ToolResult; nothing escapes
to the transport.
"""

import logging
from typing import Any

from pydantic import ValidationError

from ..client import ContentStore
from ..config import Settings, settings as default_settings
from ..errors import ContentToolError
from ..models import ToolName, ToolResult
from .handlers import (
    HandlerContext,
    HandlerFunc,
    handle_create_document,
    handle_create_release,
    handle_create_version,
    handle_create_versions,
    handle_delete_document,
    handle_delete_documents,
    handle_discard_versions,
    handle_edit_release,
    handle_get_document,
    handle_patch_document,
    handle_publish_document,
    handle_publish_documents,
    handle_release_action,
    handle_schedule_release,
    handle_unpublish_document,
    handle_unpublish_documents,
    handle_unpublish_versions,
    handle_version_discard_document,
    handle_version_replace_document,
    handle_version_unpublish_document,
)

logger = logging.getLogger(__name__)

TOOL_HANDLERS: dict[ToolName, HandlerFunc] = {
    ToolName.GET_DOCUMENT: handle_get_document,
    ToolName.CREATE_DOCUMENT: handle_create_document,
    ToolName.PATCH_DOCUMENT: handle_patch_document,
    ToolName.PUBLISH_DOCUMENT: handle_publish_document,
    ToolName.UNPUBLISH_DOCUMENT: handle_unpublish_document,
    ToolName.DELETE_DOCUMENT: handle_delete_document,
    ToolName.CREATE_VERSION: handle_create_version,
    ToolName.VERSION_REPLACE_DOCUMENT: handle_version_replace_document,
    ToolName.VERSION_DISCARD_DOCUMENT: handle_version_discard_document,
    ToolName.VERSION_UNPUBLISH_DOCUMENT: handle_version_unpublish_document,
    ToolName.PUBLISH_DOCUMENTS: handle_publish_documents,
    ToolName.UNPUBLISH_DOCUMENTS: handle_unpublish_documents,
    ToolName.DELETE_DOCUMENTS: handle_delete_documents,
    ToolName.CREATE_VERSIONS: handle_create_versions,
    ToolName.DISCARD_VERSIONS: handle_discard_versions,
    ToolName.UNPUBLISH_VERSIONS: handle_unpublish_versions,
    ToolName.CREATE_RELEASE: handle_create_release,
    ToolName.EDIT_RELEASE: handle_edit_release,
    ToolName.SCHEDULE_RELEASE: handle_schedule_release,
    ToolName.RELEASE_ACTION: handle_release_action,
}

ERROR_PREFIXES: dict[ToolName, str] = {
    ToolName.GET_DOCUMENT: "Error getting document",
    ToolName.CREATE_DOCUMENT: "Error creating document",
    ToolName.PATCH_DOCUMENT: "Error patching document",
    ToolName.PUBLISH_DOCUMENT: "Error performing publish document action",
    ToolName.UNPUBLISH_DOCUMENT: "Error performing unpublish document action",
    ToolName.DELETE_DOCUMENT: "Error performing delete document action",
    ToolName.CREATE_VERSION: "Error creating document version",
    ToolName.VERSION_REPLACE_DOCUMENT: "Error performing version replace document action",
    ToolName.VERSION_DISCARD_DOCUMENT: "Error performing version discard document action",
    ToolName.VERSION_UNPUBLISH_DOCUMENT: "Error performing version unpublish document action",
    ToolName.PUBLISH_DOCUMENTS: "Error publishing documents",
    ToolName.UNPUBLISH_DOCUMENTS: "Error unpublishing documents",
    ToolName.DELETE_DOCUMENTS: "Error deleting documents",
    ToolName.CREATE_VERSIONS: "Error adding documents to release",
    ToolName.DISCARD_VERSIONS: "Error discarding versions",
    ToolName.UNPUBLISH_VERSIONS: "Error unpublishing versions",
    ToolName.CREATE_RELEASE: "Error creating release",
    ToolName.EDIT_RELEASE: "Error editing release",
    ToolName.SCHEDULE_RELEASE: "Error scheduling release",
    ToolName.RELEASE_ACTION: "Error performing release action",
}

GENERIC_ERROR_MESSAGE = "An error occurred processing your request. Please try again."


def format_validation_error(error: ValidationError) -> str:
    """One-line summary of a pydantic validation error."""
    problems = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"]) or "params"
        problems.append(f"{location}: {detail['msg']}")
    return "Invalid parameter: " + "; ".join(problems)


class ToolEngine:
    """Executes tools against one content store client."""

    def __init__(self, client: ContentStore, settings: Settings | None = None):
        self.ctx = HandlerContext(client=client, settings=settings or default_settings)

    async def execute(self, tool: ToolName | str, params: dict[str, Any] | None = None) -> ToolResult:
        """Execute a tool and return its result.

        Unknown tools, invalid parameters and tool errors become failure
        results. Unexpected exceptions are logged and reported with a generic
        message.
        """
        try:
            tool_name = ToolName(tool)
        except ValueError:
            return ToolResult.failure(f"Unknown tool: {tool}")

        handler = TOOL_HANDLERS[tool_name]
        prefix = ERROR_PREFIXES[tool_name]

        try:
            return await handler(params or {}, self.ctx)
        except ValidationError as e:
            return ToolResult.failure(f"{prefix}: {format_validation_error(e)}")
        except ContentToolError as e:
            logger.info(f"Tool {tool_name} failed: {e}")
            return ToolResult.failure(f"{prefix}: {e}")
        except Exception as e:
            logger.error(f"Unexpected error executing {tool_name}: {e}", exc_info=True)
            return ToolResult.failure(f"{prefix}: {GENERIC_ERROR_MESSAGE}")
