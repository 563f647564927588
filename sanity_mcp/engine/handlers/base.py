"""Base infrastructure for tool handlers.

This module provides the common types used by all handler modules.
Each handler receives a HandlerContext with shared dependencies and returns a
ToolResult.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Coroutine

if TYPE_CHECKING:
    from ...client import ContentStore
    from ...config import Settings
    from ...models import ToolParams, ToolResult


@dataclass
class HandlerContext:
    """Context object passed to all handlers.

    Carries the content store client and settings explicitly instead of
    reaching for process-wide state, so handlers run against any client.
    """

    # Client bound to the default project/dataset
    client: "ContentStore"

    # Server settings (bulk cap, etc.)
    settings: "Settings"

    def client_for(self, params: "ToolParams") -> "ContentStore":
        """Client for the resource named in ``params``, or the default one."""
        resource = params.resource
        if resource is None:
            return self.client
        return self.client.with_config(project_id=resource.project_id, dataset=resource.dataset)


# Type alias for handler functions
HandlerFunc = Callable[
    [dict[str, Any], HandlerContext],
    Coroutine[Any, Any, "ToolResult"],
]
