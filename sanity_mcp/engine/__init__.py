"""Sanity MCP engine.

- core: id resolution, lookup, checkpoints, dispatch, bulk coordination
- operations: the per-document pipeline every document tool runs
- releases: release lifecycle operations
- handlers: tool handlers parsing params and shaping results
- tool_engine: routes tool calls and converts failures
"""

from .tool_engine import TOOL_HANDLERS, ToolEngine

__all__ = ["TOOL_HANDLERS", "ToolEngine"]
