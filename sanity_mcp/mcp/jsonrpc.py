"""JSON-RPC 2.0 helpers for MCP transport.

See: https://www.jsonrpc.org/specification
"""

import json
from typing import Any

from ..models import ToolResult

MCP_PROTOCOL_VERSION = "2024-11-05"

# Standard JSON-RPC error codes
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602


def jsonrpc_response(id: Any, result: Any) -> dict:
    """Create a JSON-RPC 2.0 success response."""
    return {"jsonrpc": "2.0", "id": id, "result": result}


def jsonrpc_error(id: Any, code: int, message: str) -> dict:
    """Create a JSON-RPC 2.0 error response.

    Args:
        id: Request ID (None for parse errors)
        code: One of the error codes above
        message: Human-readable error message
    """
    return {"jsonrpc": "2.0", "id": id, "error": {"code": code, "message": message}}


def tool_call_result(result: ToolResult) -> dict:
    """Wrap a tool result as MCP tools/call content.

    The payload is serialized into a single text block; tool failures are
    reported through isError rather than as JSON-RPC errors.
    """
    return {
        "content": [{"type": "text", "text": json.dumps(result.to_payload(), default=str)}],
        "isError": result.is_error,
    }
