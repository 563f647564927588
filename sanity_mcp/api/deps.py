"""FastAPI dependency injection functions.

This module contains shared dependencies for API endpoints:
- Tool engine lookup
- JSON-RPC body parsing
"""

import json
import logging
from typing import Any

from fastapi import HTTPException
from fastapi import Request as FastAPIRequest

from ..engine import ToolEngine

logger = logging.getLogger(__name__)


def get_engine(request: FastAPIRequest) -> ToolEngine:
    """Get the tool engine created at startup."""
    engine: ToolEngine | None = getattr(request.app.state, "engine", None)
    if engine is None:
        raise HTTPException(status_code=503, detail="Server is starting up")
    return engine


async def read_jsonrpc_body(request: FastAPIRequest) -> Any:
    """Parse the request body as JSON.

    Returns None when the body is not valid JSON so the caller can answer
    with a JSON-RPC parse error instead of an HTTP error.
    """
    raw = await request.body()
    try:
        return json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.debug(f"Rejected malformed JSON-RPC body: {e}")
        return None
