"""FastAPI MCP Server for Sanity content operations."""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Annotated, Any

from fastapi import Depends, FastAPI, HTTPException, Request, Response
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from . import __version__
from .api.deps import get_engine, read_jsonrpc_body
from .client import close_client, get_client
from .config import settings
from .engine import ToolEngine
from .logging_config import configure_logging
from .mcp import (
    INVALID_PARAMS,
    INVALID_REQUEST,
    MCP_PROTOCOL_VERSION,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    TOOL_DEFINITIONS,
    jsonrpc_error,
    jsonrpc_response,
    tool_call_result,
)
from .middleware import RequestContextMiddleware
from .models import HealthResponse, ToolCallParams

logger = logging.getLogger(__name__)

SERVER_NAME = "sanity-mcp"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    # Startup
    configure_logging(settings.log_level, debug=settings.debug)
    logger.info(f"Starting Sanity MCP Server v{__version__}")

    client = await get_client()
    app.state.engine = ToolEngine(client, settings)

    yield
    # Shutdown
    app.state.engine = None
    await close_client()


app = FastAPI(
    title="Sanity MCP Server",
    description="MCP endpoint for Sanity document, draft and release operations",
    version=__version__,
    lifespan=lifespan,
)

# Request ids and access logging
app.add_middleware(RequestContextMiddleware)


# ============ EXCEPTION HANDLERS ============


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Handle HTTP exceptions with consistent response format."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": exc.detail},
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions with sanitized error messages."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "An internal server error occurred. Please try again.",
        },
    )


# ============ HEALTH ENDPOINTS ============


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check() -> HealthResponse:
    """Health check endpoint (lightweight liveness check)."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        timestamp=datetime.now(timezone.utc),
    )


@app.get("/", tags=["Health"])
async def root():
    """Root endpoint with API info."""
    return {
        "name": "Sanity MCP Server",
        "version": __version__,
        "mcp": "/mcp",
        "health": "/health",
    }


# ============ MCP ENDPOINT ============


@app.post("/mcp", tags=["MCP Transport"])
async def mcp_transport_endpoint(
    request: Request,
    engine: Annotated[ToolEngine, Depends(get_engine)],
):
    """
    MCP Streamable HTTP endpoint (JSON-RPC format).

    Config example:
    ```json
    {"mcpServers": {"sanity": {"type": "http", "url": "http://localhost:8000/mcp"}}}
    ```
    """
    body = await read_jsonrpc_body(request)
    if body is None:
        return JSONResponse(jsonrpc_error(None, PARSE_ERROR, "Parse error"), status_code=400)

    if not isinstance(body, dict) or not isinstance(body.get("method"), str):
        request_id = body.get("id") if isinstance(body, dict) else None
        return JSONResponse(
            jsonrpc_error(request_id, INVALID_REQUEST, "Invalid request"), status_code=400
        )

    if "id" not in body:  # Notification - no response
        logger.debug(f"Received notification {body['method']}")
        return Response(status_code=202)

    return JSONResponse(await _handle_request(body, engine))


async def _handle_request(body: dict, engine: ToolEngine) -> dict:
    """Handle a single JSON-RPC request."""
    method = body["method"]
    id = body["id"]
    params = body.get("params") or {}

    if method == "initialize":
        return jsonrpc_response(
            id,
            {
                "protocolVersion": MCP_PROTOCOL_VERSION,
                "serverInfo": {"name": SERVER_NAME, "version": __version__},
                "capabilities": {"tools": {}},
            },
        )
    elif method == "tools/list":
        return jsonrpc_response(id, {"tools": TOOL_DEFINITIONS})
    elif method == "tools/call":
        return await _handle_call_tool(id, params, engine)
    elif method == "ping":
        return jsonrpc_response(id, {})
    else:
        return jsonrpc_error(id, METHOD_NOT_FOUND, f"Method not found: {method}")


async def _handle_call_tool(id: Any, params: Any, engine: ToolEngine) -> dict:
    """Handle MCP tools/call request."""
    try:
        call = ToolCallParams.model_validate(params)
    except ValidationError:
        return jsonrpc_error(id, INVALID_PARAMS, "Invalid params: tools/call requires a tool name")

    result = await engine.execute(call.name, call.arguments)
    return jsonrpc_response(id, tool_call_result(result))


# ============ MAIN ============


def main():
    """Run the server with uvicorn."""
    import uvicorn

    uvicorn.run(
        "sanity_mcp.server:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
