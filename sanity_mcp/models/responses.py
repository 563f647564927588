"""Transport-level request/response models."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    timestamp: datetime


class ToolCallParams(BaseModel):
    """Params of an MCP tools/call request."""

    name: str = Field(..., min_length=1, description="Tool to execute")
    arguments: dict[str, Any] = Field(default_factory=dict, description="Tool parameters")
