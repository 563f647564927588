"""API utilities and dependencies.

This package contains shared API utilities:
- deps: FastAPI dependency injection functions
"""

from .deps import get_engine, read_jsonrpc_body

__all__ = [
    "get_engine",
    "read_jsonrpc_body",
]
