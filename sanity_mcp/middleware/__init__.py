"""ASGI middleware for the FastAPI application.

This module provides:
- Request ids and per-request access logging
"""

from .request_context import RequestContextMiddleware

__all__ = [
    "RequestContextMiddleware",
]
