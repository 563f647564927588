"""Request context middleware.

Tags every HTTP response with a request id and logs one line per request,
using the pure ASGI pattern.
"""

import logging
import time
from uuid import uuid4

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = b"x-request-id"


class RequestContextMiddleware:
    """
    Attach X-Request-Id to responses and log request outcomes.

    A caller-supplied X-Request-Id is kept so ids line up across services;
    otherwise a new one is generated.
    """

    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        incoming = dict(scope.get("headers") or []).get(REQUEST_ID_HEADER)
        request_id = incoming.decode("latin-1") if incoming else str(uuid4())
        scope.setdefault("state", {})["request_id"] = request_id

        started = time.perf_counter()
        status_code = 500

        async def send_with_request_id(message):
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message["status"]
                headers = [
                    (name, value)
                    for name, value in message.get("headers", [])
                    if name.lower() != REQUEST_ID_HEADER
                ]
                headers.append((REQUEST_ID_HEADER, request_id.encode("latin-1")))
                message = {**message, "headers": headers}
            await send(message)

        try:
            await self.app(scope, receive, send_with_request_id)
        finally:
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info(
                f"{scope.get('method', '-')} {scope.get('path', '-')} -> {status_code} "
                f"({elapsed_ms:.1f} ms, request {request_id})"
            )
