"""ASGI middleware for per-request access logging."""

import time

from cdn_common.logging import setup_logging
from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = setup_logging()


class RequestLoggingMiddleware:
    """Logs method, path, status code and duration of every HTTP request."""

    def __init__(self, app: ASGIApp, exclude_paths: list[str] | None = None):
        self.app = app
        self.exclude_paths = exclude_paths or ["/docs", "/redoc", "/openapi.json"]

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http" or scope["path"] in self.exclude_paths:
            await self.app(scope, receive, send)
            return

        start_time = time.perf_counter()
        status_code = 500

        async def send_wrapper(message: Message) -> None:
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message["status"]
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        finally:
            logger.info(
                "HTTP request handled",
                extra={
                    "method": scope["method"],
                    "path": scope["path"],
                    "status_code": status_code,
                    "duration_ms": round((time.perf_counter() - start_time) * 1000, 2),
                },
            )
