"""Access logging: one line per request on the ``shorturl.access`` logger."""

import time
import logging

from fastapi import FastAPI, Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("shorturl.access")


class AccessLogMiddleware(BaseHTTPMiddleware):
    """Log method, path, status, latency and client for every request."""

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed = time.perf_counter() - started

        client = request.client.host if request.client else "-"
        logger.info(
            f"{client} {request.method} {request.url.path} -> "
            f"{response.status_code} in {elapsed * 1000:.1f}ms"
        )
        response.headers["X-Process-Time"] = f"{elapsed:.6f}"

        return response


def add_logging_middleware(app: FastAPI) -> None:
    app.add_middleware(AccessLogMiddleware)
