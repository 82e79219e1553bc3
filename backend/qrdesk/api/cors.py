"""Origin Guard: rejects cross-origin requests from origins outside the allow-list.

Invariants:
    - No Origin header (curl, server-to-server) → request passes
    - Origin in allow-list → request passes; CORSMiddleware adds the CORS headers
    - Any other Origin → 403 before routing, preflights included
"""

import logging
from typing import Callable

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

logger = logging.getLogger(__name__)


class OriginAllowListMiddleware(BaseHTTPMiddleware):
    """403 for requests whose Origin header is not allow-listed."""

    def __init__(self, app: ASGIApp, allowed_origins: list[str]):
        super().__init__(app)
        self.allowed_origins = {o.rstrip("/") for o in allowed_origins}

    def is_allowed(self, origin: str | None) -> bool:
        if not origin:
            return True
        return origin.rstrip("/") in self.allowed_origins

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        origin = request.headers.get("origin")
        if self.is_allowed(origin):
            return await call_next(request)

        logger.warning(
            f"Rejected request from origin {origin}",
            extra={"path": request.url.path},
        )
        return JSONResponse(
            status_code=403,
            content={
                "message": "Not allowed by CORS",
                "error": "CORS_ORIGIN_REJECTED",
            },
        )
