from __future__ import annotations

import logging
from typing import Iterable

from fastapi import Request
from fastapi.responses import PlainTextResponse
from starlette.middleware.base import BaseHTTPMiddleware

from app.domain.exceptions import OriginNotAllowedError


logger = logging.getLogger(__name__)


def check_origin(origin: str | None, allowed_origins: frozenset[str]) -> None:
    """Reject browser origins outside the allow-list.

    Requests without an Origin header (curl, mobile apps, Stripe itself) pass.
    """
    if not origin:
        return
    if origin not in allowed_origins:
        raise OriginNotAllowedError(f"CORS blocked: {origin}")


class OriginGuardMiddleware(BaseHTTPMiddleware):
    """Stops requests from unknown origins before they reach a router.

    Runs outside CORSMiddleware so preflight requests are rejected as well.
    """

    def __init__(self, app, *, allowed_origins: Iterable[str]):
        super().__init__(app)
        self._allowed_origins = frozenset(allowed_origins)

    async def dispatch(self, request: Request, call_next):
        try:
            check_origin(request.headers.get("origin"), self._allowed_origins)
        except OriginNotAllowedError as exc:
            logger.warning("origin_guard: blocked origin=%s path=%s", request.headers.get("origin"), request.url.path)
            return PlainTextResponse(str(exc), status_code=403)
        return await call_next(request)
