"""Middleware that records the resolved client IP on each request."""
from __future__ import annotations

import logging
from typing import Any, Mapping

from fastapi import Request
from starlette.middleware import Middleware
from starlette.middleware.base import BaseHTTPMiddleware

from request_ip.config import DEFAULT_ATTRIBUTE_NAME
from request_ip.models.schemas import MiddlewareOptions
from request_ip.resolver import find_match
from request_ip.utils.network import request_info_from_starlette

logger = logging.getLogger(__name__)


class ClientIPMiddleware(BaseHTTPMiddleware):
    """Store the client IP on ``request.state`` before handing off downstream.

    The value is assigned even when nothing matched (``None``) and the next
    handler is always called.
    """

    def __init__(self, app, attribute_name: str | None = None):
        super().__init__(app)
        self.attribute_name = attribute_name or DEFAULT_ATTRIBUTE_NAME

    async def dispatch(self, request: Request, call_next):
        match = find_match(request_info_from_starlette(request))
        if match:
            logger.debug(f"Client IP {match.address!r} from {match.source} for {request.url.path}")
            setattr(request.state, self.attribute_name, match.address)
        else:
            logger.debug(f"No client IP found for {request.url.path}")
            setattr(request.state, self.attribute_name, None)

        return await call_next(request)


def client_ip_middleware(options: MiddlewareOptions | Mapping[str, Any] | None = None) -> Middleware:
    """Build a middleware entry for ``FastAPI(middleware=[...])``.

    ``options`` may be a ``MiddlewareOptions`` or a mapping using either
    ``attributeName`` or ``attribute_name``.
    """
    if not isinstance(options, MiddlewareOptions):
        options = MiddlewareOptions.model_validate(dict(options or {}))
    return Middleware(ClientIPMiddleware, attribute_name=options.attribute_name)
