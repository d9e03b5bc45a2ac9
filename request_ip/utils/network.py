"""Network utility functions.

Adapters that turn framework request objects into a ``RequestInfo`` for the
resolver, plus the Starlette convenience wrapper used by the middleware.
Value coercion happens in ``RequestInfo`` itself, so the adapters only
collect raw values.
"""
from typing import Any, Mapping, Optional

from starlette.requests import HTTPConnection

from request_ip.models.schemas import RequestInfo
from request_ip.resolver import resolve


def _remote_address(obj: Any) -> Any:
    if obj is None:
        return None
    return getattr(obj, "remote_address", None)


def request_info_from_starlette(request: HTTPConnection) -> RequestInfo:
    """Describe a Starlette/FastAPI request (or websocket) for the resolver.

    The direct peer reported by the ASGI server becomes the connection
    remote address.
    """
    client = request.client
    return RequestInfo(
        headers=list(request.headers.items()),
        connection_remote_address=client.host if client else None,
    )


def request_info_from_environ(environ: Mapping[str, Any]) -> RequestInfo:
    """Describe a WSGI request from its environ dictionary.

    ``HTTP_X_REAL_IP`` becomes ``x-real-ip``; ``REMOTE_ADDR`` becomes the
    connection remote address.
    """
    headers = [
        (key[5:].replace("_", "-"), value)
        for key, value in environ.items()
        if key.startswith("HTTP_")
    ]
    return RequestInfo(
        headers=headers,
        connection_remote_address=environ.get("REMOTE_ADDR"),
    )


def request_info_from_object(request: Any) -> RequestInfo:
    """Describe any request-like object for the resolver.

    Reads ``headers`` plus ``remote_address`` from the optional ``connection``,
    ``socket``, ``connection.socket`` and ``info`` attributes. Missing
    attributes are treated as absent.
    """
    connection = getattr(request, "connection", None)
    return RequestInfo(
        headers=getattr(request, "headers", None),
        connection_remote_address=_remote_address(connection),
        socket_remote_address=_remote_address(getattr(request, "socket", None)),
        connection_socket_remote_address=_remote_address(getattr(connection, "socket", None)),
        info_remote_address=_remote_address(getattr(request, "info", None)),
    )


def get_client_ip(request: HTTPConnection) -> Optional[str]:
    """Extract client IP address from request, handling proxies."""
    return resolve(request_info_from_starlette(request))
