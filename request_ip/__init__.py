"""Resolve the originating client IP of HTTP requests behind proxies and CDNs.

The public helpers are re-exported here for convenient imports.
"""
from request_ip.middleware.client_ip import ClientIPMiddleware, client_ip_middleware
from request_ip.models.schemas import MiddlewareOptions, RequestInfo
from request_ip.resolver import HEADER_NAMES, RULES, ExtractorRule, Match, find_match, resolve
from request_ip.utils.network import (
    get_client_ip,
    request_info_from_environ,
    request_info_from_object,
    request_info_from_starlette,
)

__all__ = [
    "ClientIPMiddleware",
    "client_ip_middleware",
    "MiddlewareOptions",
    "RequestInfo",
    "HEADER_NAMES",
    "RULES",
    "ExtractorRule",
    "Match",
    "find_match",
    "resolve",
    "get_client_ip",
    "request_info_from_environ",
    "request_info_from_object",
    "request_info_from_starlette",
]
