"""Pydantic models for request descriptions and response schemas."""
from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from request_ip.config import DEFAULT_ATTRIBUTE_NAME


def as_text(value: Any) -> Optional[str]:
    """Coerce a header or address value to text; bytes are decoded as latin-1."""
    if value is None:
        return None
    if isinstance(value, bytes):
        return value.decode("latin-1")
    return str(value)


class RequestInfo(BaseModel):
    """Framework-neutral view of the parts of a request used for IP resolution.

    Header names are lowercased on construction, so lookups are
    case-insensitive. When a name repeats, the first value is kept. Headers
    whose value is None are dropped; bytes and other values become text.
    """
    model_config = ConfigDict(frozen=True)

    headers: Dict[str, str] = Field(default_factory=dict, description="Lowercase header name to value")
    connection_remote_address: Optional[str] = Field(default=None, description="Remote address of the primary connection")
    socket_remote_address: Optional[str] = Field(default=None, description="Remote address of the socket")
    connection_socket_remote_address: Optional[str] = Field(default=None, description="Remote address of the connection's own socket")
    info_remote_address: Optional[str] = Field(default=None, description="Remote address from a framework-specific info object")

    @field_validator("headers", mode="before")
    @classmethod
    def normalize_headers(cls, value):
        if not value:
            return {}
        items = value.items() if hasattr(value, "items") else value
        normalized: Dict[str, str] = {}
        for name, header_value in items:
            if name is None or header_value is None:
                continue
            normalized.setdefault(as_text(name).lower(), as_text(header_value))
        return normalized

    @field_validator(
        "connection_remote_address",
        "socket_remote_address",
        "connection_socket_remote_address",
        "info_remote_address",
        mode="before",
    )
    @classmethod
    def address_as_text(cls, value):
        return as_text(value)


class MiddlewareOptions(BaseModel):
    """Options accepted by the client IP middleware factory."""
    model_config = ConfigDict(populate_by_name=True)

    attribute_name: Optional[str] = Field(
        default=DEFAULT_ATTRIBUTE_NAME,
        alias="attributeName",
        description="request.state attribute that receives the resolved address",
    )

    @field_validator("attribute_name")
    @classmethod
    def default_when_blank(cls, value):
        # None and "" both mean "use the default", as with a missing option
        return value or DEFAULT_ATTRIBUTE_NAME


class ClientIPResponse(BaseModel):
    """Response model for the client IP lookup endpoint."""
    client_ip: Optional[str] = Field(None, description="Resolved client address, unvalidated")
    source: Optional[str] = Field(None, description="Header or connection field the address came from")


class HealthCheck(BaseModel):
    """Health check response model."""
    status: str
    timestamp: datetime
    version: str = "1.0.0"
