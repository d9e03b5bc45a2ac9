"""Ordered rules for resolving the originating client IP of a request.

Proxies, load balancers and CDNs terminate the client connection, so the
transport peer is usually an intermediary. Each rule below reads one
candidate from a ``RequestInfo``; the first rule with a non-empty value wins.
No validation is performed: whatever the matching header or field holds is
returned as-is.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from request_ip.models.schemas import RequestInfo


def _identity(value: str) -> str:
    return value


def _first_forwarded_address(value: str) -> str:
    # "client, proxy1, proxy2": left-most entry is the originating client.
    # The segment is returned untrimmed.
    return value.split(",")[0]


@dataclass(frozen=True)
class ExtractorRule:
    """A named candidate source paired with an optional value transform."""

    name: str
    lookup: Callable[[RequestInfo], Optional[str]]
    transform: Callable[[str], str] = _identity
    reads_header: bool = False

    def apply(self, info: RequestInfo) -> Optional[str]:
        """Return the candidate for this rule, or None if the source is empty."""
        value = self.lookup(info)
        if not value:
            return None
        return self.transform(value)


def _header_rule(name: str, transform: Callable[[str], str] = _identity) -> ExtractorRule:
    def lookup(info: RequestInfo) -> Optional[str]:
        return info.headers.get(name)

    return ExtractorRule(name, lookup, transform, reads_header=True)


@dataclass(frozen=True)
class Match:
    """The address chosen by the resolver and the rule that produced it."""

    source: str
    address: str


RULES: tuple[ExtractorRule, ...] = (
    _header_rule("x-client-ip"),
    # Cloudflare, set on every request to the origin
    _header_rule("cf-connecting-ip"),
    # Akamai and Cloudflare
    _header_rule("true-client-ip"),
    # AWS ELB and most proxies
    _header_rule("x-forwarded-for", _first_forwarded_address),
    # nginx proxy/fcgi default
    _header_rule("x-real-ip"),
    # Rackspace LB, Riverbed Stingray
    _header_rule("x-cluster-client-ip"),
    _header_rule("x-forwarded"),
    _header_rule("forwarded-for"),
    _header_rule("forwarded"),
    ExtractorRule("connection.remote_address", lambda info: info.connection_remote_address),
    ExtractorRule("socket.remote_address", lambda info: info.socket_remote_address),
    ExtractorRule("connection.socket.remote_address", lambda info: info.connection_socket_remote_address),
    ExtractorRule("info.remote_address", lambda info: info.info_remote_address),
)

HEADER_NAMES: tuple[str, ...] = tuple(rule.name for rule in RULES if rule.reads_header)


def find_match(info: RequestInfo) -> Optional[Match]:
    """Walk the rules in priority order and return the first match, if any."""
    for rule in RULES:
        address = rule.apply(info)
        if address is not None:
            return Match(source=rule.name, address=address)
    return None


def resolve(info: RequestInfo) -> Optional[str]:
    """Return the client IP candidate for ``info``, or None if nothing matched."""
    match = find_match(info)
    return match.address if match else None
