"""Software-only simulation / demo - no real systems will be contacted or modified."""
from __future__ import annotations

import re
from enum import Enum
from typing import Optional, Tuple

_IPV4_PATTERN = re.compile(r"\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3}(?::\d+)?", re.ASCII)
_PORT_PATTERN = re.compile(r"\d+", re.ASCII)
_BRACKET_PORT_PATTERN = re.compile(r":(\d+)", re.ASCII)


class AddressShape(str, Enum):
    EMPTY = "empty"
    BRACKETED = "bracketed"
    IPV4 = "ipv4"
    IPV6 = "ipv6"
    DOMAIN = "domain"


def classify_address(address: str) -> AddressShape:
    """Return the shape that decides how ``remove_port`` treats ``address``.

    Checks run in a fixed order and the first hit wins: a leading ``[`` with a
    closing ``]`` somewhere after it, a dotted quad with an optional numeric
    port, anything with a colon but no dot, and finally the domain fallback.
    These are syntactic heuristics only; ``999.999.999.999`` is a dotted quad.
    """
    if not address:
        return AddressShape.EMPTY
    if address.startswith("[") and "]" in address:
        return AddressShape.BRACKETED
    if _IPV4_PATTERN.fullmatch(address):
        return AddressShape.IPV4
    if ":" in address and "." not in address:
        return AddressShape.IPV6
    return AddressShape.DOMAIN


def split_port(address: str) -> Tuple[str, Optional[str]]:
    """Split ``address`` into ``(host, port)``; ``port`` is None when nothing was stripped."""
    shape = classify_address(address)
    if shape is AddressShape.BRACKETED:
        close = address.index("]")
        suffix = _BRACKET_PORT_PATTERN.fullmatch(address[close + 1:])
        return address[1:close], suffix.group(1) if suffix else None
    if shape in (AddressShape.EMPTY, AddressShape.IPV6):
        return address, None
    host, sep, tail = address.rpartition(":")
    if sep and _PORT_PATTERN.fullmatch(tail):
        return host, tail
    return address, None


def remove_port(address: Optional[str]) -> Optional[str]:
    """Strip a trailing ``:port`` from an IPv4, bracketed IPv6 or domain address.

    Never raises. ``None`` and ``""`` come back as given, unbracketed IPv6
    literals are left alone because ``host:port`` would be ambiguous there,
    and anything that does not end in ``:<digits>`` is returned unchanged.
    """
    if address is None:
        return None
    host, _ = split_port(address)
    return host
