"""
URL normalization and target safety checks.

The safety check only inspects literal hostnames and IPv4/IPv6 addresses,
including the shorthand IPv4 forms the resolver accepts. No DNS resolution
is done, so a public name that resolves to a private address is not caught.
Redirect targets are not re-checked. Sitemap URLs taken from robots.txt go
through the same check before discovery fetches them.
"""

import ipaddress
import logging
import re
import socket
from urllib.parse import urlsplit, urlunsplit

from seoscan.core.exceptions import BlockedUrlError, InvalidUrlError

logger = logging.getLogger(__name__)

_FORBIDDEN_HOST_CHARS = re.compile(r"[\s<>\\^|%\"{}`]")


def normalize_url(raw: str) -> str:
    """Turn user input into an absolute http(s) URL without a fragment."""
    value = raw.strip()

    if not value.lower().startswith(("http://", "https://")):
        value = "https://" + value

    try:
        parts = urlsplit(value)
        hostname = parts.hostname
        # Accessing .port validates it
        parts.port
    except ValueError as e:
        raise InvalidUrlError() from e

    if not hostname or _FORBIDDEN_HOST_CHARS.search(parts.netloc):
        raise InvalidUrlError()

    userinfo, _, hostport = parts.netloc.rpartition("@")
    netloc = f"{userinfo}@{hostport.lower()}" if userinfo else hostport.lower()

    return urlunsplit((parts.scheme.lower(), netloc, parts.path or "/", parts.query, ""))


def parse_ip_literal(host: str) -> ipaddress.IPv4Address | ipaddress.IPv6Address | None:
    """Read a host as an IP address the way the system resolver would.

    Besides dotted quads this accepts the inet_aton forms (2130706433,
    127.1, 0177.0.0.1, 0x7f.0.0.1). Returns None for names.
    """
    try:
        return ipaddress.ip_address(host)
    except ValueError:
        pass

    try:
        return ipaddress.IPv4Address(socket.inet_aton(host))
    except (OSError, ValueError):
        return None


def _is_private_ipv4(addr: ipaddress.IPv4Address) -> bool:
    a, b = addr.packed[0], addr.packed[1]
    return (
        a == 10
        or a == 127
        or (a == 169 and b == 254)
        or (a == 192 and b == 168)
        or (a == 172 and 16 <= b <= 31)
    )


def _is_private_ip(host: str) -> bool:
    addr = parse_ip_literal(host)
    if addr is None:
        return False

    if isinstance(addr, ipaddress.IPv6Address):
        if addr.ipv4_mapped is not None:
            return _is_private_ipv4(addr.ipv4_mapped)
        return addr.is_loopback or addr.is_link_local or addr.is_private

    return _is_private_ipv4(addr)


def assert_safe_url(url: str) -> None:
    """Raise BlockedUrlError for localhost and private network targets."""
    try:
        hostname = (urlsplit(url).hostname or "").lower()
    except ValueError as e:
        raise InvalidUrlError() from e

    # A trailing dot names the same host
    hostname = hostname.rstrip(".")

    if hostname == "localhost" or hostname.endswith(".localhost") or _is_private_ip(hostname):
        logger.warning(f"Blocked private or local target: {hostname}")
        raise BlockedUrlError()
