"""Address validation helpers for valaddr."""

import ipaddress
import logging
import re
import socket
from typing import Optional

logger = logging.getLogger(__name__)

PLACEHOLDER_PORT = 0  # Resolution needs a port; its value is never used
MAX_HOST_LENGTH = 253  # Excludes the optional trailing root dot

# Word characters cover IDN labels and underscores; % allows IPv6 zone ids
_HOST_PATTERN = re.compile(r"[\w.:%-]+")


def _unbracket(value: str) -> Optional[str]:
    """Strip the brackets from "[ipv6]", or return None if the inside is not IPv6."""
    inner = value[1:-1]
    try:
        ipaddress.IPv6Address(inner)
    except ValueError:
        return None
    return inner


def is_domain(value: str) -> bool:
    """
    Check whether a value resolves to at least one network address.

    The value is paired with a placeholder port and handed to the platform
    resolver, so hosts file entries, DNS names and IP literals all count.
    A bracketed IPv6 literal such as "[::1]" is accepted in the form it
    takes inside a host:port string. This may block for as long as the
    resolver takes.

    Args:
        value: Candidate host without protocol prefix or port

    Returns:
        True if resolution yields an address, False otherwise
    """
    if not value:
        logger.debug("Rejected empty host")
        return False

    max_length = MAX_HOST_LENGTH + 1 if value.endswith(".") else MAX_HOST_LENGTH
    if len(value) > max_length:
        logger.debug(f"Rejected host of length {len(value)}, limit is {max_length}")
        return False

    host = value
    if value.startswith("[") and value.endswith("]"):
        host = _unbracket(value)
        if host is None:
            logger.debug(f"Rejected bracketed host that is not IPv6: {value!r}")
            return False

    if not _HOST_PATTERN.fullmatch(host):
        logger.debug(f"Rejected host with illegal characters: {value!r}")
        return False

    try:
        addresses = socket.getaddrinfo(host, PLACEHOLDER_PORT, type=socket.SOCK_STREAM)
    except (OSError, ValueError) as e:
        logger.debug(f"Could not resolve {value!r}: {e}")
        return False

    if not addresses:
        logger.debug(f"Resolution of {value!r} returned no addresses")
        return False

    return True


def is_ip(value: str) -> bool:
    """Check whether a value is an IPv4 or IPv6 address literal without zone id."""
    try:
        address = ipaddress.ip_address(value)
    except ValueError:
        logger.debug(f"Not an IP address: {value!r}")
        return False

    if getattr(address, "scope_id", None) is not None:
        logger.debug(f"Rejected IP address with zone id: {value!r}")
        return False

    return True
