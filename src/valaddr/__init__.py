"""
Valaddr - Address validation helpers

This library answers two questions about a string: does it resolve as a
network host, and is it an IP address literal.
"""

__version__ = "0.1.0"

from .core import MAX_HOST_LENGTH, PLACEHOLDER_PORT, is_domain, is_ip

__all__ = [
    "is_domain",
    "is_ip",
    "MAX_HOST_LENGTH",
    "PLACEHOLDER_PORT",
]
