#!/usr/bin/env python3
"""
Example usage of the valaddr validators.

Checks each command line argument (or a few built-in samples) and prints
whether it resolves as a host and whether it is an IP address literal.
"""

import logging
import sys

from valaddr import is_domain, is_ip


def main():
    """Run validation example."""
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    values = sys.argv[1:] or [
        "localhost",
        "example,com",
        "192.168.176.43",
        "2001:0db8:85a3:0000:0000:8a2e:0370:7334",
        "not-an-ip",
    ]

    for value in values:
        domain = "yes" if is_domain(value) else "no"
        ip = "yes" if is_ip(value) else "no"
        print(f"{value!r}: resolves={domain} ip={ip}")


if __name__ == "__main__":
    main()
