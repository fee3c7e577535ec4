"""
CIDR Calculator
================

Derives IPv4 network information from ``A.B.C.D/P`` notation. Host bits
in the address are allowed and masked off, so ``192.168.1.77/24`` and
``192.168.1.0/24`` describe the same network.
"""

from __future__ import annotations

import ipaddress

from vault.core.errors import InvalidFormat
from vault.core.models import CidrInfo


def _parse_number(text: str, what: str) -> int:
    text = text.strip()
    if not text.isascii() or not text.isdigit():
        raise InvalidFormat(f"Invalid {what}: {text!r}")
    return int(text)


def calculate(cidr: str) -> CidrInfo:
    """Compute network, broadcast, mask and usable hosts for *cidr*.

    Raises:
        InvalidFormat: On a missing ``/``, a prefix outside 0-32, an
            address without exactly four octets, or an octet outside 0-255.
    """
    if "/" not in cidr:
        raise InvalidFormat("Invalid CIDR notation: expected A.B.C.D/P")

    address, _, prefix_text = cidr.strip().partition("/")
    prefix = _parse_number(prefix_text, "prefix length")
    if not 0 <= prefix <= 32:
        raise InvalidFormat(f"Invalid prefix length: {prefix}")

    parts = address.split(".")
    if len(parts) != 4:
        raise InvalidFormat(f"Invalid IP address: {address!r}")
    octets = [_parse_number(part, "IP address octet") for part in parts]
    if any(octet > 255 for octet in octets):
        raise InvalidFormat(f"Invalid IP address: {address!r}")

    network = ipaddress.IPv4Network(
        (int.from_bytes(bytes(octets), "big"), prefix), strict=False
    )
    host_count = max(0, 2 ** (32 - prefix) - 2)
    usable_range = (
        f"{network.network_address + 1} - {network.broadcast_address - 1}"
        if host_count > 0
        else "None"
    )

    return CidrInfo(
        cidr=cidr.strip(),
        prefix=prefix,
        network_address=str(network.network_address),
        broadcast_address=str(network.broadcast_address),
        subnet_mask=str(network.netmask),
        host_count=host_count,
        usable_range=usable_range,
    )
