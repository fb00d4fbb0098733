"""
Host network helpers.

``get_local_ip`` finds an address other devices on the LAN can use to
reach this server; ``startup_banner`` formats the lines shown when the
server starts.  Neither has any effect on request handling.
"""

import ipaddress
import logging
import socket
from typing import List

import psutil

logger = logging.getLogger(__name__)

FALLBACK_HOST = "localhost"


def _host_ipv4_addresses() -> List[str]:
    """Return the IPv4 addresses of every network interface, in interface order."""
    addresses: List[str] = []
    for _name, interface_addresses in psutil.net_if_addrs().items():
        for snic in interface_addresses:
            if snic.family == socket.AF_INET and snic.address not in addresses:
                addresses.append(snic.address)
    return addresses


def get_local_ip() -> str:
    """Return the first non-loopback IPv4 address of the host.

    Falls back to ``"localhost"`` when no interface carries such an
    address or the interfaces cannot be listed.
    """
    try:
        addresses = _host_ipv4_addresses()
    except OSError as exc:
        logger.debug("Could not list network interfaces: %s", exc)
        return FALLBACK_HOST
    for address in addresses:
        if not ipaddress.ip_address(address).is_loopback:
            return address
    return FALLBACK_HOST


def startup_banner(port: int, project_name: str = "42Sports Backend Server") -> List[str]:
    """Lines announcing the local and network URLs of the server."""
    local_ip = get_local_ip()
    return [
        f"{project_name} Started!",
        "=====================================",
        f"Local:   http://localhost:{port}",
        f"Network: http://{local_ip}:{port}",
        "=====================================",
        "Use the Network URL on your phone when connected to the same WiFi",
    ]
