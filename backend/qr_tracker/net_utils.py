import ipaddress
import re
import socket
from functools import lru_cache

import psutil

WIFI_PATTERN = re.compile(r"wi-?fi|wlan", re.IGNORECASE)


def _external_ipv4(addrs):
    for addr in addrs:
        if addr.family != socket.AF_INET:
            continue
        if ipaddress.ip_address(addr.address).is_loopback:
            continue
        return addr.address
    return None


def find_local_ip(interfaces):
    """Pick a LAN address from a psutil.net_if_addrs()-style mapping.

    Wi-Fi interfaces win over anything else; loopback is never returned.
    """
    for name, addrs in interfaces.items():
        if not WIFI_PATTERN.search(name):
            continue
        address = _external_ipv4(addrs)
        if address:
            return address

    for addrs in interfaces.values():
        address = _external_ipv4(addrs)
        if address:
            return address

    return "localhost"


@lru_cache(maxsize=1)
def get_local_ip():
    return find_local_ip(psutil.net_if_addrs())
