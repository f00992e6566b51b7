# host_network.py
"""Host-side view of the network interfaces.

Interfaces are enumerated with psutil and default gateways come from
netifaces. Multicast group memberships are exposed by neither, so they are
read from the kernel's IGMP table under /proc.
"""
import ipaddress
import socket
import struct
from collections import namedtuple

import netifaces
import psutil

import config
from errors import HostQueryFailed


class IPProperties(namedtuple("IPProperties", "gateway_addresses multicast_addresses")):
    """IP configuration snapshot of one interface. Addresses keep host order."""
    __slots__ = ()

    def __new__(cls, gateway_addresses=(), multicast_addresses=()):
        return super().__new__(cls, tuple(gateway_addresses), tuple(multicast_addresses))


NetworkInterface = namedtuple("NetworkInterface", "name is_up is_loopback ip_properties")


def _hex_to_ipv4(value):
    # The kernel prints addresses as host-order integers of the network-order bytes.
    return socket.inet_ntoa(struct.pack("<L", int(value, 16)))


def read_default_gateways():
    """Returns {interface: [gateway, ...]} for the host's default routes.

    IPv4 gateways come before IPv6 ones; within a family the order is the
    one netifaces reports. Raises HostQueryFailed when the routing
    information cannot be read.
    """
    try:
        routes = netifaces.gateways()
    except OSError as e:
        raise HostQueryFailed(f"Could not read the host's gateways. Error: {e}") from e

    gateways = {}
    for family in (netifaces.AF_INET, netifaces.AF_INET6):
        for entry in routes.get(family, []):
            address, name = entry[0], entry[1]
            is_default = len(entry) > 2 and entry[2]
            if is_default:
                gateways.setdefault(name, []).append(address)
    return gateways


def read_multicast_groups(path=config.DEFAULT_SETTINGS["igmp_table"]):
    """Returns {interface: [group, ...]} from an IGMP membership table.

    Device lines start at column 0 ("2\teth0      :     2      V3"), the
    groups joined on that device follow on tab-indented lines.
    """
    groups = {}
    try:
        with open(path, 'r') as f:
            next(f, None)  # header
            device = None
            for line in f:
                if not line.strip():
                    continue
                if line[0].isspace():
                    if device is not None:
                        groups[device].append(_hex_to_ipv4(line.split()[0]))
                else:
                    device = line.split()[1].rstrip(":")
                    groups.setdefault(device, [])
    except OSError as e:
        print(f"Warning: Could not read IGMP table {path}. Error: {e}")
    return groups


def _is_loopback(stats, addrs):
    if "loopback" in stats.flags.split(","):
        return True
    ips = [a.address.split("%")[0] for a in addrs if a.family in (socket.AF_INET, socket.AF_INET6)]
    return bool(ips) and all(ipaddress.ip_address(ip).is_loopback for ip in ips)


class HostNetwork:
    """Interface provider backed by the running host."""

    def __init__(self, igmp_table=config.DEFAULT_SETTINGS["igmp_table"]):
        self.igmp_table = igmp_table

    def is_network_available(self):
        """True if the host reports any interface other than loopback."""
        addrs = psutil.net_if_addrs()
        return any(not _is_loopback(stats, addrs.get(name, []))
                   for name, stats in psutil.net_if_stats().items())

    def list_interfaces(self):
        """Snapshot of all interfaces, in the order psutil reports them."""
        addrs = psutil.net_if_addrs()
        gateways = read_default_gateways()
        groups = read_multicast_groups(self.igmp_table)

        interfaces = []
        for name, stats in psutil.net_if_stats().items():
            interfaces.append(NetworkInterface(
                name=name,
                is_up=stats.isup,
                is_loopback=_is_loopback(stats, addrs.get(name, [])),
                ip_properties=IPProperties(gateways.get(name, []), groups.get(name, [])),
            ))
        return interfaces
