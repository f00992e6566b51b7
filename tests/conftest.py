"""Shared fixtures: a synthetic interface provider in place of the host."""

import pytest

from host_network import IPProperties, NetworkInterface


class FakeHost:
    """Interface provider over a fixed list of interfaces."""

    def __init__(self, interfaces, available=None):
        self.interfaces = list(interfaces)
        self.available = available

    def is_network_available(self):
        if self.available is not None:
            return self.available
        return bool(self.interfaces)

    def list_interfaces(self):
        return list(self.interfaces)


def make_interface(name="eth0", is_up=True, is_loopback=False, gateways=(), multicast=()):
    return NetworkInterface(name, is_up, is_loopback, IPProperties(gateways, multicast))


@pytest.fixture
def lan_interface():
    """Up, non-loopback, gateway 192.168.1.1, joined to the SSDP group."""
    return make_interface(gateways=["192.168.1.1"], multicast=["224.0.0.1", "239.255.255.250"])
