# network_services.py
import enum
import ipaddress
from collections import namedtuple

import config
from errors import (
    HostQueryFailed,
    NetworkError,
    NetworkUnavailable,
    NoGatewayConfigured,
    NoMulticastAdvertised,
    NoQualifyingInterface,
)
from host_network import HostNetwork

# A (host, port) pair, usable directly as a socket address.
Endpoint = namedtuple("Endpoint", "address port")


class SsdpPolicy(enum.Enum):
    """How the SSDP endpoint is derived from an interface's multicast groups."""
    # Trusts the first advertised group to be SSDP's. Not verified.
    UNCONDITIONAL = "unconditional"
    # Only returns an endpoint when the interface has joined 239.255.255.250.
    VALIDATED = "validated"


class ResolvedNetworkContext(namedtuple(
        "ResolvedNetworkContext", "interface policy default_gateway natpmp_endpoint ssdp_endpoint")):
    """Gateway and protocol endpoints resolved from a single interface snapshot.

    Never re-resolved; build a new one when the interface state may have
    changed. ssdp_endpoint is None when the validated policy found no SSDP
    membership on the interface.
    """
    __slots__ = ()

    @property
    def has_ssdp(self):
        return self.ssdp_endpoint is not None


# --- Interface selection ---
def select_default_interface(host):
    """Returns the first interface that is up and not loopback, in host order."""
    if not host.is_network_available():
        raise NetworkUnavailable("No network connections are currently available.")

    candidates = [n for n in host.list_interfaces() if n.is_up and not n.is_loopback]
    if not candidates:
        raise NoQualifyingInterface("No supported network interfaces were found.")
    return candidates[0]


def find_interface(host, name):
    """Returns the interface called `name`, whatever its state."""
    for n in host.list_interfaces():
        if n.name == name:
            return n
    raise NoQualifyingInterface(f"Network interface '{name}' was not found.")


# --- Endpoint resolution ---
def _is_ssdp_group(address):
    try:
        return ipaddress.ip_address(address) == ipaddress.ip_address(config.SSDP_MULTICAST_ADDR)
    except ValueError:
        return False


def _resolve_ssdp_endpoint(interface, policy):
    multicast = interface.ip_properties.multicast_addresses
    if policy is SsdpPolicy.UNCONDITIONAL:
        if not multicast:
            raise NoMulticastAdvertised(interface.name)
        return Endpoint(multicast[0], config.SSDP_PORT)

    if any(a is not None and _is_ssdp_group(a) for a in multicast):
        return Endpoint(config.SSDP_MULTICAST_ADDR, config.SSDP_PORT)
    return None


def resolve(interface, policy=SsdpPolicy.VALIDATED):
    """Derives the default gateway, NAT-PMP and SSDP endpoints of `interface`.

    Raises NoGatewayConfigured when the interface has no gateway and, under
    the unconditional policy, NoMulticastAdvertised when it has no multicast
    address. A missing SSDP group under the validated policy is not an error:
    the context is returned with ssdp_endpoint set to None.
    """
    policy = SsdpPolicy(policy)
    gateways = interface.ip_properties.gateway_addresses
    if not gateways:
        raise NoGatewayConfigured(interface.name)

    default_gateway = gateways[0]
    return ResolvedNetworkContext(
        interface=interface,
        policy=policy,
        default_gateway=default_gateway,
        natpmp_endpoint=Endpoint(default_gateway, config.NATPMP_PORT),
        ssdp_endpoint=_resolve_ssdp_endpoint(interface, policy),
    )


# --- Entry points ---
def create(host=None, policy=SsdpPolicy.VALIDATED):
    """Resolves endpoints for the best available interface of `host`.

    Besides the selection and resolution errors, raises HostQueryFailed when
    the host's routing information cannot be read.
    """
    if host is None:
        host = HostNetwork()
    return resolve(select_default_interface(host), policy)


def create_from_interface(interface, policy=SsdpPolicy.VALIDATED):
    """Resolves endpoints for a caller-supplied interface."""
    return resolve(interface, policy)
