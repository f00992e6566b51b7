# NetEndpoints_main.py
import argparse
import sys

import config
import network_services
from host_network import HostNetwork


def parse_args(argv=None):
    ap = argparse.ArgumentParser(description="Resolve the NAT-PMP and SSDP endpoints of this host.")
    ap.add_argument('--settings', default=config.SETTINGS_FILE, help="path of the JSON settings file")
    ap.add_argument('--interface', help="use this interface instead of the first usable one")
    ap.add_argument('--policy', choices=config.SSDP_POLICIES, help="how the SSDP endpoint is resolved")
    return ap.parse_args(argv)


def initial_setup(args):
    """Loads settings and applies command-line overrides."""
    config.settings.clear()
    config.settings.update(config.load_settings(args.settings))
    if args.interface:
        config.settings["interface"] = args.interface
    if args.policy:
        config.settings["ssdp_policy"] = args.policy


def resolve_endpoints():
    """Resolves a context according to config.settings."""
    host = HostNetwork(config.settings["igmp_table"])
    policy = network_services.SsdpPolicy(config.settings["ssdp_policy"])
    name = config.settings.get("interface")
    if name:
        interface = network_services.find_interface(host, name)
        return network_services.create_from_interface(interface, policy)
    return network_services.create(host, policy)


def format_endpoint(endpoint):
    if endpoint is None:
        return "unavailable"
    return f"{endpoint.address}:{endpoint.port}"


def main(argv=None):
    initial_setup(parse_args(argv))
    try:
        ctx = resolve_endpoints()
    except network_services.NetworkError as e:
        print(f"!!! ERROR: {e}")
        return 1

    print(f"Network: Interface       {ctx.interface.name}")
    print(f"Network: Default gateway {ctx.default_gateway}")
    print(f"Network: NAT-PMP         {format_endpoint(ctx.natpmp_endpoint)}")
    print(f"Network: SSDP            {format_endpoint(ctx.ssdp_endpoint)} ({ctx.policy.value})")
    return 0


if __name__ == '__main__':
    sys.exit(main())
