# errors.py


class NetworkError(Exception):
    """Base class for interface selection and resolution failures."""


class NetworkUnavailable(NetworkError):
    pass


class NoQualifyingInterface(NetworkError):
    pass


class HostQueryFailed(NetworkError):
    """The host's routing information could not be read at all."""


class NoGatewayConfigured(NetworkError):
    def __init__(self, interface_name):
        super().__init__(f"Interface '{interface_name}' has no default gateway configured.")
        self.interface_name = interface_name


class NoMulticastAdvertised(NetworkError):
    def __init__(self, interface_name):
        super().__init__(f"Interface '{interface_name}' does not advertise any multicast address.")
        self.interface_name = interface_name
