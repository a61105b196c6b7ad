"""
Exception types for routesim.

Configuration errors stop the simulator from starting; query errors are
reported per query and leave shared state untouched.
"""


class RouteSimError(Exception):
    """Base class for routesim errors."""
    pass


class TopologyConfigError(RouteSimError):
    """Raised when a topology configuration fails validation."""

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        super().__init__("Invalid topology configuration:\n  " + "\n  ".join(self.errors))


class RouterNotFoundError(RouteSimError):
    """Raised when no router owns the queried IP address."""

    def __init__(self, ip: str, role: str):
        self.ip = ip
        self.role = role
        super().__init__(f"{role.capitalize()} IP {ip} not found in any router's network list")


class HopScriptExhausted(RouteSimError):
    """Raised when a scripted hop provider runs out of decisions."""
    pass
