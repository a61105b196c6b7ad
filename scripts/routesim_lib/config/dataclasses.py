"""
Configuration dataclasses for routesim.

These define the structure of the topology configuration as stored in
topology.yaml.
"""

from dataclasses import dataclass, field

from .constants import (
    NUM_ROUTERS,
    MAX_NETWORKS_PER_ROUTER,
    MAX_ROUTE_HISTORY,
    DEFAULT_ADJACENCY,
)


def default_adjacency() -> list[list[int]]:
    """Return a mutable copy of the reference adjacency matrix."""
    return [list(row) for row in DEFAULT_ADJACENCY]


@dataclass
class RouterNetworks:
    """The network IPs attached to one router, in registration order."""
    router_id: int  # 1-based
    networks: list[str] = field(default_factory=list)


@dataclass
class TopologyConfig:
    """Complete topology configuration."""
    router_count: int = NUM_ROUTERS
    max_networks_per_router: int = MAX_NETWORKS_PER_ROUTER
    cache_capacity: int = MAX_ROUTE_HISTORY

    # Directed: adjacency[i][j] is the link from router i+1 to router j+1
    adjacency: list[list[int]] = field(default_factory=default_adjacency)

    routers: list[RouterNetworks] = field(default_factory=list)

    def networks_for(self, router_id: int) -> list[str]:
        """Networks registered for a router (empty if none)."""
        for entry in self.routers:
            if entry.router_id == router_id:
                return entry.networks
        return []

    def set_networks(self, router_id: int, networks: list[str]) -> None:
        """Replace the networks registered for a router."""
        for entry in self.routers:
            if entry.router_id == router_id:
                entry.networks = list(networks)
                return
        self.routers.append(RouterNetworks(router_id=router_id, networks=list(networks)))
        self.routers.sort(key=lambda r: r.router_id)

    @property
    def total_networks(self) -> int:
        return sum(len(r.networks) for r in self.routers)
