"""
Router topology for routesim.

Holds the adjacency matrix and the per-router network lists. A Topology
is built once from a validated TopologyConfig and never mutated.
"""

from typing import Optional

from routesim_lib.config import TopologyConfig, validate_topology_config
from routesim_lib.errors import TopologyConfigError


class Topology:
    """Immutable adjacency matrix plus network ownership."""

    def __init__(self, adjacency, networks: dict[int, list[str]], max_networks_per_router: int):
        self._adjacency = tuple(tuple(bool(cell) for cell in row) for row in adjacency)
        self._networks = {
            rid: tuple(networks.get(rid, ()))
            for rid in range(1, len(self._adjacency) + 1)
        }
        self.max_networks_per_router = max_networks_per_router

    @classmethod
    def from_config(cls, config: TopologyConfig) -> "Topology":
        """Build a topology, raising TopologyConfigError if the config is invalid."""
        errors = validate_topology_config(config)
        if errors:
            raise TopologyConfigError(errors)
        return cls(
            config.adjacency,
            {r.router_id: r.networks for r in config.routers},
            config.max_networks_per_router,
        )

    @property
    def router_count(self) -> int:
        return len(self._adjacency)

    @property
    def router_ids(self) -> range:
        return range(1, self.router_count + 1)

    def is_router(self, router_id) -> bool:
        return isinstance(router_id, int) and 1 <= router_id <= self.router_count

    def networks(self, router_id: int) -> tuple[str, ...]:
        """Network IPs owned by a router, in registration order."""
        return self._networks.get(router_id, ())

    def owner_router(self, ip: str) -> Optional[int]:
        """Return the router owning an IP (exact string match), or None."""
        for router_id in self.router_ids:
            for network in self._networks[router_id]:
                if network == ip:
                    return router_id
        return None

    def adjacent(self, a: int, b: int) -> bool:
        """True if there is a direct link from router a to router b."""
        if not (self.is_router(a) and self.is_router(b)):
            return False
        return self._adjacency[a - 1][b - 1]

    def neighbors(self, router_id: int) -> list[int]:
        """Routers directly reachable from router_id, excluding itself."""
        return [
            other for other in self.router_ids
            if other != router_id and self.adjacent(router_id, other)
        ]

    def matrix(self) -> tuple[tuple[bool, ...], ...]:
        return self._adjacency
