"""
Path resolution for routesim.

No shortest-path search is performed: the route is either the direct
link (when one exists and the operator accepts it) or assembled hop by
hop from operator proposals, each checked against the adjacency matrix.
"""

from dataclasses import dataclass
from typing import Optional

from .hops import FINALIZE, HopProvider
from .topology import Topology


@dataclass(frozen=True)
class ResolvedPath:
    """An ordered router sequence from source router to destination router."""
    routers: tuple[int, ...]

    @property
    def source(self) -> int:
        return self.routers[0]

    @property
    def dest(self) -> int:
        return self.routers[-1]

    @property
    def intermediates(self) -> tuple[int, ...]:
        return self.routers[1:-1]

    @property
    def encoded(self) -> int:
        """Legacy display form: router ids concatenated as decimal digits ([1, 2, 4] -> 124)."""
        return int("".join(str(r) for r in self.routers))

    def __str__(self) -> str:
        return " -> ".join(f"R{r}" for r in self.routers)


def check_hop(topology: Topology, current: int, dest: int, proposed: int) -> Optional[str]:
    """Return the reason a proposed hop is refused, or None if it is legal."""
    if proposed == FINALIZE:
        if topology.adjacent(current, dest):
            return None
        return f"Cannot finalize yet. R{current} has no direct link to R{dest} (destination)."

    if not topology.is_router(proposed):
        return f"Invalid router ID. Must be between 1 and {topology.router_count}."

    if proposed == dest:
        if topology.adjacent(current, dest):
            return None
        return (
            f"R{dest} is the destination, but R{current} has no direct link to R{dest}. "
            f"Please choose an intermediate router first."
        )

    if proposed == current:
        return f"Invalid path: cannot route from R{current} to itself."

    if not topology.adjacent(current, proposed):
        return f"Invalid path: R{current} has no direct link to R{proposed}."

    return None


def resolve_path(source: int, dest: int, topology: Topology, hops: HopProvider) -> ResolvedPath:
    """
    Build a path from source to dest.

    Offers the direct link first when one exists; otherwise, or if the
    offer is declined, asks the hop provider for hops until the path
    reaches dest. Illegal proposals are reported through
    hops.hop_rejected() and asked again; there is no iteration bound.
    """
    if source == dest:
        return ResolvedPath((source,))

    if topology.adjacent(source, dest) and hops.offer_shortcut(source, dest):
        return ResolvedPath((source, dest))

    path = [source]
    current = source
    while True:
        proposed = hops.next_hop(current, dest, tuple(path))

        reason = check_hop(topology, current, dest, proposed)
        if reason:
            hops.hop_rejected(reason)
            continue

        if proposed in (FINALIZE, dest):
            path.append(dest)
            return ResolvedPath(tuple(path))

        path.append(proposed)
        current = proposed
        hops.hop_accepted(current, topology.adjacent(current, dest))
