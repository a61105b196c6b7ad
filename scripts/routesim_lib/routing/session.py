"""
Query session controller for routesim.

Runs one routing query end to end: locate the routers owning the source
and destination IPs, answer from the route cache when possible, and
otherwise resolve a new path and remember it.
"""

from dataclasses import dataclass

from routesim_lib.errors import RouterNotFoundError
from .cache import RouteCache, RouteCacheEntry, RouteQuery
from .hops import HopProvider
from .resolver import ResolvedPath, resolve_path
from .topology import Topology


@dataclass(frozen=True)
class QueryResult:
    """Outcome of a routing query."""
    query: RouteQuery
    source_router: int
    dest_router: int
    path: ResolvedPath
    cache_hit: bool  # Answered from history without resolving
    cached: bool  # Path is stored in the cache after this query


class SessionController:
    """Entry point for routing queries against one topology and cache."""

    def __init__(self, topology: Topology, cache: RouteCache):
        self.topology = topology
        self.cache = cache

    def locate(self, ip: str, role: str = "source") -> int:
        """Return the router owning ip, raising RouterNotFoundError if none does."""
        router_id = self.topology.owner_router(ip)
        if router_id is None:
            raise RouterNotFoundError(ip, role)
        return router_id

    def run_query(self, source_ip: str, dest_ip: str, hops: HopProvider) -> QueryResult:
        source_router = self.locate(source_ip, "source")
        dest_router = self.locate(dest_ip, "destination")

        query = RouteQuery(source_ip=source_ip, dest_ip=dest_ip)
        cached_path = self.cache.lookup(query)
        if cached_path is not None:
            return QueryResult(
                query=query,
                source_router=source_router,
                dest_router=dest_router,
                path=cached_path,
                cache_hit=True,
                cached=True,
            )

        path = resolve_path(source_router, dest_router, self.topology, hops)
        # A full cache only skips remembering the route
        stored = self.cache.insert(query, path)

        return QueryResult(
            query=query,
            source_router=source_router,
            dest_router=dest_router,
            path=path,
            cache_hit=False,
            cached=stored,
        )

    def history(self) -> list[RouteCacheEntry]:
        return self.cache.entries()
