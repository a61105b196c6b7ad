"""
routesim_lib.routing - Routing core for routesim.

This package contains:
- topology: Adjacency matrix and IP ownership (Topology)
- hops: Hop provider interface and the scripted provider
- resolver: Direct-link shortcut and hop-by-hop path assembly
- cache: Route history cache keyed by (source IP, destination IP)
- session: Query session controller
"""

from routesim_lib.config import validate_ipv4

from .topology import Topology

from .hops import (
    FINALIZE,
    HopProvider,
    ScriptedHopProvider,
)

from .resolver import (
    ResolvedPath,
    check_hop,
    resolve_path,
)

from .cache import (
    RouteQuery,
    RouteCacheEntry,
    RouteCache,
)

from .session import (
    QueryResult,
    SessionController,
)

__all__ = [
    # Validation
    'validate_ipv4',
    # Topology
    'Topology',
    # Hops
    'FINALIZE',
    'HopProvider',
    'ScriptedHopProvider',
    # Resolver
    'ResolvedPath',
    'check_hop',
    'resolve_path',
    # Cache
    'RouteQuery',
    'RouteCacheEntry',
    'RouteCache',
    # Session
    'QueryResult',
    'SessionController',
]
