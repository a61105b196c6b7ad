"""
Route history cache for routesim.

Exact-match store from (source IP, destination IP) to a previously
resolved path. Entries are never updated or evicted; once the cache is
full it stops accepting new routes.
"""

from dataclasses import dataclass
from typing import Optional

from routesim_lib.config import MAX_ROUTE_HISTORY
from .resolver import ResolvedPath


@dataclass(frozen=True)
class RouteQuery:
    """A (source IP, destination IP) pair, compared verbatim."""
    source_ip: str
    dest_ip: str

    @property
    def key(self) -> str:
        return f"{self.source_ip}*{self.dest_ip}"


@dataclass(frozen=True)
class RouteCacheEntry:
    query: RouteQuery
    path: ResolvedPath


class RouteCache:
    """Insertion-ordered, capacity-bounded route history."""

    def __init__(self, capacity: int = MAX_ROUTE_HISTORY):
        self.capacity = capacity
        self._entries: list[RouteCacheEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def is_full(self) -> bool:
        return len(self._entries) >= self.capacity

    def lookup(self, query: RouteQuery) -> Optional[ResolvedPath]:
        """Return the stored path for query, or None."""
        for entry in self._entries:
            if entry.query == query:
                return entry.path
        return None

    def insert(self, query: RouteQuery, path: ResolvedPath) -> bool:
        """
        Store a new route.

        Returns False, leaving the cache unchanged, when the cache is full
        or the query is already stored.
        """
        if self.is_full:
            return False
        if self.lookup(query) is not None:
            return False
        self._entries.append(RouteCacheEntry(query=query, path=ResolvedPath(tuple(path.routers))))
        return True

    def entries(self) -> list[RouteCacheEntry]:
        """All entries in insertion order."""
        return list(self._entries)
