"""
Hop providers for manual path assembly.

A hop provider is the operator side of path resolution: it accepts or
declines the direct-link shortcut and proposes next hops one at a time.
"""

from typing import Optional

from routesim_lib.errors import HopScriptExhausted


# Returned by next_hop() to ask the resolver to finish at the destination
FINALIZE = 0


class HopProvider:
    """Base class for operator-directed hop decisions."""

    def offer_shortcut(self, source: int, dest: int) -> bool:
        """Return True to take the direct link from source to dest."""
        raise NotImplementedError

    def next_hop(self, current: int, dest: int, path: tuple[int, ...]) -> int:
        """Return the next router id, or FINALIZE."""
        raise NotImplementedError

    def hop_rejected(self, reason: str) -> None:
        """Called when a proposed hop is refused; the resolver asks again."""
        pass

    def hop_accepted(self, router_id: int, can_finalize: bool) -> None:
        """Called after an intermediate hop is appended to the path."""
        pass


class ScriptedHopProvider(HopProvider):
    """
    Replays a fixed list of decisions.

    Args:
        shortcut: Answer given when the direct link is offered
        hops: Router ids (or FINALIZE) returned by successive next_hop() calls
    """

    def __init__(self, shortcut: bool = False, hops: Optional[list[int]] = None):
        self.shortcut = shortcut
        self.hops = list(hops or [])
        self.shortcut_offered = False
        self.rejections: list[str] = []
        self.accepted: list[int] = []
        self._position = 0

    def offer_shortcut(self, source: int, dest: int) -> bool:
        self.shortcut_offered = True
        return self.shortcut

    def next_hop(self, current: int, dest: int, path: tuple[int, ...]) -> int:
        if self._position >= len(self.hops):
            raise HopScriptExhausted(
                f"No hop scripted after R{current} (path so far: "
                + " -> ".join(f"R{r}" for r in path) + ")"
            )
        hop = self.hops[self._position]
        self._position += 1
        return hop

    def hop_rejected(self, reason: str) -> None:
        self.rejections.append(reason)

    def hop_accepted(self, router_id: int, can_finalize: bool) -> None:
        self.accepted.append(router_id)
