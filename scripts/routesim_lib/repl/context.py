"""
REPL context and prompt utilities for routesim.

This module contains:
- ReplContext: Tracks menu position, topology configuration and the live session
- get_prompt_text: Generates the prompt string based on current menu path
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from routesim_lib.config import TopologyConfig, TOPOLOGY_FILE
from routesim_lib.routing import RouteCache, SessionController, Topology


@dataclass
class ReplContext:
    """Tracks current position in menu hierarchy and simulator state."""
    path: list[str] = field(default_factory=list)
    config: TopologyConfig = field(default_factory=TopologyConfig)
    config_file: Path = TOPOLOGY_FILE
    controller: Optional[SessionController] = None
    dirty: bool = False  # Config changed since last load/save

    def activate(self, config: TopologyConfig) -> None:
        """Build topology and an empty route cache from config.

        Raises TopologyConfigError if the configuration is invalid; the
        current session is left untouched in that case.
        """
        topology = Topology.from_config(config)
        self.config = config
        self.controller = SessionController(topology, RouteCache(config.cache_capacity))

    @property
    def topology(self) -> Optional[Topology]:
        return self.controller.topology if self.controller else None

    @property
    def routes_logged(self) -> int:
        return len(self.controller.cache) if self.controller else 0


def get_prompt_text(ctx: ReplContext) -> str:
    """Generate the prompt string based on current menu path."""
    dirty_marker = "*" if ctx.dirty else ""
    if ctx.path:
        path_str = ".".join(ctx.path)
        return f"routesim.{path_str}{dirty_marker}> "
    return f"routesim{dirty_marker}> "
