"""
routesim_lib.repl.commands - Command handlers for the REPL

This package contains command handler functions organized by feature area:
- route: Routing queries and route history
- config: Topology network entry, display and save
"""

from .route import (
    cmd_route,
    cmd_history,
)

from .config import (
    cmd_config_show,
    cmd_config_networks,
    cmd_config_save,
)

__all__ = [
    # Route
    'cmd_route', 'cmd_history',
    # Config
    'cmd_config_show', 'cmd_config_networks', 'cmd_config_save',
]
