"""
routesim_lib.config - Topology configuration dataclasses and utilities.

This package contains:
- constants: Deployment sizes, reference adjacency, default paths
- dataclasses: Configuration data structures (TopologyConfig, RouterNetworks)
- validation: IP address and topology validation functions
- serialization: YAML save/load functions
- settings: Topology file path resolution
"""

from .constants import (
    NUM_ROUTERS,
    MAX_NETWORKS_PER_ROUTER,
    MAX_ROUTE_HISTORY,
    DEFAULT_ADJACENCY,
    TOPOLOGY_FILE,
    HISTORY_FILE,
)

from .validation import (
    validate_ipv4,
    validate_topology_config,
)

from .dataclasses import (
    RouterNetworks,
    TopologyConfig,
    default_adjacency,
)

from .serialization import (
    to_dict,
    parse_config,
    save_config,
    load_config,
)

from .settings import get_topology_file

__all__ = [
    # Constants
    'NUM_ROUTERS',
    'MAX_NETWORKS_PER_ROUTER',
    'MAX_ROUTE_HISTORY',
    'DEFAULT_ADJACENCY',
    'TOPOLOGY_FILE',
    'HISTORY_FILE',
    # Validation
    'validate_ipv4',
    'validate_topology_config',
    # Dataclasses
    'RouterNetworks',
    'TopologyConfig',
    'default_adjacency',
    # Serialization
    'to_dict',
    'parse_config',
    'save_config',
    'load_config',
    # Settings
    'get_topology_file',
]
