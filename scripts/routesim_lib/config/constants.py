"""
Configuration constants for routesim.

Deployment sizes, the reference adjacency matrix, and default paths.
"""

from pathlib import Path


# Deployment sizes
NUM_ROUTERS = 4
MAX_NETWORKS_PER_ROUTER = 4
MAX_ROUTE_HISTORY = 20

# Reference topology (1 = direct link), row i is router i+1
DEFAULT_ADJACENCY = (
    (1, 1, 0, 1),  # R1 connects to R1, R2, R4
    (1, 1, 1, 0),  # R2 connects to R1, R2, R3
    (0, 1, 1, 1),  # R3 connects to R2, R3, R4
    (1, 0, 1, 1),  # R4 connects to R1, R3, R4
)

# Topology file and REPL history paths
TOPOLOGY_FILE = Path("/etc/routesim/topology.yaml")
HISTORY_FILE = Path.home() / ".routesim_history"
TOPOLOGY_ENV_VAR = "ROUTESIM_TOPOLOGY"
