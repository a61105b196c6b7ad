"""
Configuration serialization for routesim.

Functions for saving and loading the topology configuration to/from YAML.
"""

from dataclasses import asdict
from pathlib import Path

import yaml

from routesim_lib.errors import TopologyConfigError
from .dataclasses import TopologyConfig, RouterNetworks, default_adjacency
from .constants import NUM_ROUTERS, MAX_NETWORKS_PER_ROUTER, MAX_ROUTE_HISTORY


def to_dict(config: TopologyConfig) -> dict:
    """Convert a topology configuration to its YAML document layout."""
    data = asdict(config)
    # Routers are stored as a mapping of router id -> networks
    data['routers'] = {r.router_id: list(r.networks) for r in config.routers}
    data['adjacency'] = [[int(cell) for cell in row] for row in config.adjacency]
    return data


def parse_config(data: dict) -> TopologyConfig:
    """Parse a topology configuration from a YAML data dict."""
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise TopologyConfigError(["Topology file must contain a mapping"])

    routers = []
    routers_data = data.get('routers') or {}
    if not isinstance(routers_data, dict):
        raise TopologyConfigError(["'routers' must map router ids to lists of network IPs"])
    for key, networks in routers_data.items():
        try:
            router_id = int(key)
        except (TypeError, ValueError):
            raise TopologyConfigError([f"Invalid router id {key!r}"])
        if networks is None:
            networks = []
        if not isinstance(networks, list):
            raise TopologyConfigError([f"Router {router_id}: networks must be a list"])
        routers.append(RouterNetworks(router_id=router_id, networks=[str(ip) for ip in networks]))
    routers.sort(key=lambda r: r.router_id)

    adjacency = data.get('adjacency')
    if adjacency is None:
        adjacency = default_adjacency()

    return TopologyConfig(
        router_count=data.get('router_count', NUM_ROUTERS),
        max_networks_per_router=data.get('max_networks_per_router', MAX_NETWORKS_PER_ROUTER),
        cache_capacity=data.get('cache_capacity', MAX_ROUTE_HISTORY),
        adjacency=adjacency,
        routers=routers,
    )


def load_config(config_file: Path) -> TopologyConfig:
    """Load topology configuration from a YAML file."""
    with open(config_file) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise TopologyConfigError([f"Invalid YAML in {config_file}: {e}"])
    return parse_config(data)


def save_config(config: TopologyConfig, config_file: Path, quiet: bool = False) -> None:
    """Save topology configuration to a YAML file."""
    from routesim_lib.common import log

    config_file.parent.mkdir(parents=True, exist_ok=True)

    with open(config_file, 'w') as f:
        yaml.safe_dump(to_dict(config), f, default_flow_style=None, sort_keys=False)

    if not quiet:
        log(f"Configuration saved to {config_file}")
