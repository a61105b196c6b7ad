"""Shared fixtures for routesim tests."""

import pytest

from routesim_lib.config import RouterNetworks, TopologyConfig
from routesim_lib.routing import RouteCache, SessionController, Topology


@pytest.fixture
def reference_config() -> TopologyConfig:
    """Reference 4-router topology with networks on every router."""
    return TopologyConfig(
        routers=[
            RouterNetworks(router_id=1, networks=["10.0.1.1", "10.0.1.2"]),
            RouterNetworks(router_id=2, networks=["10.0.2.1"]),
            RouterNetworks(router_id=3, networks=["10.0.3.1"]),
            RouterNetworks(router_id=4, networks=["10.0.4.1", "192.168.4.1"]),
        ],
    )


@pytest.fixture
def topology(reference_config) -> Topology:
    return Topology.from_config(reference_config)


@pytest.fixture
def controller(topology) -> SessionController:
    return SessionController(topology, RouteCache(capacity=20))
