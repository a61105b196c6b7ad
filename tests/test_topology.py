"""Tests for routesim_lib.routing.topology - adjacency and IP ownership."""

import pytest

from routesim_lib.config import RouterNetworks, TopologyConfig
from routesim_lib.errors import TopologyConfigError
from routesim_lib.routing import Topology


class TestOwnerRouter:
    def test_finds_owner(self, topology: Topology) -> None:
        assert topology.owner_router("10.0.1.1") == 1
        assert topology.owner_router("10.0.1.2") == 1
        assert topology.owner_router("10.0.3.1") == 3
        assert topology.owner_router("192.168.4.1") == 4

    def test_unknown_ip(self, topology: Topology) -> None:
        assert topology.owner_router("10.9.9.9") is None

    def test_exact_string_match(self, topology: Topology) -> None:
        # Same address written differently is a different string
        assert topology.owner_router("010.0.1.1") is None

    def test_deterministic(self, topology: Topology) -> None:
        assert {topology.owner_router("10.0.2.1") for _ in range(5)} == {2}

    def test_networks_in_registration_order(self, topology: Topology) -> None:
        assert topology.networks(4) == ("10.0.4.1", "192.168.4.1")
        assert topology.networks(9) == ()


class TestAdjacency:
    def test_reference_links(self, topology: Topology) -> None:
        assert topology.adjacent(1, 2)
        assert topology.adjacent(1, 4)
        assert not topology.adjacent(1, 3)
        assert not topology.adjacent(2, 4)

    def test_out_of_range_is_false(self, topology: Topology) -> None:
        assert not topology.adjacent(0, 1)
        assert not topology.adjacent(1, 5)
        assert not topology.adjacent(-1, -1)

    def test_directed(self) -> None:
        config = TopologyConfig(router_count=2, adjacency=[[1, 1], [0, 1]])
        topology = Topology.from_config(config)
        assert topology.adjacent(1, 2)
        assert not topology.adjacent(2, 1)

    def test_neighbors_exclude_self(self, topology: Topology) -> None:
        assert topology.neighbors(1) == [2, 4]
        assert topology.neighbors(3) == [2, 4]

    def test_router_ids(self, topology: Topology) -> None:
        assert list(topology.router_ids) == [1, 2, 3, 4]
        assert topology.router_count == 4


class TestFromConfig:
    def test_duplicate_ip_rejected(self) -> None:
        config = TopologyConfig(routers=[
            RouterNetworks(1, ["10.0.0.1"]),
            RouterNetworks(2, ["10.0.0.1"]),
        ])
        with pytest.raises(TopologyConfigError) as exc_info:
            Topology.from_config(config)
        assert "already registered to router 1" in exc_info.value.errors[0]

    def test_invalid_ip_rejected(self) -> None:
        config = TopologyConfig(routers=[RouterNetworks(1, ["10.0.0"])])
        with pytest.raises(TopologyConfigError):
            Topology.from_config(config)

    def test_too_many_networks_rejected(self) -> None:
        config = TopologyConfig(
            max_networks_per_router=1,
            routers=[RouterNetworks(2, ["10.0.0.1", "10.0.0.2"])],
        )
        with pytest.raises(TopologyConfigError):
            Topology.from_config(config)

    def test_topology_is_independent_of_config(self, reference_config) -> None:
        topology = Topology.from_config(reference_config)
        reference_config.adjacency[0][2] = 1
        reference_config.routers[0].networks.append("10.0.1.3")
        assert not topology.adjacent(1, 3)
        assert topology.owner_router("10.0.1.3") is None
