"""
Display functions for the routesim REPL.

Tables are rendered with rich on the shared console.
"""

from pathlib import Path

from rich.table import Table

from routesim_lib.common import Colors, console
from routesim_lib.config import TopologyConfig
from routesim_lib.routing import QueryResult, RouteCacheEntry, Topology


def show_adjacency(topology: Topology) -> None:
    """Show the adjacency matrix (1 = direct link)."""
    table = Table(title="Router links (1 = direct link)", show_header=True, header_style="bold")
    table.add_column("", style="bold")
    for router_id in topology.router_ids:
        table.add_column(f"R{router_id}", justify="center")
    for i, row in enumerate(topology.matrix(), start=1):
        table.add_row(f"R{i}", *("1" if cell else "0" for cell in row))
    console.print(table)


def show_routers(topology: Topology) -> None:
    """Show each router's neighbors and attached networks."""
    table = Table(title="Routers", show_header=True, header_style="bold")
    table.add_column("Router", style="bold")
    table.add_column("Neighbors")
    table.add_column(f"Networks (max {topology.max_networks_per_router})")
    for router_id in topology.router_ids:
        neighbors = ", ".join(f"R{n}" for n in topology.neighbors(router_id)) or "-"
        networks = ", ".join(topology.networks(router_id)) or "(none)"
        table.add_row(f"R{router_id}", neighbors, networks)
    console.print(table)


def show_config(config: TopologyConfig, config_file: Path, dirty: bool) -> None:
    """Show the staged topology configuration."""
    print(f"{Colors.BOLD}Topology Configuration{Colors.NC}")
    print("=" * 50)
    state = " (unsaved changes)" if dirty else ""
    print(f"  File:            {config_file}{state}")
    print(f"  Routers:         {config.router_count}")
    print(f"  Max networks:    {config.max_networks_per_router} per router")
    print(f"  Cache capacity:  {config.cache_capacity} routes")
    print(f"  Networks:        {config.total_networks} defined")
    for entry in config.routers:
        if entry.networks:
            print(f"    R{entry.router_id}: {', '.join(entry.networks)}")
    print()


def show_history(entries: list[RouteCacheEntry], capacity: int) -> None:
    """Show logged routes in insertion order."""
    if not entries:
        print("  (No routes logged yet)")
        return
    table = Table(title=f"Route history ({len(entries)}/{capacity})", show_header=True, header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("Source IP")
    table.add_column("Destination IP")
    table.add_column("Path")
    table.add_column("Router IDs", justify="right")
    for i, entry in enumerate(entries, start=1):
        table.add_row(
            str(i),
            entry.query.source_ip,
            entry.query.dest_ip,
            str(entry.path),
            str(entry.path.encoded),
        )
    console.print(table)


def show_route_result(result: QueryResult) -> None:
    """Show the outcome of one routing query."""
    title = "HISTORY FOUND" if result.cache_hit else "NEW ROUTE LOGGED" if result.cached else "NEW ROUTE"
    table = Table(title=title, show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("Source IP", result.query.source_ip)
    table.add_row("Source router", f"R{result.source_router}")
    table.add_row("Destination router", f"R{result.dest_router}")
    table.add_row("Destination IP", result.query.dest_ip)
    table.add_row("Path", str(result.path))
    table.add_row("Router IDs", str(result.path.encoded))
    console.print(table)
