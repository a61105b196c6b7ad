"""
Topology configuration commands for the REPL.

Network entry is a setup dialogue: for each router ask
how many networks are attached, then ask for each network IP.
"""

import copy

from routesim_lib.common import Colors, log, warn, error, info, prompt_int, prompt_value
from routesim_lib.config import save_config, validate_ipv4
from routesim_lib.errors import TopologyConfigError

from ..display import show_config


def cmd_config_show(ctx, args: list[str]) -> None:
    """Show the staged configuration."""
    print()
    show_config(ctx.config, ctx.config_file, ctx.dirty)


def cmd_config_networks(ctx, args: list[str]) -> None:
    """Enter the network IPs attached to each router (or one router)."""
    if ctx.routes_logged:
        error("Networks cannot change after routes have been logged")
        info("Restart routesim to reconfigure the topology")
        return

    config = copy.deepcopy(ctx.config)
    count = config.router_count
    limit = config.max_networks_per_router

    if args:
        try:
            router_ids = [int(args[0])]
        except ValueError:
            error(f"Invalid router number: {args[0]}")
            return
        if not 1 <= router_ids[0] <= count:
            error(f"Router number must be between 1 and {count}")
            return
    else:
        router_ids = list(range(1, count + 1))

    print()
    print(f"{Colors.BOLD}Router Networks{Colors.NC}")
    print()

    # IPs owned by routers that are not being re-entered
    taken = {
        ip: entry.router_id
        for entry in config.routers if entry.router_id not in router_ids
        for ip in entry.networks
    }

    for router_id in router_ids:
        current = config.networks_for(router_id)
        n = prompt_int(f"How many networks are joined to router {router_id} (max {limit})",
                       0, limit, default=len(current))
        if n is None:
            warn("Cancelled, configuration unchanged")
            return

        networks = []
        for j in range(1, n + 1):
            while True:
                default = current[j - 1] if j <= len(current) else ""
                ip = prompt_value(f"Router {router_id} network IP address {j}", validate_ipv4,
                                  default=default, error_msg="Invalid IP format. Please re-enter.")
                if ip is None:
                    warn("Cancelled, configuration unchanged")
                    return
                if ip in taken or ip in networks:
                    owner = taken.get(ip, router_id)
                    warn(f"IP {ip} is already registered to router {owner}")
                    continue
                break
            networks.append(ip)

        for ip in networks:
            taken[ip] = router_id
        config.set_networks(router_id, networks)

    try:
        ctx.activate(config)
    except TopologyConfigError as e:
        error(str(e))
        return

    ctx.dirty = True
    log(f"Loaded {config.total_networks} networks")
    info("Use 'config save' to keep this configuration")


def cmd_config_save(ctx, args: list[str]) -> None:
    """Write the configuration to the topology file."""
    try:
        save_config(ctx.config, ctx.config_file)
    except OSError as e:
        error(f"Failed to save configuration: {e}")
        return
    ctx.dirty = False
