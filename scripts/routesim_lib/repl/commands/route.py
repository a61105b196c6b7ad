"""
Routing query commands for the REPL.

This module contains the route and history commands.
"""

from routesim_lib.common import Colors, error, warn, prompt_value
from routesim_lib.config import validate_ipv4
from routesim_lib.errors import HopScriptExhausted, RouterNotFoundError
from routesim_lib.routing import FINALIZE, ScriptedHopProvider

from ..display import show_history, show_route_result
from ..hop_provider import ConsoleHopProvider


def _scripted_provider(mode: str, hop_args: list[str]):
    """Build a provider from 'direct' or 'via H1 H2 ...'. Returns None on bad input."""
    if mode == "direct":
        if hop_args:
            error("Usage: route <source-ip> <dest-ip> direct")
            return None
        return ScriptedHopProvider(shortcut=True, hops=[FINALIZE])
    if mode == "via":
        try:
            hops = [int(h) for h in hop_args]
        except ValueError:
            error("Hops must be router numbers")
            return None
        return ScriptedHopProvider(shortcut=False, hops=hops + [FINALIZE])
    error(f"Unknown route mode '{mode}' (expected 'direct' or 'via')")
    return None


def cmd_route(ctx, args: list[str]) -> None:
    """Resolve a route between two IPs.

    Forms:
        route                            prompt for IPs and hops
        route <src> <dst>                prompt for hops
        route <src> <dst> direct         take the direct link if there is one
        route <src> <dst> via <H>...     use the listed intermediate routers
    """
    if not ctx.controller:
        error("No topology loaded. Use 'config networks' to define networks")
        return

    if len(args) == 1:
        error("Usage: route [<source-ip> <dest-ip> [direct | via <router>...]]")
        return

    if args:
        source_ip, dest_ip = args[0], args[1]
        for label, ip in (("source", source_ip), ("destination", dest_ip)):
            if not validate_ipv4(ip):
                error(f"Invalid {label} IP format: {ip}")
                return
    else:
        print()
        print(f"{Colors.BOLD}Routing Query {ctx.routes_logged + 1}{Colors.NC}")
        source_ip = prompt_value("Source IP address", validate_ipv4,
                                 error_msg="Invalid IP format. Please re-enter.")
        if not source_ip:
            return
        dest_ip = prompt_value("Destination IP address", validate_ipv4,
                               error_msg="Invalid IP format. Please re-enter.")
        if not dest_ip:
            return

    if len(args) > 2:
        provider = _scripted_provider(args[2], args[3:])
        if provider is None:
            return
    else:
        provider = ConsoleHopProvider(ctx.topology.router_count)

    try:
        result = ctx.controller.run_query(source_ip, dest_ip, provider)
    except RouterNotFoundError as e:
        error(f"{e}. Please re-enter.")
        return
    except HopScriptExhausted as e:
        for reason in provider.rejections:
            warn(reason)
        error(f"Route incomplete: {e}")
        return

    if isinstance(provider, ScriptedHopProvider):
        for reason in provider.rejections:
            warn(reason)

    print()
    show_route_result(result)
    if not result.cache_hit and not result.cached:
        warn("Route history full. Route was not saved")


def cmd_history(ctx, args: list[str]) -> None:
    """List logged routes."""
    if not ctx.controller:
        error("No topology loaded")
        return
    print()
    show_history(ctx.controller.history(), ctx.controller.cache.capacity)
    print()
