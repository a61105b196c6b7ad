#!/usr/bin/env python3
"""
routesim_repl.py - Interactive REPL for the routesim router topology simulator

Loads a fixed router topology, lets the operator register the networks
attached to each router, and answers "how do I get from IP A to IP B"
queries from route history or by hop-by-hop path assembly.
"""

import argparse
import sys

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory
from prompt_toolkit.styles import Style

from routesim_lib.common import Colors, log, warn, error, info, prompt_yes_no
from routesim_lib.config import (
    HISTORY_FILE,
    TopologyConfig,
    get_topology_file,
    load_config,
)
from routesim_lib.errors import TopologyConfigError
from routesim_lib.repl import (
    ReplContext,
    MenuCompleter,
    build_menu_tree,
    get_menu,
    get_prompt_text,
    navigate,
)
from routesim_lib.repl.commands import (
    cmd_route,
    cmd_history,
    cmd_config_show,
    cmd_config_networks,
    cmd_config_save,
)
from routesim_lib.repl.display import show_adjacency, show_routers


ROUTESIM_STYLE = Style.from_dict({
    'prompt': '#00aa00 bold',
})


# =============================================================================
# Help
# =============================================================================

COMMAND_HELP = {
    "route": "Resolve a route: route [<src-ip> <dst-ip> [direct | via <router>...]]",
    "history": "List logged routes",
    "show": "Show this menu's details",
    "routers": "Show router neighbors and networks",
    "networks": "Enter router network IPs: networks [<router>]",
    "save": "Save the topology configuration",
}


def cmd_help(ctx: ReplContext, args: list[str], menus: dict) -> None:
    """Show commands available at the current menu."""
    menu = get_menu(menus, ctx.path) or {}
    print()
    print(f"{Colors.BOLD}Commands:{Colors.NC}")
    for command in menu.get("commands", []):
        print(f"  {command:<12} {COMMAND_HELP.get(command, '')}")
    if menu.get("children"):
        print()
        print(f"{Colors.BOLD}Menus:{Colors.NC}")
        for child in menu["children"]:
            print(f"  {child}")
    print()
    print(f"{Colors.BOLD}Navigation:{Colors.NC}")
    print("  back         Go up one level")
    print("  home         Return to top level")
    print("  exit         Quit")
    print()


# =============================================================================
# Command Dispatch
# =============================================================================

def handle_topology_command(ctx: ReplContext, command: str, args: list[str]) -> bool:
    if command not in ("show", "routers"):
        return False
    if not ctx.topology:
        error("No topology loaded")
        return True
    print()
    if command == "show":
        show_adjacency(ctx.topology)
    else:
        show_routers(ctx.topology)
    print()
    return True


def handle_config_command(ctx: ReplContext, command: str, args: list[str]) -> bool:
    handlers = {
        "show": cmd_config_show,
        "networks": cmd_config_networks,
        "save": cmd_config_save,
    }
    handler = handlers.get(command)
    if not handler:
        return False
    handler(ctx, args)
    return True


def handle_command(cmd: str, ctx: ReplContext, menus: dict) -> bool:
    """
    Handle one line of input.

    Returns False when the REPL should exit.
    """
    parts = cmd.strip().split()
    if not parts:
        return True

    command, args = parts[0].lower(), parts[1:]

    # Global commands
    if command in ("exit", "quit"):
        if ctx.dirty:
            answer = prompt_yes_no("Discard unsaved configuration changes?")
            return not answer
        return False
    if command in ("help", "?"):
        cmd_help(ctx, args, menus)
        return True
    if command == "back":
        if ctx.path:
            ctx.path.pop()
        return True
    if command == "home":
        ctx.path = []
        return True

    # Menu path typed in full from root (e.g. "topology show")
    if not ctx.path and command in ("topology", "config") and args:
        saved = ctx.path
        ctx.path = [command]
        handle_command(" ".join(args), ctx, menus)
        if ctx.path == [command]:
            ctx.path = saved
        return True

    if not ctx.path:
        if command == "route":
            cmd_route(ctx, args)
            return True
        if command == "history":
            cmd_history(ctx, args)
            return True
    elif ctx.path == ["topology"]:
        if handle_topology_command(ctx, command, args):
            return True
    elif ctx.path == ["config"]:
        if handle_config_command(ctx, command, args):
            return True

    if navigate(ctx, command, menus):
        return True

    warn(f"Unknown command: {command}")
    print("Type 'help' for available commands")
    return True


# =============================================================================
# Startup
# =============================================================================

def load_startup_config(ctx: ReplContext) -> bool:
    """Load the topology file into ctx. Returns False if it is invalid."""
    if ctx.config_file.exists():
        try:
            config = load_config(ctx.config_file)
            ctx.activate(config)
        except TopologyConfigError as e:
            error(f"Failed to load {ctx.config_file}")
            for message in e.errors:
                print(f"  {message}")
            return False
        except OSError as e:
            error(f"Failed to read {ctx.config_file}: {e}")
            return False
        info(f"Loaded topology from {ctx.config_file}")
        return True

    info(f"No topology file found at {ctx.config_file}, using the reference topology")
    ctx.activate(TopologyConfig())
    return True


def run_repl(topology_path=None) -> int:
    """Main REPL entry point."""
    print()
    print(f"{Colors.BOLD}routesim - Network Router Simulation{Colors.NC}")
    print("Type 'help' for commands, 'exit' to quit")
    print()

    ctx = ReplContext(config_file=get_topology_file(topology_path))
    if not load_startup_config(ctx):
        return 1

    show_adjacency(ctx.topology)
    print()

    if ctx.config.total_networks == 0:
        warn("No networks are attached to any router")
        if prompt_yes_no("Enter router networks now?", default=True):
            cmd_config_networks(ctx, [])
    else:
        log(f"{ctx.config.total_networks} networks configured")

    menus = build_menu_tree()

    session = PromptSession(
        history=FileHistory(str(HISTORY_FILE)),
        completer=MenuCompleter(ctx, menus),
        style=ROUTESIM_STYLE,
    )

    while True:
        try:
            cmd = session.prompt(get_prompt_text(ctx))
            if not handle_command(cmd, ctx, menus):
                break
        except KeyboardInterrupt:
            print()
            continue
        except EOFError:
            print()
            break

    print("Simulation ended.")
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description="Interactive router topology simulator")
    parser.add_argument("--topology", metavar="FILE",
                        help="Topology YAML file (default: $ROUTESIM_TOPOLOGY or /etc/routesim/topology.yaml)")
    args = parser.parse_args()
    return run_repl(args.topology)


if __name__ == "__main__":
    sys.exit(main())
