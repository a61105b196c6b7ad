"""
routesim_lib.repl - REPL components for routesim

This package contains the modular components for the interactive REPL:
- context: REPL context and state tracking
- menu: Menu tree structure
- navigation: Menu navigation
- completer: Tab completion
- display: Topology, route and history tables
- hop_provider: Console-backed hop decisions
- commands/: Command handlers
"""

from .context import ReplContext, get_prompt_text
from .menu import build_menu_tree
from .navigation import navigate, get_menu
from .completer import MenuCompleter
from .hop_provider import ConsoleHopProvider

__all__ = [
    'ReplContext',
    'get_prompt_text',
    'build_menu_tree',
    'navigate',
    'get_menu',
    'MenuCompleter',
    'ConsoleHopProvider',
]
