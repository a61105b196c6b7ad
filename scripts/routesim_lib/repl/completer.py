"""
Tab completion for the routesim REPL.

This module provides context-aware command completion using prompt_toolkit.
"""

from prompt_toolkit.completion import Completer, Completion

from .context import ReplContext
from .navigation import get_menu


class MenuCompleter(Completer):
    """Dynamic completer that provides context-aware completions."""

    def __init__(self, ctx: ReplContext, menus: dict):
        self.ctx = ctx
        self.menus = menus

    def get_completions(self, document, complete_event):
        text = document.text_before_cursor
        words = text.split()

        if not words:
            completions = self._get_menu_completions([])
            word = ""
        elif text.endswith(' '):
            completions = self._get_menu_completions(words)
            word = ""
        else:
            completions = self._get_menu_completions(words[:-1])
            word = words[-1].lower()

        for item in sorted(completions):
            if item.lower().startswith(word):
                yield Completion(item, start_position=-len(word))

    def _get_menu_completions(self, cmd_prefix: list[str]) -> list[str]:
        """Get available commands and submenus for given context."""
        completions = []

        # route <src> <dst> completes known network IPs
        if cmd_prefix and cmd_prefix[0] == "route" and not self.ctx.path:
            topology = self.ctx.topology
            if len(cmd_prefix) in (1, 2) and topology:
                for router_id in topology.router_ids:
                    completions.extend(topology.networks(router_id))
            elif len(cmd_prefix) == 3:
                completions.extend(["direct", "via"])
            return list(set(completions))

        menu = get_menu(self.menus, self.ctx.path + cmd_prefix)
        if menu is None:
            return []

        if not cmd_prefix:
            completions.extend(["help", "exit"])
            if self.ctx.path:
                completions.extend(["back", "home"])

        if "commands" in menu:
            completions.extend(menu["commands"])
        if "children" in menu:
            completions.extend(menu["children"].keys())

        return list(set(completions))
