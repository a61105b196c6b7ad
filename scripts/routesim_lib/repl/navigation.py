"""
Navigation utilities for the routesim REPL.
"""

from .context import ReplContext


def get_menu(menus: dict, path: list[str]):
    """Return the menu node at path, or None if the path is invalid."""
    menu = menus.get("root")
    for segment in path:
        if menu and "children" in menu:
            menu = menu["children"].get(segment)
        else:
            return None
    return menu


def navigate(ctx: ReplContext, target: str, menus: dict) -> bool:
    """
    Navigate to a child menu. Returns True if navigation succeeded.

    Args:
        ctx: Current REPL context
        target: Target menu name to navigate to
        menus: Menu tree dictionary
    """
    menu = get_menu(menus, ctx.path)
    if menu and "children" in menu and target in menu["children"]:
        ctx.path.append(target)
        return True
    return False
