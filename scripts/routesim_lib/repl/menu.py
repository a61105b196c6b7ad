"""
Menu tree definition for the routesim REPL.
"""


def build_menu_tree() -> dict:
    """Build the hierarchical menu structure."""
    return {
        "root": {
            "children": {
                "topology": {
                    "commands": ["show", "routers"],
                },
                "config": {
                    "commands": ["show", "networks", "save"],
                },
            },
            "commands": ["route", "history"],
        }
    }
