"""
Settings resolution for routesim.

Resolves the topology file location from arguments, environment, or default.
"""

import os
from pathlib import Path
from typing import Optional

from .constants import TOPOLOGY_FILE, TOPOLOGY_ENV_VAR


def get_topology_file(arg_path: Optional[str] = None) -> Path:
    """Get topology file path from args, env, or default."""
    if arg_path:
        return Path(arg_path)
    if os.environ.get(TOPOLOGY_ENV_VAR):
        return Path(os.environ[TOPOLOGY_ENV_VAR])
    return TOPOLOGY_FILE
