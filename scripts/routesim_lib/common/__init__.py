"""
routesim_lib.common - Shared utilities for routesim

This module provides:
- colors: ANSI color codes and logging functions
- prompts: Interactive prompt utilities
"""

from .colors import Colors, log, warn, error, info, console
from .prompts import prompt_value, prompt_yes_no, prompt_int

__all__ = [
    'Colors', 'log', 'warn', 'error', 'info', 'console',
    'prompt_value', 'prompt_yes_no', 'prompt_int',
]
