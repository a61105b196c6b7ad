"""
routesim_lib - Shared library for the routesim REPL

This package contains the components of the routesim router topology
simulator, including the routing core and the interactive REPL.
"""

__version__ = "1.0.0"
