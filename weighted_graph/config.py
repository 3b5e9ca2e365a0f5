"""
Configuration constants for the weighted graph library.

Logging and demo settings live here. Values that make sense to
change per environment are read from environment variables.
"""

import logging
import math
import os

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level used by scripts that configure logging (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

# Format shared by scripts/demo.py and anything else calling basicConfig
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"

# Level at which LoggingObserver reports algorithm notifications
OBSERVER_LOG_LEVEL = os.environ.get("WEIGHTED_GRAPH_OBSERVER_LOG_LEVEL", "INFO")

# =============================================================================
# Algorithm Configuration
# =============================================================================

# Cost reported by Dijkstra for vertices that cannot be reached from start
UNREACHABLE_COST = math.inf

# =============================================================================
# Demo Configuration
# =============================================================================

# Defaults for scripts/demo.py
DEMO_ALGORITHM = "dijkstra"
DEMO_START = "A"
DEMO_END = "F"


def resolve_log_level(name: str) -> int:
    """Translate a level name like 'debug' into a logging level number."""
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level '{name}'")
    return level
