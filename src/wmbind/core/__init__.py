"""
Core module - shared types and configuration.
"""

from .types import (
    Transformation,
    Action,
    Property,
    State,
    WindowManagerInfo,
    Desktop,
)
from .config import (
    configure_logging,
    WMCTRL_PATH,
    LOG_LEVEL,
    MCP_HOST,
    MCP_PORT,
)

__all__ = [
    # Types
    "Transformation",
    "Action",
    "Property",
    "State",
    "WindowManagerInfo",
    "Desktop",
    # Config
    "configure_logging",
    "WMCTRL_PATH",
    "LOG_LEVEL",
    "MCP_HOST",
    "MCP_PORT",
]
