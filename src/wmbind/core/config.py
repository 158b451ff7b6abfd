"""
Core configuration - environment variables and constants.
"""

import logging
import os
from typing import Optional


# Executable invoked for every window operation
WMCTRL_PATH = os.environ.get("WMCTRL_PATH", "wmctrl")

# Logging level used by the entry points
LOG_LEVEL = os.environ.get("WMBIND_LOG_LEVEL", "INFO").upper()

# Environment variables for the HTTP/SSE transport
MCP_HOST = os.environ.get("MCP_HOST", "0.0.0.0")
MCP_PORT = int(os.environ.get("MCP_PORT", 8080))


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging for command line entry points.

    Args:
        level: Level name such as "DEBUG". Defaults to WMBIND_LOG_LEVEL.
    """
    logging.basicConfig(
        level=getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
