#!/usr/bin/env python3
"""
wmbind - FastMCP server for window management through wmctrl.

Provides tools for:
- Listing windows and desktops
- Moving, resizing and retitling windows
- Changing window state (fullscreen, maximized, above, ...)
- Raising, activating and closing windows
"""

import logging

from fastmcp import FastMCP

from .core.config import configure_logging
from .tools import register_all_tools

logger = logging.getLogger(__name__)

# Create the FastMCP server
mcp = FastMCP("wmbind")
register_all_tools(mcp)


# =============================================================================
# Entry Points
# =============================================================================

def run():
    """Entry point for STDIO transport (default)."""
    configure_logging()
    logger.info("Starting wmbind MCP server on stdio")
    mcp.run()


def main():
    """Entry point for HTTP transport."""
    configure_logging()
    mcp.run(transport="sse")


if __name__ == "__main__":
    run()
