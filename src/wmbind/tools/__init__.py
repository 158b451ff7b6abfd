"""
Tools module - MCP tool definitions organized by category.

All tools are registered with the FastMCP server in server.py.
"""

from .windows import register_window_tools
from .desktops import register_desktop_tools


def register_all_tools(mcp):
    """Register all tools with the MCP server.

    Args:
        mcp: FastMCP server instance.
    """
    register_window_tools(mcp)
    register_desktop_tools(mcp)


__all__ = [
    "register_all_tools",
    "register_window_tools",
    "register_desktop_tools",
]
