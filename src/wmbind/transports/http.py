#!/usr/bin/env python3
"""
HTTP/SSE Server for wmbind MCP

Exposes the MCP server over HTTP using Server-Sent Events (SSE) transport,
so remote clients can drive the window manager of the host.

Uses FastMCP's built-in SSE transport.

Usage:
    python -m wmbind.transports.http
    # or
    wmbind-http
"""

import logging

from ..core import config

logger = logging.getLogger(__name__)


def main():
    """Run the HTTP server using FastMCP's SSE transport."""
    from ..server import mcp

    config.configure_logging()

    logger.info(f"Starting wmbind MCP HTTP Server on {config.MCP_HOST}:{config.MCP_PORT}")
    logger.info(f"SSE endpoint: http://{config.MCP_HOST}:{config.MCP_PORT}/sse")

    mcp.run(transport="sse", host=config.MCP_HOST, port=config.MCP_PORT)


if __name__ == "__main__":
    main()
