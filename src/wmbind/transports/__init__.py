"""
Transports module - different ways to access the MCP server.

- STDIO: Default transport (wmbind.server.run)
- HTTP/SSE: For remote access (wmbind.transports.http.main)
"""

__all__ = []
