"""
Desktop tools - list and switch desktops.
"""

from ..utils.wmctrl import WindowManagerError


def register_desktop_tools(mcp):
    """Register desktop tools with the MCP server."""

    @mcp.tool(description="List desktops (workspaces). The current desktop is marked with '*'.")
    async def list_desktops() -> str:
        """List desktops with geometry and work area."""
        from ..desktop import list_desktops as _list_desktops

        try:
            desktops = _list_desktops()
        except WindowManagerError as e:
            return f"Error listing desktops: {str(e)}"

        if not desktops:
            return "No desktops reported."

        output = f"Found {len(desktops)} desktops:\n\n"
        for desktop in desktops:
            marker = "*" if desktop.current else " "
            output += f"{marker} {desktop.index}: {desktop.name}\n"
            if desktop.geometry:
                output += f"   Geometry: {desktop.geometry}\n"
            if desktop.work_area:
                output += f"   Work area: {desktop.work_area}\n"
        return output

    @mcp.tool(description="Switch to a desktop by index.")
    async def switch_desktop(desktop: int) -> str:
        """Switch to the given desktop."""
        from ..desktop import switch_desktop as _switch_desktop

        try:
            _switch_desktop(desktop)
        except WindowManagerError as e:
            return f"Error: {str(e)}"
        return f"Requested switch to desktop {desktop}."

    @mcp.tool(description="Turn the window manager's 'showing the desktop' mode on or off.")
    async def show_desktop(enabled: bool = True) -> str:
        """Toggle showing-desktop mode."""
        from ..desktop import set_showing_desktop

        try:
            set_showing_desktop(enabled)
        except WindowManagerError as e:
            return f"Error: {str(e)}"
        return f"Requested showing desktop mode {'on' if enabled else 'off'}."
