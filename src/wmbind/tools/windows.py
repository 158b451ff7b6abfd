"""
Window management tools - list, move, retitle and change state of windows.
"""

from typing import Optional

from ..core.types import Action, Property, State, Transformation
from ..utils.wmctrl import WindowManagerError, WindowNotFoundError


def _format_window(index: int, win) -> str:
    t = win.transformation
    output = f"{index}. {win.title or '(untitled)'}\n"
    output += f"   ID: {win.id}\n"
    output += f"   Class: {win.wm_class}\n"
    output += f"   Desktop: {win.desktop}\n"
    output += f"   Host: {win.client_machine}\n"
    output += f"   Bounds: x={t.x}, y={t.y}, w={t.width}, h={t.height}\n"
    return output


def register_window_tools(mcp):
    """Register window management tools with the MCP server."""

    @mcp.tool(description="List all windows managed by the window manager.")
    async def list_windows() -> str:
        """List windows with id, class, desktop, host and geometry."""
        from ..utils.window_manager import list_windows as _list_windows

        try:
            windows = _list_windows()
        except WindowManagerError as e:
            return f"Error listing windows: {str(e)}"

        if not windows:
            return "No windows found."

        output = f"Found {len(windows)} windows:\n\n"
        for i, win in enumerate(windows, 1):
            output += _format_window(i, win) + "\n"
        return output

    @mcp.tool(description="Show information about the running window manager (wmctrl -m).")
    async def window_manager_info() -> str:
        """Report window manager name, class, PID and showing-desktop mode."""
        from ..utils.window_manager import show_information_about_wm

        try:
            info = show_information_about_wm()
        except WindowManagerError as e:
            return f"Error: {str(e)}"

        if not info.fields:
            return "wmctrl reported no window manager information."

        output = "Window Manager\n"
        output += f"{'=' * 40}\n\n"
        for key, value in info.fields.items():
            output += f"{key}: {value}\n"
        return output

    @mcp.tool(description="Check availability of the wmctrl command line tool.")
    async def window_tools() -> str:
        """Check window management tool availability."""
        from ..utils.wmctrl import check_dependencies

        deps = check_dependencies()

        output = "Window Management Tools Status\n"
        output += f"{'=' * 40}\n\n"
        output += f"Platform: {deps['platform']}\n"
        output += f"Available: {'Yes' if deps['available'] else 'No'}\n"
        output += f"Message: {deps['message']}\n"

        if deps['missing']:
            output += f"\nMissing tools: {', '.join(deps['missing'])}\n"
            output += "\nTo install:\n"
            output += "  Ubuntu/Debian: sudo apt install wmctrl\n"
            output += "  Fedora/RHEL:   sudo dnf install wmctrl\n"
            output += "  Arch:          sudo pacman -S wmctrl\n"

        return output

    @mcp.tool(description="Move and resize a window. Use -1 to keep a coordinate or size unchanged.")
    async def move_window(window_title: str, x: int, y: int, width: int, height: int) -> str:
        """Move and resize the first window matching window_title.

        Args:
            window_title: Regex matched against window titles and classes.
            x: New left edge.
            y: New top edge.
            width: New width.
            height: New height.
        """
        from ..utils.window_manager import get_window

        try:
            win = get_window(window_title)
            win.transform(Transformation(x=x, y=y, width=width, height=height))
        except WindowNotFoundError as e:
            return f"Window not found: {str(e)}\nTip: Run list_windows() to see available windows."
        except WindowManagerError as e:
            return f"Error: {str(e)}"

        return f"Requested move of '{win.title}' to x={x}, y={y}, w={width}, h={height}."

    @mcp.tool(description="Add, remove or toggle a window state such as fullscreen or maximized_vert.")
    async def change_window_state(
        window_title: str,
        action: str,
        property: str,
        second_property: Optional[str] = None,
    ) -> str:
        """Change up to two _NET_WM_STATE properties of a window.

        Args:
            window_title: Regex matched against window titles and classes.
            action: One of add, remove, toggle.
            property: A state such as fullscreen, maximized_vert, above, sticky.
            second_property: Optional second state changed in the same call.
        """
        from ..utils.window_manager import get_window

        try:
            state = State(
                Action(action),
                Property(property),
                Property(second_property) if second_property else None,
            )
        except ValueError as e:
            return (
                f"Invalid state: {str(e)}\n"
                f"Actions: {', '.join(a.value for a in Action)}\n"
                f"Properties: {', '.join(p.value for p in Property)}"
            )

        try:
            win = get_window(window_title)
            win.change_state(state)
        except WindowNotFoundError as e:
            return f"Window not found: {str(e)}\nTip: Run list_windows() to see available windows."
        except WindowManagerError as e:
            return f"Error: {str(e)}"

        return f"Requested state change '{state}' for '{win.title}'."

    @mcp.tool(description="Set the title of a window. Pass icon=True to set the icon title, both=True for both.")
    async def set_window_title(window_title: str, title: str, icon: bool = False, both: bool = False) -> str:
        """Retitle the first window matching window_title."""
        from ..utils.window_manager import get_window

        try:
            win = get_window(window_title)
            if both:
                win.set_both_title(title)
            elif icon:
                win.set_icon_title(title)
            else:
                win.set_title(title)
        except WindowNotFoundError as e:
            return f"Window not found: {str(e)}\nTip: Run list_windows() to see available windows."
        except WindowManagerError as e:
            return f"Error: {str(e)}"

        return f"Requested new title '{title}' for window {win.id}."

    @mcp.tool(description="Bring a window forward. mode='raise' switches to its desktop, mode='activate' moves it to the current desktop.")
    async def focus_window(window_title: str, mode: str = "raise") -> str:
        """Raise or activate the first window matching window_title."""
        from ..utils.window_manager import get_window

        if mode not in ("raise", "activate"):
            return f"Invalid mode '{mode}'. Use 'raise' or 'activate'."

        try:
            win = get_window(window_title)
            if mode == "activate":
                win.activate()
            else:
                win.raise_window()
        except WindowNotFoundError as e:
            return f"Window not found: {str(e)}\nTip: Run list_windows() to see available windows."
        except WindowManagerError as e:
            return f"Error: {str(e)}"

        return f"Requested {mode} of '{win.title}'."

    @mcp.tool(description="Move a window to another desktop.")
    async def move_window_to_desktop(window_title: str, desktop: int) -> str:
        """Move the first window matching window_title to a desktop index."""
        from ..utils.window_manager import get_window

        try:
            win = get_window(window_title)
            win.set_desktop(desktop)
        except WindowNotFoundError as e:
            return f"Window not found: {str(e)}\nTip: Run list_windows() to see available windows."
        except WindowManagerError as e:
            return f"Error: {str(e)}"

        return f"Requested move of '{win.title}' to desktop {desktop}."

    @mcp.tool(description="Close a window gracefully.")
    async def close_window(window_title: str) -> str:
        """Close the first window matching window_title."""
        from ..utils.window_manager import get_window

        try:
            win = get_window(window_title)
            win.close()
        except WindowNotFoundError as e:
            return f"Window not found: {str(e)}\nTip: Run list_windows() to see available windows."
        except WindowManagerError as e:
            return f"Error: {str(e)}"

        return f"Requested close of '{win.title}'."
