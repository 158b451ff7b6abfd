"""
wmbind - Python binding for the wmctrl window management tool.

Example:
    import wmbind

    win = wmbind.list_windows()[0]
    win.change_state(wmbind.State(wmbind.Action.ADD, wmbind.Property.FULLSCREEN))
    win.transform(wmbind.Transformation(0, 0, 960, 540))

wmctrl fails silently, so actions performed on a window are not verified.
"""

from .core.types import (
    Action,
    Desktop,
    Property,
    State,
    Transformation,
    WindowManagerInfo,
)
from .window import Window
from .desktop import (
    list_desktops,
    get_current_desktop,
    switch_desktop,
    set_desktop_count,
    set_showing_desktop,
)
from .utils.wmctrl import (
    check_dependencies,
    WindowManagerError,
    DependencyMissingError,
    WindowNotFoundError,
)
from .utils.window_manager import (
    list_windows,
    show_information_about_wm,
    show_information_about_wm_raw,
    find_windows,
    get_window,
    focus_window,
    get_window_bounds,
)

__version__ = "0.1.0"

__all__ = [
    "Action",
    "Desktop",
    "Property",
    "State",
    "Transformation",
    "WindowManagerInfo",
    "Window",
    "list_desktops",
    "get_current_desktop",
    "switch_desktop",
    "set_desktop_count",
    "set_showing_desktop",
    "check_dependencies",
    "WindowManagerError",
    "DependencyMissingError",
    "WindowNotFoundError",
    "list_windows",
    "show_information_about_wm",
    "show_information_about_wm_raw",
    "find_windows",
    "get_window",
    "focus_window",
    "get_window_bounds",
]
