"""
Argument builders - the wmctrl flag syntax for each supported action.

Each function returns the argument list placed after the wmctrl executable.
Window-targeted actions always pass -i so the window argument is read as a
numeric identifier rather than a title substring.
"""

from typing import List, Union

from ..core.types import State, Transformation


# =============================================================================
# Queries
# =============================================================================

def list_windows_args() -> List[str]:
    """``wmctrl -l -G -x``: windows with geometry and WM_CLASS."""
    return ["-l", "-G", "-x"]


def wm_info_args() -> List[str]:
    """``wmctrl -m``: information about the window manager."""
    return ["-m"]


def list_desktops_args() -> List[str]:
    """``wmctrl -d``: desktops managed by the window manager."""
    return ["-d"]


# =============================================================================
# Window actions
# =============================================================================

def set_title_args(window_id: str, title: str) -> List[str]:
    return ["-i", "-r", window_id, "-N", title]


def set_icon_title_args(window_id: str, title: str) -> List[str]:
    return ["-i", "-r", window_id, "-I", title]


def set_both_title_args(window_id: str, title: str) -> List[str]:
    return ["-i", "-r", window_id, "-T", title]


def change_state_args(window_id: str, state: State) -> List[str]:
    return ["-i", "-r", window_id, "-b", str(state)]


def transform_args(window_id: str, transformation: Transformation) -> List[str]:
    return ["-i", "-r", window_id, "-e", str(transformation)]


def set_desktop_args(window_id: str, desktop: Union[int, str]) -> List[str]:
    return ["-i", "-r", window_id, "-t", str(desktop)]


def activate_args(window_id: str) -> List[str]:
    """Move the window to the current desktop and raise it (-R)."""
    return ["-i", "-R", window_id]


def raise_args(window_id: str) -> List[str]:
    """Switch to the window's desktop and raise it (-a)."""
    return ["-i", "-a", window_id]


def close_args(window_id: str) -> List[str]:
    return ["-i", "-c", window_id]


# =============================================================================
# Desktop actions
# =============================================================================

def switch_desktop_args(desktop: Union[int, str]) -> List[str]:
    return ["-s", str(desktop)]


def set_desktop_count_args(count: int) -> List[str]:
    return ["-n", str(count)]


def showing_desktop_args(enabled: bool) -> List[str]:
    return ["-k", "on" if enabled else "off"]
