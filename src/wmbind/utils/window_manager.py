#!/usr/bin/env python3
"""
Window Manager - window listing and lookup through wmctrl.

Provides:
- List windows managed by the window manager
- Read information about the window manager itself
- Find windows by title or class pattern
- Focus windows and read their geometry

Requires wmctrl and a window manager that follows the EWMH specification.
"""

import logging
import re
from typing import List

from ..core.types import Transformation, WindowManagerInfo
from ..window import Window
from . import arguments
from .parsing import parse_window_list, parse_wm_info
from .wmctrl import WindowManagerError, WindowNotFoundError, run_wmctrl

logger = logging.getLogger(__name__)


# =============================================================================
# Queries
# =============================================================================

def list_windows() -> List[Window]:
    """List the windows managed by the window manager (``wmctrl -l -G -x``)."""
    windows = parse_window_list(run_wmctrl(*arguments.list_windows_args()))
    logger.debug(f"Listed {len(windows)} windows")
    return windows


def show_information_about_wm_raw() -> str:
    """Return the unparsed output of ``wmctrl -m``."""
    return run_wmctrl(*arguments.wm_info_args())


def show_information_about_wm() -> WindowManagerInfo:
    """Information about the window manager (``wmctrl -m``)."""
    return parse_wm_info(show_information_about_wm_raw())


# =============================================================================
# Lookup
# =============================================================================

def find_windows(title_pattern: str) -> List[Window]:
    """Return windows whose title or class matches a regex, case-insensitively."""
    try:
        pattern = re.compile(title_pattern, re.IGNORECASE)
    except re.error as e:
        raise WindowManagerError(f"Invalid window pattern '{title_pattern}': {e}") from e

    return [
        win for win in list_windows()
        if pattern.search(win.title) or pattern.search(win.wm_class)
    ]


def get_window(title_pattern: str) -> Window:
    """Return the first window matching a title or class pattern.

    Raises:
        WindowNotFoundError: No window matching the pattern.
    """
    matching = find_windows(title_pattern)
    if not matching:
        raise WindowNotFoundError(f"No window matching '{title_pattern}'")
    return matching[0]


def focus_window(title_pattern: str) -> Window:
    """Switch to the desktop of the first matching window and raise it."""
    win = get_window(title_pattern)
    win.raise_window()
    return win


def get_window_bounds(title_pattern: str) -> Transformation:
    """Position and size of the first matching window, as last listed."""
    return get_window(title_pattern).transformation
