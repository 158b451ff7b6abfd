"""
Desktop operations - list, query and switch desktops through wmctrl.
"""

import logging
from typing import List, Union

from .core.types import Desktop
from .utils import arguments
from .utils.parsing import parse_desktop_list
from .utils.wmctrl import WindowManagerError, run_wmctrl

logger = logging.getLogger(__name__)


def list_desktops() -> List[Desktop]:
    """List all desktops managed by the window manager (``wmctrl -d``)."""
    return parse_desktop_list(run_wmctrl(*arguments.list_desktops_args()))


def get_current_desktop() -> int:
    """Return the index of the current desktop.

    Raises:
        WindowManagerError: wmctrl did not mark any desktop as current.
    """
    for desktop in list_desktops():
        if desktop.current:
            return desktop.index
    raise WindowManagerError("wmctrl did not report a current desktop")


def switch_desktop(desktop: Union[int, str]) -> None:
    """Switch to the specified desktop (``wmctrl -s <DESK>``)."""
    logger.info(f"Switching to desktop {desktop}")
    run_wmctrl(*arguments.switch_desktop_args(desktop))


def set_desktop_count(count: int) -> None:
    """Change the number of desktops (``wmctrl -n <NUM>``)."""
    logger.info(f"Setting desktop count to {count}")
    run_wmctrl(*arguments.set_desktop_count_args(count))


def set_showing_desktop(enabled: bool) -> None:
    """Turn "showing the desktop" mode on or off (``wmctrl -k on|off``)."""
    logger.info(f"Showing desktop mode: {'on' if enabled else 'off'}")
    run_wmctrl(*arguments.showing_desktop_args(enabled))
