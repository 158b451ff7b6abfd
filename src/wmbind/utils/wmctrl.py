"""
wmctrl invoker - runs the external window management tool.

Every window operation in this package is a single synchronous call to
wmctrl. Only the failure to start the process is reported; wmctrl itself
exits quietly when a window manager ignores a request, so its exit status
is not inspected.
"""

import logging
import shlex
import shutil
import subprocess
import sys

from ..core import config

logger = logging.getLogger(__name__)


class WindowManagerError(Exception):
    """Base exception for window manager errors."""
    pass


class DependencyMissingError(WindowManagerError):
    """wmctrl could not be started."""
    pass


class WindowNotFoundError(WindowManagerError):
    """No window matching the pattern was found."""
    pass


def check_dependencies() -> dict:
    """Check whether wmctrl is available on this system."""
    platform = sys.platform

    if not platform.startswith("linux") and not platform.startswith("freebsd"):
        return {
            "platform": platform,
            "available": False,
            "missing": ["wmctrl"],
            "message": f"Unsupported platform: {platform}. wmctrl requires an X11 window manager."
        }

    if not shutil.which(config.WMCTRL_PATH):
        return {
            "platform": platform,
            "available": False,
            "missing": ["wmctrl"],
            "message": f"Missing tool: {config.WMCTRL_PATH}. Install with: sudo apt install wmctrl"
        }

    return {
        "platform": platform,
        "available": True,
        "missing": [],
        "message": f"wmctrl available at {shutil.which(config.WMCTRL_PATH)}"
    }


def run_wmctrl(*args: str) -> str:
    """Run wmctrl with the given arguments and return its stdout.

    Args:
        *args: Arguments placed after the executable name.

    Returns:
        The raw text wmctrl wrote to stdout.

    Raises:
        DependencyMissingError: The wmctrl process could not be spawned.
    """
    command = [config.WMCTRL_PATH, *[str(arg) for arg in args]]
    logger.debug(f"Running: {shlex.join(command)}")

    try:
        result = subprocess.run(command, capture_output=True, text=True, errors="replace")
    except OSError as e:
        raise DependencyMissingError(f"failed to execute '{shlex.join(command)}': {e}") from e

    if result.stderr:
        logger.debug(f"wmctrl stderr: {result.stderr.strip()}")
    return result.stdout
