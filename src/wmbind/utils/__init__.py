"""
Utils module - the wmctrl invoker and its argument builders.

Parsers and the window lookup API live in ``utils.parsing`` and
``utils.window_manager``; they depend on ``wmbind.window`` and are imported
from there directly.
"""

from .wmctrl import (
    run_wmctrl,
    check_dependencies,
    WindowManagerError,
    DependencyMissingError,
    WindowNotFoundError,
)
from . import arguments

__all__ = [
    # Invoker
    "run_wmctrl",
    "check_dependencies",
    "WindowManagerError",
    "DependencyMissingError",
    "WindowNotFoundError",
    # Argument builders
    "arguments",
]
