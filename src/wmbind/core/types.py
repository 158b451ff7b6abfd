"""
Core types - shared dataclasses and enums used across the project.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional


@dataclass
class Transformation:
    """Desired window position and size for ``wmctrl -e``.

    A value of -1 in any field tells wmctrl to leave that part unchanged.
    Gravity 0 means the window's default gravity.
    """
    x: int
    y: int
    width: int
    height: int
    gravity: int = 0

    def __str__(self) -> str:
        return f"{self.gravity},{self.x},{self.y},{self.width},{self.height}"


class Action(str, Enum):
    """How a window state property is changed."""
    ADD = "add"
    REMOVE = "remove"
    TOGGLE = "toggle"

    def __str__(self) -> str:
        return self.value


class Property(str, Enum):
    """_NET_WM_STATE properties accepted by ``wmctrl -b``."""
    MODAL = "modal"
    STICKY = "sticky"
    MAXIMIZED_VERT = "maximized_vert"
    MAXIMIZED_HORZ = "maximized_horz"
    SHADED = "shaded"
    SKIP_TASKBAR = "skip_taskbar"
    SKIP_PAGER = "skip_pager"
    HIDDEN = "hidden"
    FULLSCREEN = "fullscreen"
    ABOVE = "above"
    BELOW = "below"

    def __str__(self) -> str:
        return self.value


@dataclass
class State:
    """A state change request: an action applied to one or two properties.

    Renders to the ``wmctrl -b`` argument, e.g. ``add,fullscreen`` or
    ``toggle,maximized_vert,maximized_horz``.
    """
    action: Action
    property: Property
    second_property: Optional[Property] = None

    def __str__(self) -> str:
        parts = [Action(self.action).value, Property(self.property).value]
        if self.second_property is not None:
            parts.append(Property(self.second_property).value)
        return ",".join(parts)


@dataclass
class WindowManagerInfo:
    """Window manager metadata reported by ``wmctrl -m``."""
    name: Optional[str] = None
    wm_class: Optional[str] = None
    pid: Optional[int] = None
    showing_desktop: Optional[bool] = None
    fields: Dict[str, str] = field(default_factory=dict)


@dataclass
class Desktop:
    """A desktop (workspace) as listed by ``wmctrl -d``."""
    index: int
    current: bool
    name: str
    geometry: Optional[str] = None
    viewport: Optional[str] = None
    work_area: Optional[str] = None
