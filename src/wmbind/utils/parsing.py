"""
Output parsers - turn wmctrl's plain-text listings into records.
"""

import logging
import re
from typing import List, Optional

from ..core.types import Desktop, Transformation, WindowManagerInfo
from ..window import Window

logger = logging.getLogger(__name__)

# id, desktop, x, y, width, height, class, client machine, title
_WINDOW_FIELDS = 9

_DESKTOP_LINE = re.compile(
    r"^(?P<index>\d+)\s+(?P<marker>[*-])"
    r"(?:\s+DG:\s*(?P<geometry>\S+))?"
    r"(?:\s+VP:\s*(?P<viewport>\S+))?"
    r"(?:\s+WA:\s*(?P<work_area>N/A|\S+\s+\S+))?"
    r"\s*(?P<name>.*)$"
)


def _not_available(value: str) -> Optional[str]:
    value = value.strip()
    if not value or value == "N/A":
        return None
    return value


def parse_window_list(output: str) -> List[Window]:
    """Parse the output of ``wmctrl -l -G -x``.

    Each line holds whitespace-separated columns; only the title may contain
    spaces, so lines are split into at most nine fields. Windows without a
    title produce eight fields and get an empty title.
    """
    windows = []
    for line in output.splitlines():
        if not line.strip():
            continue
        parts = line.split(None, _WINDOW_FIELDS - 1)
        if len(parts) < _WINDOW_FIELDS - 1:
            logger.warning(f"Skipping malformed window line: {line!r}")
            continue

        try:
            desktop = int(parts[1])
            x, y, w, h = (int(value) for value in parts[2:6])
        except ValueError:
            logger.warning(f"Skipping window line with bad geometry: {line!r}")
            continue

        windows.append(Window(
            id=parts[0],
            desktop=desktop,
            client_machine=parts[7],
            title=parts[8] if len(parts) == _WINDOW_FIELDS else "",
            transformation=Transformation(x=x, y=y, width=w, height=h),
            wm_class=parts[6],
        ))

    return windows


def parse_wm_info(output: str) -> WindowManagerInfo:
    """Parse the ``Key: value`` lines printed by ``wmctrl -m``."""
    info = WindowManagerInfo()
    for line in output.splitlines():
        if ":" not in line:
            continue
        key, value = line.split(":", 1)
        key = key.strip()
        value = value.strip()
        info.fields[key] = value

        lowered = key.lower()
        if lowered == "name":
            info.name = _not_available(value)
        elif lowered == "class":
            info.wm_class = _not_available(value)
        elif lowered == "pid":
            pid = _not_available(value)
            info.pid = int(pid) if pid and pid.isdigit() else None
        elif "showing the desktop" in lowered:
            if value.upper() in ("ON", "OFF"):
                info.showing_desktop = value.upper() == "ON"

    return info


def parse_desktop_list(output: str) -> List[Desktop]:
    """Parse the output of ``wmctrl -d``.

    Example line::

        0  * DG: 1920x1080  VP: 0,0  WA: 0,27 1920x1053  Workspace 1
    """
    desktops = []
    for line in output.splitlines():
        match = _DESKTOP_LINE.match(line.strip())
        if not match:
            if line.strip():
                logger.warning(f"Skipping malformed desktop line: {line!r}")
            continue

        work_area = match.group("work_area")
        desktops.append(Desktop(
            index=int(match.group("index")),
            current=match.group("marker") == "*",
            name=match.group("name").strip(),
            geometry=_not_available(match.group("geometry") or ""),
            viewport=_not_available(match.group("viewport") or ""),
            work_area=_not_available(" ".join((work_area or "").split())),
        ))

    return desktops
