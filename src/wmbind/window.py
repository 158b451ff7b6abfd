"""
Window - a window managed by the window manager.

Instances come from ``list_windows()``. Mutating methods issue the matching
wmctrl command and then update the local fields; if wmctrl cannot be started
the fields are left unchanged. wmctrl fails silently, so there is no
guarantee the window manager applied the change and the fields may drift from
the real window.
"""

import logging
from typing import Union

from .core.types import Action, Property, State, Transformation
from .utils import arguments
from .utils.wmctrl import run_wmctrl

logger = logging.getLogger(__name__)


class Window:
    """A window listed by ``wmctrl -l -G -x``."""

    def __init__(
        self,
        id: str,
        desktop: int,
        client_machine: str,
        title: str,
        transformation: Transformation,
        wm_class: str,
    ):
        self._id = id
        self._desktop = desktop
        self._client_machine = client_machine
        self._title = title
        self._transformation = transformation
        self._wm_class = wm_class

    def __repr__(self) -> str:
        return (
            f"Window(id={self._id!r}, desktop={self._desktop}, "
            f"client_machine={self._client_machine!r}, title={self._title!r}, "
            f"wm_class={self._wm_class!r}, transformation={self._transformation!r})"
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Window):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    # -------------------------------------------------------------------------
    # Fields
    # -------------------------------------------------------------------------

    @property
    def id(self) -> str:
        return self._id

    @property
    def desktop(self) -> int:
        """Desktop index, or -1 for windows shown on every desktop."""
        return self._desktop

    @property
    def client_machine(self) -> str:
        return self._client_machine

    @property
    def title(self) -> str:
        return self._title

    @property
    def transformation(self) -> Transformation:
        return self._transformation

    @property
    def wm_class(self) -> str:
        return self._wm_class

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def _run(self, args) -> None:
        logger.info(f"Window {self._id}: wmctrl {' '.join(args)}")
        run_wmctrl(*args)

    def set_title(self, title: str) -> None:
        """Set the title of the window (``wmctrl -r <WIN> -N <STR>``)."""
        self._run(arguments.set_title_args(self._id, title))
        self._title = title

    def set_icon_title(self, title: str) -> None:
        """Set the icon title, the short title (``wmctrl -r <WIN> -I <STR>``)."""
        self._run(arguments.set_icon_title_args(self._id, title))

    def set_both_title(self, title: str) -> None:
        """Set both the title and icon title (``wmctrl -r <WIN> -T <STR>``)."""
        self._run(arguments.set_both_title_args(self._id, title))
        self._title = title

    def change_state(self, state: State) -> None:
        """Change a window state property (``wmctrl -r <WIN> -b <STARG>``).

        Example:
            win.change_state(State(Action.ADD, Property.FULLSCREEN))
        """
        self._run(arguments.change_state_args(self._id, state))

    def transform(self, transformation: Transformation) -> None:
        """Move and resize the window (``wmctrl -r <WIN> -e <MVARG>``).

        Example:
            # Top left corner, 960x540
            win.transform(Transformation(0, 0, 960, 540))
        """
        self._run(arguments.transform_args(self._id, transformation))
        self._transformation = transformation

    def set_desktop(self, desktop: Union[int, str]) -> None:
        """Move the window to another desktop (``wmctrl -r <WIN> -t <DESK>``)."""
        index = int(desktop)
        self._run(arguments.set_desktop_args(self._id, index))
        self._desktop = index

    def activate(self) -> None:
        """Move the window to the current desktop and raise it (``wmctrl -R <WIN>``)."""
        from .desktop import get_current_desktop

        current = get_current_desktop()
        self._run(arguments.activate_args(self._id))
        self._desktop = current

    def raise_window(self) -> None:
        """Switch to the window's desktop and raise it (``wmctrl -a <WIN>``)."""
        self._run(arguments.raise_args(self._id))

    def close(self) -> None:
        """Close the window gracefully (``wmctrl -c <WIN>``).

        The instance should not be used afterwards.
        """
        self._run(arguments.close_args(self._id))

    def maximize(self) -> None:
        """Maximize vertically and horizontally, leaving fullscreen first."""
        self.change_state(State(Action.REMOVE, Property.FULLSCREEN))
        self.change_state(State(Action.ADD, Property.MAXIMIZED_VERT, Property.MAXIMIZED_HORZ))

    def fullscreen(self) -> None:
        self.change_state(State(Action.ADD, Property.FULLSCREEN))
