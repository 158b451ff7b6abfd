"""Tests for Window actions against a fake wmctrl."""

import pytest

from wmbind.core.types import Action, Property, State, Transformation


@pytest.fixture
def window(fake_wmctrl):
    from wmbind.utils.window_manager import list_windows

    win = list_windows()[1]
    fake_wmctrl.calls.clear()
    return win


class TestWindowFields:
    """Tests for read-only window fields."""

    def test_properties(self, window):
        assert window.id == "0x03a00003"
        assert window.desktop == 0
        assert window.client_machine == "laptop"
        assert window.wm_class == "gnome-terminal-server.Gnome-terminal"
        assert window.transformation == Transformation(100, 200, 800, 600)

    def test_equality_by_id(self, window):
        from wmbind.window import Window

        other = Window("0x03a00003", 3, "x", "other", Transformation(0, 0, 1, 1), "c")
        assert window == other
        assert hash(window) == hash(other)


class TestWindowActions:
    """Tests that actions issue the right command and update local fields."""

    def test_set_title(self, window, fake_wmctrl):
        window.set_title("Build log")

        assert window.title == "Build log"
        assert fake_wmctrl.calls == [["wmctrl", "-i", "-r", "0x03a00003", "-N", "Build log"]]

    def test_set_icon_title_keeps_title(self, window, fake_wmctrl):
        window.set_icon_title("log")

        assert window.title == "user@laptop: ~/src"
        assert fake_wmctrl.last_args == ["-i", "-r", "0x03a00003", "-I", "log"]

    def test_set_both_title(self, window, fake_wmctrl):
        window.set_both_title("Both")

        assert window.title == "Both"
        assert fake_wmctrl.last_args == ["-i", "-r", "0x03a00003", "-T", "Both"]

    def test_change_state(self, window, fake_wmctrl):
        window.change_state(State(Action.ADD, Property.FULLSCREEN))

        assert fake_wmctrl.last_args == ["-i", "-r", "0x03a00003", "-b", "add,fullscreen"]

    def test_transform(self, window, fake_wmctrl):
        window.transform(Transformation(0, 0, 960, 540))

        assert window.transformation == Transformation(0, 0, 960, 540)
        assert fake_wmctrl.last_args == ["-i", "-r", "0x03a00003", "-e", "0,0,0,960,540"]

    def test_set_desktop(self, window, fake_wmctrl):
        window.set_desktop(2)

        assert window.desktop == 2
        assert fake_wmctrl.last_args == ["-i", "-r", "0x03a00003", "-t", "2"]

    def test_activate_moves_to_current_desktop(self, window, fake_wmctrl):
        """Test that activate reads the current desktop and then issues -R."""
        window.activate()

        assert window.desktop == 1
        assert fake_wmctrl.calls == [
            ["wmctrl", "-d"],
            ["wmctrl", "-i", "-R", "0x03a00003"],
        ]

    def test_raise_window(self, window, fake_wmctrl):
        window.raise_window()

        assert window.desktop == 0
        assert fake_wmctrl.last_args == ["-i", "-a", "0x03a00003"]

    def test_close(self, window, fake_wmctrl):
        window.close()

        assert fake_wmctrl.last_args == ["-i", "-c", "0x03a00003"]

    def test_maximize(self, window, fake_wmctrl):
        window.maximize()

        assert [call[1:] for call in fake_wmctrl.calls] == [
            ["-i", "-r", "0x03a00003", "-b", "remove,fullscreen"],
            ["-i", "-r", "0x03a00003", "-b", "add,maximized_vert,maximized_horz"],
        ]

    def test_fields_not_verified(self, window, fake_wmctrl):
        """Test that local fields change even though wmctrl reports nothing."""
        window.set_desktop(5)
        window.transform(Transformation(1, 2, 3, 4))

        from wmbind.utils.window_manager import list_windows

        refreshed = list_windows()[1]
        assert window.desktop == 5
        assert refreshed.desktop == 0


class TestSpawnFailure:
    """Tests for the only surfaced failure mode."""

    def test_missing_binary_raises(self, window, monkeypatch):
        from wmbind.utils.wmctrl import DependencyMissingError, WindowManagerError

        def boom(*args, **kwargs):
            raise FileNotFoundError("wmctrl")

        monkeypatch.setattr("wmbind.utils.wmctrl.subprocess.run", boom)

        with pytest.raises(DependencyMissingError) as exc_info:
            window.close()
        assert isinstance(exc_info.value, WindowManagerError)
        assert "wmctrl -i -c 0x03a00003" in str(exc_info.value)

    def test_fields_unchanged_when_spawn_fails(self, window, monkeypatch):
        """Test that a failed spawn leaves title, geometry and desktop as listed."""
        from wmbind.utils.wmctrl import DependencyMissingError

        def boom(*args, **kwargs):
            raise FileNotFoundError("wmctrl")

        monkeypatch.setattr("wmbind.utils.wmctrl.subprocess.run", boom)

        with pytest.raises(DependencyMissingError):
            window.set_title("New")
        with pytest.raises(DependencyMissingError):
            window.set_both_title("New")
        with pytest.raises(DependencyMissingError):
            window.transform(Transformation(1, 2, 3, 4))
        with pytest.raises(DependencyMissingError):
            window.set_desktop(3)
        with pytest.raises(DependencyMissingError):
            window.activate()

        assert window.title == "user@laptop: ~/src"
        assert window.transformation == Transformation(100, 200, 800, 600)
        assert window.desktop == 0

    def test_set_desktop_rejects_non_numeric(self, window, fake_wmctrl):
        """Test that a bad desktop value fails before wmctrl is called."""
        with pytest.raises(ValueError):
            window.set_desktop("next")

        assert fake_wmctrl.calls == []
        assert window.desktop == 0


class TestCommandLogging:
    """Tests for logging of spawned commands."""

    def test_command_logged_shell_quoted(self, window, fake_wmctrl, caplog):
        """Test that each invocation is logged at DEBUG as a quoted command line."""
        import logging

        with caplog.at_level(logging.DEBUG, logger="wmbind.utils.wmctrl"):
            window.set_title("My Title")

        assert "wmctrl -i -r 0x03a00003 -N 'My Title'" in caplog.text
