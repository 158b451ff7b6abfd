"""Shared fixtures: a fake wmctrl that records invocations."""

import subprocess

import pytest


WINDOW_LIST = (
    "0x01e00006 -1 0    0    1920 1080 desktop_window.Nautilus  laptop Desktop\n"
    "0x03a00003  0 100  200  800  600  gnome-terminal-server.Gnome-terminal  laptop user@laptop: ~/src\n"
    "0x04200001  1 960  0    960  1080 Navigator.firefox  laptop Mozilla Firefox\n"
    "0x05000002  0 10   10   300  200  xeyes.XEyes  N/A \n"
)

WM_INFO = (
    "Name: GNOME Shell\n"
    "Class: N/A\n"
    "PID: 1234\n"
    'Window manager\'s "showing the desktop" mode: OFF\n'
)

DESKTOP_LIST = (
    "0  - DG: 1920x1080  VP: N/A  WA: 0,27 1920x1053  Workspace 1\n"
    "1  * DG: 1920x1080  VP: 0,0  WA: 0,27 1920x1053  Workspace 2\n"
)


class FakeWmctrl:
    """Stands in for subprocess.run; answers queries and records every call."""

    def __init__(self):
        self.calls = []
        self.outputs = {
            ("-l", "-G", "-x"): WINDOW_LIST,
            ("-m",): WM_INFO,
            ("-d",): DESKTOP_LIST,
        }

    def __call__(self, command, capture_output=False, text=False, **kwargs):
        self.calls.append(list(command))
        stdout = self.outputs.get(tuple(command[1:]), "")
        return subprocess.CompletedProcess(command, 0, stdout=stdout, stderr="")

    @property
    def last_args(self):
        return self.calls[-1][1:]


@pytest.fixture
def fake_wmctrl(monkeypatch):
    """Replace subprocess.run in the invoker with a FakeWmctrl."""
    fake = FakeWmctrl()
    monkeypatch.setattr("wmbind.utils.wmctrl.subprocess.run", fake)
    monkeypatch.setattr("wmbind.core.config.WMCTRL_PATH", "wmctrl")
    return fake


@pytest.fixture
def window_list_output():
    """Sample ``wmctrl -l -G -x`` output."""
    return WINDOW_LIST


@pytest.fixture
def wm_info_output():
    """Sample ``wmctrl -m`` output."""
    return WM_INFO


@pytest.fixture
def desktop_list_output():
    """Sample ``wmctrl -d`` output."""
    return DESKTOP_LIST
