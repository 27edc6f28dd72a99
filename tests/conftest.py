import logging

import pytest

from paramprobe.connection import MemoryParameterSource, StaticParameter


# ----------------------------------------------------------------------
# Keep every test away from the real ~/.paramprobe and PARAMPROBE_* env
# ----------------------------------------------------------------------
@pytest.fixture(autouse=True)
def isolated_home(monkeypatch, tmp_path):
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    for name in ("CONFIG", "HOST", "PORT", "AUTH_TOKEN", "TIMEOUT", "SNAPSHOT", "LOG_LEVEL", "LOG_FORMAT"):
        monkeypatch.delenv(f"PARAMPROBE_{name}", raising=False)
    return home


# ----------------------------------------------------------------------
# Parameter registries
# ----------------------------------------------------------------------
@pytest.fixture
def alpha_bravo():
    """A visible parameter A and a hidable parameter B."""
    return MemoryParameterSource([
        StaticParameter("A", "Alpha", value="1"),
        StaticParameter("B", "Bravo", hidable=True, value="2"),
    ])


@pytest.fixture
def charlie():
    """A parameter with an indexed value that has nothing at index 5."""
    return MemoryParameterSource([
        StaticParameter("C", "Charlie", value="on", values={0: "left", 1: "right"}),
    ])


@pytest.fixture
def device_source():
    """A registry shaped like a small braille device, inserted out of order."""
    return MemoryParameterSource([
        StaticParameter("driverName", "Driver Name", value="HandyTech"),
        StaticParameter("clientPriority", "Client Priority", value=50),
        StaticParameter("serverVersion", "Server Version", hidable=True, value=8),
        StaticParameter("displaySize", "Display Size", value=[40, 1]),
        StaticParameter("cursorDots", "Cursor Dots"),
        StaticParameter("audibleAlerts", "Audible Alerts", value=False),
        StaticParameter("computerBrailleTable", "Computer Braille Table", values=["en-us", "de"]),
    ])


@pytest.fixture(autouse=True)
def restore_logging():
    """The CLI reconfigures the root logger; undo that after each test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
