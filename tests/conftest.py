"""Shared fixtures for dbg tests."""

import io

import pytest

import dbg
from dbg.utils import config as cfg


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep the user's DBG_* variables and config file out of every test.

    CONFIG_DIR/FILE are evaluated at import time, so they are patched to point
    into a temporary home directory.
    """
    fake_home = tmp_path / "home"
    fake_home.mkdir()
    monkeypatch.setenv("HOME", str(fake_home))
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.delenv("DBG_ROOT", raising=False)
    config_dir = fake_home / ".config" / "dbg"
    monkeypatch.setattr(cfg, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(cfg, "CONFIG_FILE", config_dir / "config.toml")
    return fake_home


@pytest.fixture(autouse=True)
def fresh_default_printer():
    """Give each test its own process-wide printer writing to stdout."""
    dbg.set_default_printer()
    yield
    dbg.set_default_printer()


@pytest.fixture()
def sink() -> io.StringIO:
    return io.StringIO()


@pytest.fixture()
def printer(sink) -> dbg.StylePrinter:
    return dbg.StylePrinter(sink=sink)
