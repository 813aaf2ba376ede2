"""Shared test fixtures for servcon test suite."""

import io
import json
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from servcon.lib.console_lib import ConsoleLogger
from servcon.lib.console_lib import manager as _manager_mod


# ---------------------------------------------------------------------------
# Console fixtures
# ---------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def _reset_console():
    """Start every test without a module-level console singleton."""
    old = _manager_mod._console
    _manager_mod._console = None
    yield
    _manager_mod._console = old


@pytest.fixture
def buf():
    """A StringIO buffer for capturing output."""
    return io.StringIO()


@pytest.fixture
def console(buf):
    """A ConsoleLogger with default settings writing to a buffer."""
    return ConsoleLogger(file=buf)


# ---------------------------------------------------------------------------
# Config fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def tmp_config_home(tmp_path):
    """Provide a temporary home directory for ~/.servcon/config.json."""
    home = tmp_path / "home"
    home.mkdir()
    with patch.dict(os.environ, {"HOME": str(home), "USERPROFILE": str(home)}):
        with patch("pathlib.Path.home", return_value=home):
            yield home


@pytest.fixture
def tmp_project(tmp_path):
    """Provide an empty project directory."""
    project = tmp_path / "project"
    project.mkdir()
    return project


@pytest.fixture
def sample_project_config(tmp_project):
    """Write a .servcon.json file in the tmp project."""
    config = {
        "mode": "sparse",
        "show-types": True,
    }
    path = tmp_project / ".servcon.json"
    path.write_text(json.dumps(config, indent=2), encoding="utf-8")
    return path, config


@pytest.fixture
def sample_global_config(tmp_config_home):
    """Write a global config file in the tmp home."""
    config_dir = tmp_config_home / ".servcon"
    config_dir.mkdir()
    config = {
        "mode": "verbose",
        "show_sections": "always",
        "use_indented_sections": False,
    }
    path = config_dir / "config.json"
    path.write_text(json.dumps(config, indent=2), encoding="utf-8")
    return path, config
