"""Configuration management for servcon.

Three-layer config resolution (highest priority wins):
  1. CLI flags — explicit on the command line
  2. Project config — .servcon.json in the working directory or a parent
  3. Global config — ~/.servcon/config.json

Config is read-only; servcon never writes these files. Only the
`servcon` command reads them: ConsoleLogger, init_console() and the
module-level functions in servcon.console never touch the filesystem,
and a library caller wanting file settings passes them through
resolve_settings() and apply_settings() explicitly.
"""

import json
import os
from pathlib import Path

PROJECT_CONFIG_NAME = ".servcon.json"

# Keys that map onto ConsoleLogger attributes
SETTING_KEYS = [
    "mode",
    "show_headers",
    "show_types",
    "show_sections",
    "use_indented_sections",
]


# ---------------------------------------------------------------------------
# Config file locations
# ---------------------------------------------------------------------------
def get_global_config_dir():
    """Return the global config directory (~/.servcon/)."""
    return Path.home() / ".servcon"


def get_global_config_path():
    """Return path to the global config file."""
    return get_global_config_dir() / "config.json"


def find_project_config(start_dir=None):
    """Walk up from start_dir looking for .servcon.json.

    Returns the path if found, None otherwise.
    """
    current = Path(start_dir or os.getcwd()).resolve()
    for _ in range(20):  # safety limit
        candidate = current / PROJECT_CONFIG_NAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


# ---------------------------------------------------------------------------
# Config loading
# ---------------------------------------------------------------------------
def load_json(path):
    """Load a JSON object from path, returning empty dict on error."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (FileNotFoundError, json.JSONDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


def load_global_config():
    """Load the global config file."""
    return load_json(get_global_config_path())


def load_project_config(start_dir=None):
    """Load the nearest .servcon.json walking upward from start_dir."""
    path = find_project_config(start_dir)
    if path:
        return load_json(path), path
    return {}, None


# ---------------------------------------------------------------------------
# Config resolution
# ---------------------------------------------------------------------------
def _lookup(cfg, key):
    """Get key from a JSON dict, accepting hyphen or underscore spelling."""
    if key in cfg:
        return cfg[key]
    return cfg.get(key.replace("_", "-"))


def resolve_settings(args=None, start_dir=None, keys=None):
    """Resolve console settings using three-layer precedence.

    For each key in `keys`, checks (in order):
      1. CLI args (from argparse namespace), when not None
      2. Project .servcon.json
      3. Global ~/.servcon/config.json

    Returns a dict with every key present; unresolved keys are None.
    """
    if keys is None:
        keys = SETTING_KEYS

    project_cfg, _ = load_project_config(start_dir)
    global_cfg = load_global_config()

    resolved = {}
    for key in keys:
        # Layer 1: CLI
        cli_val = getattr(args, key, None)
        if cli_val is not None:
            resolved[key] = cli_val
            continue

        # Layer 2: Project config
        proj_val = _lookup(project_cfg, key)
        if proj_val is not None:
            resolved[key] = proj_val
            continue

        # Layer 3: Global config
        resolved[key] = _lookup(global_cfg, key)

    return resolved


def apply_settings(console, settings):
    """Copy resolved, non-None settings onto a ConsoleLogger.

    Returns the console for chaining.
    """
    for key in SETTING_KEYS:
        value = settings.get(key)
        if value is None:
            continue
        if key == "mode":
            console.set_mode(value)
        else:
            setattr(console, key, value)
    return console
