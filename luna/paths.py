"""Locations of the shell's per-user files."""

from __future__ import annotations

import os
from pathlib import Path


def luna_dir() -> Path:
    """Return the per-user directory, ``$HOME/.luna`` (``/`` when HOME is unset)."""
    home = os.environ.get("HOME", "/")
    return Path(home) / ".luna"


def history_file() -> Path:
    """Return the path of the command history file."""
    return luna_dir() / ".luna_history"


def config_file() -> Path:
    """Return the path of the TOML configuration file."""
    return luna_dir() / "config.toml"


def themes_dir() -> Path:
    """Return the directory holding theme scripts."""
    return luna_dir() / "themes"


def plugins_dir() -> Path:
    """Return the directory holding plugin scripts."""
    return luna_dir() / "plugins"