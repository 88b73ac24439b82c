"""Configuration file I/O utilities.

Locates config files and reads raw TOML data from them.
"""

import os
import platform
import tomllib  # Built-in Python 3.11+
from pathlib import Path
from typing import Any

LOCAL_CONFIG_DIR = ".ogit"
CONFIG_FILENAME = "config.toml"


def get_global_config_path() -> Path:
    """Get the path to the global config file.

    The location is platform-dependent:
    - Linux/macOS: $XDG_CONFIG_HOME/ogit/config.toml or ~/.config/ogit/config.toml
    - Windows: %APPDATA%/ogit/config.toml

    Returns:
        Path to the global config file (may not exist)
    """
    if platform.system() == "Windows":
        appdata = os.environ.get("APPDATA", "")
        if appdata:
            return Path(appdata) / "ogit" / CONFIG_FILENAME
        return Path.home() / ".config" / "ogit" / CONFIG_FILENAME

    xdg_config = os.environ.get("XDG_CONFIG_HOME", "")
    if xdg_config:
        return Path(xdg_config) / "ogit" / CONFIG_FILENAME
    return Path.home() / ".config" / "ogit" / CONFIG_FILENAME


def get_local_config_path(repo_root: Path) -> Path:
    """Get the repository-local config path (may not exist)."""
    return repo_root / LOCAL_CONFIG_DIR / CONFIG_FILENAME


def load_config_data(path: Path) -> dict[str, Any]:
    """Load raw TOML data from a config file.

    Args:
        path: Path to config.toml file

    Returns:
        Dictionary with parsed TOML data

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config file is malformed
    """
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid TOML in config file: {e}") from e
