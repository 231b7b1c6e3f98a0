"""XDG base directory resolution for configuration and cache files."""

import os
import platform
from pathlib import Path

APP_DIR_NAME = "de.swsnr.home"


def _uses_xdg() -> bool:
    system = platform.system()
    return system == "Linux" or system.endswith("BSD")


def _xdg_home(env_var: str, fallback: str) -> Path:
    """$env_var if set and non-empty, else ~/fallback."""
    return Path(os.environ.get(env_var) or Path.home() / fallback)


def get_config_dir() -> Path:
    """Return the configuration directory.

    On Linux/BSD: ``$XDG_CONFIG_HOME/de.swsnr.home/`` (default ``~/.config/de.swsnr.home/``).
    Elsewhere: ``~/.de.swsnr.home/``.
    """
    if _uses_xdg():
        return _xdg_home("XDG_CONFIG_HOME", ".config") / APP_DIR_NAME
    return Path.home() / f".{APP_DIR_NAME}"


def get_cache_dir() -> Path:
    """Return the cache directory.

    On Linux/BSD: ``$XDG_CACHE_HOME/de.swsnr.home/`` (default ``~/.cache/de.swsnr.home/``).
    Elsewhere: ``~/.de.swsnr.home/cache/``.
    """
    if _uses_xdg():
        return _xdg_home("XDG_CACHE_HOME", ".cache") / APP_DIR_NAME
    return Path.home() / f".{APP_DIR_NAME}" / "cache"


def default_config_file() -> Path:
    return get_config_dir() / "home.toml"


def default_cache_file() -> Path:
    return get_cache_dir() / "connections.json"
