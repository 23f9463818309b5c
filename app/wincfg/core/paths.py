"""Path management for wincfg.

Configuration lives in %APPDATA%\\wincfg on Windows and in the XDG config
directory elsewhere. The run log defaults to the system temp directory.
"""

import os
import tempfile
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "wincfg"

LOG_FILE_NAME = "wincfg.log"


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to %APPDATA%\\wincfg, $XDG_CONFIG_HOME/wincfg or ~/.config/wincfg.
    """
    appdata = os.environ.get("APPDATA")
    if appdata:
        return Path(appdata) / APP_NAME
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_config_path() -> Path:
    """Get the default configuration file path."""
    return get_config_dir() / "config.toml"


def get_theme_path() -> Path:
    """Get the user theme override file path."""
    return get_config_dir() / "theme.toml"


def get_default_log_path() -> Path:
    """Get the default run log path under the system temp directory."""
    return Path(tempfile.gettempdir()) / APP_NAME / LOG_FILE_NAME


def ensure_dir(path: Path, name: str) -> Path:
    """Create directory if it doesn't exist.

    Args:
        path: Directory path to create.
        name: Human-readable name for error messages.

    Returns:
        The created/existing directory path.

    Raises:
        RuntimeError: If directory cannot be created.
    """
    try:
        path.mkdir(parents=True, exist_ok=True)
    except PermissionError as e:
        msg = f"Cannot create {name} directory {path}: Permission denied"
        raise RuntimeError(msg) from e
    except OSError as e:
        msg = f"Cannot create {name} directory {path}: {e}"
        raise RuntimeError(msg) from e
    return path
