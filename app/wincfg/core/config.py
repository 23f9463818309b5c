"""Configuration model and I/O.

Stores defaults for the apply command in config.toml inside the
configuration directory. Command-line options override these values.
"""

import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from wincfg.core.paths import ensure_dir, get_config_path, get_default_log_path


class WincfgConfig(BaseModel):
    """Configuration for wincfg runs.

    Attributes:
        log_file: Run log path. If None, a file in the temp directory is used.
        silent: Do not echo run log entries to the console.
        dry_run: Log what would be done without changing the system.
    """

    model_config = ConfigDict(extra="forbid")

    log_file: Annotated[
        Path | None,
        Field(description="Run log path (None = temp directory)"),
    ] = None
    silent: Annotated[
        bool,
        Field(description="Suppress console echo of log entries"),
    ] = False
    dry_run: Annotated[
        bool,
        Field(description="Simulate operations without executing them"),
    ] = False

    @property
    def effective_log_file(self) -> Path:
        """Return the configured log file or the default one."""
        return self.log_file or get_default_log_path()


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the configuration file cannot be parsed."""


def load_config(path: Path | None = None) -> WincfgConfig:
    """Load configuration from a TOML file.

    A missing file is not an error: defaults are returned.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated WincfgConfig object.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the file cannot be read or the content is invalid.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        return WincfgConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return WincfgConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config content: {e}") from e


def save_config(config: WincfgConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The WincfgConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()

    tmp_path: Path | None = None
    try:
        ensure_dir(config_path.parent, "config")
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(_config_to_dict(config), f)
        os.replace(str(tmp_path), str(config_path))
    except (OSError, RuntimeError) as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path


def _config_to_dict(config: WincfgConfig) -> dict[str, object]:
    """Convert WincfgConfig to a dictionary for TOML serialization.

    TOML has no null, so an unset log file is left out.
    """
    result: dict[str, object] = {
        "silent": config.silent,
        "dry_run": config.dry_run,
    }
    if config.log_file is not None:
        result["log_file"] = str(config.log_file)
    return result
