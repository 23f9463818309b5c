"""Unit tests for configuration I/O."""

from pathlib import Path
from unittest.mock import patch

import pytest
from wincfg.core.config import (
    ConfigError,
    ConfigParseError,
    WincfgConfig,
    load_config,
    save_config,
)


class TestWincfgConfig:
    """Tests for the WincfgConfig model."""

    def test_defaults(self) -> None:
        """Defaults echo to the console and change the system."""
        config = WincfgConfig()

        assert config.log_file is None
        assert config.silent is False
        assert config.dry_run is False

    def test_effective_log_file_default(self, tmp_path: Path) -> None:
        """Without log_file the default temp path is used."""
        with patch("wincfg.core.config.get_default_log_path", return_value=tmp_path / "d.log"):
            assert WincfgConfig().effective_log_file == tmp_path / "d.log"

    def test_effective_log_file_override(self, tmp_path: Path) -> None:
        """log_file wins over the default path."""
        config = WincfgConfig(log_file=tmp_path / "run.log")

        assert config.effective_log_file == tmp_path / "run.log"

    def test_rejects_unknown_keys(self) -> None:
        """Unknown settings are rejected."""
        with pytest.raises(ValueError):
            WincfgConfig.model_validate({"colour": "blue"})


class TestLoadConfig:
    """Tests for load_config()."""

    def test_missing_file_returns_defaults(self, tmp_path: Path) -> None:
        """A missing config file is not an error."""
        assert load_config(tmp_path / "config.toml") == WincfgConfig()

    def test_loads_values(self, tmp_path: Path) -> None:
        """Values from the file are applied."""
        path = tmp_path / "config.toml"
        path.write_text('silent = true\nlog_file = "C:/Logs/wincfg.log"\n')

        config = load_config(path)

        assert config.silent is True
        assert config.log_file == Path("C:/Logs/wincfg.log")

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Broken TOML raises ConfigParseError."""
        path = tmp_path / "config.toml"
        path.write_text("silent = [")

        with pytest.raises(ConfigParseError, match="Invalid TOML"):
            load_config(path)

    def test_invalid_content(self, tmp_path: Path) -> None:
        """Schema violations raise ConfigError."""
        path = tmp_path / "config.toml"
        path.write_text('silent = "sometimes"\n')

        with pytest.raises(ConfigError, match="Invalid config content"):
            load_config(path)


class TestSaveConfig:
    """Tests for save_config()."""

    def test_round_trip(self, tmp_path: Path) -> None:
        """A saved config loads back unchanged."""
        path = tmp_path / "nested" / "config.toml"
        config = WincfgConfig(log_file=tmp_path / "run.log", silent=True)

        saved = save_config(config, path)

        assert saved == path
        assert load_config(path) == config

    def test_omits_unset_log_file(self, tmp_path: Path) -> None:
        """An unset log file is not written."""
        path = tmp_path / "config.toml"

        save_config(WincfgConfig(), path)

        assert "log_file" not in path.read_text()
        assert not list(tmp_path.glob("*.tmp"))

    def test_unwritable_directory(self, tmp_path: Path) -> None:
        """A config directory that cannot be created raises ConfigError."""
        blocker = tmp_path / "blocker"
        blocker.write_text("")

        with pytest.raises(ConfigError, match="Failed to write config"):
            save_config(WincfgConfig(), blocker / "config.toml")
