"""Unit tests for path management."""

import os
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest
from wincfg.core.paths import (
    APP_NAME,
    ensure_dir,
    get_config_dir,
    get_config_path,
    get_default_log_path,
    get_theme_path,
)


class TestGetConfigDir:
    """Tests for get_config_dir()."""

    def test_prefers_appdata(self, tmp_path: Path) -> None:
        """%APPDATA% is used when set."""
        with patch.dict(os.environ, {"APPDATA": str(tmp_path), "XDG_CONFIG_HOME": "/x"}):
            assert get_config_dir() == tmp_path / APP_NAME

    def test_respects_xdg_config_home(self, tmp_path: Path) -> None:
        """XDG_CONFIG_HOME is used without APPDATA."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}, clear=True):
            assert get_config_dir() == tmp_path / APP_NAME

    def test_default_config_dir(self) -> None:
        """Falls back to ~/.config/wincfg."""
        with patch.dict(os.environ, {}, clear=True):
            assert get_config_dir() == Path.home() / ".config" / APP_NAME

    def test_files_inside_config_dir(self, tmp_path: Path) -> None:
        """Config and theme files live in the config dir."""
        with patch.dict(os.environ, {"APPDATA": str(tmp_path)}):
            assert get_config_path() == tmp_path / APP_NAME / "config.toml"
            assert get_theme_path() == tmp_path / APP_NAME / "theme.toml"


class TestDefaultLogPath:
    """Tests for get_default_log_path()."""

    def test_under_temp_dir(self) -> None:
        """The default log lives under the system temp directory."""
        path = get_default_log_path()

        assert path.parent.parent == Path(tempfile.gettempdir())
        assert path.name == "wincfg.log"


class TestEnsureDir:
    """Tests for ensure_dir()."""

    def test_creates_nested(self, tmp_path: Path) -> None:
        """Missing parents are created."""
        target = tmp_path / "a" / "b"

        assert ensure_dir(target, "test") == target
        assert target.is_dir()

    def test_raises_runtime_error(self, tmp_path: Path) -> None:
        """Failure is reported as RuntimeError."""
        blocker = tmp_path / "file"
        blocker.write_text("")

        with pytest.raises(RuntimeError, match="Cannot create test directory"):
            ensure_dir(blocker / "sub", "test")
