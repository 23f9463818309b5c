"""Unit tests for theme management."""

from pathlib import Path

import pytest
from rich.theme import Theme
from wincfg.core.theme import ThemeColors, get_rich_theme, load_theme


class TestThemeColors:
    """Tests for ThemeColors validation."""

    def test_accepts_short_hex(self) -> None:
        """#RGB colors are valid."""
        assert ThemeColors(error="#f00").error == "#f00"

    @pytest.mark.parametrize("color", ["red", "#12345", "#gggggg"])
    def test_rejects_invalid(self, color: str) -> None:
        """Non-hex colors raise ValueError."""
        with pytest.raises(ValueError):
            ThemeColors(error=color)


class TestLoadTheme:
    """Tests for load_theme()."""

    def test_missing_file_uses_defaults(self, tmp_path: Path) -> None:
        """No theme file gives the default colors."""
        assert load_theme(tmp_path / "theme.toml") == ThemeColors()

    def test_user_override(self, tmp_path: Path) -> None:
        """Colors from the theme file override defaults."""
        path = tmp_path / "theme.toml"
        path.write_text('[colors]\nsuccess = "#00ff00"\n')

        colors = load_theme(path)

        assert colors.success == "#00ff00"
        assert colors.error == ThemeColors().error

    def test_invalid_override_falls_back(self, tmp_path: Path) -> None:
        """An invalid color falls back to defaults."""
        path = tmp_path / "theme.toml"
        path.write_text('[colors]\nsuccess = "green"\n')

        assert load_theme(path) == ThemeColors()


class TestGetRichTheme:
    """Tests for get_rich_theme()."""

    def test_defines_log_styles(self) -> None:
        """The Rich theme defines the styles used by the run log."""
        theme = get_rich_theme(ThemeColors())

        assert isinstance(theme, Theme)
        assert "log.error" in theme.styles
        assert "bold_header" in theme.styles
