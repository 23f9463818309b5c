"""Unit tests for administrator privilege checks."""

from unittest.mock import MagicMock, patch

import pytest
from wincfg.core.privilege import PrivilegeError, is_admin, require_admin


class TestIsAdmin:
    """Tests for is_admin()."""

    def test_false_on_non_windows(self) -> None:
        """Non-Windows platforms are never elevated."""
        with patch("wincfg.core.privilege.os.name", "posix"):
            assert is_admin() is False

    def test_uses_shell32(self) -> None:
        """On Windows the answer comes from IsUserAnAdmin."""
        windll = MagicMock()
        windll.shell32.IsUserAnAdmin.return_value = 1
        with (
            patch("wincfg.core.privilege.os.name", "nt"),
            patch("wincfg.core.privilege.ctypes.windll", windll, create=True),
        ):
            assert is_admin() is True

    def test_false_when_call_fails(self) -> None:
        """An unavailable shell32 counts as not elevated."""
        windll = MagicMock()
        windll.shell32.IsUserAnAdmin.side_effect = OSError("no shell32")
        with (
            patch("wincfg.core.privilege.os.name", "nt"),
            patch("wincfg.core.privilege.ctypes.windll", windll, create=True),
        ):
            assert is_admin() is False


class TestRequireAdmin:
    """Tests for require_admin()."""

    def test_raises_when_not_elevated(self) -> None:
        """require_admin() raises PrivilegeError without elevation."""
        with (
            patch("wincfg.core.privilege.is_admin", return_value=False),
            pytest.raises(PrivilegeError, match="elevated"),
        ):
            require_admin()

    def test_passes_when_elevated(self) -> None:
        """require_admin() returns quietly when elevated."""
        with patch("wincfg.core.privilege.is_admin", return_value=True):
            require_admin()
