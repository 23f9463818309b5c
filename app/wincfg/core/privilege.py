"""Administrator privilege checks.

Changing packages, features and machine-wide registry keys requires an
elevated process. The check runs once before any item is touched.
"""

import ctypes
import logging
import os

logger = logging.getLogger(__name__)


class PrivilegeError(Exception):
    """Raised when the process lacks administrative rights."""


def is_admin() -> bool:
    """Determine whether the current process token has administrative rights.

    Returns:
        True on Windows when the process is elevated, False otherwise.
    """
    if os.name != "nt":
        return False
    try:
        shell32 = ctypes.windll.shell32  # type: ignore[attr-defined]
        return bool(shell32.IsUserAnAdmin())
    except (AttributeError, OSError) as e:
        logger.debug("IsUserAnAdmin unavailable: %s", e)
        return False


def require_admin() -> None:
    """Abort unless the process is elevated.

    Raises:
        PrivilegeError: If the process lacks administrative rights.
    """
    if not is_admin():
        msg = "wincfg must be run from an elevated (Administrator) prompt"
        raise PrivilegeError(msg)
