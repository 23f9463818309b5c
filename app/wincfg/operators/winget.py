"""Winget package operator implementation.

Installs and uninstalls packages by identifier using the winget CLI.
"""

import logging

from wincfg.models.category import ItemCategory
from wincfg.models.operation import OperationOutcome
from wincfg.operators.base import Operator
from wincfg.utils.shell import run_command

logger = logging.getLogger(__name__)


class WingetOperator(Operator):
    """Operator for winget packages.

    Every invocation suppresses interactive prompts and accepts package
    and source agreements, so a run never waits for user input.
    """

    _INSTALL_FLAGS: tuple[str, ...] = (
        "--exact",
        "--silent",
        "--disable-interactivity",
        "--accept-package-agreements",
        "--accept-source-agreements",
    )
    _UNINSTALL_FLAGS: tuple[str, ...] = (
        "--exact",
        "--silent",
        "--disable-interactivity",
        "--accept-source-agreements",
    )

    @property
    def category(self) -> ItemCategory:
        """Return WINGET as the item category."""
        return ItemCategory.WINGET

    def add(self, item: str) -> OperationOutcome:
        """Install a package with winget install.

        Args:
            item: Winget package identifier (e.g., 'Git.Git').

        Returns:
            OperationOutcome for this package.
        """
        if self.dry_run:
            logger.info("Dry-run: Would install winget package %s", item)
            return OperationOutcome.ok("Dry-run: would install")

        args = ["winget", "install", "--id", item, *self._INSTALL_FLAGS]

        logger.info("Installing winget package: %s", item)
        return self._create_outcome(run_command(args), "winget")

    def remove(self, item: str) -> OperationOutcome:
        """Uninstall a package with winget uninstall.

        Args:
            item: Winget package identifier.

        Returns:
            OperationOutcome for this package.
        """
        if self.dry_run:
            logger.info("Dry-run: Would uninstall winget package %s", item)
            return OperationOutcome.ok("Dry-run: would uninstall")

        args = ["winget", "uninstall", "--id", item, *self._UNINSTALL_FLAGS]

        logger.info("Uninstalling winget package: %s", item)
        return self._create_outcome(run_command(args), "winget")
