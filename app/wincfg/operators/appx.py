"""AppX package operators.

Removes installed and provisioned AppX packages. Item files list short
identifiers (e.g. 'Microsoft.BingNews'); each is resolved against the
packages present on the system before removal.

Installing AppX packages is not supported: use the winget category to
install applications instead.
"""

import logging
from typing import ClassVar

from wincfg.models.category import ItemCategory, RunMode
from wincfg.models.operation import OperationOutcome
from wincfg.operators.base import Operator
from wincfg.utils.shell import ps_quote, run_powershell

logger = logging.getLogger(__name__)


def resolve_identifier(short_id: str, installed: list[str]) -> str | None:
    """Resolve a short identifier to an installed full identifier.

    Matching is case-insensitive: an entry matches when it equals the
    short identifier or starts with it. When several entries match, the
    first one in listing order wins.

    Args:
        short_id: Identifier from the item file.
        installed: Full identifiers present on the system.

    Returns:
        The matching full identifier, or None if nothing matches.
    """
    wanted = short_id.lower()
    for full_id in installed:
        if full_id.lower().startswith(wanted):
            return full_id
    return None


class AppxOperatorBase(Operator):
    """Base operator for AppX removal by resolved identifier."""

    supported_modes: ClassVar[frozenset[RunMode]] = frozenset({RunMode.REMOVE})

    # PowerShell pipeline printing one full identifier per line
    _LIST_SCRIPT: ClassVar[str] = ""

    def list_installed(self) -> list[str]:
        """List full identifiers of the packages on the system.

        Raises:
            RuntimeError: If the listing command fails.
        """
        result = run_powershell(self._LIST_SCRIPT)
        if not result.success:
            msg = f"Cannot list {self.category.label}s: {result.error_output}"
            raise RuntimeError(msg)
        return [line.strip() for line in result.stdout.splitlines() if line.strip()]

    def _remove_script(self, full_id: str) -> str:
        """Return the PowerShell script removing one package."""
        raise NotImplementedError

    def remove(self, item: str) -> OperationOutcome:
        """Remove the first installed package matching an identifier.

        Args:
            item: Short or full package identifier.

        Returns:
            OperationOutcome for this package; a no-op outcome when no
            installed package matches.
        """
        full_id = resolve_identifier(item, self.list_installed())
        if full_id is None:
            logger.info("No %s matches %s", self.category.label, item)
            return OperationOutcome.noop(f"No installed {self.category.label} matches '{item}'")

        if self.dry_run:
            logger.info("Dry-run: Would remove %s %s", self.category.label, full_id)
            return OperationOutcome.ok(f"Dry-run: would remove {full_id}")

        logger.info("Removing %s: %s", self.category.label, full_id)
        result = run_powershell(self._remove_script(full_id))
        outcome = self._create_outcome(result, "powershell")
        if outcome.success:
            return OperationOutcome.ok(f"Removed {full_id}")
        return outcome


class AppxPackageOperator(AppxOperatorBase):
    """Operator for AppX packages installed for users."""

    _LIST_SCRIPT: ClassVar[str] = (
        "Get-AppxPackage -AllUsers | Select-Object -ExpandProperty PackageFullName"
    )

    @property
    def category(self) -> ItemCategory:
        """Return PACKAGE as the item category."""
        return ItemCategory.PACKAGE

    def _remove_script(self, full_id: str) -> str:
        return f"Remove-AppxPackage -Package {ps_quote(full_id)} -AllUsers -ErrorAction Stop"


class ProvisionedPackageOperator(AppxOperatorBase):
    """Operator for AppX packages provisioned into the running image."""

    _LIST_SCRIPT: ClassVar[str] = (
        "Get-AppxProvisionedPackage -Online | Select-Object -ExpandProperty PackageName"
    )

    @property
    def category(self) -> ItemCategory:
        """Return PROVISIONED_PACKAGE as the item category."""
        return ItemCategory.PROVISIONED_PACKAGE

    def _remove_script(self, full_id: str) -> str:
        return (
            f"Remove-AppxProvisionedPackage -Online -PackageName {ps_quote(full_id)} "
            "-ErrorAction Stop | Out-Null"
        )
