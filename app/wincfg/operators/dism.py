"""Capability and optional feature operators.

Both categories are changed through dism.exe against the running image.
Restarts are always suppressed with /NoRestart.
"""

import logging

from wincfg.models.category import ItemCategory
from wincfg.models.operation import OperationOutcome
from wincfg.operators.base import Operator
from wincfg.utils.shell import CommandResult, run_command

logger = logging.getLogger(__name__)

# ERROR_SUCCESS_REBOOT_REQUIRED
REBOOT_REQUIRED_EXIT_CODE = 3010


class DismOperator(Operator):
    """Base operator for items changed through dism.exe /Online."""

    _DISM = "dism.exe"

    def _run_dism(self, verb: str, item: str, *options: str) -> OperationOutcome:
        """Run one dism.exe servicing command for an item.

        Args:
            verb: Human verb for log messages.
            item: Capability or feature name.
            options: DISM arguments following /Online.

        Returns:
            OperationOutcome for the item.
        """
        if self.dry_run:
            logger.info("Dry-run: Would %s %s %s", verb, self.category.label, item)
            return OperationOutcome.ok(f"Dry-run: would {verb}")

        args = [self._DISM, "/Online", *options, "/Quiet", "/NoRestart"]

        logger.info("Running dism to %s %s: %s", verb, self.category.label, item)
        return self._dism_outcome(run_command(args))

    def _dism_outcome(self, result: CommandResult) -> OperationOutcome:
        """Create an outcome, treating 'reboot required' as success."""
        if result.returncode == REBOOT_REQUIRED_EXIT_CODE:
            return OperationOutcome.ok("Operation completed; restart required")
        return self._create_outcome(result, "dism.exe")


class CapabilityOperator(DismOperator):
    """Operator for Windows capabilities (Features on Demand)."""

    @property
    def category(self) -> ItemCategory:
        """Return CAPABILITY as the item category."""
        return ItemCategory.CAPABILITY

    def add(self, item: str) -> OperationOutcome:
        """Add a capability, e.g. 'OpenSSH.Client~~~~0.0.1.0'."""
        return self._run_dism("add", item, "/Add-Capability", f"/CapabilityName:{item}")

    def remove(self, item: str) -> OperationOutcome:
        """Remove a capability."""
        return self._run_dism("remove", item, "/Remove-Capability", f"/CapabilityName:{item}")


class OptionalFeatureOperator(DismOperator):
    """Operator for Windows optional features."""

    @property
    def category(self) -> ItemCategory:
        """Return OPTIONAL_FEATURE as the item category."""
        return ItemCategory.OPTIONAL_FEATURE

    def add(self, item: str) -> OperationOutcome:
        """Enable a feature and its parent features."""
        return self._run_dism("enable", item, "/Enable-Feature", f"/FeatureName:{item}", "/All")

    def remove(self, item: str) -> OperationOutcome:
        """Disable a feature."""
        return self._run_dism("disable", item, "/Disable-Feature", f"/FeatureName:{item}")
