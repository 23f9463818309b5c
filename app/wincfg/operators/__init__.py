"""Item operators for adding and removing system items.

This module provides the abstract operator interface and one concrete
operator per item category.
"""

from wincfg.operators.appx import AppxPackageOperator, ProvisionedPackageOperator
from wincfg.operators.base import Operator
from wincfg.operators.dism import CapabilityOperator, OptionalFeatureOperator
from wincfg.operators.registry import RegistryOperator
from wincfg.operators.winget import WingetOperator


def get_operators(dry_run: bool = False) -> list[Operator]:
    """Get one operator instance per item category.

    Args:
        dry_run: Whether to run in dry-run mode.

    Returns:
        List of operators in item category order.
    """
    return [
        WingetOperator(dry_run=dry_run),
        CapabilityOperator(dry_run=dry_run),
        OptionalFeatureOperator(dry_run=dry_run),
        AppxPackageOperator(dry_run=dry_run),
        ProvisionedPackageOperator(dry_run=dry_run),
        RegistryOperator(dry_run=dry_run),
    ]


__all__ = [
    "AppxPackageOperator",
    "CapabilityOperator",
    "Operator",
    "OptionalFeatureOperator",
    "ProvisionedPackageOperator",
    "RegistryOperator",
    "WingetOperator",
    "get_operators",
]
