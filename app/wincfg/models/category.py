"""Item category and run mode models.

This module defines the closed set of manageable system item categories
and the mode a run operates in.
"""

from enum import Enum


class ItemCategory(Enum):
    """Class of manageable system item.

    Members are declared in processing order: a batch visits categories
    in the order they appear here.

    Attributes:
        WINGET: Packages installed and removed through winget.
        CAPABILITY: Windows capabilities (Features on Demand).
        OPTIONAL_FEATURE: Windows optional features.
        PACKAGE: AppX packages installed for users.
        PROVISIONED_PACKAGE: AppX packages provisioned into the image.
        REGISTRY: Registry values.
    """

    WINGET = "winget"
    CAPABILITY = "capability"
    OPTIONAL_FEATURE = "optional-feature"
    PACKAGE = "package"
    PROVISIONED_PACKAGE = "provisioned-package"
    REGISTRY = "registry"

    @property
    def label(self) -> str:
        """Return a human-readable name for log messages."""
        return _LABELS[self]


_LABELS: dict[ItemCategory, str] = {
    ItemCategory.WINGET: "winget package",
    ItemCategory.CAPABILITY: "capability",
    ItemCategory.OPTIONAL_FEATURE: "optional feature",
    ItemCategory.PACKAGE: "package",
    ItemCategory.PROVISIONED_PACKAGE: "provisioned package",
    ItemCategory.REGISTRY: "registry value",
}


class RunMode(Enum):
    """Direction of a run.

    Attributes:
        ADD: Install, enable or create every listed item.
        REMOVE: Uninstall, disable or delete every listed item.
    """

    ADD = "add"
    REMOVE = "remove"
