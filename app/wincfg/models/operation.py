"""Operation models for item processing.

This module defines the operation pair registered for each item category
and the data structures describing the outcome of a single item.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from wincfg.models.category import ItemCategory, RunMode

ItemT = TypeVar("ItemT")


@dataclass(frozen=True, slots=True)
class OperationOutcome:
    """Value returned by an add or remove operation.

    Attributes:
        success: Whether the operation completed successfully.
        message: Optional diagnostic message.
        skipped: True when nothing had to be done (e.g. the item to
            remove is not present on the system).
    """

    success: bool
    message: str | None = None
    skipped: bool = False

    @classmethod
    def ok(cls, message: str | None = None) -> "OperationOutcome":
        """Create a successful outcome."""
        return cls(success=True, message=message)

    @classmethod
    def failed(cls, message: str) -> "OperationOutcome":
        """Create a failed outcome."""
        return cls(success=False, message=message)

    @classmethod
    def noop(cls, message: str) -> "OperationOutcome":
        """Create an outcome for an item that needed no change."""
        return cls(success=True, message=message, skipped=True)


Operation = Callable[[ItemT], OperationOutcome]


@dataclass(frozen=True, slots=True)
class OperationPair(Generic[ItemT]):
    """Add and remove operations registered for one item category.

    A side set to None is unsupported for the category and is never
    invoked.

    Attributes:
        add: Operation adding one item, or None.
        remove: Operation removing one item, or None.
    """

    add: Operation[ItemT] | None = None
    remove: Operation[ItemT] | None = None

    def for_mode(self, mode: RunMode) -> Operation[ItemT] | None:
        """Return the operation matching a run mode.

        Args:
            mode: Mode of the current run.

        Returns:
            The registered operation, or None if unsupported.
        """
        if mode == RunMode.ADD:
            return self.add
        return self.remove


class ItemStatus(Enum):
    """Final status of an invoked item."""

    SUCCEEDED = "succeeded"
    FAILED = "failed"
    SKIPPED = "skipped"


@dataclass(frozen=True, slots=True)
class ItemResult:
    """Result of processing one item.

    Attributes:
        category: Category the item belongs to.
        item: Item identifier as rendered in the log.
        mode: Mode the item was processed in.
        status: Final status of the item.
        message: Optional diagnostic or error message.
    """

    category: ItemCategory
    item: str
    mode: RunMode
    status: ItemStatus
    message: str | None = None

    @property
    def failed(self) -> bool:
        """Check if the item failed."""
        return self.status == ItemStatus.FAILED
