"""Abstract base class for item operators.

This module defines the Operator interface that every item category
implements, and how an operator is exposed as an OperationPair.
"""

from abc import ABC, abstractmethod
from typing import Any, ClassVar

from wincfg.models.category import ItemCategory, RunMode
from wincfg.models.operation import OperationOutcome, OperationPair
from wincfg.utils.shell import CommandResult


class Operator(ABC):
    """Abstract base class for all item operators.

    Operators add or remove a single item of one category on the local
    machine. A mode missing from ``supported_modes`` is not exposed in
    the operator's OperationPair and is therefore never invoked.

    Attributes:
        dry_run: If True, only log actions without executing them.

    Example:
        >>> operator = WingetOperator(dry_run=True)
        >>> pair = operator.operations()
        >>> outcome = pair.add("Git.Git")
    """

    supported_modes: ClassVar[frozenset[RunMode]] = frozenset({RunMode.ADD, RunMode.REMOVE})

    def __init__(self, dry_run: bool = False) -> None:
        """Initialize the operator.

        Args:
            dry_run: If True, only simulate actions without executing them.
        """
        self._dry_run = dry_run

    @property
    def dry_run(self) -> bool:
        """Check if operator is in dry-run mode."""
        return self._dry_run

    @property
    @abstractmethod
    def category(self) -> ItemCategory:
        """Return the item category this operator handles."""

    def supports(self, mode: RunMode) -> bool:
        """Check if the operator implements a run mode."""
        return mode in self.supported_modes

    def add(self, item: Any) -> OperationOutcome:
        """Add one item.

        Args:
            item: Item identifier.

        Returns:
            OperationOutcome for the item.

        Raises:
            NotImplementedError: If the category does not support adding.
        """
        msg = f"Adding is not supported for {self.category.label} items"
        raise NotImplementedError(msg)

    def remove(self, item: Any) -> OperationOutcome:
        """Remove one item.

        Args:
            item: Item identifier.

        Returns:
            OperationOutcome for the item.

        Raises:
            NotImplementedError: If the category does not support removing.
        """
        msg = f"Removing is not supported for {self.category.label} items"
        raise NotImplementedError(msg)

    def operations(self) -> OperationPair[Any]:
        """Expose the supported operations as an OperationPair.

        Returns:
            OperationPair whose unsupported sides are None.
        """
        return OperationPair(
            add=self.add if self.supports(RunMode.ADD) else None,
            remove=self.remove if self.supports(RunMode.REMOVE) else None,
        )

    @staticmethod
    def _create_outcome(result: CommandResult, tool: str) -> OperationOutcome:
        """Create an OperationOutcome from a CommandResult.

        Args:
            result: The command execution result.
            tool: Tool name used in the fallback error message.

        Returns:
            OperationOutcome with appropriate success/error info.
        """
        if result.success:
            return OperationOutcome.ok("Operation completed")

        error_msg = result.error_output or f"{tool} exited with code {result.returncode}"
        return OperationOutcome.failed(error_msg)
