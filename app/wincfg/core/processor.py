"""Batch processing of item operations.

Walks the operation table category by category and item by item, invokes
the operation for the run mode and records the outcome. A failing item is
logged and never stops the batch.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from wincfg.models.category import RunMode
from wincfg.models.operation import ItemResult, ItemStatus, OperationOutcome

if TYPE_CHECKING:
    from collections.abc import Sequence

    from wincfg.core.logger import RunLogger
    from wincfg.core.table import CategoryBatch

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class BatchReport:
    """Results of one batch.

    Attributes:
        mode: Mode the batch ran in.
        results: One result per invoked item, in processing order.
    """

    mode: RunMode
    results: list[ItemResult] = field(default_factory=list)

    @property
    def succeeded(self) -> int:
        """Count items that were changed successfully."""
        return sum(1 for r in self.results if r.status == ItemStatus.SUCCEEDED)

    @property
    def failed(self) -> int:
        """Count items that failed."""
        return sum(1 for r in self.results if r.status == ItemStatus.FAILED)

    @property
    def skipped(self) -> int:
        """Count items that needed no change."""
        return sum(1 for r in self.results if r.status == ItemStatus.SKIPPED)

    @property
    def has_failures(self) -> bool:
        """Check if any item failed."""
        return self.failed > 0


def process_batch(
    mode: RunMode,
    batches: Sequence[CategoryBatch],
    run_log: RunLogger,
) -> BatchReport:
    """Process every item of every category in order.

    For each item a processing entry is logged. Categories without an
    operation for the mode are skipped without invoking anything. Any
    exception raised by an operation, and any unsuccessful outcome, is
    logged as an error and processing continues with the next item.

    Args:
        mode: Add or remove.
        batches: Operation table entries in processing order.
        run_log: Run log receiving processing and error entries.

    Returns:
        BatchReport with one result per invoked item.
    """
    verb = mode.value
    report = BatchReport(mode=mode)

    for batch in batches:
        operation = batch.operations.for_mode(mode)
        label = batch.category.label

        for item in batch.items:
            run_log.info(f"Processing {label}: {item}")

            if operation is None:
                logger.debug("No %s operation for %s, skipping %s", verb, label, item)
                continue

            try:
                outcome = operation(item)
                if not isinstance(outcome, OperationOutcome):
                    msg = f"Operation returned {type(outcome).__name__}, not an outcome"
                    raise TypeError(msg)
            except Exception as e:  # noqa: BLE001 - one item must never abort the batch
                outcome = OperationOutcome.failed(str(e) or type(e).__name__)

            if not outcome.success:
                message = outcome.message or "unknown error"
                run_log.error(f"Failed to {verb} {label} '{item}': {message}")
                status = ItemStatus.FAILED
            elif outcome.skipped:
                run_log.info(f"Nothing to {verb} for {label} '{item}': {outcome.message}")
                status = ItemStatus.SKIPPED
            else:
                status = ItemStatus.SUCCEEDED

            report.results.append(
                ItemResult(
                    category=batch.category,
                    item=str(item),
                    mode=mode,
                    status=status,
                    message=outcome.message,
                )
            )

    return report
