"""Operation table construction.

The operation table pairs every item category with its loaded items and
its add/remove operations. It is built once per run and is the only
thing the batch processor iterates over.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from wincfg.models.category import ItemCategory
from wincfg.models.operation import OperationPair

if TYPE_CHECKING:
    from collections.abc import Mapping

    from wincfg.operators.base import Operator


@dataclass(frozen=True, slots=True)
class CategoryBatch:
    """Items of one category together with the category's operations.

    Attributes:
        category: Item category.
        items: Items in processing order.
        operations: Add/remove operations for the category.
    """

    category: ItemCategory
    items: Sequence[Any]
    operations: OperationPair[Any]


def build_operation_table(
    items_by_category: Mapping[ItemCategory, Sequence[Any]],
    operators: Sequence[Operator],
) -> list[CategoryBatch]:
    """Build the operation table for a run.

    Args:
        items_by_category: Loaded items per category. Missing categories
            contribute no items.
        operators: One operator per category.

    Returns:
        One CategoryBatch per category, in ItemCategory order. Categories
        without an operator get an empty OperationPair.

    Raises:
        ValueError: If two operators handle the same category.
    """
    pairs: dict[ItemCategory, OperationPair[Any]] = {}
    for operator in operators:
        if operator.category in pairs:
            msg = f"Duplicate operator for category {operator.category.value}"
            raise ValueError(msg)
        pairs[operator.category] = operator.operations()

    return [
        CategoryBatch(
            category=category,
            items=tuple(items_by_category.get(category, ())),
            operations=pairs.get(category, OperationPair()),
        )
        for category in ItemCategory
    ]
