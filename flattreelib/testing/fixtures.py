"""Test fixtures for FlatTreeLib consumers.

Small record type and helpers for building flat sources in test suites
without defining a record class each time.
"""

from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from ..core.adapter import AttributeRecordAdapter

ROOT_PARENT = 0


@dataclass(eq=False)
class FlatRecord:
    """A denormalized row: id, parent id, optional name, derived children.

    Equality is identity, so duplicated ids stay distinguishable.
    """

    id: Any
    parent_id: Any = ROOT_PARENT
    name: Optional[str] = None
    children: Optional[List['FlatRecord']] = field(default=None, repr=False)

    def child_ids(self) -> List[Any]:
        """Ids of attached children ([] if none attached yet)."""
        return [child.id for child in self.children or []]


def make_records(rows: Iterable[Sequence[Any]]) -> List[FlatRecord]:
    """Build FlatRecords from ``(id, parent_id[, name])`` tuples.

    Example:
        records = make_records([(1, 0), (2, 1), (3, 1), (4, 2)])
    """
    return [FlatRecord(*row) for row in rows]


def record_adapter(root_parent: Any = ROOT_PARENT) -> AttributeRecordAdapter:
    """Adapter for FlatRecord where ``parent_id == root_parent`` marks a root."""
    return AttributeRecordAdapter(root_parent=root_parent)


def edges(roots: Iterable[FlatRecord]) -> List[Tuple[Any, Any]]:
    """Collect (parent id, child id) pairs from an assembled tree, pre-order."""
    result: List[Tuple[Any, Any]] = []
    stack = list(reversed(list(roots)))
    while stack:
        node = stack.pop()
        for child in node.children or []:
            result.append((node.id, child.id))
        stack.extend(reversed(node.children or []))
    return result
