"""RecordAdapter abstraction for FlatTreeLib.

The core operations take plain accessor functions. A RecordAdapter bundles
the five of them for one record shape, so callers describe their records
once and reuse that description for both assembly and flattening.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, List, Optional

from ..errors import require_callable, require_optional_callable


class RecordAdapter(ABC):
    """Abstract accessor bundle for a specific record type.

    Records stay opaque to the library. The adapter is the only thing
    that knows where a record keeps its id, its parent id and its
    children.
    """

    @abstractmethod
    def get_id(self, record: Any) -> Any:
        """Return the record's id (must be hashable)."""
        pass

    @abstractmethod
    def get_parent_id(self, record: Any) -> Any:
        """Return the id of the record's parent."""
        pass

    @abstractmethod
    def is_root(self, record: Any) -> bool:
        """Check if the record belongs to the top level.

        The root check wins over the parent id: a root is never grouped
        under a parent, whatever get_parent_id returns.
        """
        pass

    @abstractmethod
    def get_children(self, record: Any) -> Optional[Iterable[Any]]:
        """Return the record's children (None or empty for a leaf)."""
        pass

    @abstractmethod
    def set_children(self, record: Any, children: List[Any]) -> None:
        """Store ``children`` on the record."""
        pass


class _FieldRecordAdapter(RecordAdapter):
    """Shared logic for adapters that read named fields."""

    def __init__(self,
                 id_field: str = "id",
                 parent_field: str = "parent_id",
                 children_field: str = "children",
                 root_parent: Any = None,
                 root_predicate: Optional[Callable[[Any], bool]] = None):
        """
        Args:
            id_field: Field holding the record id
            parent_field: Field holding the parent id
            children_field: Field the children list is stored in
            root_parent: Parent id value that marks a root
            root_predicate: Overrides root_parent when given
        """
        require_optional_callable("root_predicate", root_predicate)
        self.id_field = id_field
        self.parent_field = parent_field
        self.children_field = children_field
        self.root_parent = root_parent
        self.root_predicate = root_predicate

    @abstractmethod
    def _read(self, record: Any, name: str, default: Any = None) -> Any:
        """Return field ``name`` of ``record``, or ``default`` if absent."""
        pass

    def get_id(self, record: Any) -> Any:
        return self._read(record, self.id_field)

    def get_parent_id(self, record: Any) -> Any:
        return self._read(record, self.parent_field)

    def is_root(self, record: Any) -> bool:
        if self.root_predicate is not None:
            return bool(self.root_predicate(record))
        return self.get_parent_id(record) == self.root_parent

    def get_children(self, record: Any) -> Optional[Iterable[Any]]:
        return self._read(record, self.children_field)


class AttributeRecordAdapter(_FieldRecordAdapter):
    """Adapter for objects exposing id/parent/children as attributes.

    Example:
        adapter = AttributeRecordAdapter(id_field="code", parent_field="parent_code",
                                         root_parent="")
    """

    def _read(self, record: Any, name: str, default: Any = None) -> Any:
        return getattr(record, name, default)

    def set_children(self, record: Any, children: List[Any]) -> None:
        setattr(record, self.children_field, children)


class MappingRecordAdapter(_FieldRecordAdapter):
    """Adapter for dict-like records (rows from JSON, CSV, database cursors)."""

    def _read(self, record: Any, name: str, default: Any = None) -> Any:
        return record.get(name, default)

    def set_children(self, record: Any, children: List[Any]) -> None:
        record[self.children_field] = children


class CallableRecordAdapter(RecordAdapter):
    """Adapter assembled from plain functions.

    Useful when the accessors already exist as lambdas and only the
    bundling is wanted.
    """

    def __init__(self,
                 id_fn: Callable[[Any], Any],
                 parent_id_fn: Callable[[Any], Any],
                 is_root_fn: Callable[[Any], bool],
                 children_fn: Callable[[Any], Optional[Iterable[Any]]],
                 attach_children_fn: Callable[[Any, List[Any]], None]):
        for name, fn in (("id_fn", id_fn), ("parent_id_fn", parent_id_fn),
                         ("is_root_fn", is_root_fn), ("children_fn", children_fn),
                         ("attach_children_fn", attach_children_fn)):
            require_callable(name, fn)
        self._id_fn = id_fn
        self._parent_id_fn = parent_id_fn
        self._is_root_fn = is_root_fn
        self._children_fn = children_fn
        self._attach_children_fn = attach_children_fn

    def get_id(self, record: Any) -> Any:
        return self._id_fn(record)

    def get_parent_id(self, record: Any) -> Any:
        return self._parent_id_fn(record)

    def is_root(self, record: Any) -> bool:
        return bool(self._is_root_fn(record))

    def get_children(self, record: Any) -> Optional[Iterable[Any]]:
        return self._children_fn(record)

    def set_children(self, record: Any, children: List[Any]) -> None:
        self._attach_children_fn(record, children)
