"""High-level API for FlatTreeLib.

This module provides simple, functional interfaces for the common cases:
turning a flat list of rows into a tree, flattening a tree back into a
list, and walking a tree with callbacks. These functions wrap GroupIndex,
TreeAssembler, TreeWalker and Flattener for ease of use.
"""

import logging
from typing import Any, Callable, Iterable, Iterator, List, Optional, Tuple

from ._common.config import AssemblyConfig, WalkConfig, check_config
from .core.adapter import RecordAdapter
from .core.assembler import TreeAssembler, VisitListener
from .core.flattener import Flattener
from .core.grouping import GroupIndex, find_duplicate_ids
from .core.walker import ChildrenFn, TreeWalker
from .errors import DuplicateIdError

logger = logging.getLogger(__name__)


def list_to_tree(
    source: Optional[List[Any]],
    attach_children_fn: Callable[[Any, List[Any]], None],
    id_fn: Callable[[Any], Any],
    parent_id_fn: Callable[[Any], Any],
    is_root_fn: Callable[[Any], bool],
    on_visit: Optional[VisitListener] = None,
    parallel: bool = False,
    config: Optional[AssemblyConfig] = None,
) -> List[Any]:
    """Convert a flat, materialized list of records into a tree.

    Records are partitioned into roots and non-roots, non-roots are
    grouped by parent id, then children are attached from the roots down.

    Args:
        source: Flat records (None = empty)
        attach_children_fn: (record, children) -> None, stores children
        id_fn: Record -> id
        parent_id_fn: Record -> parent id
        is_root_fn: Record -> True for top-level records
        on_visit: Optional post-visit listener (depth, record), roots at 0
        parallel: Group records on a thread pool (child order then only
            guaranteed within a partition)
        config: AssemblyConfig; overrides ``parallel`` when given

    Returns:
        List of root records with children attached

    Example:
        >>> tree = list_to_tree(rows, lambda r, c: setattr(r, 'children', c),
        ...                     lambda r: r.id, lambda r: r.pid,
        ...                     lambda r: r.pid == 0)
    """
    if config is None:
        config = AssemblyConfig(parallel=parallel)
    check_config(config)
    return _assemble(source, attach_children_fn, id_fn, parent_id_fn,
                     is_root_fn, on_visit, config)


def stream_to_tree(
    source: Optional[Iterable[Any]],
    attach_children_fn: Callable[[Any, List[Any]], None],
    id_fn: Callable[[Any], Any],
    parent_id_fn: Callable[[Any], Any],
    is_root_fn: Callable[[Any], bool],
    on_visit: Optional[VisitListener] = None,
    config: Optional[AssemblyConfig] = None,
) -> List[Any]:
    """Convert a lazily produced iterable of records into a tree.

    The iterable is consumed exactly once, in order. Grouping is always
    sequential here, so children keep their source order.

    Args:
        source: Any iterable or generator of records (None = empty)
        attach_children_fn: (record, children) -> None, stores children
        id_fn: Record -> id
        parent_id_fn: Record -> parent id
        is_root_fn: Record -> True for top-level records
        on_visit: Optional post-visit listener (depth, record)
        config: AssemblyConfig (``parallel`` is ignored)

    Returns:
        List of root records with children attached
    """
    config = check_config(config or AssemblyConfig())
    sequential = AssemblyConfig(max_depth=config.max_depth, strict=config.strict)
    return _assemble(source, attach_children_fn, id_fn, parent_id_fn,
                     is_root_fn, on_visit, sequential)


def _assemble(source: Optional[Iterable[Any]],
              attach_children_fn: Callable[[Any, List[Any]], None],
              id_fn: Callable[[Any], Any],
              parent_id_fn: Callable[[Any], Any],
              is_root_fn: Callable[[Any], bool],
              on_visit: Optional[VisitListener],
              config: AssemblyConfig) -> List[Any]:
    # Construct first so bad accessors fail before the source is read
    assembler = TreeAssembler(id_fn, attach_children_fn, on_visit, config)

    if config.strict and source is not None:
        # Duplicate detection needs a second pass over the source
        if not isinstance(source, (list, tuple)):
            source = list(source)
        duplicates = find_duplicate_ids(source, id_fn)
        if duplicates:
            logger.warning("Rejecting source with %d duplicated ids", len(duplicates))
            raise DuplicateIdError(duplicates)

    roots, index = GroupIndex.partition(
        source, parent_id_fn, is_root_fn,
        parallel=config.parallel,
        num_workers=config.num_workers,
        partition_size=config.partition_size,
    )
    logger.debug("Partitioned source into %d roots and %r", len(roots), index)
    return assembler.assemble(roots, index)


def build_tree(
    source: Optional[Iterable[Any]],
    adapter: RecordAdapter,
    on_visit: Optional[VisitListener] = None,
    config: Optional[AssemblyConfig] = None,
) -> List[Any]:
    """Convert flat records into a tree using a RecordAdapter.

    Lists go through list_to_tree (honouring ``config.parallel``); any
    other iterable goes through stream_to_tree.

    Args:
        source: Flat records
        adapter: RecordAdapter describing the record shape
        on_visit: Optional post-visit listener (depth, record)
        config: Optional AssemblyConfig

    Returns:
        List of root records with children attached
    """
    accessors = (adapter.set_children, adapter.get_id,
                 adapter.get_parent_id, adapter.is_root)
    if isinstance(source, (list, tuple)):
        return list_to_tree(list(source), *accessors, on_visit=on_visit, config=config)
    return stream_to_tree(source, *accessors, on_visit=on_visit, config=config)


def tree_to_list(
    roots: Optional[Iterable[Any]],
    children_fn: ChildrenFn,
    include_if: Optional[Callable[[Any], bool]] = None,
    target: Optional[List[Any]] = None,
) -> List[Any]:
    """Flatten a tree into a pre-order list.

    Args:
        roots: Top-level nodes
        children_fn: Node -> children (None = leaf)
        include_if: Node -> True to keep it (None = keep all). Excluding a
            node does not exclude its descendants.
        target: Optional list to append to instead of a new one

    Returns:
        The flat list (``target`` when supplied)
    """
    flattener = Flattener(children_fn, include_if)
    if target is None:
        return flattener.flatten(roots)
    return flattener.flatten_into(roots, target)


def flatten_tree(
    roots: Optional[Iterable[Any]],
    adapter: RecordAdapter,
    include_if: Optional[Callable[[Any], bool]] = None,
) -> List[Any]:
    """Flatten a tree using a RecordAdapter's children accessor."""
    return tree_to_list(roots, adapter.get_children, include_if)


def walk_tree(
    roots: Optional[Iterable[Any]],
    children_fn: ChildrenFn,
    pre_visit: Optional[Callable[[Any], None]] = None,
    post_visit: Optional[Callable[[Any], None]] = None,
    max_depth: Optional[int] = None,
) -> None:
    """Walk a tree depth-first with pre-visit and post-visit callbacks.

    Args:
        roots: Top-level nodes
        children_fn: Node -> children (None = leaf)
        pre_visit: Called on a node before its children
        post_visit: Called on a node after all its descendants
        max_depth: Optional guard raising CycleDetectedError

    Example:
        >>> walk_tree(roots, lambda n: n.children,
        ...           pre_visit=lambda n: print("enter", n.id),
        ...           post_visit=lambda n: print("leave", n.id))
    """
    TreeWalker(children_fn, WalkConfig(max_depth=max_depth)).walk(
        roots, pre_visit, post_visit)


def iter_tree(
    roots: Optional[Iterable[Any]],
    children_fn: ChildrenFn,
    order: str = "pre",
) -> Iterator[Tuple[Any, int]]:
    """Lazily yield ``(node, depth)`` pairs in pre-order or post-order."""
    return TreeWalker(children_fn).traverse(roots, order)


def count_nodes(roots: Optional[Iterable[Any]], children_fn: ChildrenFn) -> int:
    """Count every node reachable from ``roots``."""
    count = 0
    for _ in TreeWalker(children_fn).traverse(roots):
        count += 1
    return count


def is_empty(source: Optional[Iterable[Any]]) -> bool:
    """True for None or an empty sized collection."""
    return source is None or len(source) == 0
