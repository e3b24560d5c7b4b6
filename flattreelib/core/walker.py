"""Depth-first walking for FlatTreeLib.

TreeWalker works over any nested structure that can hand back a node's
children through ``children_fn``. It knows nothing else about the nodes.
"""

from typing import Any, Callable, Iterable, Iterator, List, Optional, Tuple

from .._common.config import WalkConfig, check_config
from ..errors import CycleDetectedError, require_callable, require_optional_callable

ChildrenFn = Callable[[Any], Optional[Iterable[Any]]]

_PRE = "pre"
_POST = "post"


class TreeWalker:
    """Generic depth-first walker with pre-visit and post-visit hooks.

    For each node: pre_visit(node), then its whole subtree, then
    post_visit(node). ``children_fn`` is called after the node's own
    pre-visit, so a pre-visit hook may still populate children.

    A ``None`` or empty child sequence is the base case and triggers no
    callback.
    """

    def __init__(self, children_fn: ChildrenFn, config: Optional[WalkConfig] = None):
        """Initialize walker with a children accessor.

        Args:
            children_fn: Node -> iterable of children (None = leaf)
            config: Optional WalkConfig

        Raises:
            InvalidAccessorError: If children_fn is not callable
        """
        require_callable("children_fn", children_fn)
        self.children_fn = children_fn
        self.config = check_config(config or WalkConfig())

    def walk(self,
             nodes: Optional[Iterable[Any]],
             pre_visit: Optional[Callable[[Any], None]] = None,
             post_visit: Optional[Callable[[Any], None]] = None) -> None:
        """Walk ``nodes`` and their descendants depth-first.

        Args:
            nodes: Top-level nodes (None or empty = no-op)
            pre_visit: Called before a node's children are walked
            post_visit: Called after a node's last descendant is done

        Raises:
            CycleDetectedError: If config.max_depth is set and exceeded
        """
        require_optional_callable("pre_visit", pre_visit)
        require_optional_callable("post_visit", post_visit)

        for node, _, phase in self._events(nodes, emit_post=post_visit is not None):
            if phase == _PRE:
                if pre_visit is not None:
                    pre_visit(node)
            else:
                post_visit(node)

    def traverse(self,
                 nodes: Optional[Iterable[Any]],
                 order: str = _PRE) -> Iterator[Tuple[Any, int]]:
        """Lazily yield ``(node, depth)`` in pre-order or post-order.

        Args:
            nodes: Top-level nodes, depth 0 (None or empty = nothing)
            order: "pre" (parent first) or "post" (children first)

        Yields:
            Tuples of (node, depth)

        Raises:
            ValueError: If order is not recognized
        """
        if order not in (_PRE, _POST):
            raise ValueError(f"Unknown traversal order: {order}. Choose from: pre, post")

        emit_post = order == _POST
        for node, depth, phase in self._events(nodes, emit_post=emit_post):
            if phase == order:
                yield node, depth

    def _events(self,
                nodes: Optional[Iterable[Any]],
                emit_post: bool) -> Iterator[Tuple[Any, int, str]]:
        """Yield (node, depth, phase) events using an explicit stack."""
        if not _has_items(nodes):
            return

        max_depth = self.config.max_depth
        # (node, depth, expanded)
        stack: List[Tuple[Any, int, bool]] = [(n, 0, False) for n in reversed(list(nodes))]

        while stack:
            node, depth, expanded = stack.pop()
            if expanded:
                yield node, depth, _POST
                continue

            if max_depth is not None and depth > max_depth:
                raise CycleDetectedError(depth, node, max_depth)

            yield node, depth, _PRE

            if emit_post:
                stack.append((node, depth, True))
            children = self.children_fn(node)
            if _has_items(children):
                for child in reversed(list(children)):
                    stack.append((child, depth + 1, False))


def _has_items(nodes: Optional[Iterable[Any]]) -> bool:
    if nodes is None:
        return False
    try:
        return len(nodes) > 0
    except TypeError:
        # Iterators have no len; they are materialized by the caller
        return True
