"""Tree flattening for FlatTreeLib.

Flattener is a TreeWalker run with only a pre-visit hook that appends
matching nodes to a list.
"""

from typing import Any, Callable, Iterable, List, Optional

from .._common.config import WalkConfig
from ..errors import require_optional_callable
from .walker import ChildrenFn, TreeWalker


def _include_all(node: Any) -> bool:
    return True


class Flattener:
    """Collects nodes into a flat list in pre-order.

    The filter never prunes. Every node is tested on its own, so the
    children of an excluded node can still be included.
    """

    def __init__(self,
                 children_fn: ChildrenFn,
                 include_if: Optional[Callable[[Any], bool]] = None,
                 config: Optional[WalkConfig] = None):
        """Initialize flattener.

        Args:
            children_fn: Node -> iterable of children (None = leaf)
            include_if: Node -> True to keep it (None = keep everything)
            config: Optional WalkConfig passed to the walker
        """
        require_optional_callable("include_if", include_if)
        self.walker = TreeWalker(children_fn, config)
        self.include_if = include_if or _include_all

    def flatten(self, roots: Optional[Iterable[Any]]) -> List[Any]:
        """Return matching nodes in pre-order as a new list."""
        return self.flatten_into(roots, [])

    def flatten_into(self, roots: Optional[Iterable[Any]], target: List[Any]) -> List[Any]:
        """Append matching nodes in pre-order to ``target``.

        Args:
            roots: Top-level nodes (None or empty = nothing appended)
            target: Caller-owned list to extend

        Returns:
            ``target`` itself
        """
        include_if = self.include_if

        def collect(node: Any) -> None:
            if include_if(node):
                target.append(node)

        self.walker.walk(roots, pre_visit=collect)
        return target
