"""Tree assembly for FlatTreeLib.

TreeAssembler wires each record's children from a GroupIndex, starting at
the roots and working down. It never inspects records itself: identity
comes from ``id_fn`` and the children field is written by
``attach_children_fn``.
"""

import logging
from typing import Any, Callable, List, Optional, Tuple

from .._common.config import AssemblyConfig, check_config
from ..errors import CycleDetectedError, require_callable, require_optional_callable
from .grouping import GroupIndex

logger = logging.getLogger(__name__)

VisitListener = Callable[[int, Any], None]


class TreeAssembler:
    """Attaches grouped children onto records, depth-first from the roots.

    Every visited record gets exactly one ``attach_children_fn`` call,
    with an empty list when it has no children. After a record's whole
    subtree is wired, ``on_visit(depth, record)`` fires (roots are depth 0).

    The walk uses an explicit stack, so very deep trees do not hit the
    interpreter's recursion limit. Visit order is the same as the
    recursive formulation.
    """

    def __init__(self,
                 id_fn: Callable[[Any], Any],
                 attach_children_fn: Callable[[Any, List[Any]], None],
                 on_visit: Optional[VisitListener] = None,
                 config: Optional[AssemblyConfig] = None):
        """Initialize assembler with accessors.

        Args:
            id_fn: Record -> id, used to look up the record's bucket
            attach_children_fn: (record, children) -> None, stores children
            on_visit: Optional post-visit listener (depth, record)
            config: Optional AssemblyConfig (only max_depth is read here)

        Raises:
            InvalidAccessorError: If a required accessor is not callable
            ConfigurationError: If config is invalid
        """
        require_callable("id_fn", id_fn)
        require_callable("attach_children_fn", attach_children_fn)
        require_optional_callable("on_visit", on_visit)
        self.id_fn = id_fn
        self.attach_children_fn = attach_children_fn
        self.on_visit = on_visit
        self.config = check_config(config or AssemblyConfig())

    def assemble(self, roots: Optional[List[Any]], index: GroupIndex) -> Optional[List[Any]]:
        """Wire children for every record reachable from ``roots``.

        Args:
            roots: Root records (None or empty = no-op)
            index: GroupIndex built from the non-root records

        Returns:
            The same ``roots`` object, for chaining

        Raises:
            CycleDetectedError: If config.max_depth is set and exceeded
        """
        if not roots:
            return roots

        max_depth = self.config.max_depth
        visited = 0
        # (record, depth, expanded)
        stack: List[Tuple[Any, int, bool]] = [(root, 0, False) for root in reversed(roots)]

        while stack:
            current, depth, expanded = stack.pop()
            if expanded:
                self.on_visit(depth, current)
                continue

            if max_depth is not None and depth > max_depth:
                raise CycleDetectedError(depth, current, max_depth)

            children = index.children_of(self.id_fn(current))
            self.attach_children_fn(current, children)
            visited += 1

            if self.on_visit is not None:
                stack.append((current, depth, True))
            for child in reversed(children):
                stack.append((child, depth + 1, False))

        logger.debug("Assembled %d roots, %d records visited", len(roots), visited)
        return roots
