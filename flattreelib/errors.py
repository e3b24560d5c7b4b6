"""Exception hierarchy for FlatTreeLib.

The library has no recoverable error path. Everything raised here signals a
broken caller contract (bad accessor, cyclic ids, invalid configuration) and
is meant to surface immediately.
"""

from typing import Any, Dict, List, Optional


class TreeLibError(Exception):
    """Base class for all FlatTreeLib errors."""


class InvalidAccessorError(TreeLibError, TypeError):
    """A required accessor function is missing or not callable."""

    def __init__(self, name: str, value: Any):
        self.name = name
        self.value = value
        super().__init__(
            f"{name} must be callable, got {type(value).__name__}"
        )


class CycleDetectedError(TreeLibError):
    """Raised when the depth guard trips during assembly or walking.

    Only possible when a ``max_depth`` guard is configured. Without one,
    a cyclic parent-id chain simply never terminates.
    """

    def __init__(self, depth: int, node: Any, max_depth: int):
        self.depth = depth
        self.node = node
        self.max_depth = max_depth
        super().__init__(
            f"Depth {depth} exceeds max_depth={max_depth} at node {node!r}; "
            f"parent-id chain is probably cyclic"
        )


class DuplicateIdError(TreeLibError):
    """Raised in strict mode when several records share an id."""

    def __init__(self, duplicates: Dict[Any, int]):
        self.duplicates = duplicates
        shown = ", ".join(f"{k!r} (x{n})" for k, n in list(duplicates.items())[:5])
        more = "" if len(duplicates) <= 5 else f" and {len(duplicates) - 5} more"
        super().__init__(f"Duplicate record ids: {shown}{more}")


class ConfigurationError(TreeLibError, ValueError):
    """Raised when a configuration object fails validation."""

    def __init__(self, errors: List[str], config: Optional[Any] = None):
        self.errors = errors
        self.config = config
        super().__init__(f"Invalid configuration: {', '.join(errors)}")


def require_callable(name: str, value: Any) -> None:
    """Fail fast if ``value`` is not callable.

    Args:
        name: Parameter name used in the error message
        value: The object supplied by the caller

    Raises:
        InvalidAccessorError: If value is None or not callable
    """
    if not callable(value):
        raise InvalidAccessorError(name, value)


def require_optional_callable(name: str, value: Any) -> None:
    """Like require_callable but lets None through."""
    if value is not None and not callable(value):
        raise InvalidAccessorError(name, value)
