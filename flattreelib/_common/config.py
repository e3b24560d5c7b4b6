"""Configuration system for FlatTreeLib.

This module defines how callers tune assembly and walking: whether grouping
runs on worker threads, how partitions are sized, and the optional guards
against cyclic or duplicated ids. Defaults reproduce the plain permissive
behaviour, so no configuration is ever required.
"""

from dataclasses import dataclass
from typing import Any, List, Optional

from ..errors import ConfigurationError


@dataclass
class AssemblyConfig:
    """Configuration for list -> tree assembly."""

    # Grouping
    parallel: bool = False                  # Build GroupIndex on worker threads
    num_workers: Optional[int] = None       # Thread count (None = executor default)
    partition_size: Optional[int] = None    # Records per partition (None = derived)

    # Guards
    max_depth: Optional[int] = None         # Raise CycleDetectedError beyond this depth
    strict: bool = False                    # Reject duplicate ids

    @classmethod
    def parallel_scan(cls, num_workers: Optional[int] = None,
                      partition_size: Optional[int] = None) -> 'AssemblyConfig':
        """Create config that groups records on a thread pool.

        Args:
            num_workers: Number of worker threads
            partition_size: Records handed to each worker task

        Returns:
            AssemblyConfig with parallel grouping enabled
        """
        return cls(parallel=True, num_workers=num_workers,
                   partition_size=partition_size)

    @classmethod
    def strict_mode(cls, max_depth: Optional[int] = None) -> 'AssemblyConfig':
        """Create config that rejects duplicate ids and optionally bounds depth.

        Args:
            max_depth: Deepest level a node may be attached at

        Returns:
            AssemblyConfig with strict validation enabled
        """
        return cls(strict=True, max_depth=max_depth)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.num_workers is not None and self.num_workers <= 0:
            errors.append("num_workers must be positive")

        if self.partition_size is not None and self.partition_size <= 0:
            errors.append("partition_size must be positive")

        if self.max_depth is not None and self.max_depth < 0:
            errors.append("max_depth cannot be negative")

        if not self.parallel and (self.num_workers is not None
                                  or self.partition_size is not None):
            errors.append("num_workers/partition_size require parallel=True")

        return errors


@dataclass
class WalkConfig:
    """Configuration for depth-first walking and flattening."""

    max_depth: Optional[int] = None  # Raise CycleDetectedError beyond this depth

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []
        if self.max_depth is not None and self.max_depth < 0:
            errors.append("max_depth cannot be negative")
        return errors


def check_config(config: Any) -> Any:
    """Raise if ``config.validate()`` reports problems.

    Args:
        config: AssemblyConfig or WalkConfig instance

    Returns:
        The same config, for chaining

    Raises:
        ConfigurationError: If validation fails
    """
    errors = config.validate()
    if errors:
        raise ConfigurationError(errors, config)
    return config
