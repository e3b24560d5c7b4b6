"""Common components shared across FlatTreeLib modules.

This internal package contains configuration classes that both the
assembly and traversal sides use. It should NOT be imported directly
by users.

Important: This package must NEVER import from core to avoid
circular dependencies.
"""

from .config import (
    AssemblyConfig,
    WalkConfig,
    check_config,
)

__all__ = [
    'AssemblyConfig',
    'WalkConfig',
    'check_config',
]
