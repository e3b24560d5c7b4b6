"""Configuration re-export.

Public home of the configuration dataclasses, which live in the
_common package.
"""

from ._common.config import (
    AssemblyConfig,
    WalkConfig,
    check_config,
)

__all__ = [
    'AssemblyConfig',
    'WalkConfig',
    'check_config',
]
