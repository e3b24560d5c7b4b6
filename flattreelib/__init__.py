"""FlatTreeLib - list <-> tree conversion for denormalized hierarchies.

FlatTreeLib turns flat rows carrying an id and a parent id (org charts,
category tables, menus) into linked trees, flattens trees back into
filtered lists, and walks any nested structure depth-first. Records are
never inspected directly: every read and write goes through accessor
functions or a RecordAdapter.

Functional API:
    from flattreelib import list_to_tree, tree_to_list, walk_tree

Building blocks:
    from flattreelib.core import GroupIndex, TreeAssembler, TreeWalker, Flattener
"""

import logging

__version__ = "0.1.0"

from .core import (
    RecordAdapter,
    AttributeRecordAdapter,
    MappingRecordAdapter,
    CallableRecordAdapter,
    GroupIndex,
    TreeAssembler,
    TreeWalker,
    Flattener,
)
from .config import AssemblyConfig, WalkConfig
from .errors import (
    TreeLibError,
    InvalidAccessorError,
    CycleDetectedError,
    DuplicateIdError,
    ConfigurationError,
)
from .api import (
    list_to_tree,
    stream_to_tree,
    build_tree,
    tree_to_list,
    flatten_tree,
    walk_tree,
    iter_tree,
    count_nodes,
    is_empty,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Core
    'RecordAdapter',
    'AttributeRecordAdapter',
    'MappingRecordAdapter',
    'CallableRecordAdapter',
    'GroupIndex',
    'TreeAssembler',
    'TreeWalker',
    'Flattener',
    # Config
    'AssemblyConfig',
    'WalkConfig',
    # Errors
    'TreeLibError',
    'InvalidAccessorError',
    'CycleDetectedError',
    'DuplicateIdError',
    'ConfigurationError',
    # API
    'list_to_tree',
    'stream_to_tree',
    'build_tree',
    'tree_to_list',
    'flatten_tree',
    'walk_tree',
    'iter_tree',
    'count_nodes',
    'is_empty',
]
