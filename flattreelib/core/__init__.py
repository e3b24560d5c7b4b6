"""Core building blocks of FlatTreeLib."""

from .adapter import (
    RecordAdapter,
    AttributeRecordAdapter,
    MappingRecordAdapter,
    CallableRecordAdapter,
)
from .grouping import GroupIndex, find_duplicate_ids
from .assembler import TreeAssembler
from .walker import TreeWalker
from .flattener import Flattener

__all__ = [
    'RecordAdapter',
    'AttributeRecordAdapter',
    'MappingRecordAdapter',
    'CallableRecordAdapter',
    'GroupIndex',
    'find_duplicate_ids',
    'TreeAssembler',
    'TreeWalker',
    'Flattener',
]
