"""Testing utilities for FlatTreeLib consumers."""

from .fixtures import FlatRecord, make_records, record_adapter, edges

__all__ = ['FlatRecord', 'make_records', 'record_adapter', 'edges']
