"""Parent-id grouping for FlatTreeLib.

GroupIndex buckets every non-root record under the id its parent accessor
returns. It is the only transient structure of an assembly call: built once
from the flat source, read by TreeAssembler, then discarded.
"""

import logging
import math
import os
from collections import Counter
from collections.abc import Mapping
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from ..errors import require_callable

logger = logging.getLogger(__name__)

# Sources smaller than this are scanned sequentially even when parallel is requested
MIN_PARALLEL_RECORDS = 256


class GroupIndex(Mapping):
    """Mapping of parent id -> ordered list of child records.

    Root records never appear in the index. A missing key means the id
    has no children; use children_of() to get that as an empty list.

    Example:
        roots, index = GroupIndex.partition(rows, lambda r: r.pid,
                                            lambda r: r.pid == 0)
        index.children_of(1)   # -> [row2, row3]
    """

    def __init__(self, buckets: Optional[Dict[Any, List[Any]]] = None):
        self._buckets: Dict[Any, List[Any]] = buckets if buckets is not None else {}

    # Mapping protocol

    def __getitem__(self, key: Any) -> List[Any]:
        return self._buckets[key]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._buckets)

    def __len__(self) -> int:
        return len(self._buckets)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(keys={len(self)}, records={self.record_count})"

    @property
    def record_count(self) -> int:
        """Number of indexed (non-root) records."""
        return sum(len(bucket) for bucket in self._buckets.values())

    def children_of(self, key: Any) -> List[Any]:
        """Return the bucket for ``key`` or a fresh empty list.

        The bucket itself is returned, not a copy, so records sharing an
        id all see the same list object.
        """
        bucket = self._buckets.get(key)
        if bucket is None:
            return []
        return bucket

    def add(self, parent_id: Any, record: Any) -> None:
        """Append ``record`` to the bucket for ``parent_id``, creating it if absent."""
        bucket = self._buckets.get(parent_id)
        if bucket is None:
            bucket = self._buckets[parent_id] = []
        bucket.append(record)

    def merge(self, other: 'GroupIndex') -> None:
        """Append every bucket of ``other`` onto this index."""
        for key, records in other._buckets.items():
            bucket = self._buckets.get(key)
            if bucket is None:
                self._buckets[key] = list(records)
            else:
                bucket.extend(records)

    # Builders

    @classmethod
    def build(cls,
              records: Optional[Iterable[Any]],
              parent_id_fn: Callable[[Any], Any],
              is_root_fn: Callable[[Any], bool]) -> 'GroupIndex':
        """Build the index with a single sequential scan.

        Bucket order matches source order.

        Args:
            records: Flat source, any iterable (None = empty)
            parent_id_fn: Record -> parent id
            is_root_fn: Record -> True if the record is a root

        Returns:
            GroupIndex over the non-root records
        """
        _, index = cls.partition(records, parent_id_fn, is_root_fn)
        return index

    @classmethod
    def build_parallel(cls,
                       records: Optional[Iterable[Any]],
                       parent_id_fn: Callable[[Any], Any],
                       is_root_fn: Callable[[Any], bool],
                       num_workers: Optional[int] = None,
                       partition_size: Optional[int] = None) -> 'GroupIndex':
        """Build the index by scanning disjoint partitions on worker threads.

        Args:
            records: Flat source (materialized into a list if needed)
            parent_id_fn: Record -> parent id
            is_root_fn: Record -> True if the record is a root
            num_workers: Thread count (None = executor default)
            partition_size: Records per worker task (None = derived)

        Returns:
            GroupIndex over the non-root records
        """
        _, index = cls.partition(records, parent_id_fn, is_root_fn,
                                 parallel=True, num_workers=num_workers,
                                 partition_size=partition_size)
        return index

    @classmethod
    def partition(cls,
                  records: Optional[Iterable[Any]],
                  parent_id_fn: Callable[[Any], Any],
                  is_root_fn: Callable[[Any], bool],
                  parallel: bool = False,
                  num_workers: Optional[int] = None,
                  partition_size: Optional[int] = None) -> Tuple[List[Any], 'GroupIndex']:
        """Split the source into roots and an index of everything else.

        This is the shared first step of every list -> tree conversion.

        Args:
            records: Flat source (None = empty)
            parent_id_fn: Record -> parent id
            is_root_fn: Record -> True if the record is a root
            parallel: Scan partitions on a thread pool
            num_workers: Thread count for the parallel scan
            partition_size: Records per worker task

        Returns:
            Tuple of (roots in source order, GroupIndex)
        """
        require_callable("parent_id_fn", parent_id_fn)
        require_callable("is_root_fn", is_root_fn)

        if records is None:
            return [], cls()

        if parallel:
            if not isinstance(records, (list, tuple)):
                records = list(records)
            if len(records) >= MIN_PARALLEL_RECORDS or partition_size is not None:
                return cls._partition_parallel(records, parent_id_fn, is_root_fn,
                                               num_workers, partition_size)
            logger.debug("Parallel grouping skipped for %d records", len(records))

        return _scan(records, parent_id_fn, is_root_fn)

    @classmethod
    def _partition_parallel(cls,
                            records: Sequence[Any],
                            parent_id_fn: Callable[[Any], Any],
                            is_root_fn: Callable[[Any], bool],
                            num_workers: Optional[int],
                            partition_size: Optional[int]) -> Tuple[List[Any], 'GroupIndex']:
        """Scan partitions concurrently, then merge partition-local results.

        Each worker owns its own mapping, so no lock is taken per insert.
        Merging happens on the calling thread.
        """
        workers = num_workers or min(32, (os.cpu_count() or 1) + 4)
        size = partition_size or max(1, math.ceil(len(records) / workers))
        chunks = [records[i:i + size] for i in range(0, len(records), size)]

        logger.debug("Grouping %d records in %d partitions on %d workers",
                     len(records), len(chunks), workers)

        roots: List[Any] = []
        index = cls()
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = [executor.submit(_scan, chunk, parent_id_fn, is_root_fn)
                       for chunk in chunks]
            for future in futures:
                chunk_roots, chunk_index = future.result()
                roots.extend(chunk_roots)
                index.merge(chunk_index)

        return roots, index


def _scan(records: Iterable[Any],
          parent_id_fn: Callable[[Any], Any],
          is_root_fn: Callable[[Any], bool]) -> Tuple[List[Any], GroupIndex]:
    roots: List[Any] = []
    index = GroupIndex()
    for record in records:
        if is_root_fn(record):
            roots.append(record)
        else:
            index.add(parent_id_fn(record), record)
    return roots, index


def find_duplicate_ids(records: Iterable[Any],
                       id_fn: Callable[[Any], Any]) -> Dict[Any, int]:
    """Return ``{id: count}`` for every id used by more than one record.

    Args:
        records: Flat source
        id_fn: Record -> id

    Returns:
        Dict of duplicated ids to occurrence counts (empty if none)
    """
    counts = Counter(id_fn(record) for record in records)
    return {key: n for key, n in counts.items() if n > 1}
