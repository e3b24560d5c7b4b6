"""Unit tests for edge cases and error handling in FlatTreeLib.

Tests unusual inputs and caller-contract violations that might occur in
real-world usage.
"""

import unittest

from flattreelib import (
    CycleDetectedError,
    DuplicateIdError,
    InvalidAccessorError,
    list_to_tree,
    tree_to_list,
    walk_tree,
)
from flattreelib.config import AssemblyConfig
from flattreelib.testing import FlatRecord, make_records


def attach(record, children):
    record.children = children


class TestUnusualSources(unittest.TestCase):
    """Sources that are valid but odd."""

    def test_all_roots(self):
        records = make_records([(1, 0), (2, 0), (3, 0)])
        tree = list_to_tree(records, attach, lambda r: r.id, lambda r: r.parent_id,
                            lambda r: r.parent_id == 0)
        self.assertEqual([r.id for r in tree], [1, 2, 3])
        self.assertTrue(all(r.children == [] for r in tree))

    def test_no_roots(self):
        records = make_records([(2, 1), (3, 2)])
        tree = list_to_tree(records, attach, lambda r: r.id, lambda r: r.parent_id,
                            lambda r: r.parent_id == 0)
        self.assertEqual(tree, [])
        # Never visited, so never attached
        self.assertTrue(all(r.children is None for r in records))

    def test_children_listed_before_parent(self):
        records = make_records([(4, 2), (3, 1), (2, 1), (1, 0)])
        tree = list_to_tree(records, attach, lambda r: r.id, lambda r: r.parent_id,
                            lambda r: r.parent_id == 0)
        self.assertEqual([r.id for r in tree_to_list(tree, lambda r: r.children)],
                         [1, 3, 2, 4])

    def test_string_and_tuple_ids(self):
        records = [FlatRecord(("eu", 1), None), FlatRecord(("eu", 2), ("eu", 1)),
                   FlatRecord("x", ("eu", 2))]
        tree = list_to_tree(records, attach, lambda r: r.id, lambda r: r.parent_id,
                            lambda r: r.parent_id is None)
        self.assertEqual([r.id for r in tree_to_list(tree, lambda r: r.children)],
                         [("eu", 1), ("eu", 2), "x"])

    def test_root_predicate_wins(self):
        # Record 2 points at 1 but is declared a root, so it must not be a child of 1
        records = make_records([(1, 0), (2, 1), (3, 1)])
        tree = list_to_tree(records, attach, lambda r: r.id, lambda r: r.parent_id,
                            lambda r: r.id in (1, 2))
        self.assertEqual([r.id for r in tree], [1, 2])
        self.assertEqual(records[0].child_ids(), [3])


class TestContractViolations(unittest.TestCase):
    """Caller mistakes fail loudly."""

    def test_none_accessors(self):
        with self.assertRaises(InvalidAccessorError) as ctx:
            list_to_tree(make_records([(1, 0)]), None, lambda r: r.id,
                         lambda r: r.parent_id, lambda r: True)
        self.assertEqual(ctx.exception.name, "attach_children_fn")
        self.assertIsInstance(ctx.exception, TypeError)

    def test_cycle_through_duplicate_id(self):
        records = make_records([(1, 0), (2, 1), (1, 2)])
        with self.assertRaises(CycleDetectedError):
            list_to_tree(records, attach, lambda r: r.id, lambda r: r.parent_id,
                         lambda r: r.parent_id == 0, config=AssemblyConfig(max_depth=100))
        with self.assertRaises(DuplicateIdError):
            list_to_tree(records, attach, lambda r: r.id, lambda r: r.parent_id,
                         lambda r: r.parent_id == 0, config=AssemblyConfig(strict=True))

    def test_walk_tree_max_depth(self):
        loop = FlatRecord(1)
        loop.children = [loop]
        with self.assertRaises(CycleDetectedError):
            walk_tree([loop], lambda r: r.children, pre_visit=lambda r: None, max_depth=3)

    def test_callback_exception_propagates(self):
        tree = [FlatRecord(1)]
        with self.assertRaises(KeyError):
            walk_tree(tree, lambda r: r.children, pre_visit=lambda r: {}["missing"])

    def test_duplicate_error_message_lists_ids(self):
        error = DuplicateIdError({i: 2 for i in range(8)})
        self.assertIn("and 3 more", str(error))


if __name__ == '__main__':
    unittest.main()
