"""Tests for RecordAdapter implementations."""

from types import SimpleNamespace

import pytest

from flattreelib import build_tree, flatten_tree
from flattreelib.core import (
    AttributeRecordAdapter,
    CallableRecordAdapter,
    MappingRecordAdapter,
    RecordAdapter,
)
from flattreelib.core.adapter import _FieldRecordAdapter
from flattreelib.errors import InvalidAccessorError


def test_record_adapter_is_abstract():
    with pytest.raises(TypeError):
        RecordAdapter()


def test_field_adapter_subclass_must_implement_read():
    class NoReader(_FieldRecordAdapter):
        def set_children(self, record, children):
            pass

    with pytest.raises(TypeError):
        NoReader()


class TestAttributeRecordAdapter:
    def test_custom_field_names(self):
        adapter = AttributeRecordAdapter(id_field="code", parent_field="parent_code",
                                         children_field="items", root_parent="")
        rows = [
            SimpleNamespace(code="A", parent_code=""),
            SimpleNamespace(code="A1", parent_code="A"),
            SimpleNamespace(code="A2", parent_code="A"),
        ]
        tree = build_tree(rows, adapter)
        assert [r.code for r in tree] == ["A"]
        assert [r.code for r in tree[0].items] == ["A1", "A2"]
        assert tree[0].items[0].items == []

    def test_missing_children_attribute_reads_as_none(self):
        adapter = AttributeRecordAdapter()
        assert adapter.get_children(SimpleNamespace(id=1, parent_id=None)) is None

    def test_root_predicate_overrides_root_parent(self):
        adapter = AttributeRecordAdapter(root_predicate=lambda r: r.id == 10)
        assert adapter.is_root(SimpleNamespace(id=10, parent_id=3))
        assert not adapter.is_root(SimpleNamespace(id=11, parent_id=None))

    def test_default_root_parent_is_none(self):
        adapter = AttributeRecordAdapter()
        assert adapter.is_root(SimpleNamespace(id=1, parent_id=None))


class TestMappingRecordAdapter:
    def test_dict_rows(self):
        adapter = MappingRecordAdapter(parent_field="pid", root_parent=0)
        rows = [
            {"id": 1, "pid": 0, "title": "Home"},
            {"id": 2, "pid": 1, "title": "Products"},
            {"id": 3, "pid": 2, "title": "Widgets"},
            {"id": 4, "pid": 1, "title": "About"},
        ]
        tree = build_tree(rows, adapter)
        titles = [r["title"] for r in flatten_tree(tree, adapter)]
        assert titles == ["Home", "Products", "Widgets", "About"]
        assert rows[2]["children"] == []

    def test_get_children_before_assembly(self):
        adapter = MappingRecordAdapter()
        assert adapter.get_children({"id": 1}) is None


class TestCallableRecordAdapter:
    def test_delegates_to_functions(self):
        store = {}
        adapter = CallableRecordAdapter(
            id_fn=lambda r: r[0],
            parent_id_fn=lambda r: r[1],
            is_root_fn=lambda r: r[1] is None,
            children_fn=lambda r: store.get(r[0]),
            attach_children_fn=lambda r, c: store.__setitem__(r[0], c),
        )
        rows = [("root", None), ("leaf", "root")]
        tree = build_tree(rows, adapter)
        assert tree == [("root", None)]
        assert store == {"root": [("leaf", "root")], "leaf": []}
        assert flatten_tree(tree, adapter) == rows

    def test_requires_all_functions(self):
        with pytest.raises(InvalidAccessorError, match="children_fn"):
            CallableRecordAdapter(lambda r: r, lambda r: r, lambda r: True,
                                  None, lambda r, c: None)
