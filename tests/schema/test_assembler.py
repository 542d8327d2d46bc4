"""Tests for tree assembly (build) and pre-order flattening (flatten)."""

from __future__ import annotations

import pytest

from json_struct_infer.document import DocumentBuilder
from json_struct_infer.errors import ParseError
from json_struct_infer.schema import DEFAULT_ROOT_NAME, Descriptor, Group, ScalarType, build, flatten


def _build(text: str, **kwargs: str) -> Descriptor:
    return build(DocumentBuilder().parse(text), **kwargs)


def _fields(node: Descriptor) -> list[tuple[str, Group, ScalarType | None]]:
    return [(c.key, c.group, c.scalar_type) for c in node.children]


def _assert_finalized(node: Descriptor) -> None:
    assert node.buckets == {}
    assert not node.group.is_placeholder
    for child in node.children:
        _assert_finalized(child)


class TestBuild:
    def test_root_defaults(self) -> None:
        root = _build('{"a": 1}')
        assert root.key == DEFAULT_ROOT_NAME == "AutoGenerated"
        assert root.group is Group.OBJECT

    def test_custom_root_name(self) -> None:
        assert _build("{}", root_name="Payload").key == "Payload"

    def test_scalar_and_mixed_array(self) -> None:
        root = _build('{"a":1,"b":[1,"x"]}')
        assert _fields(root) == [
            ("a", Group.VALUE, ScalarType.INT),
            ("b", Group.VALUE_ARRAY, ScalarType.ANY),
        ]

    def test_key_union_across_array_elements(self) -> None:
        root = _build('{"items":[{"id":1},{"id":2,"name":"x"}]}')
        (items,) = root.children
        assert items.group is Group.OBJECT_ARRAY
        assert _fields(items) == [
            ("id", Group.VALUE, ScalarType.INT),
            ("name", Group.VALUE, ScalarType.STRING),
        ]

    def test_top_level_array_merges_elements(self) -> None:
        root = _build('[{"a": 1}, {"a": null, "b": true}, 7]')
        assert _fields(root) == [
            ("a", Group.VALUE, ScalarType.INT),
            ("b", Group.VALUE, ScalarType.BOOL),
        ]

    def test_nested_shape_conflict_across_elements(self) -> None:
        root = _build('{"rows": [{"v": {"x": 1}}, {"v": [1]}]}')
        (rows,) = root.children
        assert _fields(rows) == [("v", Group.VALUE, ScalarType.ANY)]

    def test_empty_array_resolved_across_elements(self) -> None:
        root = _build('{"rows": [{"tags": []}, {"tags": ["a"]}]}')
        assert _fields(root.children[0]) == [
            ("tags", Group.VALUE_ARRAY, ScalarType.STRING)
        ]

    def test_unresolved_empty_arrays(self) -> None:
        root = _build('{"a": [], "b": [[]]}')
        assert _fields(root) == [
            ("a", Group.VALUE_ARRAY, ScalarType.ANY),
            ("b", Group.VALUE_ARRAY2, ScalarType.ANY),
        ]

    def test_deep_tree_fully_finalized(self) -> None:
        root = _build(
            '{"a": [{"b": [[{"c": []}], [{"c": [{"d": 1}]}]]}], "e": {"f": [[]]}}'
        )
        _assert_finalized(root)

    def test_duplicate_keys_merge_as_occurrences(self) -> None:
        root = _build('{"a": 1, "a": 2.5}')
        assert _fields(root) == [("a", Group.VALUE, ScalarType.FLOAT)]

    @pytest.mark.parametrize("text", ['"x"', "1", "null", "true"])
    def test_scalar_top_level_rejected(self, text: str) -> None:
        with pytest.raises(ParseError):
            _build(text)

    def test_empty_top_level_array(self) -> None:
        root = _build("[]")
        assert root.children == []


class TestFlatten:
    def test_pre_order_records(self) -> None:
        root = _build(
            '{"a": {"b": {"c": 1}}, "x": 1, "d": [{"e": {"f": 1}}], "g": [[{"h": 1}]]}'
        )
        assert [r.key for r in flatten(root)] == ["AutoGenerated", "a", "b", "d", "e", "g"]

    def test_only_object_like_groups(self) -> None:
        root = _build('{"a": 1, "b": [1], "c": [[1]]}')
        assert flatten(root) == [root]

    def test_record_without_fields_is_kept(self) -> None:
        root = _build('{"empty": {}}')
        assert [r.key for r in flatten(root)] == ["AutoGenerated", "empty"]
