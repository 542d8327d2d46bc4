"""Tests for field collection into per-key occurrence buckets."""

from __future__ import annotations

import pytest

from json_struct_infer.document import DocumentBuilder, Kind, Member, RawValue
from json_struct_infer.schema.collector import collect, object_elements
from json_struct_infer.schema.types import Descriptor, Group, ScalarType


@pytest.fixture
def parent() -> Descriptor:
    return Descriptor(key="Root", group=Group.OBJECT)


def _parse(text: str) -> RawValue:
    return DocumentBuilder().parse(text)


class TestBuckets:
    def test_first_seen_key_order(self, parent: Descriptor) -> None:
        collect(_parse('{"b": 1, "a": 2}'), parent)
        collect(_parse('{"c": 3, "a": 4}'), parent)
        assert list(parent.buckets) == ["b", "a", "c"]

    def test_repeated_calls_accumulate(self, parent: Descriptor) -> None:
        collect(_parse('{"a": 1}'), parent)
        collect(_parse('{"a": "x"}'), parent)
        assert [o.scalar_type for o in parent.buckets["a"]] == [
            ScalarType.INT,
            ScalarType.STRING,
        ]

    def test_returns_parent(self, parent: Descriptor) -> None:
        assert collect(_parse("{}"), parent) is parent

    def test_rejects_non_object(self, parent: Descriptor) -> None:
        with pytest.raises(TypeError):
            collect(_parse("[1]"), parent)


class TestNestedObjects:
    def test_object_member_recursed(self, parent: Descriptor) -> None:
        collect(_parse('{"user": {"id": 1}}'), parent)
        (user,) = parent.buckets["user"]
        assert user.group is Group.OBJECT
        assert list(user.buckets) == ["id"]

    def test_object_array_single_occurrence_per_array(self, parent: Descriptor) -> None:
        collect(_parse('{"items": [{"id": 1}, {"id": 2, "name": "x"}]}'), parent)
        (items,) = parent.buckets["items"]
        assert items.group is Group.OBJECT_ARRAY
        assert len(items.buckets["id"]) == 2
        assert len(items.buckets["name"]) == 1

    def test_two_dimensional_object_array(self, parent: Descriptor) -> None:
        collect(_parse('{"grid": [[{"a": 1}], [{"a": 2}, {"b": true}]]}'), parent)
        (grid,) = parent.buckets["grid"]
        assert grid.group is Group.OBJECT_ARRAY2
        assert list(grid.buckets) == ["a", "b"]
        assert len(grid.buckets["a"]) == 2

    def test_non_object_elements_skipped(self, parent: Descriptor) -> None:
        collect(_parse('{"items": [{"id": 1}, 2, "x"]}'), parent)
        (items,) = parent.buckets["items"]
        assert list(items.buckets) == ["id"]


class TestObjectElements:
    def test_one_dimension(self) -> None:
        value = _parse('[{"a": 1}, 1, {"b": 2}]')
        assert len(list(object_elements(value, 1))) == 2

    def test_two_dimensions_ignore_scalar_outer_elements(self) -> None:
        value = _parse('[[{"a": 1}], 3, [{"b": 2}, null]]')
        assert len(list(object_elements(value, 2))) == 2


class TestComments:
    def test_member_comment_kept(self, parent: Descriptor) -> None:
        value = RawValue(kind=Kind.NUMBER, literal="1")
        obj = RawValue(kind=Kind.OBJECT, members=[Member("a", value, "// count")])
        collect(obj, parent)
        assert parent.buckets["a"][0].comment == "// count"

    def test_array_falls_back_to_element_comment(self, parent: Descriptor) -> None:
        array = RawValue(
            kind=Kind.ARRAY,
            elements=[
                RawValue(kind=Kind.NUMBER, literal="1"),
                RawValue(kind=Kind.NUMBER, literal="2", comment="// second"),
            ],
        )
        collect(RawValue(kind=Kind.OBJECT, members=[Member("a", array)]), parent)
        assert parent.buckets["a"][0].comment == "// second"

    def test_member_comment_beats_element_comment(self, parent: Descriptor) -> None:
        array = RawValue(
            kind=Kind.ARRAY,
            elements=[RawValue(kind=Kind.STRING, literal="x", comment="// elem")],
        )
        member = Member("a", array, "// member")
        collect(RawValue(kind=Kind.OBJECT, members=[member]), parent)
        assert parent.buckets["a"][0].comment == "// member"

    def test_placeholder_has_no_comment(self, parent: Descriptor) -> None:
        member = Member("a", RawValue(kind=Kind.ARRAY), "// empty")
        collect(RawValue(kind=Kind.OBJECT, members=[member]), parent)
        assert parent.buckets["a"][0].comment == ""
