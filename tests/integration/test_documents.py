"""End-to-end inference over realistic documents.

Each case checks a whole run: parse, collect, merge, name. Properties are
asserted over every record of the result (uniqueness of sibling identifiers,
no placeholder groups, no residual buckets) in addition to targeted fields.
"""

from __future__ import annotations

import json

import pytest

from json_struct_infer import Group, ScalarType, infer
from json_struct_infer.schema import Descriptor

ORDERS = json.dumps(
    {
        "orderId": 9000000000,
        "createdAt": "2024-01-01T00:00:00Z",
        "customer": {"id": 7, "email": "a@b.c", "vip": False},
        "lines": [
            {"sku": "A-1", "qty": 1, "price": 10, "tags": []},
            {"sku": "B-2", "qty": 2, "price": 9.99, "tags": ["sale"], "note": None},
            {"sku": "C-3", "qty": None, "discount": {"code": "X", "pct": 5}},
        ],
        "history": [[{"status": "new"}], [], [{"status": "paid", "at": 1700000000}]],
        "matrix": [[1, 2], [3.5]],
        "meta": [],
        "misc": [1, "two", None],
    }
)


def _walk(node: Descriptor):  # type: ignore[no-untyped-def]
    yield node
    for child in node.children:
        yield from _walk(child)


def _field(record: Descriptor, key: str) -> Descriptor:
    for child in record.children:
        if child.key == key:
            return child
    raise KeyError(key)


@pytest.fixture(scope="module")
def orders():  # type: ignore[no-untyped-def]
    return infer(ORDERS)


class TestOrdersDocument:
    def test_top_level_fields(self, orders) -> None:  # type: ignore[no-untyped-def]
        root = orders.root
        assert [c.identifier for c in root.children] == [
            "OrderID",
            "CreatedAt",
            "Customer",
            "Lines",
            "History",
            "Matrix",
            "Meta",
            "Misc",
        ]
        assert _field(root, "orderId").scalar_type is ScalarType.INT64
        assert _field(root, "matrix").group is Group.VALUE_ARRAY2
        assert _field(root, "matrix").scalar_type is ScalarType.FLOAT
        assert (_field(root, "meta").group, _field(root, "meta").scalar_type) == (
            Group.VALUE_ARRAY,
            ScalarType.ANY,
        )
        assert _field(root, "misc").scalar_type is ScalarType.ANY

    def test_lines_union_and_widening(self, orders) -> None:  # type: ignore[no-untyped-def]
        lines = orders.record("Lines")
        assert [c.key for c in lines.children] == [
            "sku",
            "qty",
            "price",
            "tags",
            "note",
            "discount",
        ]
        assert _field(lines, "qty").scalar_type is ScalarType.INT
        assert _field(lines, "price").scalar_type is ScalarType.FLOAT
        tags = _field(lines, "tags")
        assert (tags.group, tags.scalar_type) == (Group.VALUE_ARRAY, ScalarType.STRING)
        assert _field(lines, "note").scalar_type is ScalarType.ANY
        assert _field(lines, "discount").group is Group.OBJECT

    def test_two_dimensional_history(self, orders) -> None:  # type: ignore[no-untyped-def]
        history = orders.record("History")
        assert history.group is Group.OBJECT_ARRAY2
        assert [(c.identifier, c.scalar_type) for c in history.children] == [
            ("Status", ScalarType.STRING),
            ("At", ScalarType.INT),
        ]

    def test_records_pre_order(self, orders) -> None:  # type: ignore[no-untyped-def]
        assert [r.identifier for r in orders.records] == [
            "AutoGenerated",
            "Customer",
            "Lines",
            "Discount",
            "History",
        ]

    def test_customer_id_initialism(self, orders) -> None:  # type: ignore[no-untyped-def]
        customer = orders.record("Customer")
        assert [c.identifier for c in customer.children] == ["ID", "Email", "Vip"]

    def test_every_node_finalized(self, orders) -> None:  # type: ignore[no-untyped-def]
        for node in _walk(orders.root):
            assert node.buckets == {}
            assert not node.group.is_placeholder
            assert node.identifier
            if node.group.is_object:
                assert node.scalar_type is None
            else:
                assert node.scalar_type is not None
                assert node.scalar_type is not ScalarType.NULL

    def test_sibling_identifiers_unique(self, orders) -> None:  # type: ignore[no-untyped-def]
        for record in orders.records:
            identifiers = [c.identifier for c in record.children]
            assert len(identifiers) == len(set(identifiers))


class TestCollisionsAcrossRecords:
    def test_same_raw_key_same_identifier(self) -> None:
        result = infer('{"user_id": 1, "a": {"user_id": 2}, "b": [{"user_id": 3}]}')
        identifiers = {
            child.identifier
            for node in _walk(result.root)
            for child in node.children
            if child.key == "user_id"
        }
        assert identifiers == {"UserID"}

    def test_colliding_keys_in_different_records(self) -> None:
        result = infer('{"a": {"Name": 1}, "b": {"name": 2}}')
        assert _field(result.record("A"), "Name").identifier == "Name"
        assert _field(result.record("B"), "name").identifier == "Name1"


class TestNonLatinKeys:
    def test_chinese_keys(self) -> None:
        result = infer('{"名字": "x", "年龄": 3}')
        assert [c.identifier for c in result.root.children] == ["MingZi", "NianLing"]
