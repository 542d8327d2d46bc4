"""Field collection: record every occurrence of every key under a parent.

``collect`` walks an object's members in document order and appends one
occurrence Descriptor per member to ``parent.buckets[key]``. Object members
are recursed into; for arrays of objects a single occurrence stands for the
whole array and every object element is collected into it, in element order.
Because buckets are only ever appended to, calling ``collect`` once per
sibling array element accumulates every element's view of each key, which is
what the merger later reconciles.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from json_struct_infer.document.nodes import Kind, Member, RawValue
from json_struct_infer.schema.classifier import classify
from json_struct_infer.schema.types import Descriptor, Group

__all__ = ["collect", "object_elements"]

logger = logging.getLogger(__name__)


def _first_element_comment(value: RawValue) -> str:
    for element in value.elements:
        if element.comment:
            return element.comment
    return ""


def object_elements(value: RawValue, dimension: int) -> Iterator[RawValue]:
    """Yield the objects of a 1-D or 2-D array, skipping anything else."""
    if dimension == 1:
        candidates: Iterator[RawValue] = iter(value.elements)
    else:
        candidates = (
            inner
            for element in value.elements
            if element.kind is Kind.ARRAY
            for inner in element.elements
        )
    for candidate in candidates:
        if candidate.kind is Kind.OBJECT:
            yield candidate
        else:
            logger.debug("Skipping non-object %s element in object array", candidate.kind)


def _occurrence(member: Member) -> Descriptor:
    value = member.value
    group, scalar = classify(value)
    comment = member.comment or value.comment

    if group is Group.OBJECT:
        occurrence = Descriptor(key=member.key, group=group, comment=comment)
        collect(value, occurrence)
        return occurrence

    # The member's own comment wins over one found on the array elements
    if group is not Group.VALUE and not group.is_placeholder and not comment:
        comment = _first_element_comment(value)
    if group.is_placeholder:
        comment = ""

    occurrence = Descriptor(
        key=member.key, group=group, scalar_type=scalar, comment=comment
    )
    if group.is_object:
        for element in object_elements(value, group.dimension):
            collect(element, occurrence)
    return occurrence


def collect(object_value: RawValue, parent: Descriptor) -> Descriptor:
    """Append an occurrence for every member of ``object_value`` to ``parent``.

    Args:
        object_value: An OBJECT RawValue.
        parent:       Descriptor receiving the occurrences. Repeated calls with
                      the same parent accumulate.

    Returns:
        ``parent``, for chaining.

    Raises:
        TypeError: If ``object_value`` is not an OBJECT.
    """
    if object_value.kind is not Kind.OBJECT:
        raise TypeError(f"collect() expects an object, got {object_value.kind}")
    for member in object_value.members:
        parent.add_occurrence(_occurrence(member))
    return parent
