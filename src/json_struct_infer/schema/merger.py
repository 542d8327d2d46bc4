"""Schema merging: reduce every occurrence of one key to a single Descriptor.

The merger never fails on conflicting data. Whenever occurrences cannot form
one record type or one primitive type, the result degrades to a wider but
safe representation (``ScalarType.ANY``), so a document that mixes shapes
across array elements still yields a usable schema.

Rules, applied per bucket (all occurrences of one key under one parent):

1. Groups: one real group wins. Two different real groups, or both
   placeholder dimensions together, degrade to VALUE/ANY. A placeholder is
   absorbed by a real group of the same array dimension and degrades to
   VALUE/ANY next to any other. Placeholders alone become an ANY array of the
   matching dimension.
2. Object-like groups: the occurrences' own buckets are merged key by key,
   recursively, into the union of all fields seen.
3. Scalar-like groups: ANY dominates; more than one of the numeric, string
   and bool families gives ANY; numerics widen FLOAT > INT64 > INT; NULL is
   absorbed by a single family and gives ANY on its own.
4. Comment: the first non-empty one.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from json_struct_infer.schema.types import Descriptor, Group, ScalarType

__all__ = [
    "finalize",
    "merge",
    "merge_comment",
    "merge_groups",
    "merge_scalar_types",
]

logger = logging.getLogger(__name__)


def merge_groups(groups: Iterable[Group]) -> tuple[Group, bool]:
    """Unify the groups observed for one key.

    Returns:
        ``(group, degraded)``. When ``degraded`` is True the scalar type of the
        result is ANY regardless of the occurrences' own types.
    """
    real: set[Group] = set()
    placeholders: set[Group] = set()
    for group in groups:
        (placeholders if group.is_placeholder else real).add(group)

    if len(real) > 1 or len(placeholders) > 1:
        return Group.VALUE, True

    if not real:
        (placeholder,) = placeholders
        if placeholder is Group.EMPTY_ARRAY:
            return Group.VALUE_ARRAY, True
        return Group.VALUE_ARRAY2, True

    (group,) = real
    if placeholders and next(iter(placeholders)).dimension != group.dimension:
        return Group.VALUE, True
    return group, False


def merge_scalar_types(
    types: Iterable[ScalarType | None], *, keep_null: bool = False
) -> ScalarType:
    """Unify primitive types by precedence.

    Args:
        types:     Observed types; None entries (object-like) are ignored.
        keep_null: Return NULL instead of ANY when only NULL was observed.
                   Used for array elements, whose field may still be resolved
                   by a sibling occurrence.
    """
    present = {t for t in types if t is not None}
    if ScalarType.ANY in present:
        return ScalarType.ANY

    numeric = any(t.is_numeric for t in present)
    families = numeric + (ScalarType.STRING in present) + (ScalarType.BOOL in present)
    if families > 1:
        return ScalarType.ANY

    for winner in (
        ScalarType.STRING,
        ScalarType.BOOL,
        ScalarType.FLOAT,
        ScalarType.INT64,
        ScalarType.INT,
    ):
        if winner in present:
            return winner

    if keep_null and ScalarType.NULL in present:
        return ScalarType.NULL
    return ScalarType.ANY


def merge_comment(bucket: Iterable[Descriptor]) -> str:
    """Return the first non-empty comment in bucket order."""
    for occurrence in bucket:
        if occurrence.comment:
            return occurrence.comment
    return ""


def _merge_children(target: Descriptor, occurrences: Iterable[Descriptor]) -> None:
    for occurrence in occurrences:
        for child_bucket in occurrence.buckets.values():
            for child in child_bucket:
                target.add_occurrence(child)
        occurrence.buckets = {}
    target.children.extend(merge(bucket) for bucket in target.buckets.values())
    target.buckets = {}


def merge(bucket: Sequence[Descriptor]) -> Descriptor:
    """Reduce a non-empty, ordered bucket of same-key occurrences to one Descriptor.

    Args:
        bucket: Every occurrence of one key under one parent, in document order.

    Returns:
        A finalized Descriptor with a stable group and no residual buckets.

    Raises:
        ValueError: If ``bucket`` is empty.
    """
    if not bucket:
        raise ValueError("cannot merge an empty bucket")

    key = bucket[0].key
    group, degraded = merge_groups(occurrence.group for occurrence in bucket)
    merged = Descriptor(key=key, group=group, comment=merge_comment(bucket))

    if degraded:
        logger.debug(
            "Field %r degraded to %s/any from groups %s",
            key,
            group,
            sorted({str(occurrence.group) for occurrence in bucket}),
        )
        merged.scalar_type = ScalarType.ANY
        for occurrence in bucket:
            occurrence.buckets = {}
        return merged

    if group.is_object:
        _merge_children(merged, bucket)
        return merged

    merged.scalar_type = merge_scalar_types(
        occurrence.scalar_type for occurrence in bucket
    )
    if merged.scalar_type is ScalarType.ANY:
        logger.debug("Field %r resolved to dynamic type", key)
    return merged


def finalize(root: Descriptor) -> Descriptor:
    """Merge every bucket collected under ``root`` into its children, in place."""
    buckets, root.buckets = root.buckets, {}
    root.children.extend(merge(bucket) for bucket in buckets.values())
    return root
