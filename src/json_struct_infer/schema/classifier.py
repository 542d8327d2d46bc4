"""Value classification: structural group plus primitive type of one RawValue.

Arrays are grouped by lookahead: the first decisive element fixes the group
and the scan stops there. An empty inner array is not decisive, so
``[[], [{"a": 1}]]`` is still an array of arrays of objects. An array that is
empty, or holds nothing but empty arrays, gets a placeholder group that the
merger reconciles against sibling occurrences.

Scalar arrays are the exception to stopping early: their element type is
unified over every element, because ``[1, 2.5]`` must become a float array.
"""

from __future__ import annotations

from json_struct_infer.document.nodes import Kind, RawValue
from json_struct_infer.schema.merger import merge_scalar_types
from json_struct_infer.schema.types import Group, ScalarType

__all__ = ["INT32_MAX", "INT32_MIN", "classify", "element_type", "scalar_type"]

INT32_MAX = 2**31 - 1
INT32_MIN = -(2**31)
_INT32_DIGITS = len(str(INT32_MAX))


def scalar_type(value: RawValue) -> ScalarType:
    """Return the primitive type of ``value``; ANY for arrays and objects.

    Numbers are refined from their literal: a decimal point or an exponent
    means FLOAT; otherwise INT inside the signed 32-bit range, INT64 outside.
    Literals too long to fit 32 bits are never converted, so integers of any
    length classify without hitting the interpreter's int/str limit.
    """
    if value.kind is Kind.NUMBER:
        literal = value.literal
        if "." in literal or "e" in literal or "E" in literal:
            return ScalarType.FLOAT
        if len(literal.lstrip("+-")) > _INT32_DIGITS:
            return ScalarType.INT64
        if INT32_MIN <= int(literal) <= INT32_MAX:
            return ScalarType.INT
        return ScalarType.INT64
    if value.kind is Kind.STRING:
        return ScalarType.STRING
    if value.kind is Kind.BOOL:
        return ScalarType.BOOL
    if value.kind is Kind.NULL:
        return ScalarType.NULL
    return ScalarType.ANY


def _array_group(value: RawValue) -> Group:
    for element in value.elements:
        if element.kind is Kind.OBJECT:
            return Group.OBJECT_ARRAY
        if element.kind is Kind.ARRAY:
            if not element.elements:
                continue
            if element.elements[0].kind is Kind.OBJECT:
                return Group.OBJECT_ARRAY2
            return Group.VALUE_ARRAY2
        return Group.VALUE_ARRAY
    return Group.EMPTY_ARRAY2 if value.elements else Group.EMPTY_ARRAY


def element_type(value: RawValue, dimension: int) -> ScalarType:
    """Unify the types of every element of a 1-D or 2-D scalar array.

    A NULL-only array stays NULL so the field-level merge can still absorb it.
    Non-scalar elements count as ANY.
    """
    if dimension == 1:
        types = [scalar_type(element) for element in value.elements]
    else:
        types = []
        for element in value.elements:
            if element.kind is Kind.ARRAY:
                types.extend(scalar_type(inner) for inner in element.elements)
            else:
                types.append(ScalarType.ANY)
    return merge_scalar_types(types, keep_null=True)


def classify(value: RawValue) -> tuple[Group, ScalarType | None]:
    """Classify ``value`` into its structural group and primitive type.

    Returns:
        ``(group, scalar_type)``. scalar_type is None for object-like groups,
        NULL for the empty-array placeholders, the unified element type for
        scalar arrays, and the value's own type for scalars.
    """
    if value.kind is Kind.OBJECT:
        return Group.OBJECT, None

    if value.kind.is_scalar:
        return Group.VALUE, scalar_type(value)

    group = _array_group(value)
    if group.is_object:
        return group, None
    if group.is_placeholder:
        return group, ScalarType.NULL
    return group, element_type(value, group.dimension)
