"""Group / ScalarType StrEnums and the Descriptor dataclass.

Group is the structural classification of a value; ScalarType is the
primitive type of a scalar (or of the elements of a scalar array). Both are
closed variants so the merge precedence logic can be written as explicit
membership tests.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum, auto


class Group(StrEnum):
    """Structural group of a value.

    Six stable groups survive merging:
    - VALUE         -> "value"         : scalar
    - VALUE_ARRAY   -> "value_array"   : array of scalars
    - VALUE_ARRAY2  -> "value_array2"  : array of arrays of scalars
    - OBJECT        -> "object"        : object
    - OBJECT_ARRAY  -> "object_array"  : array of objects
    - OBJECT_ARRAY2 -> "object_array2" : array of arrays of objects

    Two placeholders exist only between classification and merge:
    - EMPTY_ARRAY   -> "empty_array"   : [] (element shape unknown)
    - EMPTY_ARRAY2  -> "empty_array2"  : [[]] (inner element shape unknown)
    """

    VALUE = auto()
    VALUE_ARRAY = auto()
    VALUE_ARRAY2 = auto()
    OBJECT = auto()
    OBJECT_ARRAY = auto()
    OBJECT_ARRAY2 = auto()
    EMPTY_ARRAY = auto()
    EMPTY_ARRAY2 = auto()

    @property
    def is_object(self) -> bool:
        return self in _OBJECT_GROUPS

    @property
    def is_placeholder(self) -> bool:
        return self in (Group.EMPTY_ARRAY, Group.EMPTY_ARRAY2)

    @property
    def dimension(self) -> int:
        """Array nesting depth: 0 for VALUE/OBJECT, 1 or 2 for arrays."""
        return _DIMENSIONS[self]


_OBJECT_GROUPS = frozenset({Group.OBJECT, Group.OBJECT_ARRAY, Group.OBJECT_ARRAY2})

_DIMENSIONS = {
    Group.VALUE: 0,
    Group.OBJECT: 0,
    Group.VALUE_ARRAY: 1,
    Group.OBJECT_ARRAY: 1,
    Group.EMPTY_ARRAY: 1,
    Group.VALUE_ARRAY2: 2,
    Group.OBJECT_ARRAY2: 2,
    Group.EMPTY_ARRAY2: 2,
}


class ScalarType(StrEnum):
    """Primitive type of a scalar value.

    INT is a literal within the signed 32-bit range; INT64 is any wider
    integer literal. NULL is transient: a field-level merge always resolves it
    (absorbed by another family, or ANY when seen alone).
    """

    STRING = auto()
    BOOL = auto()
    INT = auto()
    INT64 = auto()
    FLOAT = auto()
    NULL = auto()
    ANY = auto()

    @property
    def is_numeric(self) -> bool:
        return self in (ScalarType.INT, ScalarType.INT64, ScalarType.FLOAT)


@dataclass(slots=True)
class Descriptor:
    """One field of the inferred schema, or the synthetic document root.

    Attributes:
        key:         Original (raw) JSON key; the configured root name for the root.
        group:       Structural group (see Group).
        scalar_type: Primitive type for VALUE / VALUE_ARRAY / VALUE_ARRAY2 (and
                     placeholders); None for object-like groups.
        comment:     Comment attached to the field; "" when absent.
        children:    Finalized child fields in first-seen order (object-like only).
        buckets:     Occurrences awaiting merge, keyed by raw child key in
                     first-seen order. Emptied when the descriptor is merged.
        identifier:  Formatted identifier; "" until assigned by the naming pass.
    """

    key: str
    group: Group
    scalar_type: ScalarType | None = None
    comment: str = ""
    children: list[Descriptor] = field(default_factory=list)
    buckets: dict[str, list[Descriptor]] = field(default_factory=dict)
    identifier: str = ""

    def add_occurrence(self, occurrence: Descriptor) -> None:
        """Append one occurrence of a child key to its bucket."""
        self.buckets.setdefault(occurrence.key, []).append(occurrence)

    def set_identifier(self, identifier: str) -> None:
        """Assign the formatted identifier; it never changes afterwards."""
        if self.identifier and self.identifier != identifier:
            msg = (
                f"identifier of {self.key!r} already assigned as "
                f"{self.identifier!r}, refusing {identifier!r}"
            )
            raise RuntimeError(msg)
        self.identifier = identifier
