"""RawValue dataclass and Kind StrEnum for the parsed-document representation.

A RawValue is the read-only handle the inference engine consumes: it keeps
the source literal of numbers (so integer width can be decided from the text,
not from a lossy float), every object member in document order (duplicate
keys included), and the optional comment the walker attached to the value.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum, auto


class Kind(StrEnum):
    """Enumeration of the six JSON value kinds.

    StrEnum values are the lowercased member names:
    - STRING -> "string"
    - NUMBER -> "number"
    - BOOL   -> "bool"
    - NULL   -> "null"
    - ARRAY  -> "array"
    - OBJECT -> "object"
    """

    STRING = auto()
    NUMBER = auto()
    BOOL = auto()
    NULL = auto()
    ARRAY = auto()
    OBJECT = auto()

    @property
    def is_scalar(self) -> bool:
        return self not in (Kind.ARRAY, Kind.OBJECT)


@dataclass(slots=True)
class Member:
    """One ``key: value`` pair of an OBJECT, in document order."""

    key: str
    value: RawValue
    comment: str = ""


@dataclass(slots=True)
class RawValue:
    """A node of the parsed JSON document.

    Attributes:
        kind:     Which JSON kind this value is (see Kind).
        literal:  Source text for NUMBER (e.g. "1.50"), decoded text for
                  STRING, "true"/"false" for BOOL, "null" for NULL; empty
                  for structural kinds.
        members:  Object members in document order (OBJECT only).
        elements: Array elements in document order (ARRAY only).
        comment:  Comment attached to this value by the walker; "" when absent.
    """

    kind: Kind
    literal: str = ""
    members: list[Member] = field(default_factory=list)
    elements: list[RawValue] = field(default_factory=list)
    comment: str = ""
