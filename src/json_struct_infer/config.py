"""InferenceConfig and its mode enums.

InferenceConfig is a frozen (immutable) dataclass read by every stage of a
run and never mutated. Only ``root_name`` and ``output_mode`` influence the
inferred schema; the remaining fields shape the rendered text.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto

from json_struct_infer.schema.assembler import DEFAULT_ROOT_NAME

DEFAULT_TAG = "json"


class OutputMode(StrEnum):
    """How records are laid out.

    - FLAT:   One independent record per nested object, in pre-order.
    - NESTED: One root record with nested objects inlined.
    """

    FLAT = auto()
    NESTED = auto()


class CommentMode(StrEnum):
    """Where field comments are rendered.

    - NONE:     Comments are dropped.
    - LINE:     On their own line above the field.
    - TRAILING: At the end of the field's line.
    """

    NONE = auto()
    LINE = auto()
    TRAILING = auto()


@dataclass(frozen=True, slots=True)
class InferenceConfig:
    """Immutable configuration for one generation run.

    Attributes:
        root_name: Key of the synthetic root record. Must be non-empty.
        output_mode: FLAT or NESTED record layout.
        pointer: Render object-typed fields as pointers.
        tags: Struct tag names. ``"json"`` is always present and first;
            duplicates are dropped.
        comment_mode: Where comments are rendered.
        accessors: Also render a ``GetField`` accessor per record.
    """

    root_name: str = DEFAULT_ROOT_NAME
    output_mode: OutputMode = OutputMode.FLAT
    pointer: bool = False
    tags: tuple[str, ...] = (DEFAULT_TAG,)
    comment_mode: CommentMode = CommentMode.NONE
    accessors: bool = False

    def __post_init__(self) -> None:
        if not self.root_name:
            msg = "root_name must be a non-empty string"
            raise ValueError(msg)
        for tag in self.tags:
            if not tag or any(ch.isspace() or ch in '`:"' for ch in tag):
                msg = f"invalid tag name {tag!r}"
                raise ValueError(msg)
        ordered = dict.fromkeys((DEFAULT_TAG, *self.tags))
        # frozen dataclass: normalized fields are written through object.__setattr__
        object.__setattr__(self, "tags", tuple(ordered))
        object.__setattr__(self, "output_mode", OutputMode(self.output_mode))
        object.__setattr__(self, "comment_mode", CommentMode(self.comment_mode))
