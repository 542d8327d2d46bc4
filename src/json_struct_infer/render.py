"""Go struct rendering of an InferenceResult.

Turns the named schema into Go type declarations with struct tags,
optional comments, and optional ``GetField`` accessors. Every decision about
types and names has already been made by inference and naming; this module
only lays out text. Output is tab-indented and is not passed through gofmt,
so columns are not aligned.

Known limitation of flat output: one raw key always maps to one identifier,
so two unrelated nested objects under the same key (``{"a": {"data": {...}},
"b": {"data": {...}}}``) are both declared as ``type Data struct``. The
result does not compile as Go when their fields differ. Nested output inlines
each struct and is not affected.
"""

from __future__ import annotations

import json

from json_struct_infer.config import CommentMode, InferenceConfig, OutputMode
from json_struct_infer.result import InferenceResult
from json_struct_infer.schema.types import Descriptor, Group, ScalarType

__all__ = ["format_tag", "format_type", "render"]

_GO_SCALARS = {
    ScalarType.STRING: "string",
    ScalarType.BOOL: "bool",
    ScalarType.INT: "int",
    ScalarType.INT64: "int64",
    ScalarType.FLOAT: "float64",
    ScalarType.NULL: "interface{}",
    ScalarType.ANY: "interface{}",
}


def format_type(field: Descriptor, type_name: str, pointer: bool = False) -> str:
    """Return the Go type of ``field``.

    Args:
        field:     A finalized, named Descriptor.
        type_name: Type used for object-like groups: a record name in flat
                   output, an inline ``struct {...}`` in nested output.
        pointer:   Prefix object types with ``*``.
    """
    if field.group.is_object:
        prefix = "[]" * field.group.dimension
        return f"{prefix}{'*' if pointer else ''}{type_name}"
    scalar = _GO_SCALARS[field.scalar_type or ScalarType.ANY]
    if field.group in (Group.VALUE_ARRAY, Group.VALUE_ARRAY2):
        return "[]" * field.group.dimension + scalar
    return scalar


def format_tag(key: str, tags: tuple[str, ...]) -> str:
    """Return the back-quoted struct tag carrying ``key`` under every tag name."""
    quoted = json.dumps(key, ensure_ascii=False)
    return "`" + " ".join(f"{tag}:{quoted}" for tag in tags) + "`"


def _comment_text(comment: str) -> str:
    if comment.startswith(("//", "/*")):
        return comment
    return f"// {comment}"


def _field_lines(
    field: Descriptor, type_text: str, config: InferenceConfig, indent: str
) -> list[str]:
    line = f"{indent}{field.identifier} {type_text} {format_tag(field.key, config.tags)}"
    if not field.comment or config.comment_mode is CommentMode.NONE:
        return [line]
    if config.comment_mode is CommentMode.LINE:
        return [f"{indent}{_comment_text(field.comment)}", line]
    return [f"{line} {_comment_text(field.comment)}"]


def _flat_record(record: Descriptor, config: InferenceConfig) -> str:
    lines = [f"type {record.identifier} struct {{"]
    for field in record.children:
        type_text = format_type(field, field.identifier, config.pointer)
        lines.extend(_field_lines(field, type_text, config, "\t"))
    lines.append("}")
    return "\n".join(lines)


def _inline_struct(record: Descriptor, config: InferenceConfig, depth: int) -> str:
    indent = "\t" * depth
    lines = ["struct {"]
    for field in record.children:
        type_name = field.identifier
        if field.group.is_object:
            type_name = _inline_struct(field, config, depth + 1)
        type_text = format_type(field, type_name, config.pointer)
        lines.extend(_field_lines(field, type_text, config, indent))
    lines.append("\t" * (depth - 1) + "}")
    return "\n".join(lines)


def _accessor(record: Descriptor) -> str:
    lines = [
        f"func (n *{record.identifier}) GetField(fieldName string) interface{{}} {{",
        "\tswitch fieldName {",
    ]
    for field in record.children:
        lines.append(f"\tcase {json.dumps(field.identifier)}:")
        lines.append(f"\t\treturn n.{field.identifier}")
    lines.extend(["\tdefault:", "\t\treturn nil", "\t}", "}"])
    return "\n".join(lines)


def render(result: InferenceResult, config: InferenceConfig | None = None) -> str:
    """Render ``result`` as Go source.

    Args:
        result: A named schema produced by ``infer``.
        config: Rendering options. Defaults to ``InferenceConfig()``; the
            layout follows ``result.mode``.

    Returns:
        Go declarations separated by blank lines, ending with a newline.
    """
    config = config if config is not None else InferenceConfig()

    if result.mode is OutputMode.NESTED:
        root = result.root
        blocks = [f"type {root.identifier} {_inline_struct(root, config, 1)}"]
        accessor_records = [root]
    else:
        blocks = [_flat_record(record, config) for record in result.records]
        accessor_records = result.records

    if config.accessors:
        blocks.extend(_accessor(record) for record in accessor_records)
    return "\n\n".join(blocks) + "\n"
