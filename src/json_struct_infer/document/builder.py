"""DocumentBuilder: turns JSON text or decoded Python data into RawValue trees.

Text is decoded with the standard-library ``json`` module using hooks so
nothing the inference engine needs is lost on the way:

- ``object_pairs_hook`` keeps every member in document order, including
  repeated keys (a plain dict would keep only the last one).
- ``parse_int`` / ``parse_float`` keep the number literal as written, so
  ``2147483648`` and ``1.0`` are classified from their text.
- ``parse_constant`` rejects ``NaN`` / ``Infinity``, which are not JSON.

Already-decoded data (``dict``/``list``/scalars) is converted by recursive
dispatch. bool MUST be checked before int because bool subclasses int.

Every tree handed out is at most ``max_depth`` containers deep. Collection and
merging recurse once per level, so deeper documents are rejected here with a
ParseError rather than failing later with a RecursionError.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from json_struct_infer.document.nodes import Kind, Member, RawValue
from json_struct_infer.errors import ParseError

# Type alias for decoded JSON values accepted by DocumentBuilder.build
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None

DEFAULT_MAX_DEPTH = 128

_TOO_DEEP = "Document nesting too deep"


def _reject_constant(name: str) -> RawValue:
    raise ParseError(f"Non-standard JSON constant {name!r}")


@dataclass
class DocumentBuilder:
    """Produces RawValue trees from JSON text or decoded Python values.

    Attributes:
        max_depth: Deepest container nesting accepted; the top-level value is
                   depth 1.

    Example::
        builder = DocumentBuilder()
        doc = builder.parse('{"id": 1, "tags": ["a"]}')
        # doc: OBJECT -> Member("id", NUMBER "1"), Member("tags", ARRAY [STRING "a"])
    """

    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be >= 1, got {self.max_depth}")

    def parse(self, text: str | bytes | bytearray) -> RawValue:
        """Decode JSON text into a RawValue tree.

        Args:
            text: A complete JSON document.

        Returns:
            The RawValue for the document's top-level value.

        Raises:
            ParseError: If the text is malformed, truncated, or nested deeper
                than ``max_depth``.
        """
        try:
            decoded = json.loads(
                text,
                object_pairs_hook=self._object_from_pairs,
                parse_int=self._number,
                parse_float=self._number,
                parse_constant=_reject_constant,
            )
            root = self._wrap(decoded)
        except json.JSONDecodeError as exc:
            raise ParseError(exc.msg, line=exc.lineno, column=exc.colno) from exc
        except UnicodeDecodeError as exc:
            raise ParseError(f"Document is not valid UTF-8: {exc.reason}") from exc
        except RecursionError as exc:
            raise ParseError(_TOO_DEEP) from exc
        return self.check_depth(root)

    def build(self, value: JsonValue) -> RawValue:
        """Convert an already-decoded JSON value to a RawValue tree.

        Args:
            value: Any valid JSON value (dict, list, str, int, float, bool, None).

        Returns:
            The RawValue for ``value``.

        Raises:
            ParseError: If value (or anything nested in it) is not a JSON type,
                or it is nested deeper than ``max_depth``.
        """
        try:
            root = self._convert(value)
        except RecursionError as exc:
            raise ParseError(_TOO_DEEP) from exc
        return self.check_depth(root)

    def check_depth(self, root: RawValue) -> RawValue:
        """Return ``root`` unchanged if it nests at most ``max_depth`` containers.

        Raises:
            ParseError: If any value lies deeper than ``max_depth``.
        """
        stack = [(root, 1)]
        while stack:
            node, depth = stack.pop()
            if depth > self.max_depth:
                raise ParseError(f"{_TOO_DEEP} (more than {self.max_depth} levels)")
            stack.extend((member.value, depth + 1) for member in node.members)
            stack.extend((element, depth + 1) for element in node.elements)
        return root

    def _convert(self, value: JsonValue) -> RawValue:
        # CRITICAL: bool MUST be checked before int, bool subclasses int in Python
        if isinstance(value, bool):
            return RawValue(kind=Kind.BOOL, literal="true" if value else "false")

        if isinstance(value, dict):
            members = []
            for key, val in value.items():
                if not isinstance(key, str):
                    raise ParseError(f"Object keys must be strings, got {key!r}")
                members.append(Member(key=key, value=self._convert(val)))
            return RawValue(kind=Kind.OBJECT, members=members)

        if isinstance(value, (list, tuple)):
            return RawValue(
                kind=Kind.ARRAY, elements=[self._convert(item) for item in value]
            )

        if isinstance(value, str):
            return RawValue(kind=Kind.STRING, literal=value)

        if isinstance(value, int):
            try:
                literal = str(value)
            except ValueError as exc:
                # Past sys.get_int_max_str_digits(); JSON text has no such limit.
                raise ParseError(
                    f"Integer with {value.bit_length()} bits cannot be converted to text"
                ) from exc
            return RawValue(kind=Kind.NUMBER, literal=literal)

        if isinstance(value, float):
            if value != value or value in (float("inf"), float("-inf")):
                raise ParseError(f"Non-finite number {value!r} is not valid JSON")
            return RawValue(kind=Kind.NUMBER, literal=repr(value))

        if value is None:
            return RawValue(kind=Kind.NULL, literal="null")

        raise ParseError(f"Unsupported JSON value type: {type(value)!r}")

    # ------------------------------------------------------------------
    # json.loads hooks
    # ------------------------------------------------------------------

    @staticmethod
    def _number(literal: str) -> RawValue:
        return RawValue(kind=Kind.NUMBER, literal=literal)

    def _object_from_pairs(self, pairs: list[tuple[str, Any]]) -> RawValue:
        return RawValue(
            kind=Kind.OBJECT,
            members=[Member(key=key, value=self._wrap(val)) for key, val in pairs],
        )

    def _wrap(self, decoded: Any) -> RawValue:
        """Finish a hook-decoded value: objects and numbers already are RawValues."""
        if isinstance(decoded, RawValue):
            return decoded
        if isinstance(decoded, list):
            return RawValue(
                kind=Kind.ARRAY, elements=[self._wrap(item) for item in decoded]
            )
        return self._convert(decoded)
