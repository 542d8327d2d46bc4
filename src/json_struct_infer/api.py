"""Public API functions for json-struct-infer.

This module provides the two user-facing functions: infer and generate.
Each call creates a fresh DocumentBuilder and IdentifierTable, so naming
state never leaks from one run into another.
"""

from __future__ import annotations

from typing import Any

from json_struct_infer.config import InferenceConfig
from json_struct_infer.document import DocumentBuilder, RawValue
from json_struct_infer.naming import IdentifierTable, KeyNormalizer, assign_identifiers
from json_struct_infer.protocols import TransliterationBackend
from json_struct_infer.render import render
from json_struct_infer.result import InferenceResult
from json_struct_infer.schema import build

__all__ = ["generate", "infer"]


def _to_raw(document: Any) -> RawValue:
    builder = DocumentBuilder()
    if isinstance(document, RawValue):
        return builder.check_depth(document)
    if isinstance(document, (str, bytes, bytearray)):
        return builder.parse(document)
    return builder.build(document)


def infer(
    document: Any,
    config: InferenceConfig | None = None,
    backend: TransliterationBackend | None = None,
) -> InferenceResult:
    """Infer the named record schema of one JSON document.

    Args:
        document: JSON text (str/bytes), already-decoded data (dict/list), or
                  a RawValue tree from a custom walker.
        config:   Run configuration. Defaults to ``InferenceConfig()`` when None.
        backend:  Transliteration backend for non-ASCII keys. Defaults to
                  ``UnidecodeBackend()``.

    Returns:
        An ``InferenceResult`` whose root and records carry their identifiers.

    Raises:
        ParseError: If the document is malformed, nested too deep, or its top
            level is neither an object nor an array.
    """
    config = config if config is not None else InferenceConfig()
    root = build(_to_raw(document), root_name=config.root_name)

    table = IdentifierTable(KeyNormalizer(backend))
    records = assign_identifiers(root, table)
    return InferenceResult(root=root, records=records, mode=config.output_mode)


def generate(
    document: Any,
    config: InferenceConfig | None = None,
    backend: TransliterationBackend | None = None,
) -> str:
    """Infer the schema of ``document`` and render it as Go source.

    Args:
        document: Same as for ``infer``.
        config:   Run configuration. Defaults to ``InferenceConfig()`` when None.
        backend:  Transliteration backend, as for ``infer``.

    Returns:
        Go type declarations (plus accessors when configured).
    """
    config = config if config is not None else InferenceConfig()
    return render(infer(document, config, backend), config)
