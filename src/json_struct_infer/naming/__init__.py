"""Naming subpackage: identifier normalization and run-scoped uniqueness.

Re-exports:
- KeyNormalizer: formats one raw key as an identifier
- IdentifierTable: per-run memo and collision counter
- assign_identifiers: names every record and field of a merged schema tree
"""

from json_struct_infer.naming.normalizer import (
    COMMON_INITIALISMS,
    FALLBACK_IDENTIFIER,
    IdentifierTable,
    KeyNormalizer,
    assign_identifiers,
)

__all__ = [
    "COMMON_INITIALISMS",
    "FALLBACK_IDENTIFIER",
    "IdentifierTable",
    "KeyNormalizer",
    "assign_identifiers",
]
