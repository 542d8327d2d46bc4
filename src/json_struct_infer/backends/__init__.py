"""Backends subpackage for json-struct-infer.

The base install provides ``UnidecodeBackend``, which covers Han, Cyrillic,
Greek, accented Latin and most other scripts through the Unidecode tables.

All backends satisfy the ``TransliterationBackend`` Protocol structurally.
"""

from json_struct_infer.backends.unidecode import UnidecodeBackend

__all__ = ["UnidecodeBackend"]
