"""schema subpackage: classification, collection, merging and assembly.

Import from this module (not from sub-modules directly) to stay on the
stable public interface.

Example::

    from json_struct_infer.document import DocumentBuilder
    from json_struct_infer.schema import build, flatten

    root = build(DocumentBuilder().parse('{"items": [{"id": 1}, {"id": 2.5}]}'))
    [record.key for record in flatten(root)]   # ["AutoGenerated", "items"]
"""

from __future__ import annotations

from json_struct_infer.schema.assembler import DEFAULT_ROOT_NAME, build, flatten
from json_struct_infer.schema.classifier import classify
from json_struct_infer.schema.collector import collect
from json_struct_infer.schema.merger import merge
from json_struct_infer.schema.types import Descriptor, Group, ScalarType

__all__ = [
    "DEFAULT_ROOT_NAME",
    "Descriptor",
    "Group",
    "ScalarType",
    "build",
    "classify",
    "collect",
    "flatten",
    "merge",
]
