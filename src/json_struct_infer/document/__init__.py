"""Document subpackage: the parsed-JSON representation consumed by inference.

Re-exports the public API for the document module:
- RawValue: dataclass representing one value of the parsed document
- Member: one ordered ``key: value`` pair of an object
- Kind: StrEnum of the six JSON value kinds
- DocumentBuilder: decodes JSON text or Python data into RawValue trees
"""

from json_struct_infer.document.builder import DocumentBuilder
from json_struct_infer.document.nodes import Kind, Member, RawValue

__all__ = ["DocumentBuilder", "Kind", "Member", "RawValue"]
