"""json-struct-infer - record schema inference and identifier naming for JSON documents."""

from __future__ import annotations

from json_struct_infer.api import generate, infer
from json_struct_infer.config import CommentMode, InferenceConfig, OutputMode
from json_struct_infer.errors import JsonStructInferError, ParseError
from json_struct_infer.result import InferenceResult
from json_struct_infer.schema import Descriptor, Group, ScalarType

__version__: str = "0.1.0"
__all__: list[str] = [
    "CommentMode",
    "Descriptor",
    "Group",
    "InferenceConfig",
    "InferenceResult",
    "JsonStructInferError",
    "OutputMode",
    "ParseError",
    "ScalarType",
    "generate",
    "infer",
]
