"""Exception types raised by json-struct-infer."""

from __future__ import annotations

__all__ = ["JsonStructInferError", "ParseError"]


class JsonStructInferError(Exception):
    """Base class for every error raised by this package."""


class ParseError(JsonStructInferError, ValueError):
    """The document is malformed, truncated, or has no usable top-level shape.

    Raised before any schema is produced; generation never returns partial
    output.

    Attributes:
        line:   1-based line of the failure when known, else None.
        column: 1-based column of the failure when known, else None.
    """

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ) -> None:
        if line is not None and column is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message)
        self.line = line
        self.column = column
