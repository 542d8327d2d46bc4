"""InferenceResult dataclass for inference output.

This module provides the result type returned by infer() calls.
"""

from __future__ import annotations

from dataclasses import dataclass

from json_struct_infer.config import OutputMode
from json_struct_infer.schema.types import Descriptor

__all__ = ["InferenceResult"]


@dataclass(frozen=True, slots=True)
class InferenceResult:
    """Named schema of one document.

    Attributes:
        root: Finalized root Descriptor; every record and field carries its
            identifier.
        records: Object-like descriptors in pre-order, root first. In NESTED
            mode this still lists every record; the emission layer decides
            what to render separately.
        mode: The output mode the result was produced for.
    """

    root: Descriptor
    records: list[Descriptor]
    mode: OutputMode

    def record(self, identifier: str) -> Descriptor:
        """Return the record with the given identifier.

        Raises:
            KeyError: If no record has that identifier.
        """
        for record in self.records:
            if record.identifier == identifier:
                return record
        raise KeyError(identifier)
