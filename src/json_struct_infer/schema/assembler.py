"""Tree assembly: from a document root to one finalized schema tree.

``build`` collects the top-level object (or every object element of a
top-level array, each treated as one occurrence of an implicit root) and
merges the result. ``flatten`` lists the object-like descriptors in pre-order
for flat output, where every nested object becomes its own record.
"""

from __future__ import annotations

import logging

from json_struct_infer.document.nodes import Kind, RawValue
from json_struct_infer.errors import ParseError
from json_struct_infer.schema.collector import collect
from json_struct_infer.schema.merger import finalize
from json_struct_infer.schema.types import Descriptor, Group

__all__ = ["DEFAULT_ROOT_NAME", "build", "flatten"]

logger = logging.getLogger(__name__)

DEFAULT_ROOT_NAME = "AutoGenerated"


def build(root_value: RawValue, root_name: str = DEFAULT_ROOT_NAME) -> Descriptor:
    """Infer the schema of a whole document.

    Args:
        root_value: The document's top-level value; an OBJECT or an ARRAY.
        root_name:  Key given to the synthetic root descriptor.

    Returns:
        The fully merged root Descriptor (group OBJECT, no residual buckets).

    Raises:
        ParseError: If the top-level value is neither an object nor an array.
    """
    root = Descriptor(key=root_name, group=Group.OBJECT)

    if root_value.kind is Kind.OBJECT:
        collect(root_value, root)
    elif root_value.kind is Kind.ARRAY:
        for element in root_value.elements:
            if element.kind is Kind.OBJECT:
                collect(element, root)
            else:
                logger.debug("Ignoring top-level %s element", element.kind)
    else:
        raise ParseError(
            f"Top-level value must be an object or an array, got {root_value.kind}"
        )

    return finalize(root)


def flatten(root: Descriptor) -> list[Descriptor]:
    """Return every object-like descriptor of the tree in pre-order, root first."""
    records: list[Descriptor] = []
    stack = [root]
    while stack:
        node = stack.pop()
        if node.group.is_object:
            records.append(node)
        stack.extend(reversed(node.children))
    return records
