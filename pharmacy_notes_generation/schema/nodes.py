"""
Schema Nodes - Declarative Structured-Output Schema

A small tagged tree describing the JSON the model must return. Nodes are
immutable and render to the mapping accepted by the Gemini SDK as
`response_schema`.

Node Types:
    StringNode  → {"type": "STRING"}
    ArrayNode   → {"type": "ARRAY", "items": <node>}
    ObjectNode  → {"type": "OBJECT", "properties": {...}, "required": [...]}

Example:
    >>> point = ObjectNode(
    ...     properties={"point": StringNode(), "mnemonic": StringNode()},
    ...     required=("point",),
    ... )
    >>> point.to_dict()["required"]
    ['point']
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Tuple, Union


class SchemaType(str, Enum):
    """Type tags understood by the Gemini schema format."""

    STRING = "STRING"
    ARRAY = "ARRAY"
    OBJECT = "OBJECT"


@dataclass(frozen=True)
class StringNode:
    """A string value."""

    kind: SchemaType = field(default=SchemaType.STRING, init=False)

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.kind.value}


@dataclass(frozen=True)
class ArrayNode:
    """A homogeneous list of `items`."""

    items: "SchemaNode"
    kind: SchemaType = field(default=SchemaType.ARRAY, init=False)

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.kind.value, "items": self.items.to_dict()}


@dataclass(frozen=True)
class ObjectNode:
    """
    An object with named properties.

    Property order is preserved when rendering. Every name in `required`
    must be a declared property.
    """

    properties: Mapping[str, "SchemaNode"]
    required: Tuple[str, ...] = ()
    kind: SchemaType = field(default=SchemaType.OBJECT, init=False)

    def __post_init__(self) -> None:
        unknown = [name for name in self.required if name not in self.properties]
        if unknown:
            raise ValueError(f"Required fields not declared as properties: {unknown}")

    def to_dict(self) -> Dict[str, Any]:
        schema: Dict[str, Any] = {
            "type": self.kind.value,
            "properties": {name: node.to_dict() for name, node in self.properties.items()},
        }
        if self.required:
            schema["required"] = list(self.required)
        return schema

    @property
    def optional(self) -> Tuple[str, ...]:
        """Declared properties that are not required."""
        return tuple(name for name in self.properties if name not in self.required)


SchemaNode = Union[StringNode, ArrayNode, ObjectNode]


def string_list() -> ArrayNode:
    """Shorthand for an array of strings."""
    return ArrayNode(items=StringNode())
