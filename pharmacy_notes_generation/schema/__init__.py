"""
Schema Layer - Structured-Output Contract

Submodules:
    nodes.py       → StringNode / ArrayNode / ObjectNode tree
    study_notes.py → The StudyNotes response schema
"""

from pharmacy_notes_generation.schema.nodes import (
    SchemaType,
    SchemaNode,
    StringNode,
    ArrayNode,
    ObjectNode,
)
from pharmacy_notes_generation.schema.study_notes import (
    STUDY_NOTES_SCHEMA,
    STUDY_NOTES_RESPONSE_SCHEMA,
)

__all__ = [
    "SchemaType",
    "SchemaNode",
    "StringNode",
    "ArrayNode",
    "ObjectNode",
    "STUDY_NOTES_SCHEMA",
    "STUDY_NOTES_RESPONSE_SCHEMA",
]
