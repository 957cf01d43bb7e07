"""
Study Notes Response Schema

The response schema sent with every notes request. Built once at import
time; `STUDY_NOTES_RESPONSE_SCHEMA` is the rendered mapping handed to the SDK.
"""

from pharmacy_notes_generation.schema.nodes import (
    ArrayNode,
    ObjectNode,
    StringNode,
    string_list,
)


CLASSIFICATION_ITEM_SCHEMA = ObjectNode(
    properties={
        "type": StringNode(),
        "explanation": StringNode(),
    },
    required=("type", "explanation"),
)

EXAM_POINT_SCHEMA = ObjectNode(
    properties={
        "point": StringNode(),
        "mnemonic": StringNode(),
    },
    required=("point",),
)

STUDY_NOTES_SCHEMA = ObjectNode(
    properties={
        "introduction": StringNode(),
        "definition": StringNode(),
        "classification": ArrayNode(items=CLASSIFICATION_ITEM_SCHEMA),
        "detailedExplanation": string_list(),
        "examples": string_list(),
        "diagramDescription": StringNode(),
        "examPoints": ArrayNode(items=EXAM_POINT_SCHEMA),
        "shortAnswerQuestions": string_list(),
        "longAnswerQuestions": string_list(),
        "pyqs": string_list(),
        "vivaQuestions": string_list(),
        "clinicalCorrelation": StringNode(),
    },
    required=(
        "introduction",
        "detailedExplanation",
        "examples",
        "examPoints",
        "shortAnswerQuestions",
        "longAnswerQuestions",
        "pyqs",
        "vivaQuestions",
    ),
)

STUDY_NOTES_RESPONSE_SCHEMA = STUDY_NOTES_SCHEMA.to_dict()
