import json

import pytest
from loguru import logger

from pharmacy_notes_generation.core.config import CredentialProvider
from pharmacy_notes_generation.core.models import UserPreferences


# --- Fixtures ---


@pytest.fixture
def log_records():
    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)


@pytest.fixture
def credentials():
    return CredentialProvider(api_key="test-key")


@pytest.fixture
def preferences():
    return UserPreferences(
        subject="Pharmaceutics I",
        semester="Semester 1",
        topic="Powders and Granules",
        length="Detailed (10 Marks)",
        university=None,
        include_diagrams=True,
        include_mnemonics=True,
        include_clinical_correlation=False,
    )


@pytest.fixture
def notes_payload():
    return {
        "introduction": "Powders are intimate mixtures of dry, finely divided drugs.",
        "definition": "A powder is a solid dosage form of finely divided particles.",
        "classification": [
            {"type": "Bulk powders", "explanation": "Dispensed in multi-dose containers."},
            {"type": "Divided powders", "explanation": "Dispensed as individual doses."},
        ],
        "detailedExplanation": ["Particle size affects dissolution.", "Flow depends on shape."],
        "examples": ["Dusting powder", "Effervescent granules"],
        "diagramDescription": "Draw a V-blender with labeled shell and discharge valve.",
        "examPoints": [
            {"point": "Advantages of powders", "mnemonic": "SPECS"},
            {"point": "Angle of repose measures flow"},
        ],
        "shortAnswerQuestions": ["Define granules."],
        "longAnswerQuestions": ["Explain methods of granulation."],
        "pyqs": ["Write a note on effervescent granules (2019)."],
        "vivaQuestions": ["What is angle of repose?"],
        "clinicalCorrelation": "Oral rehydration powders in diarrhoea.",
    }


@pytest.fixture
def notes_json(notes_payload):
    return json.dumps(notes_payload)
