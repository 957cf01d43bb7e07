import pytest
from pydantic import ValidationError

from pharmacy_notes_generation.core.models import StudyNotes, UserPreferences


def test_round_trip_preserves_every_field(notes_payload, notes_json):
    notes = StudyNotes.from_json(notes_json)

    assert notes.to_dict() == notes_payload
    assert notes.exam_points[0].mnemonic == "SPECS"
    assert notes.exam_points[1].mnemonic is None
    assert notes.classification[1].type == "Divided powders"


def test_optional_fields_may_be_absent(notes_payload):
    for name in ("definition", "classification", "diagramDescription", "clinicalCorrelation"):
        notes_payload.pop(name)

    notes = StudyNotes.model_validate(notes_payload)

    assert notes.definition is None
    assert notes.classification is None
    assert notes.to_dict() == notes_payload


@pytest.mark.parametrize("field", ["introduction", "examPoints", "pyqs", "vivaQuestions"])
def test_missing_required_field_fails(notes_payload, field):
    notes_payload.pop(field)
    with pytest.raises(ValidationError):
        StudyNotes.model_validate(notes_payload)


def test_exam_point_requires_point(notes_payload):
    notes_payload["examPoints"] = [{"mnemonic": "ABC"}]
    with pytest.raises(ValidationError):
        StudyNotes.model_validate(notes_payload)


def test_study_notes_are_immutable(notes_json):
    notes = StudyNotes.from_json(notes_json)
    with pytest.raises(ValidationError):
        notes.introduction = "changed"


def test_question_count(notes_json):
    assert StudyNotes.from_json(notes_json).question_count == 4


def test_preferences_from_ui_dict():
    prefs = UserPreferences.from_dict(
        {
            "subject": "Pharmacognosy",
            "semester": "Semester 2",
            "topic": "Alkaloids",
            "length": "Brief (2 Marks)",
            "university": "",
            "includeDiagrams": True,
            "includeMnemonics": False,
            "includeClinicalCorrelation": True,
        }
    )
    assert prefs.university is None
    assert prefs.include_diagrams is True
    assert prefs.include_mnemonics is False
    assert prefs.include_clinical_correlation is True
