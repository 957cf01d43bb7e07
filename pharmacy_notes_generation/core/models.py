"""
Domain Models for Pharmacy Study Notes Generation

Model Hierarchy:
    UserPreferences     → What the student asked for (input, caller-owned)
    ImagePayload        → Base64 image + MIME type for lab analysis
    StudyNotes          → Parsed structured reply from the model
    ├── ClassificationItem
    └── ExamPoint
    ChatTurn            → One message in a chat session's history

Input models are frozen dataclasses. StudyNotes is a frozen Pydantic model
so that required fields are enforced when the model's JSON is parsed.

Author: Shubham Singh
Date: December 2025
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# STAGE 1: USER PREFERENCES
# =============================================================================


@dataclass(frozen=True)
class UserPreferences:
    """
    Student preferences for a study-notes request.

    What it does:
        Carries every field that is interpolated into the notes prompt.
        Nothing is validated locally; values are sent as-is.

    Attributes:
        subject: B.Pharm subject (e.g., "Pharmaceutics I")
        semester: Semester label (e.g., "Semester 1")
        topic: Topic to cover (e.g., "Powders and Granules")
        length: Desired level of detail (e.g., "Detailed (10 Marks)")
        university: Target university, None for any PCI-affiliated one
        include_diagrams: Ask for a text description of a labeled diagram
        include_mnemonics: Ask for mnemonics on exam points
        include_clinical_correlation: Ask for a clinical/practical section

    Example:
        >>> prefs = UserPreferences(
        ...     subject="Pharmaceutical Analysis",
        ...     semester="Semester 1",
        ...     topic="Errors in analysis",
        ...     length="Standard (5 Marks)",
        ... )
    """

    subject: str
    semester: str
    topic: str
    length: str
    university: Optional[str] = None
    include_diagrams: bool = False
    include_mnemonics: bool = False
    include_clinical_correlation: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UserPreferences":
        """Create from a dictionary using either camelCase (UI) or snake_case keys."""
        return cls(
            subject=data.get("subject", ""),
            semester=data.get("semester", ""),
            topic=data.get("topic", ""),
            length=data.get("length", ""),
            university=data.get("university") or None,
            include_diagrams=bool(data.get("includeDiagrams", data.get("include_diagrams", False))),
            include_mnemonics=bool(
                data.get("includeMnemonics", data.get("include_mnemonics", False))
            ),
            include_clinical_correlation=bool(
                data.get(
                    "includeClinicalCorrelation", data.get("include_clinical_correlation", False)
                )
            ),
        )


# =============================================================================
# STAGE 2: IMAGE PAYLOAD
# =============================================================================


@dataclass(frozen=True)
class ImagePayload:
    """
    Image sent for lab analysis.

    The caller guarantees `data` is already base64-encoded and that
    `mime_type` matches the bytes.
    """

    data: str
    mime_type: str


# =============================================================================
# STAGE 3: STUDY NOTES
# =============================================================================
# Field aliases are the camelCase keys of the declared response schema.


class ClassificationItem(BaseModel):
    """One row of a classification table."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: str = Field(..., description="Class or category name")
    explanation: str = Field(..., description="What belongs to this class and why")


class ExamPoint(BaseModel):
    """A point worth memorizing, optionally with a mnemonic."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    point: str = Field(..., description="The exam-relevant point")
    mnemonic: Optional[str] = Field(default=None, description="Memory aid for the point")


class StudyNotes(BaseModel):
    """
    Exam-oriented study notes returned by the model.

    What it does:
        Holds the parsed structured reply. Parsing fails if any required
        field is absent, so a StudyNotes instance always has all of them.

    Required:
        introduction, detailed_explanation, examples, exam_points,
        short_answer_questions, long_answer_questions, pyqs, viva_questions

    Optional:
        definition, classification, diagram_description, clinical_correlation

    Example:
        >>> notes = StudyNotes.from_json(response_text)
        >>> notes.exam_points[0].mnemonic
        'SPECS'
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    # -------------------------------------------------------------------------
    # 3.1 Required Fields
    # -------------------------------------------------------------------------
    introduction: str
    detailed_explanation: List[str] = Field(..., alias="detailedExplanation")
    examples: List[str]
    exam_points: List[ExamPoint] = Field(..., alias="examPoints")
    short_answer_questions: List[str] = Field(..., alias="shortAnswerQuestions")
    long_answer_questions: List[str] = Field(..., alias="longAnswerQuestions")
    pyqs: List[str]
    viva_questions: List[str] = Field(..., alias="vivaQuestions")

    # -------------------------------------------------------------------------
    # 3.2 Optional Fields
    # -------------------------------------------------------------------------
    definition: Optional[str] = None
    classification: Optional[List[ClassificationItem]] = None
    diagram_description: Optional[str] = Field(default=None, alias="diagramDescription")
    clinical_correlation: Optional[str] = Field(default=None, alias="clinicalCorrelation")

    # -------------------------------------------------------------------------
    # 3.3 Serialization
    # -------------------------------------------------------------------------

    @classmethod
    def from_json(cls, text: str) -> "StudyNotes":
        """
        Parse the model's JSON reply.

        Raises:
            pydantic.ValidationError: If the text is not JSON or misses a required field
        """
        return cls.model_validate_json(text)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the camelCase wire shape, omitting absent optional fields."""
        return self.model_dump(by_alias=True, exclude_none=True)

    @property
    def question_count(self) -> int:
        """Total practice questions across all question banks."""
        return (
            len(self.short_answer_questions)
            + len(self.long_answer_questions)
            + len(self.pyqs)
            + len(self.viva_questions)
        )


# =============================================================================
# STAGE 4: CHAT HISTORY
# =============================================================================


@dataclass(frozen=True)
class ChatTurn:
    """A single message in a chat session ("user" or "model")."""

    role: str
    text: str
