"""
Prompt Builder - Study Notes, Image Analysis and Chat Prompts

This module holds the fixed persona instructions and the per-request
templates sent to Gemini. Prompts can be tested without any LLM call.

Pipeline Position:
    UserPreferences → [PromptBuilder] → StudyNotesGenerator → StudyNotes
                       ^^^^^^^^^^^^^
                       You are here

Author: Shubham Singh
Date: December 2025
"""

from pharmacy_notes_generation.core.constants import DEFAULT_UNIVERSITY
from pharmacy_notes_generation.core.models import UserPreferences


# =============================================================================
# STAGE 1: SYSTEM INSTRUCTIONS
# =============================================================================

NOTES_SYSTEM_INSTRUCTION = """You are an expert B.Pharm professor and academic mentor specializing in Indian PCI (Pharmacy Council of India) syllabus.
Your task is to generate highly structured, exam-oriented study notes for first-year pharmacy students.

CRITICAL RULES:
1. Language: Simple, academic, and professional.
2. Context: Suitable for 2, 5, and 10 marks university questions.
3. Content: Must be technically accurate and include pharmacy-specific examples.
4. Mnemonics: If requested, provide catchy and easy-to-remember mnemonics for classifications or lists.
5. Diagrams: Provide clear, text-based descriptions of labeled diagrams that a student can draw.

You must return the response as a valid JSON object matching the provided schema exactly.
"""

IMAGE_ANALYSIS_SYSTEM_INSTRUCTION = (
    "You are an expert Pharmacy Professor. Your analysis is used by B.Pharm students "
    "for exam preparation. Be technically rigorous and structured."
)

CHAT_SYSTEM_INSTRUCTION = (
    "You are 'PharmAssistant', a virtual mentor for B.Pharm students. Provide helpful, "
    "exam-focused answers. Always advise consulting a professional for health issues."
)


# =============================================================================
# STAGE 2: REQUEST TEMPLATES
# =============================================================================

NOTES_REQUEST_TEMPLATE = """Subject: {subject}
Semester: {semester}
Topic: {topic}
Level of Detail: {length}
Target University: {university}

Specific Requirements:
- Include Diagram Description: {include_diagrams}
- Include Mnemonics: {include_mnemonics}
- Include Clinical/Practical Correlation: {include_clinical_correlation}
"""

IMAGE_ANALYSIS_PROMPT = """Analyze this pharmacy academic image. IDENTIFY correctly and PROVIDE academic context.

Structure your response as follows:
# Identification
[Clear name of what is shown]

# Academic Context
[Which B.Pharm subject/semester does this belong to?]

# Exam Focus
[Important points for a 5-mark answer]

# Practical & Safety
[Laboratory precautions or clinical relevance]

# Correction Note (if applicable)
[Point out any spelling/factual errors in the image if it's a student's note]

Use markdown format with # for headings (they will be cleaned by UI) and * bullet points. Be professional and highly detailed.
"""

IMAGE_ANALYSIS_SECTIONS = (
    "Identification",
    "Academic Context",
    "Exam Focus",
    "Practical & Safety",
    "Correction Note",
)


# =============================================================================
# STAGE 3: PROMPT BUILDER CLASS
# =============================================================================


class PromptBuilder:
    """
    Builds the per-request prompts.

    Example:
        >>> builder = PromptBuilder()
        >>> prompt = builder.build_notes_prompt(preferences)
        >>> "Target University: Any PCI-affiliated University" in prompt
        True
    """

    def __init__(self, default_university: str = DEFAULT_UNIVERSITY):
        self._default_university = default_university

    def build_notes_prompt(self, preferences: UserPreferences) -> str:
        """Embed every preference field into the notes request."""
        return NOTES_REQUEST_TEMPLATE.format(
            subject=preferences.subject,
            semester=preferences.semester,
            topic=preferences.topic,
            length=preferences.length,
            university=preferences.university or self._default_university,
            include_diagrams=_flag(preferences.include_diagrams),
            include_mnemonics=_flag(preferences.include_mnemonics),
            include_clinical_correlation=_flag(preferences.include_clinical_correlation),
        )

    def build_image_analysis_prompt(self) -> str:
        return IMAGE_ANALYSIS_PROMPT


def _flag(value: bool) -> str:
    return "true" if value else "false"
