"""
Generation Layer - Notes, Image Analysis and Chat

Submodules:
    prompt_builder.py  → Persona instructions and request templates
    notes_generator.py → Structured study notes (JSON mode + schema)
    image_analyzer.py  → Multimodal lab image analysis
    chat_factory.py    → PharmAssistant chat sessions

Dependency Rule:
    This layer depends on: core, schema, clients
    This layer is used by: service (facade)
"""

from pharmacy_notes_generation.generation.prompt_builder import PromptBuilder
from pharmacy_notes_generation.generation.notes_generator import StudyNotesGenerator
from pharmacy_notes_generation.generation.image_analyzer import PharmacyImageAnalyzer
from pharmacy_notes_generation.generation.chat_factory import PharmacyChatSessionFactory

__all__ = [
    "PromptBuilder",
    "StudyNotesGenerator",
    "PharmacyImageAnalyzer",
    "PharmacyChatSessionFactory",
]
