"""
Pharmacy Study Notes Generation

Gemini integration for a B.Pharm study app: structured exam notes,
lab image analysis and a PharmAssistant chat.

Architecture Overview:
    pharmacy_notes_generation/
    ├── core/        → Models, configuration, exceptions (Layer 0 - Pure)
    ├── schema/      → Structured-output schema tree  (Layer 1)
    ├── clients/     → Gemini client and chat session (Layer 2 - Infrastructure)
    ├── generation/  → Prompts and the three operations (Layer 3)
    └── service.py   → PharmacyStudyService facade   (Layer 4 - Public API)

Quick Start:
    from pharmacy_notes_generation import PharmacyStudyService, UserPreferences

    service = PharmacyStudyService.from_environment()
    notes = service.generate_study_notes(preferences)

Author: Shubham Singh
Date: December 2025
"""

__version__ = "1.0.0"
__author__ = "Shubham Singh"

# =============================================================================
# PUBLIC API EXPORTS
# =============================================================================

# Main Entry Point
from pharmacy_notes_generation.service import PharmacyStudyService

# Core Models
from pharmacy_notes_generation.core.models import (
    UserPreferences,
    ImagePayload,
    StudyNotes,
    ClassificationItem,
    ExamPoint,
    ChatTurn,
)

# Chat
from pharmacy_notes_generation.clients.chat_session import ChatSession

# Configuration
from pharmacy_notes_generation.core.config import ServiceConfiguration, CredentialProvider

# Exceptions
from pharmacy_notes_generation.core.exceptions import (
    PharmacyNotesError,
    EmptyResponseError,
    ResponseParseError,
    ServiceError,
)

__all__ = [
    # Main Entry Point (use this!)
    "PharmacyStudyService",
    # Core Models
    "UserPreferences",
    "ImagePayload",
    "StudyNotes",
    "ClassificationItem",
    "ExamPoint",
    "ChatTurn",
    "ChatSession",
    # Configuration
    "ServiceConfiguration",
    "CredentialProvider",
    # Exceptions
    "PharmacyNotesError",
    "EmptyResponseError",
    "ResponseParseError",
    "ServiceError",
]
