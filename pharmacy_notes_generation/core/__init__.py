"""
Core Layer - Domain Models, Configuration, and Exceptions

Submodules:
    models.py     → UserPreferences, StudyNotes, ImagePayload, ChatTurn
    config.py     → ServiceConfiguration and CredentialProvider
    constants.py  → Model defaults, env var names, fallback messages
    exceptions.py → Domain-specific exceptions

Dependency Rule:
    This layer depends on NOTHING else in the package.

Author: Shubham Singh
Date: December 2025
"""

from pharmacy_notes_generation.core.models import (
    UserPreferences,
    ImagePayload,
    StudyNotes,
    ClassificationItem,
    ExamPoint,
    ChatTurn,
)
from pharmacy_notes_generation.core.config import (
    ServiceConfiguration,
    CredentialProvider,
)
from pharmacy_notes_generation.core.exceptions import (
    PharmacyNotesError,
    ConfigurationError,
    GenerationError,
    EmptyResponseError,
    ResponseParseError,
    ServiceError,
)

__all__ = [
    # Models
    "UserPreferences",
    "ImagePayload",
    "StudyNotes",
    "ClassificationItem",
    "ExamPoint",
    "ChatTurn",
    # Configuration
    "ServiceConfiguration",
    "CredentialProvider",
    # Exceptions
    "PharmacyNotesError",
    "ConfigurationError",
    "GenerationError",
    "EmptyResponseError",
    "ResponseParseError",
    "ServiceError",
]
