"""
Domain Exceptions for Pharmacy Study Notes Generation

Every failure that leaves this package is a PharmacyNotesError, so the UI
layer can catch one type and present a message. Subclasses keep the
diagnostic detail (raw model output, wrapped SDK error) for logs and tests.

Exception Hierarchy:
    PharmacyNotesError (base)
    ├── ConfigurationError      → Invalid configuration
    └── GenerationError         → A request to the model failed
        ├── EmptyResponseError  → Service returned no text
        ├── ResponseParseError  → Text was not valid study-notes JSON
        └── ServiceError        → Transport / API failure

Usage:
    from pharmacy_notes_generation.core.exceptions import PharmacyNotesError

    try:
        notes = service.generate_study_notes(preferences)
    except PharmacyNotesError as e:
        show_toast(e.message)

Author: Shubham Singh
Date: December 2025
"""

from typing import Optional

from pharmacy_notes_generation.core.constants import (
    EMPTY_NOTES_MESSAGE,
    NOTES_PARSE_MESSAGE,
    PROVIDER_NAME,
)


# =============================================================================
# STAGE 1: BASE EXCEPTION
# =============================================================================


class PharmacyNotesError(Exception):
    """
    Base exception for all pharmacy notes generation errors.

    Attributes:
        message: Human-readable error description (safe to show to students)
        context: Dictionary of additional context for debugging
    """

    def __init__(self, message: str, context: Optional[dict] = None):
        self.message = message
        self.context = context or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format message with context for display."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} [{context_str}]"
        return self.message


# =============================================================================
# STAGE 2: CONFIGURATION ERRORS
# =============================================================================


class ConfigurationError(PharmacyNotesError):
    """
    Error in service configuration.

    When raised:
        - Empty model name
        - google-generativeai package not installed

    Note:
        A missing API key is NOT a configuration error. It is logged as a
        warning and the request is attempted with an empty key.
    """

    pass


# =============================================================================
# STAGE 3: GENERATION ERRORS
# =============================================================================


class GenerationError(PharmacyNotesError):
    """Base exception for failures while talking to the model."""

    pass


class EmptyResponseError(GenerationError):
    """The service answered but the reply carried no text."""

    def __init__(self, message: str = EMPTY_NOTES_MESSAGE):
        super().__init__(message)


class ResponseParseError(GenerationError):
    """
    Reply text was present but is not a valid StudyNotes payload.

    Covers both malformed JSON and JSON that lacks a required field.

    Attributes:
        raw_text: The unparsed reply, kept for logging
        original_error: The underlying json / pydantic error
    """

    def __init__(
        self,
        raw_text: str,
        original_error: Optional[Exception] = None,
        message: str = NOTES_PARSE_MESSAGE,
    ):
        self.raw_text = raw_text
        self.original_error = original_error
        super().__init__(message, context={"response_length": len(raw_text)})


class ServiceError(GenerationError):
    """
    Error from the Gemini API or its transport.

    What it does:
        Wraps the SDK exception. The message may be the service-provided
        text or a fixed generic string, but the original exception is
        always kept on `original_error` (and as `__cause__` when re-raised).

    Attributes:
        provider: The LLM provider (gemini)
        service_message: Message reported by the service, if any
        original_error: The wrapped original exception
    """

    def __init__(
        self,
        message: str,
        provider: str = PROVIDER_NAME,
        original_error: Optional[Exception] = None,
        service_message: Optional[str] = None,
    ):
        self.provider = provider
        self.original_error = original_error
        self.service_message = service_message
        super().__init__(message, context={"provider": provider})
