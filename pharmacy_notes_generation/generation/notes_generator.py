"""
Notes Generator - Structured Study Notes with Gemini

Sends one structured-output request per call and parses the JSON reply
into a StudyNotes model.

Why Separate from Prompt Builder:
    1. This class owns the LLM interaction and error mapping
    2. The Gemini client is created per request through an injected factory

Pipeline Position:
    UserPreferences → PromptBuilder → [StudyNotesGenerator] → StudyNotes
                                       ^^^^^^^^^^^^^^^^^^^
                                       You are here

Author: Shubham Singh
Date: December 2025
"""

from typing import Optional

from loguru import logger
from pydantic import ValidationError

from pharmacy_notes_generation.clients.gemini_client import (
    GeminiClient,
    ModelFactory,
    create_gemini_model,
)
from pharmacy_notes_generation.core.config import CredentialProvider
from pharmacy_notes_generation.core.constants import (
    DEFAULT_GEMINI_MODEL,
    NOTES_FALLBACK_MESSAGE,
)
from pharmacy_notes_generation.core.exceptions import (
    EmptyResponseError,
    ResponseParseError,
    ServiceError,
)
from pharmacy_notes_generation.core.models import StudyNotes, UserPreferences
from pharmacy_notes_generation.generation.prompt_builder import (
    NOTES_SYSTEM_INSTRUCTION,
    PromptBuilder,
)
from pharmacy_notes_generation.schema.study_notes import STUDY_NOTES_RESPONSE_SCHEMA


# =============================================================================
# STAGE 1: NOTES GENERATOR CLASS
# =============================================================================


class StudyNotesGenerator:
    """
    Generates exam-oriented study notes from student preferences.

    What it does:
        Builds the prompt, issues one JSON-mode request with the declared
        response schema, and parses the reply into StudyNotes.

    How it works:
        STAGE 2.1: Build prompt using PromptBuilder
        STAGE 2.2: Call Gemini with response schema
        STAGE 2.3: Reject empty replies
        STAGE 2.4: Parse JSON into StudyNotes

    Failure modes (all logged before raising):
        EmptyResponseError  → service returned no text
        ResponseParseError  → text is not valid StudyNotes JSON
        ServiceError        → API / transport failure; carries the service
                              message, or a generic one if there is none

    Example:
        >>> generator = StudyNotesGenerator(CredentialProvider())
        >>> notes = generator.generate(preferences)
        >>> print(notes.introduction)
    """

    def __init__(
        self,
        credential_provider: CredentialProvider,
        model_name: str = DEFAULT_GEMINI_MODEL,
        model_factory: ModelFactory = create_gemini_model,
        prompt_builder: Optional[PromptBuilder] = None,
    ):
        self._credentials = credential_provider
        self._model_name = model_name
        self._model_factory = model_factory
        self._prompt_builder = prompt_builder or PromptBuilder()

    # =========================================================================
    # STAGE 2: MAIN GENERATION API
    # =========================================================================

    def generate(self, preferences: UserPreferences) -> StudyNotes:
        """
        Generate study notes for `preferences`.

        Raises:
            EmptyResponseError: If the service returned no text
            ResponseParseError: If the text is not valid StudyNotes JSON
            ServiceError: If the API call fails
        """
        # STAGE 2.1: BUILD PROMPT
        logger.info(
            f"Generating study notes | "
            f"Subject: {preferences.subject} | "
            f"Topic: {preferences.topic} | "
            f"Detail: {preferences.length}"
        )
        prompt = self._prompt_builder.build_notes_prompt(preferences)

        # STAGE 2.2: CALL GEMINI
        raw_text = self._request_notes(prompt)

        # STAGE 2.3: REJECT EMPTY REPLY
        if not raw_text:
            error = EmptyResponseError()
            logger.error(f"Gemini API Error: {error.message}")
            raise error

        # STAGE 2.4: PARSE
        notes = self._parse_notes(raw_text)
        logger.info(
            f"Generated study notes | "
            f"Topic: {preferences.topic} | "
            f"Exam points: {len(notes.exam_points)} | "
            f"Questions: {notes.question_count}"
        )
        return notes

    # =========================================================================
    # STAGE 3: LLM INTERACTION
    # =========================================================================

    def _request_notes(self, prompt: str) -> str:
        try:
            client = GeminiClient(
                api_key=self._credentials.get_api_key(),
                system_instruction=NOTES_SYSTEM_INSTRUCTION,
                model_name=self._model_name,
                model_factory=self._model_factory,
            )
            logger.debug(f"Notes prompt length: {len(prompt)} chars")
            return client.generate_json(prompt, STUDY_NOTES_RESPONSE_SCHEMA)
        except ServiceError as e:
            logger.error(f"Gemini API Error: {e.original_error!r}")
            raise ServiceError(
                e.service_message or NOTES_FALLBACK_MESSAGE,
                provider=e.provider,
                original_error=e.original_error,
                service_message=e.service_message,
            ) from e.original_error

    # =========================================================================
    # STAGE 4: PARSING
    # =========================================================================

    def _parse_notes(self, raw_text: str) -> StudyNotes:
        try:
            return StudyNotes.from_json(raw_text)
        except ValidationError as e:
            logger.error(
                f"Gemini API Error: could not parse study notes ({e.error_count()} errors) | "
                f"Response: {raw_text}"
            )
            raise ResponseParseError(raw_text=raw_text, original_error=e) from e
